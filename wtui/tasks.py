"""The tasks panel: every task, with keys for task-wide operations."""

from __future__ import annotations

import copy

from .messages import (
    CodeWorkspaceTaskMsg,
    FocusServicesMsg,
    KeyMsg,
    OpenCloneDialogMsg,
    OpenConfigModalMsg,
    OpenInitDialogMsg,
    OpenRemoveDialogMsg,
    OpenSyncStrategyDialogMsg,
    PushTaskMsg,
    RiderTaskMsg,
    Task,
    TaskSelectionChangedMsg,
)
from .theme import COLOR_DIM, COLOR_NORMAL, PANEL_COLOR_PRIMARY, Style, border_box
from .widgets import FilterState, ListModel, inner_dimensions, panel_border_color

_TITLE_STYLE = Style(bold=True, foreground=PANEL_COLOR_PRIMARY)
_DIM_STYLE = Style(foreground=COLOR_DIM)


def render_task(task: Task, selected: bool) -> str:
    """Render one task as a single line with its service count."""
    label = task.id
    count = len(task.services)
    if count > 0:
        word = "service" if count == 1 else "services"
        label = f"{task.id:<16} ({count} {word})"

    if task.stale:
        return _DIM_STYLE.render("  [?] " + label)
    if selected:
        return Style(bold=True, foreground=PANEL_COLOR_PRIMARY).render("  " + label)
    return Style(foreground=COLOR_NORMAL).render("  " + label)


def _render_list(listing: ListModel) -> str:
    current = listing.index()
    rows = []
    if listing.filter_state() is not FilterState.UNFILTERED:
        rows.append("Filter: " + listing.filter_text)
    rows.extend(render_task(task, i == current) for i, task in listing.visible_items())
    pages = listing.total_pages()
    if pages > 1:
        active = listing.page()
        rows.append(
            "".join(
                Style(foreground=PANEL_COLOR_PRIMARY).render("•")
                if page == active
                else _DIM_STYLE.render("•")
                for page in range(pages)
            )
        )
    return "\n".join(rows)


class TasksPanel:
    """Lists tasks and turns key presses into requests."""

    def __init__(self, width: int, height: int) -> None:
        inner = inner_dimensions(width, height)
        self.list: ListModel[Task] = ListModel(1, 0, inner.w, inner.h, lambda t: t.id)
        self.focused = False
        self.width = width
        self.height = height
        self.tasks: list[Task] = []

    def set_tasks(self, tasks) -> None:
        self.tasks = list(tasks or ())
        self.list.set_items(self.tasks)
        if self.tasks and self.list.index() >= len(self.tasks):
            self.list.select(0)

    def selected_task(self) -> Task | None:
        item = self.list.selected_item()
        if item is None:
            return None
        return next((t for t in self.tasks if t.id == item.id), None)

    def _selection_changed(self) -> TaskSelectionChangedMsg | None:
        task = self.selected_task()
        return None if task is None else TaskSelectionChangedMsg(task_id=task.id)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        inner = inner_dimensions(width, height)
        self.list.set_size(inner.w, inner.h)

    def set_focused(self, focused: bool) -> None:
        self.focused = focused

    def filter_active(self) -> bool:
        return self.list.filter_state() is FilterState.FILTERING

    def update(self, msg):
        """Handle a message; return the message to emit, if any."""
        if not isinstance(msg, KeyMsg):
            return None
        key = msg.key
        if not self.focused:
            self.list.handle_key(key)
            return None

        if self.list.filter_state() is FilterState.FILTERING:
            if key == "esc":
                self.list.reset_filter()
            else:
                self.list.handle_key(key)
            return None

        if key in ("j", "down"):
            self.list.cursor_down()
            return self._selection_changed()
        if key in ("k", "up"):
            self.list.cursor_up()
            return self._selection_changed()
        if key == "g":
            if self.tasks:
                self.list.select(0)
            return self._selection_changed()
        if key == "G":
            if self.tasks:
                self.list.select(len(self.tasks) - 1)
            return self._selection_changed()
        if key == "i":
            return OpenInitDialogMsg()
        if key == ",":
            return OpenConfigModalMsg()
        if key == "h":
            self.list.prev_page()
            return None
        if key == "l":
            self.list.next_page()
            return None
        if key == "f":
            self.list.start_filter()
            return None
        if key == "esc":
            if self.list.filter_state() is FilterState.FILTER_APPLIED:
                self.list.reset_filter()
            return None

        task_actions = {
            "enter": lambda t: FocusServicesMsg(task_id=t.id),
            "c": lambda t: OpenCloneDialogMsg(task_id=t.id),
            "d": lambda t: OpenRemoveDialogMsg(task_id=t.id),
            "delete": lambda t: OpenRemoveDialogMsg(task_id=t.id),
            "S": lambda t: OpenSyncStrategyDialogMsg(task_id=t.id),
            "P": lambda t: PushTaskMsg(task_id=t.id),
            "R": lambda t: RiderTaskMsg(task_id=t.id, task_dir=t.dir),
            "C": lambda t: CodeWorkspaceTaskMsg(task_id=t.id, task_dir=t.dir),
        }
        action = task_actions.get(key)
        if action is not None:
            task = self.selected_task()
            return None if task is None else action(task)

        self.list.handle_key(key)
        return None

    def view(self) -> str:
        total = len(self.list.items())
        current = self.list.index() + 1 if total else 0
        title = f"[1] Tasks  [{current}/{total}]"

        inner = inner_dimensions(self.width, self.height)
        listing = copy.copy(self.list)
        listing.set_size(inner.w, max(0, inner.h - 1))

        content = _TITLE_STYLE.render(title) + "\n" + _render_list(listing)
        return border_box(content, inner.w, inner.h, panel_border_color(self.focused))