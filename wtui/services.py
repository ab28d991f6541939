"""The services panel: the worktrees of the selected task."""

from __future__ import annotations

import copy
from typing import Callable

from .messages import (
    FocusTasksMsg,
    KeyMsg,
    OpenAddServiceMsg,
    OpenLazygitServiceMsg,
    OpenRemoveServiceDialogMsg,
    OpenStashDialogMsg,
    OpenSyncServiceStrategyDialogMsg,
    PushServiceMsg,
    Service,
)
from .theme import (
    COLOR_BOLD,
    COLOR_DIM,
    COLOR_DIRTY,
    PANEL_COLOR_PRIMARY,
    Style,
    border_box,
)
from .widgets import (
    FilterState,
    ListModel,
    inner_dimensions,
    panel_border_color,
    truncate_path,
)

_COLOR_AHEAD = "#34D399"
_COLOR_BEHIND = "#F87171"

_DIM_STYLE = Style(foreground=COLOR_DIM)
_TITLE_STYLE = Style(bold=True, foreground=PANEL_COLOR_PRIMARY)

# Keys that act on the selected service; lazygit takes over all but "d".
_SERVICE_ACTIONS: dict[str, Callable[[str, Service], object]] = {
    "p": lambda tid, svc: PushServiceMsg(task_id=tid, service_name=svc.name),
    "s": lambda tid, svc: OpenSyncServiceStrategyDialogMsg(task_id=tid, service_name=svc.name),
    "ctrl+s": lambda tid, svc: OpenStashDialogMsg(task_id=tid, service_name=svc.name, pop=False),
    "ctrl+u": lambda tid, svc: OpenStashDialogMsg(task_id=tid, service_name=svc.name, pop=True),
    "d": lambda tid, svc: OpenRemoveServiceDialogMsg(
        task_id=tid, service_name=svc.name, branch_name=svc.branch
    ),
}
_REPLACED_BY_LAZYGIT = frozenset(("p", "s", "ctrl+s", "ctrl+u"))

_LIST_ACTIONS: dict[str, Callable[[ListModel], None]] = {
    "j": ListModel.cursor_down,
    "down": ListModel.cursor_down,
    "k": ListModel.cursor_up,
    "up": ListModel.cursor_up,
    "h": ListModel.prev_page,
    "l": ListModel.next_page,
    "f": ListModel.start_filter,
}


def render_service(service: Service, selected: bool) -> str:
    """Render one service as three lines: name, branch and path."""
    path_line = "    " + _DIM_STYLE.render("path:   " + truncate_path(service.worktree_path))

    if service.stale:
        stale_tag = Style(bold=True, foreground=COLOR_DIRTY).render("[STALE]")
        line1 = f"  ✗ {_DIM_STYLE.render(service.name)} {stale_tag}"
        line2 = "    " + _DIM_STYLE.render("worktree path no longer exists")
        return "\n".join((line1, line2, path_line))

    icon, color = ("⚠", COLOR_DIRTY) if service.is_dirty else ("✓", COLOR_BOLD)
    if selected:
        color = PANEL_COLOR_PRIMARY
    line1 = f"  {icon} {Style(bold=True, foreground=color).render(service.name)}"

    branch_info = service.branch
    if service.base_branch:
        branch_info = f"{service.branch} ← {service.base_branch}"

    suffix = ""
    if service.ahead > 0 or service.behind > 0:
        ahead = Style(foreground=_COLOR_AHEAD).render(f"↑{service.ahead}")
        behind = Style(foreground=_COLOR_BEHIND).render(f"↓{service.behind}")
        suffix = f"  {ahead} {behind}"

    line2 = "    " + _DIM_STYLE.render("branch: " + branch_info) + suffix
    return "\n".join((line1, line2, path_line))


def _render_list(listing: ListModel, render: Callable[[object, bool], str]) -> str:
    current = listing.index()
    gap = "\n" * (listing.spacing + 1)
    rows = []
    if listing.filter_state() is not FilterState.UNFILTERED:
        rows.append("Filter: " + listing.filter_text)
    rows.append(gap.join(render(item, i == current) for i, item in listing.visible_items()))
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


class ServicesPanel:
    """Lists the services of one task and turns key presses into requests."""

    def __init__(self, width: int, height: int) -> None:
        self.list: ListModel[Service] = ListModel(3, 1, 0, 0, lambda s: s.name)
        self.task_id = ""
        self.focused = False
        self.lazygit_available = False
        self.services: list[Service] = []
        self.set_size(width, height)

    def set_services(self, task_id: str, services) -> None:
        self.task_id = task_id
        self.services = list(services or ())
        self.list.set_items(self.services)
        self.list.select(0)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        inner = inner_dimensions(width, height)
        self.list.set_size(inner.w, inner.h)

    def set_focused(self, focused: bool) -> None:
        self.focused = focused

    def set_lazygit_available(self, available: bool) -> None:
        self.lazygit_available = available

    def selected_service(self) -> Service | None:
        item = self.list.selected_item()
        if item is None:
            return None
        return next((s for s in self.services if s.name == item.name), None)

    def filter_active(self) -> bool:
        return self.list.filter_state() is FilterState.FILTERING

    def update(self, msg):
        """Handle a message; return the message to emit, if any."""
        if not isinstance(msg, KeyMsg):
            return None
        key = msg.key
        if not self.focused or self.filter_active():
            if self.focused and key == "esc":
                self.list.reset_filter()
            else:
                self.list.handle_key(key)
            return None

        if key in _SERVICE_ACTIONS:
            if self.lazygit_available and key in _REPLACED_BY_LAZYGIT:
                return None
            svc = self.selected_service()
            return None if svc is None else _SERVICE_ACTIONS[key](self.task_id, svc)

        list_action = _LIST_ACTIONS.get(key)
        if list_action is not None:
            list_action(self.list)
            return None

        if key == "a":
            return OpenAddServiceMsg(
                task_id=self.task_id,
                existing_services=tuple(s.name for s in self.services),
            )
        if key == "g":
            return self._lazygit_request()
        if key == "esc":
            if self.list.filter_state() is FilterState.FILTER_APPLIED:
                self.list.reset_filter()
                return None
            return FocusTasksMsg()

        self.list.handle_key(key)
        return None

    def _lazygit_request(self):
        if not self.lazygit_available:
            return None
        svc = self.selected_service()
        if svc is None:
            return OpenLazygitServiceMsg(task_id=self.task_id)
        return OpenLazygitServiceMsg(
            task_id=self.task_id,
            service_name=svc.name,
            worktree_path=svc.worktree_path,
            stale=svc.stale,
        )

    def view(self) -> str:
        inner = inner_dimensions(self.width, self.height)
        total = len(self.list.items())
        if not self.task_id:
            title = "Services"
            body = _DIM_STYLE.render("Select a task to view services.")
        else:
            current = self.list.index() + 1 if total else 0
            title = f"[2] Services — {self.task_id}  [{current}/{total}]"
            if total == 0:
                body = _DIM_STYLE.render("No services in this task. Press [a] to add.")
            else:
                listing = copy.copy(self.list)
                listing.set_size(inner.w, max(0, inner.h - 1))
                body = _render_list(listing, render_service)

        content = _TITLE_STYLE.render(title) + "\n" + body
        return border_box(content, inner.w, inner.h, panel_border_color(self.focused))