"""The output panel: a scrolling log of operation messages."""

from __future__ import annotations

from typing import Callable

from .messages import FocusTasksMsg, KeyMsg
from .theme import COLOR_DIM, COLOR_NORMAL, PANEL_COLOR_PRIMARY, Style, border_box
from .widgets import Viewport, inner_dimensions, panel_border_color

_PROMPT_STYLE = Style(foreground=COLOR_DIM)
_LINE_STYLE = Style(foreground=COLOR_NORMAL)
_TITLE_STYLE = Style(bold=True, foreground=PANEL_COLOR_PRIMARY)


def _page(vp: Viewport) -> int:
    return max(vp.height, 1)


def _half_page(vp: Viewport) -> int:
    return max(_page(vp) // 2, 1)


_KEY_ACTIONS: dict[str, Callable[[Viewport], None]] = {
    key: action
    for keys, action in (
        (("j", "down"), lambda vp: vp.scroll_down(1)),
        (("k", "up"), lambda vp: vp.scroll_up(1)),
        (("g",), Viewport.goto_top),
        (("G",), Viewport.goto_bottom),
        (("pgdown", "space", " ", "f"), lambda vp: vp.scroll_down(_page(vp))),
        (("pgup", "b"), lambda vp: vp.scroll_up(_page(vp))),
        (("ctrl+d", "d"), lambda vp: vp.scroll_down(_half_page(vp))),
        (("ctrl+u", "u"), lambda vp: vp.scroll_up(_half_page(vp))),
    )
    for key in keys
}


class OutputPanel:
    """Shows appended lines in a bordered, scrollable viewport."""

    def __init__(self, width: int, height: int) -> None:
        self.lines: list[str] = []
        self.focused = False
        self.viewport = Viewport(0, 0)
        self.set_size(width, height)

    def append_line(self, line: str) -> None:
        """Add a line and scroll to show it."""
        self.lines.append(_PROMPT_STYLE.render("> ") + _LINE_STYLE.render(line))
        self._rebuild_content()
        self.viewport.goto_bottom()

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        inner = inner_dimensions(width, height)
        self.viewport.width = inner.w
        self.viewport.height = max(0, inner.h - 1)
        self._rebuild_content()

    def set_focused(self, focused: bool) -> None:
        self.focused = focused

    def update(self, msg):
        """Handle a message; return the message to emit, if any."""
        if not self.focused or not isinstance(msg, KeyMsg):
            return None
        if msg.key == "esc":
            return FocusTasksMsg()
        action = _KEY_ACTIONS.get(msg.key)
        if action is not None:
            action(self.viewport)
        return None

    def view(self) -> str:
        inner = inner_dimensions(self.width, self.height)
        content = _TITLE_STYLE.render("[0] Output") + "\n" + self.viewport.view()
        return border_box(content, inner.w, inner.h, panel_border_color(self.focused))

    def _rebuild_content(self) -> None:
        self.viewport.set_content("\n".join(self.lines))

    def scroll_up(self, lines: int) -> None:
        self.viewport.scroll_up(lines)

    def scroll_down(self, lines: int) -> None:
        self.viewport.scroll_down(lines)