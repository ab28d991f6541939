"""Layout helpers and the list and viewport widgets panels are built on."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .theme import COLOR_INACTIVE, PANEL_COLOR_PRIMARY

T = TypeVar("T")

# Lines a list reserves for its filter bar and pagination row.
_CHROME_LINES = 2


@dataclass(frozen=True)
class Dims:
    """Width and height of a panel's content area."""

    w: int
    h: int


def inner_dimensions(width: int, height: int) -> Dims:
    """Return the area left inside a one-cell border."""
    return Dims(w=max(width - 2, 0), h=max(height - 2, 0))


def panel_border_color(focused: bool) -> str:
    """Return the border colour of a panel for its focus state."""
    return PANEL_COLOR_PRIMARY if focused else COLOR_INACTIVE


def truncate_path(path: str) -> str:
    """Shorten a path to its last two components."""
    path = path.rstrip("/")
    parts = path.split("/")
    if len(parts) <= 2:
        return path
    return "/".join(parts[-2:])


class FilterState(enum.Enum):
    UNFILTERED = "unfiltered"
    FILTERING = "filtering"
    FILTER_APPLIED = "filter applied"


def _fuzzy_match(pattern: str, target: str) -> bool:
    remaining = iter(target.lower())
    return all(ch in remaining for ch in pattern.lower())


_ACCEPT_KEYS = frozenset({"enter", "tab", "shift+tab", "ctrl+k", "up", "ctrl+j", "down"})


class ListModel(Generic[T]):
    """A paginated, filterable list with a cursor over its visible items."""

    def __init__(
        self,
        item_height: int,
        spacing: int,
        width: int,
        height: int,
        filter_value: Callable[[T], str],
    ) -> None:
        if item_height < 1 or spacing < 0:
            raise ValueError("item_height must be positive and spacing non-negative")
        self.item_height = item_height
        self.spacing = spacing
        self.width = width
        self.height = height
        self.filter_text = ""
        self._filter_value = filter_value
        self._items: list[T] = []
        self._index = 0
        self._state = FilterState.UNFILTERED

    def _visible(self) -> list[T]:
        if self._state is FilterState.UNFILTERED or not self.filter_text:
            return list(self._items)
        return [
            item
            for item in self._items
            if _fuzzy_match(self.filter_text, self._filter_value(item))
        ]

    def set_items(self, items) -> None:
        self._items = list(items)

    def items(self) -> list[T]:
        return list(self._items)

    def index(self) -> int:
        return self._index

    def select(self, index: int) -> None:
        self._index = index

    def cursor_up(self) -> None:
        if self._index > 0:
            self._index -= 1

    def cursor_down(self) -> None:
        if self._index < len(self._visible()) - 1:
            self._index += 1

    def selected_item(self) -> T | None:
        visible = self._visible()
        if 0 <= self._index < len(visible):
            return visible[self._index]
        return None

    def filter_state(self) -> FilterState:
        return self._state

    def reset_filter(self) -> None:
        self._state = FilterState.UNFILTERED
        self.filter_text = ""

    def start_filter(self) -> None:
        """Enter filter mode; lists without items cannot be filtered."""
        if self._items:
            self._state = FilterState.FILTERING

    def _accept_filter(self) -> None:
        if not self._visible():
            return
        self._state = FilterState.FILTER_APPLIED
        if not self.filter_text:
            self.reset_filter()

    def _set_filter_text(self, text: str) -> None:
        self.filter_text = text
        self._index = 0

    def handle_key(self, key: str) -> None:
        """Apply the list's default behaviour for a key press."""
        if self._state is FilterState.FILTERING:
            if key == "esc":
                self.reset_filter()
            elif key in _ACCEPT_KEYS:
                self._accept_filter()
            elif key == "backspace":
                self._set_filter_text(self.filter_text[:-1])
            elif key == "space":
                self._set_filter_text(self.filter_text + " ")
            elif len(key) == 1 and key.isprintable():
                self._set_filter_text(self.filter_text + key)
            return

        if key == "/":
            self.start_filter()
        elif key == "esc" and self._state is FilterState.FILTER_APPLIED:
            self.reset_filter()
        elif key in ("up", "k"):
            self.cursor_up()
        elif key in ("down", "j"):
            self.cursor_down()
        elif key in ("left", "h", "pgup"):
            self.prev_page()
        elif key in ("right", "l", "pgdown"):
            self.next_page()
        elif key in ("home", "g"):
            self.select(0)
        elif key in ("end", "G"):
            self.select(max(len(self._visible()) - 1, 0))

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def per_page(self) -> int:
        available = self.height - _CHROME_LINES
        return max(1, available // (self.item_height + self.spacing))

    def total_pages(self) -> int:
        count = len(self._visible())
        return max(1, -(-count // self.per_page()))

    def page(self) -> int:
        if self._index <= 0:
            return 0
        return min(self._index // self.per_page(), self.total_pages() - 1)

    def next_page(self) -> None:
        page = self.page()
        if page < self.total_pages() - 1:
            self._index = (page + 1) * self.per_page()

    def prev_page(self) -> None:
        page = self.page()
        if page > 0:
            self._index = (page - 1) * self.per_page()

    def visible_items(self) -> list[tuple[int, T]]:
        """Return ``(index, item)`` pairs shown on the current page."""
        per_page = self.per_page()
        start = self.page() * per_page
        return list(enumerate(self._visible()[start : start + per_page], start))


class Viewport:
    """A scrollable window over lines of text."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.y_offset = 0
        self._lines: list[str] = [""]

    def _max_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def set_content(self, content: str) -> None:
        self._lines = content.split("\n")
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()

    def scroll_up(self, lines: int) -> None:
        self.y_offset = max(0, self.y_offset - lines)

    def scroll_down(self, lines: int) -> None:
        self.y_offset = max(0, min(self.y_offset + lines, self._max_offset()))

    def goto_top(self) -> None:
        self.y_offset = 0

    def goto_bottom(self) -> None:
        self.y_offset = self._max_offset()

    def at_top(self) -> bool:
        return self.y_offset <= 0

    def at_bottom(self) -> bool:
        return self.y_offset >= self._max_offset()

    def view(self) -> str:
        shown = self._lines[self.y_offset : self.y_offset + self.height]
        shown += [""] * (self.height - len(shown))
        return "\n".join(shown)