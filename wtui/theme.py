"""Colours, text styles and box drawing for the terminal interface."""

from __future__ import annotations

import re
from dataclasses import dataclass

COLOR_PRIMARY = "#7C3AED"
PANEL_COLOR_PRIMARY = "#7C3AED"

COLOR_DIM_TEXT = "#6B7280"
COLOR_HEADER_BG = "#1E1E2E"

COLOR_INACTIVE = "#4A4A4A"
COLOR_DIM = "#6B7280"
COLOR_NORMAL = "#D1D5DB"
COLOR_BOLD = "#F3F4F6"
COLOR_DIRTY = "#F59E0B"

RESET = "\x1b[0m"

_ANSI_PATTERN = r"\x1b\[[0-9;?]*[ -/]*[@-~]"
_ANSI_RE = re.compile(_ANSI_PATTERN)
_ANSI_SPLIT_RE = re.compile(f"({_ANSI_PATTERN})")


def _rgb(color: str) -> tuple[int, int, int]:
    digits = color.removeprefix("#")
    if len(digits) != 6:
        raise ValueError(f"invalid colour {color!r}")
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        raise ValueError(f"invalid colour {color!r}") from None


@dataclass(frozen=True)
class Style:
    """A text style rendered with ANSI escape sequences."""

    bold: bool = False
    foreground: str | None = None
    background: str | None = None
    padding_left: int = 0
    padding_right: int = 0

    def _sgr(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.foreground:
            r, g, b = _rgb(self.foreground)
            codes.append(f"38;2;{r};{g};{b}")
        if self.background:
            r, g, b = _rgb(self.background)
            codes.append(f"48;2;{r};{g};{b}")
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def render(self, text: str) -> str:
        """Return ``text`` with padding and styling applied to every line."""
        prefix = self._sgr()
        rendered = []
        for line in text.split("\n"):
            line = " " * max(self.padding_left, 0) + line + " " * max(self.padding_right, 0)
            rendered.append(f"{prefix}{line}{RESET}" if prefix and line else line)
        return "\n".join(rendered)


@dataclass(frozen=True)
class Styles:
    """Styles for the application header and footer."""

    header: Style
    footer: Style


def new_styles() -> Styles:
    """Return the default header and footer styles."""
    return Styles(
        header=Style(
            bold=True,
            foreground=COLOR_PRIMARY,
            background=COLOR_HEADER_BG,
            padding_left=1,
            padding_right=1,
        ),
        footer=Style(foreground=COLOR_DIM_TEXT),
    )


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)


def _fit(line: str, width: int) -> str:
    """Cut or pad ``line`` to exactly ``width`` visible characters."""
    out: list[str] = []
    used = 0
    had_escape = False
    truncated = False
    for position, token in enumerate(_ANSI_SPLIT_RE.split(line)):
        if position % 2:
            out.append(token)
            had_escape = True
            continue
        room = width - used
        if len(token) > room:
            out.append(token[:room])
            used = width
            truncated = True
            break
        out.append(token)
        used += len(token)
    if truncated and had_escape:
        out.append(RESET)
    out.append(" " * (width - used))
    return "".join(out)


def border_box(content: str, width: int, height: int, color: str) -> str:
    """Draw a rounded border around ``content`` sized to the given inner box.

    Lines are cut or padded to ``width``; the box is at least ``height`` lines tall.
    """
    width = max(width, 0)
    height = max(height, 0)
    edge = Style(foreground=color)
    lines = content.split("\n")
    lines.extend([""] * (height - len(lines)))
    side = edge.render("│")
    rows = [edge.render("╭" + "─" * width + "╮")]
    rows.extend(side + _fit(line, width) + side for line in lines)
    rows.append(edge.render("╰" + "─" * width + "╯"))
    return "\n".join(rows)