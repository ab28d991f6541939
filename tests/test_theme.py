import pytest

from wtui.theme import (
    COLOR_HEADER_BG,
    COLOR_PRIMARY,
    Style,
    border_box,
    new_styles,
    strip_ansi,
)


def test_plain_style_leaves_text_unchanged():
    assert Style().render("hello") == "hello"


@pytest.mark.parametrize(
    "style",
    [
        Style(bold=True),
        Style(foreground=COLOR_PRIMARY),
        Style(bold=True, foreground=COLOR_PRIMARY, background=COLOR_HEADER_BG),
    ],
)
def test_render_then_strip_round_trips(style):
    rendered = style.render("some text")
    assert rendered.startswith("\x1b[")
    assert strip_ansi(rendered) == "some text"


def test_padding_surrounds_text():
    style = Style(padding_left=1, padding_right=1, bold=True)
    assert strip_ansi(style.render("x")) == " " + "x" + " "


def test_render_styles_each_line():
    rendered = Style(foreground=COLOR_PRIMARY).render("one\ntwo")
    parts = rendered.split("\n")
    assert [strip_ansi(part) for part in parts] == ["one", "two"]
    assert all(part != strip_ansi(part) for part in parts)


def test_invalid_colour_raises():
    with pytest.raises(ValueError):
        Style(foreground="#zzzzzz").render("x")
    with pytest.raises(ValueError):
        Style(foreground="#123").render("x")


def test_new_styles_values():
    styles = new_styles()
    assert styles.header.bold is True
    assert styles.header.foreground == COLOR_PRIMARY
    assert styles.header.background == COLOR_HEADER_BG
    assert styles.footer.foreground == "#6B7280"


def test_strip_ansi_without_escapes_is_identity():
    assert strip_ansi("plain [1/3]") == "plain [1/3]"


def test_border_box_dimensions():
    box = border_box("a\nbb", 10, 5, COLOR_PRIMARY)
    lines = [strip_ansi(line) for line in box.split("\n")]
    assert len(lines) == 5 + 2
    assert all(len(line) == 10 + 2 for line in lines)
    assert lines[0].startswith("╭")


def test_border_box_truncates_wide_content():
    box = border_box("abcdef", 3, 1, COLOR_PRIMARY)
    lines = [strip_ansi(line) for line in box.split("\n")]
    assert lines[1] == "│abc│"


def test_border_box_keeps_taller_content():
    box = border_box("1\n2\n3\n4", 4, 2, COLOR_PRIMARY)
    assert len(box.split("\n")) == 4 + 2


def test_border_box_truncates_styled_content_by_visible_width():
    styled = Style(bold=True).render("abcdef")
    box = border_box(styled, 4, 1, COLOR_PRIMARY)
    middle = strip_ansi(box.split("\n")[1])
    assert middle[1:-1] == "abcdef"[:4]