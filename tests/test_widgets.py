import pytest

from wtui.theme import COLOR_INACTIVE, PANEL_COLOR_PRIMARY
from wtui.widgets import (
    Dims,
    FilterState,
    ListModel,
    Viewport,
    inner_dimensions,
    panel_border_color,
    truncate_path,
)


def make_list(names, height=20):
    model = ListModel(1, 0, 40, height, lambda item: item)
    model.set_items(names)
    return model


def test_inner_dimensions_subtracts_border():
    assert inner_dimensions(120, 20).w == 118


def test_inner_dimensions_never_negative():
    assert inner_dimensions(1, 0) == Dims(0, 0)


def test_panel_border_color():
    assert panel_border_color(True) == PANEL_COLOR_PRIMARY
    assert panel_border_color(False) == COLOR_INACTIVE


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/tmp/.tasks/IN-001/collection", "IN-001/collection"),
        ("/tmp/.tasks/IN-001/collection/", "IN-001/collection"),
        ("a/b", "a/b"),
        ("/single", "/single"),
    ],
)
def test_truncate_path(path, expected):
    assert truncate_path(path) == expected


def test_invalid_item_height_raises():
    with pytest.raises(ValueError):
        ListModel(0, 0, 10, 10, str)


def test_selected_item_follows_cursor():
    model = make_list(["a", "b", "c"])
    assert model.selected_item() == "a"
    model.cursor_down()
    assert model.selected_item() == "b"
    model.cursor_up()
    model.cursor_up()
    assert model.index() == 0


def test_cursor_down_stops_at_end():
    model = make_list(["a", "b"])
    model.cursor_down()
    model.cursor_down()
    assert model.index() == 1


def test_selected_item_none_when_empty():
    assert make_list([]).selected_item() is None


def test_filter_type_and_accept():
    model = make_list(["collection", "databridge", "reporting"])
    model.start_filter()
    assert model.filter_state() is FilterState.FILTERING
    for key in "co":
        model.handle_key(key)
    assert model.filter_text == "co"
    model.handle_key("enter")
    assert model.filter_state() is FilterState.FILTER_APPLIED
    assert model.selected_item() == "collection"
    assert [item for _, item in model.visible_items()] == ["collection"]


def test_filter_escape_resets():
    model = make_list(["collection", "databridge"])
    model.handle_key("/")
    model.handle_key("d")
    model.handle_key("esc")
    assert model.filter_state() is FilterState.UNFILTERED
    assert model.filter_text == ""
    assert model.items() == ["collection", "databridge"]


def test_accept_empty_filter_resets():
    model = make_list(["a", "b"])
    model.start_filter()
    model.handle_key("enter")
    assert model.filter_state() is FilterState.UNFILTERED


def test_accept_without_matches_stays_filtering():
    model = make_list(["a", "b"])
    model.start_filter()
    model.handle_key("z")
    model.handle_key("enter")
    assert model.filter_state() is FilterState.FILTERING


def test_backspace_removes_filter_character():
    model = make_list(["abc"])
    model.start_filter()
    model.handle_key("a")
    model.handle_key("b")
    model.handle_key("backspace")
    assert model.filter_text == "a"


def test_start_filter_on_empty_list_does_nothing():
    model = make_list([])
    model.start_filter()
    assert model.filter_state() is FilterState.UNFILTERED


def test_pagination_invariants():
    names = [f"item-{n}" for n in range(30)]
    model = make_list(names, height=7)
    per_page = model.per_page()
    assert model.total_pages() * per_page >= len(names)
    assert (model.total_pages() - 1) * per_page < len(names)
    model.prev_page()
    assert model.page() == 0
    model.next_page()
    assert model.page() == 1
    assert model.index() == per_page
    assert model.visible_items()[0] == (per_page, names[per_page])
    model.prev_page()
    assert model.index() == 0


def test_home_and_end_keys():
    model = make_list(["a", "b", "c"])
    model.handle_key("G")
    assert model.selected_item() == "c"
    model.handle_key("g")
    assert model.selected_item() == "a"


def test_viewport_scrolling():
    viewport = Viewport(10, 2)
    lines = [f"line {n}" for n in range(20)]
    viewport.set_content("\n".join(lines))
    assert viewport.at_top()
    viewport.goto_bottom()
    assert viewport.at_bottom()
    viewport.scroll_up(1)
    assert not viewport.at_bottom()
    viewport.scroll_down(100)
    assert viewport.at_bottom()
    viewport.scroll_up(100)
    assert viewport.at_top()


def test_viewport_view_shows_window():
    viewport = Viewport(10, 3)
    lines = [f"line {n}" for n in range(10)]
    viewport.set_content("\n".join(lines))
    viewport.scroll_down(2)
    assert viewport.view().split("\n") == lines[2:5]


def test_viewport_view_pads_short_content():
    viewport = Viewport(10, 4)
    viewport.set_content("only")
    shown = viewport.view().split("\n")
    assert len(shown) == 4
    assert shown[0] == "only"