"""Tests for swatch presentation."""

from swatchpick.core.swatch_presenter import SwatchStyle, is_too_white, present


def test_white_gets_outline() -> None:
    assert present("#FFFFFF", False).show_outline is True


def test_near_white_gets_outline() -> None:
    assert present("hsl(0, 0%, 93%)", False).show_outline is True


def test_red_has_no_outline() -> None:
    assert present("hsla(0, 100%, 50%, 1)", False).show_outline is False


def test_dark_color_has_no_outline() -> None:
    assert present("#202124", False).show_outline is False


def test_empty_color_skips_check() -> None:
    expected = SwatchStyle(fill_color="", show_outline=False, show_focus_ring=False)
    assert present("", False) == expected


def test_unparseable_color_has_no_outline() -> None:
    assert is_too_white("nonsense") is False


def test_fill_color_is_verbatim() -> None:
    assert present("hsla(10, 20%, 30%, 0.4)", False).fill_color == "hsla(10, 20%, 30%, 0.4)"


def test_focus_ring_follows_dialog_state() -> None:
    assert present("#000000", True).show_focus_ring is True
    assert present("#000000", False).show_focus_ring is False


def test_outline_and_focus_ring_together() -> None:
    style = present("white", True)
    assert style.show_outline is True
    assert style.show_focus_ring is True
