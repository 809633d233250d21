"""Tests for PickerState value/component reconciliation."""

from __future__ import annotations

import pytest
from pytestqt.qtbot import QtBot

from swatchpick.core.picker_state import Component, PickerState


def _recorder(state: PickerState) -> list[str]:
    emitted: list[str] = []
    state.changed.connect(emitted.append)
    return emitted


def test_initial_value_is_decomposed() -> None:
    state = PickerState("hsla(120, 50%, 25%, 0.5)")
    assert state.value == "hsla(120, 50%, 25%, 0.5)"
    assert state.components == (120.0, 50.0, 25.0, 0.5)


def test_unset_state() -> None:
    state = PickerState()
    assert state.value == ""
    assert state.hex_value == ""
    assert state.components == (0.0, 0.0, 0.0, 1.0)


def test_accessor_aliases() -> None:
    state = PickerState("#336699")
    assert state.current_value() == state.value
    assert state.current_components() == state.components
    assert state.hex_value == "#336699"


class TestSetValue:
    def test_emits_changed(self, qtbot: QtBot) -> None:
        state = PickerState("#000000")
        with qtbot.waitSignal(state.changed, timeout=1000) as blocker:
            state.set_value("hsl(10, 20%, 30%)")
        assert blocker.args == ["hsl(10, 20%, 30%)"]
        assert state.components == (10.0, 20.0, 30.0, 1.0)

    def test_value_stored_verbatim(self) -> None:
        state = PickerState()
        state.set_value("red")
        assert state.value == "red"
        assert state.hex_value == "#FF0000"

    def test_same_value_twice_emits_once(self) -> None:
        state = PickerState()
        emitted = _recorder(state)
        state.set_value("#123456")
        state.set_value("#123456")
        assert emitted == ["#123456"]

    def test_invalid_value_is_ignored(self, qtbot: QtBot) -> None:
        state = PickerState("hsla(200, 40%, 60%, 0.8)")
        with qtbot.assertNotEmitted(state.changed):
            state.set_value("not-a-color")
        assert state.value == "hsla(200, 40%, 60%, 0.8)"
        assert state.components == (200.0, 40.0, 60.0, 0.8)

    def test_empty_value_is_ignored(self) -> None:
        state = PickerState("#FFFFFF")
        emitted = _recorder(state)
        state.set_value("")
        assert state.value == "#FFFFFF"
        assert emitted == []


class TestHysteresis:
    def test_sub_integer_drift_keeps_components(self) -> None:
        state = PickerState()
        state.set_component(Component.HUE, 120.4)
        state.set_component(Component.SATURATION, 49.8)
        state.set_component(Component.LIGHTNESS, 30.3)
        state.set_value("hsla(119.6, 50.2%, 29.7%, 0.5)")
        h, s, light, a = state.components
        assert (h, s, light) == (120.4, 49.8, 30.3)
        assert a == 0.5
        assert state.value == "hsla(119.6, 50.2%, 29.7%, 0.5)"

    def test_each_component_judged_independently(self) -> None:
        state = PickerState("hsl(100, 50%, 50%)")
        state.set_value("hsl(100.2, 70%, 50.3%)")
        assert state.components == (100.0, 70.0, 50.0, 1.0)

    def test_half_step_counts_as_a_move(self) -> None:
        state = PickerState()
        state.set_component(Component.LIGHTNESS, 50.4)
        state.set_value("hsl(0, 0%, 50.5%)")
        assert state.components[2] == 50.5

    def test_transparency_always_updates(self) -> None:
        state = PickerState("hsla(10, 20%, 30%, 0.5)")
        state.set_value("hsla(10, 20%, 30%, 0.501)")
        assert state.components[3] == pytest.approx(0.501)

    def test_round_trip_through_canonical_string_is_stable(self) -> None:
        state = PickerState()
        state.set_component(Component.HUE, 33.33)
        canonical = state.value
        other = PickerState()
        other.set_component(Component.HUE, 33.33)
        other.set_value("hsl(33, 0%, 0%)")
        other.set_value(canonical)
        assert other.components[0] == 33.33


class TestClear:
    def test_returns_to_unset(self, qtbot: QtBot) -> None:
        state = PickerState("hsla(120, 50%, 25%, 0.5)")
        with qtbot.waitSignal(state.changed, timeout=1000) as blocker:
            state.clear()
        assert blocker.args == [""]
        assert state.value == ""
        assert state.hex_value == ""
        assert state.components == (0.0, 0.0, 0.0, 1.0)

    def test_already_unset_is_silent(self, qtbot: QtBot) -> None:
        state = PickerState()
        with qtbot.assertNotEmitted(state.changed):
            state.clear()

    def test_edit_after_clear_starts_from_black(self) -> None:
        state = PickerState("#336699")
        state.clear()
        state.set_component(Component.HUE, 200)
        assert state.value == "hsla(200, 0%, 0%, 1)"


class TestSetComponent:
    def test_hue(self, qtbot: QtBot) -> None:
        state = PickerState("hsla(0, 100%, 50%, 1)")
        with qtbot.waitSignal(state.changed, timeout=1000) as blocker:
            state.set_component(Component.HUE, 240)
        assert blocker.args == ["hsla(240, 100%, 50%, 1)"]
        assert state.components == (240, 100.0, 50.0, 1.0)

    def test_saturation(self) -> None:
        state = PickerState("hsla(0, 100%, 50%, 1)")
        state.set_component(Component.SATURATION, 25)
        assert state.value == "hsla(0, 25%, 50%, 1)"

    def test_lightness(self) -> None:
        state = PickerState("hsla(0, 100%, 50%, 1)")
        state.set_component(Component.LIGHTNESS, 75.6)
        assert state.value == "hsla(0, 100%, 76%, 1)"
        assert state.components[2] == 75.6

    def test_half_percent_rounds_up(self) -> None:
        state = PickerState("hsla(0, 0%, 0%, 1)")
        state.set_component(Component.LIGHTNESS, 50.5)
        assert state.value == "hsla(0, 0%, 51%, 1)"

    def test_transparency(self) -> None:
        state = PickerState("hsla(0, 100%, 50%, 1)")
        state.set_component(Component.TRANSPARENCY, 0.3)
        assert state.value == "hsla(0, 100%, 50%, 0.3)"

    def test_saturation_lightness_emits_once(self) -> None:
        state = PickerState("hsla(0, 100%, 50%, 1)")
        emitted = _recorder(state)
        state.set_saturation_lightness(20, 80)
        assert emitted == ["hsla(0, 20%, 80%, 1)"]

    def test_component_edit_after_hex_value(self) -> None:
        state = PickerState("#FF0000")
        state.set_component(Component.TRANSPARENCY, 0.5)
        assert state.value == "hsla(0, 100%, 50%, 0.5)"


class TestHexText:
    def test_valid_text_stored_as_uppercase_hex(self) -> None:
        state = PickerState("#000000")
        assert state.apply_hex_text("#abc") is True
        assert state.value == "#AABBCC"

    def test_any_css_color_is_accepted(self) -> None:
        state = PickerState("#000000")
        assert state.apply_hex_text("white") is True
        assert state.value == "#FFFFFF"

    def test_invalid_text_rejected(self, qtbot: QtBot) -> None:
        state = PickerState("#123456")
        with qtbot.assertNotEmitted(state.changed):
            assert state.apply_hex_text("#12345Z") is False
        assert state.value == "#123456"
