"""Tests for the application window."""

from pytestqt.qtbot import QtBot

from swatchpick.app import ColorSettingsWindow
from swatchpick.config.constants import COLOR_PREFERENCES
from swatchpick.config.settings import AppSettings


def test_window_has_picker_per_preference(qtbot: QtBot, settings: AppSettings) -> None:
    window = ColorSettingsWindow(settings)
    qtbot.addWidget(window)
    assert set(window.pickers) == {key for key, *_rest in COLOR_PREFERENCES}


def test_window_transparency_options(qtbot: QtBot, settings: AppSettings) -> None:
    window = ColorSettingsWindow(settings)
    qtbot.addWidget(window)
    for key, _label, default, transparency in COLOR_PREFERENCES:
        picker = window.pickers[key].picker
        assert picker.value == default
        assert (picker._transparency_slider is not None) == transparency
