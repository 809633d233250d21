"""SettingsColorPicker — a ColorPicker bound to a color preference."""

from __future__ import annotations

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QWidget

from swatchpick.config.settings import AppSettings
from swatchpick.core.debounced_committer import DebouncedCommitter
from swatchpick.ui.color_picker import ColorPicker

log = logging.getLogger(__name__)


class SettingsColorPicker(QWidget):
    """Edits the preference *key* of *settings* through a :class:`ColorPicker`.

    Preference writes are debounced: dragging a knob produces a stream of
    picker updates, but the preference is written at most once per
    :attr:`update_delay` milliseconds with the latest value.  Writing on
    every update would flood the settings backend and, with an observer on
    the preference, make the knob jump around under the cursor.

    Signals
    -------
    committed(str)
        Emitted after a value has been written to the preference.
    """

    committed = pyqtSignal(str)

    def __init__(
        self,
        settings: AppSettings,
        key: str,
        default: str,
        parent: QWidget | None = None,
        *,
        disable_transparency: bool = False,
    ) -> None:
        super().__init__(parent)
        self._settings = settings
        self._key = key
        self._default = default
        self.update_delay: int = settings.update_delay_ms()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._picker = ColorPicker(
            settings.color(key, default), disable_transparency=disable_transparency
        )
        layout.addWidget(self._picker)

        self._committer = DebouncedCommitter(self)
        self._committer.committed.connect(self.committed)
        self._picker.updated.connect(self._schedule_update)

    @property
    def picker(self) -> ColorPicker:
        return self._picker

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str:
        return self._picker.value

    @property
    def has_pending_update(self) -> bool:
        return self._committer.is_pending

    def reload(self) -> None:
        """Re-read the preference, e.g. after it was changed elsewhere."""
        self._picker.value = self._settings.color(self._key, self._default)

    def _schedule_update(self, value: str) -> None:
        self._committer.schedule(value, self.update_delay, self._write_preference)

    def _write_preference(self, value: str) -> None:
        log.debug("Writing preference %s = %r", self._key, value)
        self._settings.set_color(self._key, value)
