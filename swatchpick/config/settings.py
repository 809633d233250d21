"""Persistent application settings backed by QSettings."""

from __future__ import annotations

from PyQt6.QtCore import QSettings

from swatchpick.config.constants import APP_NAME, ORG_NAME, UPDATE_DELAY_DEFAULT_MS


class AppSettings:
    """Thin wrapper around QSettings for typed access to color preferences."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings(ORG_NAME, APP_NAME)

    # --- colors ---

    def color(self, key: str, default: str) -> str:
        val = self._qs.value(f"colors/{key}", default)
        if isinstance(val, str) and val:
            return val
        return default

    def set_color(self, key: str, value: str) -> None:
        self._qs.setValue(f"colors/{key}", value)

    def has_color(self, key: str) -> bool:
        return self._qs.contains(f"colors/{key}")

    # --- picker behaviour ---

    def update_delay_ms(self) -> int:
        val = self._qs.value("picker/updateDelayMs", UPDATE_DELAY_DEFAULT_MS)
        try:
            return max(0, int(val))
        except (TypeError, ValueError):
            return UPDATE_DELAY_DEFAULT_MS

    def set_update_delay_ms(self, delay: int) -> None:
        self._qs.setValue("picker/updateDelayMs", delay)

    def sync(self) -> None:
        self._qs.sync()
