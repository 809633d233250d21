"""QApplication bootstrap."""

import sys

from PyQt6.QtWidgets import QApplication, QFormLayout, QWidget

from swatchpick.config.constants import APP_NAME, COLOR_PREFERENCES, ORG_DOMAIN, ORG_NAME
from swatchpick.config.settings import AppSettings
from swatchpick.ui.settings_color_picker import SettingsColorPicker


class ColorSettingsWindow(QWidget):
    """Window with one color picker per color preference."""

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Terminal colors")
        self._settings = settings

        layout = QFormLayout(self)
        self._pickers: dict[str, SettingsColorPicker] = {}
        for key, label, default, transparency in COLOR_PREFERENCES:
            picker = SettingsColorPicker(
                settings, key, default, disable_transparency=not transparency
            )
            layout.addRow(f"{label}:", picker)
            self._pickers[key] = picker

    @property
    def pickers(self) -> dict[str, SettingsColorPicker]:
        return dict(self._pickers)


def main() -> None:
    """Launch the application."""
    app = QApplication(sys.argv)
    app.setOrganizationName(ORG_NAME)
    app.setOrganizationDomain(ORG_DOMAIN)
    app.setApplicationName(APP_NAME)
    settings = AppSettings()
    window = ColorSettingsWindow(settings)
    window.show()
    exit_code = app.exec()
    settings.sync()
    sys.exit(exit_code)
