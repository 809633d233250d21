"""ColorPicker — swatch plus hex entry that opens a hue/saturation/lightness dialog."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from swatchpick.config.constants import HEX_INPUT_WIDTH, PICKER_DIALOG_TITLE
from swatchpick.core.picker_state import Component, PickerState
from swatchpick.core.swatch_presenter import SwatchStyle, present
from swatchpick.ui.sliders import HueSlider, SaturationLightnessPlane, TransparencySlider
from swatchpick.ui.swatch import SwatchButton


class ColorPicker(QWidget):
    """A swatch that opens a modal picker dialog, plus a hex text entry.

    Edits made in the dialog apply live.  Cancelling restores the value the
    picker had when the dialog was opened; confirming keeps the edit.

    Signals
    -------
    updated(str)
        Emitted with the current value after every change made through the
        UI (sub-widgets, hex entry, cancel).  Setting :attr:`value` from
        code does not emit it.
    """

    updated = pyqtSignal(str)

    def __init__(
        self,
        value: str = "",
        parent: QWidget | None = None,
        *,
        input_in_dialog: bool = False,
        disable_transparency: bool = False,
    ) -> None:
        super().__init__(parent)
        self._input_in_dialog = input_in_dialog
        self._disable_transparency = disable_transparency
        self._dialog_is_open = False
        self._cancel_value: str | None = None

        self._state = PickerState(parent=self)

        # --- Small view: swatch and (optionally) hex entry ---
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._swatch = SwatchButton()
        self._swatch.clicked.connect(self.open_dialog)
        layout.addWidget(self._swatch)

        self._hex_input = QLineEdit()
        self._hex_input.setFixedWidth(HEX_INPUT_WIDTH)
        self._hex_input.editingFinished.connect(self._on_hex_editing_finished)
        self._hex_input.returnPressed.connect(self._on_hex_return_pressed)
        if not input_in_dialog:
            layout.addWidget(self._hex_input)
        layout.addStretch()

        # --- Dialog ---
        self._dialog = QDialog(self)
        self._dialog.setWindowTitle(PICKER_DIALOG_TITLE)
        self._dialog.setModal(True)
        dialog_layout = QVBoxLayout(self._dialog)

        self._plane = SaturationLightnessPlane()
        self._plane.updated.connect(self._on_saturation_lightness)
        dialog_layout.addWidget(self._plane)

        self._hue_slider = HueSlider()
        self._hue_slider.updated.connect(self._on_hue)
        dialog_layout.addWidget(self._hue_slider)

        self._transparency_slider: TransparencySlider | None = None
        if not disable_transparency:
            self._transparency_slider = TransparencySlider()
            self._transparency_slider.updated.connect(self._on_transparency)
            dialog_layout.addWidget(self._transparency_slider)

        if input_in_dialog:
            dialog_layout.addWidget(self._hex_input)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.confirm)
        buttons.rejected.connect(self.cancel)
        dialog_layout.addWidget(buttons)
        # Escape and the window close button reject the dialog
        self._dialog.rejected.connect(self._on_dialog_rejected)

        self._state.changed.connect(self._on_state_changed)
        self._state.set_value(value)
        self._refresh()

    # --- public API ---

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def value(self) -> str:
        return self._state.value

    @value.setter
    def value(self, value: str) -> None:
        self._state.set_value(value)

    @property
    def dialog_is_open(self) -> bool:
        return self._dialog_is_open

    @property
    def dialog(self) -> QDialog:
        return self._dialog

    @property
    def swatch_style(self) -> SwatchStyle:
        return present(self._state.value, self._dialog_is_open)

    @property
    def hex_text(self) -> str:
        return self._hex_input.text()

    def open_dialog(self) -> None:
        """Show the picker dialog and remember the value to restore on cancel."""
        self._dialog_is_open = True
        self._cancel_value = self._state.value
        self._refresh_swatch()
        self._dialog.open()

    def close_dialog(self) -> None:
        self._dialog_is_open = False
        self._cancel_value = None
        self._refresh_swatch()
        self._dialog.hide()

    def confirm(self) -> None:
        """Close the dialog keeping the edited value."""
        self.close_dialog()

    def cancel(self) -> None:
        """Close the dialog and restore the value it was opened with."""
        snapshot = self._cancel_value
        self.close_dialog()
        if snapshot is None:
            return
        if not snapshot:
            self._state.clear()
            self.updated.emit(self._state.value)
            return
        self._ui_changed(value=snapshot)

    def apply_hex_text(self, text: str) -> bool:
        """Apply typed hex text; invalid text reverts the entry to the current value."""
        self._hex_input.setModified(False)
        applied = self._state.apply_hex_text(text)
        self._hex_input.setText(self._state.hex_value)
        if applied:
            self._ui_changed()
        return applied

    # --- sub-widget handlers ---

    def _on_hue(self, hue: float) -> None:
        self._state.set_component(Component.HUE, hue)
        self._ui_changed()

    def _on_saturation_lightness(self, saturation: float, lightness: float) -> None:
        self._state.set_saturation_lightness(saturation, lightness)
        self._ui_changed()

    def _on_transparency(self, transparency: float) -> None:
        self._state.set_component(Component.TRANSPARENCY, transparency)
        self._ui_changed()

    def _on_hex_editing_finished(self) -> None:
        if self._hex_input.isModified():
            self.apply_hex_text(self._hex_input.text())

    def _on_hex_return_pressed(self) -> None:
        self._on_hex_editing_finished()
        self.confirm()

    def _on_dialog_rejected(self) -> None:
        if self._dialog_is_open:
            self.cancel()

    def _ui_changed(self, value: str | None = None) -> None:
        if value is not None:
            self._state.set_value(value)
        self.updated.emit(self._state.value)

    # --- view sync ---

    def _on_state_changed(self, _value: str) -> None:
        self._refresh()

    def _refresh(self) -> None:
        hue, saturation, lightness, transparency = self._state.components
        self._hue_slider.set_hue(hue)
        self._plane.set_hue(hue)
        self._plane.set_saturation_lightness(saturation, lightness)
        if self._transparency_slider is not None:
            self._transparency_slider.set_hue(hue)
            self._transparency_slider.set_transparency(transparency)
        if not self._hex_input.isModified():
            self._hex_input.setText(self._state.hex_value)
        self._refresh_swatch()

    def _refresh_swatch(self) -> None:
        self._swatch.set_style(self.swatch_style)
