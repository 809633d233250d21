"""PickerState — the picker's canonical color value and its HSLA components."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PyQt6.QtCore import QObject, pyqtSignal

from swatchpick.core.color_model import (
    HSLA,
    ParseError,
    from_hsla,
    round_half_up,
    to_hex,
    to_hsla,
)

log = logging.getLogger(__name__)


class Component(Enum):
    HUE = auto()
    SATURATION = auto()
    LIGHTNESS = auto()
    TRANSPARENCY = auto()


class PickerState(QObject):
    """Single source of truth for the color a picker is editing.

    The value can be driven two ways.  :meth:`set_value` takes a CSS string
    and decomposes it, but only moves hue, saturation or lightness when the
    new component rounds to a different whole number than the stored one,
    so a round-trip through the string form cannot nudge a knob the user
    has not moved.  :meth:`set_component` overwrites one component exactly
    and rebuilds the string from all four.

    Signals
    -------
    changed(str)
        Emitted with the new canonical value after every accepted update.
    """

    changed = pyqtSignal(str)

    def __init__(self, value: str = "", parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._value = ""
        self._hue = 0.0
        self._saturation = 0.0
        self._lightness = 0.0
        self._transparency = 1.0
        if value:
            self.set_value(value)

    # --- read access ---

    @property
    def value(self) -> str:
        return self._value

    @property
    def components(self) -> HSLA:
        return self._hue, self._saturation, self._lightness, self._transparency

    def current_value(self) -> str:
        return self._value

    def current_components(self) -> HSLA:
        return self.components

    @property
    def hex_value(self) -> str:
        """The value as ``#RRGGBB``, or an empty string while unset."""
        if not self._value:
            return ""
        try:
            return to_hex(self._value)
        except ParseError:
            return ""

    # --- updates ---

    def set_value(self, value: str) -> None:
        """Replace the value from a CSS string.

        Unparseable strings are ignored: nothing changes and nothing is emitted.
        """
        if value == self._value:
            return
        try:
            h, s, light, a = to_hsla(value)
        except ParseError:
            log.debug("Ignoring unparseable color %r", value)
            return

        # Rounding noise from the string round-trip must not move the knobs.
        if round_half_up(self._hue) != round_half_up(h):
            self._hue = h
        if round_half_up(self._saturation) != round_half_up(s):
            self._saturation = s
        if round_half_up(self._lightness) != round_half_up(light):
            self._lightness = light
        self._transparency = a

        self._value = value
        self.changed.emit(self._value)

    def clear(self) -> None:
        """Return to the unset state: empty value, components (0, 0, 0, 1)."""
        if not self._value:
            return
        self._value = ""
        self._hue = 0.0
        self._saturation = 0.0
        self._lightness = 0.0
        self._transparency = 1.0
        self.changed.emit(self._value)

    def set_component(self, component: Component, value: float) -> None:
        """Overwrite one component and rebuild the value from all four."""
        if component is Component.HUE:
            self._hue = value
        elif component is Component.SATURATION:
            self._saturation = value
        elif component is Component.LIGHTNESS:
            self._lightness = value
        else:
            self._transparency = value
        self._recompute()

    def set_saturation_lightness(self, saturation: float, lightness: float) -> None:
        self._saturation = saturation
        self._lightness = lightness
        self._recompute()

    def apply_hex_text(self, text: str) -> bool:
        """Accept typed text if it is a color, storing it as upper-case hex.

        Returns ``False`` when the text is not a color; the caller should then
        redisplay :attr:`hex_value`.
        """
        try:
            hex_value = to_hex(text)
        except ParseError:
            log.debug("Rejected hex entry %r", text)
            return False
        self.set_value(hex_value)
        return True

    def _recompute(self) -> None:
        self._value = from_hsla(self._hue, self._saturation, self._lightness, self._transparency)
        self.changed.emit(self._value)
