"""Swatch presentation — derive the swatch's paint parameters from the picker value."""

from __future__ import annotations

from dataclasses import dataclass

from swatchpick.config.constants import TOO_WHITE_CONTRAST_THRESHOLD
from swatchpick.core.color_model import ParseError, contrast_ratio


@dataclass(frozen=True)
class SwatchStyle:
    fill_color: str
    show_outline: bool
    show_focus_ring: bool


def is_too_white(color: str) -> bool:
    """Return True if *color* would be lost against a light background."""
    if not color:
        return False
    try:
        return contrast_ratio(color) < TOO_WHITE_CONTRAST_THRESHOLD
    except ParseError:
        return False


def present(color: str, dialog_open: bool) -> SwatchStyle:
    return SwatchStyle(
        fill_color=color,
        show_outline=is_too_white(color),
        show_focus_ring=dialog_open,
    )
