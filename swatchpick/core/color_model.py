"""Color model — conversions between CSS color strings, HSLA components and hex.

Supported input syntax:

- ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``
- named colors (SVG/CSS keywords, including ``transparent``)
- ``rgb()`` / ``rgba()`` with numbers or percentages
- ``hsl()`` / ``hsla()`` with an optional ``deg`` unit on the hue

Commas, whitespace and ``/`` are all accepted as argument separators, so
both the legacy and the space-separated CSS forms parse.

The canonical output form is ``hsla(H, S%, L%, A)`` as produced by
:func:`from_hsla`.
"""

from __future__ import annotations

import math
import re

from PyQt6.QtGui import QColor

from swatchpick.config.constants import REFERENCE_LUMINANCE

HSLA = tuple[float, float, float, float]
RGBA = tuple[int, int, int, float]
_Quad = tuple[float, float, float, float]

_FUNC_RE = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg)?$", re.IGNORECASE)
_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_NAME_RE = re.compile(r"^[a-z]+$", re.IGNORECASE)


class ParseError(ValueError):
    """Raised when a string is not a recognizable CSS color."""

    def __init__(self, css: object) -> None:
        super().__init__(f"Not a color: {css!r}")
        self.css = css


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _split_number(token: str, css: str) -> tuple[float, str]:
    match = _NUMBER_RE.match(token)
    if match is None:
        raise ParseError(css)
    return float(match.group(1)), (match.group(2) or "").lower()


def _parse_alpha(token: str, css: str) -> float:
    value, unit = _split_number(token, css)
    if unit == "deg":
        raise ParseError(css)
    if unit == "%":
        value /= 100.0
    return _clamp(value, 0.0, 1.0)


def _parse_hex(digits: str) -> _Quad:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return float(r), float(g), float(b), a


def _parse_function(name: str, body: str, css: str) -> tuple[str, _Quad]:
    tokens = [t for t in re.split(r"[\s,/]+", body) if t]
    if len(tokens) not in (3, 4):
        raise ParseError(css)
    alpha = _parse_alpha(tokens[3], css) if len(tokens) == 4 else 1.0

    if name.startswith("rgb"):
        channels = []
        for token in tokens[:3]:
            value, unit = _split_number(token, css)
            if unit == "deg":
                raise ParseError(css)
            if unit == "%":
                value = value * 255.0 / 100.0
            channels.append(_clamp(value, 0.0, 255.0))
        return "rgb", (channels[0], channels[1], channels[2], alpha)

    hue, unit = _split_number(tokens[0], css)
    if unit == "%":
        raise ParseError(css)
    sat, sat_unit = _split_number(tokens[1], css)
    light, light_unit = _split_number(tokens[2], css)
    if "deg" in (sat_unit, light_unit):
        raise ParseError(css)
    return "hsl", (hue % 360.0, _clamp(sat, 0.0, 100.0), _clamp(light, 0.0, 100.0), alpha)


def _parse(css: str) -> tuple[str, _Quad]:
    """Parse *css* into either ``("rgb", (r, g, b, a))`` or ``("hsl", (h, s, l, a))``."""
    if not isinstance(css, str):
        raise ParseError(css)
    text = css.strip()
    if not text:
        raise ParseError(css)

    hex_match = _HEX_RE.match(text)
    if hex_match is not None:
        return "rgb", _parse_hex(hex_match.group(1))

    func_match = _FUNC_RE.match(text)
    if func_match is not None:
        return _parse_function(func_match.group(1).lower(), func_match.group(2), css)

    if _NAME_RE.match(text):
        qc = QColor(text.lower())
        if qc.isValid():
            return "rgb", (float(qc.red()), float(qc.green()), float(qc.blue()), qc.alphaF())

    raise ParseError(css)


def to_hsla(css: str) -> HSLA:
    """Return ``(hue, saturation, lightness, alpha)`` for *css*.

    Hue is in degrees ``[0, 360)``, saturation and lightness are percentages
    and alpha is a fraction.  Achromatic colors report a hue of 0.
    """
    kind, values = _parse(css)
    if kind == "hsl":
        return values
    r, g, b, a = values
    h, s, light, _ = QColor.fromRgbF(r / 255.0, g / 255.0, b / 255.0).getHslF()
    hue = 0.0 if h < 0 else (h * 360.0) % 360.0
    return hue, s * 100.0, light * 100.0, a


def to_rgba(css: str) -> RGBA:
    """Return ``(red, green, blue, alpha)`` with 0-255 integer channels."""
    kind, values = _parse(css)
    if kind == "rgb":
        r, g, b, a = values
        return round(r), round(g), round(b), a
    h, s, light, a = values
    qc = QColor.fromHslF(h / 360.0, s / 100.0, light / 100.0)
    return qc.red(), qc.green(), qc.blue(), a


def to_hex(css: str) -> str:
    """Normalize *css* to ``#RRGGBB``.  Always upper-case for display."""
    r, g, b, _ = to_rgba(css)
    return f"#{r:02X}{g:02X}{b:02X}"


def to_qcolor(css: str) -> QColor:
    r, g, b, a = to_rgba(css)
    qc = QColor(r, g, b)
    qc.setAlphaF(a)
    return qc


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def _format_alpha(alpha: float) -> str:
    return f"{round(_clamp(alpha, 0.0, 1.0), 4):g}"


def from_hsla(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> str:
    """Format components as the canonical ``hsla(H, S%, L%, A)`` string.

    Hue, saturation and lightness are rounded to whole numbers.
    """
    h = round_half_up(hue) % 360
    s = round_half_up(_clamp(saturation, 0.0, 100.0))
    light = round_half_up(_clamp(lightness, 0.0, 100.0))
    return f"hsla({h}, {s}%, {light}%, {_format_alpha(alpha)})"


def luminance(r: float, g: float, b: float) -> float:
    """Relative luminance of an sRGB color with 0-255 channels."""

    def _linear(channel: float) -> float:
        c = channel / 255.0
        if c <= 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def contrast_ratio(css: str, reference: float = REFERENCE_LUMINANCE) -> float:
    """Contrast between *css* and a background of luminance *reference*.

    Alpha is ignored.  The result is always >= 1.
    """
    r, g, b, _ = to_rgba(css)
    lum = luminance(r, g, b)
    lighter = max(lum, reference)
    darker = min(lum, reference)
    return (lighter + 0.05) / (darker + 0.05)
