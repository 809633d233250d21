"""Picker sub-widgets — hue slider, transparency slider and saturation/lightness plane.

Each sub-widget only reports its own value through an ``updated`` signal;
setters used to resync them from the picker state never re-emit.
"""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QLinearGradient, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QSlider, QWidget

from swatchpick.config.constants import (
    HUE_MAX,
    PLANE_INDICATOR_RADIUS,
    PLANE_MIN_SIZE,
    TRANSPARENCY_STEPS,
)


class HueSlider(QSlider):
    """Horizontal slider over hue degrees.

    Signals
    -------
    updated(float)
        Emitted with the hue in degrees when the user moves the slider.
    """

    updated = pyqtSignal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(Qt.Orientation.Horizontal, parent)
        self.setRange(0, HUE_MAX)
        stops = ", ".join(f"stop:{i / 6:.3f} hsl({i * 60 % 360}, 100%, 50%)" for i in range(7))
        self.setStyleSheet(
            f"QSlider::groove:horizontal {{ height: 8px; border-radius: 4px; "
            f"background: qlineargradient(x1:0, y1:0, x2:1, y2:0, {stops}); }}"
        )
        self.valueChanged.connect(self._on_value_changed)

    @property
    def hue(self) -> float:
        return float(self.value())

    def set_hue(self, hue: float) -> None:
        self.blockSignals(True)
        self.setValue(round(hue) % (HUE_MAX + 1))
        self.blockSignals(False)

    def _on_value_changed(self, value: int) -> None:
        self.updated.emit(float(value))


class TransparencySlider(QSlider):
    """Horizontal slider over alpha, 0 (clear) to 1 (opaque).

    Signals
    -------
    updated(float)
        Emitted with the alpha fraction when the user moves the slider.
    """

    updated = pyqtSignal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(Qt.Orientation.Horizontal, parent)
        self.setRange(0, TRANSPARENCY_STEPS)
        self.setValue(TRANSPARENCY_STEPS)
        self.valueChanged.connect(self._on_value_changed)

    @property
    def transparency(self) -> float:
        return self.value() / TRANSPARENCY_STEPS

    def set_transparency(self, alpha: float) -> None:
        self.blockSignals(True)
        self.setValue(round(max(0.0, min(1.0, alpha)) * TRANSPARENCY_STEPS))
        self.blockSignals(False)

    def set_hue(self, hue: float) -> None:
        color = QColor.fromHslF((hue % 360) / 360.0, 1.0, 0.5)
        self.setStyleSheet(
            "QSlider::groove:horizontal { height: 8px; border-radius: 4px; "
            "background: qlineargradient(x1:0, y1:0, x2:1, y2:0, "
            f"stop:0 rgba({color.red()}, {color.green()}, {color.blue()}, 0), "
            f"stop:1 rgba({color.red()}, {color.green()}, {color.blue()}, 255)); }}"
        )

    def _on_value_changed(self, value: int) -> None:
        self.updated.emit(value / TRANSPARENCY_STEPS)


class SaturationLightnessPlane(QWidget):
    """Plane of saturation (x) against lightness (y, top is light) for one hue.

    Signals
    -------
    updated(float, float)
        Emitted with ``(saturation, lightness)`` percentages on press and drag.
    """

    updated = pyqtSignal(float, float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._hue = 0.0
        self._saturation = 0.0
        self._lightness = 0.0
        self.setMinimumSize(PLANE_MIN_SIZE, PLANE_MIN_SIZE)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.CrossCursor)

    def sizeHint(self) -> QSize:  # noqa: N802
        return QSize(PLANE_MIN_SIZE, PLANE_MIN_SIZE)

    @property
    def saturation(self) -> float:
        return self._saturation

    @property
    def lightness(self) -> float:
        return self._lightness

    def set_hue(self, hue: float) -> None:
        self._hue = hue % 360
        self.update()

    def set_saturation_lightness(self, saturation: float, lightness: float) -> None:
        self._saturation = saturation
        self._lightness = lightness
        self.update()

    def pick_at(self, pos: QPointF) -> None:
        """Select the saturation/lightness under *pos* and report it."""
        w = max(1, self.width() - 1)
        h = max(1, self.height() - 1)
        x = max(0.0, min(float(w), pos.x()))
        y = max(0.0, min(float(h), pos.y()))
        self._saturation = x / w * 100.0
        self._lightness = (1.0 - y / h) * 100.0
        self.update()
        self.updated.emit(self._saturation, self._lightness)

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = self.rect()

        sat_gradient = QLinearGradient(QPointF(rect.topLeft()), QPointF(rect.topRight()))
        sat_gradient.setColorAt(0, QColor.fromHslF(self._hue / 360.0, 0.0, 0.5))
        sat_gradient.setColorAt(1, QColor.fromHslF(self._hue / 360.0, 1.0, 0.5))
        painter.fillRect(rect, sat_gradient)

        light_gradient = QLinearGradient(QPointF(rect.topLeft()), QPointF(rect.bottomLeft()))
        light_gradient.setColorAt(0, QColor(255, 255, 255, 255))
        light_gradient.setColorAt(0.5, QColor(128, 128, 128, 0))
        light_gradient.setColorAt(1, QColor(0, 0, 0, 255))
        painter.fillRect(rect, light_gradient)

        cx = self._saturation / 100.0 * (rect.width() - 1)
        cy = (1.0 - self._lightness / 100.0) * (rect.height() - 1)
        outline = QColor("black") if self._lightness > 50 else QColor("white")
        painter.setPen(QPen(outline, 1.5))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QPointF(cx, cy), PLANE_INDICATOR_RADIUS, PLANE_INDICATOR_RADIUS)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self.pick_at(event.position())

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is not None and event.buttons() & Qt.MouseButton.LeftButton:
            self.pick_at(event.position())
