"""SwatchButton — round color swatch that opens the picker dialog."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QMouseEvent, QPainter, QPainterPath, QPaintEvent, QPen
from PyQt6.QtWidgets import QWidget

from swatchpick.config.constants import (
    CHECKERBOARD_CELL_SIZE,
    CHECKERBOARD_COLOR_A,
    CHECKERBOARD_COLOR_B,
    SWATCH_FOCUS_RING_COLOR,
    SWATCH_FOCUS_RING_WIDTH,
    SWATCH_MARGIN,
    SWATCH_OUTLINE_COLOR,
    SWATCH_OUTLINE_WIDTH,
    SWATCH_SIZE,
)
from swatchpick.core.color_model import ParseError, to_qcolor
from swatchpick.core.swatch_presenter import SwatchStyle


def _fill_color(color: str) -> QColor | None:
    """Return the QColor to paint, or None for an empty swatch."""
    if not color:
        return None
    try:
        return to_qcolor(color)
    except ParseError:
        return None


class SwatchButton(QWidget):
    """Paints a :class:`SwatchStyle` as a circle over a checkerboard.

    Signals
    -------
    clicked()
        Emitted on a left-button press.
    """

    clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._style = SwatchStyle(fill_color="", show_outline=False, show_focus_ring=False)
        side = SWATCH_SIZE + 2 * SWATCH_MARGIN
        self.setFixedSize(side, side)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    @property
    def swatch_style(self) -> SwatchStyle:
        return self._style

    def set_style(self, style: SwatchStyle) -> None:
        if style != self._style:
            self._style = style
            self.update()

    def sizeHint(self) -> QSize:  # noqa: N802
        side = SWATCH_SIZE + 2 * SWATCH_MARGIN
        return QSize(side, side)

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        circle = QRectF(SWATCH_MARGIN, SWATCH_MARGIN, SWATCH_SIZE, SWATCH_SIZE)

        clip = QPainterPath()
        clip.addEllipse(circle)
        painter.save()
        painter.setClipPath(clip)
        cell = CHECKERBOARD_CELL_SIZE
        light, dark = QColor(CHECKERBOARD_COLOR_A), QColor(CHECKERBOARD_COLOR_B)
        for row in range(SWATCH_SIZE // cell + 1):
            for col in range(SWATCH_SIZE // cell + 1):
                painter.fillRect(
                    QRectF(circle.x() + col * cell, circle.y() + row * cell, cell, cell),
                    light if (row + col) % 2 == 0 else dark,
                )
        fill = _fill_color(self._style.fill_color)
        if fill is not None:
            painter.fillRect(circle, QBrush(fill))
        painter.restore()

        painter.setBrush(Qt.BrushStyle.NoBrush)
        if self._style.show_outline:
            inset = SWATCH_OUTLINE_WIDTH / 2
            painter.setPen(QPen(QColor(SWATCH_OUTLINE_COLOR), SWATCH_OUTLINE_WIDTH))
            painter.drawEllipse(circle.adjusted(inset, inset, -inset, -inset))
        if self._style.show_focus_ring:
            outset = SWATCH_FOCUS_RING_WIDTH / 2
            painter.setPen(QPen(QColor(SWATCH_FOCUS_RING_COLOR), SWATCH_FOCUS_RING_WIDTH))
            painter.drawEllipse(circle.adjusted(-outset, -outset, outset, outset))
        painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
