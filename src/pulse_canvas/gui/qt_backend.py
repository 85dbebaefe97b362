"""
Qt implementations of the Pulse drawing and timer capabilities.

Classes:
    - ImageSurface: QImage-backed surface with canvas-like width/height
    - QtRenderer: QPainter renderer with path and gradient primitives
    - QtGradient: QLinearGradient accepting CSS colour stops
    - QtTimer: QTimer-backed repeating timer
"""

import logging
from typing import Callable, Dict, Optional, Union

from PyQt6.QtCore import QObject, QPointF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import (
    QBrush,
    QColor,
    QImage,
    QLinearGradient,
    QPainter,
    QPainterPath,
    QPen,
)

from pulse_canvas.utils.colors import parse_color


# Module logger
logger = logging.getLogger(__name__)


# Qt keeps one stop per offset; a second stop on the same offset is shifted
# by this much so the sweep keeps its hard edge
STOP_EPSILON = 1e-6


def _require_color(text: str) -> QColor:
    color = parse_color(text)
    if color is None:
        raise ValueError(f"Not a colour: {text!r}")
    return color


# =============================================================================
# Gradient
# =============================================================================

class QtGradient:
    """Horizontal/any-direction linear gradient with canvas-style stops."""

    def __init__(self, x0: float, y0: float, x1: float, y1: float):
        self._gradient = QLinearGradient(QPointF(x0, y0), QPointF(x1, y1))
        self._offsets: list = []

    def add_color_stop(self, offset: float, color: str) -> None:
        """
        Add a colour stop.

        Args:
            offset: Position along the gradient (0.0-1.0)
            color: CSS colour string

        Raises:
            ValueError: If offset is outside 0.0-1.0 or color is not a colour
        """
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"Gradient offset out of range: {offset}")
        qcolor = _require_color(color)

        position = float(offset)
        while position in self._offsets and position < 1.0:
            position = min(1.0, position + STOP_EPSILON)

        self._gradient.setColorAt(position, qcolor)
        if position not in self._offsets:
            self._offsets.append(position)

    @property
    def qgradient(self) -> QLinearGradient:
        """The underlying QLinearGradient."""
        return self._gradient

    def stops(self) -> list:
        """Return the (offset, QColor) stops in order."""
        return list(self._gradient.stops())


# =============================================================================
# Surface
# =============================================================================

class ImageSurface(QObject):
    """
    Raster surface backed by a transparent QImage.

    Setting width or height reallocates the image and clears it, the same
    way resizing an HTML canvas does.

    Signals:
        resized(int, int): Emitted after width or height changes
        changed(): Emitted after the renderer clears or strokes
    """

    resized = pyqtSignal(int, int)
    changed = pyqtSignal()

    def __init__(self, width: int = 300, height: int = 150, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._width = max(0, int(width))
        self._height = max(0, int(height))
        self._image = self._allocate()
        self._renderer: Optional["QtRenderer"] = None

    def _allocate(self) -> QImage:
        image = QImage(
            max(1, self._width), max(1, self._height),
            QImage.Format.Format_ARGB32_Premultiplied
        )
        image.fill(Qt.GlobalColor.transparent)
        return image

    def _set_size(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._image = self._allocate()
        self.resized.emit(self._width, self._height)

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._set_size(max(0, int(value)), self._height)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._set_size(self._width, max(0, int(value)))

    @property
    def image(self) -> QImage:
        """Current backing image."""
        return self._image

    def get_renderer(self) -> "QtRenderer":
        if self._renderer is None:
            self._renderer = QtRenderer(self)
        return self._renderer

    def save(self, path: str) -> bool:
        """Write the current image to a file (format from the extension)."""
        return self._image.save(path)


# =============================================================================
# Renderer
# =============================================================================

class QtRenderer:
    """
    Canvas-style renderer over an ImageSurface.

    Path commands accumulate into a QPainterPath; stroke() paints it with the
    current stroke style and line width.
    """

    def __init__(self, surface: ImageSurface):
        self._surface = surface
        self._path = QPainterPath()
        self._stroke_style: Union[QColor, QtGradient] = QColor(0, 0, 0)
        self._line_width = 1.0

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        painter = QPainter(self._surface.image)
        try:
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
            painter.fillRect(int(x), int(y), int(width), int(height), Qt.GlobalColor.transparent)
        finally:
            painter.end()
        self._surface.changed.emit()

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(QPointF(x, y))

    def set_stroke_style(self, style: Union[str, QtGradient]) -> None:
        if isinstance(style, QtGradient):
            self._stroke_style = style
        else:
            self._stroke_style = _require_color(style)

    def set_line_width(self, width: float) -> None:
        self._line_width = float(width)

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> QtGradient:
        return QtGradient(x0, y0, x1, y1)

    def stroke(self) -> None:
        if isinstance(self._stroke_style, QtGradient):
            brush = QBrush(self._stroke_style.qgradient)
        else:
            brush = QBrush(self._stroke_style)

        pen = QPen(brush, self._line_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)

        painter = QPainter(self._surface.image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPath(self._path)
        finally:
            painter.end()
        self._surface.changed.emit()

    @property
    def path(self) -> QPainterPath:
        """Path built since the last begin_path()."""
        return self._path


# =============================================================================
# Timer
# =============================================================================

class QtTimer:
    """
    Repeating timer on the Qt event loop.

    Each every() call creates its own QTimer; the QTimer is the handle.
    cancel() stops the QTimer and releases it from the parent.
    """

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent
        self._timers: Dict[int, QTimer] = {}

    def every(self, interval_ms: float, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setInterval(max(1, int(interval_ms)))
        timer.timeout.connect(callback)
        timer.start()
        self._timers[id(timer)] = timer
        return timer

    def cancel(self, handle: Optional[QTimer]) -> None:
        if handle is None:
            return
        handle.stop()
        # Detach from the parent so the stopped timer dies with its last reference
        handle.setParent(None)
        self._timers.pop(id(handle), None)

    def active_count(self) -> int:
        """Number of timers still running."""
        return sum(1 for t in self._timers.values() if t.isActive())
