"""
Pulse view widget for Pulse Canvas.

PulseView is the on-screen counterpart of an HTML canvas element: it owns an
ImageSurface, takes its size from the surface, and repaints whenever the
surface is drawn on.
"""

import logging
from typing import Any, Optional

from PyQt6.QtCore import QPoint
from PyQt6.QtGui import QPainter, QPaintEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

from pulse_canvas.gui.pulse import Pulse
from pulse_canvas.gui.qt_backend import ImageSurface, QtTimer


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_VIEW_WIDTH = 300
DEFAULT_VIEW_HEIGHT = 150


class PulseView(QWidget):
    """
    Widget that displays an ImageSurface.

    The widget has a fixed size equal to the surface size, so a Pulse that
    sets the surface width/height resizes the widget too.

    Example:
        view = PulseView(height=60)
        pulse = view.create_pulse(markup="author", animated=True)
        layout.addWidget(view)
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        width: int = DEFAULT_VIEW_WIDTH,
        height: int = DEFAULT_VIEW_HEIGHT
    ):
        """
        Initialize the view.

        Args:
            parent: Parent widget
            width: Initial surface width in pixels
            height: Initial surface height in pixels
        """
        super().__init__(parent)
        self._surface = ImageSurface(width, height, self)
        self._surface.resized.connect(self._on_surface_resized)
        self._surface.changed.connect(self.update)
        self._pulse: Optional[Pulse] = None

        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setFixedSize(self._surface.width, self._surface.height)

    @property
    def surface(self) -> ImageSurface:
        """Surface a Pulse draws on."""
        return self._surface

    @property
    def pulse(self) -> Optional[Pulse]:
        """Pulse created through create_pulse(), if any."""
        return self._pulse

    def create_pulse(self, **options: Any) -> Pulse:
        """
        Create a Pulse on this view's surface with a QTimer owned by the view.

        Any pulse previously created here is paused first.

        Args:
            **options: PulseConfig options

        Returns:
            The new Pulse
        """
        if self._pulse is not None:
            self._pulse.pause_animation()
        self._pulse = Pulse(self._surface, timer=QtTimer(self), **options)
        return self._pulse

    def _on_surface_resized(self, width: int, height: int) -> None:
        self.setFixedSize(width, height)
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        """Blit the surface image."""
        painter = QPainter(self)
        try:
            painter.drawImage(QPoint(0, 0), self._surface.image)
        finally:
            painter.end()
