"""
GUI layer for Pulse Canvas.

Contains the Pulse controller, the Qt drawing/timer backend and the
PulseView widget.
"""

from pulse_canvas.gui.pulse import Pulse
from pulse_canvas.gui.qt_backend import (
    ImageSurface,
    QtGradient,
    QtRenderer,
    QtTimer,
)
from pulse_canvas.gui.widgets import PulseView

__all__ = [
    "Pulse",
    "ImageSurface",
    "QtGradient",
    "QtRenderer",
    "QtTimer",
    "PulseView",
]
