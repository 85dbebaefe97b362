"""
Custom widgets for Pulse Canvas.
"""

from pulse_canvas.gui.widgets.pulse_view import PulseView

__all__ = [
    "PulseView",
]
