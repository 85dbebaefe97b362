"""
Pulse Canvas - animated pulse waveforms for PyQt6.

Draws a short amplitude sequence as a padded, optionally repeated waveform
on a raster surface and animates it as a left-to-right sweep with an
optional fading trail.
"""

__version__ = "1.0.0"
__author__ = "Pulse Canvas contributors"
__license__ = "MIT"

from pulse_canvas.core import (
    PULSE_PRESETS,
    InvalidConfiguration,
    PulseConfig,
    PulseError,
    build_sequence,
    repeat_and_surround,
    surround,
)
from pulse_canvas.gui import (
    ImageSurface,
    Pulse,
    PulseView,
    QtTimer,
)

__all__ = [
    "__version__",

    # Waveform construction
    "PULSE_PRESETS",
    "surround",
    "repeat_and_surround",
    "build_sequence",

    # Configuration and errors
    "PulseConfig",
    "PulseError",
    "InvalidConfiguration",

    # Widget
    "Pulse",
    "PulseView",
    "ImageSurface",
    "QtTimer",
]
