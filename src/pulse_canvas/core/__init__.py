"""
Core waveform logic for Pulse Canvas.

This module provides the waveform builders, the configuration model, the
error types and the capability interfaces a Pulse draws through.
"""

from pulse_canvas.core.exceptions import (
    PulseError,
    InvalidConfiguration,
)

from pulse_canvas.core.waveform import (
    PULSE_PRESET,
    AUTHOR_PRESET,
    PULSE_PRESETS,
    get_preset,
    surround,
    repeat_and_surround,
    build_sequence,
    sequence_length,
    map_points,
)

from pulse_canvas.core.config import (
    PulseConfig,
    load_config,
)

from pulse_canvas.core.interfaces import (
    Gradient,
    Renderer,
    Surface,
    Timer,
)

__all__ = [
    # Errors
    "PulseError",
    "InvalidConfiguration",

    # Waveform
    "PULSE_PRESET",
    "AUTHOR_PRESET",
    "PULSE_PRESETS",
    "get_preset",
    "surround",
    "repeat_and_surround",
    "build_sequence",
    "sequence_length",
    "map_points",

    # Configuration
    "PulseConfig",
    "load_config",

    # Interfaces
    "Gradient",
    "Renderer",
    "Surface",
    "Timer",
]
