"""
Utility functions for Pulse Canvas.

This module provides logging setup and CSS colour parsing.
"""

from pulse_canvas.utils.logging import (
    setup_logging,
    log_system_info,
    log_operation,
)

from pulse_canvas.utils.colors import (
    parse_color,
    is_valid_color,
    to_rgba_string,
    with_alpha,
)

__all__ = [
    # Logging
    "setup_logging",
    "log_system_info",
    "log_operation",

    # Colours
    "parse_color",
    "is_valid_color",
    "to_rgba_string",
    "with_alpha",
]
