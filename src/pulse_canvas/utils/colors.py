"""
CSS colour string helpers for Pulse Canvas.

Pulse colours are configured with the strings a web canvas accepts
('rgba(0, 0, 0, 1)', '#ff8800', 'hsl(120, 100%, 50%)', 'red'). QColor only
understands hex and SVG names, so the functional rgb()/hsl() forms and
CSS-ordered #RRGGBBAA are parsed here.
"""

import logging
import re
from typing import Optional

from PyQt6.QtGui import QColor


# Module logger
logger = logging.getLogger(__name__)


_NUMBER = r"\s*([-+]?(?:\d+\.?\d*|\.\d+))(%?)\s*"
_RGB_RE = re.compile(
    rf"^rgba?\({_NUMBER},{_NUMBER},{_NUMBER}(?:,{_NUMBER})?\)$", re.IGNORECASE
)
_HSL_RE = re.compile(
    rf"^hsla?\({_NUMBER},{_NUMBER},{_NUMBER}(?:,{_NUMBER})?\)$", re.IGNORECASE
)
_HEX8_RE = re.compile(r"^#([0-9a-f]{6})([0-9a-f]{2})$", re.IGNORECASE)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _channel(number: str, percent: str) -> int:
    """Convert an rgb() channel (0-255 or percentage) to 0-255."""
    value = float(number)
    if percent:
        value = value * 255.0 / 100.0
    return int(round(_clamp(value, 0.0, 255.0)))


def _alpha(number: Optional[str], percent: Optional[str]) -> float:
    """Convert an alpha component (0-1 or percentage) to 0.0-1.0."""
    if number is None:
        return 1.0
    value = float(number)
    if percent:
        value /= 100.0
    return _clamp(value)


def parse_color(text: str) -> Optional[QColor]:
    """
    Parse a CSS colour string.

    Args:
        text: Colour in rgb()/rgba()/hsl()/hsla(), hex, or SVG name form

    Returns:
        QColor, or None if the string is not a colour

    Example:
        >>> parse_color("rgb(255, 128, 0)").green()
        128
    """
    if not isinstance(text, str):
        return None
    value = text.strip()

    match = _RGB_RE.match(value)
    if match:
        r, rp, g, gp, b, bp, a, ap = match.groups()
        color = QColor(_channel(r, rp), _channel(g, gp), _channel(b, bp))
        color.setAlphaF(_alpha(a, ap))
        return color

    match = _HSL_RE.match(value)
    if match:
        h, _, s, _, l, _, a, ap = match.groups()
        color = QColor.fromHslF(
            (float(h) % 360.0) / 360.0,
            _clamp(float(s) / 100.0),
            _clamp(float(l) / 100.0),
            _alpha(a, ap),
        )
        return color

    # QColor reads 8-digit hex as #AARRGGBB, CSS as #RRGGBBAA
    match = _HEX8_RE.match(value)
    if match:
        color = QColor(f"#{match.group(1)}")
        color.setAlpha(int(match.group(2), 16))
        return color

    color = QColor(value)
    if not color.isValid():
        return None
    return color


def is_valid_color(text: str) -> bool:
    """Check whether a string parses as a colour."""
    return parse_color(text) is not None


def to_rgba_string(color: QColor, alpha: Optional[float] = None) -> str:
    """
    Format a QColor as a CSS rgba() string.

    Args:
        color: Source colour
        alpha: Alpha override in 0.0-1.0 (default: the colour's own alpha)

    Returns:
        String such as 'rgba(0, 0, 0, 0.25)'
    """
    a = color.alphaF() if alpha is None else _clamp(alpha)
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {a:g})"


def with_alpha(text: str, alpha: float) -> str:
    """
    Re-express a colour string with the same RGB and a new alpha.

    The colour's own alpha is discarded.

    Args:
        text: Source colour string
        alpha: Alpha in 0.0-1.0

    Returns:
        rgba() string

    Raises:
        ValueError: If text is not a colour

    Example:
        >>> with_alpha("rgba(255, 0, 0, 0.5)", 1)
        'rgba(255, 0, 0, 1)'
    """
    color = parse_color(text)
    if color is None:
        raise ValueError(f"Not a colour: {text!r}")
    return to_rgba_string(color, alpha)
