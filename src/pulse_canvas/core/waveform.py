"""
Waveform construction for Pulse Canvas.

Turns a short list of amplitude samples ("markup") into the padded and
optionally repeated sample sequence that is actually drawn, and maps that
sequence onto surface coordinates.

Amplitudes are conventionally in the range -1.0 to 1.0:
    -  1.0 is drawn at the top edge of the surface
    -  0.0 is drawn at the vertical centre
    - -1.0 is drawn at the bottom edge
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

import numpy as np

from pulse_canvas.core.exceptions import InvalidConfiguration


# Module logger
logger = logging.getLogger(__name__)


# =============================================================================
# Presets
# =============================================================================

PULSE_PRESET: Tuple[float, ...] = (1.0, -0.466, 0.733)

AUTHOR_PRESET: Tuple[float, ...] = (
    0.2, -0.333, 1.0, -0.333, 0.2, 0.0,
    0.0, -0.2, 0.333, -1.0, 0.333, -0.2,
)

PULSE_PRESETS: Mapping[str, Tuple[float, ...]] = MappingProxyType({
    "pulse": PULSE_PRESET,
    "author": AUTHOR_PRESET,
})

DEFAULT_PRESET = "pulse"


def get_preset(name: str) -> Tuple[float, ...]:
    """
    Look up a markup preset by name.

    Args:
        name: Preset name ("pulse" or "author")

    Returns:
        The preset samples as an immutable tuple

    Raises:
        InvalidConfiguration: If no preset has that name

    Example:
        >>> get_preset("pulse")
        (1.0, -0.466, 0.733)
    """
    try:
        return PULSE_PRESETS[name]
    except KeyError:
        raise InvalidConfiguration(
            f"Unknown markup preset (available: {', '.join(PULSE_PRESETS)})",
            field="markup",
            value=name,
        ) from None


# =============================================================================
# Sequence Builders
# =============================================================================

def surround(samples: Iterable[float], pad_count: Optional[int] = 0) -> np.ndarray:
    """
    Pad a sample sequence with zeros on both sides.

    Args:
        samples: Amplitude samples, left unchanged
        pad_count: Number of zeros before and after (negative or None means 0)

    Returns:
        New float array of length len(samples) + 2 * pad_count

    Example:
        >>> surround([1.0, -1.0], 2).tolist()
        [0.0, 0.0, 1.0, -1.0, 0.0, 0.0]
    """
    pad = max(0, int(pad_count or 0))
    data = np.asarray(list(samples), dtype=np.float64)
    return np.pad(data, (pad, pad), mode="constant", constant_values=0.0)


def repeat_and_surround(
    samples: Iterable[float],
    repeat_count: int,
    pad_count: Optional[int] = 0
) -> np.ndarray:
    """
    Repeat a padded sample sequence and pad the result once more.

    Uses half of pad_count (rounded down) both between repetitions and at the
    outer edges, so a repeated waveform carries less edge padding than
    surround() with the same pad_count.

    Args:
        samples: Amplitude samples
        repeat_count: Number of repetitions (values below 1 mean 1)
        pad_count: Padding budget, halved for every gap

    Returns:
        New float array

    Example:
        >>> len(repeat_and_surround([1.0, -1.0], 3, 4))
        22
    """
    half = max(0, int(pad_count or 0)) // 2
    unit = surround(samples, half)
    repeated = np.tile(unit, max(1, int(repeat_count)))
    return surround(repeated, half)


def build_sequence(markup: Iterable[float], repeat: int = 1, interval: int = 4) -> np.ndarray:
    """
    Build the drawable sequence for a markup.

    Args:
        markup: Raw amplitude samples
        repeat: Number of markup repetitions
        interval: Number of zero samples around the markup

    Returns:
        Padded (and, for repeat > 1, repeated) sample array
    """
    if repeat > 1:
        sequence = repeat_and_surround(markup, repeat, interval)
    else:
        sequence = surround(markup, interval)

    logger.debug(
        f"Built sequence: {len(sequence)} samples (repeat={repeat}, interval={interval})"
    )
    return sequence


def sequence_length(markup_length: int, repeat: int = 1, interval: int = 4) -> int:
    """
    Length of the sequence build_sequence() would produce.

    Args:
        markup_length: Number of raw markup samples
        repeat: Number of markup repetitions
        interval: Padding count

    Returns:
        Number of samples
    """
    interval = max(0, interval)
    if repeat > 1:
        half = interval // 2
        return repeat * (markup_length + 2 * half) + 2 * half
    return markup_length + 2 * interval


# =============================================================================
# Coordinate Mapping
# =============================================================================

def map_points(
    sequence: np.ndarray,
    distribution: float,
    height: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Map samples to surface coordinates.

    Sample i lands at x = distribution * i and
    y = height / 2 - (height / 2) * sample.

    Args:
        sequence: Sample array
        distribution: Horizontal pixel spacing between samples
        height: Surface height in pixels

    Returns:
        Tuple of (xs, ys) float arrays
    """
    samples = np.asarray(sequence, dtype=np.float64)
    mid = height / 2
    xs = distribution * np.arange(len(samples), dtype=np.float64)
    ys = mid - mid * samples
    return xs, ys
