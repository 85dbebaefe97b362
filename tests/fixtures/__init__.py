"""
Test fixtures for Pulse Canvas.

Provides an in-memory surface, a call-recording renderer and a manually
driven timer so Pulse logic can be tested without a display.
"""

from tests.fixtures.mock_canvas import (
    RecordingGradient,
    RecordingRenderer,
    MockSurface,
    ManualTimer,
    FailingRenderer,
)

__all__ = [
    "RecordingGradient",
    "RecordingRenderer",
    "MockSurface",
    "ManualTimer",
    "FailingRenderer",
]
