"""
Shared pytest configuration for Pulse Canvas.

Qt runs on the offscreen platform so the suite works without a display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tests.fixtures import ManualTimer, MockSurface, RecordingRenderer


@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def renderer():
    """Call-recording renderer."""
    return RecordingRenderer()


@pytest.fixture
def surface(renderer):
    """300x150 mock surface drawing into the recording renderer."""
    return MockSurface(300, 150, renderer)


@pytest.fixture
def timer():
    """Manually driven timer."""
    return ManualTimer()
