"""
Capabilities a Pulse draws and animates through.

A Pulse never talks to Qt directly. It needs a surface it can size and get a
renderer from, a renderer with canvas-style path and gradient primitives,
and a timer that can call it back repeatedly. The Qt implementations live in
pulse_canvas.gui.qt_backend; tests supply in-memory ones.
"""

from typing import Any, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class Gradient(Protocol):
    """Linear gradient with canvas-style colour stops."""

    def add_color_stop(self, offset: float, color: str) -> None:
        """Add a stop at offset (0.0-1.0) with a CSS colour string."""
        ...


@runtime_checkable
class Renderer(Protocol):
    """Path-based 2D drawing context."""

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def begin_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def stroke(self) -> None:
        ...

    def set_stroke_style(self, style: Union[str, Gradient]) -> None:
        ...

    def set_line_width(self, width: float) -> None:
        ...

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> Gradient:
        ...


@runtime_checkable
class Surface(Protocol):
    """Resizable raster surface (the canvas element)."""

    width: int
    height: int

    def get_renderer(self) -> Renderer:
        ...


@runtime_checkable
class Timer(Protocol):
    """Repeating timer."""

    def every(self, interval_ms: float, callback: Callable[[], None]) -> Any:
        """Call callback every interval_ms milliseconds; returns a handle."""
        ...

    def cancel(self, handle: Any) -> None:
        """Stop the timer behind handle."""
        ...
