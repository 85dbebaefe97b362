"""
Pulse: an animated one-dimensional waveform on a raster surface.

A Pulse builds its sample sequence once, sizes the surface to fit it and
draws the waveform as a single polyline. When animated, a repeating timer
advances a cursor across the sequence and the line is stroked with a
horizontal gradient that lights up everything behind the cursor. With
`trailed`, the part ahead of the cursor keeps a fading copy of the previous
pass once the first full pass has completed.

Example:
    view = PulseView()
    pulse = Pulse(view.surface, animated=True, trailed=True, repeat=3)
    view.show()
"""

import logging
from typing import Any, Dict, Optional, Union

import numpy as np

from pulse_canvas.core.config import PulseConfig, load_config
from pulse_canvas.core.interfaces import Renderer, Surface, Timer
from pulse_canvas.core.waveform import build_sequence, map_points
from pulse_canvas.gui.qt_backend import QtTimer
from pulse_canvas.utils.colors import with_alpha


# Module logger
logger = logging.getLogger(__name__)


class Pulse:
    """
    Waveform drawing and animation controller.

    Owns the sample sequence, the animation cursor and the timer handle.
    The surface and its renderer are only ever touched from draw(),
    set_width() and set_height().
    """

    def __init__(
        self,
        surface: Surface,
        config: Union[PulseConfig, Dict[str, Any], None] = None,
        timer: Optional[Timer] = None,
        **options: Any
    ):
        """
        Initialize the pulse and draw the first frame.

        Args:
            surface: Drawing surface (canvas) to size and draw on
            config: PulseConfig or dict of options
            timer: Repeating timer (default: a QtTimer)
            **options: Individual options, applied on top of config

        Raises:
            InvalidConfiguration: If the options cannot produce a waveform
        """
        self._config = load_config(config, **options)
        self._surface = surface

        self._timer = timer if timer is not None else QtTimer()
        self._animation: Any = None

        self._distribution = float(self._config.distribution)
        self._sequence = np.empty(0, dtype=np.float64)
        self._animation_step = 0
        self._first_iteration = True

        self._on_init()

    def _on_init(self) -> None:
        """Build the sequence, size the surface, set up animation, draw once."""
        config = self._config
        self._sequence = build_sequence(config.markup, config.repeat, config.interval)

        self._surface.width = (self.sequence_length - 1) * self._distribution
        if config.height is not None:
            self._surface.height = config.height

        if config.animated:
            self._animation_step = 0
            self._first_iteration = True
            self.start_animation()
        else:
            self._animation_step = self.sequence_length - 1

        logger.debug(
            f"Pulse created: {self.sequence_length} samples, "
            f"{self._surface.width}x{self._surface.height}px, animated={config.animated}"
        )

        # First frame ahead of the first timer tick
        self.draw()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def config(self) -> PulseConfig:
        return self._config

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def sequence(self) -> np.ndarray:
        """Copy of the drawn sample sequence."""
        return self._sequence.copy()

    @property
    def sequence_length(self) -> int:
        return int(len(self._sequence))

    @property
    def distribution(self) -> float:
        """Pixel spacing between consecutive samples."""
        return self._distribution

    @property
    def animation_step(self) -> int:
        return self._animation_step

    @property
    def first_iteration(self) -> bool:
        return self._first_iteration

    @property
    def is_animating(self) -> bool:
        return self._animation is not None

    @property
    def progress(self) -> float:
        """Sweep position as a fraction of the sequence (0.0 to just below 1.0)."""
        return self._animation_step / self.sequence_length

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw(self) -> None:
        """Clear the surface and stroke the waveform for the current state."""
        surface = self._surface
        renderer = surface.get_renderer()
        renderer.clear(0, 0, surface.width, surface.height)

        if self._config.animated:
            renderer.set_stroke_style(self._sweep_gradient(renderer))
        else:
            renderer.set_stroke_style(self._config.color)
        renderer.set_line_width(self._config.weight)

        xs, ys = map_points(self._sequence, self._distribution, surface.height)
        renderer.begin_path()
        renderer.move_to(float(xs[0]), float(ys[0]))
        for x, y in zip(xs[1:], ys[1:]):
            renderer.line_to(float(x), float(y))
        renderer.stroke()

    def _sweep_gradient(self, renderer: Renderer):
        """Build the gradient that lights the waveform up to the cursor."""
        progress = self.progress
        color = self._config.color

        gradient = renderer.create_linear_gradient(0, 0, self._surface.width, 0)
        gradient.add_color_stop(0, with_alpha(color, 0))
        gradient.add_color_stop(progress, with_alpha(color, 1))

        if self._config.trailed and not self._first_iteration:
            gradient.add_color_stop(progress, with_alpha(color, 0))
            gradient.add_color_stop(1, with_alpha(color, 1 - progress))
        else:
            gradient.add_color_stop(progress, with_alpha(color, 0))
            gradient.add_color_stop(1, with_alpha(color, 0))
        return gradient

    # =========================================================================
    # Sizing
    # =========================================================================

    def set_width(self, width: float) -> None:
        """Stretch the waveform to a new surface width (no redraw)."""
        self._distribution = width / (self.sequence_length - 1)
        self._surface.width = width

    def set_height(self, height: float) -> None:
        """Set the surface height (no redraw)."""
        self._surface.height = height

    def resize(self, width: float, height: float) -> None:
        """
        Resize the surface.

        The sample sequence is not rebuilt and nothing is redrawn; call
        draw() afterwards when the new size must show immediately.
        """
        self.set_width(width)
        self.set_height(height)
        logger.debug(f"Pulse resized to {width}x{height}px (distribution={self._distribution:.3f})")

    # =========================================================================
    # Animation
    # =========================================================================

    def start_animation(self) -> None:
        """Start (or restart) the sweep timer without resetting the cursor."""
        if self._animation is not None:
            self._timer.cancel(self._animation)
        self._animation = self._timer.every(self._config.speed, self._on_tick)
        logger.debug(f"Pulse animation started ({self._config.speed}ms/step)")

    def pause_animation(self) -> None:
        """Stop the sweep timer, keeping the cursor where it is."""
        if self._animation is None:
            return
        self._timer.cancel(self._animation)
        self._animation = None
        logger.debug(f"Pulse animation paused at step {self._animation_step}")

    def _on_tick(self) -> None:
        """Advance the cursor one sample, wrapping at the end, and redraw."""
        last = self.sequence_length - 1
        if self._animation_step < last:
            self._animation_step += 1
        else:
            self._animation_step = 0

        self.draw()

        if self._first_iteration and self._animation_step == last:
            self._first_iteration = False
