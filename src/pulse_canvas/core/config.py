"""
Pulse configuration model.

PulseConfig collects every option a Pulse accepts, with its default, in one
validated and immutable structure. Counts that would make no sense when
negative are clamped rather than rejected:

    - repeat   < 1 becomes 1
    - interval < 0 becomes 0
    - speed    < 1 becomes 1 (milliseconds per animation step)

Everything else that cannot yield a drawable waveform (empty markup, bad
colour strings, non-positive spacing) raises InvalidConfiguration.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from pulse_canvas.core.exceptions import InvalidConfiguration
from pulse_canvas.core.waveform import (
    DEFAULT_PRESET,
    PULSE_PRESETS,
    get_preset,
    sequence_length,
)
from pulse_canvas.utils.colors import is_valid_color


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_DISTRIBUTION = 2.5
DEFAULT_REPEAT = 1
DEFAULT_SPEED_MS = 50
DEFAULT_WEIGHT = 5.0
DEFAULT_COLOR = "rgba(0, 0, 0, 1)"
DEFAULT_TRAILING_COLOR = "rgba(0, 0, 0, 0)"
DEFAULT_INTERVAL = 4


class PulseConfig(BaseModel):
    """
    Options for a Pulse.

    Attributes:
        markup: Amplitude samples (-1.0 to 1.0) or a preset name
        distribution: Pixel spacing between consecutive samples
        height: Surface height override (None keeps the surface's height)
        repeat: Number of markup repetitions
        trailed: Leave a fading trail behind the sweep after the first pass
        animated: Animate the waveform as a sweeping reveal
        speed: Milliseconds per animation step
        weight: Stroke width in pixels
        color: Stroke colour
        trailing_color: Colour the line gradients to (stored, not drawn)
        interval: Number of zero samples around and between markups
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    markup: Tuple[float, ...] = Field(default=PULSE_PRESETS[DEFAULT_PRESET])
    distribution: float = DEFAULT_DISTRIBUTION
    height: Optional[float] = None
    repeat: int = DEFAULT_REPEAT
    trailed: bool = False
    animated: bool = False
    speed: float = DEFAULT_SPEED_MS
    weight: float = DEFAULT_WEIGHT
    color: str = DEFAULT_COLOR
    trailing_color: str = Field(default=DEFAULT_TRAILING_COLOR, alias="trailingColor")
    interval: int = DEFAULT_INTERVAL

    @field_validator("markup", mode="before")
    @classmethod
    def _resolve_markup(cls, value: Any) -> Any:
        if isinstance(value, str):
            return get_preset(value)
        if value is None:
            return PULSE_PRESETS[DEFAULT_PRESET]
        try:
            return tuple(value)
        except TypeError:
            # Not iterable; let the tuple validator report it
            return value

    @field_validator("markup")
    @classmethod
    def _check_markup(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        if len(value) == 0:
            raise ValueError("markup must contain at least one sample")
        return value

    @field_validator("distribution")
    @classmethod
    def _check_distribution(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("distribution must be positive")
        return value

    @field_validator("height")
    @classmethod
    def _check_height(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value < 0:
            raise ValueError("height must not be negative")
        return value

    @field_validator("weight")
    @classmethod
    def _check_weight(cls, value: float) -> float:
        if value < 0:
            raise ValueError("weight must not be negative")
        return value

    @field_validator("repeat")
    @classmethod
    def _clamp_repeat(cls, value: int) -> int:
        if value < 1:
            logger.debug(f"repeat={value} normalised to 1")
            return 1
        return value

    @field_validator("interval")
    @classmethod
    def _clamp_interval(cls, value: int) -> int:
        if value < 0:
            logger.debug(f"interval={value} normalised to 0")
            return 0
        return value

    @field_validator("speed")
    @classmethod
    def _clamp_speed(cls, value: float) -> float:
        if value < 1:
            logger.debug(f"speed={value} normalised to 1")
            return 1
        return value

    @field_validator("color", "trailing_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not is_valid_color(value):
            raise ValueError(f"not a colour: {value!r}")
        return value

    @model_validator(mode="after")
    def _check_drawable(self) -> "PulseConfig":
        # A single sample has no segment to draw and no width to spread over
        if sequence_length(len(self.markup), self.repeat, self.interval) < 2:
            raise ValueError("markup and interval must yield at least two samples")
        return self

    @classmethod
    def from_options(cls, **options: Any) -> "PulseConfig":
        """
        Build a config from keyword options.

        Accepts snake_case field names and the camelCase 'trailingColor'.

        Raises:
            InvalidConfiguration: If any option fails validation
        """
        try:
            return cls.model_validate(options)
        except ValidationError as e:
            raise _to_invalid_configuration(e, options) from e

    def merged(self, **overrides: Any) -> "PulseConfig":
        """Return a copy with some options replaced (validated)."""
        data: Dict[str, Any] = self.model_dump()
        data.update(overrides)
        if "trailingColor" in data:
            data["trailing_color"] = data.pop("trailingColor")
        return PulseConfig.from_options(**data)


def _to_invalid_configuration(
    error: ValidationError, options: Dict[str, Any]
) -> InvalidConfiguration:
    """Convert the first pydantic error into an InvalidConfiguration."""
    first = error.errors()[0]
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else None
    message = first.get("msg", "invalid configuration")
    return InvalidConfiguration(message, field=field, value=options.get(field) if field else None)


def load_config(config: Union[PulseConfig, Dict[str, Any], None] = None, **options: Any) -> PulseConfig:
    """
    Normalise the different ways a caller can pass options.

    Args:
        config: Existing PulseConfig, a dict of options, or None
        **options: Individual options, applied on top of config

    Returns:
        Validated PulseConfig
    """
    if config is None:
        return PulseConfig.from_options(**options)
    if isinstance(config, PulseConfig):
        return config.merged(**options) if options else config
    merged = dict(config)
    merged.update(options)
    return PulseConfig.from_options(**merged)
