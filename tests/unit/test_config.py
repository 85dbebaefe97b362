"""
Unit tests for PulseConfig.

Tests defaults, normalisation of counts, validation failures and the ways a
caller can pass options.
"""

import pytest
from pydantic import ValidationError

from pulse_canvas.core import InvalidConfiguration, PulseConfig, load_config
from pulse_canvas.core.config import DEFAULT_COLOR, DEFAULT_TRAILING_COLOR


class TestDefaults:
    """Test default option values."""

    def test_defaults(self):
        """Test every documented default."""
        config = PulseConfig()

        assert config.markup == (1.0, -0.466, 0.733)
        assert config.distribution == 2.5
        assert config.height is None
        assert config.repeat == 1
        assert config.trailed is False
        assert config.animated is False
        assert config.speed == 50
        assert config.weight == 5
        assert config.color == DEFAULT_COLOR
        assert config.trailing_color == DEFAULT_TRAILING_COLOR
        assert config.interval == 4

    def test_preset_name_markup(self):
        """Test markup may be given as a preset name."""
        config = PulseConfig.from_options(markup="author")

        assert len(config.markup) == 12
        assert config.markup[2] == 1.0

    def test_markup_is_copied(self):
        """Test later changes to the caller's list do not leak in."""
        samples = [0.5, -0.5]
        config = PulseConfig.from_options(markup=samples)
        samples.append(1.0)

        assert config.markup == (0.5, -0.5)

    def test_config_is_frozen(self):
        """Test options cannot be reassigned after construction."""
        config = PulseConfig()

        with pytest.raises(ValidationError):
            config.repeat = 3


class TestNormalisation:
    """Test clamping of out-of-range counts."""

    @pytest.mark.parametrize("repeat", [0, -1, -10])
    def test_repeat_floor(self, repeat):
        """Test repeat below 1 becomes 1."""
        assert PulseConfig.from_options(repeat=repeat).repeat == 1

    @pytest.mark.parametrize("interval", [-1, -4])
    def test_interval_floor(self, interval):
        """Test negative interval becomes 0."""
        assert PulseConfig.from_options(interval=interval).interval == 0

    @pytest.mark.parametrize("speed", [0, -50])
    def test_speed_floor(self, speed):
        """Test speed below 1ms becomes 1."""
        assert PulseConfig.from_options(speed=speed).speed == 1

    def test_fractional_speed_accepted(self):
        """Test a fractional step time is kept as given."""
        assert PulseConfig.from_options(speed=33.3).speed == pytest.approx(33.3)


class TestValidation:
    """Test rejected configurations."""

    def test_empty_markup(self):
        """Test empty markup fails fast."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            PulseConfig.from_options(markup=[])

        assert exc_info.value.field == "markup"

    def test_single_sample_without_padding(self):
        """Test a one-sample sequence is rejected (no width to spread over)."""
        with pytest.raises(InvalidConfiguration):
            PulseConfig.from_options(markup=[1.0], interval=0)

    def test_single_sample_with_padding_is_fine(self):
        """Test padding makes a one-sample markup drawable."""
        config = PulseConfig.from_options(markup=[1.0], interval=1)

        assert config.markup == (1.0,)

    def test_unknown_preset(self):
        """Test unknown preset names are rejected."""
        with pytest.raises(InvalidConfiguration):
            PulseConfig.from_options(markup="nope")

    @pytest.mark.parametrize("distribution", [0, -2.5])
    def test_non_positive_distribution(self, distribution):
        """Test distribution must be positive."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            PulseConfig.from_options(distribution=distribution)

        assert exc_info.value.field == "distribution"

    def test_bad_color(self):
        """Test colour strings are checked."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            PulseConfig.from_options(color="not-a-colour")

        assert exc_info.value.field == "color"
        assert "not-a-colour" in str(exc_info.value)

    def test_unknown_option(self):
        """Test misspelt options are not silently ignored."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            PulseConfig.from_options(colour="red")

        assert exc_info.value.field == "colour"

    def test_non_numeric_markup(self):
        """Test markup samples must be numbers."""
        with pytest.raises(InvalidConfiguration):
            PulseConfig.from_options(markup=["high", "low"])


class TestLoadConfig:
    """Test the option merging helper."""

    def test_trailing_color_alias(self):
        """Test the camelCase trailingColor option is accepted."""
        config = load_config(trailingColor="rgba(255, 0, 0, 0.5)")

        assert config.trailing_color == "rgba(255, 0, 0, 0.5)"

    def test_dict_with_overrides(self):
        """Test keyword options override dict entries."""
        config = load_config({"repeat": 2, "animated": True}, repeat=5)

        assert config.repeat == 5
        assert config.animated is True

    def test_existing_config_returned_as_is(self):
        """Test a config without overrides is reused."""
        config = PulseConfig.from_options(weight=2)

        assert load_config(config) is config

    def test_existing_config_with_overrides(self):
        """Test overrides produce a validated copy."""
        base = PulseConfig.from_options(weight=2, trailingColor="#ff0000")

        config = load_config(base, animated=True)

        assert config.animated is True
        assert config.weight == 2
        assert config.trailing_color == "#ff0000"
        assert base.animated is False

    def test_overrides_still_validated(self):
        """Test overrides cannot bypass validation."""
        with pytest.raises(InvalidConfiguration):
            load_config(PulseConfig(), markup=[])
