# -*- coding: utf-8 -*-
"""Tests for the pattern configuration."""

import pytest

from rackspatial import InvalidConfigError, PatternConfig, TraversalDirection


def test_defaults():
    """The default configuration matches the documented defaults."""
    config = PatternConfig()
    assert config.to_dict() == {
        "tolerance": 10.0,
        "direction": "serpentine",
        "pattern": "{##}",
        "start_number": 1,
        "start_row": 1,
        "start_col": 1,
    }


def test_from_dict_ignores_unknown_keys():
    """Extra keys from a settings form are ignored."""
    config = PatternConfig.from_dict({"direction": "cross_aisle", "pattern": "A{#}", "colour": "red"})
    assert config.direction is TraversalDirection.CROSS_AISLE
    assert config.pattern == "A{#}"


def test_replace_returns_new_config():
    """replace leaves the original untouched."""
    config = PatternConfig()
    changed = config.replace(start_number=5)
    assert changed.start_number == 5
    assert config.start_number == 1
    assert changed != config
    assert PatternConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "kwargs",
    [{"tolerance": -1}, {"tolerance": float("nan")}, {"direction": "spiral"}, {"start_number": -2}, {"start_row": -1}],
)
def test_invalid_values(kwargs):
    """Unusable values raise InvalidConfigError, which is also a ValueError."""
    with pytest.raises(InvalidConfigError):
        PatternConfig(**kwargs)
    with pytest.raises(ValueError):
        PatternConfig(**kwargs)


def test_unknown_override_raises():
    """Keyword overrides must name configuration fields."""
    with pytest.raises(InvalidConfigError, match="patern"):
        PatternConfig().replace(patern="ZZ{#}")
    with pytest.raises(InvalidConfigError):
        PatternConfig.coerce({"pattern": "A{#}"}, colour="red")
    assert PatternConfig.coerce({"pattern": "A{#}", "colour": "red"}).pattern == "A{#}"
