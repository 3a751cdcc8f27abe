# -*- coding: utf-8 -*-
"""Configuration for resequencing and pattern generation.

Every knob the engine exposes lives on PatternConfig, so a caller can rebuild a preview from a plain dict
on each change of its settings form.
"""

import math

from .core.clustering import DEFAULT_TOLERANCE
from .core.sequencer import TraversalDirection
from .errors import InvalidConfigError

DEFAULT_PATTERN = "{##}"
GRID_SPACING = 50

PATTERN_TYPES = ("row", "column", "grid")


class PatternConfig:
    """Settings shared by the resequencer and the pattern generator."""

    FIELDS = ("tolerance", "direction", "pattern", "start_number", "start_row", "start_col")

    def __init__(
        self,
        tolerance=DEFAULT_TOLERANCE,
        direction=TraversalDirection.SERPENTINE,
        pattern=DEFAULT_PATTERN,
        start_number=1,
        start_row=1,
        start_col=1,
    ):
        """Initialize a configuration.

        Parameters:
        -----------
        tolerance : float
            Maximum coordinate deviation for two entities to share a row or column
        direction : TraversalDirection or str
            Numbering convention
        pattern : str
            Label template, e.g. "A-{ROW}-{##}"
        start_number : int
            Offset for {#} placeholders (the first entity gets this number)
        start_row : int
            Offset for {ROW} placeholders
        start_col : int
            Offset for {COL} placeholders
        """
        tolerance = float(tolerance)
        if not math.isfinite(tolerance) or tolerance < 0:
            raise InvalidConfigError(f"Tolerance must be a finite non-negative number, got {tolerance}")

        for name, value in (("start_number", start_number), ("start_row", start_row), ("start_col", start_col)):
            if int(value) < 0:
                raise InvalidConfigError(f"{name} must not be negative, got {value}")

        self.tolerance = tolerance
        self.direction = TraversalDirection.coerce(direction)
        self.pattern = "" if pattern is None else str(pattern)
        self.start_number = int(start_number)
        self.start_row = int(start_row)
        self.start_col = int(start_col)

    @classmethod
    def coerce(cls, config=None, **overrides):
        """Return a configuration from None, a dict or a PatternConfig, with fields overridden.

        Unknown keys in a dict are ignored, unknown overrides raise (see replace).
        """
        if config is None:
            config = cls()
        elif isinstance(config, dict):
            config = cls.from_dict(config)
        if overrides:
            config = config.replace(**overrides)
        return config

    @classmethod
    def from_dict(cls, data):
        """Build a configuration from a dict, ignoring unknown keys."""
        return cls(**{key: data[key] for key in cls.FIELDS if key in data})

    def to_dict(self):
        """Return the configuration as a plain dict."""
        values = {key: getattr(self, key) for key in self.FIELDS}
        values["direction"] = self.direction.value
        return values

    def replace(self, **changes):
        """Return a copy with some fields changed.

        Raises InvalidConfigError for names that are not configuration fields.
        """
        unknown = sorted(set(changes) - set(self.FIELDS))
        if unknown:
            raise InvalidConfigError(f"Unknown configuration field(s): {', '.join(unknown)}")

        values = self.to_dict()
        values.update(changes)
        return PatternConfig.from_dict(values)

    def __eq__(self, other):
        """Configurations are equal when all their fields are."""
        if not isinstance(other, PatternConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        """String representation of the configuration."""
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"PatternConfig({fields})"
