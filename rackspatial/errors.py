# -*- coding: utf-8 -*-
"""Exception types raised by rackspatial."""


class RackSpatialError(Exception):
    """Base class for all rackspatial errors."""


class InvalidConfigError(RackSpatialError, ValueError):
    """Raised when a pattern configuration cannot be used."""


class RenameConflictError(RackSpatialError):
    """Raised when rename requests are built from a preview that still has conflicts."""

    def __init__(self, conflicts):
        """Initialize the error.

        Parameters:
        -----------
        conflicts : list of str
            Labels flagged as conflicting
        """
        self.conflicts = list(conflicts)
        super().__init__(f"{len(self.conflicts)} conflicting label(s): {', '.join(self.conflicts)}")
