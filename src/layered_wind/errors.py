"""Exception types raised by layered wind models."""

from __future__ import annotations


class WindModelError(Exception):
    """Base class for wind model failures."""


class WindConfigurationError(WindModelError, ValueError):
    """Raised when a wind profile cannot be built from the given layers."""


class DegenerateBracketError(WindModelError, ZeroDivisionError):
    """Raised when two bracketing layers share an altitude.

    The interpolation weight ``(alt - lower) / (upper - lower)`` is undefined
    in that case.
    """

    def __init__(self, altitude: float) -> None:
        super().__init__(f"cannot interpolate between two layers at the same altitude {altitude}.")
        self.altitude = altitude
