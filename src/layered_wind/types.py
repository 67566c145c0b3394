"""Core value types and validation helpers for layered wind models."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

import numpy as np

from .errors import WindConfigurationError


def as_vector3(value: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    """Return a validated 3-element float vector.

    Parameters
    ----------
    value
        Input values convertible to a flat vector of length 3.
    name
        Field name used in validation error messages.

    Returns
    -------
    np.ndarray
        A float array with shape ``(3,)``.
    """
    arr = np.asarray(value, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must be length 3, got shape {arr.shape}.")
    return arr


def velocity_from_heading(speed: float, direction: float) -> np.ndarray:
    """Convert a horizontal speed and compass direction to ``[east, north, up]``.

    Parameters
    ----------
    speed
        Horizontal wind speed.
    direction
        Direction in radians, measured from north towards east.

    Returns
    -------
    np.ndarray
        Velocity vector with shape ``(3,)`` and zero vertical component.
    """
    return np.array([speed * math.sin(direction), speed * math.cos(direction), 0.0], dtype=float)


@dataclass(frozen=True)
class WindLayer:
    """One altitude-indexed wind observation.

    Attributes
    ----------
    altitude
        Altitude of the observation. Any unit works as long as queries use the same one.
    speed
        Horizontal wind speed, non-negative.
    direction
        Wind direction in radians.
    """

    altitude: float
    speed: float
    direction: float

    def __post_init__(self) -> None:
        for name in ("altitude", "speed", "direction"):
            try:
                value = float(getattr(self, name))
            except (TypeError, ValueError) as exc:
                raise WindConfigurationError(f"{name} must be a number, got {getattr(self, name)!r}.") from exc
            if not math.isfinite(value):
                raise WindConfigurationError(f"{name} must be finite, got {value}.")
            object.__setattr__(self, name, value)
        if self.speed < 0.0:
            raise WindConfigurationError(f"speed must be non-negative, got {self.speed}.")

    @classmethod
    def from_degrees(cls, altitude: float, speed: float, direction_deg: float) -> "WindLayer":
        """Build a layer from a direction given in degrees."""
        return cls(altitude=altitude, speed=speed, direction=math.radians(float(direction_deg)))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "WindLayer":
        """Build a layer from ``(altitude, speed, direction)``."""
        if len(values) != 3:
            raise WindConfigurationError(
                f"layer must be (altitude, speed, direction), got {len(values)} values."
            )
        return cls(altitude=values[0], speed=values[1], direction=values[2])

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.altitude, self.speed, self.direction)
