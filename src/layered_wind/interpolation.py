"""Pure bracket lookup and blending functions for layered wind profiles."""

from __future__ import annotations

import math
from typing import Sequence

from .errors import DegenerateBracketError, WindConfigurationError
from .types import WindLayer


def find_bracket(layers: Sequence[WindLayer], altitude: float) -> tuple[WindLayer | None, WindLayer | None]:
    """Locate the layers straddling ``altitude``.

    Parameters
    ----------
    layers
        Layers sorted by ascending altitude.
    altitude
        Query altitude.

    Returns
    -------
    tuple[WindLayer | None, WindLayer | None]
        ``(lower, upper)`` where ``upper`` is the first layer at or above
        ``altitude``. ``lower`` is ``None`` below the lowest layer and
        ``upper`` is ``None`` above the highest one.
    """
    lower = None
    for layer in layers:
        if layer.altitude >= altitude:
            return lower, layer
        lower = layer
    return lower, None


def interpolate(v1: float, v2: float, weight: float) -> float:
    return v1 + (v2 - v1) * weight


def blend_layers(lower: WindLayer | None, upper: WindLayer | None, altitude: float) -> tuple[float, float]:
    """Return the base wind ``(speed, direction)`` between two layers.

    Speed is interpolated linearly. Direction is blended as unit vectors and
    recombined with ``atan2``, so ``-170`` and ``170`` degrees meet at ``180``
    instead of ``0``. With one side missing the other layer is used as is.

    Raises
    ------
    WindConfigurationError
        If both layers are missing.
    DegenerateBracketError
        If both layers share an altitude.
    """
    if lower is None and upper is None:
        raise WindConfigurationError("at least one layer is required to compute wind.")
    if lower is None:
        return upper.speed, upper.direction
    if upper is None:
        return lower.speed, lower.direction

    span = upper.altitude - lower.altitude
    if span == 0.0:
        raise DegenerateBracketError(lower.altitude)
    a = (altitude - lower.altitude) / span

    speed = interpolate(lower.speed, upper.speed, a)
    sin_sum = (1.0 - a) * math.sin(lower.direction) + a * math.sin(upper.direction)
    cos_sum = (1.0 - a) * math.cos(lower.direction) + a * math.cos(upper.direction)
    return speed, math.atan2(sin_sum, cos_sum)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def describe_layer(layer: WindLayer | None) -> str:
    """Format a layer for log messages, ``"(null)"`` when absent."""
    if layer is None:
        return "(null)"
    return "%dft %ddegrees %dspeed" % (
        _round_half_up(layer.altitude),
        _round_half_up(math.degrees(layer.direction)),
        _round_half_up(layer.speed),
    )
