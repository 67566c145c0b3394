"""Altitude-layered wind model with delegated turbulence.

A profile is a set of wind observations at discrete altitudes. Queries between
two observations blend them (linear speed, circular-mean direction); queries
outside the observed band reuse the nearest observation. The resulting base
wind is handed to a turbulence delegate which adds time-correlated noise.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from .errors import WindConfigurationError
from .interfaces import TurbulenceModel
from .interpolation import blend_layers, describe_layer, find_bracket
from .turbulence import PinkNoiseWindModel
from .types import WindLayer, as_vector3

logger = logging.getLogger(__name__)

DEFAULT_SEED = 10


def _as_layer(value: WindLayer | Sequence[float]) -> WindLayer:
    if isinstance(value, WindLayer):
        return value
    return WindLayer.from_sequence(value)


class LayeredWindModel:
    """Wind model interpolating between altitude-indexed observations.

    Parameters
    ----------
    layers
        Wind observations as :class:`WindLayer` or ``(altitude, speed,
        direction)`` triples, in any order. The model keeps its own sorted
        copy; later changes to the caller's container have no effect.
    turbulence
        Turbulence delegate. Defaults to :class:`PinkNoiseWindModel`.
    seed
        Noise seed for the default delegate. Ignored when ``turbulence`` is given.

    Raises
    ------
    WindConfigurationError
        If ``layers`` is empty or holds malformed entries.

    Notes
    -----
    The delegate is seeded with the lowest layer's speed and direction, which
    is the reference for :meth:`set_turbulence_intensity`. Per-query base wind
    is passed to the delegate as arguments and never written into it. The
    delegate's noise stream is still shared state, so one instance must only
    be queried from one thread.
    """

    def __init__(
        self,
        layers: Iterable[WindLayer | Sequence[float]],
        turbulence: TurbulenceModel | None = None,
        seed: int = DEFAULT_SEED,
    ) -> None:
        copied = [_as_layer(layer) for layer in layers]
        if not copied:
            raise WindConfigurationError("a layered wind model needs at least one layer.")
        self._layers: tuple[WindLayer, ...] = tuple(sorted(copied, key=lambda layer: layer.altitude))

        self.turbulence = PinkNoiseWindModel(seed) if turbulence is None else turbulence
        self.turbulence.set_average(self._layers[0].speed)
        self.turbulence.set_direction(self._layers[0].direction)
        logger.debug("layered wind model built with %d layers", len(self._layers))

    @property
    def layers(self) -> tuple[WindLayer, ...]:
        """Layers sorted by ascending altitude."""
        return self._layers

    def set_standard_deviation(self, standard_deviation: float) -> None:
        self.turbulence.set_standard_deviation(standard_deviation)

    def set_turbulence_intensity(self, intensity: float) -> None:
        self.turbulence.set_turbulence_intensity(intensity)

    def base_wind(self, altitude: float) -> tuple[float, float]:
        """Return the interpolated ``(speed, direction)`` without turbulence."""
        lower, upper = find_bracket(self._layers, altitude)
        return blend_layers(lower, upper, altitude)

    def wind_profile(self, altitudes: Iterable[float]) -> np.ndarray:
        """Return base speed and direction for each altitude.

        Returns
        -------
        np.ndarray
            Array with shape ``(n, 2)``; columns are speed and direction.
        """
        rows = [self.base_wind(float(altitude)) for altitude in altitudes]
        return np.asarray(rows, dtype=float).reshape(-1, 2)

    def wind_velocity(self, time: float, altitude: float) -> np.ndarray:
        """Return the wind velocity at ``altitude`` and ``time``.

        Parameters
        ----------
        time
            Simulation time in seconds, non-negative.
        altitude
            Query altitude in the same unit as the layers.

        Returns
        -------
        np.ndarray
            ``[east, north, up]`` velocity with shape ``(3,)``.
        """
        lower, upper = find_bracket(self._layers, altitude)
        speed, direction = blend_layers(lower, upper, altitude)
        velocity = as_vector3(self.turbulence.wind_velocity_for(time, altitude, speed, direction), "wind velocity")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "interpolating alt %f between layers %s and %s returning %s",
                altitude,
                describe_layer(lower),
                describe_layer(upper),
                np.array2string(velocity, precision=3),
            )
        return velocity
