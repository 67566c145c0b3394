"""Typed contracts shared by wind models and turbulence delegates.

Host simulations only need :class:`WindModel`. Layered profiles additionally
drive a :class:`TurbulenceModel` delegate that layers noise over the
interpolated base wind.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class WindModel(Protocol):
    """Define the wind query contract used by the host simulation.

    ### Notes
    - `time` is simulation time in seconds and must be non-negative.
    - Returned vectors are `[east, north, up]` with shape `(3,)`.
    """

    def set_standard_deviation(self, standard_deviation: float) -> None: ...

    def set_turbulence_intensity(self, intensity: float) -> None: ...

    def wind_velocity(self, time: float, altitude: float) -> np.ndarray: ...


@runtime_checkable
class TurbulenceModel(WindModel, Protocol):
    """Define the stateful turbulence delegate contract.

    Delegates carry a configured average speed and direction. Layered models
    supply per-query base wind through `wind_velocity_for` instead of
    rewriting that configuration on every call.

    ### Notes
    - `wind_velocity_for` must not modify the configured average/direction.
    - The noise stream itself may advance, so delegates are not thread-safe.
    """

    def set_average(self, average: float) -> None: ...

    def set_direction(self, direction: float) -> None: ...

    def wind_velocity_for(self, time: float, altitude: float, average: float, direction: float) -> np.ndarray: ...
