"""Pink-noise turbulence model used as the default layered-wind delegate."""

from __future__ import annotations

import logging
import math

import numpy as np

from .noise import PinkNoise
from .types import velocity_from_heading

logger = logging.getLogger(__name__)

# Kolmogorov spectral exponent for atmospheric turbulence.
ALPHA = 5.0 / 3.0
POLES = 2
# Standard deviation of the raw PinkNoise output for ALPHA/POLES above.
NOISE_STDDEV = 2.252
# Seconds between noise samples; values in between are linearly interpolated.
DELTA_T = 0.05
SEED_RANDOMIZATION = 0x7343AA03


class PinkNoiseWindModel:
    """Horizontal wind with pink-noise speed fluctuations around an average.

    Parameters
    ----------
    seed
        Seed for the noise stream. Identical seeds give identical wind
        histories for identical query sequences.

    Notes
    -----
    Direction defaults to ``pi / 2`` (a wind blowing towards east). The noise
    stream advances with query time, so one instance must not be shared
    between threads.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = (int(seed) ^ SEED_RANDOMIZATION) & 0xFFFFFFFF
        self.average = 0.0
        self.direction = math.pi / 2.0
        self.standard_deviation = 0.0

        self._noise: PinkNoise | None = None
        self._time1 = 0.0
        self._value1 = 0.0
        self._value2 = 0.0

    def set_average(self, average: float) -> None:
        self.average = max(float(average), 0.0)

    def set_direction(self, direction: float) -> None:
        self.direction = float(direction)

    def set_standard_deviation(self, standard_deviation: float) -> None:
        self.standard_deviation = max(float(standard_deviation), 0.0)

    @property
    def turbulence_intensity(self) -> float:
        """Return standard deviation relative to the average speed."""
        if math.isclose(self.average, 0.0, abs_tol=1e-12):
            if math.isclose(self.standard_deviation, 0.0, abs_tol=1e-12):
                return 0.0
            return 1000.0
        return self.standard_deviation / self.average

    def set_turbulence_intensity(self, intensity: float) -> None:
        """Set the standard deviation as a fraction of the current average."""
        self.set_standard_deviation(float(intensity) * self.average)

    def wind_velocity(self, time: float, altitude: float) -> np.ndarray:
        """Return wind velocity using the configured average and direction."""
        return self.wind_velocity_for(time, altitude, self.average, self.direction)

    def wind_velocity_for(self, time: float, altitude: float, average: float, direction: float) -> np.ndarray:
        """Return wind velocity for an explicit base speed and direction.

        Parameters
        ----------
        time
            Simulation time in seconds, non-negative.
        altitude
            Query altitude. Turbulence here does not vary with altitude.
        average
            Base wind speed to perturb.
        direction
            Wind direction in radians.

        Returns
        -------
        np.ndarray
            ``[east, north, up]`` velocity with shape ``(3,)``.

        Raises
        ------
        ValueError
            If ``time`` is negative or infinite.
        """
        del altitude
        time = float(time)
        if time < 0.0 or math.isinf(time):
            raise ValueError(f"Requesting wind speed at t={time}")

        if self._noise is None or time < self._time1:
            if self._noise is not None:
                logger.debug("restarting noise stream at t=%f (last sample t=%f)", time, self._time1)
            self._reset()

        while self._time1 + DELTA_T < time:
            self._value1 = self._value2
            self._value2 = self._noise.next_value()
            self._time1 += DELTA_T

        a = (time - self._time1) / DELTA_T
        noise = self._value1 * (1.0 - a) + self._value2 * a
        speed = float(average) + noise * self.standard_deviation / NOISE_STDDEV
        return velocity_from_heading(speed, float(direction))

    def _reset(self) -> None:
        self._noise = PinkNoise(ALPHA, POLES, np.random.default_rng(self.seed))
        self._time1 = 0.0
        self._value1 = self._noise.next_value()
        self._value2 = self._noise.next_value()
