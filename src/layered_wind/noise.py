"""Pink (1/f^alpha) noise generation."""

from __future__ import annotations

import numpy as np


class PinkNoise:
    """IIR-filtered Gaussian noise with a ``1/f^alpha`` power spectrum.

    Parameters
    ----------
    alpha
        Spectral exponent. ``0`` gives white noise, ``5/3`` approximates the
        Kolmogorov turbulence spectrum.
    poles
        Number of IIR filter poles. More poles follow the spectrum further
        towards low frequencies.
    rng
        Random source. A seeded generator makes the sequence reproducible.
    """

    def __init__(self, alpha: float, poles: int, rng: np.random.Generator | None = None) -> None:
        if poles < 1:
            raise ValueError(f"poles must be at least 1, got {poles}.")
        self.alpha = float(alpha)
        self.poles = int(poles)
        self.rng = np.random.default_rng() if rng is None else rng

        self.multipliers = np.zeros(self.poles)
        a = 1.0
        for i in range(self.poles):
            a = (i - self.alpha / 2.0) * a / (i + 1)
            self.multipliers[i] = a
        self.history = np.zeros(self.poles)

        # Warm the filter so the first returned values are already correlated.
        for _ in range(5 * self.poles):
            self.next_value()

    def next_value(self) -> float:
        """Draw the next noise sample."""
        x = float(self.rng.standard_normal())
        x -= float(np.dot(self.multipliers, self.history))
        self.history[1:] = self.history[:-1]
        self.history[0] = x
        return x
