"""Build a layered wind profile and plot base wind and turbulence."""

from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import numpy as np

from layered_wind import WindProfileConfig
from layered_wind.plotting import plot_wind_history, plot_wind_profile

logging.basicConfig(level=logging.INFO, format="%(message)s")

PROFILE = {
    "degrees": True,
    "turbulence_intensity": 0.15,
    "seed": 10,
    "layers": [
        {"altitude": 0.0, "speed": 4.0, "direction": 200.0},
        {"altitude": 300.0, "speed": 7.5, "direction": 240.0},
        {"altitude": 1200.0, "speed": 12.0, "direction": 280.0},
        {"altitude": 3000.0, "speed": 18.0, "direction": 310.0},
    ],
}


if __name__ == "__main__":
    model = WindProfileConfig.from_mapping(PROFILE).build()
    logging.info(f"Layers: {len(model.layers)}, turbulence std: {model.turbulence.standard_deviation:.3g}")

    altitudes = np.linspace(-200.0, 3500.0, 200)
    plot_wind_profile(model, altitudes)
    plot_wind_history(model, np.arange(0.0, 60.0, 0.05), altitude=800.0)

    speed, direction = model.base_wind(800.0)
    logging.info(f"Base wind at 800 m: {speed:.3g} m/s towards {np.degrees(direction):.3g} deg")
    plt.show()
