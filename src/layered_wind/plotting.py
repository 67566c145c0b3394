"""Matplotlib helpers for inspecting wind profiles."""

from __future__ import annotations

from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np

from .layered import LayeredWindModel


def plot_wind_profile(model: LayeredWindModel, altitudes: Iterable[float], title: str = "Wind Profile"):
    """Plot base wind speed and direction against altitude.

    Observed layers are marked on both panels.

    Returns
    -------
    tuple
        ``(fig, (speed_ax, direction_ax))``.
    """
    altitudes = np.asarray(list(altitudes), dtype=float)
    profile = model.wind_profile(altitudes)
    layers = np.array([layer.as_tuple() for layer in model.layers], dtype=float)

    fig, (speed_ax, direction_ax) = plt.subplots(1, 2, sharey=True, figsize=(10, 6))
    speed_ax.plot(profile[:, 0], altitudes, label="Interpolated", color="tab:blue")
    speed_ax.plot(layers[:, 1], layers[:, 0], "o", label="Layers", color="tab:red")
    speed_ax.set_xlabel("Wind speed")
    speed_ax.set_ylabel("Altitude")
    speed_ax.legend()
    speed_ax.grid(True)

    direction_ax.plot(np.degrees(profile[:, 1]), altitudes, label="Interpolated", color="tab:blue")
    direction_ax.plot(np.degrees(layers[:, 2]), layers[:, 0], "o", label="Layers", color="tab:red")
    direction_ax.set_xlabel("Direction (deg)")
    direction_ax.grid(True)

    fig.suptitle(title)
    fig.tight_layout()
    return fig, (speed_ax, direction_ax)


def plot_wind_history(model: LayeredWindModel, times: Iterable[float], altitude: float, title: str = "Wind Velocity"):
    """Plot the turbulent wind velocity components at a fixed altitude over time."""
    times = np.asarray(list(times), dtype=float)
    velocities = np.array([model.wind_velocity(t, altitude) for t in times])

    fig, ax = plt.subplots()
    for i, label in enumerate(("East", "North", "Up")):
        ax.plot(times, velocities[:, i], label=label)
    ax.set_title(title)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Wind velocity")
    ax.legend()
    ax.grid(True)
    fig.tight_layout()
    return fig, ax
