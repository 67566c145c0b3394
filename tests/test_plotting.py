"""Tests for wind profile plotting helpers."""

from __future__ import annotations

import matplotlib
import numpy as np

matplotlib.use("Agg")
from matplotlib import pyplot as plt

from layered_wind import LayeredWindModel, WindLayer
from layered_wind.plotting import plot_wind_history, plot_wind_profile


def _model() -> LayeredWindModel:
    return LayeredWindModel([WindLayer(0.0, 4.0, 0.0), WindLayer(500.0, 9.0, 1.0), WindLayer(900.0, 6.0, 2.0)])


def test_plot_wind_profile_marks_layers() -> None:
    fig, (speed_ax, direction_ax) = plot_wind_profile(_model(), np.linspace(-100.0, 1200.0, 27))
    assert len(speed_ax.lines) == 2
    assert len(direction_ax.lines) == 2
    np.testing.assert_allclose(speed_ax.lines[1].get_xdata(), [4.0, 9.0, 6.0])
    np.testing.assert_allclose(speed_ax.lines[1].get_ydata(), [0.0, 500.0, 900.0])
    plt.close(fig)


def test_plot_wind_history_has_three_components() -> None:
    model = _model()
    model.set_standard_deviation(1.0)
    fig, ax = plot_wind_history(model, np.arange(0.0, 2.0, 0.1), altitude=250.0)
    assert [line.get_label() for line in ax.lines] == ["East", "North", "Up"]
    assert len(ax.lines[0].get_xdata()) == 20
    plt.close(fig)
