"""Tests for building layered wind models from configuration."""

from __future__ import annotations

import math
import unittest

from layered_wind import LayeredWindModel, WindConfigurationError, WindLayer, WindProfileConfig


class TestWindProfileConfig(unittest.TestCase):
    def test_from_mapping_with_degrees(self) -> None:
        config = WindProfileConfig.from_mapping(
            {
                "layers": [
                    {"altitude": 0.0, "speed": 5.0, "direction": 90.0},
                    (1000.0, 10.0, 180.0),
                ],
                "degrees": True,
                "standard_deviation": 1.5,
                "unknown_key": "ignored",
            }
        )
        self.assertAlmostEqual(config.layers[0].direction, math.pi / 2.0, places=12)
        self.assertAlmostEqual(config.layers[1].direction, math.pi, places=12)
        self.assertEqual(config.standard_deviation, 1.5)

    def test_radians_by_default(self) -> None:
        config = WindProfileConfig(layers=[(0.0, 5.0, 1.0)])
        self.assertEqual(config.layers, [WindLayer(0.0, 5.0, 1.0)])

    def test_build_applies_standard_deviation(self) -> None:
        model = WindProfileConfig(layers=[(0.0, 5.0, 0.0)], standard_deviation=0.75, seed=4).build()
        self.assertIsInstance(model, LayeredWindModel)
        self.assertEqual(model.turbulence.standard_deviation, 0.75)

    def test_turbulence_intensity_takes_precedence(self) -> None:
        model = WindProfileConfig(
            layers=[(0.0, 5.0, 0.0), (100.0, 20.0, 0.0)],
            standard_deviation=3.0,
            turbulence_intensity=0.5,
        ).build()
        self.assertAlmostEqual(model.turbulence.standard_deviation, 2.5)

    def test_same_seed_builds_reproducible_models(self) -> None:
        config = WindProfileConfig(layers=[(0.0, 5.0, 0.0)], standard_deviation=1.0, seed=8)
        first, second = config.build(), config.build()
        for t in (0.0, 0.4, 2.2):
            self.assertEqual(list(first.wind_velocity(t, 0.0)), list(second.wind_velocity(t, 0.0)))

    def test_empty_config_fails_on_build(self) -> None:
        config = WindProfileConfig.from_mapping(None)
        with self.assertRaises(WindConfigurationError):
            config.build()

    def test_rejects_malformed_entries(self) -> None:
        for entry in (42, "0,5,0", {"altitude": 0.0, "speed": 5.0}):
            with self.assertRaises(WindConfigurationError):
                WindProfileConfig(layers=[entry])

    def test_rejects_missing_layer_list(self) -> None:
        for layers in (None, 5, "0,5,0"):
            with self.assertRaises(WindConfigurationError):
                WindProfileConfig.from_mapping({"layers": layers})

    def test_rejects_non_numeric_settings(self) -> None:
        for key, value in (("standard_deviation", "gusty"), ("turbulence_intensity", "high"), ("seed", None)):
            with self.assertRaises(WindConfigurationError):
                WindProfileConfig.from_mapping({"layers": [(0.0, 5.0, 0.0)], key: value})

    def test_rejects_short_degree_entries(self) -> None:
        with self.assertRaises(WindConfigurationError):
            WindProfileConfig(layers=[(0.0, 5.0)], degrees=True)


if __name__ == "__main__":
    unittest.main()
