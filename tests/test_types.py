"""Tests for wind layer validation and vector helpers."""

from __future__ import annotations

import dataclasses
import math
import unittest

import numpy as np

from layered_wind.errors import WindConfigurationError
from layered_wind.types import WindLayer, as_vector3, velocity_from_heading


class TestWindLayer(unittest.TestCase):
    def test_fields_are_coerced_to_float(self) -> None:
        layer = WindLayer(100, 5, 0)
        self.assertIsInstance(layer.altitude, float)
        self.assertIsInstance(layer.speed, float)
        self.assertEqual(layer.as_tuple(), (100.0, 5.0, 0.0))

    def test_layer_is_immutable(self) -> None:
        layer = WindLayer(100.0, 5.0, 0.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            layer.speed = 7.0

    def test_from_degrees(self) -> None:
        layer = WindLayer.from_degrees(0.0, 1.0, 180.0)
        self.assertAlmostEqual(layer.direction, math.pi, places=12)

    def test_rejects_negative_speed(self) -> None:
        with self.assertRaises(WindConfigurationError):
            WindLayer(0.0, -1.0, 0.0)

    def test_rejects_non_finite_and_non_numeric_fields(self) -> None:
        for values in ((float("nan"), 1.0, 0.0), (0.0, math.inf, 0.0), (0.0, 1.0, "north")):
            with self.assertRaises(WindConfigurationError):
                WindLayer(*values)

    def test_from_sequence_requires_three_values(self) -> None:
        self.assertEqual(WindLayer.from_sequence([1.0, 2.0, 3.0]), WindLayer(1.0, 2.0, 3.0))
        with self.assertRaises(WindConfigurationError):
            WindLayer.from_sequence([1.0, 2.0, 3.0, 4.0])


class TestVectorHelpers(unittest.TestCase):
    def test_as_vector3_flattens(self) -> None:
        np.testing.assert_array_equal(as_vector3([[1, 2, 3]], "v"), [1.0, 2.0, 3.0])

    def test_as_vector3_rejects_wrong_shape(self) -> None:
        with self.assertRaises(ValueError):
            as_vector3([1.0, 2.0], "wind velocity")

    def test_velocity_from_heading(self) -> None:
        np.testing.assert_allclose(velocity_from_heading(2.0, 0.0), [0.0, 2.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(velocity_from_heading(2.0, math.pi / 2.0), [2.0, 0.0, 0.0], atol=1e-12)


if __name__ == "__main__":
    unittest.main()
