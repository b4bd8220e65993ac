from __future__ import annotations

import unittest

import numpy as np

from pointplot.intervals import DEFAULT_INTERVAL, Interval, infer_interval, map_value, map_values


class MapValueTests(unittest.TestCase):
    def test_maps_affinely_and_preserves_order(self) -> None:
        src = Interval(0.0, 10.0)
        dst = Interval(0.0, 100.0)
        self.assertEqual(map_value(0.0, src, dst), 0.0)
        self.assertEqual(map_value(10.0, src, dst), 100.0)
        self.assertEqual(map_value(5.0, src, dst), 50.0)
        self.assertLess(map_value(2.0, src, dst), map_value(3.0, src, dst))

    def test_round_trip_through_inverse_mapping(self) -> None:
        src = Interval(-3.5, 17.25)
        dst = Interval(12.0, 431.0)
        for value in (-3.5, 0.0, 1.0 / 3.0, 9.99, 17.25, 42.0):
            back = map_value(map_value(value, src, dst), dst, src)
            self.assertAlmostEqual(back, value, places=9)

    def test_extrapolates_outside_source_interval(self) -> None:
        self.assertEqual(map_value(-5.0, Interval(0.0, 10.0), Interval(0.0, 100.0)), -50.0)

    def test_degenerate_source_maps_to_target_midpoint(self) -> None:
        src = Interval(4.0, 4.0)
        dst = Interval(10.0, 30.0)
        self.assertEqual(map_value(4.0, src, dst), 20.0)
        self.assertEqual(map_value(-100.0, src, dst), 20.0)

    def test_vectorized_mapping_matches_scalar(self) -> None:
        src = Interval(1.0, 3.0)
        dst = Interval(0.0, 512.0)
        values = np.asarray([1.0, 1.5, 2.0, 3.0], dtype=np.float64)
        mapped = map_values(values, src, dst)
        np.testing.assert_allclose(mapped, [map_value(v, src, dst) for v in values.tolist()])

    def test_vectorized_degenerate_mapping_fills_midpoint(self) -> None:
        mapped = map_values(np.asarray([0.0, 1.0, 2.0]), Interval(1.0, 1.0), Interval(0.0, 8.0))
        np.testing.assert_array_equal(mapped, [4.0, 4.0, 4.0])


class IntervalTests(unittest.TestCase):
    def test_rejects_inverted_bounds(self) -> None:
        with self.assertRaises(ValueError):
            Interval(2.0, 1.0)

    def test_rejects_non_finite_bounds(self) -> None:
        with self.assertRaises(ValueError):
            Interval(0.0, float("inf"))

    def test_infer_interval_uses_finite_min_max(self) -> None:
        self.assertEqual(infer_interval([3.0, float("nan"), -1.0, 7.5]), Interval(-1.0, 7.5))

    def test_infer_interval_defaults_when_empty(self) -> None:
        self.assertEqual(infer_interval([]), DEFAULT_INTERVAL)


if __name__ == "__main__":
    unittest.main()
