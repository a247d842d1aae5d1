# ==============================================================================
# file: tests/test_poisson_disc.py
# Tests for the sampling run: geometric invariants, determinism, termination.
# ==============================================================================
import itertools
import math
import random
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from sampling_engine import (
    PoissonDiscSampler,
    sample_points,
    sample_points_unseeded,
    sample_region,
)
from sampling_engine.algorithms.sampling import SamplerState
from sampling_engine.core.errors import GridAllocationError, ParameterError, SamplerError
from sampling_engine.core.utils.metrics import min_pairwise_distance, packing_bound
from sampling_engine.numerics.vector import Vec2


def _brute_min_distance(points):
    best = math.inf
    for a, b in itertools.combinations(points, 2):
        best = min(best, a.distance_to(b))
    return best


class TestInvariants(unittest.TestCase):

    def test_minimum_distance(self):
        print("\n[TEST] Running test_minimum_distance...")
        for seed in range(5):
            pts = sample_points(seed, 100.0, 100.0, 10.0)
            self.assertGreater(len(pts), 1)
            self.assertGreaterEqual(_brute_min_distance(pts), 10.0 - 1e-9, f"seed {seed}")
        print("[TEST] test_minimum_distance: OK")

    def test_minimum_distance_rectangular_region(self):
        pts = sample_points(11, 300.0, 40.0, 7.5, k=20)
        self.assertGreaterEqual(min_pairwise_distance(pts), 7.5 - 1e-9)

    def test_containment(self):
        for seed in (3, 17):
            for p in sample_points(seed, 120.0, 45.0, 6.0):
                self.assertTrue(0.0 <= p.x < 120.0)
                self.assertTrue(0.0 <= p.y < 45.0)

    def test_determinism(self):
        a = sample_points(42, 100.0, 100.0, 10.0, 30)
        b = sample_points(42, 100.0, 100.0, 10.0, 30)
        self.assertEqual(len(a), len(b))
        self.assertEqual(a, b)

    def test_different_seeds_differ(self):
        self.assertNotEqual(
            sample_points(1, 100.0, 100.0, 10.0), sample_points(2, 100.0, 100.0, 10.0)
        )

    def test_seed_point_comes_first(self):
        ref = random.Random(7)
        x0 = ref.random() * 50.0
        y0 = ref.random() * 30.0
        pts = sample_points(7, 50.0, 30.0, 5.0)
        self.assertEqual(pts[0], Vec2(x0, y0))

    def test_non_empty(self):
        for w, h, r in ((1.0, 1.0, 0.5), (50.0, 50.0, 10.0), (5.0, 5.0, 100.0)):
            self.assertGreaterEqual(len(sample_points(0, w, h, r)), 1)

    def test_radius_larger_than_region(self):
        pts = sample_points(5, 5.0, 5.0, 100.0)
        self.assertEqual(len(pts), 1)

    def test_zero_k_returns_only_seed(self):
        result = sample_region(9, 50.0, 50.0, 10.0, k=0)
        self.assertEqual(len(result.points), 1)
        self.assertEqual(result.stats.iterations, 1)
        self.assertEqual(result.stats.attempts, 0)

    def test_density_bound(self):
        pts = sample_points(4, 200.0, 200.0, 20.0)
        self.assertLessEqual(len(pts), packing_bound(200.0, 200.0, 20.0))
        self.assertGreater(len(pts), 20)


class TestDriverLoop(unittest.TestCase):

    def test_monotonic_growth_and_active_subset(self):
        sampler = PoissonDiscSampler(13, 80.0, 60.0, 8.0)
        self.assertEqual(sampler.state, SamplerState.RUNNING)
        self.assertEqual(sampler.active, [0])
        previous = len(sampler.points)
        while sampler.step():
            self.assertGreaterEqual(len(sampler.points), previous)
            self.assertLessEqual(len(sampler.points), previous + 1)
            previous = len(sampler.points)
            self.assertEqual(len(set(sampler.active)), len(sampler.active))
            self.assertTrue(set(sampler.active) <= set(range(len(sampler.points))))
        self.assertEqual(sampler.state, SamplerState.DONE)
        self.assertEqual(sampler.active, [])

    def test_grid_holds_every_point(self):
        sampler = PoissonDiscSampler(21, 64.0, 64.0, 6.0)
        result = sampler.run()
        self.assertEqual(sampler.grid.occupied_count(), len(result.points))
        for idx, p in enumerate(result.points):
            row, col = sampler.grid.cell_index_of(p)
            self.assertEqual(sampler.grid.get(row, col), idx)

    def test_termination_ceiling(self):
        width = height = 50.0
        r = 10.0
        result = sample_region(42, width, height, r, 30)
        self.assertLessEqual(result.stats.iterations, 10 * (width * height) / (r * r))
        # one success per added point, one eviction per point
        self.assertEqual(result.stats.iterations, 2 * len(result.points) - 1)
        self.assertEqual(result.stats.evictions, len(result.points))

    def test_draw_order_contract(self):
        sampler = PoissonDiscSampler(8, 40.0, 40.0, 5.0, k=12)
        sampler.run()
        stats = sampler.stats
        self.assertEqual(sampler.source.draws, 2 + stats.iterations + 2 * stats.attempts)
        rejected = stats.out_of_bounds + stats.cell_rejections + stats.distance_rejections
        self.assertEqual(stats.attempts, rejected + len(sampler.points) - 1)

    def test_step_after_done_raises(self):
        sampler = PoissonDiscSampler(1, 20.0, 20.0, 5.0)
        sampler.run()
        with self.assertRaises(SamplerError):
            sampler.step()

    def test_result_header(self):
        result = sample_region(3, 30.0, 20.0, 4.0, 10)
        header = result.header()
        self.assertEqual(header["seed"], 3)
        self.assertEqual(header["k"], 10)
        self.assertEqual(header["count"], len(result))
        self.assertEqual(list(result), result.points)

    def test_unseeded_entry_point(self):
        pts = sample_points_unseeded(40.0, 30.0, 5.0)
        self.assertGreaterEqual(len(pts), 1)
        for p in pts:
            self.assertTrue(0.0 <= p.x < 40.0 and 0.0 <= p.y < 30.0)


class TestParameterValidation(unittest.TestCase):

    def test_rejects_bad_radius(self):
        for r in (0.0, -1.0, float("nan"), float("inf")):
            with self.assertRaises(ParameterError):
                sample_points(0, 10.0, 10.0, r)

    def test_rejects_bad_region(self):
        for w, h in ((0.0, 10.0), (10.0, -3.0), (float("inf"), 10.0), (10.0, float("nan"))):
            with self.assertRaises(ParameterError):
                sample_points(0, w, h, 1.0)

    def test_rejects_bad_k(self):
        for k in (-1, 1.5, True):
            with self.assertRaises(ParameterError):
                sample_points(0, 10.0, 10.0, 1.0, k)

    def test_rejects_non_numbers(self):
        with self.assertRaises(ParameterError):
            sample_points(0, "10", 10.0, 1.0)

    def test_parameter_error_is_value_error(self):
        with self.assertRaises(ValueError):
            sample_points(0, 10.0, 10.0, -2.0)

    def test_huge_grid_is_reported(self):
        with self.assertRaises(GridAllocationError):
            sample_points(0, 1e6, 1e6, 1e-3)

    def test_rejects_bad_seed(self):
        for seed in (None, 1.5, True, "7"):
            with self.subTest(seed=seed):
                with self.assertRaises(ParameterError):
                    sample_points(seed, 10.0, 10.0, 1.0)

    def test_large_integer_seed_is_accepted(self):
        self.assertGreaterEqual(len(sample_points(2 ** 80, 10.0, 10.0, 2.0)), 1)

    def test_overflowing_integer_is_parameter_error(self):
        with self.assertRaises(ParameterError):
            sample_points(0, 10 ** 400, 10.0, 1.0)
        with self.assertRaises(ParameterError):
            sample_points(0, 10.0, 10.0, 10 ** 400)

    def test_grid_cap_is_passed_through(self):
        with self.assertRaises(GridAllocationError):
            sample_points(0, 100.0, 100.0, 1.0, max_grid_cells=10)
        with self.assertRaises(GridAllocationError):
            sample_region(0, 100.0, 100.0, 1.0, max_grid_cells=10)
        with self.assertRaises(GridAllocationError):
            sample_points_unseeded(100.0, 100.0, 1.0, max_grid_cells=10)
        pts = sample_points(0, 1e4, 1.0, 1e4, max_grid_cells=2)
        self.assertEqual(len(pts), 1)

    def test_rejects_bad_grid_cap(self):
        for cap in (0, -5, 2.5, True):
            with self.subTest(cap=cap):
                with self.assertRaises(ParameterError):
                    sample_points(0, 10.0, 10.0, 1.0, max_grid_cells=cap)


if __name__ == '__main__':
    unittest.main()
