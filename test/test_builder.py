"""
Tests for the monotone cubic builder.

Covers:
1. Input validation (length mismatch, duplicates, non-finite values)
2. Degenerate sample counts
3. Initial tangents and tangent limiting
4. Sorting and purity
"""

import unittest

import numpy

from monocubic.core.builder import (
    EMPTY_VALUE,
    build,
    initial_tangents,
    limit_tangents,
)


class TestBuildValidation(unittest.TestCase):
    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            build([0, 1, 2], [0, 1])

    def test_duplicate_x(self):
        with self.assertRaises(ValueError) as ctx:
            build([0, 1, 1, 2], [0, 1, 2, 3])
        self.assertIn("1.0", str(ctx.exception))

    def test_duplicate_x_unsorted(self):
        with self.assertRaises(ValueError):
            build([2, 0, 2], [1, 2, 3])

    def test_non_finite_values(self):
        with self.assertRaises(ValueError):
            build([0, float("nan"), 2], [0, 1, 2])
        with self.assertRaises(ValueError):
            build([0, 1, 2], [0, float("inf"), 2])

    def test_overflowing_secants(self):
        with self.assertRaises(ValueError):
            build([0, 1], [-1e308, 1e308])
        with self.assertRaises(ValueError):
            build([-1e308, 1e308], [0, 1])

    def test_not_one_dimensional(self):
        with self.assertRaises(ValueError):
            build([[0, 1], [2, 3]], [[0, 1], [2, 3]])


class TestDegenerateSizes(unittest.TestCase):
    def test_empty(self):
        f = build([], [])
        self.assertEqual(f.n, 0)
        self.assertIsNone(f.domain)
        self.assertEqual(EMPTY_VALUE, 0.0)

    def test_single_sample(self):
        f = build([3.0], [7.5])
        self.assertEqual(f.n, 1)
        self.assertEqual(f.domain, (3.0, 3.0))
        self.assertEqual(len(f.dx), 0)


class TestInitialTangents(unittest.TestCase):
    def test_average_of_secants(self):
        m = initial_tangents(numpy.array([1.0, 3.0, 5.0, 7.0]))
        numpy.testing.assert_array_equal(m, [1.0, 2.0, 4.0, 6.0, 7.0])

    def test_sign_change_is_flat(self):
        m = initial_tangents(numpy.array([1.0, -1.0, 2.0]))
        numpy.testing.assert_array_equal(m, [1.0, 0.0, 0.0, 2.0])

    def test_zero_secant_is_flat(self):
        m = initial_tangents(numpy.array([2.0, 0.0, 2.0]))
        numpy.testing.assert_array_equal(m, [2.0, 0.0, 0.0, 2.0])

    def test_two_samples(self):
        m = initial_tangents(numpy.array([-0.5]))
        numpy.testing.assert_array_equal(m, [-0.5, -0.5])


class TestLimitTangents(unittest.TestCase):
    def test_flat_segment_zeroes_both_ends(self):
        m = numpy.array([1.0, 1.0, 1.0])
        limit_tangents(m, numpy.array([0.0, 1.0]))
        self.assertEqual(m[0], 0.0)
        self.assertEqual(m[1], 0.0)
        self.assertEqual(m[2], 1.0)

    def test_opposing_tangents_are_zeroed(self):
        m = numpy.array([-1.0, 2.0, -3.0])
        limit_tangents(m, numpy.array([1.0, 1.0]))
        numpy.testing.assert_array_equal(m, [0.0, 2.0, 0.0])

    def test_circular_rescale(self):
        # alpha = 1, beta = 7.25 lies outside the circle of radius 3
        delta = numpy.array([1 / 6, 2.25])
        m = numpy.array([1 / 6, (1 / 6 + 2.25) / 2, 2.25])
        rescaled = limit_tangents(m, delta)

        self.assertEqual(rescaled, 1)
        alpha = m[0] / delta[0]
        beta = m[1] / delta[0]
        self.assertAlmostEqual(alpha**2 + beta**2, 9.0)
        # direction in the (alpha, beta) plane is kept
        self.assertAlmostEqual(beta / alpha, 7.25)

    def test_componentwise_bound_is_not_enough(self):
        # alpha = beta = 2.5 passes a per-component clamp to 3 but not the circle
        delta = numpy.array([1.0])
        m = numpy.array([2.5, 2.5])
        self.assertEqual(limit_tangents(m, delta), 1)
        self.assertAlmostEqual(m[0], 3 / numpy.sqrt(2))
        self.assertAlmostEqual(m[1], 3 / numpy.sqrt(2))

    def test_within_circle_untouched(self):
        delta = numpy.array([1.0, 3.0, 5.0, 7.0])
        m = initial_tangents(delta)
        self.assertEqual(limit_tangents(m, delta), 0)
        numpy.testing.assert_array_equal(m, [1.0, 2.0, 4.0, 6.0, 7.0])

    def test_decreasing_segment_rescale(self):
        delta = numpy.array([-1.0])
        m = numpy.array([-4.0, -4.0])
        limit_tangents(m, delta)
        self.assertTrue(numpy.all(m < 0))
        self.assertAlmostEqual((m[0] / delta[0]) ** 2 + (m[1] / delta[0]) ** 2, 9.0)


class TestBuild(unittest.TestCase):
    def test_sorts_samples(self):
        f = build([2, 0, 1], [4, 0, 1])
        numpy.testing.assert_array_equal(f.x, [0.0, 1.0, 2.0])
        numpy.testing.assert_array_equal(f.y, [0.0, 1.0, 4.0])
        numpy.testing.assert_array_equal(f.dx, [1.0, 1.0])
        numpy.testing.assert_array_equal(f.delta, [1.0, 3.0])

    def test_does_not_modify_inputs(self):
        x = [3.0, 1.0, 2.0]
        y = numpy.array([9.0, 1.0, 4.0])
        build(x, y)
        self.assertEqual(x, [3.0, 1.0, 2.0])
        numpy.testing.assert_array_equal(y, [9.0, 1.0, 4.0])

    def test_interpolant_is_read_only(self):
        f = build([0, 1, 2], [0, 1, 4])
        with self.assertRaises(ValueError):
            f.m[0] = 5.0
        with self.assertRaises(AttributeError):
            f.n = 4

    def test_equal_when_built_from_same_data(self):
        f = build([0, 1, 2], [0, 1, 4])
        g = build([2, 0, 1], [4, 0, 1])
        self.assertEqual(f, g)
        self.assertNotEqual(f, build([0, 1, 2], [0, 1, 5]))
        self.assertNotEqual(f, build([0, 1], [0, 1]))
        self.assertEqual(build([], []), build([], []))

    def test_not_hashable_or_a_tuple(self):
        f = build([0, 1, 2], [0, 1, 4])
        with self.assertRaises(TypeError):
            hash(f)
        with self.assertRaises(TypeError):
            len(f)

    def test_tangents_for_squares(self):
        f = build([0, 1, 2, 3, 4], [0, 1, 4, 9, 16])
        numpy.testing.assert_array_equal(f.m, [1.0, 2.0, 4.0, 6.0, 7.0])

    def test_local_extremum_gets_flat_tangent(self):
        f = build([0, 1, 2], [0, 1, 0])
        self.assertEqual(f.m[1], 0.0)

    def test_logs_build(self):
        with self.assertLogs("monocubic.core.builder", level="DEBUG") as logs:
            build([0, 0.30, 0.5], [0, 0.05, 0.5])
        self.assertTrue(any("1 segment(s) rescaled" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
