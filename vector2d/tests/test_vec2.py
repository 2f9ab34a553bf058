import math
import random
import unittest
from types import SimpleNamespace

from vector2d.math.dimensions import Dimensions
from vector2d.math.vec2 import Vector2D


class Vector2DConstructionTests(unittest.TestCase):
    def test_defaults(self) -> None:
        v = Vector2D()
        self.assertEqual((v.x, v.y), (0, 0))
        v = Vector2D(None, 2.5)
        self.assertEqual((v.x, v.y), (0, 2.5))

    def test_explicit_values_are_kept(self) -> None:
        self.assertEqual(Vector2D(0, 5).y, 5)
        self.assertEqual(Vector2D(-3.0, 0).x, -3.0)
        self.assertTrue(math.isnan(Vector2D(math.nan, 1.0).x))

    def test_duplicate_is_independent(self) -> None:
        v = Vector2D(1.5, -2.0)
        copy = v.duplicate()
        self.assertIsNot(copy, v)
        self.assertTrue(copy.equals(v))
        copy.add(Vector2D(1.0, 1.0)).multiply(3.0)
        self.assertEqual(v, Vector2D(1.5, -2.0))
        self.assertEqual(v.clone(), v)

    def test_from_angle(self) -> None:
        self.assertEqual(Vector2D.from_angle(0.0), Vector2D(1.0, 0.0))
        v = Vector2D.from_angle(math.pi / 2)
        self.assertAlmostEqual(v.x, 0.0)
        self.assertAlmostEqual(v.y, 1.0)

    def test_random_uses_whole_radian_angles(self) -> None:
        expected_r = random.Random(5).random()
        v = Vector2D.random(random.Random(5))
        self.assertEqual(v, Vector2D.from_angle(math.floor(expected_r * (math.pi * 2 + 1))))

        rng = random.Random(11)
        candidates = [Vector2D.from_angle(k) for k in range(8)]
        for _ in range(200):
            v = Vector2D.random(rng)
            self.assertAlmostEqual(v.magnitude(), 1.0)
            self.assertTrue(any(v.equals(c) for c in candidates))


class Vector2DInPlaceTests(unittest.TestCase):
    def test_methods_return_self(self) -> None:
        v = Vector2D(1.0, 2.0)
        self.assertIs(v.add(Vector2D(1.0, 1.0)), v)
        self.assertIs(v.subtract(Vector2D(1.0, 1.0)), v)
        self.assertIs(v.multiply(2.0), v)
        self.assertIs(v.divide(2.0), v)
        self.assertIs(v.lerp(Vector2D(), 0.0), v)
        self.assertIs(v.normalize(), v)
        self.assertIs(v.limit(10.0), v)
        self.assertIs(v.abs(), v)
        self.assertIs(v.negative(), v)
        self.assertIs(v.zero(), v)

    def test_add_subtract_multiply_divide(self) -> None:
        a = Vector2D(3.0, -4.0)
        other = Vector2D(1.5, 2.0)
        self.assertEqual(a.duplicate().add(other), Vector2D(4.5, -2.0))
        self.assertEqual(a.duplicate().subtract(other), Vector2D(1.5, -6.0))
        self.assertEqual(a.duplicate().multiply(2.0), Vector2D(6.0, -8.0))
        self.assertEqual(a.duplicate().divide(2.0), Vector2D(1.5, -2.0))
        self.assertEqual(other, Vector2D(1.5, 2.0))

    def test_zero_abs_negative(self) -> None:
        self.assertEqual(Vector2D(3.0, -4.0).zero(), Vector2D(0, 0))
        self.assertEqual(Vector2D(-3.0, -4.0).abs(), Vector2D(3.0, 4.0))
        self.assertEqual(Vector2D(3.0, -4.0).negative(), Vector2D(-3.0, 4.0))
        self.assertEqual(Vector2D(3.0, -4.0).reverse(), Vector2D(-3.0, 4.0))

    def test_normalize(self) -> None:
        v = Vector2D(3.0, 4.0).normalize()
        self.assertAlmostEqual(v.x, 0.6)
        self.assertAlmostEqual(v.y, 0.8)
        self.assertAlmostEqual(Vector2D(-7.0, 0.25).unit().magnitude(), 1.0)

    def test_normalize_zero_vector_is_noop(self) -> None:
        v = Vector2D(0.0, 0.0).normalize()
        self.assertEqual(v, Vector2D(0.0, 0.0))
        self.assertFalse(v.invalid())

    def test_limit(self) -> None:
        v = Vector2D(3.0, 4.0)
        self.assertEqual(v.duplicate().limit(5.0), v)
        self.assertEqual(v.duplicate().limit(10.0), v)
        limited = v.duplicate().limit(2.5)
        self.assertAlmostEqual(limited.magnitude(), 2.5)
        self.assertAlmostEqual(limited.x, 1.5)
        self.assertAlmostEqual(limited.y, 2.0)

    def test_lerp(self) -> None:
        a = Vector2D(0.0, 0.0)
        b = Vector2D(10.0, 20.0)
        self.assertEqual(a.duplicate().lerp(b, 0.25), Vector2D(2.5, 5.0))
        self.assertEqual(a.duplicate().lerp(b, 0.0), a)
        self.assertEqual(a.duplicate().lerp(b, 1.0), b)

    def test_divide_by_zero_does_not_raise(self) -> None:
        v = Vector2D(1.0, -1.0).divide(0)
        self.assertEqual(v.x, math.inf)
        self.assertEqual(v.y, -math.inf)
        self.assertTrue(v.invalid())

        v = Vector2D(0.0, 0.0).divide(0)
        self.assertTrue(math.isnan(v.x))
        self.assertTrue(math.isnan(v.y))
        self.assertTrue(v.invalid())


class Vector2DQueryTests(unittest.TestCase):
    def test_magnitude(self) -> None:
        self.assertEqual(Vector2D(3, 4).magnitude(), 5)
        self.assertEqual(Vector2D(3.0, 4.0).length(), 5.0)
        self.assertEqual(Vector2D().magnitude(), 0.0)

    def test_heading(self) -> None:
        self.assertEqual(Vector2D(1.0, 0.0).heading(), 0.0)
        self.assertAlmostEqual(Vector2D(0.0, 1.0).heading(), math.pi / 2)
        self.assertAlmostEqual(Vector2D(0.0, -2.0).heading(), -math.pi / 2)
        self.assertAlmostEqual(Vector2D(3.0, -4.0).heading(), math.atan2(-4.0, 3.0))

    def test_eucl_distance(self) -> None:
        self.assertEqual(Vector2D(0.0, 0.0).eucl_distance(Vector2D(3.0, 4.0)), 5.0)

    def test_distance_without_dimensions(self) -> None:
        a = Vector2D(1.0, 1.0)
        b = Vector2D(9.0, 9.0)
        self.assertAlmostEqual(a.distance(b), a.eucl_distance(b))

    def test_distance_wraps_around(self) -> None:
        a = Vector2D(1.0, 1.0)
        b = Vector2D(9.0, 9.0)
        self.assertAlmostEqual(a.distance(b, Dimensions(10.0, 10.0)), math.sqrt(8.0))
        self.assertAlmostEqual(b.distance(a, Dimensions(10.0, 10.0)), math.sqrt(8.0))
        # Any object with width/height is accepted.
        self.assertAlmostEqual(a.distance(b, SimpleNamespace(width=10, height=10)), math.sqrt(8.0))

    def test_distance_short_deltas_unchanged_by_wrap(self) -> None:
        a = Vector2D(1.0, 1.0)
        self.assertEqual(a.distance(Vector2D(3.0, 1.0), Dimensions(10.0, 10.0)), 2.0)

    def test_dot(self) -> None:
        self.assertEqual(Vector2D(1.0, 0.0).dot(Vector2D(0.0, 1.0)), 0.0)
        self.assertEqual(Vector2D(3.0, 4.0).dot(Vector2D(-2.0, 5.0)), 14.0)

    def test_scaled_by_dot(self) -> None:
        other = Vector2D(1.0, 1.0)
        result = Vector2D(2.0, 3.0).scaled_by_dot(other)
        self.assertEqual(result, Vector2D(5.0, 5.0))
        self.assertEqual(other, Vector2D(1.0, 1.0))

    def test_project_onto(self) -> None:
        self.assertEqual(Vector2D(2.0, 3.0).project_onto(Vector2D(2.0, 0.0)), Vector2D(2.0, 0.0))
        p = Vector2D(1.0, 3.0).project_onto(Vector2D(1.0, 1.0))
        self.assertAlmostEqual(p.x, 2.0)
        self.assertAlmostEqual(p.y, 2.0)
        self.assertTrue(Vector2D(1.0, 1.0).project_onto(Vector2D()).invalid())

    def test_equals(self) -> None:
        self.assertTrue(Vector2D(1, 2).equals(Vector2D(1.0, 2.0)))
        self.assertFalse(Vector2D(1, 2).equals(Vector2D(2, 1)))
        self.assertNotEqual(Vector2D(1, 2), (1, 2))

    def test_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(Vector2D(1.0, 2.0))

    def test_invalid(self) -> None:
        self.assertFalse(Vector2D(0, 5).invalid())
        self.assertTrue(Vector2D(math.nan, 0).invalid())
        self.assertTrue(Vector2D(0, math.nan).invalid())
        self.assertTrue(Vector2D(math.inf, 0).invalid())
        self.assertTrue(Vector2D(0, math.inf).invalid())
        self.assertFalse(Vector2D(-math.inf, 0).invalid())


class Vector2DOperatorTests(unittest.TestCase):
    def test_operators_return_new_vectors(self) -> None:
        a = Vector2D(3.0, -4.0)
        b = Vector2D(1.5, 2.0)
        self.assertEqual(a + b, Vector2D(4.5, -2.0))
        self.assertEqual(a - b, Vector2D(1.5, -6.0))
        self.assertEqual(a * 2.0, Vector2D(6.0, -8.0))
        self.assertEqual(2.0 * a, Vector2D(6.0, -8.0))
        self.assertEqual(a / 2.0, Vector2D(1.5, -2.0))
        self.assertEqual(-a, Vector2D(-3.0, 4.0))
        self.assertEqual(a, Vector2D(3.0, -4.0))

    def test_abs_iter_repr(self) -> None:
        v = Vector2D(3.0, 4.0)
        self.assertEqual(abs(v), 5.0)
        self.assertEqual(tuple(v), (3.0, 4.0))
        self.assertEqual(repr(v), "Vector2D(x=3.0, y=4.0)")

    def test_truediv_by_zero_is_invalid(self) -> None:
        self.assertTrue((Vector2D(1.0, 1.0) / 0).invalid())


if __name__ == "__main__":
    unittest.main()
