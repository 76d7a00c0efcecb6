"""
Tests for numeric decomposition, recomposition and the breakdown cache
"""
import importlib
import math
import unittest

decompose_mod = importlib.import_module("npt_timecode.core.decompose")
from npt_timecode.core import (
    Breakdown,
    DecompositionCache,
    decompose,
    recompose,
    round_to_3,
    get_default_cache,
    set_default_cache,
)


class TestDecompose(unittest.TestCase):
    """Breakdown of seconds into hours/minutes/seconds/milliseconds"""

    def test_whole_seconds(self):
        b = decompose(21930, DecompositionCache())
        self.assertEqual((b.hours, b.minutes, b.seconds, b.milliseconds), (6, 5, 30, 0))
        self.assertEqual(b.total_hours, 6.091666666666667)
        self.assertEqual(b.total_minutes, 365.5)
        self.assertEqual(b.total_seconds, 21930)
        # Scaling quotient, not a conversion to milliseconds
        self.assertEqual(b.total_milliseconds, 21.93)

    def test_fractional_seconds(self):
        b = decompose(1.23, DecompositionCache())
        self.assertEqual((b.hours, b.minutes, b.seconds), (0, 0, 1))
        self.assertEqual(b.milliseconds, 230)
        self.assertEqual(b.ms, 230)
        self.assertEqual(b.total_minutes, 0.0205)
        self.assertEqual(b.total_milliseconds, 0.00123)

    def test_float_noise_is_rounded_away(self):
        b = decompose(21930 + 360.23, DecompositionCache())
        self.assertEqual((b.hours, b.minutes, b.seconds, b.milliseconds), (6, 11, 30, 230))

    def test_round_to_3_rounds_half_up(self):
        self.assertEqual(round_to_3(0.0625), 0.063)
        self.assertEqual(round_to_3(0.999999998), 1.0)
        self.assertEqual(round_to_3(0.4561), 0.456)

    def test_as_dict_lists_every_field(self):
        b = decompose(61.5, DecompositionCache())
        self.assertEqual(b.as_dict()['minutes'], 1)
        self.assertEqual(b.as_dict()['milliseconds'], 500)
        self.assertEqual(len(b.as_dict()), 8)


class TestRecompose(unittest.TestCase):
    """Structured parts back to seconds"""

    def test_missing_fields_count_as_zero(self):
        self.assertEqual(recompose({}), 0)
        self.assertEqual(recompose({'minutes': 1, 'seconds': 30}), 90)
        self.assertEqual(recompose({'hours': 2}), 7200)

    def test_milliseconds_and_alias(self):
        self.assertEqual(recompose({'seconds': 1, 'ms': 500}), 1.5)
        self.assertEqual(recompose({'seconds': 1, 'milliseconds': 250}), 1.25)
        # milliseconds wins over ms
        self.assertEqual(recompose({'seconds': 1, 'milliseconds': 250, 'ms': 750}), 1.25)

    def test_non_numeric_parts_give_nan(self):
        for parts in ({'hours': 'x'}, {'seconds': '5'}, {'minutes': True},
                      {'seconds': 1, 'ms': '500'}, {'hours': 10 ** 400}):
            with self.subTest(parts=parts):
                self.assertTrue(math.isnan(recompose(parts)))

    def test_accepts_breakdown_objects(self):
        b = decompose(3725.5, DecompositionCache())
        self.assertIsInstance(b, Breakdown)
        self.assertEqual(recompose(b), 3725.5)

    def test_round_trip(self):
        cache = DecompositionCache()
        for value in (0, 1, 1.23, 30.456, 60.789, 305.5, 21930, 22290.23, 86399.999):
            self.assertAlmostEqual(recompose(decompose(value, cache)), value, places=6)


class TestDecompositionCache(unittest.TestCase):
    """Explicit, replaceable cache"""

    def tearDown(self):
        set_default_cache(None)

    def test_get_stores_and_reuses(self):
        cache = DecompositionCache()
        first = cache.get(42.5)
        self.assertIn(42.5, cache)
        self.assertIs(cache.get(42.5), first)
        self.assertEqual(len(cache), 1)
        cache.clear()
        self.assertEqual(len(cache), 0)

    def test_identical_values_give_identical_breakdowns(self):
        self.assertEqual(DecompositionCache().get(99.9), DecompositionCache().get(99.9))

    def test_maxsize_stops_storing(self):
        cache = DecompositionCache(maxsize=1)
        cache.get(1)
        b = cache.get(2)
        self.assertEqual(len(cache), 1)
        self.assertNotIn(2, cache)
        self.assertEqual(b.seconds, 2)

    def test_default_cache_is_built_on_demand(self):
        set_default_cache(None)
        self.assertIsNone(decompose_mod._default_cache)
        cache = get_default_cache()
        self.assertIs(get_default_cache(), cache)
        decompose(12)
        self.assertIn(12, cache)

    def test_default_cache_can_be_replaced(self):
        custom = DecompositionCache()
        set_default_cache(custom)
        decompose(7.5)
        self.assertIn(7.5, custom)


if __name__ == "__main__":
    unittest.main()
