"""Tests for the float/integer bounds trackers."""

import numpy as np

from barstream.indicators.bounds import FloatBounds, IntBounds


class TestFloatBounds:
    def test_seeds_are_inverted(self) -> None:
        bounds = FloatBounds()
        assert bounds.min_value == np.finfo(np.float64).max
        assert bounds.max_value == np.finfo(np.float64).smallest_subnormal
        assert bounds.min_value > bounds.max_value
        assert not bounds.has_value

    def test_first_value_tightens_both(self) -> None:
        bounds = FloatBounds()
        bounds.update(-3.0)
        assert bounds.min_value == -3.0
        assert bounds.max_value == -3.0
        assert bounds.has_value

    def test_monotone(self) -> None:
        bounds = FloatBounds()
        history = []
        for value in [5.0, 2.0, 8.0, 3.0, 1.5, 9.5, 4.0]:
            prev = (bounds.min_value, bounds.max_value) if bounds.has_value else None
            bounds.update(value)
            history.append(value)
            assert bounds.min_value == min(history)
            assert bounds.max_value == max(history)
            if prev is not None:
                assert bounds.min_value <= prev[0]
                assert bounds.max_value >= prev[1]

    def test_update_with_several_values(self) -> None:
        bounds = FloatBounds()
        bounds.update(10.0, 2.0)
        bounds.update(4.0, 11.0)
        assert (bounds.min_value, bounds.max_value) == (2.0, 11.0)


class TestIntBounds:
    def test_seeds(self) -> None:
        bounds = IntBounds()
        assert bounds.min_value == np.iinfo(np.int64).max
        assert bounds.max_value == np.iinfo(np.int64).min

    def test_tracks_values(self) -> None:
        bounds = IntBounds()
        for value in [7, 3, 12, -4]:
            bounds.update(value)
        assert bounds.min_value == -4
        assert bounds.max_value == 12
