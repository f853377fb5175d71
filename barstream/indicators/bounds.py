"""Running min/max of everything an indicator has emitted."""

import numpy as np

FLOAT_MIN_SEED = float(np.finfo(np.float64).max)
FLOAT_MAX_SEED = float(np.finfo(np.float64).smallest_subnormal)
INT_MIN_SEED = int(np.iinfo(np.int64).max)
INT_MAX_SEED = int(np.iinfo(np.int64).min)


class _Bounds:
    """
    Cumulative bounds, never a sliding window.

    Seeds are inverted ("min" starts at the top of the range) so that an
    empty tracker is recognisable. The first recorded value replaces both
    seeds; after that min only decreases and max only increases.
    """

    _min_seed = None
    _max_seed = None

    def __init__(self):
        self._min_value = self._min_seed
        self._max_value = self._max_seed
        self._has_value = False

    @property
    def min_value(self):
        return self._min_value

    @property
    def max_value(self):
        return self._max_value

    @property
    def has_value(self) -> bool:
        return self._has_value

    def update(self, *values) -> None:
        """Fold one or more emitted values into the bounds."""
        for value in values:
            if not self._has_value:
                self._min_value = value
                self._max_value = value
                self._has_value = True
                continue
            if value < self._min_value:
                self._min_value = value
            if value > self._max_value:
                self._max_value = value


class FloatBounds(_Bounds):
    """Bounds over float-valued output."""

    _min_seed = FLOAT_MIN_SEED
    _max_seed = FLOAT_MAX_SEED

    @property
    def min_value(self) -> float:
        return self._min_value

    @property
    def max_value(self) -> float:
        return self._max_value


class IntBounds(_Bounds):
    """Bounds over integer-valued output."""

    _min_seed = INT_MIN_SEED
    _max_seed = INT_MAX_SEED

    @property
    def min_value(self) -> int:
        return self._min_value

    @property
    def max_value(self) -> int:
        return self._max_value
