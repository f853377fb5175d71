"""Moving averages (SMA, EMA)."""

from collections import deque
from typing import Optional

from ..core.config import DEFAULTS
from ..data.selection import select_field
from .actions import ValueAvailableActionFloat
from .base import BaseIndicatorWithFloatBounds, BaseIndicatorWithTimePeriod, check_lookback_period


class Sma(BaseIndicatorWithFloatBounds[float], BaseIndicatorWithTimePeriod):
    """Simple moving average over ``time_period`` values."""

    def __init__(
        self,
        time_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionFloat] = None,
        **options,
    ):
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period - 1, value_available_action=value_available_action, **options)
        self._window: deque[float] = deque(maxlen=time_period)
        self._sum = 0.0

    @classmethod
    def default(cls, **options):
        options.setdefault("select_data", select_field(DEFAULTS.sma.source))
        return cls(DEFAULTS.sma.period, **options)

    def _transform(self, value: float, stream_bar_index: int) -> None:
        if len(self._window) == self.time_period:
            self._sum -= self._window[0]
        self._window.append(value)
        self._sum += value

        if len(self._window) < self.time_period:
            return

        self._publish(self._sum / self.time_period, stream_bar_index)


class Ema(BaseIndicatorWithFloatBounds[float], BaseIndicatorWithTimePeriod):
    """
    Exponential moving average.

    Seeded with the simple average of the first ``time_period`` values, then
    smoothed with ``2 / (time_period + 1)``.
    """

    def __init__(
        self,
        time_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionFloat] = None,
        **options,
    ):
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period - 1, value_available_action=value_available_action, **options)
        self.multiplier = 2.0 / (time_period + 1)
        self._seed_sum = 0.0
        self._seed_count = 0
        self._ema: Optional[float] = None

    @classmethod
    def default(cls, **options):
        options.setdefault("select_data", select_field(DEFAULTS.ema.source))
        return cls(DEFAULTS.ema.period, **options)

    def _transform(self, value: float, stream_bar_index: int) -> None:
        if self._ema is None:
            self._seed_sum += value
            self._seed_count += 1
            if self._seed_count < self.time_period:
                return
            self._ema = self._seed_sum / self.time_period
        else:
            self._ema = (value - self._ema) * self.multiplier + self._ema

        self._publish(self._ema, stream_bar_index)
