"""Average True Range (ATR) indicator for volatility measurement."""

from collections import deque
from typing import Optional

from ..core.config import DEFAULTS
from ..core.types import Bar
from .actions import ValueAvailableActionFloat
from .base import BaseIndicatorWithFloatBounds, BaseIndicatorWithTimePeriod, check_lookback_period


class Atr(BaseIndicatorWithFloatBounds[float], BaseIndicatorWithTimePeriod):
    """
    Average True Range indicator.

    Measures market volatility by decomposing the entire range of an asset
    price for that period. The true range needs the previous close, so the
    first bar only seeds it.

    Reads whole bars, so it takes no ``select_data``.
    """

    selects_data = False

    def __init__(
        self,
        time_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionFloat] = None,
        **options,
    ):
        """Initialize ATR with period."""
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period, value_available_action=value_available_action, **options)
        self._tr_values: deque[float] = deque(maxlen=time_period)
        self._prev_close: Optional[float] = None
        self._current_atr: Optional[float] = None

    @classmethod
    def default(cls, **options):
        return cls(DEFAULTS.atr.period, **options)

    def _transform_bar(self, bar: Bar, stream_bar_index: int) -> None:
        if self._prev_close is None:
            self._prev_close = bar.close
            return

        tr = max(
            bar.high - bar.low,
            abs(bar.high - self._prev_close),
            abs(bar.low - self._prev_close)
        )
        self._prev_close = bar.close
        period = self.time_period

        # Wilder's smoothing once seeded with the simple average
        if self._current_atr is None:
            self._tr_values.append(tr)
            if len(self._tr_values) < period:
                return
            self._current_atr = sum(self._tr_values) / period
        else:
            self._current_atr = (self._current_atr * (period - 1) + tr) / period

        self._publish(self._current_atr, stream_bar_index)

    def _transform(self, value: float, stream_bar_index: int) -> None:
        """Not supported for ATR - feed bars instead."""
        raise NotImplementedError("Use receive_bar or update_bar for ATR")
