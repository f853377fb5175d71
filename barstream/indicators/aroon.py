"""Aroon indicator."""

from collections import deque
from typing import Optional

from ..core.config import DEFAULTS
from ..core.types import AroonValue, Bar
from .actions import ValueAvailableActionAroon
from .base import BaseIndicatorWithFloatBounds, BaseIndicatorWithTimePeriod, check_lookback_period


class Aroon(BaseIndicatorWithFloatBounds[AroonValue], BaseIndicatorWithTimePeriod):
    """
    Aroon up/down lines.

    Percentage of the window elapsed since the highest high (up) and lowest
    low (down) over the last ``time_period + 1`` bars. The most recent bar
    wins ties. Emits ``AroonValue(up, down)``.
    """

    output_width = 2
    selects_data = False

    def __init__(
        self,
        time_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionAroon] = None,
        **options,
    ):
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period, value_available_action=value_available_action, **options)
        self._highs: deque[float] = deque(maxlen=time_period + 1)
        self._lows: deque[float] = deque(maxlen=time_period + 1)

    @classmethod
    def default(cls, **options):
        return cls(DEFAULTS.aroon.period, **options)

    def _transform_bar(self, bar: Bar, stream_bar_index: int) -> None:
        self._highs.append(bar.high)
        self._lows.append(bar.low)

        if len(self._highs) <= self.time_period:
            return

        highest = lowest = 0
        for i in range(1, len(self._highs)):
            if self._highs[i] >= self._highs[highest]:
                highest = i
            if self._lows[i] <= self._lows[lowest]:
                lowest = i

        period = self.time_period
        # index ``period`` is the current bar
        bars_since_high = period - highest
        bars_since_low = period - lowest
        self._publish(
            AroonValue(
                up=100.0 * (period - bars_since_high) / period,
                down=100.0 * (period - bars_since_low) / period,
            ),
            stream_bar_index,
        )

    def _transform(self, value: float, stream_bar_index: int) -> None:
        raise NotImplementedError("Use receive_bar or update_bar for Aroon")
