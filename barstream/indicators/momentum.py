"""Momentum indicators (RSI, simple momentum)."""

from collections import deque
from typing import Optional

from ..core.config import DEFAULTS
from ..data.selection import select_field
from .actions import ValueAvailableActionFloat
from .base import BaseIndicatorWithFloatBounds, BaseIndicatorWithTimePeriod, check_lookback_period


class Rsi(BaseIndicatorWithFloatBounds[float], BaseIndicatorWithTimePeriod):
    """
    Relative Strength Index indicator.

    Measures the speed and magnitude of price changes. The first value needs
    ``time_period`` price changes, so one more bar than that.
    """

    def __init__(
        self,
        time_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionFloat] = None,
        **options,
    ):
        """Initialize RSI with period."""
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period, value_available_action=value_available_action, **options)
        self._prev_price: Optional[float] = None
        self._gains: deque[float] = deque(maxlen=time_period)
        self._losses: deque[float] = deque(maxlen=time_period)
        self._avg_gain: Optional[float] = None
        self._avg_loss: Optional[float] = None

    @classmethod
    def default(cls, **options):
        options.setdefault("select_data", select_field(DEFAULTS.rsi.source))
        return cls(DEFAULTS.rsi.period, **options)

    def _transform(self, price: float, stream_bar_index: int) -> None:
        if self._prev_price is None:
            self._prev_price = price
            return

        change = price - self._prev_price
        self._prev_price = price

        gain = max(0.0, change)
        loss = max(0.0, -change)
        period = self.time_period

        # Wilder's smoothing once seeded with the simple average
        if self._avg_gain is None:
            self._gains.append(gain)
            self._losses.append(loss)
            if len(self._gains) < period:
                return
            self._avg_gain = sum(self._gains) / period
            self._avg_loss = sum(self._losses) / period
        else:
            self._avg_gain = (self._avg_gain * (period - 1) + gain) / period
            self._avg_loss = (self._avg_loss * (period - 1) + loss) / period

        if self._avg_loss == 0:
            rsi = 100.0
        else:
            rs = self._avg_gain / self._avg_loss
            rsi = 100 - (100 / (1 + rs))

        self._publish(rsi, stream_bar_index)


class Momentum(BaseIndicatorWithFloatBounds[float], BaseIndicatorWithTimePeriod):
    """
    Simple momentum indicator.

    Difference between the current price and the price ``time_period`` bars ago.
    """

    def __init__(
        self,
        time_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionFloat] = None,
        **options,
    ):
        """Initialize momentum with period."""
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period, value_available_action=value_available_action, **options)
        self._prices: deque[float] = deque(maxlen=time_period + 1)

    @classmethod
    def default(cls, **options):
        options.setdefault("select_data", select_field(DEFAULTS.momentum.source))
        return cls(DEFAULTS.momentum.period, **options)

    def _transform(self, price: float, stream_bar_index: int) -> None:
        self._prices.append(price)

        if len(self._prices) <= self.time_period:
            return

        self._publish(price - self._prices[0], stream_bar_index)
