"""Bollinger Bands indicator."""

from collections import deque
import math
from typing import Optional

from ..core.config import DEFAULTS
from ..core.types import BandValue
from ..data.selection import select_field
from .actions import ValueAvailableActionBollinger
from .base import BaseIndicatorWithFloatBounds, BaseIndicatorWithTimePeriod, check_lookback_period


class BollingerBands(BaseIndicatorWithFloatBounds[BandValue], BaseIndicatorWithTimePeriod):
    """
    Bollinger Bands indicator.

    Emits ``BandValue(upper, middle, lower)``; a band action receives
    ``(upper, middle, lower, stream_bar_index)``. Bounds span the lower and
    upper bands.
    """

    output_width = 3

    def __init__(
        self,
        time_period: int,
        deviation: float = 2.0,
        *,
        value_available_action: Optional[ValueAvailableActionBollinger] = None,
        **options,
    ):
        """
        Initialize Bollinger Bands.

        Args:
            time_period: SMA lookback period
            deviation: Number of standard deviations
        """
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period - 1, value_available_action=value_available_action, **options)
        self.deviation = deviation
        self._prices: deque[float] = deque(maxlen=time_period)

    @classmethod
    def default(cls, **options):
        config = DEFAULTS.bollinger
        options.setdefault("select_data", select_field(config.source))
        return cls(config.period, config.deviation, **options)

    def _bounded_values(self, value: BandValue) -> tuple:
        return (value.lower, value.upper)

    def _transform(self, price: float, stream_bar_index: int) -> None:
        self._prices.append(price)

        if len(self._prices) < self.time_period:
            return

        period = self.time_period
        sma = sum(self._prices) / period
        variance = sum((p - sma) ** 2 for p in self._prices) / period
        std_dev = math.sqrt(variance)

        self._publish(
            BandValue(
                upper=sma + (self.deviation * std_dev),
                middle=sma,
                lower=sma - (self.deviation * std_dev),
            ),
            stream_bar_index,
        )
