"""MACD built from storage-less EMAs."""

from typing import Optional

from ..core.config import DEFAULTS
from ..core.types import MacdValue
from ..data.selection import select_field
from .actions import ValueAvailableActionMACD
from .base import BaseIndicatorWithFloatBounds, check_lookback_period
from .moving_average import Ema


class Macd(BaseIndicatorWithFloatBounds[MacdValue]):
    """
    Moving Average Convergence/Divergence.

    The fast and slow EMAs run on every value; their difference feeds the
    signal EMA. Each inner EMA is owned by this indicator and reports back
    through a callback on the same bar, so a result for bar N is complete
    before bar N + 1 is accepted.

    Emits ``MacdValue(macd, signal, histogram)``.
    """

    output_width = 3

    def __init__(
        self,
        fast_period: int,
        slow_period: int,
        signal_period: int,
        *,
        value_available_action: Optional[ValueAvailableActionMACD] = None,
        **options,
    ):
        for period in (fast_period, slow_period, signal_period):
            check_lookback_period(period)
        if slow_period < fast_period:
            fast_period, slow_period = slow_period, fast_period
        super().__init__(
            (slow_period - 1) + (signal_period - 1),
            value_available_action=value_available_action,
            **options,
        )
        self.fast_period = fast_period
        self.slow_period = slow_period
        self.signal_period = signal_period

        self._fast_ema = Ema.without_storage(fast_period, value_available_action=self._on_fast)
        self._slow_ema = Ema.without_storage(slow_period, value_available_action=self._on_slow)
        self._signal_ema = Ema.without_storage(signal_period, value_available_action=self._on_signal)
        self._fast_value: Optional[float] = None
        self._macd_value: Optional[float] = None

    @classmethod
    def default(cls, **options):
        config = DEFAULTS.macd
        options.setdefault("select_data", select_field(config.source))
        return cls(config.fast_period, config.slow_period, config.signal_period, **options)

    def _transform(self, value: float, stream_bar_index: int) -> None:
        self._fast_ema.receive_tick(value, stream_bar_index)
        self._slow_ema.receive_tick(value, stream_bar_index)

    def _on_fast(self, value: float, stream_bar_index: int) -> None:
        self._fast_value = value

    def _on_slow(self, value: float, stream_bar_index: int) -> None:
        self._macd_value = self._fast_value - value
        self._signal_ema.receive_tick(self._macd_value, stream_bar_index)

    def _on_signal(self, value: float, stream_bar_index: int) -> None:
        self._publish(
            MacdValue(
                macd=self._macd_value,
                signal=value,
                histogram=self._macd_value - value,
            ),
            stream_bar_index,
        )
