"""Indicators module - Indicator base layer and technical indicators."""

from .base import (
    MINIMUM_LOOKBACK_PERIOD,
    MAXIMUM_LOOKBACK_PERIOD,
    Indicator,
    IndicatorWithTimePeriod,
    IndicatorWithFloatBounds,
    IndicatorWithIntBounds,
    IndicatorState,
    BaseIndicator,
    BaseIndicatorWithTimePeriod,
    BaseIndicatorWithFloatBounds,
    BaseIndicatorWithIntBounds,
    check_lookback_period,
    check_source_length,
    check_value_available_action,
)
from .bounds import FloatBounds, IntBounds
from .moving_average import Sma, Ema
from .momentum import Rsi, Momentum
from .atr import Atr
from .bollinger import BollingerBands
from .macd import Macd
from .aroon import Aroon
from .volume import Volume

__all__ = [
    'MINIMUM_LOOKBACK_PERIOD', 'MAXIMUM_LOOKBACK_PERIOD',
    'Indicator', 'IndicatorWithTimePeriod', 'IndicatorWithFloatBounds', 'IndicatorWithIntBounds',
    'IndicatorState', 'BaseIndicator', 'BaseIndicatorWithTimePeriod',
    'BaseIndicatorWithFloatBounds', 'BaseIndicatorWithIntBounds',
    'check_lookback_period', 'check_source_length', 'check_value_available_action',
    'FloatBounds', 'IntBounds',
    'Sma', 'Ema', 'Rsi', 'Momentum', 'Atr', 'BollingerBands', 'Macd', 'Aroon', 'Volume',
]
