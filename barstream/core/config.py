"""Default parameters for the shipped indicators."""

from dataclasses import dataclass, field
from typing import Literal

Source = Literal["open", "high", "low", "close", "volume", "median", "typical"]


@dataclass
class SmaConfig:
    """Simple moving average configuration."""
    period: int = 25
    source: Source = "close"


@dataclass
class EmaConfig:
    """Exponential moving average configuration."""
    period: int = 25
    source: Source = "close"


@dataclass
class MomentumConfig:
    """Momentum configuration."""
    period: int = 10
    source: Source = "close"


@dataclass
class RsiConfig:
    """Relative strength index configuration."""
    period: int = 14
    source: Source = "close"


@dataclass
class AtrConfig:
    """Average true range configuration."""
    period: int = 14


@dataclass
class BollingerConfig:
    """Bollinger Bands configuration."""
    period: int = 20
    deviation: float = 2.0
    source: Source = "close"


@dataclass
class MacdConfig:
    """MACD configuration."""
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9
    source: Source = "close"


@dataclass
class AroonConfig:
    """Aroon configuration."""
    period: int = 14


@dataclass
class IndicatorDefaults:
    """Main defaults container."""
    sma: SmaConfig = field(default_factory=SmaConfig)
    ema: EmaConfig = field(default_factory=EmaConfig)
    momentum: MomentumConfig = field(default_factory=MomentumConfig)
    rsi: RsiConfig = field(default_factory=RsiConfig)
    atr: AtrConfig = field(default_factory=AtrConfig)
    bollinger: BollingerConfig = field(default_factory=BollingerConfig)
    macd: MacdConfig = field(default_factory=MacdConfig)
    aroon: AroonConfig = field(default_factory=AroonConfig)


DEFAULTS = IndicatorDefaults()
