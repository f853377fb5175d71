"""Core data types shared by the indicators."""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple


@dataclass(frozen=True, slots=True)
class Bar:
    """DOHLCV bar for one period."""
    date: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def median(self) -> float:
        """Median price (high + low) / 2."""
        return (self.high + self.low) / 2

    @property
    def typical(self) -> float:
        """Typical price (high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3


class BandValue(NamedTuple):
    """Upper/middle/lower band values at one bar."""
    upper: float
    middle: float
    lower: float


class MacdValue(NamedTuple):
    """MACD line, signal line and histogram at one bar."""
    macd: float
    signal: float
    histogram: float


class AroonValue(NamedTuple):
    """Aroon up/down lines at one bar."""
    up: float
    down: float


class StochValue(NamedTuple):
    """Stochastic %K and %D lines at one bar."""
    k: float
    d: float


class LinearRegValue(NamedTuple):
    """Regression value with the slope and intercept that produced it."""
    value: float
    slope: float
    intercept: float
