"""Core module - Types, configuration and errors."""

from .types import Bar, BandValue, MacdValue, AroonValue, StochValue, LinearRegValue
from .config import IndicatorDefaults, DEFAULTS
from .errors import (
    IndicatorError,
    SourceDataEmptyError,
    NotEnoughSourceDataForLookbackPeriodError,
    LookbackPeriodMustBeGreaterThanZeroError,
    ValueAvailableActionIsNilError,
)

__all__ = [
    'Bar', 'BandValue', 'MacdValue', 'AroonValue', 'StochValue', 'LinearRegValue',
    'IndicatorDefaults', 'DEFAULTS',
    'IndicatorError', 'SourceDataEmptyError', 'NotEnoughSourceDataForLookbackPeriodError',
    'LookbackPeriodMustBeGreaterThanZeroError', 'ValueAvailableActionIsNilError',
]
