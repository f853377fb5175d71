"""
Exceptions raised while constructing indicators.

All of them are detected before any bar is transformed; per-bar ingestion
never raises one of these.
"""


class IndicatorError(ValueError):
    """Base exception for indicator construction errors."""

    default_message = "Indicator error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class SourceDataEmptyError(IndicatorError):
    """An offline indicator was given a zero-length source series."""

    default_message = "Source data is empty"


class NotEnoughSourceDataForLookbackPeriodError(IndicatorError):
    """An offline source series is shorter than the lookback period."""

    default_message = "Source data does not contain enough data for the specified lookback period"


class LookbackPeriodMustBeGreaterThanZeroError(IndicatorError):
    """A lookback (or time) period outside the accepted range was supplied."""

    default_message = "Lookback period must be greater than 0"


class ValueAvailableActionIsNilError(IndicatorError):
    """A storage-less indicator was requested without a usable callback."""

    default_message = "ValueAvailableAction cannot be empty"
