"""
Indicator base classes.

Every indicator receives price data bar by bar, transforms it and hands each
result on, either into storage it owns or to a value-available callback.
The shared bookkeeping lives here:

- the lookback period, the lag between source data and the first result
- the source bar number from which the indicator is valid
- the number of results emitted so far
- running min/max bounds of the results

Concrete indicators subclass one of the composite bases
(``BaseIndicatorWithFloatBounds`` / ``BaseIndicatorWithIntBounds``), mix in
``BaseIndicatorWithTimePeriod`` when they expose a user-tunable window, and
implement ``_transform`` (or ``_transform_bar`` when they need the whole bar).

Construction modes, available on every concrete indicator:

Online (stream length unknown)
    ``Cls(...)``, ``Cls.default()``, ``Cls.for_stream(stream, ...)``
Offline (stream length known)
    ``Cls.with_src_len(n, ...)``, ``Cls.for_stream_with_src_len(n, stream, ...)``,
    ``Cls.from_bars(bars, ...)``
Storage-less (building block inside another indicator)
    ``Cls.without_storage(..., value_available_action=cb)``
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import (
    Callable,
    Final,
    Generic,
    Iterable,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
    runtime_checkable,
)

import numpy as np
import pandas as pd

from ..core.errors import (
    LookbackPeriodMustBeGreaterThanZeroError,
    NotEnoughSourceDataForLookbackPeriodError,
    SourceDataEmptyError,
    ValueAvailableActionIsNilError,
)
from ..core.types import Bar
from ..data.converter import bars_from_frame
from ..data.selection import DataSelectionFunc, use_close_price
from .actions import notify
from .bounds import FloatBounds, IntBounds
from .storage import ValueSeries

logger = logging.getLogger(__name__)

T = TypeVar("T")

MINIMUM_LOOKBACK_PERIOD: Final = 0
MAXIMUM_LOOKBACK_PERIOD: Final = 100000

NOT_VALID: Final = -1


@runtime_checkable
class Indicator(Protocol):
    """Capabilities shared by every indicator."""

    @property
    def valid_from_bar(self) -> int:
        """Source bar number (1-based) of the first result, -1 until then."""
        ...

    @property
    def lookback_period(self) -> int:
        """Lag, in bars, between the source data and the first result."""
        ...

    @property
    def length(self) -> int:
        """Number of results emitted so far."""
        ...


@runtime_checkable
class IndicatorWithTimePeriod(Protocol):
    @property
    def time_period(self) -> int:
        ...


@runtime_checkable
class IndicatorWithFloatBounds(Protocol):
    @property
    def min_value(self) -> float:
        ...

    @property
    def max_value(self) -> float:
        ...


@runtime_checkable
class IndicatorWithIntBounds(Protocol):
    @property
    def min_value(self) -> int:
        ...

    @property
    def max_value(self) -> int:
        ...


class IndicatorState(Enum):
    """Lifecycle of an indicator; it only ever moves forward."""
    UNATTACHED = "unattached"
    WARMING_UP = "warming_up"
    VALID = "valid"


def check_lookback_period(period: int, allow_zero: bool = False) -> None:
    """
    Validate a lookback or time period.

    Raises:
        LookbackPeriodMustBeGreaterThanZeroError: If outside the accepted range
    """
    lowest = MINIMUM_LOOKBACK_PERIOD if allow_zero else MINIMUM_LOOKBACK_PERIOD + 1
    if not isinstance(period, (int, np.integer)) or not lowest <= period <= MAXIMUM_LOOKBACK_PERIOD:
        raise LookbackPeriodMustBeGreaterThanZeroError()


def check_source_length(source_length: int, lookback_period: int) -> None:
    """
    Validate the length of an offline source series.

    Raises:
        SourceDataEmptyError: If the series is empty
        NotEnoughSourceDataForLookbackPeriodError: If shorter than the lookback
    """
    if source_length <= 0:
        raise SourceDataEmptyError()
    if source_length < lookback_period:
        raise NotEnoughSourceDataForLookbackPeriodError()


def check_value_available_action(action: Optional[Callable[..., None]]) -> None:
    """
    Raises:
        ValueAvailableActionIsNilError: If the action is missing or not callable
    """
    if action is None or not callable(action):
        raise ValueAvailableActionIsNilError()


class BaseIndicator:
    """Lookback period, validity offset and emitted-length counter."""

    def __init__(self, lookback_period: int):
        self._lookback_period = lookback_period
        self._valid_from_bar = NOT_VALID
        self._data_length = 0

    @property
    def valid_from_bar(self) -> int:
        return self._valid_from_bar

    @property
    def lookback_period(self) -> int:
        return self._lookback_period

    @property
    def length(self) -> int:
        return self._data_length

    def record_emission(self, stream_bar_index: int) -> bool:
        """Count one emission; returns True if it was the first."""
        first = self._valid_from_bar == NOT_VALID
        if first:
            self._valid_from_bar = stream_bar_index
        self._data_length += 1
        return first


class BaseIndicatorWithTimePeriod:
    """
    Time period of indicators with a user-tunable window.

    Kept apart from the lookback period since the lookback is often derived
    from it (period - 1 for moving averages) and sometimes equal to it.
    """

    def __init__(self, time_period: int):
        self._time_period = time_period

    @property
    def time_period(self) -> int:
        return self._time_period


class _BoundedIndicator(ABC, Generic[T]):
    """
    Base state plus a bounds tracker, and the construction-mode plumbing.

    Keyword options accepted by every concrete indicator and passed through
    to ``__init__`` here:

    select_data
        Selection function applied to each bar (defaults to the close).
    value_available_action
        Callback for each result. Required when ``storage`` is False,
        an optional listener otherwise.
    storage
        Whether results are kept in ``data``.
    source_length
        Known length of the source stream; pre-sizes storage.

    Indicators that read whole bars set ``selects_data`` to False and refuse
    ``select_data``.
    """

    _bounds_type: type = FloatBounds
    output_dtype = np.float64
    output_width = 1
    selects_data = True

    def __init__(
        self,
        lookback_period: int,
        select_data: Optional[DataSelectionFunc] = None,
        value_available_action: Optional[Callable[..., None]] = None,
        storage: bool = True,
        source_length: Optional[int] = None,
    ):
        if select_data is not None and not self.selects_data:
            raise TypeError(f"{type(self).__name__} reads whole bars and takes no select_data")
        self._base = BaseIndicator(lookback_period)
        self._bounds = self._bounds_type()
        self._select_data = select_data or use_close_price
        self._bars_received = 0
        self._last_value: Optional[T] = None

        if storage:
            capacity = None
            if source_length is not None:
                check_source_length(source_length, lookback_period)
                capacity = source_length - lookback_period
            self._storage: Optional[ValueSeries] = ValueSeries(
                capacity, self.output_width, self.output_dtype
            )
        else:
            check_value_available_action(value_available_action)
            self._storage = None
        self._value_available_action = value_available_action

        logger.debug(
            f"{type(self).__name__} created: lookback={lookback_period}, "
            f"storage={'none' if self._storage is None else 'offline' if source_length else 'online'}"
        )

    # --- Indicator ---

    @property
    def valid_from_bar(self) -> int:
        return self._base.valid_from_bar

    @property
    def lookback_period(self) -> int:
        return self._base.lookback_period

    @property
    def length(self) -> int:
        return self._base.length

    def __len__(self) -> int:
        return self._base.length

    # --- state ---

    @property
    def state(self) -> IndicatorState:
        if self._base.valid_from_bar != NOT_VALID:
            return IndicatorState.VALID
        if self._bars_received > 0:
            return IndicatorState.WARMING_UP
        return IndicatorState.UNATTACHED

    @property
    def is_ready(self) -> bool:
        """Check if indicator has produced a result."""
        return self._base.valid_from_bar != NOT_VALID

    @property
    def has_storage(self) -> bool:
        return self._storage is not None

    @property
    def data(self) -> np.ndarray:
        """Stored results, one row per emission."""
        if self._storage is None:
            raise RuntimeError(f"{type(self).__name__} was created without storage")
        return self._storage.values

    # --- ingestion ---

    def receive_bar(self, bar: Bar, stream_bar_index: int) -> None:
        """Consume one bar of a stream."""
        self._bars_received = stream_bar_index
        self._transform_bar(bar, stream_bar_index)

    def receive_tick(self, value, stream_bar_index: int) -> None:
        """Consume one already-selected value."""
        self._bars_received = stream_bar_index
        self._transform(value, stream_bar_index)

    def update(self, value) -> Optional[T]:
        """
        Feed the next value and return the result if one was emitted.

        Bars are numbered after the last one received.
        """
        before = self._base.length
        self.receive_tick(value, self._bars_received + 1)
        return self._last_value if self._base.length > before else None

    def update_bar(self, bar: Bar) -> Optional[T]:
        """Feed the next bar and return the result if one was emitted."""
        before = self._base.length
        self.receive_bar(bar, self._bars_received + 1)
        return self._last_value if self._base.length > before else None

    def _transform_bar(self, bar: Bar, stream_bar_index: int) -> None:
        self._transform(self._select_data(bar), stream_bar_index)

    @abstractmethod
    def _transform(self, value, stream_bar_index: int) -> None:
        """Fold one selected value into the state, publishing once warm."""

    # --- emission ---

    def _bounded_values(self, value) -> tuple:
        """Values folded into the bounds for one result."""
        return tuple(value) if isinstance(value, tuple) else (value,)

    def _publish(self, value: T, stream_bar_index: int) -> None:
        """Record a result then hand it on; never call during warm-up."""
        self._bounds.update(*self._bounded_values(value))
        if self._base.record_emission(stream_bar_index):
            logger.debug(f"{type(self).__name__} valid from bar {stream_bar_index}")
        self._last_value = value
        if self._storage is not None:
            self._storage.append(value)
        if self._value_available_action is not None:
            notify(self._value_available_action, value, stream_bar_index)

    # --- construction modes ---

    @classmethod
    def default(cls, **options):
        """Indicator with default parameters."""
        return cls(**options)

    @classmethod
    def with_src_len(cls, source_length: int, *args, **options):
        """Offline indicator with storage sized for ``source_length`` bars."""
        return cls(*args, source_length=source_length, **options)

    @classmethod
    def for_stream(cls, stream, *args, **options):
        """Online indicator attached to a bar stream."""
        indicator = cls(*args, **options)
        stream.add_tick_subscription(indicator)
        return indicator

    @classmethod
    def for_stream_with_src_len(cls, source_length: int, stream, *args, **options):
        """Offline indicator attached to a bar stream."""
        return cls.for_stream(stream, *args, source_length=source_length, **options)

    @classmethod
    def without_storage(cls, *args, value_available_action=None, **options):
        """Indicator whose results are only delivered to the callback."""
        return cls(*args, value_available_action=value_available_action, storage=False, **options)

    @classmethod
    def from_bars(cls, bars: Sequence[Bar] | Iterable[Bar] | pd.DataFrame, *args, **options):
        """
        Offline indicator over a complete historical series.

        The series length is validated before any bar is transformed.
        """
        if isinstance(bars, pd.DataFrame):
            bars = bars_from_frame(bars)
        elif not isinstance(bars, Sequence):
            bars = list(bars)
        indicator = cls(*args, source_length=len(bars), **options)
        check_source_length(len(bars), indicator.lookback_period)
        for stream_bar_index, bar in enumerate(bars, start=1):
            indicator.receive_bar(bar, stream_bar_index)
        logger.info(
            f"{cls.__name__} consumed {len(bars):,} bars, emitted {indicator.length:,} values"
        )
        return indicator


class BaseIndicatorWithFloatBounds(_BoundedIndicator[T]):
    """Base for indicators with float output."""

    _bounds_type = FloatBounds
    output_dtype = np.float64

    @property
    def min_value(self) -> float:
        return self._bounds.min_value

    @property
    def max_value(self) -> float:
        return self._bounds.max_value


class BaseIndicatorWithIntBounds(_BoundedIndicator[T]):
    """Base for indicators with integer output."""

    _bounds_type = IntBounds
    output_dtype = np.int64

    @property
    def min_value(self) -> int:
        return self._bounds.min_value

    @property
    def max_value(self) -> int:
        return self._bounds.max_value
