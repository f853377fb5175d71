"""Data selection functions: pick one scalar out of a bar."""

from typing import Callable

from ..core.types import Bar

DataSelectionFunc = Callable[[Bar], float]


def use_open_price(bar: Bar) -> float:
    return bar.open


def use_high_price(bar: Bar) -> float:
    return bar.high


def use_low_price(bar: Bar) -> float:
    return bar.low


def use_close_price(bar: Bar) -> float:
    return bar.close


def use_volume(bar: Bar) -> float:
    return bar.volume


def use_avg_price(bar: Bar) -> float:
    """Average of open, high, low and close."""
    return (bar.open + bar.high + bar.low + bar.close) / 4


def use_median_price(bar: Bar) -> float:
    """(high + low) / 2."""
    return bar.median


def use_typical_price(bar: Bar) -> float:
    """(high + low + close) / 3."""
    return bar.typical


def use_weighted_close(bar: Bar) -> float:
    """(high + low + 2 * close) / 4."""
    return (bar.high + bar.low + 2 * bar.close) / 4


_NAMED: dict[str, DataSelectionFunc] = {
    "open": use_open_price,
    "high": use_high_price,
    "low": use_low_price,
    "close": use_close_price,
    "volume": use_volume,
    "avg": use_avg_price,
    "median": use_median_price,
    "typical": use_typical_price,
    "weighted": use_weighted_close,
}


def select_field(name: str) -> DataSelectionFunc:
    """
    Get a selection function by name.

    Known names map to the functions above; anything else is read as a
    bar attribute.

    Raises:
        ValueError: If the bar type has no such field
    """
    if name in _NAMED:
        return _NAMED[name]
    if name not in Bar.__dataclass_fields__:
        raise ValueError(f"Unknown bar field: {name}")

    def select(bar: Bar) -> float:
        return getattr(bar, name)

    return select
