"""
Value-available callbacks.

A producing indicator calls its action synchronously right after its own
bookkeeping (length, bounds, valid_from_bar) has been updated, passing the
computed value(s) and the 1-based index of the source bar. Actions are never
called for bars inside the warm-up period.

Each output shape keeps its own positional arity so a band listener receives
``(upper, middle, lower, stream_bar_index)``. ``ValueAvailableAction[T]`` is
the single-record form over the tagged output types in ``core.types``; use
``as_record_action`` to bridge the two.
"""

from typing import Any, Callable, TypeVar

from ..core.types import Bar

T = TypeVar("T")

ValueAvailableAction = Callable[[T, int], None]

ValueAvailableActionFloat = Callable[[float, int], None]
ValueAvailableActionInt = Callable[[int, int], None]
ValueAvailableActionBar = Callable[[Bar, int], None]
ValueAvailableActionBollinger = Callable[[float, float, float, int], None]
ValueAvailableActionMACD = Callable[[float, float, float, int], None]
ValueAvailableActionAroon = Callable[[float, float, int], None]
ValueAvailableActionStoch = Callable[[float, float, int], None]
ValueAvailableActionLinearReg = Callable[[float, float, float, int], None]


def notify(action: Callable[..., None], value: Any, stream_bar_index: int) -> None:
    """Invoke an action with the arity of its output shape."""
    if isinstance(value, tuple):
        action(*value, stream_bar_index)
    else:
        action(value, stream_bar_index)


def as_record_action(action: Callable[..., None], record_type: type) -> ValueAvailableAction:
    """
    Wrap a per-shape action so it can be fed whole output records.

    Args:
        action: Callback taking the record fields then the bar index
        record_type: The NamedTuple the wrapped callback will receive

    Returns:
        Callback of shape ``(record, stream_bar_index)``
    """
    def receive(record, stream_bar_index: int) -> None:
        if not isinstance(record, record_type):
            raise TypeError(f"Expected {record_type.__name__}, got {type(record).__name__}")
        action(*record, stream_bar_index)

    return receive


def as_shape_action(action: ValueAvailableAction, record_type: type) -> Callable[..., None]:
    """Inverse of ``as_record_action``: collect positional fields into a record."""
    def receive(*args) -> None:
        *fields, stream_bar_index = args
        action(record_type(*fields), stream_bar_index)

    return receive
