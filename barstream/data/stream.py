"""In-memory bar stream that indicators can attach to."""

import logging
from typing import Callable, Iterable, Protocol, Union

from ..core.types import Bar

logger = logging.getLogger(__name__)


class BarSubscriber(Protocol):
    """Anything that consumes numbered bars."""

    def receive_bar(self, bar: Bar, stream_bar_index: int) -> None:
        ...


Subscription = Union[BarSubscriber, Callable[[Bar, int], None]]


class BarStream:
    """
    Publish bars to subscribers in arrival order.

    Bars are numbered from 1. Every subscriber is called synchronously, in
    subscription order, before the next bar is accepted.
    """

    def __init__(self):
        self._subscribers: list[Callable[[Bar, int], None]] = []
        self._bar_count = 0

    def add_tick_subscription(self, subscriber: Subscription) -> None:
        """Subscribe an indicator (anything with receive_bar) or a bar callback."""
        receive = getattr(subscriber, "receive_bar", subscriber)
        if not callable(receive):
            raise TypeError(f"Cannot subscribe {subscriber!r} to a bar stream")
        self._subscribers.append(receive)
        logger.debug(f"Subscriber added ({len(self._subscribers)} total)")

    @property
    def bar_count(self) -> int:
        """Number of bars published so far."""
        return self._bar_count

    def receive_bar(self, bar: Bar) -> int:
        """Publish one bar and return its 1-based stream index."""
        self._bar_count += 1
        for receive in self._subscribers:
            receive(bar, self._bar_count)
        return self._bar_count

    def receive_bars(self, bars: Iterable[Bar]) -> int:
        """Publish every bar in order and return the number published."""
        count = 0
        for bar in bars:
            self.receive_bar(bar)
            count += 1
        return count
