"""Numpy-backed storage for indicator results."""

import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

_INITIAL_CAPACITY = 64


class ValueSeries:
    """
    Append-only buffer of emitted values.

    Offline indicators know their capacity up front and allocate it once.
    Online indicators start small and double as needed.
    """

    def __init__(self, capacity: Optional[int] = None, width: int = 1, dtype=np.float64):
        self.width = width
        self.presized = capacity is not None
        initial = capacity if capacity is not None else _INITIAL_CAPACITY
        shape = (initial,) if width == 1 else (initial, width)
        self._buffer = np.empty(shape, dtype=dtype)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._buffer.shape[0]

    def append(self, value) -> None:
        if self._size == self.capacity:
            self._grow()
        self._buffer[self._size] = value
        self._size += 1

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the stored rows."""
        view = self._buffer[:self._size]
        view.flags.writeable = False
        return view

    def _grow(self) -> None:
        if self.presized:
            logger.debug(f"Pre-sized storage of {self.capacity} exceeded, growing")
        new_capacity = max(self.capacity * 2, 1)
        grown = np.empty((new_capacity,) + self._buffer.shape[1:], dtype=self._buffer.dtype)
        grown[:self._size] = self._buffer[:self._size]
        self._buffer = grown
