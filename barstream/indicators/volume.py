"""Bar volume as an integer-valued indicator."""

from typing import Optional

from ..core.types import Bar
from .actions import ValueAvailableActionInt
from .base import BaseIndicatorWithIntBounds


class Volume(BaseIndicatorWithIntBounds[int]):
    """Volume of each bar, truncated to an integer; no warm-up."""

    selects_data = False

    def __init__(self, *, value_available_action: Optional[ValueAvailableActionInt] = None, **options):
        super().__init__(0, value_available_action=value_available_action, **options)

    def _transform_bar(self, bar: Bar, stream_bar_index: int) -> None:
        self._publish(int(bar.volume), stream_bar_index)

    def _transform(self, value: float, stream_bar_index: int) -> None:
        self._publish(int(value), stream_bar_index)
