"""Data module - Bar selection, streaming and conversion utilities."""

from .selection import (
    DataSelectionFunc,
    use_open_price,
    use_high_price,
    use_low_price,
    use_close_price,
    use_volume,
    use_avg_price,
    use_median_price,
    use_typical_price,
    use_weighted_close,
    select_field,
)
from .stream import BarStream
from .converter import bars_from_frame

__all__ = [
    'DataSelectionFunc', 'use_open_price', 'use_high_price', 'use_low_price',
    'use_close_price', 'use_volume', 'use_avg_price', 'use_median_price',
    'use_typical_price', 'use_weighted_close', 'select_field',
    'BarStream', 'bars_from_frame',
]
