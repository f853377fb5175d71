"""Shared pytest fixtures: synthetic OHLCV bars."""

from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

import numpy as np
import pandas as pd
import pytest

from barstream.core.types import Bar


def _bars(
    closes: Sequence[float],
    highs: Optional[Sequence[float]] = None,
    lows: Optional[Sequence[float]] = None,
    volumes: Optional[Sequence[float]] = None,
) -> list[Bar]:
    start = datetime(2024, 1, 1)
    highs = highs if highs is not None else closes
    lows = lows if lows is not None else closes
    volumes = volumes if volumes is not None else [0.0] * len(closes)
    return [
        Bar(
            date=start + timedelta(hours=i),
            open=float(closes[i]),
            high=float(highs[i]),
            low=float(lows[i]),
            close=float(closes[i]),
            volume=float(volumes[i]),
        )
        for i in range(len(closes))
    ]


@pytest.fixture
def make_bars() -> Callable[..., list[Bar]]:
    """Build bars from close (and optionally high/low/volume) sequences."""
    return _bars


@pytest.fixture
def sample_ohlcv_data() -> pd.DataFrame:
    """Generate sample OHLCV data for testing."""
    np.random.seed(42)
    n = 100
    dates = pd.date_range("2024-01-01", periods=n, freq="1h")

    base_price = 100.0
    returns = np.random.randn(n) * 0.02
    close = base_price * np.exp(np.cumsum(returns))

    high = close * (1 + np.abs(np.random.randn(n) * 0.01))
    low = close * (1 - np.abs(np.random.randn(n) * 0.01))
    open_p = (high + low) / 2 + np.random.randn(n) * 0.5
    volume = np.random.randint(1000, 10000, n).astype(float)

    return pd.DataFrame(
        {
            "open": open_p,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=dates,
    )


@pytest.fixture
def sample_bars(sample_ohlcv_data: pd.DataFrame) -> list[Bar]:
    """The sample OHLCV data as bars."""
    from barstream.data.converter import bars_from_frame

    return bars_from_frame(sample_ohlcv_data)
