"""Convert OHLCV DataFrames to bars."""

import numpy as np
import pandas as pd

from ..core.types import Bar

REQUIRED_COLUMNS = ("open", "high", "low", "close")


def bars_from_frame(frame: pd.DataFrame, date_column: str | None = None) -> list[Bar]:
    """
    Build bars from an OHLCV DataFrame.

    Args:
        frame: DataFrame with open/high/low/close and optionally volume columns
        date_column: Column holding bar dates; the index is used when omitted

    Returns:
        One Bar per row, in row order

    Raises:
        ValueError: If a required column is missing
    """
    columns = {c.lower(): c for c in frame.columns}
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise ValueError(f"OHLCV frame is missing columns: {missing}")

    if date_column is not None:
        dates = pd.DatetimeIndex(pd.to_datetime(frame[date_column]))
    else:
        dates = pd.DatetimeIndex(pd.to_datetime(frame.index))

    opens = frame[columns["open"]].to_numpy(dtype=np.float64)
    highs = frame[columns["high"]].to_numpy(dtype=np.float64)
    lows = frame[columns["low"]].to_numpy(dtype=np.float64)
    closes = frame[columns["close"]].to_numpy(dtype=np.float64)
    if "volume" in columns:
        volumes = frame[columns["volume"]].to_numpy(dtype=np.float64)
    else:
        volumes = np.zeros(len(frame), dtype=np.float64)

    return [
        Bar(
            date=dates[i].to_pydatetime(),
            open=float(opens[i]),
            high=float(highs[i]),
            low=float(lows[i]),
            close=float(closes[i]),
            volume=float(volumes[i]),
        )
        for i in range(len(frame))
    ]

