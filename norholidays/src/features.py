"""Calendar features: weekend and public holiday flags for a DatetimeIndex."""

import numpy as np
import pandas as pd

from .holidays import gen_holidays_for_year

FEATURE_COLUMNS = ("is_weekend", "is_holiday")


def _holiday_flags(timestamps: pd.DatetimeIndex) -> np.ndarray:
    """Flag timestamps whose calendar date is a public holiday."""
    holidays = set()
    for year in timestamps.year.unique():
        holidays.update(gen_holidays_for_year(int(year)))
    # .date keeps the wall-clock date of tz-aware timestamps
    return np.array([d in holidays for d in timestamps.date], dtype=int)


def build_calendar_features(timestamps: pd.DatetimeIndex, config: dict) -> pd.DataFrame:
    """Build 0/1 calendar flag columns indexed by timestamps.

    Columns and their order come from config["features"]["columns"].
    Timestamps are used as given, without timezone conversion.
    """
    if not isinstance(timestamps, pd.DatetimeIndex):
        raise TypeError(f"expected a pandas DatetimeIndex, got {type(timestamps).__name__}")

    columns = list(config["features"]["columns"])
    unknown = [c for c in columns if c not in FEATURE_COLUMNS]
    if unknown:
        raise ValueError(f"Unknown feature columns: {unknown} (allowed: {list(FEATURE_COLUMNS)})")

    df = pd.DataFrame(index=timestamps)
    if "is_weekend" in columns:
        df["is_weekend"] = timestamps.dayofweek.isin([5, 6]).astype(int)
    if "is_holiday" in columns:
        df["is_holiday"] = _holiday_flags(timestamps)

    return df[columns]
