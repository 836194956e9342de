from __future__ import annotations
from typing import Any, Iterable, Optional
from datetime import date, datetime
import numpy as np
import pandas as pd
import pytz

DEFAULT_INPUT_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%Y-%m-%d %H:%M:%S")


def parse_any_datetime(
    s: str,
    formats: Iterable[str] = DEFAULT_INPUT_FORMATS,
) -> Optional[datetime]:
    for f in formats:
        try:
            return datetime.strptime(s, f)
        except (TypeError, ValueError):
            continue
    # pandas to_datetime as fallback
    try:
        dt = pd.to_datetime(s, errors="raise")
    except (TypeError, ValueError, OverflowError):
        return None
    if pd.isna(dt):
        return None
    return dt.to_pydatetime()


def as_datetime(value: Any) -> Optional[datetime]:
    """datetime-likes (datetime, date, pd.Timestamp, np.datetime64) -> datetime; else None."""
    if value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return None if pd.isna(value) else value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, np.datetime64):
        ts = pd.Timestamp(value)
        return None if pd.isna(ts) else ts.to_pydatetime()
    return None


def to_timezone(dt: datetime, tz: str) -> datetime:
    tzinfo = pytz.timezone(tz)
    if dt.tzinfo is None:
        return tzinfo.localize(dt)
    return dt.astimezone(tzinfo)
