from datetime import date, datetime
import numpy as np
import pandas as pd
import pytz

from data_sanitizer.utils.time import as_datetime, parse_any_datetime, to_timezone

def test_parse_any_datetime_formats_then_pandas():
    assert parse_any_datetime("2024-01-02") == datetime(2024, 1, 2)
    assert parse_any_datetime("01/02/2024") == datetime(2024, 1, 2)
    assert parse_any_datetime("02.01.2024", ["%d.%m.%Y"]) == datetime(2024, 1, 2)
    assert parse_any_datetime("Jan 2 2024") == datetime(2024, 1, 2)

def test_parse_any_datetime_failure_is_none():
    assert parse_any_datetime("nope") is None
    assert parse_any_datetime("") is None

def test_as_datetime():
    assert as_datetime(date(2024, 1, 2)) == datetime(2024, 1, 2)
    assert as_datetime(pd.Timestamp("2024-01-02 03:04")) == datetime(2024, 1, 2, 3, 4)
    assert as_datetime(np.datetime64("2024-01-02")) == datetime(2024, 1, 2)
    assert as_datetime(pd.NaT) is None
    assert as_datetime("2024-01-02") is None

def test_to_timezone_naive_and_aware():
    naive = to_timezone(datetime(2024, 7, 1, 12), "Europe/Paris")
    assert naive.hour == 12 and naive.utcoffset().total_seconds() == 7200
    aware = to_timezone(datetime(2024, 7, 1, 12, tzinfo=pytz.UTC), "Europe/Paris")
    assert aware.hour == 14
