from datetime import date, datetime
import pandas as pd
import pytest
import pytz

from data_sanitizer.errors import FilterError
from data_sanitizer.filters import FormatDate

def test_explicit_from_and_to():
    assert FormatDate().apply("04/07/1990", ["%d/%m/%Y", "%Y-%m-%d"]) == "1990-07-04"

def test_empty_from_uses_input_formats():
    assert FormatDate().apply("2024-01-02", ["", "%d.%m.%Y"]) == "02.01.2024"
    custom = FormatDate(input_formats=["%d|%m|%Y"], output_format="%Y")
    assert custom.apply("02|01|2024") == "2024"

def test_pandas_fallback_parse():
    assert FormatDate().apply("2 January 2024", ["", "%Y-%m-%d"]) == "2024-01-02"

def test_instance_default_output_format():
    assert FormatDate(output_format="%m/%Y").apply("2024-03-09") == "03/2024"

def test_target_format_required():
    with pytest.raises(FilterError, match="target format"):
        FormatDate().apply("2024-01-02")

def test_from_format_mismatch():
    with pytest.raises(FilterError, match="does not match"):
        FormatDate().apply("2024-01-02", ["%d/%m/%Y", "%Y"])

def test_unparseable():
    with pytest.raises(FilterError, match="cannot parse"):
        FormatDate().apply("not a date", ["", "%Y"])

@pytest.mark.parametrize("value", [
    datetime(2024, 1, 2, 13, 5),
    pd.Timestamp("2024-01-02 13:05"),
])
def test_datetime_like_values_skip_parsing(value):
    assert FormatDate().apply(value, ["%d/%m/%Y", "%Y-%m-%d %H:%M"]) == "2024-01-02 13:05"

def test_date_value():
    assert FormatDate().apply(date(2024, 1, 2), ["", "%d/%m/%Y"]) == "02/01/2024"

def test_naive_value_is_localized():
    out = FormatDate().apply("2024-01-02 10:00:00", ["", "%H:%M %Z", "UTC"])
    assert out == "10:00 UTC"

def test_aware_value_is_converted():
    dt = datetime(2024, 1, 2, 10, 0, tzinfo=pytz.UTC)
    assert FormatDate(timezone="Europe/Berlin").apply(dt, ["", "%H:%M"]) == "11:00"

def test_unknown_timezone():
    with pytest.raises(FilterError, match="unknown timezone"):
        FormatDate().apply("2024-01-02", ["", "%Y", "Mars/Base"])

@pytest.mark.parametrize("value", [None, ""])
def test_empty_values_pass_through(value):
    assert FormatDate().apply(value, ["", "%Y"]) == value

def test_nan_passes_through():
    assert FormatDate().apply(pd.NaT, ["", "%Y"]) is pd.NaT
