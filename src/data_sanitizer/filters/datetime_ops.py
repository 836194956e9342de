from __future__ import annotations
from datetime import datetime
from typing import Any, Iterable, Optional, Sequence
import pandas as pd
import pytz

from .base import Filter
from ..utils.time import DEFAULT_INPUT_FORMATS, as_datetime, parse_any_datetime, to_timezone

__all__ = ["FormatDate"]


def _opt(options: Sequence[str], i: int) -> str:
    return options[i] if len(options) > i else ""


class FormatDate(Filter):
    """
    Reformat a date-like value: `format_date:<from>,<to>[,<timezone>]`.

    Formats are strftime/strptime patterns. With an empty `<from>` the value is
    parsed with `input_formats` first and pandas second; datetime-like values
    (datetime, date, pd.Timestamp, np.datetime64) skip parsing. `<to>` and
    `<timezone>` fall back to the instance defaults (see `[dates]` in the
    config). None, "" and missing values (NaN, NaT) are returned unchanged.

    Options are comma-separated, so a format cannot itself contain a comma.
    """

    name = "format_date"

    def __init__(
        self,
        input_formats: Iterable[str] = DEFAULT_INPUT_FORMATS,
        output_format: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> None:
        self.input_formats = tuple(input_formats)
        self.output_format = output_format
        self.timezone = timezone

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if isinstance(value, str):
            if not value:
                return value
        elif value is None or _isna(value):
            return value

        from_fmt = _opt(options, 0)
        to_fmt = _opt(options, 1) or self.output_format
        tz = _opt(options, 2) or self.timezone
        if not to_fmt:
            raise self.fail("a target format is required, e.g. format_date:%d/%m/%Y,%Y-%m-%d")

        dt = as_datetime(value)
        if dt is None:
            dt = self._parse(str(value), from_fmt)
        if tz:
            try:
                dt = to_timezone(dt, tz)
            except pytz.UnknownTimeZoneError as e:
                raise self.fail(f"unknown timezone {tz!r}") from e
        return dt.strftime(to_fmt)

    def _parse(self, text: str, from_fmt: str) -> datetime:
        if from_fmt:
            try:
                return datetime.strptime(text, from_fmt)
            except ValueError as e:
                raise self.fail(f"{text!r} does not match {from_fmt!r}") from e
        dt = parse_any_datetime(text, self.input_formats)
        if dt is None:
            raise self.fail(f"cannot parse {text!r} as a date")
        return dt


def _isna(value: Any) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
