from __future__ import annotations
from typing import Any, Sequence

from .base import Filter
from ..utils.paths import get_path, has_path

__all__ = ["GATE_FILTER", "FilterIf"]

GATE_FILTER = "filter_if"


class FilterIf(Filter):
    """
    Gate: `filter_if:<attribute>,<expected>`.

    Receives the whole data mapping rather than the attribute value and returns
    True when `<attribute>` (a dot path) exists and equals `<expected>`.
    The comparison is strict: options are strings, so `1` or `True` stored in
    the data never equal "1" or "true".
    """

    name = GATE_FILTER

    def apply(self, value: Any, options: Sequence[str] = ()) -> bool:
        if len(options) < 2:
            raise self.fail(f"expects <attribute>,<expected>, got {list(options)!r}")
        attribute, expected = options[0], options[1]
        if not has_path(value, attribute):
            return False
        actual = get_path(value, attribute)
        return isinstance(actual, str) and actual == expected
