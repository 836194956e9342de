from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, Dict, Sequence
import json
import re
import numpy as np
import pandas as pd

from .base import Filter

__all__ = ["Cast", "to_int", "to_float", "to_bool", "to_list", "to_dict"]

# leading numeric token, PHP-style: "12abc" -> 12, "abc" -> 0
_LEADING_NUM_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")

_FALSE_TOKENS = {"", "0", "0.0", "false", "f", "no", "n", "off", "null", "none"}


def _unwrap(value: Any) -> Any:
    """numpy scalars/arrays -> plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return value


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_float(value: Any) -> float:
    if isinstance(value, (bool, int, float)):
        return float(value)
    m = _LEADING_NUM_RE.match(str(value))
    return float(m.group(0)) if m else 0.0


def to_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    s = str(value)
    if _LEADING_INT_RE.match(s):
        # exact for big integers that would lose precision through float
        return int(s.strip())
    return int(to_float(s))


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_TOKENS
    return bool(value)


def _loads(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError as e:
        raise ValueError(f"not valid JSON: {value[:40]!r}") from e


def to_list(value: Any) -> list:
    if isinstance(value, str):
        value = _loads(value)
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def to_dict(value: Any) -> dict:
    if isinstance(value, str):
        value = _loads(value)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return {str(i): v for i, v in enumerate(value)}
    raise ValueError(f"cannot build a mapping from {type(value).__name__}")


_CASTS: Dict[str, Callable[[Any], Any]] = {
    "int": to_int,
    "integer": to_int,
    "float": to_float,
    "double": to_float,
    "real": to_float,
    "str": str,
    "string": str,
    "bool": to_bool,
    "boolean": to_bool,
    "list": to_list,
    "array": to_list,
    "dict": to_dict,
    "object": to_dict,
}


class Cast(Filter):
    """
    Convert the value to the type named by the first option (`cast:int`).

    Missing values (None, NaN, pd.NA) pass through unchanged. Strings are
    converted leniently: numeric casts read the leading number ("12px" -> 12,
    "abc" -> 0), bool treats "", "0", "false", "no", "off" (any case) as False,
    list/dict decode JSON.
    """

    name = "cast"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if not options or not options[0]:
            raise self.fail("a target type is required, e.g. cast:int")
        kind = options[0].lower()
        fn = _CASTS.get(kind)
        if fn is None:
            raise self.fail(f"unsupported cast type {options[0]!r}; expected one of {sorted(_CASTS)}")

        value = _unwrap(value)
        if _is_missing(value):
            return value
        try:
            return fn(value)
        except (ValueError, OverflowError) as e:
            raise self.fail(f"cannot cast to {kind}: {e}") from e
