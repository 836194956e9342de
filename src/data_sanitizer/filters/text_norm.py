from __future__ import annotations
from typing import Any, Sequence
import re

from .base import Filter

__all__ = ["Trim", "Lowercase", "Uppercase", "Capitalize"]

# first letter of the string or of any whitespace-separated word
_WORD_START_RE = re.compile(r"(^|\s)(\S)")


class Trim(Filter):
    """Strip surrounding whitespace. Options are accepted and ignored."""

    name = "trim"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        return value.strip() if isinstance(value, str) else value


class Lowercase(Filter):
    name = "lowercase"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        return value.lower() if isinstance(value, str) else value


class Uppercase(Filter):
    name = "uppercase"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        return value.upper() if isinstance(value, str) else value


class Capitalize(Filter):
    """
    Lowercase the string, then uppercase the first letter of each word.

    Words are split on whitespace only, so "o'neil-smith" becomes
    "O'neil-smith" rather than str.title()'s "O'Neil-Smith".
    """

    name = "capitalize"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if not isinstance(value, str):
            return value
        return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), value.lower())
