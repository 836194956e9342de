from __future__ import annotations
from typing import Any, Iterable


class SanitizerError(Exception):
    """Base class for every error raised by data_sanitizer."""


class InvalidRuleType(SanitizerError, TypeError):
    """A rule descriptor is neither a rule string nor a callable."""

    def __init__(self, attribute: str, rule: Any) -> None:
        self.attribute = attribute
        self.rule = rule
        super().__init__(
            f"Unsupported rule type {type(rule).__name__} for attribute {attribute!r}: {rule!r}"
        )


class UnknownFilter(SanitizerError, LookupError):
    """A parsed rule names a filter the registry does not know."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"No filter found by the name of {name!r}. "
            f"Available filters: {', '.join(self.available)}"
        )


class FilterError(SanitizerError, ValueError):
    """A built-in filter got options it cannot honor."""

    def __init__(self, filter_name: str, message: str) -> None:
        self.filter_name = filter_name
        super().__init__(f"{filter_name}: {message}")
