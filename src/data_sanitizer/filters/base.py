"""
Base class for sanitizer filters.
Built-in and custom class-based filters inherit from Filter.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..errors import FilterError


class Filter(ABC):
    """
    A named, pluggable transformation of a single value.

    Subclasses registered by class are instantiated without arguments each
    time the registry resolves them; register an instance instead when the
    filter needs constructor arguments.
    """

    name: str = ""

    @abstractmethod
    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        """
        Transform `value`.

        Args:
            value: current attribute value (the whole data mapping for filter_if)
            options: option strings from the rule, already whitespace-trimmed

        Returns:
            The transformed value.
        """

    def fail(self, message: str) -> FilterError:
        return FilterError(self.name or type(self).__name__, message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
