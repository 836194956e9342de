from __future__ import annotations
from typing import Any, Callable, Dict, Iterator, Mapping, Sequence, Union
import logging

from toolz import merge

from .errors import UnknownFilter
from .filters import BUILTIN_FILTERS, Filter, FormatDate

log = logging.getLogger(__name__)

# -------- public types --------

# A filter is registered as a class with an `apply(value, options)` method
# (instantiated on every resolve), an instance of one, or a plain function.
FilterLike = Union[type, Filter, Callable[[Any, Sequence[str]], Any]]

# What resolve() hands back: always called as handle(value, options).
FilterHandle = Callable[[Any, Sequence[str]], Any]


def _check(name: str, filt: Any) -> None:
    if not isinstance(name, str) or not name:
        raise TypeError(f"Filter name must be a non-empty string, got {name!r}")
    if isinstance(filt, type):
        if not callable(getattr(filt, "apply", None)):
            raise TypeError(f"Filter class {filt.__name__} for {name!r} has no apply() method")
        return
    if callable(getattr(filt, "apply", None)) or callable(filt):
        return
    raise TypeError(f"Filter {name!r} must be a Filter class, a Filter instance or a callable, got {filt!r}")


def _as_handle(filt: FilterLike) -> FilterHandle:
    if isinstance(filt, type):
        return filt().apply
    apply = getattr(filt, "apply", None)
    if callable(apply):
        return apply
    return filt


def invoke(handle: FilterHandle, value: Any, options: Sequence[str] = ()) -> Any:
    """Uniform call for every handle kind; options always arrive as a list."""
    return handle(value, list(options))


# -------- registry --------

class FilterRegistry:
    """
    Name -> filter mapping owned by one engine.

    Registration is last-write-wins: re-registering a name (built-in or not)
    replaces it without complaint.
    """

    def __init__(self, filters: Mapping[str, FilterLike] | None = None) -> None:
        self._filters: Dict[str, FilterLike] = {}
        for name, filt in (filters or {}).items():
            self.register(name, filt)

    def register(self, name: str, filt: FilterLike) -> "FilterRegistry":
        _check(name, filt)
        if name in self._filters:
            log.debug("filter %r overridden", name)
        self._filters[name] = filt
        return self

    def merged(self, overrides: Union[Mapping[str, FilterLike], "FilterRegistry", None]) -> "FilterRegistry":
        """New registry: this one's entries with `overrides` laid on top."""
        if isinstance(overrides, FilterRegistry):
            extra = dict(overrides._filters)
        else:
            extra = dict(overrides or {})
        return FilterRegistry(merge(self._filters, extra))

    def copy(self) -> "FilterRegistry":
        return FilterRegistry(self._filters)

    def resolve(self, name: str) -> FilterHandle:
        try:
            filt = self._filters[name]
        except KeyError:
            raise UnknownFilter(name, self._filters) from None
        return _as_handle(filt)

    def get(self, name: str) -> FilterLike | None:
        return self._filters.get(name)

    def names(self) -> list[str]:
        return list(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def __repr__(self) -> str:
        return f"FilterRegistry({sorted(self._filters)})"


def compile_filter_registry(cfg: Any = None) -> FilterRegistry:
    """
    Built-in filters, fresh per call.

    With a config, `format_date` is registered as an instance carrying the
    `[dates]` defaults instead of the bare class.
    """
    registry = FilterRegistry(BUILTIN_FILTERS)
    dates = getattr(cfg, "dates", None)
    if dates is not None:
        registry.register(
            "format_date",
            FormatDate(
                input_formats=dates.input_formats,
                output_format=dates.output_format,
                timezone=dates.timezone,
            ),
        )
    return registry
