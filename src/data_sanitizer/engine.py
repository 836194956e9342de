from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
import logging
import pandas as pd

from .filters import GATE_FILTER
from .policy import build_rules_from_config
from .registry import FilterLike, FilterRegistry, compile_filter_registry, invoke
from .rules import InlineRule, NamedRule, ParsedRule, RuleSpec, expand_rules, parse_rules
from .utils.paths import get_path, has_path, set_path

log = logging.getLogger(__name__)

CustomFilters = Optional[Union[Mapping[str, FilterLike], FilterRegistry]]


class Sanitizer:
    """
    Apply per-attribute filter chains to a nested mapping.

        Sanitizer({"name": " TEST "}, {"name": "trim|lowercase"}).sanitize()
        -> {"name": "test"}

    Rules are expanded (pipes, `*` wildcards) and parsed once, at construction;
    a descriptor that is neither a string nor a callable raises
    InvalidRuleType here. sanitize() is pure and may be called repeatedly.

    `custom_filters` (a mapping or a FilterRegistry) is laid over the built-ins
    and copied, so registering on the caller's registry afterwards does not
    change this engine.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        rules: RuleSpec,
        custom_filters: CustomFilters = None,
        *,
        cfg: Any = None,
    ) -> None:
        self._data = data
        self._rules: Dict[str, List[ParsedRule]] = parse_rules(expand_rules(rules, data))
        self._filters = compile_filter_registry(cfg).merged(custom_filters)
        log.debug(
            "sanitizer ready: %d attribute(s), %d filter(s)",
            len(self._rules), len(self._filters),
        )

    @classmethod
    def from_config(
        cls,
        data: Mapping[str, Any],
        cfg: Any,
        custom_filters: CustomFilters = None,
    ) -> "Sanitizer":
        """Rules from the config's [rules] table, date defaults from [dates]."""
        return cls(data, build_rules_from_config(cfg), custom_filters, cfg=cfg)

    @property
    def rules(self) -> Dict[str, List[ParsedRule]]:
        return {attr: list(chain) for attr, chain in self._rules.items()}

    @property
    def filters(self) -> FilterRegistry:
        return self._filters.copy()

    # ---- application ----

    def _apply(self, rule: ParsedRule, value: Any) -> Any:
        if isinstance(rule, InlineRule):
            return invoke(rule.fn, value, [])
        return invoke(self._filters.resolve(rule.name), value, rule.options)

    def _run_chain(self, attribute: str, chain: List[ParsedRule]) -> Any:
        value = original = get_path(self._data, attribute)
        commit = True
        for rule in chain:
            if isinstance(rule, NamedRule) and rule.name == GATE_FILTER:
                # the gate sees the whole input, and the last one in the chain wins
                commit = bool(self._apply(rule, self._data))
            else:
                value = self._apply(rule, value)
        if not commit:
            log.debug("gate closed for %r, keeping original value", attribute)
            return original
        return value

    def sanitize(self) -> Dict[str, Any]:
        """
        New mapping with every ruled attribute replaced by its filtered value.

        Attributes missing from the data are skipped. Containers on written
        paths are copied, the input is never mutated. Any filter error
        (UnknownFilter included) propagates and no result is returned.
        """
        sanitized: Dict[str, Any] = dict(self._data)
        for attribute, chain in self._rules.items():
            if not has_path(self._data, attribute):
                log.debug("attribute %r not in data, skipped", attribute)
                continue
            sanitized = set_path(sanitized, attribute, self._run_chain(attribute, chain))
        return sanitized


# ---- tabular helpers ----

def sanitize_records(
    records: Iterable[Mapping[str, Any]],
    rules: RuleSpec,
    custom_filters: CustomFilters = None,
    *,
    cfg: Any = None,
) -> List[Dict[str, Any]]:
    """Sanitize each row on its own engine, so wildcards expand against that row."""
    registry = compile_filter_registry(cfg).merged(custom_filters)
    return [Sanitizer(row, rules, registry).sanitize() for row in records]


def sanitize_frame(
    df: pd.DataFrame,
    rules: RuleSpec,
    custom_filters: CustomFilters = None,
    *,
    cfg: Any = None,
) -> pd.DataFrame:
    """
    Row-wise sanitize of a DataFrame. Pure: returns a new frame with the same
    index and column order; columns without rules keep their values.
    """
    rows = sanitize_records(df.to_dict(orient="records"), rules, custom_filters, cfg=cfg)
    out = pd.DataFrame(rows, index=df.index)
    return out.reindex(columns=df.columns)
