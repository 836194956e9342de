from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging

from .errors import InvalidRuleType
from .utils.paths import WILDCARD, expand_wildcards, split_path

log = logging.getLogger(__name__)

RULE_SEPARATOR = "|"
NAME_SEPARATOR = ":"
OPTION_SEPARATOR = ","

# -------- public types --------

# Inline rules take the current value and an (always empty) options list.
InlineFn = Callable[[Any, List[str]], Any]
Descriptor = Union[str, InlineFn]
RuleSpec = Mapping[str, Any]


@dataclass(frozen=True)
class NamedRule:
    """A `name:opt1,opt2` rule resolved through the filter registry."""
    name: str
    options: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InlineRule:
    """A callable given directly in the rule spec; never looked up by name."""
    fn: InlineFn


ParsedRule = Union[NamedRule, InlineRule]


# -------- expansion --------

def as_descriptor_list(raw: Any) -> List[Any]:
    """
    One attribute's rule value -> descriptor list.

    Only a plain string is split on "|"; items of a list or tuple are kept
    verbatim, so a list entry may itself contain "|".
    """
    if isinstance(raw, str):
        return raw.split(RULE_SEPARATOR)
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def expand_rules(rules: RuleSpec, data: Any) -> Dict[str, List[Any]]:
    """
    Flatten a rule spec into concrete path -> descriptor list.

    - "trim|lowercase" becomes ["trim", "lowercase"]
    - a single descriptor becomes a one-item list
    - "items.*.name" becomes one entry per matching element of `data`
    - paths reached twice get their descriptor lists concatenated
    Descriptors are not validated here; parse_rules() does that.
    """
    out: Dict[str, List[Any]] = {}
    for attribute, raw in rules.items():
        descriptors = as_descriptor_list(raw)
        if WILDCARD in split_path(attribute):
            targets = expand_wildcards(attribute, data)
            log.debug("wildcard %r matched %d attribute(s)", attribute, len(targets))
        else:
            targets = [attribute]
        for target in targets:
            out.setdefault(target, []).extend(descriptors)
    return out


# -------- parsing --------

def parse_rule_string(rule: str) -> Optional[NamedRule]:
    """
    'trim'            -> NamedRule('trim', ())
    'cast: int'       -> NamedRule('cast', ('int',))
    'filter_if:a, b'  -> NamedRule('filter_if', ('a', 'b'))
    '' or ':x'        -> None (no filter name, dropped on purpose)

    Only the first ':' splits; the name is kept verbatim, options are stripped.
    """
    if NAME_SEPARATOR in rule:
        name, raw_opts = rule.split(NAME_SEPARATOR, 1)
        options = tuple(o.strip() for o in raw_opts.split(OPTION_SEPARATOR))
    else:
        name, options = rule, ()
    if not name:
        return None
    return NamedRule(name, options)


def parse_rule(rule: Any, attribute: str = "") -> Optional[ParsedRule]:
    if isinstance(rule, str):
        return parse_rule_string(rule)
    if callable(rule):
        return InlineRule(rule)
    raise InvalidRuleType(attribute, rule)


def parse_rules(expanded: Mapping[str, Iterable[Any]]) -> Dict[str, List[ParsedRule]]:
    """Concrete path -> ordered ParsedRule list; attributes left with no rules are omitted."""
    parsed: Dict[str, List[ParsedRule]] = {}
    for attribute, descriptors in expanded.items():
        for descriptor in descriptors:
            rule = parse_rule(descriptor, attribute)
            if rule is not None:
                parsed.setdefault(attribute, []).append(rule)
    return parsed
