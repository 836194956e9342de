from __future__ import annotations

# Public API re-exports (keep small & stable)
from .engine import Sanitizer, sanitize_frame, sanitize_records
from .errors import FilterError, InvalidRuleType, SanitizerError, UnknownFilter
from .filters import Filter
from .registry import FilterRegistry, compile_filter_registry
from .rules import InlineRule, NamedRule, expand_rules, parse_rule_string, parse_rules

__version__ = "0.1.0"
