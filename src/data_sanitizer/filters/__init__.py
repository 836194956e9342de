from __future__ import annotations

# Public API re-exports (keep small & stable)
from .base import Filter
from .conditional import GATE_FILTER, FilterIf
from .datetime_ops import FormatDate
from .markup import EscapeHTML
from .regex_ops import Digit, StripTags
from .text_norm import Capitalize, Lowercase, Trim, Uppercase
from .types import Cast

BUILTIN_FILTERS: dict[str, type[Filter]] = {
    "capitalize": Capitalize,
    "cast": Cast,
    "escape": EscapeHTML,
    "format_date": FormatDate,
    "lowercase": Lowercase,
    "uppercase": Uppercase,
    "trim": Trim,
    "strip_tags": StripTags,
    "digit": Digit,
    GATE_FILTER: FilterIf,
}
