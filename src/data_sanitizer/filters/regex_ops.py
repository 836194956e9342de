from __future__ import annotations
from typing import Any, Sequence
import re

from .base import Filter

__all__ = ["Digit", "StripTags", "extract_digits", "strip_tags"]

_NON_DIGIT_RE = re.compile(r"[^0-9]")

_COMMENT_RE = re.compile(r"<!--.*?(?:-->|$)", re.DOTALL)
# "<" only opens a tag when followed by a letter, "/", "!" or "?" ("a < b" is text)
_TAG_RE = re.compile(r"<(?=[A-Za-z/!?])[^>]*(?:>|$)")
_TAG_NAME_RE = re.compile(r"^</?\s*([A-Za-z][A-Za-z0-9:-]*)")


def extract_digits(text: str) -> str:
    """Keep ASCII 0-9 only; unicode digits such as '٣' are dropped too."""
    return _NON_DIGIT_RE.sub("", text)


def _norm_tag(opt: str) -> str:
    return opt.strip().strip("<>/").strip().lower()


def strip_tags(text: str, allowed: Sequence[str] = ()) -> str:
    keep = {t for t in (_norm_tag(o) for o in allowed) if t}
    text = _COMMENT_RE.sub("", text)
    if not keep:
        return _TAG_RE.sub("", text)

    def _drop_unless_allowed(m: re.Match) -> str:
        name = _TAG_NAME_RE.match(m.group(0))
        if name and name.group(1).lower() in keep:
            return m.group(0)
        return ""

    return _TAG_RE.sub(_drop_unless_allowed, text)


class Digit(Filter):
    name = "digit"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        return extract_digits(value) if isinstance(value, str) else value


class StripTags(Filter):
    """Remove markup tags and comments; options list tag names to keep (e.g. `strip_tags:b,i`)."""

    name = "strip_tags"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        return strip_tags(value, options) if isinstance(value, str) else value
