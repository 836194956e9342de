from __future__ import annotations
from typing import Any, Sequence
import html

from .base import Filter

__all__ = ["EscapeHTML"]


class EscapeHTML(Filter):
    """
    HTML-escape `&`, `<` and `>`.

    Quotes are left alone unless the rule passes the `quotes` option
    (`escape:quotes`), which also escapes `"` and `'`.
    """

    name = "escape"

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if not isinstance(value, str):
            return value
        quote = any(o.lower() == "quotes" for o in options)
        return html.escape(value, quote=quote)
