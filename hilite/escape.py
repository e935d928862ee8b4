"""
Markup escaping for raw source text.

Only the three characters that can open or break markup are touched.
"""

from __future__ import annotations

import re
from typing import Final

_ESCAPES: Final[dict[str, str]] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}
_UNESCAPES: Final[dict[str, str]] = {v: k for k, v in _ESCAPES.items()}

_ESCAPE_RE = re.compile(r"[&<>]")
# Any entity produced by escape_markup(); used by the classifier to keep
# 'amp'/'lt'/'gt' out of identifier passes.
ENTITY_RE: Final[re.Pattern[str]] = re.compile(r"&(?:amp|lt|gt);")


def escape_markup(text: str) -> str:
    """
    Escapes &, < and > in a single left-to-right scan.
    Not meant to be re-applied to its own output.
    """
    if not text:
        return ""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


def unescape_markup(text: str) -> str:
    """Inverse of escape_markup()."""
    if not text:
        return ""
    return ENTITY_RE.sub(lambda m: _UNESCAPES[m.group(0)], text)


__all__ = ["escape_markup", "unescape_markup", "ENTITY_RE"]
