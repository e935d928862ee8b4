"""
Token classifier.

Runs the category passes in fixed precedence order over the shielded text.
Every pass scans the whole text, but classified spans are tracked as
intervals: a match is taken only if no earlier pass, sentinel or escaped
entity already owns any of its characters. Nothing is inserted into the
text here, so later patterns can never see marker syntax.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Tuple

from .escape import ENTITY_RE
from .intervals import ClaimedIntervals
from .profiles.model import LanguageProfile
from .shield import Shielded
from .types import Category, Span

__all__ = ["PASS_ORDER", "classify"]

logger = logging.getLogger(__name__)

PatternGetter = Callable[[LanguageProfile], Optional[re.Pattern[str]]]

# Highest precedence first. A control keyword glued to '(' (e.g. `if(x)`)
# is therefore a FUNCTION span: the function-call pass runs before keywords.
PASS_ORDER: Tuple[Tuple[Category, PatternGetter], ...] = (
    (Category.ANNOTATION, lambda p: p.compiled("annotation_pattern")),
    (Category.FUNCTION, lambda p: p.compiled("function_call_pattern")),
    (Category.KEYWORD, lambda p: p.keyword_pattern()),
    (Category.BUILTIN, lambda p: p.builtin_pattern()),
    (Category.TYPE, lambda p: p.compiled("type_name_pattern")),
    (Category.NUMBER, lambda p: p.compiled("number_pattern")),
)


def _match_span(m: re.Match[str]) -> Tuple[int, int]:
    # Group 1 selects the highlighted part when the pattern needs context
    # outside of it; otherwise the whole match is the span.
    if m.re.groups and m.group(1) is not None:
        return m.span(1)
    return m.span()


def classify(shielded: Shielded, profile: LanguageProfile) -> List[Span]:
    """
    Returns the classified spans of `shielded.text`, sorted by offset.
    Sentinels and escaped entities are never part of any span.
    """
    text = shielded.text
    if not text:
        return []

    blocked = ClaimedIntervals(shielded.sentinel_spans())
    for m in ENTITY_RE.finditer(text):
        blocked.claim(*m.span())

    spans: List[Span] = []
    for category, getter in PASS_ORDER:
        pattern = getter(profile)
        if pattern is None:
            continue
        taken = 0
        for m in pattern.finditer(text):
            start, end = _match_span(m)
            if blocked.claim(start, end):
                spans.append(Span(start, end, category))
                taken += 1
        logger.debug("Pass %s: %d span(s)", category.value, taken)

    spans.sort(key=lambda s: s.start)
    return spans
