"""
Restorer: the last pipeline stage.

Emits the final markup in one walk over the shielded text: plain text,
classified spans and, in place of each sentinel, the original literal
wrapped as a string or comment.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Set, Tuple, Union

from .errors import InternalInvariantError
from .markup import Theme, wrap
from .shield import Shielded
from .types import Span

__all__ = ["restore"]


def restore(shielded: Shielded, spans: Sequence[Span], theme: Theme) -> str:
    """
    Raises InternalInvariantError if a sentinel names an unknown region,
    a region is restored twice or never, spans overlap each other or a
    sentinel, or a sentinel character survives into the output.
    """
    text = shielded.text
    regions = shielded.regions
    alphabet = shielded.alphabet

    items: List[Tuple[int, int, Union[Span, re.Match[str]]]] = [(s.start, s.end, s) for s in spans]
    items.extend((m.start(), m.end(), m) for m in shielded.sentinels())
    items.sort(key=lambda it: it[0])

    out: List[str] = []
    restored: Set[int] = set()
    pos = 0
    for start, end, item in items:
        if start < pos:
            raise InternalInvariantError(f"Overlapping markup at offset {start}")
        out.append(text[pos:start])
        if isinstance(item, Span):
            out.append(wrap(text[start:end], item.category, theme))
        else:
            index = alphabet.decode(item.group(1))
            if index >= len(regions):
                raise InternalInvariantError(f"Sentinel #{index} has no literal region ({len(regions)} known)")
            if index in restored:
                raise InternalInvariantError(f"Literal region #{index} restored twice")
            restored.add(index)
            region = regions[index]
            out.append(wrap(region.raw_text, region.kind.category, theme))
        pos = end
    out.append(text[pos:])

    if len(restored) != len(regions):
        missing = sorted(set(range(len(regions))) - restored)
        raise InternalInvariantError(f"Literal regions left unrestored: {missing}")

    result = "".join(out)
    if alphabet.occurs_in(result):
        raise InternalInvariantError("Sentinel characters leaked into the highlighted output")
    return result
