"""
Literal-region shield.

Cuts string and comment literals out of the escaped text and puts
sentinels in their place, so that no classification pass can see
inside them. Sentinels are built from Unicode private-use characters:
they are neither word characters nor digits nor ASCII punctuation,
so identifier/number patterns cannot match any part of them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import InternalInvariantError
from .profiles.model import LanguageProfile
from .types import LiteralRegion

__all__ = ["SentinelAlphabet", "ALPHABETS", "Shielded", "shield_literals", "choose_alphabet"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentinelAlphabet:
    """open + index digits + close, all private-use code points."""
    base: int

    @property
    def open(self) -> str:
        return chr(self.base)

    @property
    def close(self) -> str:
        return chr(self.base + 1)

    @property
    def digits(self) -> str:
        return "".join(chr(self.base + 0x10 + i) for i in range(10))

    @property
    def chars(self) -> str:
        return self.open + self.close + self.digits

    def encode(self, index: int) -> str:
        digits = self.digits
        return self.open + "".join(digits[int(d)] for d in str(index)) + self.close

    def decode(self, body: str) -> int:
        digits = self.digits
        return int("".join(str(digits.index(ch)) for ch in body))

    def pattern(self) -> re.Pattern[str]:
        return re.compile(f"{re.escape(self.open)}([{re.escape(self.digits)}]+){re.escape(self.close)}")

    def occurs_in(self, text: str) -> bool:
        return any(ch in text for ch in self.chars)


# BMP private-use area first, then the two supplementary private-use planes.
ALPHABETS: Tuple[SentinelAlphabet, ...] = (
    SentinelAlphabet(0xE000),
    SentinelAlphabet(0xF0000),
    SentinelAlphabet(0x100000),
)


def choose_alphabet(text: str) -> SentinelAlphabet:
    """
    First alphabet none of whose characters occur in `text`.
    Raises InternalInvariantError when every alphabet collides.
    """
    for i, alphabet in enumerate(ALPHABETS):
        if not alphabet.occurs_in(text):
            if i:
                logger.debug("Sentinel alphabet U+%04X collides with input, using U+%04X",
                             ALPHABETS[0].base, alphabet.base)
            return alphabet
    raise InternalInvariantError(
        "Cannot shield literals: every sentinel alphabet already occurs in the source text"
    )


@dataclass(frozen=True)
class Shielded:
    """Escaped text with literals replaced by sentinels, plus the region table."""
    text: str
    regions: Tuple[LiteralRegion, ...]
    alphabet: SentinelAlphabet

    def sentinels(self) -> Iterator[re.Match[str]]:
        return self.alphabet.pattern().finditer(self.text)

    def sentinel_spans(self) -> List[Tuple[int, int]]:
        return [m.span() for m in self.sentinels()]


def _search_nonempty(pattern: re.Pattern[str], text: str, pos: int) -> Optional[re.Match[str]]:
    m = pattern.search(text, pos)
    while m is not None and not m.group(0):
        if m.start() >= len(text):
            return None
        m = pattern.search(text, m.start() + 1)
    return m


def shield_literals(text: str, profile: LanguageProfile) -> Shielded:
    """
    Single left-to-right sweep over the profile's literal patterns.

    The leftmost match of any kind wins; at the same offset the kind listed
    first (block comment, line comment, string) wins. Strings end on the
    same line; an unterminated quote shields nothing and the rest of its
    line stays open to classification.
    """
    alphabet = choose_alphabet(text)
    patterns = profile.literal_patterns()
    regions: List[LiteralRegion] = []
    out: List[str] = []

    # next match per kind, searched again only once the sweep has passed its start
    pending: List[Optional[re.Match[str]]] = [_search_nonempty(p, text, 0) for _, p in patterns]
    pos = 0
    while True:
        best = -1
        for i, (_, pattern) in enumerate(patterns):
            m = pending[i]
            if m is not None and m.start() < pos:
                m = pending[i] = _search_nonempty(pattern, text, pos)
            if m is not None and (best < 0 or m.start() < pending[best].start()):
                best = i
        if best < 0:
            break

        m = pending[best]
        region = LiteralRegion(index=len(regions), raw_text=m.group(0), kind=patterns[best][0])
        regions.append(region)
        out.append(text[pos:m.start()])
        out.append(alphabet.encode(region.index))
        pos = m.end()

    out.append(text[pos:])
    return Shielded(text="".join(out), regions=tuple(regions), alphabet=alphabet)
