"""
Highlighting pipeline: escape → shield → classify → restore.

Each stage consumes the full output of the previous one; the whole run
is a pure function of (source, profile, theme).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .classify import classify
from .escape import escape_markup
from .markup import DEFAULT_THEME, Theme
from .profiles.model import LanguageProfile
from .profiles.registry import ProfileRegistry
from .restore import restore
from .shield import shield_literals
from .types import LiteralRegion, Span

__all__ = ["HighlightResult", "Highlighter", "run_pipeline", "highlight"]

logger = logging.getLogger(__name__)

ProfileRef = Union[str, LanguageProfile]


@dataclass(frozen=True)
class HighlightResult:
    """Final markup together with the intermediate tables of one run."""
    profile: LanguageProfile
    source: str
    html: str
    regions: Tuple[LiteralRegion, ...]
    spans: Tuple[Span, ...]


def run_pipeline(source: str, profile: LanguageProfile, theme: Theme = DEFAULT_THEME) -> HighlightResult:
    if not source:
        return HighlightResult(profile=profile, source="", html="", regions=(), spans=())

    escaped = escape_markup(source)
    shielded = shield_literals(escaped, profile)
    spans = classify(shielded, profile)
    html = restore(shielded, spans, theme)

    logger.debug(
        "Highlighted %d char(s) with '%s': %d literal region(s), %d span(s)",
        len(source), profile.name, len(shielded.regions), len(spans),
    )
    return HighlightResult(
        profile=profile,
        source=source,
        html=html,
        regions=shielded.regions,
        spans=tuple(spans),
    )


class Highlighter:
    """
    Highlighting entry point bound to a profile registry and a theme.

    The hosting application builds one at startup, registers its own
    profiles and then calls highlight() from any thread.
    """

    def __init__(self, registry: Optional[ProfileRegistry] = None, theme: Optional[Theme] = None):
        self.registry = registry if registry is not None else ProfileRegistry.with_builtins()
        self.theme = theme or DEFAULT_THEME

    def register_profile(self, key: str, profile: LanguageProfile) -> None:
        self.registry.register(key, profile)

    def resolve(self, profile: ProfileRef) -> LanguageProfile:
        if isinstance(profile, LanguageProfile):
            return profile
        return self.registry.get(profile)

    def analyze(self, source: str, profile: ProfileRef) -> HighlightResult:
        # Unknown keys fail even for empty input: no silent default.
        return run_pipeline(source, self.resolve(profile), self.theme)

    def highlight(self, source: str, profile: ProfileRef) -> str:
        return self.analyze(source, profile).html


def highlight(
    source: str,
    profile: ProfileRef,
    *,
    registry: Optional[ProfileRegistry] = None,
    theme: Optional[Theme] = None,
) -> str:
    """
    Highlights `source` and returns markup for display.

    `profile` is a registered key (built-ins when no registry is given)
    or a LanguageProfile value. Unknown keys raise ConfigurationError.
    """
    return Highlighter(registry, theme).highlight(source, profile)
