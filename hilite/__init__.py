from __future__ import annotations

from .errors import ConfigurationError, HiliteUserError, InternalInvariantError
from .markup import BUILTIN_THEMES, DEFAULT_THEME, Theme, strip_markup
from .pipeline import HighlightResult, Highlighter, highlight
from .profiles import BUILTIN_PROFILES, LanguageProfile, ProfileRegistry
from .types import Category, LiteralKind, LiteralRegion, Span

__all__ = [
    "highlight",
    "Highlighter",
    "HighlightResult",
    "LanguageProfile",
    "ProfileRegistry",
    "BUILTIN_PROFILES",
    "Theme",
    "BUILTIN_THEMES",
    "DEFAULT_THEME",
    "strip_markup",
    "Category",
    "LiteralKind",
    "LiteralRegion",
    "Span",
    "HiliteUserError",
    "ConfigurationError",
    "InternalInvariantError",
]
