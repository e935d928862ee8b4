from __future__ import annotations

# Public API of profiles package:
#  • LanguageProfile — declarative patterns and name sets of one dialect
#  • ProfileRegistry — key → profile map owned by the host application
from .builtin import BUILTIN_PROFILES, C_LIKE, JAVA_LIKE, PROFILE_ALIASES, PYTHON_LIKE
from .model import LanguageProfile
from .registry import ProfileRegistry

__all__ = [
    "LanguageProfile",
    "ProfileRegistry",
    "BUILTIN_PROFILES",
    "PROFILE_ALIASES",
    "JAVA_LIKE",
    "C_LIKE",
    "PYTHON_LIKE",
]
