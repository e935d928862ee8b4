from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from ..errors import ConfigurationError
from .builtin import BUILTIN_PROFILES, PROFILE_ALIASES
from .model import LanguageProfile

__all__ = ["ProfileRegistry"]

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """
    Key → LanguageProfile map owned by the hosting application.

    Filled once at startup; lookups during highlighting are read-only.
    """

    def __init__(self, aliases: Optional[Mapping[str, str]] = None):
        self._profiles: Dict[str, LanguageProfile] = {}
        self._aliases: Dict[str, str] = dict(aliases or {})

    @classmethod
    def with_builtins(cls) -> "ProfileRegistry":
        """Registry preloaded with the shipped profiles and their short aliases."""
        reg = cls(aliases=PROFILE_ALIASES)
        for key, profile in BUILTIN_PROFILES.items():
            reg.register(key, profile)
        return reg

    def register(self, key: str, profile: LanguageProfile) -> None:
        """
        Registers a profile under `key`.

        Registering an equal profile twice is a no-op; a different profile
        under a taken key is a configuration error.
        """
        if not key or not isinstance(key, str):
            raise ConfigurationError(f"Profile key must be a non-empty string, got {key!r}")
        if not isinstance(profile, LanguageProfile):
            raise ConfigurationError(f"Profile '{key}' must be a LanguageProfile, got {type(profile).__name__}")

        existing = self._profiles.get(key)
        if existing is not None:
            if existing == profile:
                return
            raise ConfigurationError(f"Profile '{key}' is already registered with a different definition")
        if key in self._aliases:
            raise ConfigurationError(f"Profile key '{key}' is reserved as an alias of '{self._aliases[key]}'")

        self._profiles[key] = profile
        logger.debug("Registered language profile '%s'", key)

    def get(self, key: str) -> LanguageProfile:
        """Resolves a key (or alias); unknown keys never fall back to a default."""
        profile = self._profiles.get(self._aliases.get(key, key))
        if profile is None:
            known = ", ".join(self.keys()) or "<none>"
            raise ConfigurationError(f"Unknown language profile '{key}'. Known profiles: {known}")
        return profile

    def keys(self) -> List[str]:
        return sorted(self._profiles)

    def aliases(self) -> Dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._aliases.get(key, key) in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)
