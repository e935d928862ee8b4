"""
YAML configuration: extra language profiles and theme overrides.

    profiles:
      kotlin-like:
        extends: java-like
        extra_keywords: [fun, val, when]
    theme:
      name: semantic
      classes: {keyword: kw}
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigurationError
from .markup import Theme, get_theme
from .pipeline import Highlighter
from .profiles.builtin import BUILTIN_PROFILES, PROFILE_ALIASES
from .profiles.model import LanguageProfile
from .profiles.registry import ProfileRegistry

__all__ = ["DEFAULT_CFG_FILE", "ENV_CONFIG", "HiliteConfig", "find_config", "load_config", "build_highlighter"]

logger = logging.getLogger(__name__)

DEFAULT_CFG_FILE = "hilite.yaml"
ENV_CONFIG = "HILITE_CONFIG"

_yaml = YAML(typ="safe")


@dataclass
class HiliteConfig:
    profiles: Dict[str, LanguageProfile] = field(default_factory=dict)
    theme: Optional[Theme] = None
    path: Optional[Path] = None


def find_config(explicit: Optional[Path] = None, cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Config file to use: explicit path, then $HILITE_CONFIG, then ./hilite.yaml.
    An explicit or env path that does not exist is an error; a missing
    default file is not.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigurationError(f"Config file not found: {explicit}")
        return explicit
    env = os.environ.get(ENV_CONFIG)
    if env:
        p = Path(env)
        if not p.is_file():
            raise ConfigurationError(f"Config file from ${ENV_CONFIG} not found: {p}")
        return p
    default = (cwd or Path.cwd()) / DEFAULT_CFG_FILE
    return default if default.is_file() else None


def _read_yaml_map(path: Path) -> dict:
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"YAML must be a mapping: {path}")
    return raw


def _resolve_profiles(raw_profiles: Any) -> Dict[str, LanguageProfile]:
    if not isinstance(raw_profiles, dict):
        raise ConfigurationError("profiles: expected a mapping of key → profile")

    resolved: Dict[str, LanguageProfile] = {}
    in_progress: list[str] = []

    def _resolve(key: str) -> LanguageProfile:
        if key in resolved:
            return resolved[key]
        if key in in_progress:
            chain = " -> ".join(in_progress + [key])
            raise ConfigurationError(f"profiles: circular 'extends' chain: {chain}")
        raw = raw_profiles[key]
        if not isinstance(raw, dict):
            raise ConfigurationError(f"profiles.{key}: expected a mapping")
        body = dict(raw)
        parent_key = body.pop("extends", None)

        in_progress.append(key)
        base: Optional[LanguageProfile] = None
        if parent_key is not None:
            if not isinstance(parent_key, str):
                raise ConfigurationError(f"profiles.{key}.extends: expected a profile key")
            if parent_key in raw_profiles:
                base = _resolve(parent_key)
            else:
                base = BUILTIN_PROFILES.get(PROFILE_ALIASES.get(parent_key, parent_key))
                if base is None:
                    raise ConfigurationError(f"profiles.{key}.extends: unknown profile '{parent_key}'")
        in_progress.pop()

        profile = LanguageProfile.from_dict(key, body, base=base)
        resolved[key] = profile
        return profile

    for key in raw_profiles:
        if not isinstance(key, str) or not key:
            raise ConfigurationError(f"profiles: invalid profile key {key!r}")
        _resolve(key)
    return resolved


def _resolve_theme(raw_theme: Any) -> Theme:
    if isinstance(raw_theme, str):
        return get_theme(raw_theme)
    if not isinstance(raw_theme, dict):
        raise ConfigurationError("theme: expected a theme name or a mapping")
    unknown = sorted(set(raw_theme) - {"name", "classes"})
    if unknown:
        raise ConfigurationError(f"theme: unknown keys {unknown}")
    base = get_theme(raw_theme.get("name"))
    overrides = raw_theme.get("classes") or {}
    if not isinstance(overrides, dict):
        raise ConfigurationError("theme.classes: expected a mapping of category → class")
    if not overrides:
        return base
    return base.with_overrides(f"{base.name}+custom", overrides)


def load_config(path: Optional[Path]) -> HiliteConfig:
    """Reads a config file; None gives the empty configuration."""
    if path is None:
        return HiliteConfig()

    raw = _read_yaml_map(path)
    unknown = sorted(set(raw) - {"profiles", "theme"})
    if unknown:
        raise ConfigurationError(f"{path}: unknown top-level keys {unknown}")

    cfg = HiliteConfig(path=path)
    if "profiles" in raw:
        cfg.profiles = _resolve_profiles(raw["profiles"] or {})
    if raw.get("theme") is not None:
        cfg.theme = _resolve_theme(raw["theme"])
    logger.info("Loaded %d profile(s) from %s", len(cfg.profiles), path)
    return cfg


def build_highlighter(cfg: HiliteConfig, *, theme: Optional[Theme] = None) -> Highlighter:
    """Built-in profiles plus the configured ones; an explicit theme beats the config."""
    registry = ProfileRegistry.with_builtins()
    for key, profile in cfg.profiles.items():
        registry.register(key, profile)
    if theme is not None and cfg.theme is not None and theme != cfg.theme:
        logger.warning("Theme '%s' from %s is overridden by '%s'", cfg.theme.name, cfg.path, theme.name)
    return Highlighter(registry, theme or cfg.theme)
