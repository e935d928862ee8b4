"""
Style markers and themes.

Markers are `<span class="...">` elements; the class string for each
category comes from a Theme. The marker syntax is private to hilite and
the page that renders its output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Final, Mapping, Optional

from .errors import ConfigurationError
from .escape import unescape_markup
from .types import Category

__all__ = ["Theme", "VSCODE_DARK", "SEMANTIC", "BUILTIN_THEMES", "DEFAULT_THEME", "get_theme", "wrap", "strip_markup"]

_MARKER_RE = re.compile(r"<span class=\"[^\"<>&]*\">|</span>")
_BAD_CLASS_CHARS = set('"<>&')


@dataclass(frozen=True)
class Theme:
    """Category → CSS class string."""
    name: str
    classes: Mapping[Category, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        classes = {Category(k): v for k, v in dict(self.classes).items()}
        missing = [c.value for c in Category if c not in classes]
        if missing:
            raise ConfigurationError(f"Theme '{self.name}' has no class for: {missing}")
        for cat, css in classes.items():
            if not isinstance(css, str) or _BAD_CLASS_CHARS & set(css):
                raise ConfigurationError(f"Theme '{self.name}': invalid class for {cat.value}: {css!r}")
        object.__setattr__(self, "classes", MappingProxyType(classes))

    def css_class(self, category: Category) -> str:
        return self.classes[category]

    def with_overrides(self, name: str, overrides: Mapping[str, Any]) -> "Theme":
        """New theme with per-category class overrides keyed by category value."""
        merged: Dict[Category, str] = dict(self.classes)
        for key, css in overrides.items():
            try:
                cat = Category(key)
            except ValueError:
                known = [c.value for c in Category]
                raise ConfigurationError(f"theme.classes: unknown category '{key}' (expected one of {known})") from None
            merged[cat] = css
        return Theme(name=name, classes=merged)


# VS Code dark palette as Tailwind arbitrary-value classes.
VSCODE_DARK: Final = Theme(
    name="vscode-dark",
    classes={
        Category.ANNOTATION: "text-[#4ec9b0]",
        Category.FUNCTION: "text-[#dcdcaa]",
        Category.KEYWORD: "text-[#c586c0]",
        Category.BUILTIN: "text-[#569cd6]",
        Category.TYPE: "text-[#4ec9b0]",
        Category.NUMBER: "text-[#b5cea8]",
        Category.STRING: "text-[#ce9178]",
        Category.COMMENT: "text-[#6a9955]",
    },
)

# Stylesheet-driven: one stable class per category.
SEMANTIC: Final = Theme(
    name="semantic",
    classes={c: f"hl-{c.value}" for c in Category},
)

BUILTIN_THEMES: Final[Mapping[str, Theme]] = MappingProxyType({
    t.name: t for t in (VSCODE_DARK, SEMANTIC)
})
DEFAULT_THEME: Final = VSCODE_DARK


def get_theme(name: Optional[str]) -> Theme:
    if not name:
        return DEFAULT_THEME
    theme = BUILTIN_THEMES.get(name)
    if theme is None:
        raise ConfigurationError(f"Unknown theme '{name}'. Known themes: {', '.join(sorted(BUILTIN_THEMES))}")
    return theme


def wrap(text: str, category: Category, theme: Theme) -> str:
    return f'<span class="{theme.css_class(category)}">{text}</span>'


def strip_markup(html: str) -> str:
    """
    Removes every style marker and un-escapes entities.
    For any source s: strip_markup(highlight(s, ...)) == s.
    """
    return unescape_markup(_MARKER_RE.sub("", html))
