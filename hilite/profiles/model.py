from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, replace
from functools import lru_cache
from typing import Any, Iterable, Mapping, Optional, Tuple

from ..errors import ConfigurationError
from ..types import LiteralKind

__all__ = ["LanguageProfile", "compile_pattern", "word_set_pattern"]


# Patterns of the C family; other profiles override what differs.
_C_STRING = r'".*?"|\'.*?\''
_C_LINE_COMMENT = r"//.*$"
_C_BLOCK_COMMENT = r"/\*[\s\S]*?\*/"
_FUNCTION_CALL = r"\b([A-Za-z_]\w*)(?=\()"
_ANNOTATION = r"@\w+"
_CAPITALIZED = r"\b[A-Z]\w*\b"
_NUMBER = r"\b\d+\b"

_PATTERN_FIELDS = (
    "string_pattern",
    "line_comment_pattern",
    "block_comment_pattern",
    "function_call_pattern",
    "annotation_pattern",
    "type_name_pattern",
    "number_pattern",
)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(pattern, flags)


@lru_cache(maxsize=64)
def word_set_pattern(words: frozenset[str]) -> Optional[re.Pattern[str]]:
    """
    Exact word-boundary alternation over a name set.
    Longer names go first so that prefixes never shadow them.
    """
    if not words:
        return None
    alts = "|".join(re.escape(w) for w in sorted(words, key=lambda w: (-len(w), w)))
    return re.compile(rf"\b(?:{alts})\b")


@dataclass(frozen=True)
class LanguageProfile:
    """
    Declarative bundle of patterns and name sets for one source dialect.

    Pattern fields hold regular expression source strings. Optional ones
    (block comments, annotations, the type-name heuristic) are disabled by None.
    For classifier patterns, group 1 (when present) is the span that gets
    highlighted: lookaheads keep the '(' out of a function call and a
    directive pattern can leave its indentation outside the span.
    """
    name: str
    keywords: frozenset[str] = field(default_factory=frozenset)
    builtins: frozenset[str] = field(default_factory=frozenset)

    string_pattern: str = _C_STRING
    line_comment_pattern: str = _C_LINE_COMMENT
    block_comment_pattern: Optional[str] = _C_BLOCK_COMMENT

    function_call_pattern: str = _FUNCTION_CALL
    annotation_pattern: Optional[str] = _ANNOTATION
    # Heuristic: any capitalized identifier is a probable type name.
    # Acronyms and CONSTANTS are expected false positives.
    type_name_pattern: Optional[str] = _CAPITALIZED
    number_pattern: str = _NUMBER

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Language profile must have a non-empty name")

        # Lists/sets from callers and YAML are frozen here so that equal
        # profiles compare equal regardless of the input container.
        object.__setattr__(self, "keywords", frozenset(self.keywords))
        object.__setattr__(self, "builtins", frozenset(self.builtins))

        overlap = self.keywords & self.builtins
        if overlap:
            raise ConfigurationError(
                f"Profile '{self.name}': keywords and builtins overlap: {sorted(overlap)}"
            )

        for fname in _PATTERN_FIELDS:
            pattern = getattr(self, fname)
            if pattern is None:
                continue
            if not isinstance(pattern, str) or not pattern:
                raise ConfigurationError(f"Profile '{self.name}': {fname} must be a non-empty string")
            try:
                compiled = compile_pattern(pattern, re.MULTILINE)
            except re.error as e:
                raise ConfigurationError(f"Profile '{self.name}': invalid {fname} {pattern!r}: {e}") from e
            if compiled.groupindex:
                raise ConfigurationError(
                    f"Profile '{self.name}': {fname} must not use named groups"
                )

    # --- compiled views ---------------------------------------------------

    def literal_patterns(self) -> Tuple[Tuple[LiteralKind, re.Pattern[str]], ...]:
        """
        Literal-region patterns in tie-break order: block comment, line comment, string.
        Each kind is compiled on its own so that group numbers and
        backreferences inside a pattern keep their meaning.
        """
        kinds = []
        if self.block_comment_pattern:
            kinds.append((LiteralKind.COMMENT, compile_pattern(self.block_comment_pattern, re.MULTILINE)))
        kinds.append((LiteralKind.COMMENT, compile_pattern(self.line_comment_pattern, re.MULTILINE)))
        kinds.append((LiteralKind.STRING, compile_pattern(self.string_pattern, re.MULTILINE)))
        return tuple(kinds)

    def keyword_pattern(self) -> Optional[re.Pattern[str]]:
        return word_set_pattern(self.keywords)

    def builtin_pattern(self) -> Optional[re.Pattern[str]]:
        return word_set_pattern(self.builtins)

    def compiled(self, fname: str) -> Optional[re.Pattern[str]]:
        pattern = getattr(self, fname)
        return compile_pattern(pattern, re.MULTILINE) if pattern else None

    # --- construction from raw config ----------------------------------------

    @classmethod
    def from_dict(
        cls,
        name: str,
        raw: Mapping[str, Any],
        *,
        base: Optional["LanguageProfile"] = None,
    ) -> "LanguageProfile":
        """
        Builds a profile from a config mapping.

        Supported keys: every pattern field, `keywords`/`builtins` (replace),
        `extra_keywords`/`extra_builtins` (append) and `type_heuristic: false`
        as a shorthand for disabling the type-name pass.
        When `base` is given, missing keys are inherited from it.
        """
        known = {f.name for f in fields(cls)} - {"name"}
        known |= {"extra_keywords", "extra_builtins", "type_heuristic"}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigurationError(f"profiles.{name}: unknown keys {unknown}")

        kwargs: dict[str, Any] = {}
        for key in ("keywords", "builtins"):
            if key in raw:
                kwargs[key] = _name_set(raw[key], f"profiles.{name}.{key}")
        for key in _PATTERN_FIELDS:
            if key in raw:
                kwargs[key] = raw[key]

        if "type_heuristic" in raw:
            flag = raw["type_heuristic"]
            if not isinstance(flag, bool):
                raise ConfigurationError(f"profiles.{name}.type_heuristic: expected bool, got {flag!r}")
            if not flag:
                kwargs["type_name_pattern"] = None
            elif "type_name_pattern" not in kwargs and (base is None or base.type_name_pattern is None):
                kwargs["type_name_pattern"] = _CAPITALIZED

        profile = replace(base, name=name, **kwargs) if base is not None else cls(name=name, **kwargs)

        extra_kw = _name_set(raw.get("extra_keywords", ()), f"profiles.{name}.extra_keywords")
        extra_bi = _name_set(raw.get("extra_builtins", ()), f"profiles.{name}.extra_builtins")
        if extra_kw or extra_bi:
            profile = replace(
                profile,
                keywords=profile.keywords | extra_kw,
                builtins=profile.builtins | extra_bi,
            )
        return profile


def _name_set(value: Any, path: str) -> frozenset[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigurationError(f"{path}: expected a list of names, got {value!r}")
    names = list(value)
    bad = [v for v in names if not isinstance(v, str) or not v]
    if bad:
        raise ConfigurationError(f"{path}: names must be non-empty strings, got {bad!r}")
    return frozenset(names)
