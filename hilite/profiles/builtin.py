"""
Language profiles shipped with hilite.

Adding a dialect means adding a LanguageProfile here (or in a config file);
the pipeline stages never change.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from .model import LanguageProfile

# Verbose object-oriented profile (Java and friends).
JAVA_LIKE: Final = LanguageProfile(
    name="java-like",
    keywords=frozenset({
        "public", "private", "protected", "class", "interface", "enum",
        "extends", "implements", "static", "final", "abstract",
        "try", "catch", "finally", "throw", "throws",
        "if", "else", "switch", "case", "default", "break", "continue", "return",
        "for", "while", "do", "package", "import",
        "synchronized", "volatile", "transient", "native", "strictfp", "assert",
    }),
    builtins=frozenset({
        "void", "int", "boolean", "char", "byte", "short", "long", "float", "double",
        "new", "this", "super", "instanceof", "true", "false", "null", "var", "const",
    }),
)

# Lighter multi-paradigm profile (C / C++). No type-name heuristic:
# C code is full of capitalized macros.
C_LIKE: Final = LanguageProfile(
    name="c-like",
    keywords=frozenset({
        "if", "else", "switch", "case", "default", "break", "continue", "return",
        "for", "while", "do", "goto", "sizeof", "typedef", "struct", "union", "enum",
        "static", "extern", "inline", "register", "volatile", "const",
        "class", "namespace", "using", "template", "typename", "public", "private",
        "protected", "virtual", "override", "try", "catch", "throw",
        "new", "delete", "operator", "friend", "constexpr",
    }),
    builtins=frozenset({
        "void", "int", "char", "short", "long", "float", "double", "signed", "unsigned",
        "bool", "auto", "size_t", "true", "false", "nullptr", "NULL", "this",
        "std", "printf", "malloc", "free",
    }),
    annotation_pattern=r"^[ \t]*(#[ \t]*\w+)",
    type_name_pattern=None,
)

# Hash-comment profile; shows that new dialects need only data.
PYTHON_LIKE: Final = LanguageProfile(
    name="python-like",
    keywords=frozenset({
        "and", "as", "assert", "async", "await", "break", "class", "continue",
        "def", "del", "elif", "else", "except", "finally", "for", "from", "global",
        "if", "import", "in", "is", "lambda", "nonlocal", "not", "or", "pass",
        "raise", "return", "try", "while", "with", "yield",
    }),
    builtins=frozenset({
        "None", "True", "False", "self", "cls",
        "int", "str", "float", "bool", "list", "dict", "set", "tuple", "bytes",
        "len", "print", "range", "object", "super",
    }),
    line_comment_pattern=r"#.*$",
    block_comment_pattern=None,
)

BUILTIN_PROFILES: Final[Mapping[str, LanguageProfile]] = MappingProxyType({
    p.name: p for p in (JAVA_LIKE, C_LIKE, PYTHON_LIKE)
})

# Short names accepted wherever a profile key is expected.
PROFILE_ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    "java": "java-like",
    "c": "c-like",
    "cpp": "c-like",
    "c++": "c-like",
    "python": "python-like",
    "py": "python-like",
})

__all__ = ["JAVA_LIKE", "C_LIKE", "PYTHON_LIKE", "BUILTIN_PROFILES", "PROFILE_ALIASES"]
