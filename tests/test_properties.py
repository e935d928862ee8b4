"""
Pipeline-wide properties checked over a fixed corpus and a seeded fuzz set.
"""

import random
import re

import pytest

from hilite import BUILTIN_PROFILES, Highlighter, strip_markup
from hilite.markup import SEMANTIC
from hilite.shield import ALPHABETS

CORPUS = [
    "",
    "int x = 42;",
    "// only a comment",
    "/* block\n   comment */ int y;",
    '"unterminated\nint z = 1;',
    "'a' + \"b\" + 'c'",
    "a < b && b > c || d & e",
    "&amp; &lt; &gt; literally",
    "#include <vector>\n#define N 10\nstd::vector<int> v(N);",
    "def f(x):  # comment with 'quote\n    return x*2",
    "@Annotation(value = \"x\") class A<T> extends B<T> {}",
    "if(x) while(y) for(;;) {}",
    "é = \"ünïcödé\"; // ☃ 123",
    "x = 1 /* unterminated block\ny = 2",
    "\"\" '' \"\"\"",
    "ABC_DEF 007 _hidden __init__(self)",
    "\t\r\n  \n",
]

_FUZZ_ALPHABET = "\"'/*#@(){}<>&;=\n \t abcifnrtS0129_"


def _fuzz_cases(n=200, seed=1337):
    rnd = random.Random(seed)
    return ["".join(rnd.choice(_FUZZ_ALPHABET) for _ in range(rnd.randint(0, 40))) for _ in range(n)]


_LITERAL_RE = re.compile(r'<span class="hl-(?:string|comment)">([^<]*)</span>')
_SPAN_OPEN_RE = re.compile(r'<span class="hl-[a-z]+">')


@pytest.fixture(scope="module")
def h():
    return Highlighter(theme=SEMANTIC)


@pytest.mark.parametrize("profile", sorted(BUILTIN_PROFILES))
@pytest.mark.parametrize("source", CORPUS + _fuzz_cases())
def test_round_trip(h, source, profile):
    html = h.highlight(source, profile)
    assert strip_markup(html) == source


@pytest.mark.parametrize("profile", sorted(BUILTIN_PROFILES))
@pytest.mark.parametrize("source", CORPUS + _fuzz_cases())
def test_no_sentinels_and_flat_markup(h, source, profile):
    html = h.highlight(source, profile)
    for alphabet in ALPHABETS:
        assert not alphabet.occurs_in(html)
    # markers never nest: every opening tag is closed before the next one opens
    assert re.fullmatch(r'(?:[^<]|<span class="hl-[a-z]+">[^<]*</span>)*', html)


@pytest.mark.parametrize("profile", sorted(BUILTIN_PROFILES))
@pytest.mark.parametrize("source", CORPUS)
def test_literals_rendered_whole(h, source, profile):
    """Each literal region becomes exactly one string/comment marker with its raw text."""
    result = h.analyze(source, profile)
    literals = _LITERAL_RE.findall(result.html)
    assert literals == [r.raw_text for r in result.regions]


def test_no_classification_inside_literals(h):
    html = h.highlight('int a = 1; String s = "if(x) int 42 Foo"; // return 7 @A', "java-like")
    assert len(_SPAN_OPEN_RE.findall(html)) == 5
    assert '<span class="hl-string">"if(x) int 42 Foo"</span>' in html
    assert '<span class="hl-comment">// return 7 @A</span>' in html


def test_concurrent_calls_are_independent(h):
    from concurrent.futures import ThreadPoolExecutor

    sources = CORPUS * 4
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda s: h.highlight(s, "java-like"), sources))
    assert results == [h.highlight(s, "java-like") for s in sources]
