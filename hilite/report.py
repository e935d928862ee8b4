from __future__ import annotations

from collections import Counter

from .markup import BUILTIN_THEMES, DEFAULT_THEME
from .pipeline import HighlightResult
from .profiles.registry import ProfileRegistry
from .report_schema import HighlightReport, ProfileInfo, ProfilesList, RegionCounts, ThemesList
from .types import Category, LiteralKind

__all__ = ["build_report", "list_profiles", "list_themes"]


def build_report(result: HighlightResult, profile_key: str) -> HighlightReport:
    kinds = Counter(r.kind for r in result.regions)
    per_category = Counter(s.category for s in result.spans)
    for region in result.regions:
        per_category[region.kind.category] += 1
    return HighlightReport(
        profile=profile_key,
        chars=len(result.source),
        output_chars=len(result.html),
        regions=RegionCounts(
            string=kinds[LiteralKind.STRING],
            comment=kinds[LiteralKind.COMMENT],
        ),
        # every category is listed, zeros included, so consumers see a fixed shape
        spans={c.value: per_category[c] for c in Category},
    )


def list_profiles(registry: ProfileRegistry) -> ProfilesList:
    aliases = registry.aliases()
    items = []
    for key in registry.keys():
        p = registry.get(key)
        items.append(ProfileInfo(
            key=key,
            aliases=sorted(a for a, target in aliases.items() if target == key),
            keywords=len(p.keywords),
            builtins=len(p.builtins),
            block_comments=p.block_comment_pattern is not None,
            type_heuristic=p.type_name_pattern is not None,
        ))
    return ProfilesList(profiles=items)


def list_themes() -> ThemesList:
    return ThemesList(themes=sorted(BUILTIN_THEMES), default=DEFAULT_THEME.name)
