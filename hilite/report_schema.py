from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class RegionCounts(BaseModel):
    model_config = ConfigDict(extra="forbid")

    string: int = Field(0, ge=0)
    comment: int = Field(0, ge=0)


class HighlightReport(BaseModel):
    """JSON report of one highlighting run (`hilite report`)."""
    model_config = ConfigDict(extra="forbid")

    profile: str
    chars: int = Field(..., ge=0, description="Characters in the source text")
    output_chars: int = Field(..., ge=0, description="Characters in the highlighted markup")
    regions: RegionCounts
    spans: Dict[str, int] = Field(default_factory=dict, description="Classified spans per category")


class ProfileInfo(BaseModel):
    key: str
    aliases: List[str] = Field(default_factory=list)
    keywords: int
    builtins: int
    block_comments: bool
    type_heuristic: bool


class ProfilesList(BaseModel):
    profiles: List[ProfileInfo]


class ThemesList(BaseModel):
    themes: List[str]
    default: str
