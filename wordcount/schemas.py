"""Pydantic models for the HTTP surface."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class WordCountRequest(BaseModel):
    """Editor state posted by a remote host."""

    text: str
    language_id: str = Field(default="markdown", min_length=1)
    cursor_line: int = Field(default=0, ge=0)
    selected_text: Optional[str] = None


class WordCountResponse(BaseModel):
    """What the status item would show for the posted state."""

    visible: bool
    label: Optional[str] = None
    text: Optional[str] = None
    count: Optional[int] = Field(default=None, ge=0)
    limit: Optional[int] = None


class SectionsRequest(BaseModel):
    text: str


class SectionEntry(BaseModel):
    line: int = Field(ge=0)
    heading: str
    limit: int
    count: int = Field(ge=0)
    over_limit: bool


class SectionsResponse(BaseModel):
    sections: List[SectionEntry] = Field(default_factory=list)


__all__ = [
    "WordCountRequest",
    "WordCountResponse",
    "SectionsRequest",
    "SectionEntry",
    "SectionsResponse",
]
