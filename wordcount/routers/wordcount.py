"""FastAPI router computing status labels for remote editor hosts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings, get_settings
from ..counting.report import section_report
from ..host.buffer import TextBufferHost, split_lines
from ..host.display import WordCounter
from ..schemas import (
    SectionEntry,
    SectionsRequest,
    SectionsResponse,
    WordCountRequest,
    WordCountResponse,
)
from ..utils.logging import configure_logging

LOGGER = configure_logging().getChild(__name__)

router = APIRouter(prefix="/api", tags=["wordcount"])

_DOCUMENT_NAME = "request"


def _host_for(payload: WordCountRequest) -> TextBufferHost:
    host = TextBufferHost()
    host.open(_DOCUMENT_NAME, payload.text, language_id=payload.language_id)
    if payload.selected_text:
        host.select(payload.selected_text, active_line=payload.cursor_line)
    else:
        host.set_cursor(payload.cursor_line)
    return host


@router.post("/wordcount", response_model=WordCountResponse)
def compute_wordcount(
    payload: WordCountRequest,
    settings: Settings = Depends(get_settings),
) -> WordCountResponse:
    """Return what the status item would show for ``payload``."""

    line_total = len(split_lines(payload.text))
    if payload.cursor_line >= line_total:
        raise HTTPException(
            status_code=422,
            detail=f"cursor_line {payload.cursor_line} is beyond the last line ({line_total - 1})",
        )

    counter = WordCounter(_host_for(payload), settings=settings)
    try:
        counter.update()
        reading = counter.reading
    finally:
        counter.dispose()

    if reading is None:
        return WordCountResponse(visible=False)
    return WordCountResponse(
        visible=True,
        label=reading.label,
        text=reading.text,
        count=reading.count,
        limit=reading.limit,
    )


@router.post("/wordcount/sections", response_model=SectionsResponse)
def list_sections(payload: SectionsRequest) -> SectionsResponse:
    """Return every limited section of the posted document with its count."""

    sections = section_report(split_lines(payload.text))
    LOGGER.debug("section report found %d limited section(s)", len(sections))
    return SectionsResponse(
        sections=[
            SectionEntry(
                line=item.line,
                heading=item.heading,
                limit=item.limit,
                count=item.count,
                over_limit=item.over_limit,
            )
            for item in sections
        ]
    )


__all__ = ["router", "compute_wordcount", "list_sections"]
