"""Status label formatting and the counter that drives the status item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import Settings, get_settings
from ..counting.headers import is_structural_line
from ..counting.normalize import count
from ..counting.resolver import LineOutOfRange, resolve
from ..utils.logging import configure_logging
from .protocol import EditorHost, StatusItem

LOGGER = configure_logging().getChild(__name__)


def format_label(count: int, limit: Optional[int] = None, *, unit_label: str) -> str:
    """Return ``"<count> <unit>"`` or ``"<count> / <limit> <unit>"``."""

    if limit is None:
        return f"{count} {unit_label}"
    return f"{count} / {limit} {unit_label}"


@dataclass(frozen=True, slots=True)
class Reading:
    """The numbers behind the last label shown."""

    count: int
    limit: Optional[int] = None
    label: str = ""
    text: str = ""


class WordCounter:
    """Compute the label for the host's current state and render it.

    The status item is created on the first :meth:`update` and released by
    :meth:`dispose`. Nothing about the document is kept between updates apart
    from :attr:`reading`, which only mirrors what is on screen.
    """

    def __init__(self, host: EditorHost, settings: Settings | None = None) -> None:
        self._host = host
        self._settings = settings or get_settings()
        self._status_item: Optional[StatusItem] = None
        self._disposed = False
        self.reading: Optional[Reading] = None

    @property
    def status_item(self) -> Optional[StatusItem]:
        return self._status_item

    def update(self) -> Optional[str]:
        """Refresh the status item; return the shown text or ``None`` if hidden."""

        if self._disposed:
            return None
        item = self._ensure_status_item()

        document = self._host.active_document()
        if document is None:
            LOGGER.debug("no active document; hiding status item")
            return self._hide(item)
        if document.language_id.lower() not in self._settings.language_ids:
            LOGGER.debug("language %r not counted; hiding status item", document.language_id)
            return self._hide(item)

        try:
            value, limit = self._measure(document.text)
        except LineOutOfRange as exc:
            LOGGER.warning("host has no line %s; hiding status item", exc.index)
            return self._hide(item)

        label = format_label(value, limit, unit_label=self._settings.unit_label)
        icon = self._settings.status_icon
        text = f"{icon} {label}" if icon else label
        self.reading = Reading(count=value, limit=limit, label=label, text=text)
        item.text = text
        item.show()
        return text

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._status_item is not None:
            self._status_item.dispose()
            self._status_item = None

    def _hide(self, item: StatusItem) -> None:
        self.reading = None
        item.hide()
        return None

    def _ensure_status_item(self) -> StatusItem:
        if self._status_item is None:
            self._status_item = self._host.create_status_item()
        return self._status_item

    def _measure(self, document_text: str) -> tuple[int, Optional[int]]:
        selection = self._host.selection()
        if not selection.is_empty:
            return count(selection.text), None

        line = selection.active_line
        if self._is_heading_on_last_line(line):
            return count(document_text), None
        result = resolve(line, self._host.line_at)
        if not result.has_limit:
            return count(document_text), None
        return result.count, result.limit

    def _is_heading_on_last_line(self, line: int) -> bool:
        if line + 1 < self._host.line_count():
            return False
        return is_structural_line(self._host.line_at(line))


__all__ = ["Reading", "WordCounter", "format_label"]
