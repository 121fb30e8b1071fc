"""In-memory editor host used by the HTTP surface, the CLI and the tests."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..counting.resolver import LineOutOfRange
from .protocol import ActiveDocument, Disposable, EventCallback, Selection


_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split at editor line breaks only; a trailing break opens an empty last line."""

    return _LINE_BREAK_RE.split(text)


@dataclass(slots=True)
class MemoryStatusItem:
    """Status item that records what would be rendered."""

    text: str = ""
    visible: bool = False
    disposed: bool = False

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def dispose(self) -> None:
        self.visible = False
        self.disposed = True


@dataclass(slots=True)
class _Buffer:
    text: str
    language_id: str
    selection: Selection = field(default_factory=lambda: Selection.caret(0))

    @property
    def lines(self) -> List[str]:
        return split_lines(self.text)


class TextBufferHost:
    """A minimal editor: named buffers, one active buffer, a cursor and events."""

    def __init__(self) -> None:
        self._buffers: Dict[str, _Buffer] = {}
        self._active: Optional[str] = None
        self._selection_listeners: List[EventCallback] = []
        self._editor_listeners: List[EventCallback] = []
        self.status_items: List[MemoryStatusItem] = []

    # --- Buffer management ----------------------------------------------------
    def open(
        self,
        name: str,
        text: str,
        *,
        language_id: str = "markdown",
        activate: bool = True,
    ) -> None:
        self._buffers[name] = _Buffer(text=text, language_id=language_id)
        if activate:
            self.activate(name)

    def activate(self, name: Optional[str]) -> None:
        """Focus buffer ``name``; ``None`` leaves no editor focused."""

        if name is not None and name not in self._buffers:
            raise KeyError(name)
        self._active = name
        self._fire(self._editor_listeners)

    def replace_text(self, text: str) -> None:
        buffer = self._require_active()
        buffer.text = text

    def set_cursor(self, line: int) -> None:
        buffer = self._require_active()
        buffer.selection = Selection.caret(line)
        self._fire(self._selection_listeners)

    def select(self, text: str, *, active_line: int = 0) -> None:
        """Select ``text``; an empty string collapses to a caret on ``active_line``."""

        buffer = self._require_active()
        buffer.selection = Selection(is_empty=not text, text=text, active_line=active_line)
        self._fire(self._selection_listeners)

    # --- EditorHost -----------------------------------------------------------
    def active_document(self) -> Optional[ActiveDocument]:
        if self._active is None:
            return None
        buffer = self._buffers[self._active]
        return ActiveDocument(text=buffer.text, language_id=buffer.language_id)

    def selection(self) -> Selection:
        return self._require_active().selection

    def line_at(self, index: int) -> str:
        lines = self._require_active().lines
        if index < 0 or index >= len(lines):
            raise LineOutOfRange(index, len(lines))
        return lines[index]

    def line_count(self) -> int:
        return len(self._require_active().lines)

    def create_status_item(self) -> MemoryStatusItem:
        item = MemoryStatusItem()
        self.status_items.append(item)
        return item

    def on_did_change_selection(self, callback: EventCallback) -> Disposable:
        return self._subscribe(self._selection_listeners, callback)

    def on_did_change_active_editor(self, callback: EventCallback) -> Disposable:
        return self._subscribe(self._editor_listeners, callback)

    # --- Internals ------------------------------------------------------------
    @property
    def listener_count(self) -> int:
        return len(self._selection_listeners) + len(self._editor_listeners)

    def _require_active(self) -> _Buffer:
        if self._active is None:
            raise LookupError("no active document")
        return self._buffers[self._active]

    @staticmethod
    def _subscribe(listeners: List[EventCallback], callback: EventCallback) -> Disposable:
        listeners.append(callback)

        def release() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return Disposable(release)

    @staticmethod
    def _fire(listeners: List[EventCallback]) -> None:
        for callback in list(listeners):
            callback()


__all__ = ["MemoryStatusItem", "TextBufferHost", "split_lines"]
