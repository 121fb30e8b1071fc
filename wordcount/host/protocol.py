"""Contracts between the counter and the editor hosting it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol

EventCallback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class ActiveDocument:
    """The focused document as reported by the host."""

    text: str
    language_id: str


@dataclass(frozen=True, slots=True)
class Selection:
    """Current selection; ``active_line`` is where the cursor sits."""

    is_empty: bool
    text: str
    active_line: int

    @classmethod
    def caret(cls, line: int) -> "Selection":
        return cls(is_empty=True, text="", active_line=line)


class Disposable:
    """Release handle whose callback runs at most once."""

    def __init__(self, release: Optional[Callable[[], None]] = None) -> None:
        self._release = release
        self._disposed = False

    @classmethod
    def from_disposables(cls, *items: "Disposable") -> "Disposable":
        """Combine several handles into one that releases them together."""

        children = list(items)

        def release() -> None:
            for child in children:
                child.dispose()

        return cls(release)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._release is not None:
            self._release()


class StatusItem(Protocol):
    text: str

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def dispose(self) -> None: ...


class EditorHost(Protocol):
    """Read-only queries and event hooks the counter needs from an editor."""

    def active_document(self) -> Optional[ActiveDocument]: ...

    def selection(self) -> Selection: ...

    def line_at(self, index: int) -> str: ...

    def line_count(self) -> int: ...

    def create_status_item(self) -> StatusItem: ...

    def on_did_change_selection(self, callback: EventCallback) -> Disposable: ...

    def on_did_change_active_editor(self, callback: EventCallback) -> Disposable: ...


def dispose_all(items: Iterable[Disposable]) -> None:
    for item in items:
        item.dispose()


__all__ = [
    "ActiveDocument",
    "Disposable",
    "EditorHost",
    "EventCallback",
    "Selection",
    "StatusItem",
    "dispose_all",
]
