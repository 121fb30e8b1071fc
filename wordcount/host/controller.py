"""Wires a :class:`WordCounter` to the host's change notifications."""

from __future__ import annotations

from typing import List, Protocol

from ..config import Settings
from ..utils.logging import configure_logging
from .display import WordCounter
from .protocol import Disposable, EditorHost

LOGGER = configure_logging().getChild(__name__)


class SupportsDispose(Protocol):
    def dispose(self) -> None: ...


class WordCounterController:
    """Recompute on selection and active-editor changes until disposed."""

    def __init__(self, counter: WordCounter, host: EditorHost) -> None:
        self._counter = counter
        self._counter.update()

        subscriptions = [
            host.on_did_change_selection(self._on_event),
            host.on_did_change_active_editor(self._on_event),
        ]
        self._disposable = Disposable.from_disposables(*subscriptions)

    def _on_event(self) -> None:
        self._counter.update()

    def dispose(self) -> None:
        self._disposable.dispose()


def activate(host: EditorHost, settings: Settings | None = None) -> List[SupportsDispose]:
    """Start counting for ``host``; dispose the returned items to deactivate."""

    counter = WordCounter(host, settings=settings)
    controller = WordCounterController(counter, host)
    LOGGER.info('Extension "wordcount" is now active')
    return [controller, counter]


__all__ = ["SupportsDispose", "WordCounterController", "activate"]
