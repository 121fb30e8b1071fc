"""Editor host integration: protocols, an in-memory host and the status counter."""

from .buffer import MemoryStatusItem, TextBufferHost, split_lines
from .controller import WordCounterController, activate
from .display import Reading, WordCounter, format_label
from .protocol import ActiveDocument, Disposable, EditorHost, Selection, StatusItem, dispose_all

__all__ = [
    "ActiveDocument",
    "Disposable",
    "EditorHost",
    "MemoryStatusItem",
    "Reading",
    "Selection",
    "StatusItem",
    "TextBufferHost",
    "WordCounter",
    "WordCounterController",
    "activate",
    "dispose_all",
    "format_label",
    "split_lines",
]
