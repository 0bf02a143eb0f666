"""Document buffer, edit history, cursor coordination, and pairing rules."""

from .cursor import Cursor, CursorCoordinator, CursorPosition
from .document import DEFAULT_VIEWPORT_HEIGHT, Document
from .edits import CharDelete, CharInsert, EditRecord, LineDelete, LineInsert, LineReplace
from .history import Action, History
from .sync import DocumentMirror

__all__ = [
    "Action",
    "History",
    "Document",
    "DEFAULT_VIEWPORT_HEIGHT",
    "DocumentMirror",
    "EditRecord",
    "CharInsert",
    "CharDelete",
    "LineReplace",
    "LineInsert",
    "LineDelete",
    "Cursor",
    "CursorPosition",
    "CursorCoordinator",
]
