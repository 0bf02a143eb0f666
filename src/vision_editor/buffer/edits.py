"""Reversible edit records stored in the document history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .history import Action

if TYPE_CHECKING:
    from .document import Document


# Rows are absolute document rows so replay does not depend on scrolling.


@dataclass(frozen=True, slots=True)
class CharInsert:
    row: int
    col: int
    char: str

    def revert(self, document: "Document") -> None:
        document._delete_char_at(self.row, self.col, Action.UNDO)

    def reapply(self, document: "Document") -> None:
        document._insert_char_at(self.row, self.col, self.char, Action.REDO)


@dataclass(frozen=True, slots=True)
class CharDelete:
    row: int
    col: int
    char: str

    def revert(self, document: "Document") -> None:
        document._insert_char_at(self.row, self.col, self.char, Action.UNDO)

    def reapply(self, document: "Document") -> None:
        document._delete_char_at(self.row, self.col, Action.REDO)


@dataclass(frozen=True, slots=True)
class LineReplace:
    row: int
    old: str
    new: str

    def revert(self, document: "Document") -> None:
        document._set_line_at(self.row, self.old, Action.UNDO)

    def reapply(self, document: "Document") -> None:
        document._set_line_at(self.row, self.new, Action.REDO)


@dataclass(frozen=True, slots=True)
class LineInsert:
    row: int
    content: str

    def revert(self, document: "Document") -> None:
        document._delete_line_at(self.row, Action.UNDO)

    def reapply(self, document: "Document") -> None:
        document._insert_line_at(self.row, self.content, Action.REDO)


@dataclass(frozen=True, slots=True)
class LineDelete:
    row: int
    content: str

    def revert(self, document: "Document") -> None:
        document._insert_line_at(self.row, self.content, Action.UNDO)

    def reapply(self, document: "Document") -> None:
        document._delete_line_at(self.row, Action.REDO)


EditRecord = Union[CharInsert, CharDelete, LineReplace, LineInsert, LineDelete]

__all__ = [
    "CharInsert",
    "CharDelete",
    "LineReplace",
    "LineInsert",
    "LineDelete",
    "EditRecord",
]
