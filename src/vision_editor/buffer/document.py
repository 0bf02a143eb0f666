"""Line-oriented document with a viewport window and an edit history."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from vision_editor.errors import DocumentWriteError, MissingPathError
from vision_editor.runtime import telemetry

from .edits import CharDelete, CharInsert, EditRecord, LineDelete, LineInsert, LineReplace
from .history import Action, History
from .sync import DocumentMirror

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_VIEWPORT_HEIGHT = 24


class Document:
    """Text buffer addressed through viewport-relative rows.

    Every public method takes rows relative to ``scroll_offset``; the
    translation to absolute rows happens only in ``_absolute``. The
    ``_*_at`` methods work on absolute rows and are the sole writers of
    ``lines`` and the sole producers of history entries.
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        path: Optional[PathLike] = None,
        history: Optional[History[EditRecord]] = None,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
    ) -> None:
        self._lines: List[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines.append("")
        self.path: Optional[Path] = Path(path) if path is not None else None
        self.history: History[EditRecord] = history if history is not None else History()
        self.modified = False
        self.edit_count = 0
        self.scroll_offset = 0
        self.viewport_height = max(1, viewport_height)
        self.logger = telemetry.get_logger("vision_editor.buffer")

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        path: Optional[PathLike] = None,
        history: Optional[History[EditRecord]] = None,
    ) -> "Document":
        return cls(text.splitlines(), path=path, history=history)

    @classmethod
    def open(
        cls,
        path: Optional[PathLike],
        *,
        history: Optional[History[EditRecord]] = None,
    ) -> "Document":
        """Load ``path`` if it is a file, otherwise start empty with ``path`` set."""

        if path is None:
            return cls(history=history)
        target = Path(path)
        if target.is_file():
            text = target.read_text(encoding="utf-8")
            telemetry.record_event(
                "document.open", data={"path": str(target), "bytes": len(text)}
            )
            return cls.from_text(text, path=target, history=history)
        return cls(path=target, history=history)

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def length(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def _absolute(self, row: int) -> int:
        return row + self.scroll_offset

    # -- viewport-relative API ------------------------------------------

    def get_line(self, row: int) -> Optional[str]:
        index = self._absolute(row)
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def get_char(self, row: int, col: int) -> Optional[str]:
        line = self.get_line(row)
        if line is None or not 0 <= col < len(line):
            return None
        return line[col]

    def set_line(self, row: int, content: str, action: Action = Action.DO) -> None:
        self._set_line_at(self._absolute(row), content, action)

    def insert_line(self, row: int, content: str, action: Action = Action.DO) -> None:
        self._insert_line_at(self._absolute(row), content, action)

    def delete_line(self, row: int, action: Action = Action.DO) -> None:
        self._delete_line_at(self._absolute(row), action)

    def insert_char(
        self, row: int, col: int, char: str, action: Action = Action.DO
    ) -> None:
        self._insert_char_at(self._absolute(row), col, char, action)

    def delete_char(self, row: int, col: int, action: Action = Action.DO) -> None:
        self._delete_char_at(self._absolute(row), col, action)

    def undo(self) -> bool:
        record = self.history.last_from(Action.UNDO)
        if record is None:
            return False
        record.revert(self)
        return True

    def redo(self) -> bool:
        record = self.history.last_from(Action.REDO)
        if record is None:
            return False
        record.reapply(self)
        return True

    def move_up(self) -> bool:
        if self.scroll_offset > 0:
            self.scroll_offset -= 1
            return True
        return False

    def move_down(self, viewport_row: int) -> bool:
        if self.scroll_offset + viewport_row < len(self._lines) - 1:
            self.scroll_offset += 1
            return True
        return False

    def visible_lines(self) -> Sequence[str]:
        start = self.scroll_offset
        return tuple(self._lines[start : start + self.viewport_height])

    def render(self) -> str:
        return "\n".join(self.visible_lines())

    def to_text(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)

    def write(self) -> None:
        """Persist every line, each terminated by one newline."""

        if self.path is None:
            raise MissingPathError()
        target = self.path
        with telemetry.span(
            "document::write",
            component="buffer",
            metadata={"path": str(target), "lines": len(self._lines)},
        ):
            temp_name: Optional[str] = None
            try:
                with tempfile.NamedTemporaryFile(
                    mode="w",
                    encoding="utf-8",
                    newline="",
                    dir=target.parent,
                    prefix=f".{target.name}.",
                    suffix=".tmp",
                    delete=False,
                ) as handle:
                    temp_name = handle.name
                    handle.write(self.to_text())
                os.replace(temp_name, target)
            except OSError as exc:
                if temp_name is not None and os.path.exists(temp_name):
                    os.unlink(temp_name)
                raise DocumentWriteError(target, exc) from exc
        self.logger.info(f"wrote {len(self._lines)} lines to {target}")

    def mirror(self) -> DocumentMirror:
        return DocumentMirror(
            text=self.render(),
            scroll_offset=self.scroll_offset,
            line_count=len(self._lines),
            modified=self.modified,
            path=str(self.path) if self.path is not None else None,
        )

    # -- absolute-row mutation seam --------------------------------------

    def _record(self, record: EditRecord, action: Action, applied: bool) -> None:
        # Replays always move the history, even when the edit no longer applies.
        if applied or action is not Action.DO:
            self.history.update(record, action)
        if applied and action is Action.DO:
            self.edit_count += 1

    def _set_line_at(self, index: int, content: str, action: Action) -> None:
        if not 0 <= index < len(self._lines):
            self._record(LineReplace(index, "", content), action, False)
            return
        old = self._lines[index]
        self._lines[index] = content
        self.modified = True
        self._record(LineReplace(index, old, content), action, True)

    def _insert_line_at(self, index: int, content: str, action: Action) -> None:
        if index < 0:
            self._record(LineInsert(index, content), action, False)
            return
        if index >= len(self._lines):
            index = len(self._lines)
        self._lines.insert(index, content)
        self.modified = True
        self._record(LineInsert(index, content), action, True)

    def _delete_line_at(self, index: int, action: Action) -> None:
        if not 0 <= index < len(self._lines) or len(self._lines) == 1:
            self._record(LineDelete(index, ""), action, False)
            return
        content = self._lines.pop(index)
        self.modified = True
        self._record(LineDelete(index, content), action, True)

    def _insert_char_at(self, index: int, col: int, char: str, action: Action) -> None:
        if not 0 <= index < len(self._lines) or col < 0:
            self._record(CharInsert(index, col, char), action, False)
            return
        line = self._lines[index]
        col = min(col, len(line))
        self._lines[index] = line[:col] + char + line[col:]
        self.modified = True
        self._record(CharInsert(index, col, char), action, True)

    def _delete_char_at(self, index: int, col: int, action: Action) -> None:
        if not 0 <= index < len(self._lines):
            self._record(CharDelete(index, col, ""), action, False)
            return
        line = self._lines[index]
        if not 0 <= col < len(line):
            self._record(CharDelete(index, col, ""), action, False)
            return
        removed = line[col]
        self._lines[index] = line[:col] + line[col + 1 :]
        self.modified = True
        self._record(CharDelete(index, col, removed), action, True)


__all__ = ["Document", "DEFAULT_VIEWPORT_HEIGHT"]
