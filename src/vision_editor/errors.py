"""Exception hierarchy shared by the document, command, and host layers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class VisionError(RuntimeError):
    """Base class for every recoverable editor failure."""


class DocumentError(VisionError):
    """Raised when the document cannot be persisted."""


class MissingPathError(DocumentError):
    """Raised by ``Document.write`` when no path is associated."""

    def __init__(self) -> None:
        super().__init__("Path is empty")


class DocumentWriteError(DocumentError):
    """Wraps the ``OSError`` raised while writing to disk."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to write {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class CommandError(VisionError):
    """Raised when a command line cannot be parsed."""


class UnknownCommandError(CommandError):
    def __init__(self, text: str) -> None:
        super().__init__(f"UnknownCommand: {text!r}")
        self.text = text


class RunError(VisionError):
    """Raised when a parsed command cannot run against the document."""


class QuitOnModifiedError(RunError):
    def __init__(self) -> None:
        super().__init__("QuitOnModified: unsaved changes (add ! to override)")


class UnknownPathError(RunError):
    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or "UnknownPath: no file name")


__all__ = [
    "VisionError",
    "DocumentError",
    "MissingPathError",
    "DocumentWriteError",
    "CommandError",
    "UnknownCommandError",
    "RunError",
    "QuitOnModifiedError",
    "UnknownPathError",
]
