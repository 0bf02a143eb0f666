"""Shared types every mode handler works with."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from vision_editor.buffer import CursorCoordinator, Document
from vision_editor.config import EditorConfig
from vision_editor.keymaps.models import stroke_token


class Mode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        return stroke_token(self.key, self.modifiers)

    @property
    def printable(self) -> Optional[str]:
        """The single character this key types, if it types one."""

        if self.modifiers and any(m.lower() in {"ctrl", "alt"} for m in self.modifiers):
            return None
        if self.text is not None and len(self.text) == 1 and self.text.isprintable():
            return self.text
        return None


@dataclass(slots=True)
class ModeResult:
    """Result returned from a mode's ``handle_key``."""

    consumed: bool
    switch_to: Optional[Mode] = None
    status: str = "ok"
    message: Optional[str] = None
    render: bool = False
    quit: bool = False
    error: bool = False


@dataclass(slots=True)
class CommandLine:
    """Text typed after ``:`` plus an error awaiting acknowledgment."""

    text: str = ""
    error: Optional[str] = None

    def clear(self) -> None:
        self.text = ""
        self.error = None


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode handler can access."""

    document: Document
    cursor: CursorCoordinator
    bus: ModeBus = field(default_factory=ModeBus)
    config: EditorConfig = field(default_factory=EditorConfig)
    command_line: CommandLine = field(default_factory=CommandLine)
    pending: List[str] = field(default_factory=list)
    extras: Dict[str, object] = field(default_factory=dict)


__all__ = [
    "Mode",
    "KeyInput",
    "ModeResult",
    "CommandLine",
    "ModeBus",
    "ModeContext",
]
