"""Ex-command parsing and execution (``:q``, ``:q!``, ``:w``, ``:wq``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union

from vision_editor.buffer import Document
from vision_editor.errors import QuitOnModifiedError, UnknownCommandError, UnknownPathError
from vision_editor.runtime import telemetry


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """What the host should do after a command ran successfully."""

    quit: bool = False
    saved: bool = False


@dataclass(frozen=True, slots=True)
class QuitCommand:
    force: bool = False

    def run(self, document: Document) -> CommandOutcome:
        if document.modified and not self.force:
            raise QuitOnModifiedError()
        return CommandOutcome(quit=True)


@dataclass(frozen=True, slots=True)
class SaveCommand:
    def run(self, document: Document) -> CommandOutcome:
        if document.path is None:
            raise UnknownPathError()
        if not document.modified:
            return CommandOutcome()
        document.write()
        document.modified = False
        telemetry.record_event(
            "document.saved",
            data={"path": str(document.path), "lines": document.length},
        )
        return CommandOutcome(saved=True)


@dataclass(frozen=True, slots=True)
class SaveQuitCommand:
    def run(self, document: Document) -> CommandOutcome:
        saved = SaveCommand().run(document)
        QuitCommand().run(document)
        return CommandOutcome(quit=True, saved=saved.saved)


Command = Union[QuitCommand, SaveCommand, SaveQuitCommand]

_COMMANDS: Dict[str, Callable[[], Command]] = {
    "q": QuitCommand,
    "quit": QuitCommand,
    "q!": lambda: QuitCommand(force=True),
    "quit!": lambda: QuitCommand(force=True),
    "w": SaveCommand,
    "write": SaveCommand,
    "wq": SaveQuitCommand,
    "x": SaveQuitCommand,
}


def parse_command(text: str) -> Command:
    """Turn the text typed after ``:`` into a command object."""

    key = text.strip()
    factory = _COMMANDS.get(key)
    if factory is None:
        raise UnknownCommandError(key)
    return factory()


def execute(text: str, document: Document) -> CommandOutcome:
    command = parse_command(text)
    with telemetry.span(
        "commands::run",
        component="commands",
        metadata={"command": type(command).__name__, "text": text.strip()},
    ):
        return command.run(document)


__all__ = [
    "Command",
    "CommandOutcome",
    "QuitCommand",
    "SaveCommand",
    "SaveQuitCommand",
    "parse_command",
    "execute",
]
