"""Textual adapter that turns ModeManager results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from vision_editor.buffer import DocumentMirror
from vision_editor.modes import KeyInput, Mode, ModeResult
from vision_editor.modes.mode_manager import ModeManager
from vision_editor.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorView:
    """Everything the host needs to paint one frame."""

    mirror: DocumentMirror
    cursor: Tuple[int, int]
    mode: Mode
    mode_label: str
    mode_color: str
    command_text: str = ""
    message: Optional[str] = None
    error: bool = False
    full_redraw: bool = False

    @property
    def lines(self) -> Tuple[str, ...]:
        if not self.mirror.text and self.mirror.line_count <= 1:
            return ("",)
        return tuple(self.mirror.text.split("\n"))


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[EditorView], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    _EVENTS = (
        "command.start",
        "command.end",
        "command.submit",
        "command.error",
        "command.write",
        "command.quit",
        "document.undo",
        "document.redo",
    )

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._quit_requested = False
        self._subscribe_events()
        self.refresh(full_redraw=True)

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def resize(self, height: int) -> None:
        self.manager.cursor.resize(height)
        self.refresh(full_redraw=True)

    def view(self, *, full_redraw: bool = False) -> EditorView:
        manager = self.manager
        config = manager.status_label()
        line = manager.context.command_line
        return EditorView(
            mirror=manager.document.mirror(),
            cursor=manager.cursor.position,
            mode=manager.mode,
            mode_label=config.label,
            mode_color=config.color,
            command_text=line.error or line.text,
            message=line.error,
            error=line.error is not None,
            full_redraw=full_redraw,
        )

    def refresh(self, *, full_redraw: bool = False) -> None:
        view = self.view(full_redraw=full_redraw)
        self.hooks.update_view(view)
        self.hooks.update_status(view.mode_label)
        self._refresh_command_line()

    def _after_mode_result(self, result: ModeResult) -> None:
        if result.quit:
            self._quit_requested = True
            telemetry.record_event(
                "editor.quit", data={"modified": self.manager.document.modified}
            )
            self.hooks.request_quit()
            return
        self.refresh(full_redraw=result.render or result.switch_to is not None)

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in self._EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_command_line(self) -> None:
        line = self.manager.context.command_line
        if line.error is not None:
            self.hooks.show_command(line.error)
        elif self.manager.mode is Mode.COMMAND:
            self.hooks.show_command(f":{line.text}")
        else:
            self.hooks.show_command("")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        document = self.manager.document
        return {
            "mode": self.manager.mode.value,
            "cursor": self.manager.cursor.position,
            "scroll": document.scroll_offset,
            "command": self.manager.context.command_line.text,
            "modified": document.modified,
            "lines": document.length,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "EditorView"]
