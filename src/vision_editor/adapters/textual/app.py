"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from vision_editor.buffer import Document, History
from vision_editor.config import EditorConfig
from vision_editor.modes.mode_manager import ModeManager, create_default_manager
from vision_editor.runtime import telemetry

from .controller import EditorView, TextualEditorAdapter, TextualUIHooks

# Status line and command line take one row each.
CHROME_ROWS = 2

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "tab": "TAB",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}


def normalize_key(
    key: str, character: Optional[str]
) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
    """Map a Textual key name onto ``(key, text, modifiers)`` for the engine."""

    named = _NAMED_KEYS.get(key)
    if named is not None:
        return (named, None, ())
    if key.startswith("ctrl+"):
        base = key.split("+")[-1]
        if len(base) == 1:
            return (base, None, ("CTRL",))
        return None
    if character and len(character) == 1 and character.isprintable():
        return (character, character, ())
    return None


def render_buffer(view: EditorView) -> Text:
    """Visible lines with the cursor cell drawn in reverse video."""

    text = Text(no_wrap=True, overflow="crop")
    row, col = view.cursor
    for index, line in enumerate(view.lines):
        if index:
            text.append("\n")
        if index != row:
            text.append(line)
            continue
        text.append(line[:col])
        text.append(line[col : col + 1] or " ", style="reverse")
        text.append(line[col + 1 :])
    return text


def render_status(view: EditorView) -> Text:
    status = Text(view.mode_label, style=f"bold {view.mode_color}")
    name = view.mirror.path or "[No Name]"
    status.append(f"  {name}")
    if view.mirror.modified:
        status.append(" [+]", style="bold")
    return status


def load_document(path: Optional[str], config: EditorConfig) -> Document:
    """Open ``path`` with a history sized from ``config``."""

    history = History(
        limit=config.history_limit, clear_redo_on_edit=config.clear_redo_on_edit
    )
    return Document.open(path, history=history)


class VisionApp(App[None]):
    """Full-screen editor; the app owns the terminal until it exits."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#command-line {
		height: 1;
	}
	"""

    # Every key belongs to the editor, including the usual quit shortcuts.
    inherit_bindings = False
    BINDINGS: list[Any] = []

    def __init__(self, manager: ModeManager) -> None:
        super().__init__()
        self.manager = manager
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        self._logger = telemetry.get_logger("vision_editor.app")

    def compose(self) -> ComposeResult:
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            show_command=self._show_command,
            request_quit=self._request_quit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)
        self.adapter.resize(self.size.height - CHROME_ROWS)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height - CHROME_ROWS)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if not self.adapter:
            return
        normalized = normalize_key(event.key, event.character)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)

    def _update_view(self, view: EditorView) -> None:
        self._buffer_widget.update(render_buffer(view))
        self._status_widget.update(render_status(view))

    def _show_command(self, command: str) -> None:
        line = self.manager.context.command_line
        style = "bold white on red" if line.error is not None else ""
        self._command_widget.update(Text(command, style=style))

    def _request_quit(self) -> None:
        self.exit(return_code=0)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vision", description="Modal terminal text editor."
    )
    parser.add_argument("path", nargs="?", help="File to edit (created on :w)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="tui")
    config = EditorConfig.from_env()
    try:
        document = load_document(args.path, config)
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "document.open_failed", level="error", data={"path": args.path, "error": exc}
        )
        print(f"vision: cannot open {args.path}: {exc}", file=sys.stderr)
        sys.exit(1)

    manager = create_default_manager(document, config=config)
    manager.cursor.home()
    app = VisionApp(manager)
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
