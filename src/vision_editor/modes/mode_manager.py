"""Mode manager coordinating the Normal/Insert/Command state machine."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from vision_editor.buffer import CursorCoordinator, Document, History
from vision_editor.config import MODE_CONFIGS, EditorConfig, ModeConfig
from vision_editor.keymaps import KeymapRegistry, KeymapResolver
from vision_editor.keymaps.defaults import load_default_keymaps
from vision_editor.runtime import telemetry

from . import command_mode, insert_mode, normal_mode
from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult

KeyHandler = Callable[[ModeContext, KeyInput], ModeResult]
TransitionHook = Callable[[ModeContext, Optional[Mode]], None]

_KEY_HANDLERS: Dict[Mode, KeyHandler] = {
    Mode.NORMAL: normal_mode.handle_key,
    Mode.INSERT: insert_mode.handle_key,
    Mode.COMMAND: command_mode.handle_key,
}

_ENTER_HOOKS: Dict[Mode, TransitionHook] = {
    Mode.NORMAL: normal_mode.on_enter,
    Mode.COMMAND: command_mode.on_enter,
}

_EXIT_HOOKS: Dict[Mode, TransitionHook] = {
    Mode.INSERT: insert_mode.on_exit,
    Mode.COMMAND: command_mode.on_exit,
}


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events.

    Mode behaviour is selected from per-mode function tables rather than
    mode objects; every mode shares the single ``ModeContext``.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
        initial: Mode = Mode.NORMAL,
    ) -> None:
        self.context = context
        self.logger = telemetry.get_logger("vision_editor.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="vision_editor.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="vision_editor.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)
        self._mode = initial
        self._run_hook(_ENTER_HOOKS, initial, None)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def document(self) -> Document:
        return self.context.document

    @property
    def cursor(self) -> CursorCoordinator:
        return self.context.cursor

    def status_label(self, mode: Optional[Mode] = None) -> ModeConfig:
        return MODE_CONFIGS[(mode or self._mode).value]

    def switch_mode(self, mode: Mode) -> None:
        mode = Mode(mode)
        previous = self._mode
        if previous is mode:
            return
        self._run_hook(_EXIT_HOOKS, previous, mode)
        self._mode = mode
        self._run_hook(_ENTER_HOOKS, mode, previous)
        telemetry.record_event(
            "mode.switch", data={"mode": mode.value, "previous": previous.value}
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self._mode
        with telemetry.span(
            name=f"mode::{mode.value}",
            component=True,
            metadata={"key": key.token, "mode": mode.value},
        ):
            result = _KEY_HANDLERS[mode](self.context, key)
        if not result.consumed:
            self.logger.debug(f"unhandled key {key.token!r} in {mode.value} mode")
        if result.switch_to is not None:
            self.switch_mode(result.switch_to)
        return result

    def _run_hook(
        self,
        hooks: Dict[Mode, TransitionHook],
        mode: Mode,
        other: Optional[Mode],
    ) -> None:
        hook = hooks.get(mode)
        if hook is not None:
            hook(self.context, other)


def create_default_manager(
    document: Optional[Document] = None,
    *,
    config: Optional[EditorConfig] = None,
    bus: Optional[ModeBus] = None,
) -> ModeManager:
    """Build a ModeManager around ``document`` with the default keymaps."""

    config = config or EditorConfig()
    if document is None:
        document = Document(
            history=History(
                limit=config.history_limit,
                clear_redo_on_edit=config.clear_redo_on_edit,
            )
        )
    cursor = CursorCoordinator(
        document,
        history=History(
            limit=config.history_limit,
            clear_redo_on_edit=config.clear_redo_on_edit,
        ),
    )
    context = ModeContext(
        document=document,
        cursor=cursor,
        bus=bus or ModeBus(),
        config=config,
    )
    return ModeManager(context)


__all__ = ["ModeManager", "create_default_manager"]
