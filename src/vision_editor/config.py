"""Editor settings and per-mode presentation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from vision_editor.runtime.telemetry import ENV_PREFIX


@dataclass(frozen=True)
class EditorConfig:
    """Behaviour switches read once at startup."""

    tab_width: int = 4
    auto_pair: bool = True
    history_limit: Optional[int] = None
    clear_redo_on_edit: bool = True

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")
        if self.history_limit is not None and self.history_limit <= 0:
            raise ValueError("history_limit must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ

        def flag(name: str, default: bool) -> bool:
            raw = env.get(f"{ENV_PREFIX}{name}")
            if raw is None:
                return default
            return raw.lower() in {"1", "true", "yes", "on"}

        def number(name: str) -> Optional[int]:
            raw = env.get(f"{ENV_PREFIX}{name}")
            if not raw:
                return None
            try:
                return int(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{name} must be an integer") from exc

        return cls(
            tab_width=number("TAB_WIDTH") or cls.tab_width,
            auto_pair=flag("AUTO_PAIR", cls.auto_pair),
            history_limit=number("HISTORY_LIMIT"),
            clear_redo_on_edit=flag("CLEAR_REDO", cls.clear_redo_on_edit),
        )


@dataclass(frozen=True)
class ModeConfig:
    """Status-line presentation for one mode."""

    label: str
    color: str


MODE_CONFIGS: Mapping[str, ModeConfig] = {
    "normal": ModeConfig("-=NORMAL MODE=-", "green"),
    "insert": ModeConfig("-=INSERT MODE=-", "yellow"),
    "command": ModeConfig("-=COMMAND MODE=-", "magenta"),
}

__all__ = ["EditorConfig", "ModeConfig", "MODE_CONFIGS"]
