"""Editor telemetry on top of telelog.

The editor logs through four calls: ``configure`` picks where output goes,
``get_logger`` hands out cached loggers, ``record_event`` writes one
``event::<name>`` line and ``span`` profiles a block of work.

While the Textual screen is up the terminal is not ours to write to, so the
``tui`` preset sends everything to ``VISION_LOG_FILE`` (or nowhere).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VISION_"
ROOT_LOGGER = "vision_editor"
PRESETS = ("default", "tui")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TelemetrySettings:
    """Where editor logs go and how much of them is kept."""

    level: str = "INFO"
    console: bool = True
    color: bool = True
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            console=not _env_flag("DISABLE_CONSOLE", False),
            color=not _env_flag("NO_COLOR", False),
            log_file=_env("LOG_FILE") or None,
        )

    def for_preset(self, preset: str) -> "TelemetrySettings":
        key = preset.lower()
        if key not in PRESETS:
            raise ValueError(f"Unknown preset '{preset}'.")
        if key == "tui":
            return replace(self, console=False)
        return self

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.log_file:
            config.with_file_output(self.log_file)
        config.with_profiling(True)
        return config


def configure(
    *, preset: str = "default", settings: Optional[TelemetrySettings] = None
) -> TelemetrySettings:
    """Rebuild the telelog configuration and drop cached loggers.

    ``settings`` defaults to what the ``VISION_*`` environment asks for; the
    preset is applied on top. Returns the settings actually in effect.
    """

    global _ACTIVE_CONFIG
    effective = (settings or TelemetrySettings.from_env()).for_preset(preset)
    _ACTIVE_CONFIG = effective.build()
    _LOGGER_CACHE.clear()
    return effective


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = TelemetrySettings.from_env().build()
    logger_name = name or ROOT_LOGGER
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _write(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Log ``message`` with ``payload`` as structured pairs when telelog allows."""

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _write(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach results to its failure line."""

    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        _write(
            self.logger,
            "error",
            "span::fail",
            {"span": self.name, **self.metadata, "reason": reason},
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: str | bool = False,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``component`` tracks the block as a telelog component too: ``True`` reuses
    ``name``, a string names the component (``"keymaps"``, ``"buffer"``).

    ``metadata`` is pushed as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(logger=log, name=name, metadata=dict(context))
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component:
            tracked = name if component is True else str(component)
            stack.enter_context(log.track_component(tracked))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context:
                log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
