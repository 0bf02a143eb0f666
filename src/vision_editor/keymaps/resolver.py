"""Resolve pending key tokens against one mode's bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence

from vision_editor.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class _Node:
    binding_id: Optional[str] = None
    children: Dict[str, "_Node"] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """The binding a completed sequence selected and the action it runs."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    consumed: int = 0
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Walks a per-mode prefix tree of bound key sequences.

    A strict prefix of a longer sequence is ``"pending"`` and stays that way
    until the next key completes or breaks it; there is no timeout. Trees are
    rebuilt when the registry revision changes.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._trees: Dict[str, tuple[int, _Node]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        mode = str(getattr(mode, "value", mode))
        keys = tuple(tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "keys": " ".join(keys)},
        ) as handle:
            result = self._walk(self._tree(mode), keys)
            handle.add_metadata("status", result.status)
            return result

    def _walk(self, node: _Node, keys: tuple[str, ...]) -> ResolutionResult:
        for depth, token in enumerate(keys):
            node = node.children.get(token)
            if node is None:
                return ResolutionResult(status="miss", consumed=depth)

        if node.binding_id is not None:
            binding = self._registry.get_binding(node.binding_id)
            match = ResolutionMatch(
                binding=binding, action=self._registry.get_action(binding.action_id)
            )
            return ResolutionResult(status="match", match=match, consumed=len(keys))
        if node.children:
            return ResolutionResult(
                status="pending",
                consumed=len(keys),
                next_expected=tuple(sorted(node.children)),
            )
        return ResolutionResult(status="miss", consumed=len(keys))

    def _tree(self, mode: str) -> _Node:
        revision = self._registry.revision()
        cached = self._trees.get(mode)
        if cached is not None and cached[0] == revision:
            return cached[1]

        root = _Node()
        for binding in self._registry.bindings(mode):
            node = root
            for token in binding.sequence.tokens:
                node = node.children.setdefault(token, _Node())
            node.binding_id = binding.id
        self._trees[mode] = (revision, root)
        return root


__all__ = ["KeymapResolver", "ResolutionResult", "ResolutionMatch"]
