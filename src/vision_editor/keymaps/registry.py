"""Actions and the key sequences bound to them, per editor mode."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from vision_editor.runtime.telemetry import span

from .models import ActionRef, Binding

Keys = tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A mode already binds the same key sequence to another binding."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' reuses {binding.sequence.tokens} "
            f"already bound by '{existing.id}' in {binding.mode} mode"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Holds every action plus at most one binding per (mode, keys) pair.

    ``revision`` moves whenever the set of bindings changes so resolvers can
    rebuild their lookup tables lazily.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_keys: Dict[str, Dict[Keys, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def __len__(self) -> int:
        return len(self._bindings)

    def revision(self) -> int:
        return self._revision

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted(mode for mode, keys in self._by_keys.items() if keys))

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def get_binding(self, binding_id: str) -> Binding:
        binding = self._bindings.get(binding_id)
        if binding is None:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return binding

    def bound_to(self, mode: str, keys: Keys) -> Optional[Binding]:
        binding_id = self._by_keys.get(mode, {}).get(tuple(keys))
        return None if binding_id is None else self._bindings[binding_id]

    def bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._by_keys.get(str(mode), {}).values():
            yield self._bindings[binding_id]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Bind ``binding.sequence`` in ``binding.mode``.

        With ``replace`` any binding sharing the id or the key sequence is
        dropped first; without it either clash raises.
        """

        keys = binding.sequence.tokens
        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            clash = self.bound_to(binding.mode, keys)
            if clash is not None and clash.id != binding.id and not replace:
                handle.add_metadata("conflict", clash.id)
                raise KeymapConflictError(binding, clash)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            for stale in (clash, self._bindings.get(binding.id)):
                if stale is not None:
                    self._drop(stale)
            self._bindings[binding.id] = binding
            self._by_keys.setdefault(binding.mode, {})[keys] = binding.id
            self._revision += 1
            return binding

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        by_keys = self._by_keys.get(binding.mode, {})
        if by_keys.get(binding.sequence.tokens) == binding.id:
            del by_keys[binding.sequence.tokens]


__all__ = ["KeymapRegistry", "KeymapConflictError"]
