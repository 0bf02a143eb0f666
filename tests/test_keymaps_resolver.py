from __future__ import annotations

from vision_editor.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeymapRegistry,
    KeymapResolver,
)
from vision_editor.modes import Mode


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "normal",
    keys: tuple[str, ...] = ("g", "g"),
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_exact_sequence() -> None:
    binding = make_binding("normal.gg")
    registry = build_registry([binding])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("normal", ("g", "g"))

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.consumed == 2


def test_resolver_reports_pending_for_prefix() -> None:
    binding = make_binding("normal.gg")
    registry = build_registry([binding])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("normal", ("g",))

    assert result.status == "pending"
    assert result.next_expected == ("g",)


def test_resolver_misses_unknown_keys() -> None:
    registry = build_registry([make_binding("normal.gg")])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("normal", ("g", "x"))

    assert result.status == "miss"
    assert result.consumed == 1


def test_resolver_accepts_mode_enum() -> None:
    registry = build_registry([make_binding("insert.gg", mode="insert")])
    resolver = KeymapResolver(registry)

    assert resolver.resolve(Mode.INSERT, ("g", "g")).status == "match"
    assert resolver.resolve(Mode.NORMAL, ("g", "g")).status == "miss"


def test_resolver_distinguishes_modified_keys() -> None:
    registry = build_registry(
        [
            make_binding("normal.r", keys=("r",), action_id="core.replace"),
            make_binding("normal.redo", keys=("ctrl+r",), action_id="core.redo"),
        ]
    )
    resolver = KeymapResolver(registry)

    plain = resolver.resolve("normal", ("r",))
    modified = resolver.resolve("normal", ("ctrl+r",))

    assert plain.match is not None and plain.match.binding.id == "normal.r"
    assert modified.match is not None and modified.match.binding.id == "normal.redo"


def test_resolver_sees_replaced_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.low"))
    registry.register_action(make_action("core.high"))
    registry.register_binding(make_binding("a.low", action_id="core.low"))
    resolver = KeymapResolver(registry)
    assert resolver.resolve("normal", ("g", "g")).match.action.id == "core.low"

    registry.register_binding(make_binding("b.high", action_id="core.high"), replace=True)
    result = resolver.resolve("normal", ("g", "g"))

    assert result.match is not None
    assert result.match.action.id == "core.high"
    assert len(registry) == 1


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    miss = resolver.resolve("normal", ("x",))
    assert miss.status == "miss"

    new_binding = make_binding("normal.x", keys=("x",), action_id="core.x")
    registry.register_action(make_action("core.x"))
    registry.register_binding(new_binding)

    match = resolver.resolve("normal", ("x",))
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == new_binding.id
