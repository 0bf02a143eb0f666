"""Declarative keymap registry and resolver.

Default bindings live in :mod:`vision_editor.keymaps.defaults`, imported
separately because they reference the action modules.
"""

from .models import ActionRef, Binding, KeySequence, KeyStroke, stroke_token
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult

__all__ = [
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeyStroke",
    "stroke_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
