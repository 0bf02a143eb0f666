"""Textual host for the editor.

Only the controller is imported here; the runnable app lives in
:mod:`vision_editor.adapters.textual.app`.
"""

from .controller import EditorView, TextualEditorAdapter, TextualUIHooks

__all__ = ["EditorView", "TextualEditorAdapter", "TextualUIHooks"]
