"""Modal terminal text editor with vi-style Normal, Insert and Command modes."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "commands",
    "config",
    "errors",
    "keymaps",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
