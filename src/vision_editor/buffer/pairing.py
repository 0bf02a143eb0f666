"""Bracket and quote auto-pairing lookups."""

from __future__ import annotations

from typing import Optional

BRACES = {"{": "}", "(": ")", "[": "]"}
QUOTES = frozenset({"'", '"', "`"})
_OPENERS = {closer: opener for opener, closer in BRACES.items()}


def closeable(char: str) -> Optional[str]:
    """Closer that should follow ``char``, if it opens a pair."""

    if char in QUOTES:
        return char
    return BRACES.get(char)


def openeable(char: str) -> Optional[str]:
    """Opener matching ``char``, if it closes a pair."""

    if char in QUOTES:
        return char
    return _OPENERS.get(char)


def is_brace_pair(left: Optional[str], right: Optional[str]) -> bool:
    return left in BRACES and BRACES[left] == right


def is_pair(left: Optional[str], right: Optional[str]) -> bool:
    if is_brace_pair(left, right):
        return True
    return left is not None and left in QUOTES and left == right


__all__ = ["closeable", "openeable", "is_brace_pair", "is_pair", "BRACES", "QUOTES"]
