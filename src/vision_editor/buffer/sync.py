"""Snapshot types handed from the engine to host adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class DocumentMirror:
    """Host-friendly snapshot of the visible part of a document."""

    text: str
    scroll_offset: int
    line_count: int
    modified: bool
    path: Optional[str] = None
