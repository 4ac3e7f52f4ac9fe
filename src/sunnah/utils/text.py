"""Plain text helpers for statistics and display."""

from __future__ import annotations

import re
from typing import Iterable

_WHITESPACE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    if not text or text.isspace():
        return 0
    return len(text.split())


def total_words(texts: Iterable[str]) -> int:
    return sum(count_words(text) for text in texts)


def snippet(text: str, *, max_chars: int = 180) -> str:
    """Collapse whitespace and cut ``text`` to ``max_chars`` characters.

    Used for single-line table cells, so newlines never survive.
    """
    collapsed = _WHITESPACE.sub(" ", text or "").strip()
    if len(collapsed) <= max_chars:
        return collapsed
    return collapsed[: max(max_chars - 3, 0)].rstrip() + "..."
