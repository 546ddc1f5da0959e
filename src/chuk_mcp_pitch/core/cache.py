"""
Parse cache - text to entity memoization.

Parsing is pure: the same text always yields the same entity, so
entries are never invalidated. One cache is owned per PitchContext
and injected into the codecs that use it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class ParseCache(Generic[T]):
    """
    Append-only memo of parsed entities keyed by source text.

    Insertion uses dict.setdefault, so concurrent callers racing on the
    same key at worst parse twice and keep the first stored result.
    """

    def __init__(self) -> None:
        self._entries: dict[str, T] = {}

    def get_or_parse(self, text: str, parse: Callable[[str], T]) -> T:
        """Return the cached entity for text, parsing and storing it on a miss."""
        try:
            return self._entries[text]
        except KeyError:
            return self._entries.setdefault(text, parse(text))

    def __contains__(self, text: object) -> bool:
        return text in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ParseCache({len(self._entries)} entries)"
