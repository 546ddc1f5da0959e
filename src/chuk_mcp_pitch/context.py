"""
Pitch context - one session's codecs, parse caches and settings.

A context owns the parse caches and hands them to the codecs it
builds. Servers create one at startup; library callers that do not
care can use the lazily created process default.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_pitch.core.cache import ParseCache
from chuk_mcp_pitch.core.distance import DistanceEngine
from chuk_mcp_pitch.core.interval import AnyInterval, IntervalCodec
from chuk_mcp_pitch.core.note import AnyNote, NoteCodec
from chuk_mcp_pitch.models.settings import PitchSettings


@dataclass(frozen=True)
class PitchContext:
    """Codecs and settings that belong together for one session."""

    settings: PitchSettings
    notes: NoteCodec
    intervals: IntervalCodec
    distance: DistanceEngine

    @classmethod
    def from_settings(cls, settings: PitchSettings | None = None) -> PitchContext:
        """
        Build a context with fresh caches.

        Args:
            settings: Session settings (defaults when None)

        Returns:
            A ready-to-use PitchContext
        """
        settings = settings or PitchSettings()
        note_cache: ParseCache[AnyNote] | None = None
        interval_cache: ParseCache[AnyInterval] | None = None
        if settings.cache_enabled:
            note_cache = ParseCache()
            interval_cache = ParseCache()

        notes = NoteCodec(note_cache, reference_frequency=settings.reference_frequency)
        intervals = IntervalCodec(interval_cache)
        return cls(
            settings=settings,
            notes=notes,
            intervals=intervals,
            distance=DistanceEngine(notes, intervals),
        )


_default_context: PitchContext | None = None


def get_default_context() -> PitchContext:
    """The process-wide context, created with default settings on first use."""
    global _default_context
    if _default_context is None:
        _default_context = PitchContext.from_settings()
    return _default_context


def set_default_context(context: PitchContext | None) -> None:
    """Replace the process-wide context (None resets to lazy defaults)."""
    global _default_context
    _default_context = context
