"""
Interval notation helpers - string in, string out.

Same conventions as notation.notes: optional context, '' for invalid
input.
"""

from __future__ import annotations

from collections.abc import Callable

from chuk_mcp_pitch.context import PitchContext, get_default_context
from chuk_mcp_pitch.core.interval import AnyInterval, IntervalCodec
from chuk_mcp_pitch.core.interval import from_semitones as _from_semitones


def _ctx(context: PitchContext | None) -> PitchContext:
    return context or get_default_context()


def get(interval: str | AnyInterval, context: PitchContext | None = None) -> AnyInterval:
    """Parse an interval name into its entity."""
    return _ctx(context).intervals.parse(interval)


def names() -> list[str]:
    return IntervalCodec.names()


def name(interval: str, context: PitchContext | None = None) -> str:
    """Canonical name ('d5' -> '5d', 'P-4' -> '-4P')."""
    return get(interval, context).name


def num(interval: str, context: PitchContext | None = None) -> int | None:
    return get(interval, context).num


def quality(interval: str, context: PitchContext | None = None) -> str:
    return get(interval, context).q


def semitones(interval: str, context: PitchContext | None = None) -> int | None:
    return get(interval, context).semitones


def simplify(interval: str, context: PitchContext | None = None) -> str:
    return _ctx(context).intervals.simplify(interval).name


def invert(interval: str, context: PitchContext | None = None) -> str:
    return _ctx(context).intervals.invert(interval).name


def from_semitones(size: int) -> str:
    return _from_semitones(size)


def distance(from_note: str, to_note: str, context: PitchContext | None = None) -> str:
    """Interval between two notes ('C4', 'G4' -> '5P')."""
    return _ctx(context).distance.distance(from_note, to_note)


def add(a: str, b: str, context: PitchContext | None = None) -> str:
    return _ctx(context).intervals.add(a, b).name


def add_to(interval: str, context: PitchContext | None = None) -> Callable[[str], str]:
    """Partially applied add with a fixed first interval."""
    return lambda other: add(interval, other, context)


def subtract(minuend: str, subtrahend: str, context: PitchContext | None = None) -> str:
    return _ctx(context).intervals.subtract(minuend, subtrahend).name


def transpose_fifths(interval: str, fifths: int, context: PitchContext | None = None) -> str:
    return _ctx(context).intervals.transpose_fifths(interval, fifths).name
