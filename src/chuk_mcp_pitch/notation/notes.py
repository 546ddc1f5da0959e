"""
Note notation helpers - string in, string out.

Thin functions over a PitchContext for callers that work with note
names rather than entities. Every function takes an optional context;
without one the process default is used.

Invalid names give '' (or None for numeric results), never an error.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from chuk_mcp_pitch.context import PitchContext, get_default_context
from chuk_mcp_pitch.core.midi import freq_to_midi, midi_to_note_name
from chuk_mcp_pitch.core.note import AnyNote, Note, PitchClass

NAMES = ["C", "D", "E", "F", "G", "A", "B"]


def _ctx(context: PitchContext | None) -> PitchContext:
    return context or get_default_context()


def get(note: str | AnyNote, context: PitchContext | None = None) -> AnyNote:
    """Parse a note name into its entity."""
    return _ctx(context).notes.parse(note)


def names(notes: Iterable[str] | None = None, context: PitchContext | None = None) -> list[str]:
    """
    Canonical names of the valid notes in a list.

    Without a list, the natural pitch class names C..B.
    """
    if notes is None:
        return list(NAMES)
    return [n.name for n in _only_notes(notes, context)]


def name(note: str, context: PitchContext | None = None) -> str:
    return get(note, context).name


def pitch_class(note: str, context: PitchContext | None = None) -> str:
    return get(note, context).pc


def accidentals(note: str, context: PitchContext | None = None) -> str:
    return get(note, context).acc


def octave(note: str, context: PitchContext | None = None) -> int | None:
    return get(note, context).oct


def midi(note: str, context: PitchContext | None = None) -> int | None:
    return get(note, context).midi


def chroma(note: str, context: PitchContext | None = None) -> int | None:
    return get(note, context).chroma


def freq(note: str, context: PitchContext | None = None) -> float | None:
    """Frequency in Hz using the context's A4 reference."""
    return _ctx(context).notes.frequency(note)


def from_midi(number: float, sharps: bool | None = None, context: PitchContext | None = None) -> str:
    """
    Spell a MIDI number.

    Args:
        number: MIDI number
        sharps: Force sharp (True) or flat (False) spelling; None uses settings
        context: Pitch context
    """
    if sharps is None:
        sharps = _ctx(context).settings.sharps
    return midi_to_note_name(number, sharps=sharps)


def from_midi_sharps(number: float) -> str:
    return midi_to_note_name(number, sharps=True)


def from_freq(frequency: float, sharps: bool | None = None, context: PitchContext | None = None) -> str:
    """Nearest note name for a frequency ('' for non-positive input)."""
    ctx = _ctx(context)
    number = freq_to_midi(frequency, ctx.settings.reference_frequency)
    if number is None:
        return ""
    if sharps is None:
        sharps = ctx.settings.sharps
    return midi_to_note_name(number, sharps=sharps)


def from_freq_sharps(frequency: float, context: PitchContext | None = None) -> str:
    return from_freq(frequency, sharps=True, context=context)


def transpose(note: str, interval: str, context: PitchContext | None = None) -> str:
    """Transpose a note by an interval name ('A4', '3M' -> 'C#5')."""
    return _ctx(context).distance.transpose(note, interval)


def transpose_by(interval: str, context: PitchContext | None = None) -> Callable[[str], str]:
    """Partially applied transpose with a fixed interval."""
    return lambda note: transpose(note, interval, context)


def transpose_from(note: str, context: PitchContext | None = None) -> Callable[[str], str]:
    """Partially applied transpose with a fixed note."""
    return lambda interval: transpose(note, interval, context)


def transpose_fifths(note: str, fifths: int, context: PitchContext | None = None) -> str:
    """Move a note along the line of fifths ('G4', 3 -> 'E6')."""
    return _ctx(context).distance.transpose(note, (fifths, 0))


def transpose_octaves(note: str, octaves: int, context: PitchContext | None = None) -> str:
    """Move a note by whole octaves ('C4', -5 -> 'C-1')."""
    return _ctx(context).distance.transpose(note, (0, octaves))


def distance(from_note: str, to_note: str, context: PitchContext | None = None) -> str:
    return _ctx(context).distance.distance(from_note, to_note)


def sorted_names(
    notes: Iterable[str], descending: bool = False, context: PitchContext | None = None
) -> list[str]:
    """
    Valid note names sorted by pitch.

    Pitch classes have no height, so they are ordered among themselves
    by chroma and placed below every pitched note.
    """
    ordered = sorted(_only_notes(notes, context), key=_pitch_order, reverse=descending)
    return [n.name for n in ordered]


def sorted_uniq_names(notes: Iterable[str], context: PitchContext | None = None) -> list[str]:
    """Ascending sorted names with duplicates removed."""
    result: list[str] = []
    for n in sorted_names(notes, context=context):
        if not result or result[-1] != n:
            result.append(n)
    return result


def simplify(note: str, context: PitchContext | None = None) -> str:
    """
    Respell with at most one accidental, keeping the pitch.

    Sharp notes stay sharp, flat notes stay flat: 'C###' -> 'D#',
    'Cbb4' -> 'Bb3'.
    """
    n = get(note, context)
    if isinstance(n, Note):
        return midi_to_note_name(n.height, sharps=n.alt > 0)
    if isinstance(n, PitchClass):
        return midi_to_note_name(n.chroma, sharps=n.alt > 0, pitch_class=True)
    return ""


def enharmonic(note: str, dest_name: str = "", context: PitchContext | None = None) -> str:
    """
    Respell a note with another name of the same pitch.

    Without a destination pitch class, flats become sharps and vice
    versa ('C#' -> 'Db'). The octave follows the letter across the B/C
    boundary ('B#4' -> 'C5', 'C2' + 'B#' -> 'B#1').

    Returns '' when the destination does not share the note's chroma.
    """
    src = get(note, context)
    if src.empty:
        return ""

    dest_pc = dest_name or midi_to_note_name(src.chroma, sharps=src.alt < 0, pitch_class=True)
    dest = get(dest_pc, context)
    if dest.empty or dest.chroma != src.chroma:
        return ""

    if not isinstance(src, Note):
        return dest.pc

    # Octave whose spelling lands on the source height exactly
    octave = (src.height - Note(dest.step, dest.alt, 0).height) // 12
    return f"{dest.pc}{octave}"


def _only_notes(notes: Iterable[str], context: PitchContext | None) -> list[PitchClass | Note]:
    parsed = (get(n, context) for n in notes)
    return [n for n in parsed if isinstance(n, (PitchClass, Note))]


def _pitch_order(note: PitchClass | Note) -> tuple[int, int]:
    if isinstance(note, Note):
        return (1, note.height)
    return (0, note.chroma)
