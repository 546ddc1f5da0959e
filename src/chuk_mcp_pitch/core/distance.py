"""
Distance engine - transpose and distance over lattice coordinates.

Transposition adds an interval's (fifths, octaves) to a note's
coordinates; distance subtracts two notes' coordinates and names the
result. Pitch classes only use the fifths axis.
"""

from __future__ import annotations

from collections.abc import Sequence

from .interval import NO_INTERVAL, AnyInterval, Interval, IntervalCodec, NoInterval
from .lattice import Direction, LatticePoint
from .note import NO_NOTE, AnyNote, Note, NoteCodec

IntervalLike = str | AnyInterval | LatticePoint
NoteLike = str | AnyNote


def diatonic_position(note: Note) -> int:
    """Letter steps above C0 (C4 = 28, B3 = 27) regardless of accidentals."""
    return 7 * note.oct + note.step


def direction_between(src: AnyNote, dst: AnyNote) -> Direction | None:
    """
    Direction of the interval between two pitched notes, by letter order.

    The written letters decide, not the sounding pitch: Cb4 -> B#3 rises
    a semitone but is a descending doubly diminished second, and
    B#4 -> C5 sounds the same pitch but ascends. Same-letter pairs
    (C4 -> C#4, Cb4 -> C4) follow the semitones.

    Returns None when either note is a pitch class or the letters match.
    """
    if not isinstance(src, Note) or not isinstance(dst, Note):
        return None
    steps = diatonic_position(dst) - diatonic_position(src)
    if steps == 0:
        return None
    return Direction.ASCENDING if steps > 0 else Direction.DESCENDING


class DistanceEngine:
    """
    Transposes notes by intervals and measures intervals between notes.

    Results are note or interval names; invalid operands give ''.
    """

    def __init__(self, notes: NoteCodec, intervals: IntervalCodec):
        """
        Initialize the engine.

        Args:
            notes: Codec used to read and write notes
            intervals: Codec used to read and write intervals
        """
        self.notes = notes
        self.intervals = intervals

    def transpose(self, note: NoteLike, interval: IntervalLike | Sequence[int]) -> str:
        """
        Transpose a note by an interval name or a raw (fifths, octaves) pair.

        Examples:
            transpose("C3", "3M") -> "E3"
            transpose("D", "3M") -> "F#"
            transpose("C3", (-12, 0)) -> "Dbb-4"
        """
        return self.transpose_note(note, interval).name

    def transpose_note(self, note: NoteLike, interval: IntervalLike | Sequence[int]) -> AnyNote:
        """Same as transpose, returning the note entity."""
        src = self.notes.parse(note)
        if src.empty:
            return NO_NOTE

        if isinstance(interval, (str, Interval, NoInterval, LatticePoint)):
            ivl = self.intervals.parse(interval)
            if ivl.empty:
                return NO_NOTE
            delta = ivl.coord[:2]
        else:
            delta = tuple(interval)
            if not delta:
                return NO_NOTE

        coord = src.coord
        if len(coord) == 1:
            return self.notes.from_coordinates((coord[0] + delta[0],))
        octaves = delta[1] if len(delta) > 1 else 0
        return self.notes.from_coordinates((coord[0] + delta[0], coord[1] + octaves))

    def distance(self, from_note: NoteLike, to_note: NoteLike) -> str:
        """
        Name the interval between two notes.

        If either is a pitch class the result is the ascending interval
        between pitch classes.

        Examples:
            distance("C3", "E3") -> "3M"
            distance("B#4", "C4") -> "-7A"
            distance("Cb4", "B#3") -> "-2dd"
            distance("C", "G") -> "5P"
        """
        return self.interval_between(from_note, to_note).name

    def interval_between(self, from_note: NoteLike, to_note: NoteLike) -> AnyInterval:
        """Same as distance, returning the interval entity."""
        src = self.notes.parse(from_note)
        dst = self.notes.parse(to_note)
        if src.empty or dst.empty:
            return NO_INTERVAL

        fifths = dst.coord[0] - src.coord[0]
        if src.pitched and dst.pitched:
            octaves = dst.coord[1] - src.coord[1]
        else:
            octaves = -((fifths * 7) // 12)

        return self.intervals.from_coordinates((fifths, octaves), direction_between(src, dst))

    def tonic_intervals_transposer(
        self, intervals: Sequence[str], tonic: NoteLike
    ) -> DegreeTransposer:
        """Build a degree lookup for a tonic over a finite interval list."""
        return DegreeTransposer(self, intervals, tonic)


class DegreeTransposer:
    """
    Looks up notes by index over a repeating interval list.

    Index n picks interval n mod len and shifts the tonic by
    floor(n / len) octaves, so negative and out-of-range indices walk
    down and up through octaves.

    Example:
        t = engine.tonic_intervals_transposer(["1P", "3M", "5P"], "C4")
        t(0) -> "C4", t(3) -> "C5", t(-1) -> "G3"
    """

    def __init__(self, engine: DistanceEngine, intervals: Sequence[str], tonic: NoteLike):
        self.engine = engine
        self.intervals = tuple(intervals)
        self.tonic = engine.notes.parse(tonic)

    def __call__(self, index: int) -> str:
        if self.tonic.empty or not self.intervals:
            return ""
        length = len(self.intervals)
        root = self.engine.transpose_note(self.tonic, (0, index // length))
        return self.engine.transpose(root, self.intervals[index % length])

    def notes(self) -> list[str]:
        """One transposed note per interval, or [] for an invalid tonic."""
        if self.tonic.empty:
            return []
        return [self(i) for i in range(len(self.intervals))]

    def __len__(self) -> int:
        return len(self.intervals)
