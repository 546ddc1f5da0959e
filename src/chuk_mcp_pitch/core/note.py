"""
Note primitives - PitchClass, Note and the note-name codec.

A note name is a letter, an optional run of accidentals and an
optional octave: "C", "F#", "Bb3", "Gx-1". Without an octave the name
denotes a pitch class; with one it denotes a pitched note.

Malformed names never raise: they parse to NO_NOTE, and every
operation given NO_NOTE yields an empty result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from . import lattice
from .cache import ParseCache
from .lattice import (
    Coordinates,
    LatticePoint,
    Spelling,
    coordinates_of,
    pitch_from_coordinates,
)

LETTERS = "CDEFGAB"

# Reference pitch for A4 in Hz
A4_FREQUENCY = 440.0

NOTE_REGEX = re.compile(r"^([a-gA-G]?)(#{1,}|b{1,}|x{1,}|)(-?\d*)\s*(.*)$")


def step_to_letter(step: int) -> str:
    """Letter for a step 0-6, or '' when out of range."""
    return LETTERS[step] if 0 <= step < 7 else ""


def alt_to_acc(alt: int) -> str:
    """Accidental run for an alteration: -2 -> 'bb', 1 -> '#'."""
    return "b" * -alt if alt < 0 else "#" * alt


def acc_to_alt(acc: str) -> int:
    """Alteration for a pure accidental run: 'bb' -> -2, '##' -> 2."""
    if not acc:
        return 0
    return -len(acc) if acc[0] == "b" else len(acc)


@dataclass(frozen=True)
class PitchClass(Spelling):
    """
    A note name without octave, e.g. C#.

    Pitch classes have no height and no MIDI number; they live on the
    line-of-fifths axis only.
    """

    empty: ClassVar[bool] = False
    pitched: ClassVar[bool] = False

    @property
    def letter(self) -> str:
        return LETTERS[self.step]

    @property
    def acc(self) -> str:
        return alt_to_acc(self.alt)

    @property
    def pc(self) -> str:
        """Pitch class name (letter + accidentals)."""
        return self.letter + self.acc

    @property
    def name(self) -> str:
        return self.pc

    @property
    def oct(self) -> None:
        return None

    @property
    def chroma(self) -> int:
        """Pitch class number 0-11."""
        return lattice.chroma(self.point)

    @property
    def coord(self) -> Coordinates:
        return coordinates_of(self.step, self.alt)

    @property
    def point(self) -> LatticePoint:
        return LatticePoint(self.step, self.alt)

    @property
    def midi(self) -> None:
        return None

    @property
    def freq(self) -> None:
        return None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Note(Spelling):
    """
    A pitched note: spelling plus octave, e.g. Bb3.

    Height follows MIDI numbering (C4 = 60) and is defined for every
    octave; `midi` is only set while the height is within 0-127.
    """

    oct: int

    empty: ClassVar[bool] = False
    pitched: ClassVar[bool] = True

    @property
    def letter(self) -> str:
        return LETTERS[self.step]

    @property
    def acc(self) -> str:
        return alt_to_acc(self.alt)

    @property
    def pc(self) -> str:
        return self.letter + self.acc

    @property
    def name(self) -> str:
        return f"{self.pc}{self.oct}"

    @property
    def chroma(self) -> int:
        return lattice.chroma(self.point)

    @property
    def height(self) -> int:
        """Absolute semitone position in MIDI numbering (C4 = 60, C-1 = 0)."""
        return lattice.height(self.point) + 12

    @property
    def midi(self) -> int | None:
        return lattice.midi(self.point)

    @property
    def coord(self) -> Coordinates:
        return coordinates_of(self.step, self.alt, self.oct)

    @property
    def point(self) -> LatticePoint:
        return LatticePoint(self.step, self.alt, self.oct)

    @property
    def freq(self) -> float:
        """Frequency in Hz against A4 = 440."""
        return self.frequency()

    def frequency(self, reference: float = A4_FREQUENCY) -> float:
        """Frequency in Hz against the given A4 reference."""
        return 2 ** ((self.height - 69) / 12) * reference

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NoNote:
    """The invalid note. Every derived field is empty."""

    empty: ClassVar[bool] = True
    pitched: ClassVar[bool] = False

    name: ClassVar[str] = ""
    letter: ClassVar[str] = ""
    acc: ClassVar[str] = ""
    pc: ClassVar[str] = ""
    step: ClassVar[None] = None
    alt: ClassVar[None] = None
    oct: ClassVar[None] = None
    chroma: ClassVar[None] = None
    midi: ClassVar[None] = None
    freq: ClassVar[None] = None
    coord: ClassVar[Coordinates] = ()

    def __str__(self) -> str:
        return ""


NO_NOTE = NoNote()

AnyNote = PitchClass | Note | NoNote


def tokenize_note(text: str) -> tuple[str, str, str, str]:
    """
    Split a note name into (letter, accidentals, octave, remainder).

    The letter is upper-cased and 'x' accidentals expand to '##'.
    Text that does not match at all yields four empty strings.

    Example:
        tokenize_note("Cbb5 major") -> ("C", "bb", "5", "major")
    """
    m = NOTE_REGEX.match(text)
    if m is None:
        return ("", "", "", "")
    letter, acc, octave, rest = m.groups()
    return (letter.upper(), acc.replace("x", "##"), octave, rest)


def parse_note(text: str) -> AnyNote:
    """
    Parse note text without caching.

    Requires a letter and nothing left over after the octave.
    """
    letter, acc, octave, rest = tokenize_note(text)
    if not letter or rest or octave == "-":
        return NO_NOTE

    step = (ord(letter) - ord("A") + 5) % 7
    alt = acc_to_alt(acc)
    if not octave:
        return PitchClass(step, alt)
    return Note(step, alt, int(octave))


def pitch_name(point: LatticePoint) -> str:
    """Format a lattice point as a note name ('' for a bad step)."""
    letter = step_to_letter(point.step)
    if not letter:
        return ""
    pc = letter + alt_to_acc(point.alt)
    return pc if point.oct is None else f"{pc}{point.oct}"


def note_from_point(point: LatticePoint) -> AnyNote:
    """Build the note entity for a lattice point (direction is dropped)."""
    if not 0 <= point.step <= 6:
        return NO_NOTE
    if point.oct is None:
        return PitchClass(point.step, point.alt)
    return Note(point.step, point.alt, point.oct)


class NoteCodec:
    """
    Parses and formats note names.

    Holds the parse cache it was given and the A4 reference used for
    frequencies. Codecs are cheap; a PitchContext usually owns one.
    """

    def __init__(
        self,
        cache: ParseCache[AnyNote] | None = None,
        reference_frequency: float = A4_FREQUENCY,
    ):
        """
        Initialize the codec.

        Args:
            cache: Parse cache to memoize text lookups (None disables caching)
            reference_frequency: Frequency of A4 in Hz
        """
        if reference_frequency <= 0:
            raise ValueError(f"Reference frequency must be positive, got {reference_frequency}")
        self.cache = cache
        self.reference_frequency = reference_frequency

    def parse(self, src: str | AnyNote | LatticePoint) -> AnyNote:
        """
        Get the note entity for text, an existing entity or a lattice point.

        Invalid input yields NO_NOTE.
        """
        if isinstance(src, (PitchClass, Note, NoNote)):
            return src
        if isinstance(src, LatticePoint):
            return note_from_point(src)
        if not isinstance(src, str):
            return NO_NOTE
        if self.cache is None:
            return parse_note(src)
        return self.cache.get_or_parse(src, parse_note)

    def format(self, note: AnyNote | LatticePoint) -> str:
        """Note name for an entity or lattice point ('' when invalid)."""
        if isinstance(note, LatticePoint):
            return pitch_name(note)
        return note.name

    def from_coordinates(self, coord: Coordinates) -> AnyNote:
        """Decode (fifths,) or (fifths, octaves) into a note entity."""
        point = pitch_from_coordinates(coord)
        if point is None:
            return NO_NOTE
        return note_from_point(point)

    def frequency(self, src: str | AnyNote) -> float | None:
        """Frequency against this codec's reference, None without an octave."""
        note = self.parse(src)
        if isinstance(note, Note):
            return note.frequency(self.reference_frequency)
        return None
