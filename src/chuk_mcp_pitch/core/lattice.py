"""
Pitch lattice - the coordinate system under every pitch entity.

Pitch classes, notes and intervals are points on a two-axis lattice:
the line of fifths (..., F, C, G, D, A, E, B, ...) and the octave.
Intervals add a third, explicit sign component for direction.

    pitch class -> (fifths,)
    note        -> (fifths, octaves)
    interval    -> (fifths, octaves, sign)

Moving one fifth up is 7 semitones, one octave up is 12, so the
semitone height of any lattice displacement is `7 * fifths + 12 * octaves`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

# Semitones above C for each natural step (C D E F G A B)
SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Position on the line of fifths for each natural step (C=0, F=-1, B=5)
FIFTHS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Step for each position (fifths + 1) mod 7, i.e. F C G D A E B
FIFTHS_TO_STEPS: tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)

# Octaves crossed when reaching a step by stacking fifths from C
STEPS_TO_OCTS: tuple[int, ...] = tuple((f * 7) // 12 for f in FIFTHS)

# Coordinate aliases - plain int tuples are the interchange format
PitchClassCoordinates = tuple[int]
NoteCoordinates = tuple[int, int]
IntervalCoordinates = tuple[int, int, int]
Coordinates = tuple[int, ...]


class Direction(IntEnum):
    """Interval direction, stored as the sign of the third coordinate."""

    ASCENDING = 1
    DESCENDING = -1


class LatticePoint(NamedTuple):
    """
    A decoded lattice position.

    `oct` is None for pitch classes; `dir` is only set when decoding
    interval (length 3) coordinates.
    """

    step: int
    alt: int
    oct: int | None = None
    dir: Direction | None = None


@dataclass(frozen=True)
class Spelling:
    """
    Diatonic step and alteration - the core shared by pitch classes,
    notes and intervals.

    step: 0-6 (C..B), always reduced
    alt: signed semitone offset (-1 = flat, +1 = sharp, unbounded)
    """

    step: int
    alt: int

    def __post_init__(self) -> None:
        if not 0 <= self.step <= 6:
            raise ValueError(f"Step must be 0-6, got {self.step}")

    @property
    def fifths(self) -> int:
        """Position of this spelling on the line of fifths."""
        return FIFTHS[self.step] + 7 * self.alt


def coordinates_of(
    step: int,
    alt: int,
    octave: int | None = None,
    direction: Direction | int | None = None,
) -> Coordinates:
    """
    Encode a spelling into lattice coordinates.

    Args:
        step: Diatonic step 0-6
        alt: Alteration in semitones
        octave: Octave (None for a pitch class)
        direction: +1 / -1 (defaults to ascending)

    Returns:
        (fifths,) without an octave, otherwise (fifths, octaves).
        Both components are multiplied by the direction sign.
    """
    sign = int(direction) if direction is not None else 1
    f = FIFTHS[step] + 7 * alt
    if octave is None:
        return (sign * f,)
    o = octave - STEPS_TO_OCTS[step] - 4 * alt
    return (sign * f, sign * o)


def pitch_from_coordinates(coord: Coordinates) -> LatticePoint | None:
    """
    Decode lattice coordinates back into a spelling.

    Accepts coordinates of length 1, 2 or 3. A negative third component
    marks a descending interval: fifths and octaves are negated before
    decoding so that the result is the (positive) interval size.

    Returns None for empty coordinates.
    """
    if not coord:
        return None

    f = coord[0]
    o = coord[1] if len(coord) > 1 else None
    direction: Direction | None = None

    if len(coord) > 2:
        direction = Direction.DESCENDING if coord[2] < 0 else Direction.ASCENDING
        if direction is Direction.DESCENDING:
            f = -f
            o = -o if o is not None else None

    step = FIFTHS_TO_STEPS[(f + 1) % 7]
    alt = (f + 1) // 7

    if o is None:
        return LatticePoint(step, alt, None, direction)

    octave = o + 4 * alt + STEPS_TO_OCTS[step]
    return LatticePoint(step, alt, octave, direction)


def chroma(point: LatticePoint) -> int:
    """Pitch class number 0-11 (direction is ignored)."""
    return (SEMITONES[point.step] + point.alt + 120) % 12


def height(point: LatticePoint) -> int:
    """
    Absolute semitone position of a point with an octave.

    C0 is 0, C4 is 48. Intervals are signed by their direction.
    Pitch classes have no height; asking for one is an error.
    """
    if point.oct is None:
        raise ValueError("Pitch classes have no height")
    sign = int(point.dir) if point.dir is not None else 1
    return sign * (SEMITONES[point.step] + point.alt + 12 * point.oct)


def midi(point: LatticePoint) -> int | None:
    """MIDI number of a point, or None without an octave or out of 0-127."""
    if point.oct is None:
        return None
    h = height(point)
    if -12 <= h <= 115:
        return h + 12
    return None


def displacement_semitones(fifths: int, octaves: int) -> int:
    """Semitones spanned by a (fifths, octaves) displacement."""
    return fifths * 7 + octaves * 12
