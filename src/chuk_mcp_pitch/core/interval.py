"""
Interval primitives - Interval and the interval-name codec.

Interval names are a signed number plus a quality ("3M", "-5P", "9m")
or the shorthand quality-first form ("M3", "P-5"). Qualities are
P, M, m, or runs of A (augmented) / d (diminished), up to four long.

Steps 1, 4, 5 (and their compounds) are perfectable; 2, 3, 6, 7 are
majorable. A quality must match its step category: "2P" and "5M" are
not intervals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .cache import ParseCache
from .lattice import (
    SEMITONES,
    Coordinates,
    Direction,
    LatticePoint,
    Spelling,
    coordinates_of,
    displacement_semitones,
    pitch_from_coordinates,
)

INTERVAL_REGEX = re.compile(
    r"^(?:([-+]?\d+)(d{1,4}|m|M|P|A{1,4})|(AA|A|P|M|m|d|dd)([-+]?\d+))$"
)

# Step category by step: P = perfectable, M = majorable
TYPES = "PMMPPMM"

# Simple interval number and quality for each chromatic size 0-11
_SEMITONE_NUMBERS: tuple[int, ...] = (1, 2, 2, 3, 3, 4, 5, 5, 6, 6, 7, 7)
_SEMITONE_QUALITIES: tuple[str, ...] = ("P", "m", "M", "m", "M", "P", "d", "P", "m", "M", "m", "M")


class IntervalType(str, Enum):
    """Step category - decides which qualities are valid."""

    PERFECTABLE = "perfectable"
    MAJORABLE = "majorable"

    @classmethod
    def for_step(cls, step: int) -> IntervalType:
        return cls.MAJORABLE if TYPES[step] == "M" else cls.PERFECTABLE


def quality_to_alt(interval_type: IntervalType, quality: str) -> int | None:
    """
    Alteration for a quality on a step category.

    Returns None when the quality does not fit the category
    (P on a majorable step, M or m on a perfectable one).

    Diminished is asymmetric: on majorable steps minor already takes
    -1, so 'd' means -2.
    """
    majorable = interval_type is IntervalType.MAJORABLE
    if quality == "P":
        return None if majorable else 0
    if quality == "M":
        return 0 if majorable else None
    if quality == "m":
        return -1 if majorable else None
    if quality and quality == "A" * len(quality):
        return len(quality)
    if quality and quality == "d" * len(quality):
        return -(len(quality) + 1) if majorable else -len(quality)
    return None


def alt_to_quality(interval_type: IntervalType, alt: int) -> str:
    """Quality for an alteration on a step category (inverse of quality_to_alt)."""
    majorable = interval_type is IntervalType.MAJORABLE
    if alt == 0:
        return "M" if majorable else "P"
    if alt == -1 and majorable:
        return "m"
    if alt > 0:
        return "A" * alt
    return "d" * (-(alt + 1) if majorable else -alt)


@dataclass(frozen=True)
class Interval(Spelling):
    """
    A directed interval: spelling of its simple size, octave count and
    direction.

    Examples:
        "3M"  -> step 2, alt 0, oct 0, ascending
        "-9m" -> step 1, alt -1, oct 1, descending

    Immutable and hashable.
    """

    oct: int
    dir: Direction

    empty: ClassVar[bool] = False

    @property
    def type(self) -> IntervalType:
        return IntervalType.for_step(self.step)

    @property
    def q(self) -> str:
        """Quality symbol (P, M, m, A..., d...)."""
        return alt_to_quality(self.type, self.alt)

    @property
    def num(self) -> int:
        """Signed interval number (3, -5, 9...)."""
        return int(self.dir) * (self.step + 1 + 7 * self.oct)

    @property
    def name(self) -> str:
        return f"{self.num}{self.q}"

    @property
    def simple(self) -> int:
        """Octave-reduced number; 8 and -8 are kept apart from unisons."""
        if abs(self.num) == 8:
            return self.num
        return int(self.dir) * (self.step + 1)

    @property
    def semitones(self) -> int:
        return int(self.dir) * (SEMITONES[self.step] + self.alt + 12 * self.oct)

    @property
    def chroma(self) -> int:
        return (int(self.dir) * (SEMITONES[self.step] + self.alt)) % 12

    @property
    def coord(self) -> Coordinates:
        """(fifths, octaves, sign) - fifths and octaves carry the sign."""
        f, o = coordinates_of(self.step, self.alt, self.oct, self.dir)
        return (f, o, int(self.dir))

    @property
    def point(self) -> LatticePoint:
        return LatticePoint(self.step, self.alt, self.oct, self.dir)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NoInterval:
    """The invalid interval. Every derived field is empty."""

    empty: ClassVar[bool] = True

    name: ClassVar[str] = ""
    q: ClassVar[str] = ""
    type: ClassVar[None] = None
    step: ClassVar[None] = None
    alt: ClassVar[None] = None
    oct: ClassVar[None] = None
    dir: ClassVar[None] = None
    num: ClassVar[None] = None
    simple: ClassVar[None] = None
    semitones: ClassVar[None] = None
    chroma: ClassVar[None] = None
    coord: ClassVar[Coordinates] = ()

    def __str__(self) -> str:
        return ""


NO_INTERVAL = NoInterval()

AnyInterval = Interval | NoInterval


def tokenize_interval(text: str) -> tuple[str, str]:
    """
    Split an interval name into (number, quality).

    Both orders are accepted; no match yields ("", "").

    Example:
        tokenize_interval("M-3") -> ("-3", "M")
    """
    m = INTERVAL_REGEX.match(text)
    if m is None:
        return ("", "")
    if m.group(1) is not None:
        return (m.group(1), m.group(2))
    return (m.group(4), m.group(3))


def parse_interval(text: str) -> AnyInterval:
    """Parse interval text without caching."""
    num_str, quality = tokenize_interval(text)
    if not num_str:
        return NO_INTERVAL

    num = int(num_str)
    if num == 0:
        return NO_INTERVAL

    step = (abs(num) - 1) % 7
    alt = quality_to_alt(IntervalType.for_step(step), quality)
    if alt is None:
        return NO_INTERVAL

    direction = Direction.DESCENDING if num < 0 else Direction.ASCENDING
    octaves = (abs(num) - 1) // 7
    return Interval(step, alt, octaves, direction)


def interval_name(point: LatticePoint) -> str:
    """
    Format a lattice point as an interval name.

    Points without a direction or octave are not intervals and give ''.
    A computed number of 0 (descending pitch-class unison) renders as
    the simple step number instead.
    """
    if point.dir is None or point.oct is None or not 0 <= point.step <= 6:
        return ""
    num = point.step + 1 + 7 * point.oct
    if num == 0:
        num = point.step + 1
    sign = "-" if point.dir is Direction.DESCENDING else ""
    quality = alt_to_quality(IntervalType.for_step(point.step), point.alt)
    return f"{sign}{num}{quality}"


def from_semitones(semitones: int) -> str:
    """
    Name the most common interval with a given (signed) size.

    Example:
        from_semitones(6) -> "5d", from_semitones(-13) -> "-9m"
    """
    sign = -1 if semitones < 0 else 1
    n = abs(semitones)
    size, octaves = n % 12, n // 12
    return f"{sign * (_SEMITONE_NUMBERS[size] + 7 * octaves)}{_SEMITONE_QUALITIES[size]}"


class IntervalCodec:
    """
    Parses, formats and combines intervals.

    All operations accept names or entities and return entities;
    NO_INTERVAL in, NO_INTERVAL out.
    """

    def __init__(self, cache: ParseCache[AnyInterval] | None = None):
        """
        Initialize the codec.

        Args:
            cache: Parse cache to memoize text lookups (None disables caching)
        """
        self.cache = cache

    def parse(self, src: str | AnyInterval | LatticePoint) -> AnyInterval:
        """Get the interval entity for text, an entity or a directed lattice point."""
        if isinstance(src, (Interval, NoInterval)):
            return src
        if isinstance(src, LatticePoint):
            return self.parse(interval_name(src))
        if not isinstance(src, str) or not src:
            return NO_INTERVAL
        if self.cache is None:
            return parse_interval(src)
        return self.cache.get_or_parse(src, parse_interval)

    def format(self, interval: AnyInterval | LatticePoint) -> str:
        """Interval name for an entity or lattice point ('' when invalid)."""
        if isinstance(interval, LatticePoint):
            return interval_name(interval)
        return interval.name

    def from_coordinates(
        self, coord: Coordinates, direction: Direction | None = None
    ) -> AnyInterval:
        """
        Build an interval from a (fifths, octaves) displacement.

        Without an explicit direction, the sign of the displacement in
        semitones decides. Any third component is ignored: the first
        two already carry the sign.
        """
        if not coord:
            return NO_INTERVAL
        f = coord[0]
        o = coord[1] if len(coord) > 1 else 0
        if direction is None:
            descending = displacement_semitones(f, o) < 0
            direction = Direction.DESCENDING if descending else Direction.ASCENDING
        point = pitch_from_coordinates((f, o, int(direction)))
        if point is None:
            return NO_INTERVAL
        return self.parse(interval_name(point))

    def from_semitones(self, semitones: int) -> AnyInterval:
        return self.parse(from_semitones(semitones))

    def simplify(self, src: str | AnyInterval) -> AnyInterval:
        """Reduce to within an octave, keeping direction ('9M' -> '2M', '8P' stays)."""
        ivl = self.parse(src)
        if ivl.empty:
            return NO_INTERVAL
        return self.parse(f"{ivl.simple}{ivl.q}")

    def invert(self, src: str | AnyInterval) -> AnyInterval:
        """
        Invert the simple part of an interval, keeping octaves and direction.

        Examples:
            '2M' -> '7m', '4A' -> '5d', '-3m' -> '-6M'
        """
        ivl = self.parse(src)
        if ivl.empty:
            return NO_INTERVAL
        step = (7 - ivl.step) % 7
        if ivl.type is IntervalType.PERFECTABLE:
            alt = -ivl.alt
        else:
            alt = -(ivl.alt + 1)
        return self.parse(LatticePoint(step, alt, ivl.oct, ivl.dir))

    def add(self, a: str | AnyInterval, b: str | AnyInterval) -> AnyInterval:
        """Sum of two intervals ('3m' + '5P' -> '7m')."""
        return self._combine(a, b, 1)

    def subtract(self, minuend: str | AnyInterval, subtrahend: str | AnyInterval) -> AnyInterval:
        """Difference of two intervals ('5P' - '3M' -> '3m')."""
        return self._combine(minuend, subtrahend, -1)

    def transpose_fifths(self, src: str | AnyInterval, fifths: int) -> AnyInterval:
        """Move an interval along the line of fifths ('4P' + 1 fifth -> '8P')."""
        ivl = self.parse(src)
        if ivl.empty:
            return NO_INTERVAL
        f, o, _ = ivl.coord
        return self.from_coordinates((f + fifths, o))

    def _combine(self, a: str | AnyInterval, b: str | AnyInterval, sign: int) -> AnyInterval:
        first = self.parse(a)
        second = self.parse(b)
        if first.empty or second.empty:
            return NO_INTERVAL
        fa, oa, _ = first.coord
        fb, ob, _ = second.coord
        return self.from_coordinates((fa + sign * fb, oa + sign * ob))

    @staticmethod
    def names() -> list[str]:
        """Names of the natural simple intervals above C."""
        return ["1P", "2M", "3M", "4P", "5P", "6m", "7m"]
