"""
Tests for the pitch lattice.

Tests cover:
- Coordinate encoding of spellings
- Decoding back into lattice points (bijection)
- Heights and MIDI numbers of lattice points
"""

import pytest

from chuk_mcp_pitch.core.lattice import (
    FIFTHS_TO_STEPS,
    STEPS_TO_OCTS,
    Direction,
    LatticePoint,
    Spelling,
    chroma,
    coordinates_of,
    displacement_semitones,
    height,
    midi,
    pitch_from_coordinates,
)


class TestTables:
    """Tests for the lookup tables."""

    def test_steps_to_octs(self) -> None:
        """Octaves crossed stacking fifths from C."""
        assert STEPS_TO_OCTS == (0, 1, 2, -1, 0, 1, 2)

    def test_fifths_to_steps_order(self) -> None:
        """Line of fifths starting at F."""
        assert "".join("CDEFGAB"[s] for s in FIFTHS_TO_STEPS) == "FCGDAEB"


class TestSpelling:
    """Tests for the Spelling base."""

    def test_fifths(self) -> None:
        """Spellings know their line-of-fifths position."""
        assert Spelling(0, 0).fifths == 0
        assert Spelling(3, 0).fifths == -1
        assert Spelling(4, 1).fifths == 8

    def test_invalid_step(self) -> None:
        """Steps outside 0-6 are rejected."""
        with pytest.raises(ValueError):
            Spelling(7, 0)
        with pytest.raises(ValueError):
            Spelling(-1, 0)


class TestCoordinates:
    """Tests for coordinate encoding."""

    def test_pitch_class(self) -> None:
        """Pitch classes only have a fifths component."""
        assert coordinates_of(0, 0) == (0,)
        assert coordinates_of(6, -1) == (-2,)

    def test_note(self) -> None:
        """Notes carry fifths and octaves."""
        assert coordinates_of(0, 0, 4) == (0, 4)
        assert coordinates_of(5, 0, 4) == (3, 3)
        assert coordinates_of(6, -1, 3) == (-2, 5)

    def test_semitones_match_height(self) -> None:
        """7 * fifths + 12 * octaves is the height above C0."""
        f, o = coordinates_of(5, 0, 4)
        assert displacement_semitones(f, o) == 57

    def test_descending_negates(self) -> None:
        """A descending direction negates both components."""
        assert coordinates_of(4, 0, 0, Direction.DESCENDING) == (-1, 0)
        assert coordinates_of(3, -1, 0, Direction.ASCENDING) == (-8, 5)


class TestDecoding:
    """Tests for pitch_from_coordinates."""

    def test_empty(self) -> None:
        """Empty coordinates decode to nothing."""
        assert pitch_from_coordinates(()) is None

    def test_pitch_class(self) -> None:
        """Length 1 decodes to a pitch class."""
        assert pitch_from_coordinates((2,)) == LatticePoint(1, 0)
        assert pitch_from_coordinates((-2,)) == LatticePoint(6, -1)

    def test_note(self) -> None:
        """Length 2 decodes to a note."""
        assert pitch_from_coordinates((3, 3)) == LatticePoint(5, 0, 4)

    def test_descending_interval(self) -> None:
        """A negative sign component negates before decoding."""
        assert pitch_from_coordinates((-1, 0, -1)) == LatticePoint(4, 0, 0, Direction.DESCENDING)

    @pytest.mark.parametrize("step", range(7))
    def test_note_bijection(self, step: int) -> None:
        """Every (step, alt, oct) survives encode and decode."""
        for alt in range(-3, 4):
            for octave in range(-2, 7):
                coord = coordinates_of(step, alt, octave)
                assert pitch_from_coordinates(coord) == LatticePoint(step, alt, octave)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_interval_bijection(self, direction: Direction) -> None:
        """Directed coordinates decode to the same interval."""
        for step in range(7):
            for alt in range(-2, 3):
                for octave in range(3):
                    coord = (*coordinates_of(step, alt, octave, direction), int(direction))
                    assert pitch_from_coordinates(coord) == LatticePoint(
                        step, alt, octave, direction
                    )


class TestHeight:
    """Tests for height, chroma and midi of lattice points."""

    def test_height(self) -> None:
        """Height counts from C0."""
        assert height(LatticePoint(0, 0, 4)) == 48
        assert height(LatticePoint(4, 0, 0, Direction.DESCENDING)) == -7

    def test_pitch_class_has_no_height(self) -> None:
        """Asking a pitch class for its height is an error."""
        with pytest.raises(ValueError):
            height(LatticePoint(0, 0))

    def test_midi(self) -> None:
        """MIDI is height + 12 within range."""
        assert midi(LatticePoint(0, 0, 4)) == 60
        assert midi(LatticePoint(0, 0, -1)) == 0
        assert midi(LatticePoint(0, 0, -2)) is None
        assert midi(LatticePoint(0, 0)) is None

    def test_chroma(self) -> None:
        """Chroma wraps alterations."""
        assert chroma(LatticePoint(0, -1)) == 11
        assert chroma(LatticePoint(6, 1, 3)) == 0
