"""
Pitch response models - serializable views of notes and intervals.

These are what the MCP tools return. Core entities stay plain frozen
dataclasses; these models are built from them at the boundary.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_pitch.core.interval import Interval
from chuk_mcp_pitch.core.note import Note, PitchClass


class NoteInfo(BaseModel):
    """Everything derivable from a valid note name."""

    name: str = Field(..., description="Canonical note name")
    letter: str = Field(..., description="Letter A-G")
    acc: str = Field("", description="Accidental run ('#', 'bb', ...)")
    pc: str = Field(..., description="Pitch class name")
    step: int = Field(..., ge=0, le=6, description="Diatonic step (C=0 ... B=6)")
    alt: int = Field(0, description="Alteration in semitones")
    oct: int | None = Field(None, description="Octave (None for a pitch class)")
    chroma: int = Field(..., ge=0, le=11, description="Pitch class number")
    height: int | None = Field(None, description="Semitone height (C4 = 60); notes only")
    midi: int | None = Field(None, ge=0, le=127, description="MIDI number when in range")
    freq: float | None = Field(None, description="Frequency in Hz; notes only")
    coord: list[int] = Field(..., description="Lattice coordinates")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: PitchClass | Note, reference_frequency: float = 440.0) -> NoteInfo:
        """Create info from a note or pitch class."""
        pitched = isinstance(note, Note)
        return cls(
            name=note.name,
            letter=note.letter,
            acc=note.acc,
            pc=note.pc,
            step=note.step,
            alt=note.alt,
            oct=note.oct,
            chroma=note.chroma,
            height=note.height if pitched else None,
            midi=note.midi,
            freq=note.frequency(reference_frequency) if pitched else None,
            coord=list(note.coord),
        )


class IntervalInfo(BaseModel):
    """Everything derivable from a valid interval name."""

    name: str = Field(..., description="Canonical interval name")
    num: int = Field(..., description="Signed interval number")
    q: str = Field(..., description="Quality symbol")
    type: str = Field(..., description="'perfectable' or 'majorable'")
    step: int = Field(..., ge=0, le=6, description="Simple step (unison = 0)")
    alt: int = Field(0, description="Alteration from perfect/major")
    oct: int = Field(0, ge=0, description="Whole octaves spanned")
    dir: int = Field(1, description="1 ascending, -1 descending")
    simple: int = Field(..., description="Octave-reduced number")
    semitones: int = Field(..., description="Signed size in semitones")
    chroma: int = Field(..., ge=0, le=11, description="Size mod 12")
    coord: list[int] = Field(..., description="Lattice coordinates (fifths, octaves, sign)")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        """Create info from an interval."""
        return cls(
            name=interval.name,
            num=interval.num,
            q=interval.q,
            type=interval.type.value,
            step=interval.step,
            alt=interval.alt,
            oct=interval.oct,
            dir=int(interval.dir),
            simple=interval.simple,
            semitones=interval.semitones,
            chroma=interval.chroma,
            coord=list(interval.coord),
        )
