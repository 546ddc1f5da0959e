"""
Core pitch primitives - the lattice layer.

Everything composes on a two-axis coordinate system (line of fifths
and octave):
- Spelling / LatticePoint: step + alteration, decoded coordinates
- PitchClass / Note: note names without and with an octave
- Interval: directed diatonic distance with a quality
- NoteCodec / IntervalCodec: name parsing and formatting
- DistanceEngine: transposition and distance between notes
- ParseCache: memo of parsed names, owned per context
"""

from chuk_mcp_pitch.core.cache import ParseCache
from chuk_mcp_pitch.core.distance import DegreeTransposer, DistanceEngine
from chuk_mcp_pitch.core.interval import (
    NO_INTERVAL,
    AnyInterval,
    Interval,
    IntervalCodec,
    IntervalType,
    NoInterval,
)
from chuk_mcp_pitch.core.lattice import (
    Direction,
    LatticePoint,
    Spelling,
    coordinates_of,
    pitch_from_coordinates,
)
from chuk_mcp_pitch.core.midi import freq_to_midi, is_midi, midi_to_freq, midi_to_note_name, to_midi
from chuk_mcp_pitch.core.note import NO_NOTE, AnyNote, NoNote, Note, NoteCodec, PitchClass

__all__ = [
    # Lattice
    "Direction",
    "LatticePoint",
    "Spelling",
    "coordinates_of",
    "pitch_from_coordinates",
    # Notes
    "AnyNote",
    "NO_NOTE",
    "NoNote",
    "Note",
    "NoteCodec",
    "PitchClass",
    # Intervals
    "AnyInterval",
    "Interval",
    "IntervalCodec",
    "IntervalType",
    "NO_INTERVAL",
    "NoInterval",
    # Distance
    "DegreeTransposer",
    "DistanceEngine",
    # Cache
    "ParseCache",
    # MIDI
    "freq_to_midi",
    "is_midi",
    "midi_to_freq",
    "midi_to_note_name",
    "to_midi",
]
