"""
MIDI number and frequency conversions.

MIDI numbers are integers 0-127 with C4 = 60 and A4 = 69. Frequencies
use twelve-tone equal temperament against a configurable A4.
"""

from __future__ import annotations

import math

from .note import A4_FREQUENCY, NoteCodec

_SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")


def is_midi(value: object) -> bool:
    """True for integers in the MIDI range 0-127."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 127


def to_midi(value: int | str, codec: NoteCodec | None = None) -> int | None:
    """
    Get a MIDI number from an int, a numeric string or a note name.

    Returns None when the value is out of range or not a note.
    """
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            return (codec or NoteCodec()).parse(value).midi
    return value if is_midi(value) else None


def midi_to_freq(midi: float, tuning: float = A4_FREQUENCY) -> float:
    """Frequency in Hz of a (possibly fractional) MIDI number."""
    return 2 ** ((midi - 69) / 12) * tuning


def freq_to_midi(freq: float, tuning: float = A4_FREQUENCY) -> float | None:
    """
    Fractional MIDI number for a frequency, rounded to cents.

    Non-positive frequencies have no MIDI number.
    """
    if freq <= 0:
        return None
    value = 12 * (math.log(freq) - math.log(tuning)) / math.log(2) + 69
    return round(value * 100) / 100


def midi_to_note_name(midi: float, sharps: bool = False, pitch_class: bool = False) -> str:
    """
    Spell a MIDI number, rounding fractional values.

    Args:
        midi: MIDI number
        sharps: Spell black keys with sharps instead of flats
        pitch_class: Omit the octave

    Returns:
        Note name such as 'Bb4', or '' for non-finite input
    """
    if isinstance(midi, float) and not math.isfinite(midi):
        return ""
    number = round(midi)
    names = _SHARP_NAMES if sharps else _FLAT_NAMES
    pc = names[number % 12]
    if pitch_class:
        return pc
    return f"{pc}{number // 12 - 1}"
