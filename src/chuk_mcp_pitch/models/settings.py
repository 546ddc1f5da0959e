"""
Settings model - per-session tuning and spelling preferences.

Settings are loaded from an optional `pitch.yaml` in the project
directory; anything missing falls back to these defaults.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Accidentals(str, Enum):
    """Spelling used when a pitch is derived from a number (MIDI, Hz)."""

    FLATS = "flats"
    SHARPS = "sharps"


class PitchSettings(BaseModel):
    """
    Session settings shared by every codec in a PitchContext.

    Immutable once loaded.
    """

    reference_frequency: float = Field(
        440.0,
        gt=0,
        description="Frequency of A4 in Hz",
    )
    accidentals: Accidentals = Field(
        Accidentals.FLATS,
        description="Spelling for notes derived from MIDI numbers or frequencies",
    )
    cache_enabled: bool = Field(
        True,
        description="Memoize parsed note and interval names",
    )

    model_config = {"frozen": True}

    @property
    def sharps(self) -> bool:
        return self.accidentals == Accidentals.SHARPS
