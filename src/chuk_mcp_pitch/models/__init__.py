"""
Pydantic models for the pitch system.

This module provides:
- PitchSettings: Session tuning and spelling preferences
- NoteInfo: Serializable view of a note or pitch class
- IntervalInfo: Serializable view of an interval
"""

from chuk_mcp_pitch.models.pitch import IntervalInfo, NoteInfo
from chuk_mcp_pitch.models.settings import Accidentals, PitchSettings

__all__ = [
    "Accidentals",
    "IntervalInfo",
    "NoteInfo",
    "PitchSettings",
]
