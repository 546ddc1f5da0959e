"""
Note tools - MCP tools for reading and spelling notes.

Tools for parsing note names, spelling MIDI numbers and frequencies,
and respelling notes enharmonically.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.context import PitchContext
from chuk_mcp_pitch.core.midi import freq_to_midi, is_midi
from chuk_mcp_pitch.models import NoteInfo
from chuk_mcp_pitch.notation import notes

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer, context: PitchContext) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance
        context: Pitch context shared by every tool

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    reference = context.settings.reference_frequency

    def _note_payload(name: str) -> dict[str, Any] | None:
        note = context.notes.parse(name)
        if note.empty:
            return None
        return NoteInfo.from_note(note, reference).model_dump()

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_parse_note(note: str) -> str:
        """
        Parse a note name.

        Returns the canonical name and every derived property: pitch
        class, octave, chroma, MIDI number, frequency and lattice
        coordinates.

        Args:
            note: Note name such as 'C', 'F#', 'Bb3' or 'cx4'

        Returns:
            JSON string with note details

        Example:
            pitch_parse_note(note="bb3")
        """
        try:
            info = _note_payload(note)
            if info is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
                )
            return json.dumps({"status": "success", "note": info})
        except Exception as e:
            logger.exception("Failed to parse note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_parse_note"] = pitch_parse_note

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_note_from_midi(midi: int, sharps: bool | None = None) -> str:
        """
        Spell a MIDI number as a note.

        Args:
            midi: MIDI number 0-127
            sharps: Spell black keys with sharps (default from settings)

        Returns:
            JSON string with the note

        Example:
            pitch_note_from_midi(midi=61, sharps=True)
        """
        try:
            if not is_midi(midi):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_MIDI.format(midi=midi)}
                )
            name = notes.from_midi(midi, sharps=sharps, context=context)
            return json.dumps({"status": "success", "note": _note_payload(name)})
        except Exception as e:
            logger.exception("Failed to spell MIDI number")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_note_from_midi"] = pitch_note_from_midi

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_note_from_freq(freq: float, sharps: bool | None = None) -> str:
        """
        Find the nearest note to a frequency.

        Uses the session's A4 reference. The fractional MIDI value is
        returned too, so callers can see how far off pitch it is.

        Args:
            freq: Frequency in Hz
            sharps: Spell black keys with sharps (default from settings)

        Returns:
            JSON string with the note and fractional MIDI number

        Example:
            pitch_note_from_freq(freq=470)
        """
        try:
            if freq <= 0:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_FREQUENCY.format(freq=freq),
                    }
                )
            name = notes.from_freq(freq, sharps=sharps, context=context)
            return json.dumps(
                {
                    "status": "success",
                    "note": _note_payload(name),
                    "midi": freq_to_midi(freq, reference),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_note_from_freq"] = pitch_note_from_freq

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_enharmonic(note: str, dest: str = "") -> str:
        """
        Respell a note with a different name for the same pitch.

        Without a destination, flats become sharps and sharps become
        flats. The octave follows the letter across the B/C boundary.

        Args:
            note: Note name
            dest: Target pitch class such as 'E#' (optional)

        Returns:
            JSON string with the respelled note

        Example:
            pitch_enharmonic(note="C2", dest="B#")
        """
        try:
            if context.notes.parse(note).empty:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
                )
            name = notes.enharmonic(note, dest, context=context)
            if not name:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NO_ENHARMONIC.format(note=note, dest=dest),
                    }
                )
            return json.dumps({"status": "success", "source": note, "note": name})
        except Exception as e:
            logger.exception("Failed to respell note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_enharmonic"] = pitch_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_simplify_note(note: str) -> str:
        """
        Respell a note with at most one accidental.

        Args:
            note: Note name such as 'C###' or 'Gbbb5'

        Returns:
            JSON string with the simplified note

        Example:
            pitch_simplify_note(note="F##4")
        """
        try:
            name = notes.simplify(note, context=context)
            if not name:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
                )
            return json.dumps({"status": "success", "source": note, "note": name})
        except Exception as e:
            logger.exception("Failed to simplify note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_simplify_note"] = pitch_simplify_note

    return tools
