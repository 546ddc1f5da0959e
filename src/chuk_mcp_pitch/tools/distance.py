"""
Distance tools - MCP tools for transposition and interval measurement.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.context import PitchContext

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_distance_tools(mcp: ChukMCPServer, context: PitchContext) -> dict[str, Any]:
    """
    Register transposition and distance tools with the MCP server.

    Args:
        mcp: The MCP server instance
        context: Pitch context shared by every tool

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    engine = context.distance

    def _check_note(note: str) -> str | None:
        if context.notes.parse(note).empty:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
            )
        return None

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_transpose(note: str, interval: str) -> str:
        """
        Transpose a note by an interval.

        Spelling is preserved: 'D' up a major third is 'F#', not 'Gb'.
        Pitch classes stay pitch classes.

        Args:
            note: Note name
            interval: Interval name such as '3M' or '-5P'

        Returns:
            JSON string with the transposed note

        Example:
            pitch_transpose(note="C4", interval="6m")
        """
        try:
            error = _check_note(note)
            if error:
                return error
            if context.intervals.parse(interval).empty:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_INTERVAL.format(interval=interval),
                    }
                )
            return json.dumps(
                {
                    "status": "success",
                    "note": note,
                    "interval": interval,
                    "result": engine.transpose(note, interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_transpose"] = pitch_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_distance(from_note: str, to_note: str) -> str:
        """
        Name the interval between two notes.

        With two pitched notes the interval is signed and may be
        compound. If either is a pitch class, the ascending simple
        interval between the pitch classes is returned.

        Args:
            from_note: Starting note
            to_note: Target note

        Returns:
            JSON string with the interval name and size

        Example:
            pitch_distance(from_note="C3", to_note="E2")
        """
        try:
            for note in (from_note, to_note):
                error = _check_note(note)
                if error:
                    return error
            interval = engine.interval_between(from_note, to_note)
            return json.dumps(
                {
                    "status": "success",
                    "from_note": from_note,
                    "to_note": to_note,
                    "interval": interval.name,
                    "semitones": interval.semitones,
                }
            )
        except Exception as e:
            logger.exception("Failed to measure distance")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_distance"] = pitch_distance

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_tonic_degrees(
        tonic: str,
        intervals: list[str],
        degrees: list[int] | None = None,
    ) -> str:
        """
        Spell notes over a tonic from a repeating interval list.

        Degree n uses interval n mod len, shifted by floor(n / len)
        octaves, so degrees past the end climb and negative degrees
        descend.

        Args:
            tonic: Tonic note
            intervals: Interval names, e.g. a scale ['1P', '2M', '3M', ...]
            degrees: Indices to look up (default: one per interval)

        Returns:
            JSON string with the spelled notes

        Example:
            pitch_tonic_degrees(tonic="C4", intervals=["1P", "3M", "5P"], degrees=[-1, 0, 3])
        """
        try:
            error = _check_note(tonic)
            if error:
                return error
            if not intervals:
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_INTERVALS})
            for name in intervals:
                if context.intervals.parse(name).empty:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.INVALID_INTERVAL.format(interval=name),
                        }
                    )

            transposer = engine.tonic_intervals_transposer(intervals, tonic)
            if degrees is None:
                notes = transposer.notes()
                degrees = list(range(len(transposer)))
            else:
                notes = [transposer(d) for d in degrees]

            return json.dumps(
                {
                    "status": "success",
                    "tonic": tonic,
                    "degrees": [{"degree": d, "note": n} for d, n in zip(degrees, notes)],
                    "notes": notes,
                }
            )
        except Exception as e:
            logger.exception("Failed to spell degrees")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_tonic_degrees"] = pitch_tonic_degrees

    return tools
