"""
Interval tools - MCP tools for reading and combining intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.context import PitchContext
from chuk_mcp_pitch.core.interval import AnyInterval, Interval
from chuk_mcp_pitch.models import IntervalInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _invalid(interval: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.INVALID_INTERVAL.format(interval=interval)}
    )


def _info(interval: AnyInterval) -> dict[str, Any] | None:
    if not isinstance(interval, Interval):
        return None
    return IntervalInfo.from_interval(interval).model_dump()


def register_interval_tools(mcp: ChukMCPServer, context: PitchContext) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance
        context: Pitch context shared by every tool

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    codec = context.intervals

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_parse_interval(interval: str) -> str:
        """
        Parse an interval name.

        Accepts number-first ('3M', '-5P') and quality-first ('M3',
        'P-5') forms. Returns the canonical name plus number, quality,
        size in semitones and lattice coordinates.

        Args:
            interval: Interval name

        Returns:
            JSON string with interval details

        Example:
            pitch_parse_interval(interval="d5")
        """
        try:
            ivl = codec.parse(interval)
            if ivl.empty:
                return _invalid(interval)
            return json.dumps(
                {
                    "status": "success",
                    "interval": _info(ivl),
                    "simplified": codec.simplify(ivl).name,
                }
            )
        except Exception as e:
            logger.exception("Failed to parse interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_parse_interval"] = pitch_parse_interval

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_invert_interval(interval: str) -> str:
        """
        Invert an interval within the octave.

        Octaves and direction are kept: '2M' -> '7m', '9M' -> '14m'.

        Args:
            interval: Interval name

        Returns:
            JSON string with the inverted interval

        Example:
            pitch_invert_interval(interval="4A")
        """
        try:
            ivl = codec.parse(interval)
            if ivl.empty:
                return _invalid(interval)
            return json.dumps(
                {"status": "success", "source": ivl.name, "interval": _info(codec.invert(ivl))}
            )
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_invert_interval"] = pitch_invert_interval

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_interval_from_semitones(semitones: int) -> str:
        """
        Name the most common interval of a given size.

        Args:
            semitones: Signed size in semitones

        Returns:
            JSON string with the interval

        Example:
            pitch_interval_from_semitones(semitones=-13)
        """
        try:
            return json.dumps(
                {"status": "success", "interval": _info(codec.from_semitones(semitones))}
            )
        except Exception as e:
            logger.exception("Failed to name interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_interval_from_semitones"] = pitch_interval_from_semitones

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_add_intervals(a: str, b: str, subtract: bool = False) -> str:
        """
        Add or subtract two intervals.

        Args:
            a: First interval
            b: Second interval
            subtract: Compute a - b instead of a + b

        Returns:
            JSON string with the resulting interval

        Example:
            pitch_add_intervals(a="3m", b="5P")
        """
        try:
            for name in (a, b):
                if codec.parse(name).empty:
                    return _invalid(name)
            result = codec.subtract(a, b) if subtract else codec.add(a, b)
            return json.dumps({"status": "success", "interval": _info(result)})
        except Exception as e:
            logger.exception("Failed to combine intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_add_intervals"] = pitch_add_intervals

    return tools
