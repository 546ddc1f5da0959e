"""
MCP tool implementations.

Tools are organized by domain:
- notes - Note parsing and spelling
- intervals - Interval parsing and arithmetic
- distance - Transposition, distance and degree lookup
"""

from chuk_mcp_pitch.tools.distance import register_distance_tools
from chuk_mcp_pitch.tools.intervals import register_interval_tools
from chuk_mcp_pitch.tools.notes import register_note_tools

__all__ = [
    "register_distance_tools",
    "register_interval_tools",
    "register_note_tools",
]
