"""
Notation helpers - name-based functions over a PitchContext.

- notes: parse, spell, transpose and sort note names
- intervals: parse, simplify, invert and combine interval names
"""

from chuk_mcp_pitch.notation import intervals, notes

__all__ = [
    "intervals",
    "notes",
]
