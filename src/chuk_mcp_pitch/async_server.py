#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server provides MCP tools for spelling-aware pitch arithmetic:
notes and intervals are points on a fifths/octave lattice, so
transposition keeps enharmonic spelling ('D' + '3M' is 'F#', never 'Gb').

The server provides tools for:
- Parsing note and interval names
- Spelling MIDI numbers and frequencies as notes
- Enharmonic respelling and simplification
- Interval inversion and arithmetic
- Transposition, distance and scale-degree lookup

Tuning and spelling preferences are read from `pitch.yaml` in the
project directory when present: the working directory, or the
directory named by CHUK_PITCH_PROJECT.
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.constants import PROJECT_PATH_ENV
from chuk_mcp_pitch.context import PitchContext, set_default_context
from chuk_mcp_pitch.settings import SettingsLoader
from chuk_mcp_pitch.tools import (
    register_distance_tools,
    register_interval_tools,
    register_note_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-pitch")

# Paths - settings live in the project directory (cwd unless overridden)
BASE_PATH = Path(os.environ.get(PROJECT_PATH_ENV) or Path.cwd())

# Create the session context
settings_loader = SettingsLoader(BASE_PATH)
settings = settings_loader.load()
context = PitchContext.from_settings(settings)
set_default_context(context)

# Register all tools
note_tools = register_note_tools(mcp, context)
interval_tools = register_interval_tools(mcp, context)
distance_tools = register_distance_tools(mcp, context)

# Export tool functions for direct access
pitch_parse_note = note_tools["pitch_parse_note"]
pitch_note_from_midi = note_tools["pitch_note_from_midi"]
pitch_note_from_freq = note_tools["pitch_note_from_freq"]
pitch_enharmonic = note_tools["pitch_enharmonic"]
pitch_simplify_note = note_tools["pitch_simplify_note"]

pitch_parse_interval = interval_tools["pitch_parse_interval"]
pitch_invert_interval = interval_tools["pitch_invert_interval"]
pitch_interval_from_semitones = interval_tools["pitch_interval_from_semitones"]
pitch_add_intervals = interval_tools["pitch_add_intervals"]

pitch_transpose = distance_tools["pitch_transpose"]
pitch_distance = distance_tools["pitch_distance"]
pitch_tonic_degrees = distance_tools["pitch_tonic_degrees"]

logger.info("CHUK Pitch MCP Server initialized")
logger.info(f"  Settings file: {settings_loader.settings_file}")
logger.info(f"  Reference frequency: {settings.reference_frequency} Hz")
logger.info(f"  Accidentals: {settings.accidentals.value}")
