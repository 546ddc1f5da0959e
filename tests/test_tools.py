"""
Tests for MCP tools.

Tests the MCP tool implementations for notes, intervals and
transposition.
"""

import json

import pytest

from chuk_mcp_pitch.context import PitchContext
from chuk_mcp_pitch.models import Accidentals, PitchSettings
from chuk_mcp_pitch.tools import (
    register_distance_tools,
    register_interval_tools,
    register_note_tools,
)


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def note_tools(context: PitchContext) -> dict:
    return register_note_tools(MockMCPServer("test"), context)


@pytest.fixture
def interval_tools(context: PitchContext) -> dict:
    return register_interval_tools(MockMCPServer("test"), context)


@pytest.fixture
def distance_tools(context: PitchContext) -> dict:
    return register_distance_tools(MockMCPServer("test"), context)


class TestRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(self, context: PitchContext) -> None:
        """Every tool is both registered and returned."""
        mcp = MockMCPServer("test")
        tools = {
            **register_note_tools(mcp, context),
            **register_interval_tools(mcp, context),
            **register_distance_tools(mcp, context),
        }
        assert set(tools) == set(mcp.tools)
        assert set(tools) == {
            "pitch_parse_note",
            "pitch_note_from_midi",
            "pitch_note_from_freq",
            "pitch_enharmonic",
            "pitch_simplify_note",
            "pitch_parse_interval",
            "pitch_invert_interval",
            "pitch_interval_from_semitones",
            "pitch_add_intervals",
            "pitch_transpose",
            "pitch_distance",
            "pitch_tonic_degrees",
        }


class TestNoteTools:
    """Tests for note tools."""

    @pytest.mark.asyncio
    async def test_parse_note(self, note_tools: dict):
        """Parse note tool."""
        data = json.loads(await note_tools["pitch_parse_note"](note="bb3"))
        assert data["status"] == "success"
        assert data["note"]["name"] == "Bb3"
        assert data["note"]["midi"] == 58
        assert data["note"]["coord"] == [-2, 5]

    @pytest.mark.asyncio
    async def test_parse_pitch_class(self, note_tools: dict):
        """Pitch classes have no height or frequency."""
        data = json.loads(await note_tools["pitch_parse_note"](note="F#"))
        assert data["status"] == "success"
        assert data["note"]["oct"] is None
        assert data["note"]["height"] is None
        assert data["note"]["freq"] is None

    @pytest.mark.asyncio
    async def test_parse_invalid_note(self, note_tools: dict):
        """Invalid names report an error."""
        data = json.loads(await note_tools["pitch_parse_note"](note="nothing"))
        assert data["status"] == "error"
        assert "nothing" in data["message"]

    @pytest.mark.asyncio
    async def test_note_from_midi(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_note_from_midi"](midi=61))
        assert data["note"]["name"] == "Db4"
        data = json.loads(await note_tools["pitch_note_from_midi"](midi=61, sharps=True))
        assert data["note"]["name"] == "C#4"

    @pytest.mark.asyncio
    async def test_note_from_midi_out_of_range(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_note_from_midi"](midi=128))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_note_from_midi_uses_settings(self):
        """Spelling preference comes from the session settings."""
        ctx = PitchContext.from_settings(PitchSettings(accidentals=Accidentals.SHARPS))
        tools = register_note_tools(MockMCPServer("test"), ctx)
        data = json.loads(await tools["pitch_note_from_midi"](midi=70))
        assert data["note"]["name"] == "A#4"

    @pytest.mark.asyncio
    async def test_note_from_freq(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_note_from_freq"](freq=470))
        assert data["status"] == "success"
        assert data["note"]["name"] == "Bb4"
        assert data["midi"] == 70.14

    @pytest.mark.asyncio
    async def test_note_from_invalid_freq(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_note_from_freq"](freq=-1))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_enharmonic(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_enharmonic"](note="C2", dest="B#"))
        assert data["status"] == "success"
        assert data["note"] == "B#1"

        data = json.loads(await note_tools["pitch_enharmonic"](note="C#4"))
        assert data["note"] == "Db4"

    @pytest.mark.asyncio
    async def test_enharmonic_mismatch(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_enharmonic"](note="F2", dest="Eb"))
        assert data["status"] == "error"

        data = json.loads(await note_tools["pitch_enharmonic"](note="nothing"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_simplify_note(self, note_tools: dict):
        data = json.loads(await note_tools["pitch_simplify_note"](note="F##4"))
        assert data["note"] == "G4"

        data = json.loads(await note_tools["pitch_simplify_note"](note="nothing"))
        assert data["status"] == "error"


class TestIntervalTools:
    """Tests for interval tools."""

    @pytest.mark.asyncio
    async def test_parse_interval(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_parse_interval"](interval="d5"))
        assert data["status"] == "success"
        assert data["interval"]["name"] == "5d"
        assert data["interval"]["semitones"] == 6
        assert data["interval"]["type"] == "perfectable"

    @pytest.mark.asyncio
    async def test_parse_compound_interval(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_parse_interval"](interval="-9m"))
        assert data["interval"]["dir"] == -1
        assert data["simplified"] == "-2m"

    @pytest.mark.asyncio
    async def test_parse_invalid_interval(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_parse_interval"](interval="2P"))
        assert data["status"] == "error"
        assert "2P" in data["message"]

    @pytest.mark.asyncio
    async def test_invert_interval(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_invert_interval"](interval="4A"))
        assert data["source"] == "4A"
        assert data["interval"]["name"] == "5d"

    @pytest.mark.asyncio
    async def test_interval_from_semitones(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_interval_from_semitones"](semitones=-13))
        assert data["interval"]["name"] == "-9m"

    @pytest.mark.asyncio
    async def test_add_intervals(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_add_intervals"](a="3m", b="5P"))
        assert data["interval"]["name"] == "7m"

        data = json.loads(
            await interval_tools["pitch_add_intervals"](a="5P", b="3M", subtract=True)
        )
        assert data["interval"]["name"] == "3m"

    @pytest.mark.asyncio
    async def test_add_invalid_intervals(self, interval_tools: dict):
        data = json.loads(await interval_tools["pitch_add_intervals"](a="3m", b="nothing"))
        assert data["status"] == "error"


class TestDistanceTools:
    """Tests for transposition and distance tools."""

    @pytest.mark.asyncio
    async def test_transpose(self, distance_tools: dict):
        data = json.loads(await distance_tools["pitch_transpose"](note="C4", interval="6m"))
        assert data["status"] == "success"
        assert data["result"] == "Ab4"

    @pytest.mark.asyncio
    async def test_transpose_invalid(self, distance_tools: dict):
        data = json.loads(await distance_tools["pitch_transpose"](note="C4", interval="x"))
        assert data["status"] == "error"
        data = json.loads(await distance_tools["pitch_transpose"](note="x", interval="3M"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_distance(self, distance_tools: dict):
        data = json.loads(await distance_tools["pitch_distance"](from_note="C3", to_note="E2"))
        assert data["interval"] == "-6m"
        assert data["semitones"] == -8

    @pytest.mark.asyncio
    async def test_distance_equal_heights(self, distance_tools: dict):
        data = json.loads(await distance_tools["pitch_distance"](from_note="Db4", to_note="C#4"))
        assert data["interval"] == "-2d"
        assert data["semitones"] == 0

    @pytest.mark.asyncio
    async def test_tonic_degrees(self, distance_tools: dict):
        data = json.loads(
            await distance_tools["pitch_tonic_degrees"](
                tonic="C4", intervals=["1P", "3M", "5P"], degrees=[-1, 0, 3]
            )
        )
        assert data["status"] == "success"
        assert data["notes"] == ["G3", "C4", "C5"]
        assert data["degrees"][0] == {"degree": -1, "note": "G3"}

    @pytest.mark.asyncio
    async def test_tonic_degrees_default(self, distance_tools: dict):
        data = json.loads(
            await distance_tools["pitch_tonic_degrees"](tonic="D", intervals=["1P", "3M", "5P"])
        )
        assert data["notes"] == ["D", "F#", "A"]

    @pytest.mark.asyncio
    async def test_tonic_degrees_errors(self, distance_tools: dict):
        data = json.loads(await distance_tools["pitch_tonic_degrees"](tonic="C4", intervals=[]))
        assert data["status"] == "error"
        data = json.loads(
            await distance_tools["pitch_tonic_degrees"](tonic="C4", intervals=["1P", "2P"])
        )
        assert data["status"] == "error"
