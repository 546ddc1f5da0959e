"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_pitch.context import PitchContext, set_default_context
from chuk_mcp_pitch.models import Accidentals, PitchSettings


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def context() -> PitchContext:
    """Fresh context with default settings."""
    return PitchContext.from_settings()


@pytest.fixture
def sharps_context() -> PitchContext:
    """Context that spells derived notes with sharps."""
    return PitchContext.from_settings(PitchSettings(accidentals=Accidentals.SHARPS))


@pytest.fixture(autouse=True)
def reset_default_context():
    """Keep the process-wide context from leaking between tests."""
    set_default_context(None)
    yield
    set_default_context(None)
