"""
Tests for settings loading and context construction.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_pitch.context import PitchContext
from chuk_mcp_pitch.models import Accidentals, PitchSettings
from chuk_mcp_pitch.settings import SETTINGS_FILENAME, SettingsLoader


class TestPitchSettings:
    """Tests for the settings model."""

    def test_defaults(self) -> None:
        settings = PitchSettings()
        assert settings.reference_frequency == 440.0
        assert settings.accidentals == Accidentals.FLATS
        assert settings.cache_enabled
        assert not settings.sharps

    def test_sharps(self) -> None:
        assert PitchSettings(accidentals="sharps").sharps

    def test_reference_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PitchSettings(reference_frequency=0)

    def test_frozen(self) -> None:
        settings = PitchSettings()
        with pytest.raises(ValidationError):
            settings.reference_frequency = 442.0


class TestSettingsLoader:
    """Tests for SettingsLoader."""

    def test_missing_file(self, temp_dir: Path) -> None:
        """No pitch.yaml means defaults."""
        assert SettingsLoader(temp_dir).load() == PitchSettings()

    def test_no_project_path(self) -> None:
        loader = SettingsLoader()
        assert loader.settings_file is None
        assert loader.load() == PitchSettings()

    def test_load_file(self, temp_dir: Path) -> None:
        (temp_dir / SETTINGS_FILENAME).write_text(
            "tuning:\n  reference: 442\nspelling:\n  accidentals: sharps\ncache: false\n"
        )
        settings = SettingsLoader(temp_dir).load()
        assert settings.reference_frequency == 442.0
        assert settings.accidentals == Accidentals.SHARPS
        assert not settings.cache_enabled

    def test_partial_file(self, temp_dir: Path) -> None:
        (temp_dir / SETTINGS_FILENAME).write_text("tuning:\n  reference: 415\n")
        settings = SettingsLoader(temp_dir).load()
        assert settings.reference_frequency == 415.0
        assert settings.accidentals == Accidentals.FLATS

    def test_empty_file(self, temp_dir: Path) -> None:
        (temp_dir / SETTINGS_FILENAME).write_text("")
        assert SettingsLoader(temp_dir).load() == PitchSettings()

    @pytest.mark.parametrize(
        "content",
        [
            "tuning: [unclosed\n",
            "spelling:\n  accidentals: naturals\n",
            "tuning:\n  reference: -1\n",
            "tuning: 442\n",
            "- just\n- a list\n",
        ],
    )
    def test_invalid_file_falls_back(self, temp_dir: Path, content: str) -> None:
        (temp_dir / SETTINGS_FILENAME).write_text(content)
        assert SettingsLoader(temp_dir).load() == PitchSettings()

    def test_save_and_reload(self, temp_dir: Path) -> None:
        settings = PitchSettings(reference_frequency=432.0, accidentals=Accidentals.SHARPS)
        path = SettingsLoader(temp_dir).save(settings)
        assert path == temp_dir / SETTINGS_FILENAME
        assert SettingsLoader(temp_dir).load() == settings

    def test_save_without_project_path(self) -> None:
        with pytest.raises(ValueError):
            SettingsLoader().save(PitchSettings())

    def test_cache(self, temp_dir: Path) -> None:
        loader = SettingsLoader(temp_dir)
        first = loader.load()
        (temp_dir / SETTINGS_FILENAME).write_text("tuning:\n  reference: 442\n")
        assert loader.load() is first
        loader.clear_cache()
        assert loader.load().reference_frequency == 442.0


class TestPitchContext:
    """Tests for PitchContext construction."""

    def test_defaults(self) -> None:
        ctx = PitchContext.from_settings()
        assert ctx.settings == PitchSettings()
        assert ctx.notes.cache is not None
        assert ctx.intervals.cache is not None
        assert ctx.distance.notes is ctx.notes

    def test_cache_disabled(self) -> None:
        ctx = PitchContext.from_settings(PitchSettings(cache_enabled=False))
        assert ctx.notes.cache is None
        assert ctx.intervals.cache is None
        assert ctx.distance.transpose("D", "3M") == "F#"

    def test_contexts_do_not_share_caches(self) -> None:
        a = PitchContext.from_settings()
        b = PitchContext.from_settings()
        a.notes.parse("C4")
        assert "C4" in a.notes.cache
        assert "C4" not in b.notes.cache

    def test_reference_frequency(self) -> None:
        ctx = PitchContext.from_settings(PitchSettings(reference_frequency=442.0))
        assert ctx.notes.reference_frequency == 442.0
