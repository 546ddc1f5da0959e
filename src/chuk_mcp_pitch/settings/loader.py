"""
Settings loader - reads session settings from YAML.

Settings can come from:
1. Built-in defaults (PitchSettings field defaults)
2. Project settings (`pitch.yaml` in the project directory)

Example pitch.yaml:

    tuning:
      reference: 442
    spelling:
      accidentals: sharps
    cache: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_pitch.models.settings import Accidentals, PitchSettings

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "pitch.yaml"


class SettingsLoader:
    """
    Loads PitchSettings for a project.

    A missing file means defaults. A malformed file is logged and also
    falls back to defaults.
    """

    def __init__(self, project_path: Path | None = None):
        """
        Initialize the settings loader.

        Args:
            project_path: Directory that may hold a pitch.yaml
        """
        self.project_path = project_path
        self._cache: PitchSettings | None = None

    @property
    def settings_file(self) -> Path | None:
        if self.project_path is None:
            return None
        return self.project_path / SETTINGS_FILENAME

    def load(self) -> PitchSettings:
        """
        Get the project settings.

        Returns:
            Settings from pitch.yaml, or defaults when absent or invalid
        """
        if self._cache is not None:
            return self._cache

        settings: PitchSettings | None = None
        path = self.settings_file
        if path is not None and path.exists():
            settings = self._load_settings_file(path)

        self._cache = settings or PitchSettings()
        return self._cache

    def save(self, settings: PitchSettings) -> Path:
        """
        Write settings to the project's pitch.yaml.

        Args:
            settings: Settings to store

        Returns:
            Path of the written file
        """
        path = self.settings_file
        if path is None:
            raise ValueError("No project path configured")

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self._dump_settings(settings), f, sort_keys=False)

        self._cache = settings
        return path

    def _load_settings_file(self, path: Path) -> PitchSettings | None:
        """Load settings from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            return self._parse_settings(data)
        except (OSError, yaml.YAMLError, ValueError, TypeError, AttributeError):
            logger.warning("Ignoring invalid settings file %s", path, exc_info=True)
            return None

    def _parse_settings(self, data: dict[str, Any]) -> PitchSettings:
        """Parse settings from YAML data."""
        tuning = data.get("tuning", {})
        spelling = data.get("spelling", {})

        return PitchSettings(
            reference_frequency=tuning.get("reference", 440.0),
            accidentals=Accidentals(spelling.get("accidentals", "flats")),
            cache_enabled=data.get("cache", True),
        )

    def _dump_settings(self, settings: PitchSettings) -> dict[str, Any]:
        """Convert settings to the YAML layout."""
        return {
            "tuning": {"reference": settings.reference_frequency},
            "spelling": {"accidentals": settings.accidentals.value},
            "cache": settings.cache_enabled,
        }

    def clear_cache(self) -> None:
        """Forget loaded settings so the next load re-reads the file."""
        self._cache = None
