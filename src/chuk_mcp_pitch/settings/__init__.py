"""
Settings - session tuning and spelling preferences loaded from YAML.
"""

from chuk_mcp_pitch.settings.loader import SETTINGS_FILENAME, SettingsLoader

__all__ = [
    "SETTINGS_FILENAME",
    "SettingsLoader",
]
