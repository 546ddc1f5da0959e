"""
Constants for the pitch system.

No magic strings - tool messages live here.
"""


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'. Expected a name like 'C', 'F#' or 'Bb3'."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Expected a name like '3M', '-5P' or 'P4'."
    INVALID_MIDI = "Invalid MIDI number: {midi}. Must be between 0 and 127."
    INVALID_FREQUENCY = "Invalid frequency: {freq}. Must be greater than 0."
    NO_ENHARMONIC = "'{dest}' is not an enharmonic spelling of '{note}'."
    EMPTY_INTERVALS = "At least one interval is required."


# Environment variable naming the project directory that holds pitch.yaml
PROJECT_PATH_ENV = "CHUK_PITCH_PROJECT"
