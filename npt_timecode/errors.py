"""Custom exceptions for the configuration and CLI layers.

The NPT entities themselves never raise for bad input; they degrade to an
invalid value instead.
"""


class TimecodeError(ValueError):
    """Raised when a timecode cannot be used where a valid one is required."""


class ConfigError(TimecodeError):
    """Raised when loading the YAML configuration file fails."""
