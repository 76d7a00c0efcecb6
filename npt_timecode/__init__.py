"""
Normal Play Time (RFC 2326) timecodes: parsing, ranges and formatting.
"""

__all__ = [
    "NOW",
    "Time",
    "Range",
    "Timecode",
    "TimecodeError",
    "ConfigError",
]

from .timecode import NOW, Time, Range, Timecode
from .errors import TimecodeError, ConfigError
