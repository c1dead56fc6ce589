"""SMPTE timecodes as immutable frame counts."""

from .converter import frames_to_tuple, max_frames, tuple_to_frames
from .errors import ConfigError, ParseError, RangeError, TimecodeError
from .helpers import (
    DEFAULT_DELIMITER,
    DEFAULT_DROPFRAME,
    DEFAULT_FPS,
    DEFAULT_FRAME_DELIMITER,
    DEFAULTS,
    FormatSpec,
    RateSpec,
    TimecodeDefaults,
)
from .parser import parse_string
from .timecode import Timecode, TimecodeBuilder

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "DEFAULTS",
    "DEFAULT_DELIMITER",
    "DEFAULT_DROPFRAME",
    "DEFAULT_FPS",
    "DEFAULT_FRAME_DELIMITER",
    "FormatSpec",
    "ParseError",
    "RangeError",
    "RateSpec",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeDefaults",
    "TimecodeError",
    "frames_to_tuple",
    "max_frames",
    "parse_string",
    "tuple_to_frames",
]
