"""Exceptions raised by the framecode package."""


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class RangeError(TimecodeError, ValueError):
    """Raised when a timecode field or frame count is out of the representable domain."""


class ParseError(TimecodeError, ValueError):
    """Raised when a timecode string can not be decomposed into four fields."""


class ConfigError(TimecodeError, ValueError):
    """Raised for an invalid frame rate or delimiter setting."""
