"""Turn the values a Timecode is created from into a frame count and options."""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from .converter import check_frame_count, tuple_to_frames
from .errors import ParseError, TimecodeError
from .helpers import DEFAULTS, FormatSpec, RateSpec, TimecodeDefaults

logger = logging.getLogger(__name__)

TIMECODE_PATTERN = re.compile(
    r"(?P<hours>[0-9]{1,2})(?P<delimiter>[^0-9A-Za-z])"
    r"(?P<minutes>[0-9]{1,2})(?P=delimiter)"
    r"(?P<seconds>[0-9]{1,2})(?P<frame_delimiter>[^0-9A-Za-z])"
    r"(?P<frames>[0-9]{1,2})"
)

DROPFRAME_DELIMITERS = (";", ".")


class ParsedString(NamedTuple):
    """The fields and delimiters found in a timecode string."""

    hours: int
    minutes: int
    seconds: int
    frames: int
    delimiter: str
    frame_delimiter: str

    @property
    def dropframe(self) -> bool:
        """Return True if the frame delimiter denotes a drop-frame timecode."""
        return self.frame_delimiter in DROPFRAME_DELIMITERS


class Resolved(NamedTuple):
    total_frames: int
    rate: RateSpec
    format: FormatSpec


def parse_string(timecode: str) -> ParsedString:
    """Parse the given timecode string.

    '00:00:00:00' and '00-00-00-00' result in a NDF timecode, where
    '00:00:00;00' and '00:00:00.00' result in a DF one.

    Args:
        timecode (str): A string like ``HH:MM:SS:FF``. Any single
            non-alphanumeric character can be used as the delimiter, as long
            as it is the same between hours, minutes and seconds.

    Raises:
        ParseError: If the string is not made of four 1-2 digit numbers.

    Returns:
        ParsedString: The fields and the delimiters of the timecode.
    """
    match = TIMECODE_PATTERN.fullmatch(timecode.strip())
    if match is None:
        raise ParseError(f"Invalid timecode string: {timecode!r}")
    # the pattern lets non-ASCII letters and digits through
    if match["delimiter"].isalnum() or match["frame_delimiter"].isalnum():
        raise ParseError(f"Invalid timecode delimiter in: {timecode!r}")

    return ParsedString(
        int(match["hours"]),
        int(match["minutes"]),
        int(match["seconds"]),
        int(match["frames"]),
        match["delimiter"],
        match["frame_delimiter"],
    )


def _pick(*values):
    """Return the first value which is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def resolve(
    args: tuple,
    fps=None,
    dropframe: bool | None = None,
    delimiter: str | None = None,
    frame_delimiter: str | None = None,
    defaults: TimecodeDefaults = DEFAULTS,
) -> Resolved:
    """Resolve the positional value and options of a Timecode.

    Options are taken in this order of priority:
        1. The given keyword arguments.
        2. Values inferred from the input, the delimiters of a string or the
           options of a Timecode being copied.
        3. The ``defaults``.

    Args:
        args (tuple): Nothing, a frame count, up to four (h, m, s, f) integers,
            a single tuple of those, a timecode string or a Timecode.
        fps: The frame rate.
        dropframe (bool | None): Drop-frame counting.
        delimiter (str | None): The delimiter between hours, minutes and
            seconds.
        frame_delimiter (str | None): The delimiter before the frames.
        defaults (TimecodeDefaults): Fallback options.

    Raises:
        RangeError: If a field or the frame count is out of range.
        ParseError: If a string can not be parsed.
        ConfigError: If the frame rate or a delimiter is invalid.
        TimecodeError: If the value is of an unsupported type.

    Returns:
        Resolved: The frame count, rate and format of the new Timecode.
    """
    # late import, Timecode is built on top of this module
    from .timecode import Timecode

    inferred: dict = {}
    fields: tuple[int, ...] | None = None
    total_frames: int | None = None

    # a single tuple is always (h, m, s, f) fields, even with one item
    as_fields = len(args) == 1 and isinstance(args[0], (tuple, list))
    if as_fields:
        args = tuple(args[0])

    if not args:
        fields = (0, 0, 0, 0)
    elif len(args) > 4:
        raise TimecodeError(
            f"A Timecode takes at most 4 fields (h, m, s, f), got {len(args)}"
        )
    elif len(args) == 1 and not as_fields:
        value = args[0]
        if isinstance(value, Timecode):
            total_frames = value.total_frames
            inferred = {
                "fps": value.fps,
                "dropframe": value.dropframe,
                "delimiter": value.delimiter,
                "frame_delimiter": value.frame_delimiter,
            }
        elif isinstance(value, str):
            parsed = parse_string(value)
            fields = parsed[:4]
            inferred = {
                "delimiter": parsed.delimiter,
                "frame_delimiter": parsed.frame_delimiter,
            }
            if parsed.dropframe:
                inferred["dropframe"] = True
            logger.debug(
                "Parsed %r, frame delimiter %r infers dropframe=%s",
                value,
                parsed.frame_delimiter,
                parsed.dropframe,
            )
        elif isinstance(value, int) and not isinstance(value, bool):
            total_frames = value
        else:
            raise TimecodeError(
                f"Type {value.__class__.__name__} not supported for a Timecode."
            )
    else:
        for value in args:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TimecodeError(
                    f"Timecode fields should be integers, not "
                    f"{value.__class__.__name__}"
                )
        fields = tuple(args) + (0,) * (4 - len(args))

    rate = RateSpec(
        _pick(fps, inferred.get("fps"), defaults.fps),
        _pick(dropframe, inferred.get("dropframe"), defaults.dropframe),
    )
    fmt = FormatSpec(
        _pick(delimiter, inferred.get("delimiter"), defaults.delimiter),
        _pick(
            frame_delimiter,
            inferred.get("frame_delimiter"),
            defaults.frame_delimiter,
        ),
    )

    if fields is not None:
        total_frames = tuple_to_frames(*fields, rate)
    else:
        check_frame_count(total_frames, rate)

    return Resolved(total_frames, rate, fmt)
