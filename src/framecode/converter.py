"""Conversion between timecode fields and absolute frame counts.

A frame count is the 0-based number of frames elapsed since 00:00:00:00. In
drop-frame counting the first frame numbers of every minute, except every
tenth minute, do not exist: at 29.97 fps the timecode goes from 00:00:59;29
straight to 00:01:00;02.
"""

from __future__ import annotations

from .errors import RangeError
from .helpers import RateSpec

MAX_FIELD = 99


def drop_frames_per_minute(rate: RateSpec) -> int:
    """Return the number of frame numbers skipped at each dropping minute.

    Args:
        rate (RateSpec): The rate to get the value for.

    Returns:
        int: 0 for non-drop-frame rates.
    """
    return rate.drops_per_minute


def _count(hours: int, minutes: int, seconds: int, frames: int, rate: RateSpec) -> int:
    ifps = rate.int_fps
    total_minutes = (60 * hours) + minutes
    frame_number = (total_minutes * 60 + seconds) * ifps + frames
    dropped = drop_frames_per_minute(rate) * (total_minutes - (total_minutes // 10))
    return frame_number - dropped


def _validate_fields(hours: int, minutes: int, seconds: int, frames: int) -> None:
    for name, value in (
        ("hours", hours),
        ("minutes", minutes),
        ("seconds", seconds),
        ("frames", frames),
    ):
        if not isinstance(value, int) or isinstance(value, bool):
            raise RangeError(
                f"{name} should be an integer, not a {value.__class__.__name__}"
            )
        if not 0 <= value <= MAX_FIELD:
            raise RangeError(
                f"{name} should be between 0 and {MAX_FIELD}, not {value}"
            )


def tuple_to_frames(
    hours: int, minutes: int, seconds: int, frames: int, rate: RateSpec
) -> int:
    """Convert timecode fields to a frame count.

    Fields do not need to be normalized, ``00:00:00:45`` at 30 fps is the same
    frame as ``00:00:01:15``, but each of them has to be within 0-99.

    Args:
        hours (int): The hours part of the timecode.
        minutes (int): The minutes part of the timecode.
        seconds (int): The seconds part of the timecode.
        frames (int): The frames part of the timecode.
        rate (RateSpec): The frame rate and drop-frame setting.

    Raises:
        RangeError: If any of the fields is outside 0-99.

    Returns:
        int: The 0-based frame count.
    """
    _validate_fields(hours, minutes, seconds, frames)
    return _count(hours, minutes, seconds, frames, rate)


def max_frames(rate: RateSpec) -> int:
    """Return the frame count of ``99:99:99:99``, the largest representable one."""
    return _count(MAX_FIELD, MAX_FIELD, MAX_FIELD, MAX_FIELD, rate)


def _check_bounds(frame_count: int, rate: RateSpec) -> None:
    if frame_count < 0:
        raise RangeError(f"Frame count can not be negative, got {frame_count}")
    if frame_count > max_frames(rate):
        raise RangeError(
            f"Frame count {frame_count} is beyond 99:99:99:99 at {rate.fps} fps"
        )


def check_frame_count(frame_count: int, rate: RateSpec) -> int:
    """Return the frame count if it is representable at the given rate.

    Raises:
        RangeError: If it is negative, beyond ``99:99:99:99`` or, above 99 fps,
            lands on a frames field wider than two digits.
    """
    frames_to_tuple(frame_count, rate)
    return frame_count


def _check_frames_field(
    frame_count: int, rate: RateSpec, fields: tuple[int, int, int, int]
) -> tuple[int, int, int, int]:
    if fields[3] > MAX_FIELD:
        raise RangeError(
            f"Frame count {frame_count} lands on frame {fields[3]} at {rate.fps} "
            f"fps, the frames field only goes up to {MAX_FIELD}"
        )
    return fields


def frames_to_tuple(frame_count: int, rate: RateSpec) -> tuple[int, int, int, int]:
    """Convert a frame count back to timecode fields.

    Counts beyond 99:59:59 of canonical time keep the hours at 99 and carry
    the rest into the minutes, seconds and frames fields, so that every count
    up to :func:`max_frames` still renders with two digit fields.

    Args:
        frame_count (int): The 0-based frame count.
        rate (RateSpec): The frame rate and drop-frame setting.

    Raises:
        RangeError: If the frame count is negative, beyond ``99:99:99:99`` or
            its frames field is above 99, which happens above 99 fps.

    Returns:
        tuple: A tuple containing the hours, minutes, seconds and frames.
    """
    _check_bounds(frame_count, rate)

    ifps = rate.int_fps
    drop_frames = drop_frames_per_minute(rate)
    frame_number = frame_count

    if drop_frames:
        frames_per_10_minutes = ifps * 60 * 10 - drop_frames * 9
        frames_per_minute = ifps * 60 - drop_frames

        d = frame_number // frames_per_10_minutes
        m = frame_number % frames_per_10_minutes
        frame_number += drop_frames * 9 * d
        if m > drop_frames:
            frame_number += drop_frames * ((m - drop_frames) // frames_per_minute)

    frs = frame_number % ifps
    secs = (frame_number // ifps) % 60
    total_minutes = (frame_number // ifps) // 60
    hrs, mins = divmod(total_minutes, 60)

    if hrs <= MAX_FIELD:
        return _check_frames_field(frame_count, rate, (hrs, mins, secs, frs))

    # saturate the hours and push the rest down the fields
    hrs = MAX_FIELD
    mins = min(total_minutes - MAX_FIELD * 60, MAX_FIELD)
    rest = frame_count - _count(hrs, mins, 0, 0, rate)
    secs = min(rest // ifps, MAX_FIELD)
    frs = rest - secs * ifps
    return _check_frames_field(frame_count, rate, (hrs, mins, secs, frs))
