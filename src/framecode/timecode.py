"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import sys
from fractions import Fraction

from .converter import check_frame_count, frames_to_tuple, tuple_to_frames
from .errors import TimecodeError
from .helpers import DEFAULTS, FormatSpec, RateSpec, TimecodeDefaults, _Framerate
from .parser import resolve

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is frames,
    then when required it converts the frames to a timecode by using the frame
    rate setting. Instances are immutable, every operation returns a new one.

    Args:
        *args: The position of the Timecode. Either nothing (00:00:00:00), a
            single int showing the total frames, up to four ints (or a tuple
            of them) for the hours, minutes, seconds and frames, a str like
            '01:00:00:00' or '01:00:00;00', or another Timecode.
        fps (Fraction | str | int | float): The frame rate. Fractional rates
            like 29.97 are rounded to the nearest integer for frame counting
            but reported as given.
        dropframe (bool): Use SMPTE drop-frame counting. If skipped, it is
            True for strings using ';' or '.' before the frames.
        delimiter (str): The character between hours, minutes and seconds.
            Defaults to the one of the parsed string.
        frame_delimiter (str): The character before the frames. Defaults to
            the one of the parsed string.
        defaults (TimecodeDefaults): The fallback for any option neither given
            nor inferred from the input.
    """

    __slots__ = ("_total_frames", "_rate", "_format")

    def __init__(
        self,
        *args,
        fps: _Framerate | None = None,
        dropframe: bool | None = None,
        delimiter: str | None = None,
        frame_delimiter: str | None = None,
        defaults: TimecodeDefaults = DEFAULTS,
    ) -> None:
        resolved = resolve(
            args,
            fps=fps,
            dropframe=dropframe,
            delimiter=delimiter,
            frame_delimiter=frame_delimiter,
            defaults=defaults,
        )
        self._init(*resolved)

    def _init(self, total_frames: int, rate: RateSpec, fmt: FormatSpec) -> None:
        object.__setattr__(self, "_total_frames", total_frames)
        object.__setattr__(self, "_rate", rate)
        object.__setattr__(self, "_format", fmt)

    @classmethod
    def _from_parts(cls, total_frames: int, rate: RateSpec, fmt: FormatSpec) -> Self:
        """Create a Timecode from an already resolved frame count and options.

        Raises:
            RangeError: If the frame count is not representable.
        """
        tc = cls.__new__(cls)
        tc._init(check_frame_count(total_frames, rate), rate, fmt)
        return tc

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self.__class__.__name__} instances are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} instances are immutable")

    ####

    @property
    def total_frames(self) -> int:
        """Return the 0-based number of frames since 00:00:00:00."""
        return self._total_frames

    @property
    def rate(self) -> RateSpec:
        """Return the frame rate and drop-frame setting."""
        return self._rate

    @property
    def format(self) -> FormatSpec:
        """Return the delimiters used to render this Timecode."""
        return self._format

    @property
    def fps(self) -> int | float | Fraction:
        """Return the frame rate as it was given, 29.97 stays 29.97."""
        return self._rate.fps

    @property
    def dropframe(self) -> bool:
        """Return True if this Timecode uses drop-frame counting."""
        return self._rate.dropframe

    def is_dropframe(self) -> bool:
        """Return True if this Timecode uses drop-frame counting."""
        return self._rate.dropframe

    @property
    def delimiter(self) -> str:
        """Return the delimiter between hours, minutes and seconds."""
        return self._format.delimiter

    @property
    def frame_delimiter(self) -> str:
        """Return the delimiter before the frames."""
        return self._format.frame_delimiter

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Return the hours, minutes, seconds and frames of this Timecode."""
        return frames_to_tuple(self._total_frames, self._rate)

    @property
    def hours(self) -> int:
        """Return the hours part of the timecode.

        Returns:
            int: The hours part of the timecode.
        """
        hrs, _, _, _ = self.to_tuple()
        return hrs

    @property
    def minutes(self) -> int:
        """Return the minutes part of the timecode.

        Returns:
            int: The minutes part of the timecode.
        """
        _, mins, _, _ = self.to_tuple()
        return mins

    @property
    def seconds(self) -> int:
        """Return the seconds part of the timecode.

        Returns:
            int: The seconds part of the timecode.
        """
        _, _, secs, _ = self.to_tuple()
        return secs

    @property
    def frames(self) -> int:
        """Return the frames part of the timecode.

        Returns:
            int: The frames part of the timecode.
        """
        _, _, _, frs = self.to_tuple()
        return frs

    def to_string(self) -> str:
        """Return the string representation of this Timecode.

        Returns:
            str: Two digits per field, like '01:00:00;00', using the
                delimiters of this Timecode.
        """
        hrs, mins, secs, frs = self.to_tuple()
        d = self._format.delimiter
        fd = self._format.frame_delimiter
        return f"{hrs:02d}{d}{mins:02d}{d}{secs:02d}{fd}{frs:02d}"

    def to_realtime(self) -> Fraction:
        """Return the elapsed wall-clock time in seconds.

        For NTSC rates the real time differs from what the timecode reads:
        01:00:00:00 at 30000/1001 fps NDF is 3603.6 seconds.

        Returns:
            Fraction: The exact number of seconds.
        """
        return Fraction(self._total_frames) / self._rate.exact_fps

    ####

    def to_dropframe(self) -> Self:
        """Return a drop-frame Timecode showing the same hours, minutes, seconds and frames.

        Returns:
            Timecode: This instance if it already is drop-frame.
        """
        if self.dropframe:
            return self
        return self._reinterpret(self._rate.with_dropframe(True), self._format)

    def to_non_dropframe(self) -> Self:
        """Return a non-drop-frame Timecode showing the same hours, minutes, seconds and frames.

        Returns:
            Timecode: This instance if it already is non-drop-frame.
        """
        if not self.dropframe:
            return self
        return self._reinterpret(self._rate.with_dropframe(False), self._format)

    def convert(
        self,
        fps: _Framerate,
        dropframe: bool = False,
        delimiter: str | None = None,
        frame_delimiter: str | None = None,
    ) -> Self:
        """Return a Timecode reading the same fields at another frame rate.

        The frames field is kept as is, so '00:00:01:20' at 30 fps becomes
        '00:00:01:20' at 25 fps, and fields which do not fit the new rate roll
        over: '00:00:01:28' at 30 fps becomes '00:00:02:03' at 25 fps.

        Args:
            fps (_Framerate): The new frame rate.
            dropframe (bool): Drop-frame counting of the result, False unless
                given.
            delimiter (str | None): Inherited from this Timecode if skipped.
            frame_delimiter (str | None): Inherited from this Timecode if
                skipped.

        Returns:
            Timecode: The converted Timecode.
        """
        rate = RateSpec(fps, dropframe)
        fmt = FormatSpec(
            self.delimiter if delimiter is None else delimiter,
            self.frame_delimiter if frame_delimiter is None else frame_delimiter,
        )
        return self._reinterpret(rate, fmt)

    def _reinterpret(self, rate: RateSpec, fmt: FormatSpec) -> Self:
        return self._from_parts(tuple_to_frames(*self.to_tuple(), rate), rate, fmt)

    def next(self) -> Self:
        """Return the Timecode of the next frame."""
        return self + 1

    def back(self) -> Self:
        """Return the Timecode of the previous frame."""
        return self - 1

    ####

    def _operand_frames(self, other: int | Timecode) -> int:
        """Return the frames of the other operand of an arithmetic operation.

        Raises:
            TimecodeError: If the other is not an int or Timecode.
        """
        if isinstance(other, Timecode):
            return other.total_frames
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise TimecodeError(
            f"Type {other.__class__.__name__} not supported for arithmetic."
        )

    def _with_frames(self, total_frames: int) -> Self:
        return self._from_parts(total_frames, self._rate, self._format)

    def __add__(self, other: int | Timecode) -> Self:
        """Return a new Timecode with the given timecode or frames added to this one.

        Args:
            other (int | Timecode): Either and int value or a Timecode in which
                the frames are used for the calculation.

        Raises:
            TimecodeError: If the other is not an int or Timecode.
            RangeError: If the result is beyond 99:99:99:99.

        Returns:
            Timecode: The resultant Timecode instance, with the options of this
                one.
        """
        return self._with_frames(self._total_frames + self._operand_frames(other))

    def __radd__(self, other: int) -> Self:
        return self._with_frames(self._operand_frames(other) + self._total_frames)

    def __sub__(self, other: int | Timecode) -> Self:
        """Return a new Timecode instance with subtracted value.

        Args:
            other (int | Timecode): The number to subtract, either an integer or
                another Timecode in which the number of frames is subtracted.

        Raises:
            TimecodeError: If the other is not an int or Timecode.
            RangeError: If the result is negative.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self._with_frames(self._total_frames - self._operand_frames(other))

    def __rsub__(self, other: int) -> Self:
        return self._with_frames(self._operand_frames(other) - self._total_frames)

    def __mul__(self, other: int | Timecode) -> Self:
        """Return a new Timecode instance with multiplied value.

        Args:
            other (int | Timecode): The multiplier either an integer or another
                Timecode in which the number of frames is used as the multiplier.

        Raises:
            TimecodeError: If the other is not an int or Timecode.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self._with_frames(self._total_frames * self._operand_frames(other))

    def __rmul__(self, other: int) -> Self:
        return self._with_frames(self._operand_frames(other) * self._total_frames)

    def __truediv__(self, other: int | Timecode) -> Self:
        """Return a new Timecode instance with divided value.

        The result is truncated to whole frames.

        Args:
            other (int | Timecode): The denominator either an integer or another
                Timecode in which the number of frames is used as the denominator.

        Raises:
            TimecodeError: If the other is not an int or Timecode.
            ZeroDivisionError: If the denominator is zero frames.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return self._with_frames(int(self._total_frames / self._operand_frames(other)))

    def __rtruediv__(self, other: int) -> Self:
        return self._with_frames(int(self._operand_frames(other) / self._total_frames))

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    ####

    def _compared_frames(self, other: object) -> int | None:
        """Return the frames to compare this Timecode with.

        A str is parsed using the options of this Timecode for anything it
        does not define itself.
        """
        if isinstance(other, Timecode):
            return other.total_frames
        if isinstance(other, str):
            defaults = TimecodeDefaults(
                self.fps, self.dropframe, self.delimiter, self.frame_delimiter
            )
            return Timecode(other, defaults=defaults).total_frames
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        """Override the equality operator.

        Only the number of frames is compared, the frame rate and the format
        are not part of the comparison.

        Args:
            other (int | str | Timecode): Either and int representing the
                number of frames, a str representing a timecode at the frame
                rate of this one, or a Timecode.

        Returns:
            bool: True if the other is equal to this Timecode instance.
        """
        frames = self._compared_frames(other)
        if frames is None:
            return NotImplemented
        return self._total_frames == frames

    def __lt__(self, other: object) -> bool:
        frames = self._compared_frames(other)
        if frames is None:
            return NotImplemented
        return self._total_frames < frames

    def __le__(self, other: object) -> bool:
        frames = self._compared_frames(other)
        if frames is None:
            return NotImplemented
        return self._total_frames <= frames

    def __gt__(self, other: object) -> bool:
        frames = self._compared_frames(other)
        if frames is None:
            return NotImplemented
        return self._total_frames > frames

    def __ge__(self, other: object) -> bool:
        frames = self._compared_frames(other)
        if frames is None:
            return NotImplemented
        return self._total_frames >= frames

    def __hash__(self) -> int:
        return hash(self._total_frames)

    def __int__(self) -> int:
        return self._total_frames

    def __float__(self) -> float:
        """Convert this Timecode instance to a float representation (seconds).

        Returns:
            float: The float representation (seconds).
        """
        return float(self.to_realtime())

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return self.to_string()

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance.

        Returns:
            str: The string representation of this Timecode instance.
        """
        # use the frame count as that is agnostic to drop_frame
        return (
            f"{self.__class__.__name__}({self._total_frames}, "
            f"fps={self.fps!r}, dropframe={self.dropframe})"
        )
####

#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    The options given to the builder are used when the builder instance is
    called to create new Timecodes, as if they were passed to
    :class:`Timecode` explicitly.

    Args:
        kwargs (dict): The pre-configured options, any of ``fps``,
            ``dropframe``, ``delimiter``, ``frame_delimiter`` and ``defaults``.

    Raises:
        TypeError: For an unknown option.
        ConfigError: For an invalid frame rate or delimiter.
    """

    OPTIONS = ("fps", "dropframe", "delimiter", "frame_delimiter", "defaults")

    def __init__(self, **kwargs) -> None:
        unknown = sorted(set(kwargs) - set(self.OPTIONS))
        if unknown:
            raise TypeError(f"Unknown Timecode options: {', '.join(unknown)}")
        # validate the options now rather than at every call
        Timecode(**kwargs)
        self.kwargs = kwargs

    def __call__(self, *args, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        return Timecode(*args, **kwargs)
####
