"""Rate, format and default settings for Timecode handling."""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
import sys
from fractions import Fraction
from typing import NewType

from .errors import ConfigError

if sys.version_info >= (3, 11):
    _frate_type = Fraction | str | float | tuple[int, int]
else:
    from typing import Union
    _frate_type = Union[Fraction, str, float, tuple[int, int]]

_Framerate = NewType("_Framerate", _frate_type)

logger = logging.getLogger(__name__)


def _round_half_up(value) -> int:
    """Round to the nearest integer, halves going up: 24.5 gives 25."""
    return math.floor(value + Fraction(1, 2))


def _normalize_fps(fps: _Framerate) -> int | float | Fraction:
    """Validate the given frame rate and return the value to keep.

    Numbers are kept as given so the original (possibly fractional) value can
    be reported back. Strings and (numerator, denominator) pairs are converted
    to a Fraction.

    Raises:
        ConfigError: If the value is not a number or is not a positive rate.
    """
    if isinstance(fps, bool):
        raise ConfigError(f"Invalid framerate: {fps!r}")

    if isinstance(fps, str):
        try:
            fps = Fraction(fps.strip())
        except (ValueError, ZeroDivisionError) as e:
            raise ConfigError(f"Invalid framerate: {fps!r}") from e
    elif isinstance(fps, (tuple, list)):
        try:
            fps = Fraction(*map(int, fps))
        except (TypeError, ValueError, ZeroDivisionError) as e:
            raise ConfigError(f"Invalid framerate: {fps!r}") from e
    elif not isinstance(fps, numbers.Real):
        raise ConfigError(
            f"Invalid framerate type: {fps.__class__.__name__}"
        )

    if isinstance(fps, float) and not math.isfinite(fps):
        raise ConfigError(f"Invalid framerate: {fps!r}")

    if fps <= 0:
        raise ConfigError(f"Invalid framerate (zero or negative): {fps}")

    if _round_half_up(fps) == 0:
        raise ConfigError(
            f"Invalid framerate: {fps} rounds to zero frames per second"
        )
    return fps


@dataclasses.dataclass(frozen=True)
class RateSpec:
    """A validated frame rate and drop-frame pair.

    The integer part of all frame count arithmetic uses :attr:`int_fps`, the
    frame rate rounded to the nearest whole number (29.97 -> 30,
    23.976 -> 24, halves round up so 24.5 -> 25), while :attr:`fps` keeps the
    value that was given.

    Drop-frame counting only applies to rates rounding to a multiple of 30.
    For any other rate the flag is kept but no frame numbers are skipped.
    """

    fps: int | float | Fraction
    dropframe: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "fps", _normalize_fps(self.fps))
        object.__setattr__(self, "dropframe", bool(self.dropframe))
        if self.dropframe and self.int_fps % 30:
            logger.warning(
                "Drop-frame requested at %s fps, only rates rounding to a "
                "multiple of 30 skip frame numbers; counting as non-drop-frame",
                self.fps,
            )

    @property
    def int_fps(self) -> int:
        """Return the frame rate rounded to the nearest integer."""
        return _round_half_up(self.fps)

    @property
    def exact_fps(self) -> Fraction:
        """Return the frame rate as a Fraction.

        Floats are turned into the closest fraction with a denominator up to
        1001, so 29.97 gives 2997/100 and not its binary approximation.
        """
        if isinstance(self.fps, float):
            return Fraction(self.fps).limit_denominator(1001)
        return Fraction(self.fps)

    @property
    def drops_per_minute(self) -> int:
        """Return how many frame numbers are skipped at each dropping minute.

        Returns:
            int: 2 at 30 fps, 4 at 60 fps and so on, 0 if drop-frame counting
                does not apply.
        """
        if not self.dropframe or self.int_fps % 30:
            return 0
        return self.int_fps // 15

    def with_dropframe(self, dropframe: bool) -> RateSpec:
        return RateSpec(self.fps, dropframe)


def _validate_delimiter(name: str, value: str) -> str:
    if not isinstance(value, str) or len(value) != 1 or value.isalnum():
        raise ConfigError(
            f"{name} should be a single non-alphanumeric character, not {value!r}"
        )
    return value


@dataclasses.dataclass(frozen=True)
class FormatSpec:
    """Delimiters used to render a Timecode as a string."""

    delimiter: str = ":"
    frame_delimiter: str = ":"

    def __post_init__(self) -> None:
        _validate_delimiter("delimiter", self.delimiter)
        _validate_delimiter("frame_delimiter", self.frame_delimiter)


@dataclasses.dataclass(frozen=True)
class TimecodeDefaults:
    """Fallback options used for anything a Timecode is not given.

    An instance is read-only. Use :meth:`replace` to derive different defaults
    and pass them to :class:`framecode.Timecode` or
    :class:`framecode.TimecodeBuilder`.
    """

    fps: _Framerate = 29.97
    dropframe: bool = False
    delimiter: str = ":"
    frame_delimiter: str = ":"

    def __post_init__(self) -> None:
        # fail early rather than at the first Timecode creation
        RateSpec(self.fps)
        FormatSpec(self.delimiter, self.frame_delimiter)

    def replace(self, **changes) -> TimecodeDefaults:
        return dataclasses.replace(self, **changes)


DEFAULTS = TimecodeDefaults()

DEFAULT_FPS = DEFAULTS.fps
DEFAULT_DROPFRAME = DEFAULTS.dropframe
DEFAULT_DELIMITER = DEFAULTS.delimiter
DEFAULT_FRAME_DELIMITER = DEFAULTS.frame_delimiter
