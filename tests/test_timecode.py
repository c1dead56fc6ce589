"""Tests for the Timecode class."""

from fractions import Fraction

import pytest

from framecode import (
    ConfigError,
    ParseError,
    RangeError,
    Timecode,
    TimecodeBuilder,
    TimecodeError,
)


class TestTimecodeCreation:
    """Test creating Timecode instances."""

    def test_default(self):
        """Test a Timecode without arguments is 00:00:00:00 at 29.97."""
        tc = Timecode()
        assert tc.total_frames == 0
        assert tc.fps == 29.97
        assert tc.is_dropframe() is False
        assert str(tc) == "00:00:00:00"

    def test_fields_at_default_fps(self):
        """Test fields are counted with the rounded default frame rate."""
        assert Timecode(2, 0, 0, 12).total_frames == ((2 * 3600) * 30) + 12
        assert Timecode(2, 0, 0, 12).total_frames == 216012

    def test_frame_count(self):
        """Test a single int is used as the frame count."""
        tc = Timecode(216012)
        assert tc.to_tuple() == (2, 0, 0, 12)

    @pytest.mark.parametrize(
        "timecode, dropframe",
        [("00:01:00;04", True), ("00:01:00.04", True), ("00:01:00:04", False)],
    )
    def test_dropframe_inferred_from_string(self, timecode, dropframe):
        """Test the frame delimiter decides drop-frame counting."""
        assert Timecode(timecode).is_dropframe() is dropframe

    def test_explicit_non_dropframe(self):
        """Test an explicit dropframe=False beats the string delimiter."""
        tc = Timecode("00:01:00;04", dropframe=False)
        assert tc.is_dropframe() is False
        assert tc.total_frames == 1804

    def test_boundary(self):
        """Test 99:99:99:99 is the largest accepted timecode."""
        tc = Timecode(99, 99, 99, 99)
        assert str(tc) == "99:99:99:99"
        with pytest.raises(RangeError):
            Timecode(100, 0, 0, 0)
        with pytest.raises(RangeError):
            Timecode(tc.total_frames + 1)

    def test_frames_field_above_99(self):
        """Test a frame count needing a three digit frames field is rejected."""
        assert str(Timecode(0, 0, 0, 99, fps=120)) == "00:00:00:99"
        with pytest.raises(RangeError):
            Timecode(110, fps=120)
        with pytest.raises(RangeError):
            Timecode(0, 0, 0, 99, fps=120) + 11

    def test_non_ascii_delimiter(self):
        """Test a string delimited by a letter raises ParseError."""
        with pytest.raises(ParseError):
            Timecode("00é00é00é00")

    def test_copy_inherits_options(self):
        """Test a Timecode created from another keeps its options."""
        source = Timecode("00-01-00;04", fps=59.94)
        tc = Timecode(source)
        assert tc == source
        assert tc.fps == 59.94
        assert tc.is_dropframe() is True
        assert tc.delimiter == "-"

    def test_copy_overrides_options(self):
        """Test explicit options override the copied ones."""
        tc = Timecode(Timecode("00:01:00;04"), dropframe=False)
        assert tc.total_frames == 1802
        assert tc.is_dropframe() is False

    def test_invalid_fps(self):
        """Test a zero frame rate raises ConfigError."""
        with pytest.raises(ConfigError):
            Timecode(fps=0)

    def test_immutable(self):
        """Test attributes can not be set."""
        tc = Timecode(10)
        with pytest.raises(AttributeError):
            tc.total_frames = 5
        with pytest.raises(AttributeError):
            tc.something = 5
        assert tc.total_frames == 10


class TestTimecodeAccessors:
    """Test Timecode accessors and string rendering."""

    def test_fields(self):
        """Test the fields are derived from the frame count."""
        tc = Timecode(1, 2, 3, 4, fps=25)
        assert tc.hours == 1
        assert tc.minutes == 2
        assert tc.seconds == 3
        assert tc.frames == 4
        assert tc.total_frames == ((1 * 60 + 2) * 60 + 3) * 25 + 4

    def test_fps_keeps_fraction(self):
        """Test the reported frame rate is the one given."""
        assert Timecode(fps=23.976).fps == 23.976
        assert Timecode(fps=Fraction(30000, 1001)).fps == Fraction(30000, 1001)

    def test_string_round_trip(self):
        """Test parsed strings render back the same."""
        for timecode in ("01:02:03:04", "01-02-03-04", "00:01:00;04", "10:00:00.00"):
            assert Timecode(timecode).to_string() == timecode

    def test_zero_padding(self):
        """Test fields are zero padded to two digits."""
        assert str(Timecode("1:2:3:4")) == "01:02:03:04"

    def test_delimiter_override(self):
        """Test explicit delimiters replace the parsed ones."""
        tc = Timecode("01:02:03:04", delimiter="/", frame_delimiter=";", dropframe=False)
        assert str(tc) == "01/02/03;04"

    def test_dropframe_rendering(self):
        """Test drop-frame timecodes skip the dropped frame numbers."""
        assert str(Timecode(1800, dropframe=True, frame_delimiter=";")) == "00:01:00;02"

    def test_repr(self):
        """Test the representation shows the frame count and rate."""
        assert repr(Timecode(25, fps=25)) == "Timecode(25, fps=25, dropframe=False)"

    def test_int_and_float(self):
        """Test int is the frame count and float the elapsed seconds."""
        tc = Timecode(50, fps=25)
        assert int(tc) == 50
        assert float(tc) == 2.0

    def test_to_realtime(self):
        """Test the real time of NTSC rates runs slower than the timecode."""
        tc = Timecode(1, 0, 0, 0, fps=Fraction(30000, 1001))
        assert tc.to_realtime() == Fraction(18018, 5)
        assert Timecode(50, fps=25).to_realtime() == 2


class TestTimecodeConversion:
    """Test drop-frame and frame rate conversion."""

    def test_to_dropframe(self):
        """Test the fields are kept and the frame count recomputed."""
        tc = Timecode("00:01:00:04").to_dropframe()
        assert tc.is_dropframe() is True
        assert tc.total_frames == 1802
        assert tc.to_tuple() == (0, 1, 0, 4)

    def test_to_non_dropframe(self):
        """Test converting back to non-drop-frame."""
        tc = Timecode("00:01:00;04").to_non_dropframe()
        assert tc.is_dropframe() is False
        assert tc.total_frames == 1804
        assert str(tc) == "00:01:00;04"

    def test_already_in_state(self):
        """Test converting to the current state returns the same value."""
        df = Timecode("00:01:00;04")
        ndf = Timecode("00:01:00:04")
        assert df.to_dropframe() is df
        assert ndf.to_non_dropframe() is ndf

    @pytest.mark.parametrize("timecode", ["00:01:00;04", "00:01:00:04", "01:00:00;00"])
    def test_convert_is_non_dropframe(self, timecode):
        """Test a converted Timecode is non-drop-frame by default."""
        assert Timecode(timecode).convert(25).is_dropframe() is False

    def test_convert_keeps_fields(self):
        """Test the fields are read again at the new frame rate."""
        tc = Timecode(2, 0, 0, 12).convert(25)
        assert tc.fps == 25
        assert tc.total_frames == 2 * 3600 * 25 + 12
        assert str(tc) == "02:00:00:12"

    def test_convert_rolls_over_frames(self):
        """Test frames beyond the new rate roll into the seconds."""
        assert str(Timecode("00:00:01:28").convert(25)) == "00:00:02:03"

    def test_convert_options(self):
        """Test explicit options apply and the rest is inherited."""
        source = Timecode("01-00-00-00", fps=25)
        tc = source.convert(29.97, dropframe=True, frame_delimiter=";")
        assert tc.is_dropframe() is True
        assert tc.total_frames == 107892
        assert str(tc) == "01-00-00;00"

    def test_next_and_back(self):
        """Test stepping one frame forward and backward."""
        tc = Timecode("00:00:59;29")
        assert str(tc.next()) == "00:01:00;02"
        assert tc.next().back() == tc
        with pytest.raises(RangeError):
            Timecode(0).back()


class TestTimecodeArithmetic:
    """Test Timecode arithmetic operators."""

    def test_add(self):
        """Test adding frames and Timecodes."""
        tc = Timecode("00:00:01:00")
        assert (tc + 1800).total_frames == 1830
        assert (tc + tc).total_frames == 60
        assert str(tc + 1800) == "00:01:01:00"

    def test_options_from_left_operand(self):
        """Test the result takes the options of the left Timecode."""
        tc1 = Timecode("00:00:01;00", fps=59.94, delimiter="-")
        tc2 = Timecode(30, fps=25)
        assert (tc1 + 1800).fps == tc1.fps
        assert (tc1 + tc2).fps == 59.94
        assert (tc1 + tc2).is_dropframe() is True
        assert (tc2 + tc1).fps == 25

    def test_options_from_right_operand(self):
        """Test an int on the left takes the options of the right Timecode."""
        tc2 = Timecode(30, fps=25)
        result = 1800 - tc2
        assert result.fps == tc2.fps
        assert result.total_frames == 1770
        assert (1800 + tc2).fps == 25

    def test_subtract(self):
        """Test subtracting frames."""
        tc = Timecode("00:01:00;04")
        assert str(tc - 1800) == "00:00:00;02"

    def test_negative_result(self):
        """Test results below zero frames raise RangeError."""
        tc = Timecode("00:00:01:00")
        with pytest.raises(RangeError):
            tc - 1800
        with pytest.raises(RangeError):
            10 - tc

    def test_overflow(self):
        """Test results beyond 99:99:99:99 raise RangeError."""
        with pytest.raises(RangeError):
            Timecode(99, 99, 99, 99) + 1

    def test_multiply(self):
        """Test multiplication from both sides."""
        tc = Timecode(100)
        assert (tc * 2).total_frames == 200
        assert (2 * tc).total_frames == 200
        assert (tc * Timecode(3)).total_frames == 300
        with pytest.raises(RangeError):
            tc * -1

    def test_divide(self):
        """Test division truncates to whole frames."""
        tc = Timecode(100)
        assert (tc / 3).total_frames == 33
        assert (tc // 3).total_frames == 33
        assert (tc / Timecode(7)).total_frames == 14
        assert (1000 / Timecode(3)).total_frames == 333
        with pytest.raises(ZeroDivisionError):
            tc / 0

    @pytest.mark.parametrize("other", [1.5, "00:00:01:00", None, True])
    def test_unsupported_operand(self, other):
        """Test unsupported operands raise TimecodeError."""
        with pytest.raises(TimecodeError):
            Timecode(10) + other

    def test_operands_unchanged(self):
        """Test arithmetic returns new instances."""
        tc = Timecode(10)
        result = tc + 5
        assert result is not tc
        assert tc.total_frames == 10


class TestTimecodeComparison:
    """Test Timecode equality and ordering."""

    def test_equal_ignores_options(self):
        """Test only the frame count is compared."""
        tc1 = Timecode(100, fps=25)
        tc2 = Timecode(100, fps=30, delimiter="-", frame_delimiter=";")
        assert tc1 == tc2
        assert hash(tc1) == hash(tc2)
        assert len({tc1, tc2}) == 1

    def test_compare_with_int(self):
        """Test ints are compared as frame counts."""
        tc = Timecode(100)
        assert tc == 100
        assert tc != 101
        assert tc < 101
        assert tc <= 100
        assert tc > 99
        assert tc >= 100

    def test_compare_with_string(self):
        """Test strings are parsed with the options of the Timecode."""
        tc = Timecode(25, fps=25)
        assert tc == "00:00:01:00"
        assert tc < "00:00:01:01"
        assert Timecode("00:01:00;04") == "00:01:00;04"

    def test_ordering(self):
        """Test Timecodes are ordered by frame count."""
        timecodes = [Timecode(30), Timecode(10, fps=25), Timecode(20)]
        assert [tc.total_frames for tc in sorted(timecodes)] == [10, 20, 30]
        assert Timecode(10) < Timecode(20)
        assert Timecode(20) >= Timecode(20, fps=25)

    def test_unsupported_comparison(self):
        """Test unsupported types are not equal and can not be ordered."""
        tc = Timecode(1)
        assert tc != 1.5
        assert tc != None  # noqa: E711
        with pytest.raises(TypeError):
            tc < 1.5


class TestTimecodeBuilder:
    """Test TimecodeBuilder class."""

    def test_preconfigured_options(self):
        """Test the builder options are applied."""
        pal = TimecodeBuilder(fps=25, delimiter="-")
        tc = pal("00:00:01:00")
        assert tc.total_frames == 25
        assert tc.fps == 25
        # the parsed delimiter is overridden by the builder option
        assert str(tc) == "00-00-01:00"

    def test_call_options_win(self):
        """Test options given to the call override the builder ones."""
        pal = TimecodeBuilder(fps=25)
        assert pal(1, fps=30).total_frames == 1
        assert pal(0, 0, 1, 0, fps=30).total_frames == 30

    def test_unknown_option(self):
        """Test unknown options are rejected."""
        with pytest.raises(TypeError):
            TimecodeBuilder(framerate=25)

    def test_invalid_option(self):
        """Test invalid options fail when the builder is created."""
        with pytest.raises(ConfigError):
            TimecodeBuilder(fps=-1)
