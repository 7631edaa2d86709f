"""Test module for pathdata.parser

The tests are run using pytest.
"""

import logging
import math

import pytest

from pathdata.commands import Arc, Close, Cubic, LineTo, MoveTo, Quadratic, SvgArc
from pathdata.errors import SvgPathError, SvgPathErrorKind
from pathdata.geom import SvgPoint
from pathdata.parser import SvgPathParser, parse_path


def P(x, y):  # pylint: disable=invalid-name
    """Shortcut for SvgPoint"""
    return SvgPoint(x, y)


###############################################################################
# Basic commands
###############################################################################


class TestBasicCommands:
    """Tests for move, line and close commands."""

    def test_move_and_line_negate_y(self):
        """y-coordinates are negated on ingestion."""
        path = SvgPathParser.parse("M0 0 L10 10")
        assert list(path) == [MoveTo(P(0, 0)), LineTo(P(10, -10))]

    def test_implicit_lineto_repetition(self):
        """Further argument pairs repeat the lineto."""
        path = SvgPathParser.parse("M0 0 L10 10 20 20")
        assert list(path) == [MoveTo(P(0, 0)), LineTo(P(10, -10)), LineTo(P(20, -20))]

    def test_repeated_moveto_becomes_lineto(self):
        """Repeated moveto arguments are treated as lineto."""
        path = SvgPathParser.parse("M0 0 10 10 20 0")
        assert list(path) == [MoveTo(P(0, 0)), LineTo(P(10, -10)), LineTo(P(20, 0))]

    def test_repeated_relative_moveto_becomes_relative_lineto(self):
        """Repeated relative moveto arguments become relative linetos."""
        path = SvgPathParser.parse("m1 1 2 2")
        assert list(path) == [MoveTo(P(1, -1)), LineTo(P(3, -3))]

    def test_horizontal_line_absolute(self):
        """Horizontal lineto keeps y of the previous point."""
        path = SvgPathParser.parse("M0 0 H5")
        assert list(path) == [MoveTo(P(0, 0)), LineTo(P(5, 0))]

    def test_horizontal_and_vertical_lines(self):
        """H/V absolute and h/v relative resolve to absolute linetos."""
        path = SvgPathParser.parse("M10 10 H20 V30 h5 v5")
        assert list(path) == [
            MoveTo(P(10, -10)),
            LineTo(P(20, -10)),
            LineTo(P(20, -30)),
            LineTo(P(25, -30)),
            LineTo(P(25, -35)),
        ]

    def test_relative_line(self):
        """Relative lineto is translated by the previous end point."""
        path = SvgPathParser.parse("M10 10 l5 5 5 5")
        assert list(path) == [MoveTo(P(10, -10)), LineTo(P(15, -15)), LineTo(P(20, -20))]

    def test_close(self):
        """Z emits Close."""
        path = SvgPathParser.parse("M0 0 L10 0 L10 10 Z")
        assert path[-1] == Close()
        assert len(path) == 4

    def test_relative_command_after_close_uses_origin(self):
        """Close ends at the origin, so a relative command after it starts there."""
        path = SvgPathParser.parse("M10 10 L20 10 z l5 5")
        assert path[-1] == LineTo(P(5, -5))

    def test_relative_first_command_is_absolute(self):
        """Without a previous command relative coordinates are taken as absolute."""
        assert list(SvgPathParser.parse("l3 4")) == [LineTo(P(3, -4))]

    def test_empty_input(self):
        """Empty or blank input gives an empty path."""
        assert len(SvgPathParser.parse("")) == 0
        assert len(SvgPathParser.parse(" \t\r\n,")) == 0

    def test_numbers_without_command_are_ignored(self, caplog):
        """Numbers without any command letter produce an empty path and a warning."""
        with caplog.at_level(logging.WARNING, logger="pathdata.parser"):
            path = SvgPathParser.parse("10 20")
        assert len(path) == 0
        assert "without a command letter" in caplog.text

    def test_long_implicit_repetition(self):
        """Long implicit argument runs are handled without recursion."""
        path = SvgPathParser.parse("M0 0 L" + " 1 1" * 5000)
        assert len(path) == 5001

    def test_parse_is_deterministic(self):
        """Parsing the same input twice yields equal paths."""
        path_string = "M0 0 C1 2 3 4 5 6 S7 8 9 10 Q1 1 2 2 T3 3 A5 5 30 1 0 20 20 Z"
        assert SvgPathParser.parse(path_string) == parse_path(path_string)


###############################################################################
# Number tokenization
###############################################################################


class TestNumberTokenization:
    """Tests for the splitting of numbers."""

    def test_second_dot_starts_new_number(self):
        """A second dot starts a new number."""
        path = SvgPathParser.parse("M0.5.5")
        assert list(path) == [MoveTo(P(0.5, -0.5))]

    def test_minus_starts_new_number(self):
        """A minus sign not following an exponent starts a new number."""
        path = SvgPathParser.parse("M-1-2L1e2-3")
        assert list(path) == [MoveTo(P(-1, 2)), LineTo(P(100, 3))]

    def test_signed_exponents(self):
        """A sign following e/E belongs to the exponent."""
        path = SvgPathParser.parse("M1e-1 2E+1")
        assert path[0] == MoveTo(P(0.1, -20))

    def test_commas_as_separators(self):
        """Commas separate numbers like whitespace."""
        assert SvgPathParser.parse("M0,0,L10,10") == SvgPathParser.parse("M0 0 L10 10")

    def test_incomplete_exponent(self):
        """An exponent without digits is an unexpected token."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M1e 2")
        assert exc_info.value.kind is SvgPathErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.token == "1e"

    def test_lone_minus(self):
        """A lone minus sign is an unexpected token."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M - 2")
        assert exc_info.value.token == "-"


###############################################################################
# Curves
###############################################################################


class TestCurves:
    """Tests for cubic, quadratic and arc commands."""

    def test_cubic(self):
        """C takes two controls and an end point."""
        path = SvgPathParser.parse("M0 0 C1 2 3 4 5 6")
        assert path[1] == Cubic(P(1, -2), P(3, -4), P(5, -6))

    def test_relative_cubic_repetition(self):
        """Repeated relative cubics are translated by the previous end point."""
        path = SvgPathParser.parse("M10 0 c1 1 2 2 3 3 1 1 2 2 3 3")
        assert list(path[1:]) == [
            Cubic(P(11, -1), P(12, -2), P(13, -3)),
            Cubic(P(14, -4), P(15, -5), P(16, -6)),
        ]

    def test_quadratic(self):
        """Q takes a control and an end point."""
        path = SvgPathParser.parse("M0 0 q5 5 10 0")
        assert path[1] == Quadratic(P(5, -5), P(10, 0))

    def test_smooth_quadratic_reflects_control(self):
        """T reflects the previous quadratic control through the current point."""
        path = SvgPathParser.parse("M0 0 Q10 10 20 0 T40 0")
        assert path[2] == Quadratic(P(30, 10), P(40, 0))

    def test_relative_smooth_quadratic(self):
        """t gives the same result as T for equivalent coordinates."""
        assert SvgPathParser.parse("M0 0 q10 10 20 0 t20 0") == SvgPathParser.parse("M0 0 Q10 10 20 0 T40 0")

    def test_smooth_quadratic_after_line_collapses(self):
        """T after a non-quadratic command uses the current point as control."""
        assert SvgPathParser.parse("M10 10 T20 20") == SvgPathParser.parse("M10 10 Q10 10 20 20")

    def test_smooth_cubic_reflects_control(self):
        """S reflects the second control of the previous cubic."""
        path = SvgPathParser.parse("M0 0 C0 10 10 10 10 0 S20 -10 20 0")
        assert path[2] == Cubic(P(10, 10), P(20, 10), P(20, 0))

    def test_smooth_cubic_after_line_collapses(self):
        """S after a non-cubic command uses the current point as first control."""
        assert SvgPathParser.parse("M0 0 L10 0 S20 10 30 0") == SvgPathParser.parse("M0 0 L10 0 C10 0 20 10 30 0")

    def test_relative_smooth_cubic_after_line_collapses(self):
        """s after a non-cubic command uses the current point as first control."""
        assert SvgPathParser.parse("M0 0 L10 0 s10 10 20 0") == SvgPathParser.parse("M0 0 L10 0 C10 0 20 10 30 0")

    def test_arc(self):
        """A converts degrees to radians and tests flags for nonzero."""
        path = SvgPathParser.parse("M0 0 A5 6 90 1 0 10 20")
        arc = path[1]
        assert isinstance(arc, Arc)
        assert arc.arc.radius == P(5, 6)
        assert arc.arc.rotation == pytest.approx(math.pi / 2)
        assert arc.arc.large_arc is True
        assert arc.arc.sweep is False
        assert arc.arc.end == P(10, -20)

    def test_relative_arc_moves_end_only(self):
        """A relative arc translates only its end point."""
        path = SvgPathParser.parse("M10 10 a5 5 0 0 1 10 0")
        assert path[1] == Arc(SvgArc(P(5, 5), 0.0, False, True, P(20, -10)))


###############################################################################
# Errors
###############################################################################


class TestErrors:
    """Tests for the error kinds raised by the parser."""

    def test_missing_argument(self):
        """Fewer numbers than the arity raise MISSING_ARGUMENT."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M0 0 L10")
        error = exc_info.value
        assert error.kind is SvgPathErrorKind.MISSING_ARGUMENT
        assert error.command == "L"
        assert error.expected == 2

    def test_missing_argument_keeps_letter_case(self):
        """The error names the command letter as written."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("m0 0 l10")
        assert exc_info.value.command == "l"

    def test_missing_argument_mid_stream(self):
        """A command followed directly by another letter misses its arguments."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M0 0 L L10 10")
        assert exc_info.value.kind is SvgPathErrorKind.MISSING_ARGUMENT

    def test_unexpected_argument(self):
        """A number count that is no multiple of the arity raises UNEXPECTED_ARGUMENT."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M0 0 L10 10 20")
        error = exc_info.value
        assert error.kind is SvgPathErrorKind.UNEXPECTED_ARGUMENT
        assert error.command == "L"
        assert error.expected == 2

    def test_close_with_argument(self):
        """Z does not accept any number."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M0 0 L1 1 Z 5")
        assert exc_info.value.kind is SvgPathErrorKind.UNEXPECTED_ARGUMENT
        assert exc_info.value.command == "Z"
        assert exc_info.value.expected == 0

    def test_unknown_command_letter(self):
        """Letters outside the command set raise UNEXPECTED_TOKEN."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M0 0 X10 10")
        assert exc_info.value.kind is SvgPathErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.token == "X"

    def test_unexpected_character(self):
        """Characters outside the grammar raise UNEXPECTED_TOKEN."""
        with pytest.raises(SvgPathError) as exc_info:
            SvgPathParser.parse("M0 0 L10 10 #")
        assert exc_info.value.token == "#"
        assert "#" in str(exc_info.value)

    def test_error_is_value_error(self):
        """SvgPathError can be handled as ValueError."""
        with pytest.raises(ValueError):
            parse_path("M0 0 C1 2")
