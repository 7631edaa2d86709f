"""Parsing of SVG path-data strings into absolute drawing commands.

Commands (command : number of values : command-character):
    MoveTo:           2: Mm
    LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
    CubicBezier:      6: Cc   4: Ss
    QuadraticBezier:  4: Qq   2: Tt
    ArcCurve:         7: Aa
    ClosePath:        0: Zz

Uppercase letters use absolute coordinates, lowercase letters relative ones.
All y-values are negated on ingestion.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, List, Optional

from pathdata.commands import (
    Arc,
    Close,
    Cubic,
    LineTo,
    MoveTo,
    Quadratic,
    SvgArc,
    SvgCommand,
    control1,
    control2,
    end_point,
    translated,
)
from pathdata.common import COMMAND_INFO
from pathdata.errors import SvgPathError
from pathdata.geom import SvgPoint
from pathdata.path import SvgPath

logger = logging.getLogger(__name__)

_NUMBER_CHARS = frozenset("0123456789Ee+")
_SEPARATOR_CHARS = frozenset(" \t\r\n,")


###############################################################################
# _ParserState
###############################################################################


@dataclass
class _ParserState:
    """Mutable state threaded through one scan of a path-data string.

    Attributes:
        token: Current command letter as written, None before the first letter
        is_relative: True if the current command letter is lowercase
        number: Characters of the number being read
        numbers: Parsed numbers waiting to be consumed by a command
        commands: Absolute commands emitted so far
    """

    token: Optional[str] = None
    is_relative: bool = False
    number: str = ""
    numbers: Deque[float] = field(default_factory=deque)
    commands: List[SvgCommand] = field(default_factory=list)

    @property
    def last_command(self) -> Optional[SvgCommand]:
        """The last emitted command or None."""
        return self.commands[-1] if self.commands else None

    @property
    def last_point(self) -> SvgPoint:
        """End point of the last emitted command, origin if there is none."""
        last = self.last_command
        return end_point(last) if last is not None else SvgPoint.ZERO

    def take_args(self, count: int) -> List[float]:
        """Remove and return the next _count_ numbers.

        Raises:
            SvgPathError: If fewer than _count_ numbers are pending or the pending
                numbers are no multiple of _count_.
        """
        available = len(self.numbers)
        if available < count:
            raise SvgPathError.missing_argument(self.token or "", count)
        if (count == 0 and available) or (count and available % count):
            raise SvgPathError.unexpected_argument(self.token or "", count)
        return [self.numbers.popleft() for _ in range(count)]


###############################################################################
# SvgPathParser
###############################################################################


class SvgPathParser:
    """
    Single-pass parser for the SVG path-data grammar.

    The parser keeps no state between calls; each call to parse() works on its
    own _ParserState, so a parser may be shared between threads.
    """

    @classmethod
    def parse(cls, path_string: str) -> SvgPath:
        """
        Parse the given _path_string_ into a SvgPath of absolute commands.

        Args:
            path_string (str): a SVG path-data string, e.g. "M0 0 L10 10"

        Returns:
            SvgPath: the parsed path, possibly empty

        Raises:
            SvgPathError: If the string is not valid path data. No partial path
                is returned.
        """
        state = _ParserState()
        for char in path_string:
            if char in _NUMBER_CHARS:
                state.number += char
            elif char == ".":
                if "." in state.number:
                    cls._process_number(state)
                state.number += "."
            elif char == "-":
                if state.number and state.number[-1] in "eE":
                    state.number += char
                else:
                    cls._process_number(state)
                    state.number = "-"
            elif char.isascii() and char.isalpha():
                cls._process_number(state)
                cls._process_command(state)
                state.token = char
                state.is_relative = char.islower()
            elif char in _SEPARATOR_CHARS:
                cls._process_number(state)
            else:
                raise SvgPathError.unexpected_token(char)

        cls._process_number(state)
        cls._process_command(state)

        if state.token is None and state.numbers:
            logger.warning("Ignoring %d numbers without a command letter", len(state.numbers))
        logger.debug("Parsed %d path commands from %d characters", len(state.commands), len(path_string))
        return SvgPath(state.commands)

    @staticmethod
    def _process_number(state: _ParserState) -> None:
        """Move a complete number from the buffer into the pending numbers."""
        if not state.number:
            return
        try:
            value = float(state.number)
        except ValueError as exc:
            raise SvgPathError.unexpected_token(state.number) from exc
        state.numbers.append(value)
        state.number = ""

    @classmethod
    def _process_command(cls, state: _ParserState) -> None:
        """Apply the current command letter to the pending numbers.

        The command is applied repeatedly while numbers remain. Repeated
        moveto arguments are treated as lineto.
        """
        if state.token is None:
            return
        while True:
            builder = _BUILDERS.get(state.token.lower())
            if builder is None:
                raise SvgPathError.unexpected_token(state.token)
            command = builder(state)
            cls._append_command(state, command)
            if not state.numbers:
                return
            if isinstance(command, MoveTo):
                state.token = "l" if state.is_relative else "L"

    @staticmethod
    def _append_command(state: _ParserState, command: SvgCommand) -> None:
        last = state.last_command
        if state.is_relative and last is not None:
            command = translated(command, end_point(last))
        state.commands.append(command)

    ###########################################################################
    # Command builders
    ###########################################################################

    @staticmethod
    def _move_to(state: _ParserState) -> SvgCommand:
        x, y = state.take_args(COMMAND_INFO["m"].arity)
        return MoveTo(SvgPoint(x, -y))

    @staticmethod
    def _line_to(state: _ParserState) -> SvgCommand:
        x, y = state.take_args(COMMAND_INFO["l"].arity)
        return LineTo(SvgPoint(x, -y))

    @staticmethod
    def _line_to_horizontal(state: _ParserState) -> SvgCommand:
        (x,) = state.take_args(COMMAND_INFO["h"].arity)
        return LineTo(SvgPoint(x, 0.0 if state.is_relative else state.last_point.y))

    @staticmethod
    def _line_to_vertical(state: _ParserState) -> SvgCommand:
        (y,) = state.take_args(COMMAND_INFO["v"].arity)
        return LineTo(SvgPoint(0.0 if state.is_relative else state.last_point.x, -y))

    @staticmethod
    def _quad_curve(state: _ParserState) -> SvgCommand:
        x1, y1, x, y = state.take_args(COMMAND_INFO["q"].arity)
        return Quadratic(SvgPoint(x1, -y1), SvgPoint(x, -y))

    @staticmethod
    def _quad_smooth(state: _ParserState) -> SvgCommand:
        x, y = state.take_args(COMMAND_INFO["t"].arity)
        last = state.last_command
        last_point = state.last_point
        last_control = control1(last) if isinstance(last, Quadratic) else None
        control = _reflected_control(last_control, last_point, state.is_relative)
        return Quadratic(control, SvgPoint(x, -y))

    @staticmethod
    def _cubic_curve(state: _ParserState) -> SvgCommand:
        x1, y1, x2, y2, x, y = state.take_args(COMMAND_INFO["c"].arity)
        return Cubic(SvgPoint(x1, -y1), SvgPoint(x2, -y2), SvgPoint(x, -y))

    @staticmethod
    def _cubic_smooth(state: _ParserState) -> SvgCommand:
        x2, y2, x, y = state.take_args(COMMAND_INFO["s"].arity)
        last = state.last_command
        last_point = state.last_point
        last_control = control2(last) if isinstance(last, Cubic) else None
        control = _reflected_control(last_control, last_point, state.is_relative)
        return Cubic(control, SvgPoint(x2, -y2), SvgPoint(x, -y))

    @staticmethod
    def _arc(state: _ParserState) -> SvgCommand:
        rx, ry, rotation, large_arc, sweep, x, y = state.take_args(COMMAND_INFO["a"].arity)
        return Arc(
            SvgArc(
                radius=SvgPoint(rx, ry),
                rotation=math.radians(rotation),
                large_arc=large_arc != 0,
                sweep=sweep != 0,
                end=SvgPoint(x, -y),
            )
        )

    @staticmethod
    def _close(state: _ParserState) -> SvgCommand:
        state.take_args(COMMAND_INFO["z"].arity)
        return Close()


def _reflected_control(last_control: Optional[SvgPoint], last_point: SvgPoint, is_relative: bool) -> SvgPoint:
    """Reflect _last_control_ through _last_point_.

    Without a previous control the result collapses onto the current point.
    A relative result is an offset from the current point; it becomes absolute
    once the command is translated.
    """
    if last_control is None:
        last_control = last_point
    control = last_point - last_control
    if not is_relative:
        control = control + last_point
    return control


_BUILDERS: Dict[str, Callable[[_ParserState], SvgCommand]] = {
    "m": SvgPathParser._move_to,  # pylint: disable=protected-access
    "l": SvgPathParser._line_to,  # pylint: disable=protected-access
    "h": SvgPathParser._line_to_horizontal,  # pylint: disable=protected-access
    "v": SvgPathParser._line_to_vertical,  # pylint: disable=protected-access
    "q": SvgPathParser._quad_curve,  # pylint: disable=protected-access
    "t": SvgPathParser._quad_smooth,  # pylint: disable=protected-access
    "c": SvgPathParser._cubic_curve,  # pylint: disable=protected-access
    "s": SvgPathParser._cubic_smooth,  # pylint: disable=protected-access
    "a": SvgPathParser._arc,  # pylint: disable=protected-access
    "z": SvgPathParser._close,  # pylint: disable=protected-access
}


def parse_path(path_string: str) -> SvgPath:
    """Parse _path_string_ into a SvgPath. See SvgPathParser.parse()."""
    return SvgPathParser.parse(path_string)
