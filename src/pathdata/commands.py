"""Drawing commands of a parsed SVG path.

Every command is a small frozen dataclass tagged by its absolute command
letter (``CMD``). ``SvgCommand`` is the closed union over all variants and the
helper functions below match over it exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Union

from pathdata.common import SvgPathCmds
from pathdata.geom import SvgPoint


@dataclass(frozen=True)
class SvgArc:
    """Elliptical arc parameters.

    Attributes:
        radius: Radii (rx, ry) as given in the path data
        rotation: Rotation of the ellipse's x-axis in radians
        large_arc: Large-arc flag
        sweep: Sweep flag
        end: End point of the arc
    """

    radius: SvgPoint
    rotation: float
    large_arc: bool
    sweep: bool
    end: SvgPoint


@dataclass(frozen=True)
class MoveTo:
    """Start a new subpath at _point_."""

    CMD: ClassVar[SvgPathCmds] = "M"
    point: SvgPoint


@dataclass(frozen=True)
class LineTo:
    """Straight line from the current point to _point_."""

    CMD: ClassVar[SvgPathCmds] = "L"
    point: SvgPoint


@dataclass(frozen=True)
class Cubic:
    """Cubic Bezier curve from the current point to _end_."""

    CMD: ClassVar[SvgPathCmds] = "C"
    control1: SvgPoint
    control2: SvgPoint
    end: SvgPoint


@dataclass(frozen=True)
class Quadratic:
    """Quadratic Bezier curve from the current point to _end_."""

    CMD: ClassVar[SvgPathCmds] = "Q"
    control: SvgPoint
    end: SvgPoint


@dataclass(frozen=True)
class Arc:
    """Elliptical arc from the current point to ``arc.end``."""

    CMD: ClassVar[SvgPathCmds] = "A"
    arc: SvgArc


@dataclass(frozen=True)
class Close:
    """Close the current subpath."""

    CMD: ClassVar[SvgPathCmds] = "Z"


SvgCommand = Union[MoveTo, LineTo, Cubic, Quadratic, Arc, Close]


def end_point(command: SvgCommand) -> SvgPoint:
    """Return the point the command ends at. Close ends at the origin."""
    if isinstance(command, (MoveTo, LineTo)):
        return command.point
    if isinstance(command, (Cubic, Quadratic)):
        return command.end
    if isinstance(command, Arc):
        return command.arc.end
    if isinstance(command, Close):
        return SvgPoint.ZERO
    raise TypeError(f"Unknown path command {command!r}")


def control1(command: SvgCommand) -> Optional[SvgPoint]:
    """Return the first control point of a curve command, None otherwise."""
    if isinstance(command, Cubic):
        return command.control1
    if isinstance(command, Quadratic):
        return command.control
    return None


def control2(command: SvgCommand) -> Optional[SvgPoint]:
    """Return the second control point of a cubic command, None otherwise."""
    if isinstance(command, Cubic):
        return command.control2
    return None


def translated(command: SvgCommand, offset: SvgPoint) -> SvgCommand:
    """Return _command_ with _offset_ added to each of its points.

    For an arc only the end point moves; radii and flags are not positions.
    """
    if isinstance(command, MoveTo):
        return MoveTo(command.point + offset)
    if isinstance(command, LineTo):
        return LineTo(command.point + offset)
    if isinstance(command, Cubic):
        return Cubic(command.control1 + offset, command.control2 + offset, command.end + offset)
    if isinstance(command, Quadratic):
        return Quadratic(command.control + offset, command.end + offset)
    if isinstance(command, Arc):
        return Arc(replace(command.arc, end=command.arc.end + offset))
    if isinstance(command, Close):
        return command
    raise TypeError(f"Unknown path command {command!r}")
