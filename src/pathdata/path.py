"""Immutable sequence of absolute SVG path commands and operations on it."""

from __future__ import annotations

import logging
import math
from typing import ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple, Union, overload

import numpy as np
import svgwrite.path
from numpy.typing import NDArray

from pathdata.arc import ArcFlattener
from pathdata.bezier import BezierCurve
from pathdata.commands import (
    Arc,
    Close,
    Cubic,
    LineTo,
    MoveTo,
    Quadratic,
    SvgArc,
    SvgCommand,
    end_point,
)
from pathdata.common import ROTATION_DECIMALS
from pathdata.geom import GeomMath, PathBox, SvgPoint

logger = logging.getLogger(__name__)


class SvgPath:
    """
    An ordered, immutable sequence of drawing commands in absolute coordinates.

    The order of the commands defines the traced outline. A SvgPath is usually
    created by SvgPathParser.parse() and never changes afterwards; all
    operations return new instances.
    """

    POLYGONIZE_STEPS_DEFAULT: ClassVar[int] = 16

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[SvgCommand] = ()):
        self._commands: Tuple[SvgCommand, ...] = tuple(commands)

    @property
    def commands(self) -> Tuple[SvgCommand, ...]:
        """The commands of the path."""
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[SvgCommand]:
        return iter(self._commands)

    @overload
    def __getitem__(self, index: int) -> SvgCommand: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[SvgCommand, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[SvgCommand, Tuple[SvgCommand, ...]]:
        return self._commands[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SvgPath):
            return NotImplemented
        return self._commands == other._commands

    def __hash__(self) -> int:
        return hash(self._commands)

    def __repr__(self) -> str:
        return f"SvgPath({list(self._commands)!r})"

    @property
    def has_curves(self) -> bool:
        """True if the path contains Cubic, Quadratic or Arc commands."""
        return any(isinstance(cmd, (Cubic, Quadratic, Arc)) for cmd in self._commands)

    ###########################################################################
    # Arc flattening
    ###########################################################################

    def flatten_arcs(self) -> SvgPath:
        """Return a copy of this path with every Arc replaced by cubic Bezier commands.

        An arc ending at its start point disappears, an arc with a zero radius
        becomes a straight line to its end point. Without arcs the same
        instance is returned.
        """
        if not any(isinstance(cmd, Arc) for cmd in self._commands):
            return self

        commands: List[SvgCommand] = []
        current = SvgPoint.ZERO
        for cmd in self._commands:
            if isinstance(cmd, Arc):
                cubics = ArcFlattener.flatten(cmd.arc, current)
                if cubics:
                    commands.extend(cubics)
                elif cmd.arc.end != current:
                    commands.append(LineTo(cmd.arc.end))
            else:
                commands.append(cmd)
            current = end_point(cmd)
        return SvgPath(commands)

    ###########################################################################
    # Serialization
    ###########################################################################

    @staticmethod
    def _format_number(value: float) -> str:
        # repr() is the shortest text that parses back to the same float, "+ 0.0" turns -0.0 into 0.0
        text = repr(float(value) + 0.0)
        return text[:-2] if text.endswith(".0") else text

    @classmethod
    def _format_point(cls, point: SvgPoint) -> str:
        return f"{cls._format_number(point.x)} {cls._format_number(-point.y)}"

    @classmethod
    def _format_command(cls, cmd: SvgCommand) -> str:
        if isinstance(cmd, (MoveTo, LineTo)):
            return f"{cmd.CMD}{cls._format_point(cmd.point)}"
        if isinstance(cmd, Cubic):
            return f"C{cls._format_point(cmd.control1)} {cls._format_point(cmd.control2)} {cls._format_point(cmd.end)}"
        if isinstance(cmd, Quadratic):
            return f"Q{cls._format_point(cmd.control)} {cls._format_point(cmd.end)}"
        if isinstance(cmd, Arc):
            arc = cmd.arc
            return (
                f"A{cls._format_number(arc.radius.x)} {cls._format_number(arc.radius.y)} "
                f"{cls._format_number(round(math.degrees(arc.rotation), ROTATION_DECIMALS))} {int(arc.large_arc)} {int(arc.sweep)} "
                f"{cls._format_point(arc.end)}"
            )
        if isinstance(cmd, Close):
            return "Z"
        raise TypeError(f"Unknown path command {cmd!r}")

    def to_path_string(self) -> str:
        """
        Return the path as SVG path-data string using absolute commands only.

        The y-axis flip applied while parsing is undone and coordinates are
        written without loss, so parsing the result again gives an equal path.
        Arc rotations go through degrees and are exact up to float rounding.

        Returns:
            str: path-data string, e.g. "M0 0 L10 10 Z"
        """
        return " ".join(self._format_command(cmd) for cmd in self._commands)

    def to_svgwrite(self, **extra) -> svgwrite.path.Path:
        """
        Create a svgwrite path element for this path.

        Args:
            **extra: further SVG attributes for the element, e.g. fill="none"

        Returns:
            svgwrite.path.Path: element to be added to a drawing by the caller
        """
        return svgwrite.path.Path(d=self.to_path_string(), **extra)

    ###########################################################################
    # Geometry
    ###########################################################################

    def transform_affine(self, affine_trafo: Sequence[Union[int, float]]) -> SvgPath:
        """
        Transform the path using the given affine transformation [a00, a01, a10, a11, b0, b1].

        Arc radii are scaled by a00 and a11, so arcs are only correct for
        transformations without rotation or shear.

        Args:
            affine_trafo (List[float]): Affine transformation [a00, a01, a10, a11, b0, b1]

        Returns:
            SvgPath: The transformed path
        """

        def transform(point: SvgPoint) -> SvgPoint:
            return GeomMath.transform_point(affine_trafo, point)

        commands: List[SvgCommand] = []
        for cmd in self._commands:
            if isinstance(cmd, MoveTo):
                commands.append(MoveTo(transform(cmd.point)))
            elif isinstance(cmd, LineTo):
                commands.append(LineTo(transform(cmd.point)))
            elif isinstance(cmd, Cubic):
                commands.append(Cubic(transform(cmd.control1), transform(cmd.control2), transform(cmd.end)))
            elif isinstance(cmd, Quadratic):
                commands.append(Quadratic(transform(cmd.control), transform(cmd.end)))
            elif isinstance(cmd, Arc):
                arc = cmd.arc
                radius = SvgPoint(arc.radius.x * affine_trafo[0], arc.radius.y * affine_trafo[3])
                commands.append(Arc(SvgArc(radius, arc.rotation, arc.large_arc, arc.sweep, transform(arc.end))))
            else:
                commands.append(cmd)
        return SvgPath(commands)

    def points(self) -> NDArray[np.float64]:
        """
        Return all points of the path (on-curve and control points) in command order.

        Returns:
            NDArray[np.float64]: array of shape (n, 2); Close contributes no point,
                an Arc contributes its end point
        """
        coords: List[Tuple[float, float]] = []
        for cmd in self._commands:
            if isinstance(cmd, (MoveTo, LineTo)):
                coords.append(cmd.point.as_tuple())
            elif isinstance(cmd, Cubic):
                coords.extend([cmd.control1.as_tuple(), cmd.control2.as_tuple(), cmd.end.as_tuple()])
            elif isinstance(cmd, Quadratic):
                coords.extend([cmd.control.as_tuple(), cmd.end.as_tuple()])
            elif isinstance(cmd, Arc):
                coords.append(cmd.arc.end.as_tuple())
        return np.array(coords, dtype=np.float64).reshape(-1, 2)

    def polygonize(self, steps: int) -> SvgPath:
        """Return a polygonized copy of this path.

        Args:
            steps: Number of line segments used to approximate each curve segment.
                If 0, the original path is returned unchanged.

        Returns:
            SvgPath: New path with curves replaced by LineTo commands.
                If this instance already has no curves, it is returned unchanged.

        Raises:
            ValueError: If _steps_ is negative.
        """
        if steps < 0:
            raise ValueError(f"steps must not be negative, got {steps}")
        if steps == 0 or not self.has_curves:
            return self

        commands: List[SvgCommand] = []
        current = SvgPoint.ZERO
        for cmd in self.flatten_arcs():
            if isinstance(cmd, Cubic):
                control_points = [current.as_tuple(), cmd.control1.as_tuple(), cmd.control2.as_tuple(), cmd.end.as_tuple()]
                polyline = BezierCurve.polygonize_cubic_curve(control_points, steps)
            elif isinstance(cmd, Quadratic):
                control_points = [current.as_tuple(), cmd.control.as_tuple(), cmd.end.as_tuple()]
                polyline = BezierCurve.polygonize_quadratic_curve(control_points, steps)
            else:
                commands.append(cmd)
                current = end_point(cmd)
                continue
            # first row is the current point, the last row is replaced by the exact end point
            commands.extend(LineTo(SvgPoint(float(x), float(y))) for x, y in polyline[1:-1])
            commands.append(LineTo(cmd.end))
            current = cmd.end

        logger.debug("Polygonized %d commands into %d commands", len(self._commands), len(commands))
        return SvgPath(commands)

    def bounding_box(self, steps: Optional[int] = None) -> Optional[PathBox]:
        """
        Return the bounding box of the outline traced by the path.

        Curves are polygonized with _steps_ segments (POLYGONIZE_STEPS_DEFAULT if
        None), so the box is exact for lines and approximate for curves.

        Returns:
            Optional[PathBox]: the box, None for a path without points
        """
        if steps is None:
            steps = self.POLYGONIZE_STEPS_DEFAULT
        points = self.polygonize(steps).points()
        if len(points) == 0:
            return None
        return PathBox.from_points(points)
