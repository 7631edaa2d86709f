"""Approximation of elliptical arcs by cubic Bezier curves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from pathdata.commands import Cubic, SvgArc
from pathdata.common import QUARTER_TURN
from pathdata.geom import SvgPoint


@dataclass(frozen=True)
class ArcCenterParameters:
    """Center parameterization of an elliptical arc.

    Attributes:
        center: Center of the ellipse
        radius: Radii after scaling them up to reach the end point
        rotation: Rotation of the ellipse's x-axis in radians
        start_angle: Angle of the start point on the unit circle
        sweep_angle: Signed angular span, negative when the sweep flag is set
    """

    center: SvgPoint
    radius: SvgPoint
    rotation: float
    start_angle: float
    sweep_angle: float

    @property
    def segment_count(self) -> int:
        """Number of cubic segments, none of them spanning more than a quarter turn."""
        return max(math.ceil(abs(self.sweep_angle) / QUARTER_TURN), 1)

    def to_ellipse(self, x: float, y: float) -> SvgPoint:
        """Map point (x, y) of the unit circle onto the ellipse."""
        sinphi, cosphi = math.sin(self.rotation), math.cos(self.rotation)
        x, y = x * self.radius.x, y * self.radius.y
        return SvgPoint(
            cosphi * x - sinphi * y + self.center.x,
            sinphi * x + cosphi * y + self.center.y,
        )


class ArcFlattener:
    """Class to convert arc commands into cubic Bezier commands.

    Uses the endpoint-to-center conversion of the SVG implementation notes and
    approximates each quarter turn (or less) by one cubic curve.
    """

    @staticmethod
    def vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
        """Signed angle from vector u to vector v in radians."""
        sign = -1.0 if ux * vy - uy * vx < 0 else 1.0
        umag = math.hypot(ux, uy)
        vmag = math.hypot(vx, vy)
        dot = ux * vx + uy * vy
        return sign * math.acos(max(-1.0, min(1.0, dot / (umag * vmag))))

    @classmethod
    def center_parameters(cls, arc: SvgArc, start: SvgPoint) -> Optional[ArcCenterParameters]:
        """
        Solve the center parameterization of _arc_ starting at _start_.

        Radii too small to span the chord are scaled up uniformly.

        Args:
            arc (SvgArc): the arc to convert
            start (SvgPoint): the current point preceding the arc

        Returns:
            Optional[ArcCenterParameters]: None if the arc is degenerate, i.e.
                start equals end or a radius is zero
        """
        rx, ry = abs(arc.radius.x), abs(arc.radius.y)
        sinphi, cosphi = math.sin(arc.rotation), math.cos(arc.rotation)

        # Half the chord, rotated into the frame of the ellipse
        dx = (start.x - arc.end.x) / 2
        dy = (start.y - arc.end.y) / 2
        pxp = cosphi * dx + sinphi * dy
        pyp = -sinphi * dx + cosphi * dy
        if pxp == 0 and pyp == 0:
            return None
        if rx == 0 or ry == 0:
            return None

        lambda_ = pxp**2 / rx**2 + pyp**2 / ry**2
        if lambda_ > 1:
            rx *= math.sqrt(lambda_)
            ry *= math.sqrt(lambda_)

        rxsq, rysq = rx**2, ry**2
        pxpsq, pypsq = pxp**2, pyp**2

        radicant = max(0.0, rxsq * rysq - rxsq * pypsq - rysq * pxpsq)
        radicant /= rxsq * pypsq + rysq * pxpsq
        radicant = math.sqrt(radicant) * (-1 if arc.large_arc != arc.sweep else 1)

        centerxp = radicant * rx / ry * pyp
        centeryp = radicant * -ry / rx * pxp

        centerx = cosphi * centerxp - sinphi * centeryp + (start.x + arc.end.x) / 2
        centery = sinphi * centerxp + cosphi * centeryp + (start.y + arc.end.y) / 2

        vx1, vy1 = (pxp - centerxp) / rx, (pyp - centeryp) / ry
        vx2, vy2 = (-pxp - centerxp) / rx, (-pyp - centeryp) / ry

        start_angle = cls.vector_angle(1, 0, vx1, vy1)
        sweep_angle = cls.vector_angle(vx1, vy1, vx2, vy2)
        # y is flipped, so a set sweep flag turns clockwise here
        if arc.sweep and sweep_angle > 0:
            sweep_angle -= 2 * math.pi
        elif not arc.sweep and sweep_angle < 0:
            sweep_angle += 2 * math.pi

        return ArcCenterParameters(
            center=SvgPoint(centerx, centery),
            radius=SvgPoint(rx, ry),
            rotation=arc.rotation,
            start_angle=start_angle,
            sweep_angle=sweep_angle,
        )

    @classmethod
    def flatten(cls, arc: SvgArc, start: SvgPoint) -> List[Cubic]:
        """
        Approximate _arc_ starting at _start_ by cubic Bezier commands.

        Args:
            arc (SvgArc): the arc to convert
            start (SvgPoint): the current point preceding the arc

        Returns:
            List[Cubic]: one cubic per segment, empty for a degenerate arc
        """
        params = cls.center_parameters(arc, start)
        if params is None:
            return []

        segments = params.segment_count
        delta = params.sweep_angle / segments
        k = 4 / 3 * math.tan(delta / 4)

        cubics: List[Cubic] = []
        angle = params.start_angle
        for _ in range(segments):
            x1, y1 = math.cos(angle), math.sin(angle)
            x2, y2 = math.cos(angle + delta), math.sin(angle + delta)
            cubics.append(
                Cubic(
                    params.to_ellipse(x1 - y1 * k, y1 + x1 * k),
                    params.to_ellipse(x2 + y2 * k, y2 - x2 * k),
                    params.to_ellipse(x2, y2),
                )
            )
            angle += delta
        return cubics
