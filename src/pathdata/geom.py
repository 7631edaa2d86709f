"""Handling points, affine transformations and bounding boxes"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray


###############################################################################
# SvgPoint
###############################################################################
@dataclass(frozen=True)
class SvgPoint:
    """Immutable 2D point (x, y) supporting component-wise addition and subtraction."""

    x: float
    y: float

    ZERO: ClassVar[SvgPoint]

    def __add__(self, other: SvgPoint) -> SvgPoint:
        return SvgPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: SvgPoint) -> SvgPoint:
        return SvgPoint(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        """The point as Tuple (x, y)."""
        return self.x, self.y

    def is_close(self, other: SvgPoint, abs_tol: float = 1e-9) -> bool:
        """Return True if both coordinates differ by at most _abs_tol_."""
        return abs(self.x - other.x) <= abs_tol and abs(self.y - other.y) <= abs_tol


SvgPoint.ZERO = SvgPoint(0.0, 0.0)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def transform_point(affine_trafo: Sequence[Union[int, float]], point: SvgPoint) -> SvgPoint:
        """
        Perform an affine transformation on the given 2D point.

        The given _affine_trafo_ is a list of 6 floats, performing an affine transformation.
        The transformation is defined as:
            | x' | = | a00 a01 b0 |   | x |
            | y' | = | a10 a11 b1 | * | y |
            | 1  | = |  0   0  1  |   | 1 |
        with
            affine_trafo = [a00, a01, a10, a11, b0, b1]

        Args:
            affine_trafo (Tuple/List[float]): Affine transformation - [a00, a01, a10, a11, b0, b1]
            point (SvgPoint): 2D point

        Returns:
            SvgPoint: the transformed point

        Raises:
            ValueError: If _affine_trafo_ does not hold exactly 6 values.
        """
        if len(affine_trafo) != 6:
            raise ValueError(f"Affine transformation needs 6 values, got {len(affine_trafo)}")
        x_new = float(affine_trafo[0] * point.x + affine_trafo[1] * point.y + affine_trafo[4])
        y_new = float(affine_trafo[2] * point.x + affine_trafo[3] * point.y + affine_trafo[5])
        return SvgPoint(x_new, y_new)


###############################################################################
# PathBox
###############################################################################
@dataclass(frozen=True)
class PathBox:
    """
    Axis-aligned bounding box of a path.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        # Normalize coordinates to ensure xmin <= xmax and ymin <= ymax
        if self.xmin > self.xmax:
            xmin, xmax = self.xmax, self.xmin
            object.__setattr__(self, "xmin", xmin)
            object.__setattr__(self, "xmax", xmax)
        if self.ymin > self.ymax:
            ymin, ymax = self.ymax, self.ymin
            object.__setattr__(self, "ymin", ymin)
            object.__setattr__(self, "ymax", ymax)

    @classmethod
    def from_points(cls, points: NDArray[np.float64]) -> PathBox:
        """Create the smallest box containing all rows (x, y) of _points_."""
        xmin, ymin = np.min(points[:, :2], axis=0)
        xmax, ymax = np.max(points[:, :2], axis=0)
        return cls(float(xmin), float(ymin), float(xmax), float(ymax))

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (xmin, ymin, xmax, ymax)."""
        return self.xmin, self.ymin, self.xmax, self.ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""
        return self.ymax - self.ymin

    @property
    def area(self) -> float:
        """float: The area of the box."""
        return self.width * self.height

    @property
    def centroid(self) -> Tuple[float, float]:
        """The centroid of the box as (x, y)."""
        return (self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2
