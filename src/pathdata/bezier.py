"""Bezier curve sampling used to polygonize parsed paths."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

ControlPoints = Union[Sequence[Tuple[float, float]], NDArray[np.float64]]


class BezierCurve:
    """Class to evaluate and polygonize quadratic and cubic Bezier curves.

    All methods evaluate the Bernstein form directly with vectorized NumPy
    operations over the curve parameter t.
    """

    @staticmethod
    def _parameters(steps: int) -> NDArray[np.float64]:
        if steps < 1:
            raise ValueError(f"Bezier polygonization needs at least 1 step, got {steps}")
        return np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)

    @staticmethod
    def evaluate_cubic(points: ControlPoints, t: Union[float, NDArray[np.float64]]) -> NDArray[np.float64]:
        """
        Evaluate a cubic Bezier curve at parameter(s) _t_.

        Args:
            points: Control points - start, control1, control2, end
            t: A single parameter or an array of parameters in [0, 1]

        Returns:
            NDArray[np.float64] of shape (2,) for a scalar _t_, (len(t), 2) otherwise
        """
        points_array = np.asarray(points, dtype=np.float64)
        t = np.asarray(t, dtype=np.float64)
        omt = 1.0 - t
        # B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3
        basis = np.stack([omt**3, 3.0 * omt**2 * t, 3.0 * omt * t**2, t**3], axis=-1)
        return basis @ points_array[:4, :2]

    @staticmethod
    def evaluate_quadratic(points: ControlPoints, t: Union[float, NDArray[np.float64]]) -> NDArray[np.float64]:
        """
        Evaluate a quadratic Bezier curve at parameter(s) _t_.

        Args:
            points: Control points - start, control, end
            t: A single parameter or an array of parameters in [0, 1]

        Returns:
            NDArray[np.float64] of shape (2,) for a scalar _t_, (len(t), 2) otherwise
        """
        points_array = np.asarray(points, dtype=np.float64)
        t = np.asarray(t, dtype=np.float64)
        omt = 1.0 - t
        basis = np.stack([omt**2, 2.0 * omt * t, t**2], axis=-1)
        return basis @ points_array[:3, :2]

    @classmethod
    def polygonize_cubic_curve(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into line segments.

        Args:
            points: Control points, exactly 4 points: start, control1, control2, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2), first row is the start point,
                last row the end point
        """
        return cls.evaluate_cubic(points, cls._parameters(steps))

    @classmethod
    def polygonize_quadratic_curve(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a quadratic Bezier curve into line segments.

        Args:
            points: Control points, exactly 3 points: start, control, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2)
        """
        return cls.evaluate_quadratic(points, cls._parameters(steps))
