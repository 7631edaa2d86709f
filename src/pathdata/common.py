"""Central module containing constants and definitions for SVG path-data processing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

###############################################################################
# Types
###############################################################################


SvgPathCmds = Literal[  # Type-Definition for the absolute commands stored in a SvgPath
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    # Quadratic Bezier To (4) - draw a quadratic Bezier curve with one control point and an endpoint (x,y)
    "Q",
    # Arc (7) - draw an elliptical arc with parameters (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
]


###############################################################################
# SvgCommandInfo
###############################################################################


@dataclass(frozen=True)
class SvgCommandInfo:
    """Metadata for the command letters of the path-data grammar.

    Attributes:
        arity: Number of numeric arguments one application of the command consumes
        is_curve: Whether this command represents a curve
    """

    arity: int
    is_curve: bool


# Command registry with metadata, keyed by lowercase letter
COMMAND_INFO = {
    "m": SvgCommandInfo(2, False),  # MoveTo
    "l": SvgCommandInfo(2, False),  # LineTo
    "h": SvgCommandInfo(1, False),  # Horizontal LineTo (x)
    "v": SvgCommandInfo(1, False),  # Vertical LineTo (y)
    "c": SvgCommandInfo(6, True),  # Cubic
    "s": SvgCommandInfo(4, True),  # Smooth cubic
    "q": SvgCommandInfo(4, True),  # Quadratic
    "t": SvgCommandInfo(2, True),  # Smooth quadratic
    "a": SvgCommandInfo(7, True),  # Arc
    "z": SvgCommandInfo(0, False),  # ClosePath
}


###############################################################################
# Consts
###############################################################################

# Largest angular span covered by a single cubic segment of a flattened arc
QUARTER_TURN: float = math.pi / 2

# Decimals kept for arc rotations (in degrees) when writing path-data strings
ROTATION_DECIMALS: int = 12
