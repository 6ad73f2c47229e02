"""Points and path sections of a TikZ path.

Each section renders as positional text only; the current point is implied by
the preceding section.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """2-D coordinate stored at 32-bit float precision.

    Coordinates are not validated; non-finite values render as Python formats
    them (``nan``, ``inf``, ``-inf``).
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(np.float32(self.x)))
        object.__setattr__(self, "y", float(np.float32(self.y)))

    def __str__(self) -> str:
        return f"({self.x:.4f}, {self.y:.4f})"


class PathSection:
    """Base for the closed set of section kinds: Move, Line, Curve, Cycle."""

    __slots__ = ()


@dataclass(frozen=True)
class Move(PathSection):
    to: Point

    def __str__(self) -> str:
        return str(self.to)


@dataclass(frozen=True)
class Line(PathSection):
    to: Point

    def __str__(self) -> str:
        return f"--{self.to}"


@dataclass(frozen=True)
class Curve(PathSection):
    """Cubic Bezier segment: two control points, then the end point."""

    control1: Point
    control2: Point
    end: Point

    def __str__(self) -> str:
        return f".. controls {self.control1} and {self.control2} .. {self.end}"


@dataclass(frozen=True)
class Cycle(PathSection):
    def __str__(self) -> str:
        return "--cycle"
