"""
Square regions for the quadtree.

North is +y and East is +x. Points on a centre line belong to the
North and East quadrants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

from ..validation import InvalidArgumentError


class Quadrant(IntEnum):
    """Quadrants of a square, in child slot order."""

    NW = 0
    NE = 1
    SW = 2
    SE = 3


@dataclass(frozen=True)
class Square:
    """
    An axis-aligned square.

    Attributes:
        center_x, center_y: Centre of the square
        side_length: Width (and height) of the square
        bounds: Edges (min_x, min_y, max_x, max_y). Derived from the centre
            and side when omitted. Sub-squares inherit their edges from the
            parent, so a child's inner edges are exactly the parent's
            centre lines.
    """

    center_x: float
    center_y: float
    side_length: float
    bounds: Optional[Tuple[float, float, float, float]] = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not math.isfinite(self.side_length) or self.side_length < 0:
            raise InvalidArgumentError(f"Illegal side length {self.side_length}")
        if not math.isfinite(self.center_x):
            raise InvalidArgumentError(f"Illegal x {self.center_x}")
        if not math.isfinite(self.center_y):
            raise InvalidArgumentError(f"Illegal y {self.center_y}")

        if self.bounds is None:
            half = self.half_size
            object.__setattr__(
                self,
                "bounds",
                (
                    self.center_x - half,
                    self.center_y - half,
                    self.center_x + half,
                    self.center_y + half,
                ),
            )
        else:
            min_x, min_y, max_x, max_y = self.bounds
            if not all(math.isfinite(v) for v in self.bounds):
                raise InvalidArgumentError(f"Illegal bounds {self.bounds}")
            if not (min_x <= self.center_x <= max_x and min_y <= self.center_y <= max_y):
                raise InvalidArgumentError(
                    f"Centre ({self.center_x}, {self.center_y}) is outside bounds {self.bounds}"
                )

    @property
    def half_size(self) -> float:
        return self.side_length / 2

    def contains(self, x: float, y: float) -> bool:
        """Check if point (x, y) is within this square, boundary included."""
        _check_point(x, y)
        min_x, min_y, max_x, max_y = self.bounds
        return min_x <= x <= max_x and min_y <= y <= max_y

    def get_quadrant(self, x: float, y: float) -> Quadrant:
        """
        Get the quadrant of this square that a point falls in.

        Does not check that the square contains the point.
        """
        _check_point(x, y)
        east = x >= self.center_x
        north = y >= self.center_y
        if north:
            return Quadrant.NE if east else Quadrant.NW
        return Quadrant.SE if east else Quadrant.SW

    def sub_square(self, quadrant: Quadrant) -> Square:
        """
        Return the square covering one quadrant of this square.

        The child is centred at the parent's centre offset by a quarter side.
        Its inner edges are the parent's centre lines, so every point that
        get_quadrant assigns to the quadrant is contained in the child.
        """
        try:
            quadrant = Quadrant(quadrant)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid quadrant: {quadrant}") from e

        min_x, min_y, max_x, max_y = self.bounds
        if quadrant in (Quadrant.NE, Quadrant.SE):
            min_x = self.center_x
        else:
            max_x = self.center_x
        if quadrant in (Quadrant.NW, Quadrant.NE):
            min_y = self.center_y
        else:
            max_y = self.center_y

        return Square(
            _midpoint(min_x, max_x),
            _midpoint(min_y, max_y),
            self.side_length / 2,
            bounds=(min_x, min_y, max_x, max_y),
        )


def _midpoint(low: float, high: float) -> float:
    return min(high, low + (high - low) / 2)


def _check_point(x: float, y: float) -> None:
    if not math.isfinite(x):
        raise InvalidArgumentError(f"Illegal x {x}")
    if not math.isfinite(y):
        raise InvalidArgumentError(f"Illegal y {y}")


__all__ = ["Quadrant", "Square"]
