# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from math import isfinite

from typing_extensions import Self

from .protocols import Coordinates, Point


@dataclass(frozen=True)
class Rectangle:
    """Rectangle is an axis-aligned, closed box (an MBR) described by its
    lowest and highest corners. For every dimension ``low[d] <= high[d]``,
    and all coordinates are finite.

    Rectangles are immutable - "moving" an object means replacing its rectangle.
    Use :py:meth:`from_corners` to build a rectangle from two arbitrary corners.
    """

    low: Coordinates
    high: Coordinates

    def __post_init__(self) -> None:
        if len(self.low) != len(self.high):
            raise ValueError(
                f"Rectangle corners have different dimensions: {len(self.low)} and {len(self.high)}"
            )

        for dim, (lo, hi) in enumerate(zip(self.low, self.high)):
            if not (isfinite(lo) and isfinite(hi)):
                raise ValueError(f"Rectangle has a non-finite coordinate in dimension {dim}: {lo}, {hi}")
            if lo > hi:
                raise ValueError(
                    f"Rectangle is not normalized in dimension {dim}: {lo} > {hi}. "
                    "Use Rectangle.from_corners to build rectangles from arbitrary corners."
                )

    @property
    def dimension(self) -> int:
        return len(self.low)

    @classmethod
    def from_corners(cls, a: Coordinates, b: Coordinates) -> Self:
        """Creates a Rectangle spanning two opposite corners, given in any order."""
        if len(a) != len(b):
            raise ValueError(f"Corners have different dimensions: {len(a)} and {len(b)}")
        return cls(
            tuple(min(x, y) for x, y in zip(a, b)),
            tuple(max(x, y) for x, y in zip(a, b)),
        )

    @classmethod
    def from_point(cls, p: Point) -> Self:
        """Creates a degenerate Rectangle covering a single point."""
        return cls(tuple(p), tuple(p))


def _check_dimensions(a: int, b: int) -> None:
    if a != b:
        raise ValueError(f"Dimension mismatch: {a} and {b}")


def intersects(a: Rectangle, b: Rectangle) -> bool:
    """Checks whether two rectangles overlap in every dimension.
    Boundaries are inclusive, so touching rectangles intersect.
    """
    _check_dimensions(a.dimension, b.dimension)
    for a_low, a_high, b_low, b_high in zip(a.low, a.high, b.low, b.high):
        if a_low > b_high or a_high < b_low:
            return False
    return True


def contains_point(rect: Rectangle, point: Point) -> bool:
    """Checks whether a point lies inside or on the boundary of a rectangle."""
    _check_dimensions(rect.dimension, len(point))
    return all(low <= x <= high for low, x, high in zip(rect.low, point, rect.high))


def min_squared_distance(rect: Rectangle, point: Point) -> float:
    """Calculates the squared `Euclidean distance <https://en.wikipedia.org/wiki/Euclidean_distance>`_
    between a point and the closest point on or inside a rectangle.

    Returns 0 for points inside the rectangle or on its boundary.
    """
    _check_dimensions(rect.dimension, len(point))
    total = 0.0
    for low, high, x in zip(rect.low, rect.high, point):
        if x > high:
            total += (x - high) * (x - high)
        elif x < low:
            total += (low - x) * (low - x)
    return total
