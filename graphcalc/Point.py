"""Immutable 2D point values shared by equation space and screen space.

A ``Point`` carries no notion of which space it lives in; the
:class:`~graphcalc.calculator_frame.CoordinateFrame` is what gives a point its
meaning by converting between the two.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Ordered pair ``(x, y)`` with value semantics.

    Parameters
    ----------
    x : float
        Horizontal coordinate.
    y : float
        Vertical coordinate.

    Examples
    --------
    >>> Point(1.0, 2.0).scale(2.0, -2.0).add(Point(10.0, 10.0))
    Point(x=12.0, y=6.0)
    """

    x: float
    y: float

    def scale(self, sx: float, sy: float) -> "Point":
        """Return a point with each coordinate multiplied by its factor."""
        return Point(self.x * sx, self.y * sy)

    def add(self, other: "Point") -> "Point":
        """Return the component-wise sum with ``other``."""
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        """Return the component-wise difference ``self - other``."""
        return Point(self.x - other.x, self.y - other.y)


ORIGIN = Point(0.0, 0.0)

__all__ = ["ORIGIN", "Point"]
