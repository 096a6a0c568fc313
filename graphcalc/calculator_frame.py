"""Viewport and coordinate-frame model for the calculator.

Purpose
-------
Owns the affine map between equation space (where functions live) and screen
space (pixels on the drawing surface). Both types are immutable: the session
replaces its frame on every origin/scale change rather than mutating it, so a
frame handed to a plot during recalculation can never change underneath it.

Concepts
--------
- ``origin`` is the screen position of equation-space ``(0, 0)``.
- ``scale`` is pixels per equation unit, shared by both axes. Screen Y grows
  downward, so the Y component of the map is negated.
- The visible x-range and the sampling step are derived on demand from the
  current viewport width and scale; they are never stored.

Examples
--------
>>> frame = CoordinateFrame(origin=Point(400.0, 300.0), scale=150.0)
>>> frame.to_screen(Point(1.0, 1.0))
Point(x=550.0, y=150.0)
>>> frame.sampling_step() == 2 / 150
True
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .calculator_errors import ConfigurationError
from .InputConvert import InputConvert
from .Point import ORIGIN, Point


@dataclass(frozen=True)
class Viewport:
    """Pixel dimensions of the drawing surface.

    Parameters
    ----------
    width : float
        Surface width in pixels; must be > 0.
    height : float
        Surface height in pixels; must be > 0.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", InputConvert(self.width, name="viewport width", positive=True))
        object.__setattr__(self, "height", InputConvert(self.height, name="viewport height", positive=True))

    def center(self) -> Point:
        """Return the screen-space center of the surface."""
        return Point(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class CoordinateFrame:
    """Affine mapping between equation space and screen space.

    Parameters
    ----------
    origin : Point
        Screen-space location of equation-space ``(0, 0)``.
    scale : float
        Screen pixels per equation-space unit. Must be finite and > 0.

    Raises
    ------
    ConfigurationError
        If ``scale`` is not a finite positive number or ``origin`` is not
        finite.
    """

    origin: Point
    scale: float

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Point):
            raise ConfigurationError(f"origin must be a Point, got {type(self.origin).__name__}.")
        if not (math.isfinite(self.origin.x) and math.isfinite(self.origin.y)):
            raise ConfigurationError(f"origin must be finite, got {self.origin!r}.")
        object.__setattr__(self, "scale", InputConvert(self.scale, name="scale", positive=True))

    @classmethod
    def centered(cls, viewport: Viewport, *, scale_divisor: float = 4.0) -> "CoordinateFrame":
        """Return the initial frame: origin at the viewport center, ``scale = min(w, h) / divisor``."""
        return cls(
            origin=viewport.center(),
            scale=min(viewport.width, viewport.height) / scale_divisor,
        )

    def to_screen(self, p: Point) -> Point:
        """Map an equation-space point to screen space."""
        return p.scale(self.scale, -self.scale).add(self.origin)

    def to_equation(self, p: Point) -> Point:
        """Map a screen-space point to equation space."""
        return p.subtract(self.origin).scale(1 / self.scale, -1 / self.scale)

    def visible_x_range(self, viewport_width: float) -> tuple[float, float]:
        """Return ``(xmin, xmax)`` of equation space across ``viewport_width`` pixels."""
        xmin = self.to_equation(ORIGIN).x
        xmax = self.to_equation(Point(viewport_width, 0.0)).x
        return xmin, xmax

    def visible_y_range(self, viewport_height: float) -> tuple[float, float]:
        """Return ``(ymin, ymax)`` of equation space across ``viewport_height`` pixels."""
        ymin = self.to_equation(Point(0.0, viewport_height)).y
        ymax = self.to_equation(ORIGIN).y
        return ymin, ymax

    def sampling_step(self) -> float:
        """Return the equation-space x increment between samples.

        Two pixels per sample at every zoom level.
        """
        return 2 / self.scale

    def moved(self, origin: Point) -> "CoordinateFrame":
        """Return a frame with the same scale and a new origin."""
        return CoordinateFrame(origin=origin, scale=self.scale)

    def rescaled(self, scale: float) -> "CoordinateFrame":
        """Return a frame with the same origin and a new scale."""
        return CoordinateFrame(origin=self.origin, scale=scale)

    def zoomed(self, factor: float) -> "CoordinateFrame":
        """Return a frame whose scale is multiplied by ``factor`` around the existing origin."""
        factor = InputConvert(factor, name="zoom factor", positive=True)
        return self.rescaled(self.scale * factor)


__all__ = ["CoordinateFrame", "Viewport"]
