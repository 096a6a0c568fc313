"""Immutable snapshots of calculator and per-plot state.

A ``CalculatorSnapshot`` captures what an observer would see after one event
has been processed: the frame, the derived sampling range, the animation
parameter, and each plot's color and polyline. Snapshots are plain values, so
two snapshots taken around an operation can be compared directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .Point import Point


@dataclass(frozen=True)
class FunctionPlotSnapshot:
    """Immutable record of one plot's materialized state.

    Parameters
    ----------
    id : str
        Plot identifier.
    label : str
        Display label.
    parametric : bool
        Whether the function reads the animation parameter.
    color : str or None
        Assigned color.
    points : tuple[Point, ...]
        Screen-space polyline.
    revision : int
        Number of recalculations so far.
    """

    id: str
    label: str
    parametric: bool
    color: Optional[str]
    points: tuple[Point, ...]
    revision: int

    def __repr__(self) -> str:
        return (
            f"FunctionPlotSnapshot(id={self.id!r}, label={self.label!r}, "
            f"color={self.color!r}, points={len(self.points)}, revision={self.revision})"
        )


@dataclass(frozen=True)
class CalculatorSnapshot:
    """Immutable record of a calculator's state.

    Parameters
    ----------
    width, height : float
        Viewport size in pixels.
    origin : Point
        Screen position of the equation origin.
    scale : float
        Pixels per equation unit.
    x_range : tuple[float, float]
        Visible ``(xmin, xmax)``.
    step : float
        Sampling step.
    animation_parameter : float
        Shared parameter value.
    animating : bool
        ``False`` while a gesture suspends automatic advancement.
    plots : tuple[FunctionPlotSnapshot, ...]
        Plots in insertion order.
    """

    width: float
    height: float
    origin: Point
    scale: float
    x_range: tuple[float, float]
    step: float
    animation_parameter: float
    animating: bool
    plots: tuple[FunctionPlotSnapshot, ...]

    def plot(self, plot_id: str) -> FunctionPlotSnapshot:
        """Return the snapshot of ``plot_id`` or raise ``KeyError``."""
        for p in self.plots:
            if p.id == plot_id:
                return p
        raise KeyError(f"Unknown plot: {plot_id}")


__all__ = ["CalculatorSnapshot", "FunctionPlotSnapshot"]
