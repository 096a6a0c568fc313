"""Drawing-surface contract and the Plotly-backed implementation.

Purpose
-------
The calculator core never draws pixels itself. It calls a
:class:`DrawingSurface` with screen-space polylines and axis segments, keyed
by a stable string so repeated draws replace rather than accumulate.

``PlotlyCanvas`` implements the contract on a ``plotly.graph_objects.Figure``
(or a ``FigureWidget`` for live notebook updates). The figure's axes are pinned
to the pixel rectangle of the viewport with the y axis reversed, so screen
coordinates can be handed to Plotly unchanged.

Important gotchas
-----------------
- Plotly breaks a line at NaN but not at infinities; ``PlotlyCanvas`` maps
  every non-finite coordinate to NaN before pushing data.
- Traces are updated in place inside ``batch_update()``; consumers should not
  assume a new trace object per draw.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, Sequence, runtime_checkable

import numpy as np
import plotly.graph_objects as go

from .Point import Point

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@runtime_checkable
class DrawingSurface(Protocol):
    """Contract for rendering engines used by the calculator."""

    def draw_polyline(self, key: str, points: Sequence[Point], color: Optional[str], width: float) -> None: ...
    def draw_line(self, key: str, start: Point, end: Point, color: str, width: float) -> None: ...
    def set_size(self, width: float, height: float) -> None: ...
    def clear(self) -> None: ...


def _finite_or_nan(values: np.ndarray) -> np.ndarray:
    return np.where(np.isfinite(values), values, np.nan)


class PlotlyCanvas:
    """Plotly figure drawing surface addressed in screen pixels.

    Parameters
    ----------
    width, height : float
        Initial pixel size of the surface.
    widget : bool, optional
        Use ``go.FigureWidget`` (requires a notebook frontend) instead of a
        static ``go.Figure``.
    """

    def __init__(self, width: float, height: float, *, widget: bool = False) -> None:
        self.fig: Any = go.FigureWidget() if widget else go.Figure()
        self._traces: Dict[str, Any] = {}
        self.fig.update_layout(
            showlegend=False,
            margin=dict(l=0, r=0, t=0, b=0),
            plot_bgcolor="white",
            dragmode=False,
        )
        self.fig.update_xaxes(visible=False, fixedrange=True)
        self.fig.update_yaxes(visible=False, fixedrange=True)
        self.set_size(width, height)

    def _trace(self, key: str) -> Any:
        trace = self._traces.get(key)
        if trace is None:
            self.fig.add_trace(go.Scatter(x=[], y=[], mode="lines", name=key, hoverinfo="skip"))
            trace = self.fig.data[-1]
            self._traces[key] = trace
        return trace

    @property
    def keys(self) -> tuple[str, ...]:
        """Return trace keys in draw order."""
        return tuple(self._traces)

    def trace_for(self, key: str) -> Optional[Any]:
        """Return the live Plotly trace drawn under ``key``, if any."""
        return self._traces.get(key)

    def set_size(self, width: float, height: float) -> None:
        """Pin the axes to the ``width`` x ``height`` pixel rectangle."""
        logger.debug(f"canvas size {width}x{height}")
        with self.fig.batch_update():
            self.fig.layout.width = width
            self.fig.layout.height = height
            self.fig.layout.xaxis.range = [0, width]
            self.fig.layout.yaxis.range = [height, 0]

    def draw_polyline(self, key: str, points: Sequence[Point], color: Optional[str], width: float) -> None:
        xs = _finite_or_nan(np.fromiter((p.x for p in points), dtype=float, count=len(points)))
        ys = _finite_or_nan(np.fromiter((p.y for p in points), dtype=float, count=len(points)))
        trace = self._trace(key)
        with self.fig.batch_update():
            trace.x = xs
            trace.y = ys
            trace.line.width = width
            if color is not None:
                trace.line.color = color

    def draw_line(self, key: str, start: Point, end: Point, color: str, width: float) -> None:
        trace = self._trace(key)
        with self.fig.batch_update():
            trace.x = [start.x, end.x]
            trace.y = [start.y, end.y]
            trace.line.color = color
            trace.line.width = width

    def clear(self) -> None:
        """Remove every trace drawn so far."""
        self.fig.data = ()
        self._traces.clear()


__all__ = ["DrawingSurface", "PlotlyCanvas"]
