"""Interactive calculator session: frame, animation parameter, and plots.

Purpose
-------
This module provides ``GraphingCalculator``, the object that owns all mutable
state of one plotting session and decides what must be recomputed when that
state changes. It connects registered functions to a drawing surface so users
can explore animated, parameterized curves.

Concepts and structure
----------------------
The implementation is composition-based:

- ``CoordinateFrame`` (from ``calculator_frame``) owns the screen/equation map.
- ``FunctionPlot`` (from ``calculator_plot``) owns per-curve sampling.
- ``DrawingSurface`` (from ``calculator_canvas``) receives polylines and axes.
- ``AnimationTimer`` (from ``calculator_animation``) produces periodic ticks.
- ``GraphingCalculator`` coordinates the invalidation policy below.

Invalidation policy
-------------------
- origin, scale, or viewport change: every plot is recalculated and the axes
  are redrawn;
- animation-parameter change: every plot is recalculated on the existing
  frame;
- ``show``: all plots are recolored, only the new plot is recalculated.

Every public mutator runs the whole sequence (mutate, recalculate, draw)
before returning, so no caller ever observes a stale polyline. If a plot's
function raises during that pass, the previous state is restored and
resampled before the error propagates.

Logging
-------
This module uses the standard Python ``logging`` framework (no prints). By
default it installs a ``NullHandler``, so you will see nothing unless you
configure logging::

    import logging
    logging.getLogger("graphcalc").setLevel(logging.DEBUG)

Examples
--------
>>> import math
>>> from graphcalc import GraphingCalculator
>>> calc = GraphingCalculator(800, 600)  # doctest: +SKIP
>>> calc.show(lambda x: x * x)  # doctest: +SKIP
>>> calc.show(lambda x, t: math.sin(x - t))  # doctest: +SKIP
>>> calc  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Sequence, Union

from IPython.display import display
from sympy.core.symbol import Symbol

from .calculator_animation import AnimationTimer
from .calculator_canvas import DrawingSurface, PlotlyCanvas
from .calculator_config import CalculatorConfig
from .calculator_errors import ConfigurationError
from .calculator_events import (
    ZOOM_IN,
    ZOOM_OUT,
    ButtonClick,
    CalculatorEvent,
    Drag,
    FrameChanged,
    GestureEnded,
    GestureStarted,
    ParameterChanged,
    PlotAdded,
    Press,
    Release,
    Tick,
    ViewportResized,
)
from .calculator_frame import CoordinateFrame, Viewport
from .calculator_function import adapt_function
from .calculator_plot import FunctionPlot
from .CalculatorSnapshot import CalculatorSnapshot, FunctionPlotSnapshot
from .InputConvert import InputConvert
from .Point import Point

# Module logger
# - Uses a NullHandler so importing this module never configures global logging.
# - Callers can enable logs via standard logging configuration.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

PointLike = Union[Point, Sequence[float]]

X_AXIS_KEY = "__x_axis__"
Y_AXIS_KEY = "__y_axis__"


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Expected a Point or (x, y) pair, got {value!r}.") from e
    return Point(InputConvert(x, name="x"), InputConvert(y, name="y"))


class GraphingCalculator:
    """
    One interactive plotting session.

    Parameters
    ----------
    width, height : float, optional
        Viewport size in pixels.
    canvas : DrawingSurface or None, optional
        Drawing collaborator. ``None`` creates a :class:`PlotlyCanvas`.
    config : CalculatorConfig or None, optional
        Interaction and style constants.
    widget : bool, optional
        When creating the default canvas, back it with a Plotly
        ``FigureWidget`` for live notebook updates.

    Notes
    -----
    The initial frame puts the equation origin at the viewport center with
    ``scale = min(width, height) / config.initial_scale_divisor``.
    """

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        *,
        canvas: Optional[DrawingSurface] = None,
        config: Optional[CalculatorConfig] = None,
        widget: bool = False,
    ) -> None:
        self._config = config if config is not None else CalculatorConfig()
        self._viewport = Viewport(width, height)
        self._frame = CoordinateFrame.centered(
            self._viewport, scale_divisor=self._config.initial_scale_divisor
        )
        self._canvas: DrawingSurface = (
            canvas if canvas is not None else PlotlyCanvas(self._viewport.width, self._viewport.height, widget=widget)
        )
        self._plots: list[FunctionPlot] = []
        self._plot_index: dict[str, FunctionPlot] = {}
        self._plot_counter = 0
        self._animation_parameter = 0.0
        self._animating = True
        self._timer: Optional[AnimationTimer] = None
        self._x_range: tuple[float, float] = (0.0, 0.0)
        self._step = 0.0
        self._recalc_info_last_log_t = 0.0
        self._recalc_debug_last_log_t = 0.0

        self._coordinates_changed(reason="init")

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def canvas(self) -> DrawingSurface:
        """Return the drawing collaborator."""
        return self._canvas

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def frame(self) -> CoordinateFrame:
        """Return the current (immutable) coordinate frame."""
        return self._frame

    @property
    def origin(self) -> Point:
        """The position within the viewport of ``(0, 0)`` in equation space."""
        return self._frame.origin

    @property
    def scale(self) -> float:
        """The number of pixels for a distance of 1 in equation space."""
        return self._frame.scale

    @property
    def x_range(self) -> tuple[float, float]:
        """Return the visible ``(xmin, xmax)`` used for sampling."""
        return self._x_range

    @property
    def sampling_step(self) -> float:
        return self._step

    @property
    def animation_parameter(self) -> float:
        """The second argument passed to every parametric function."""
        return self._animation_parameter

    @property
    def animating(self) -> bool:
        """``False`` while a press/drag gesture suspends timer advancement."""
        return self._animating

    @property
    def plots(self) -> tuple[FunctionPlot, ...]:
        """Return plots in insertion (draw and color) order."""
        return tuple(self._plots)

    def plot(self, plot_id: str) -> FunctionPlot:
        """Return plot ``plot_id`` or raise ``KeyError``."""
        if plot_id not in self._plot_index:
            raise KeyError(f"Unknown plot: {plot_id}")
        return self._plot_index[plot_id]

    def to_screen(self, p: PointLike) -> Point:
        """Map an equation-space point to screen space using the current frame."""
        return self._frame.to_screen(_as_point(p))

    def to_equation(self, p: PointLike) -> Point:
        """Map a screen-space point to equation space using the current frame."""
        return self._frame.to_equation(_as_point(p))

    # ------------------------------------------------------------------
    # Frame mutation
    # ------------------------------------------------------------------

    def set_origin(self, origin: PointLike) -> None:
        """Move the equation origin to screen position ``origin`` and redraw everything."""
        self._transition(reason="origin", frame=self._frame.moved(_as_point(origin)))

    def set_scale(self, scale: Union[float, str]) -> None:
        """
        Set pixels per equation unit and redraw everything.

        Raises
        ------
        ConfigurationError
            If ``scale`` is not a finite positive number. The frame is left
            unchanged.
        """
        self._transition(reason="scale", frame=self._frame.rescaled(scale))

    def set_frame(self, *, origin: Optional[PointLike] = None, scale: Optional[Union[float, str]] = None) -> None:
        """Change origin and/or scale with a single recalculation pass."""
        frame = self._frame
        if origin is not None:
            frame = frame.moved(_as_point(origin))
        if scale is not None:
            frame = frame.rescaled(scale)
        self._transition(reason="frame", frame=frame)

    def zoom(self, factor: Union[float, str]) -> None:
        """Multiply the scale by ``factor`` around the existing origin."""
        self._transition(reason="zoom", frame=self._frame.zoomed(factor))

    def zoom_in(self) -> None:
        self.zoom(self._config.zoom_in_factor)

    def zoom_out(self) -> None:
        self.zoom(self._config.zoom_out_factor)

    def set_viewport(self, width: float, height: float) -> None:
        """Resize the viewport, keeping origin and scale, and redraw everything."""
        self._transition(reason="resize", viewport=Viewport(width, height))

    # ------------------------------------------------------------------
    # Animation parameter
    # ------------------------------------------------------------------

    def set_animation_parameter(self, value: Union[float, str]) -> None:
        """
        Change the shared parameter and recalculate every plot.

        Raises
        ------
        ConfigurationError
            If ``value`` is not a finite real number.
        Exception
            Whatever a plot's function raises outside its math domain. The
            previous parameter is restored and every plot resampled with it.
        """
        value = InputConvert(value, name="animation parameter")
        self._transition(reason="parameter", parameter=value)

    def begin_gesture(self) -> None:
        """Suspend timer-driven advancement until :meth:`end_gesture`."""
        self._animating = False

    def end_gesture(self) -> None:
        self._animating = True

    def drag(self, dx: float) -> None:
        """Add ``dx / viewport width`` to the animation parameter."""
        dx = InputConvert(dx, name="drag dx")
        self.set_animation_parameter(dx / self._viewport.width + self._animation_parameter)

    def tick(self) -> None:
        """Advance the parameter by ``config.tick_increment`` unless a gesture is active."""
        if self._animating:
            self.set_animation_parameter(self._animation_parameter + self._config.tick_increment)

    def start_animation(self) -> AnimationTimer:
        """Start periodic ticks on the running asyncio loop and return the timer."""
        if self._timer is None:
            self._timer = AnimationTimer(
                lambda: self.dispatch(Tick()), interval_ms=self._config.tick_interval_ms
            )
        self._timer.start()
        return self._timer

    def stop_animation(self) -> None:
        if self._timer is not None:
            self._timer.stop()

    # ------------------------------------------------------------------
    # Plot registration
    # ------------------------------------------------------------------

    def show(
        self,
        function: Any,
        *,
        parametric: Optional[bool] = None,
        var: Optional[Symbol] = None,
        param: Optional[Symbol] = None,
        plot_id: str = "",
        label: str = "",
    ) -> FunctionPlot:
        """
        Show ``function`` on the calculator.

        Parameters
        ----------
        function : callable or sympy.Expr
            ``f(x)``, ``f(x, t)``, or a SymPy expression. The second argument
            of a parametric function is the animation parameter.
        parametric : bool or None, optional
            Force the callable shape instead of detecting it.
        var, param : sympy.Symbol, optional
            Plot variable and parameter symbol for SymPy expressions.
        plot_id : str, optional
            Identifier; defaults to the first free ``"f<n>"``.
        label : str, optional
            Display label.

        Returns
        -------
        FunctionPlot
            The new plot, already recalculated.

        Notes
        -----
        Existing plots are recolored (the hue spacing depends on the plot
        count) but not recalculated; their polylines already match the
        current frame and parameter.
        """
        adapted = adapt_function(function, parametric=parametric, var=var, param=param)
        key = plot_id or self._default_plot_id()
        if key in self._plot_index or key in (X_AXIS_KEY, Y_AXIS_KEY):
            raise ValueError(f"Plot '{key}' already exists")

        plot = FunctionPlot(adapted, plot_id=key, label=label)
        self._plots.append(plot)
        self._plot_index[key] = plot

        try:
            self._recolor_plots()
            self._recalculate(plot)
        except Exception:
            # A function that fails outside its math domain is not registered.
            self._plots.pop()
            del self._plot_index[key]
            self._recolor_plots()
            raise
        self._log_recalculate(reason="show", count=1)
        return plot

    # ------------------------------------------------------------------
    # Event dispatch
    # ------------------------------------------------------------------

    def dispatch(self, event: CalculatorEvent) -> Optional[FunctionPlot]:
        """
        Apply one input or state-transition event.

        Returns
        -------
        FunctionPlot or None
            The new plot for ``PlotAdded``; ``None`` otherwise.

        Raises
        ------
        TypeError
            For an unknown event type.
        ValueError
            For a ``ButtonClick`` with an unknown button name.
        """
        if isinstance(event, FrameChanged):
            self.set_frame(origin=event.origin, scale=event.scale)
        elif isinstance(event, ParameterChanged):
            self.set_animation_parameter(event.value)
        elif isinstance(event, PlotAdded):
            return self.show(
                event.function,
                parametric=event.parametric,
                var=event.var,
                param=event.param,
                plot_id=event.plot_id,
                label=event.label,
            )
        elif isinstance(event, (GestureStarted, Press)):
            self.begin_gesture()
        elif isinstance(event, (GestureEnded, Release)):
            self.end_gesture()
        elif isinstance(event, Drag):
            self.drag(event.dx)
        elif isinstance(event, Tick):
            self.tick()
        elif isinstance(event, ButtonClick):
            if event.name == ZOOM_IN:
                self.zoom_in()
            elif event.name == ZOOM_OUT:
                self.zoom_out()
            else:
                raise ValueError(f"Unknown button: {event.name!r}")
        elif isinstance(event, ViewportResized):
            self.set_viewport(event.width, event.height)
        else:
            raise TypeError(f"Unsupported event: {event!r}")
        return None

    # ------------------------------------------------------------------
    # Snapshots and display
    # ------------------------------------------------------------------

    def snapshot(self) -> CalculatorSnapshot:
        """Return an immutable record of the current state."""
        return CalculatorSnapshot(
            width=self._viewport.width,
            height=self._viewport.height,
            origin=self._frame.origin,
            scale=self._frame.scale,
            x_range=self._x_range,
            step=self._step,
            animation_parameter=self._animation_parameter,
            animating=self._animating,
            plots=tuple(
                FunctionPlotSnapshot(
                    id=p.id,
                    label=p.label,
                    parametric=p.parametric,
                    color=p.color,
                    points=p.points,
                    revision=p.revision,
                )
                for p in self._plots
            ),
        )

    def _ipython_display_(self, **kwargs: Any) -> None:
        """Display the canvas figure when the calculator is the last cell expression."""
        fig = getattr(self._canvas, "fig", None)
        display(fig if fig is not None else repr(self))

    def __repr__(self) -> str:
        return (
            f"GraphingCalculator(viewport={self._viewport.width:g}x{self._viewport.height:g}, "
            f"origin={self._frame.origin}, scale={self._frame.scale:g}, "
            f"t={self._animation_parameter:g}, plots={len(self._plots)})"
        )

    # ------------------------------------------------------------------
    # Recalculation internals
    # ------------------------------------------------------------------

    def _default_plot_id(self) -> str:
        while f"f{self._plot_counter}" in self._plot_index:
            self._plot_counter += 1
        return f"f{self._plot_counter}"

    def _transition(
        self,
        *,
        reason: str,
        frame: Optional[CoordinateFrame] = None,
        viewport: Optional[Viewport] = None,
        parameter: Optional[float] = None,
    ) -> None:
        """
        Commit new frame, viewport, or parameter state and recalculate.

        If any plot raises during the pass, the previous state is restored and
        every plot is resampled against it before the error propagates.
        """
        previous = (self._frame, self._viewport, self._animation_parameter)
        if frame is not None:
            self._frame = frame
        if viewport is not None:
            self._viewport = viewport
        if parameter is not None:
            self._animation_parameter = parameter

        try:
            if viewport is not None:
                self._canvas.set_size(self._viewport.width, self._viewport.height)
            if frame is None and viewport is None:
                self._recalculate_all(reason=reason)
            else:
                self._coordinates_changed(reason=reason)
        except Exception:
            logger.warning(f"recalculate(reason={reason}) failed; restoring previous state")
            self._frame, self._viewport, self._animation_parameter = previous
            if viewport is not None:
                self._canvas.set_size(self._viewport.width, self._viewport.height)
            self._coordinates_changed(reason="rollback")
            raise

    def _coordinates_changed(self, *, reason: str) -> None:
        self._x_range = self._frame.visible_x_range(self._viewport.width)
        self._step = self._frame.sampling_step()
        self._draw_axes()
        self._recalculate_all(reason=reason)

    def _recalculate_all(self, *, reason: str) -> None:
        for plot in self._plots:
            self._recalculate(plot)
        self._log_recalculate(reason=reason, count=len(self._plots))

    def _recalculate(self, plot: FunctionPlot) -> None:
        xmin, xmax = self._x_range
        plot.recalculate(self._animation_parameter, xmin, xmax, self._step, self._frame.to_screen)
        self._canvas.draw_polyline(plot.id, plot.points, plot.color, self._config.stroke_width)

    def _recolor_plots(self) -> None:
        total = len(self._plots)
        for index, plot in enumerate(self._plots):
            plot.set_color(index, total)
            # Existing polylines stay valid; only their stroke color is resent.
            if plot.revision:
                self._canvas.draw_polyline(plot.id, plot.points, plot.color, self._config.stroke_width)

    def _draw_axes(self) -> None:
        origin = self._frame.origin
        width, height = self._viewport.width, self._viewport.height
        color, stroke = self._config.axis_color, self._config.axis_width
        self._canvas.draw_line(X_AXIS_KEY, Point(0.0, origin.y), Point(width, origin.y), color, stroke)
        self._canvas.draw_line(Y_AXIS_KEY, Point(origin.x, 0.0), Point(origin.x, height), color, stroke)

    def _log_recalculate(self, *, reason: str, count: int) -> None:
        """Log recalculation passes with rate-limiting."""
        now = time.monotonic()
        if logger.isEnabledFor(logging.INFO) and (now - self._recalc_info_last_log_t) > 1.0:
            self._recalc_info_last_log_t = now
            logger.info(f"recalculate(reason={reason}) plots={count}")

        if logger.isEnabledFor(logging.DEBUG) and (now - self._recalc_debug_last_log_t) > 0.5:
            self._recalc_debug_last_log_t = now
            logger.debug(f"ranges x={self._x_range} step={self._step} t={self._animation_parameter}")


PlotSession = GraphingCalculator

__all__ = ["GraphingCalculator", "PlotSession", "X_AXIS_KEY", "Y_AXIS_KEY"]
