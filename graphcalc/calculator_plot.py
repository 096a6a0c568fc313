"""Per-curve sampling model used by :mod:`graphcalc.GraphingCalculator`.

Purpose
-------
Defines ``FunctionPlot``, the unit that turns one registered function into one
screen-space polyline. The class owns the sampling walk, per-sample anomaly
handling, and the color slot it was assigned among its siblings.

Concepts and structure
----------------------
Each ``FunctionPlot`` instance owns:

- the adapted function (always evaluated as ``f(x, t)``),
- rendering state (sampled equation-space arrays and the screen polyline),
- style state (color assigned from its index among all plots).

Architecture notes
------------------
``FunctionPlot`` knows nothing about the session. The session hands it a
frame snapshot (``xmin``, ``xmax``, ``step``, ``to_screen``) and the current
animation parameter; recalculation replaces the whole polyline and touches no
other state.

Important gotchas
-----------------
- The last sample may overshoot ``xmax`` by less than one ``step``; see
  :func:`sample_count` for the exact boundary rule.
- NaN and infinite values are kept in the polyline. Clipping is the drawing
  surface's job, so the polyline length depends only on the range and step.
- ``set_color`` must be called for every plot whenever the plot count changes.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Optional

import numpy as np
from plotly.colors import cyclical, sample_colorscale

from .calculator_errors import ConfigurationError
from .calculator_function import AdaptedFunction
from .Point import Point

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

# Relative tolerance for treating (xmax - xmin) / step as an exact integer.
_RATIO_SNAP_TOLERANCE = 1e-9

HUE_WHEEL = cyclical.HSV


def sample_count(xmin: float, xmax: float, step: float) -> int:
    """
    Return the number of samples taken across ``[xmin, xmax]``.

    The walk starts at ``xmin`` and keeps going until a sample lands at or
    past ``xmax``, so the count is ``ceil((xmax - xmin) / step) + 1``. A ratio
    within floating-point noise of an integer counts as that integer, which
    keeps an exact fit from gaining a spurious overshooting sample.

    Parameters
    ----------
    xmin, xmax : float
        Sampling bounds, ``xmin <= xmax``.
    step : float
        Positive increment.

    Returns
    -------
    int

    Examples
    --------
    >>> sample_count(0.0, 1.0, 0.25)
    5
    >>> sample_count(0.0, 1.1, 0.25)
    6
    """
    if not (math.isfinite(step) and step > 0):
        raise ConfigurationError(f"step must be finite and > 0, got {step!r}.")
    if not (math.isfinite(xmin) and math.isfinite(xmax)):
        raise ConfigurationError(f"sampling bounds must be finite, got ({xmin!r}, {xmax!r}).")
    if xmax < xmin:
        raise ConfigurationError(f"xmin must be <= xmax, got ({xmin!r}, {xmax!r}).")

    ratio = (xmax - xmin) / step
    nearest = round(ratio)
    if abs(ratio - nearest) <= _RATIO_SNAP_TOLERANCE * max(1.0, abs(ratio)):
        ratio = nearest
    return int(math.ceil(ratio)) + 1


def sample_xs(xmin: float, xmax: float, step: float) -> np.ndarray:
    """Return the x-ascending sample positions ``xmin + i * step``."""
    return xmin + step * np.arange(sample_count(xmin, xmax, step), dtype=float)


def hue_color(index: int, total: int) -> str:
    """
    Return the color for slot ``index`` of ``total`` evenly spaced hues.

    Examples
    --------
    >>> hue_color(0, 3) == hue_color(0, 3)
    True
    """
    if total <= 0:
        raise ValueError(f"total must be > 0, got {total!r}")
    if not 0 <= index < total:
        raise ValueError(f"index must be in [0, {total}), got {index!r}")
    return sample_colorscale(HUE_WHEEL, [index / total])[0]


def _as_sample_value(y: Any) -> float:
    """Coerce one function result to float; complex results become NaN."""
    if isinstance(y, complex) or np.iscomplexobj(y):
        y = complex(y)
        return float(y.real) if y.imag == 0 else math.nan
    return float(y)


class FunctionPlot:
    """
    One function drawn on the calculator's shared frame.

    Conceptually, a ``FunctionPlot`` is "one function on one set of axes".
    It knows how to:

    - walk the visible x-range at the frame's sampling step,
    - evaluate ``f(x, t)`` at each sample, turning math-domain errors into NaN,
    - map every sample through the frame into screen space.

    Parameters
    ----------
    function : AdaptedFunction
        Function normalized by :func:`graphcalc.calculator_function.adapt_function`.
    plot_id : str
        Stable identifier within the owning calculator.
    label : str, optional
        Display label; defaults to the function's label or ``plot_id``.
    """

    def __init__(self, function: AdaptedFunction, plot_id: str, label: str = "") -> None:
        self._function = function
        self.id = plot_id
        self.label = label or function.label or plot_id
        self.color: Optional[str] = None
        self._points: tuple[Point, ...] = ()
        self._x_data: Optional[np.ndarray] = None
        self._y_data: Optional[np.ndarray] = None
        self._revision = 0

    @property
    def function(self) -> AdaptedFunction:
        """Return the adapted function this plot evaluates."""
        return self._function

    @property
    def parametric(self) -> bool:
        return self._function.parametric

    @property
    def points(self) -> tuple[Point, ...]:
        """Return the current screen-space polyline (empty before the first recalculation)."""
        return self._points

    @property
    def revision(self) -> int:
        """Return how many times this plot has been recalculated."""
        return self._revision

    @property
    def x_data(self) -> Optional[np.ndarray]:
        """
        Return the last sampled equation-space x values.

        Returns
        -------
        numpy.ndarray or None
            A read-only copy, or ``None`` if this plot has not been
            recalculated yet.
        """
        if self._x_data is None:
            return None
        x_values = self._x_data.copy()
        x_values.flags.writeable = False
        return x_values

    @property
    def y_data(self) -> Optional[np.ndarray]:
        """
        Return the last sampled equation-space y values.

        Returns
        -------
        numpy.ndarray or None
            A read-only copy (may contain NaN or infinities), or ``None`` if
            this plot has not been recalculated yet.
        """
        if self._y_data is None:
            return None
        y_values = self._y_data.copy()
        y_values.flags.writeable = False
        return y_values

    def set_color(self, index: int, total: int) -> None:
        """Assign the hue slot ``index`` out of ``total`` plots."""
        self.color = hue_color(index, total)

    def evaluate(self, x: float, t: float) -> float:
        """Evaluate the function at one sample, mapping math-domain errors to NaN."""
        try:
            y = self._function.evaluate(x, t)
        except (ArithmeticError, ValueError) as exc:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"plot {self.id}: f({x!r}, {t!r}) raised {exc!r}; sampled as NaN")
            return math.nan
        return _as_sample_value(y)

    def recalculate(
        self,
        animation_parameter: float,
        xmin: float,
        xmax: float,
        step: float,
        to_screen: Callable[[Point], Point],
    ) -> tuple[Point, ...]:
        """
        Resample the function and replace the polyline.

        Parameters
        ----------
        animation_parameter : float
            Value passed as ``t`` to every evaluation.
        xmin, xmax, step : float
            Sampling range and increment; see :func:`sample_count`.
        to_screen : callable
            Equation-to-screen mapping from the current frame.

        Returns
        -------
        tuple[Point, ...]
            The new polyline, x-ascending.
        """
        xs = sample_xs(xmin, xmax, step)
        t = float(animation_parameter)
        with np.errstate(all="ignore"):
            ys = np.fromiter((self.evaluate(float(x), t) for x in xs), dtype=float, count=len(xs))

        self._points = tuple(to_screen(Point(float(x), float(y))) for x, y in zip(xs, ys))
        self._x_data = xs
        self._y_data = ys
        self._revision += 1
        return self._points

    def __repr__(self) -> str:
        return f"FunctionPlot(id={self.id!r}, label={self.label!r}, color={self.color!r}, points={len(self._points)})"


__all__ = ["FunctionPlot", "hue_color", "sample_count", "sample_xs"]
