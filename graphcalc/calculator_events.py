"""Input and state-transition event payloads.

Every mutation of a :class:`~graphcalc.GraphingCalculator.GraphingCalculator`
can be expressed as one of these immutable values and applied through
``GraphingCalculator.dispatch``. Hosts translate their own input plumbing
(mouse callbacks, widget clicks, timers) into these events; tests feed them
directly without any display stack.

Two families exist:

- raw input: ``Press``, ``Release``, ``Drag``, ``Tick``, ``ButtonClick``,
  ``ViewportResized``;
- state transitions: ``FrameChanged``, ``ParameterChanged``, ``PlotAdded``,
  ``GestureStarted``, ``GestureEnded``.

Raw input events are mapped onto the transitions by the calculator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from sympy.core.symbol import Symbol

from .Point import Point

ZOOM_IN = "zoom_in"
ZOOM_OUT = "zoom_out"


@dataclass(frozen=True)
class FrameChanged:
    """Replace the origin and/or scale. ``None`` leaves that component unchanged."""

    origin: Optional[Point] = None
    scale: Optional[float] = None


@dataclass(frozen=True)
class ParameterChanged:
    """Set the shared animation parameter to ``value``."""

    value: float


@dataclass(frozen=True)
class PlotAdded:
    """Register a new function.

    Parameters
    ----------
    function : callable or sympy.Expr
        Function to show.
    parametric : bool or None
        Force the ``f(x)`` / ``f(x, t)`` shape; ``None`` detects it.
    var, param : sympy.Symbol or None
        Plot variable and parameter symbol for SymPy expressions.
    plot_id, label : str
        Optional identifier and display label.
    """

    function: Any
    parametric: Optional[bool] = None
    var: Optional[Symbol] = None
    param: Optional[Symbol] = None
    plot_id: str = ""
    label: str = ""


@dataclass(frozen=True)
class GestureStarted:
    """A press-and-hold gesture began; automatic animation is suspended."""


@dataclass(frozen=True)
class GestureEnded:
    """The active gesture ended; automatic animation resumes."""


@dataclass(frozen=True)
class Press:
    """Pointer pressed at ``position`` (screen space)."""

    position: Point = field(default_factory=lambda: Point(0.0, 0.0))


@dataclass(frozen=True)
class Release:
    """Pointer released at ``position`` (screen space)."""

    position: Point = field(default_factory=lambda: Point(0.0, 0.0))


@dataclass(frozen=True)
class Drag:
    """Pointer moved by ``(dx, dy)`` pixels while pressed."""

    dx: float
    dy: float = 0.0


@dataclass(frozen=True)
class Tick:
    """One periodic timer callback."""


@dataclass(frozen=True)
class ButtonClick:
    """A named button was clicked (``"zoom_in"`` or ``"zoom_out"``)."""

    name: str


@dataclass(frozen=True)
class ViewportResized:
    """The drawing surface now measures ``width`` x ``height`` pixels."""

    width: float
    height: float


CalculatorEvent = Union[
    FrameChanged,
    ParameterChanged,
    PlotAdded,
    GestureStarted,
    GestureEnded,
    Press,
    Release,
    Drag,
    Tick,
    ButtonClick,
    ViewportResized,
]

__all__ = [
    "ButtonClick",
    "CalculatorEvent",
    "Drag",
    "FrameChanged",
    "GestureEnded",
    "GestureStarted",
    "ParameterChanged",
    "PlotAdded",
    "Press",
    "Release",
    "Tick",
    "ViewportResized",
    "ZOOM_IN",
    "ZOOM_OUT",
]
