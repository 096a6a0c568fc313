"""Top-level public API for the ``graphcalc`` package.

This module re-exports the session object and the building blocks it is made
of, so users can import from a single namespace, for example:

>>> from graphcalc import GraphingCalculator, Point  # doctest: +SKIP

Both the high-level calculator and the lower-level pieces (frame, per-plot
sampling, events, drawing surfaces) are exposed for hosts that wire their own
input and display stack.
"""

from .calculator_animation import AnimationTimer
from .calculator_canvas import DrawingSurface, PlotlyCanvas
from .calculator_config import CALCULATOR_CONFIG_OPTIONS, CalculatorConfig
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
from .calculator_function import AdaptedFunction, adapt_function
from .calculator_plot import FunctionPlot, hue_color, sample_count, sample_xs
from .CalculatorSnapshot import CalculatorSnapshot, FunctionPlotSnapshot
from .GraphingCalculator import GraphingCalculator, PlotSession
from .InputConvert import InputConvert
from .Point import ORIGIN, Point
