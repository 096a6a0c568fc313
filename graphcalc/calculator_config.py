"""Tunable constants for a calculator session.

``CalculatorConfig`` collects the knobs the interaction policy depends on so a
host can adjust them in one place. Values are validated on construction; an
invalid value raises :class:`~graphcalc.calculator_errors.ConfigurationError`
instead of being clamped.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from .calculator_errors import ConfigurationError
from .InputConvert import InputConvert

CALCULATOR_CONFIG_OPTIONS: dict[str, str] = {
    "tick_increment": "Animation-parameter delta applied on each timer tick while no gesture is active.",
    "tick_interval_ms": "Timer period in milliseconds.",
    "zoom_in_factor": "Scale multiplier applied by the zoom-in button.",
    "zoom_out_factor": "Scale multiplier applied by the zoom-out button.",
    "axis_color": "Stroke color of the two axis lines.",
    "axis_width": "Stroke width of the two axis lines in pixels.",
    "stroke_width": "Stroke width of function polylines in pixels.",
    "initial_scale_divisor": "Initial scale is min(width, height) divided by this value.",
}

_POSITIVE_FIELDS = (
    "tick_interval_ms",
    "zoom_in_factor",
    "zoom_out_factor",
    "axis_width",
    "stroke_width",
    "initial_scale_divisor",
)


@dataclass(frozen=True)
class CalculatorConfig:
    """Interaction and style constants. See ``CALCULATOR_CONFIG_OPTIONS``."""

    tick_increment: float = 0.01
    tick_interval_ms: float = 16.0
    zoom_in_factor: float = 1.5
    zoom_out_factor: float = 0.5
    axis_color: str = "#A1A1A1"
    axis_width: float = 0.25
    stroke_width: float = 1.5
    initial_scale_divisor: float = 4.0

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "axis_color":
                continue
            value = InputConvert(
                getattr(self, f.name),
                name=f.name,
                positive=f.name in _POSITIVE_FIELDS,
            )
            object.__setattr__(self, f.name, value)
        if not isinstance(self.axis_color, str) or not self.axis_color.strip():
            raise ConfigurationError(f"axis_color must be a non-empty string, got {self.axis_color!r}.")


__all__ = ["CALCULATOR_CONFIG_OPTIONS", "CalculatorConfig"]
