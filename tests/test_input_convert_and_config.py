from __future__ import annotations

import math

import numpy as np
import pytest

from graphcalc import CalculatorConfig, ConfigurationError, GraphingCalculator, InputConvert


def test_numbers_and_numpy_scalars_convert() -> None:
    assert InputConvert(3) == 3.0
    assert InputConvert(np.float64(2.5)) == 2.5
    assert InputConvert(complex(4, 0)) == 4.0


def test_strings_parse_directly_or_via_sympy() -> None:
    assert InputConvert(" 1e3 ") == 1000.0
    assert InputConvert("pi/2") == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("value", [True, "", "not a number", complex(1, 1), None, "I"])
def test_invalid_values_are_rejected(value) -> None:
    with pytest.raises(ConfigurationError):
        InputConvert(value, name="scale")


def test_finite_and_positive_preconditions() -> None:
    with pytest.raises(ConfigurationError, match="finite"):
        InputConvert(math.inf)
    with pytest.raises(ConfigurationError, match="> 0"):
        InputConvert(0, positive=True)
    assert InputConvert(math.inf, finite=False) == math.inf


def test_config_defaults() -> None:
    config = CalculatorConfig()

    assert config.tick_increment == 0.01
    assert config.zoom_in_factor == 1.5
    assert config.zoom_out_factor == 0.5
    assert config.axis_color == "#A1A1A1"
    assert config.axis_width == 0.25


def test_config_converts_and_validates() -> None:
    config = CalculatorConfig(zoom_in_factor="3/2", tick_increment=-0.05)

    assert config.zoom_in_factor == 1.5
    assert config.tick_increment == -0.05
    with pytest.raises(ConfigurationError, match="zoom_out_factor"):
        CalculatorConfig(zoom_out_factor=0)
    with pytest.raises(ConfigurationError, match="axis_color"):
        CalculatorConfig(axis_color=" ")


def test_config_drives_calculator_behavior(canvas) -> None:
    config = CalculatorConfig(tick_increment=0.5, zoom_in_factor=2, initial_scale_divisor=2, stroke_width=3)
    calc = GraphingCalculator(800, 600, canvas=canvas, config=config)
    plot = calc.show(lambda x: x)

    assert calc.scale == 300.0
    calc.tick()
    calc.zoom_in()

    assert calc.animation_parameter == 0.5
    assert calc.scale == 600.0
    assert canvas.polylines[plot.id][2] == 3.0
