"""Gallery session showing a mix of plain and animated functions.

>>> from graphcalc.demo import build_demo
>>> calc = build_demo()  # doctest: +SKIP
>>> calc.start_animation()  # doctest: +SKIP
>>> calc  # doctest: +SKIP
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

import sympy as sp

from .calculator_canvas import DrawingSurface
from .GraphingCalculator import GraphingCalculator


def _weierstrass(x: float, n: float) -> float:
    result = 0.0
    for i in range(1, 20):
        result += math.sin(x * 3**i + n * i) / 2.5**i
    return result


def _power_sum(x: float, n: float) -> float:
    result = 0.0
    for _ in range(20):
        result += math.pow(x, n) * math.sqrt(n)
    return result


def _ripple(i: int) -> Callable[[float, float], float]:
    def ripple(x: float, t: float) -> float:
        return math.sin(i * x - t * 10) / i

    return ripple


def demo_functions() -> list[tuple[Any, Optional[bool]]]:
    """Return ``(function, parametric)`` pairs in display order.

    The zero-frequency ripple divides by zero everywhere and therefore draws
    nothing; it is kept to exercise the NaN path.
    """
    return [
        (lambda x: x * x, False),
        (lambda zargle: zargle * zargle, False),
        (math.tan, False),
        (math.sin, False),
        (math.sqrt, False),
        (lambda x, n: math.atan(x / math.sin(n)), True),
        (lambda x, n: math.sin(x / math.tan(n)), True),
        (math.pow, True),
        (_weierstrass, True),
        (_power_sum, True),
        *[(_ripple(i), True) for i in range(12)],
    ]


def build_demo(
    width: float = 800,
    height: float = 600,
    *,
    canvas: Optional[DrawingSurface] = None,
    widget: bool = False,
) -> GraphingCalculator:
    """Return a calculator showing the gallery plus one symbolic curve."""
    calc = GraphingCalculator(width, height, canvas=canvas, widget=widget)
    for function, parametric in demo_functions():
        calc.show(function, parametric=parametric)

    x, t = sp.symbols("x t")
    calc.show(sp.exp(-x**2) * sp.cos(4 * x - t), var=x, param=t, label="gaussian wave")
    return calc


__all__ = ["build_demo", "demo_functions"]
