from __future__ import annotations

import math

from graphcalc.demo import build_demo, demo_functions


def test_demo_registers_every_gallery_function(canvas) -> None:
    calc = build_demo(canvas=canvas)

    assert len(calc.plots) == len(demo_functions()) + 1
    assert len({p.color for p in calc.plots}) == len(calc.plots)
    assert all(len(p.points) == 401 for p in calc.plots)


def test_demo_survives_domain_errors_and_animation(canvas) -> None:
    calc = build_demo(canvas=canvas)
    zero_ripple = calc.plots[10]

    assert all(math.isnan(p.y) for p in zero_ripple.points)

    calc.set_animation_parameter(0.5)
    calc.zoom_out()

    assert calc.plot("f0").revision == 3
    assert calc.plots[-1].label == "gaussian wave"
