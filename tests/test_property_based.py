"""Property-based checks for the frame transform and the sampling walk."""

from __future__ import annotations

import math

import pytest

from graphcalc import CoordinateFrame, FunctionPlot, Point, adapt_function, sample_count, sample_xs

try:
    from hypothesis import given
    from hypothesis import strategies as st
except ModuleNotFoundError:  # pragma: no cover - environment-specific fallback
    pytest.skip("hypothesis is required for property-based tests", allow_module_level=True)


COORDS = st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False)
SCALES = st.floats(min_value=1e-2, max_value=1e4, allow_nan=False, allow_infinity=False)
WIDTHS = st.floats(min_value=1.0, max_value=4000.0, allow_nan=False, allow_infinity=False)


@given(x=COORDS, y=COORDS, ox=COORDS, oy=COORDS, scale=SCALES)
def test_equation_screen_round_trip(x: float, y: float, ox: float, oy: float, scale: float) -> None:
    frame = CoordinateFrame(origin=Point(ox, oy), scale=scale)
    p = Point(x, y)

    back = frame.to_equation(frame.to_screen(p))
    forward = frame.to_screen(frame.to_equation(p))

    assert back.x == pytest.approx(x, rel=1e-9, abs=1e-6)
    assert back.y == pytest.approx(y, rel=1e-9, abs=1e-6)
    assert forward.x == pytest.approx(x, rel=1e-9, abs=1e-6)
    assert forward.y == pytest.approx(y, rel=1e-9, abs=1e-6)


@given(ox=COORDS, oy=COORDS, scale=SCALES, width=WIDTHS)
def test_visible_range_is_increasing(ox: float, oy: float, scale: float, width: float) -> None:
    xmin, xmax = CoordinateFrame(origin=Point(ox, oy), scale=scale).visible_x_range(width)

    assert xmin < xmax


@given(
    xmin=st.floats(min_value=-100, max_value=100),
    span=st.floats(min_value=0, max_value=100),
    step=st.floats(min_value=1e-2, max_value=10),
)
def test_sample_count_is_floor_plus_one_or_two(xmin: float, span: float, step: float) -> None:
    xmax = xmin + span
    n = sample_count(xmin, xmax, step)
    base = math.floor((xmax - xmin) / step) + 1

    assert n in (base, base + 1)
    xs = sample_xs(xmin, xmax, step)
    assert len(xs) == n
    assert xs[-1] < xmax + step
    # The walk always reaches xmax, up to floating-point noise.
    assert xs[-1] >= xmax - (1e-9 * max(1.0, span, step) + 1e-9)


@given(t=st.floats(min_value=-10, max_value=10), scale=st.floats(min_value=10, max_value=500))
def test_recalculation_is_idempotent(t: float, scale: float) -> None:
    frame = CoordinateFrame(origin=Point(200.0, 150.0), scale=scale)
    plot = FunctionPlot(adapt_function(lambda x, a: math.sin(a * x) / (x - a)), plot_id="p")
    xmin, xmax = frame.visible_x_range(400.0)

    first = plot.recalculate(t, xmin, xmax, frame.sampling_step(), frame.to_screen)
    second = plot.recalculate(t, xmin, xmax, frame.sampling_step(), frame.to_screen)

    assert [(p.x, repr(p.y)) for p in first] == [(p.x, repr(p.y)) for p in second]
