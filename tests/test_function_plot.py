from __future__ import annotations

import math

import numpy as np
import pytest

from graphcalc import ConfigurationError, FunctionPlot, Point, adapt_function, hue_color, sample_count, sample_xs


def _identity(p: Point) -> Point:
    return p


def _plot(function, **kwargs) -> FunctionPlot:
    return FunctionPlot(adapt_function(function, **kwargs), plot_id="p")


def test_sample_count_exact_fit_ends_on_xmax() -> None:
    xs = sample_xs(0.0, 1.0, 0.25)

    assert sample_count(0.0, 1.0, 0.25) == 5
    assert xs[-1] == 1.0


def test_sample_count_overshoots_by_less_than_one_step() -> None:
    xs = sample_xs(0.0, 1.1, 0.25)

    assert sample_count(0.0, 1.1, 0.25) == 6
    assert xs[-1] == pytest.approx(1.25)
    assert 1.1 <= xs[-1] < 1.1 + 0.25


def test_sample_count_ignores_floating_point_noise() -> None:
    # 0.3 / 0.1 == 2.9999999999999996 in binary floating point.
    assert sample_count(0.0, 0.3, 0.1) == 4


def test_sample_count_degenerate_range_has_one_sample() -> None:
    assert sample_count(2.0, 2.0, 0.5) == 1


@pytest.mark.parametrize("xmin,xmax,step", [(0.0, 1.0, 0.0), (0.0, 1.0, -0.1), (1.0, 0.0, 0.1), (0.0, math.inf, 0.1)])
def test_sample_count_rejects_bad_inputs(xmin, xmax, step) -> None:
    with pytest.raises(ConfigurationError):
        sample_count(xmin, xmax, step)


def test_recalculate_walks_x_ascending_through_to_screen() -> None:
    plot = _plot(lambda x: x * x)

    points = plot.recalculate(0.0, -1.0, 1.0, 0.5, _identity)

    assert [p.x for p in points] == [-1.0, -0.5, 0.0, 0.5, 1.0]
    assert [p.y for p in points] == [1.0, 0.25, 0.0, 0.25, 1.0]
    assert plot.points == points
    assert plot.revision == 1


def test_recalculate_passes_animation_parameter() -> None:
    plot = _plot(lambda x, t: x + t)

    points = plot.recalculate(10.0, 0.0, 1.0, 0.5, _identity)

    assert [p.y for p in points] == [10.0, 10.5, 11.0]


def test_recalculate_replaces_previous_polyline() -> None:
    plot = _plot(lambda x: x)
    plot.recalculate(0.0, 0.0, 1.0, 0.5, _identity)

    points = plot.recalculate(0.0, 0.0, 2.0, 1.0, _identity)

    assert [p.x for p in points] == [0.0, 1.0, 2.0]


def test_recalculate_is_idempotent() -> None:
    plot = _plot(lambda x, t: math.sin(x * t))

    first = plot.recalculate(0.7, -3.0, 3.0, 0.01, _identity)
    second = plot.recalculate(0.7, -3.0, 3.0, 0.01, _identity)

    assert first == second


def test_math_domain_errors_become_nan_without_changing_length() -> None:
    plot = _plot(math.sqrt)

    points = plot.recalculate(0.0, -1.0, 1.0, 0.5, _identity)

    assert len(points) == 5
    assert math.isnan(points[0].y) and math.isnan(points[1].y)
    assert points[4].y == 1.0


def test_division_by_zero_and_overflow_become_nan() -> None:
    reciprocal = _plot(lambda x: 1 / x)
    huge = _plot(lambda x: math.exp(x))

    r_points = reciprocal.recalculate(0.0, -1.0, 1.0, 1.0, _identity)
    h_points = huge.recalculate(0.0, 0.0, 1000.0, 1000.0, _identity)

    assert math.isnan(r_points[1].y)
    assert r_points[0].y == -1.0
    assert math.isnan(h_points[1].y)


def test_infinities_are_passed_through() -> None:
    plot = _plot(lambda x: math.inf if x == 0 else x)

    points = plot.recalculate(0.0, -1.0, 1.0, 1.0, _identity)

    assert points[1].y == math.inf


def test_complex_results_become_nan() -> None:
    plot = _plot(lambda x: x ** 0.5)

    points = plot.recalculate(0.0, -1.0, 1.0, 1.0, _identity)

    assert math.isnan(points[0].y)
    assert points[2].y == 1.0


def test_unexpected_exceptions_propagate() -> None:
    plot = _plot(lambda x: {}["missing"])

    with pytest.raises(KeyError):
        plot.recalculate(0.0, 0.0, 1.0, 0.5, _identity)


def test_x_and_y_data_are_read_only_copies() -> None:
    plot = _plot(lambda x: 2 * x)
    assert plot.x_data is None and plot.y_data is None

    plot.recalculate(0.0, 0.0, 1.0, 0.5, _identity)

    assert np.allclose(plot.y_data, 2 * plot.x_data)
    assert not plot.x_data.flags.writeable


def test_hue_color_is_deterministic_and_distinct() -> None:
    for total in (1, 2, 3, 7, 22):
        colors = [hue_color(i, total) for i in range(total)]
        assert colors == [hue_color(i, total) for i in range(total)]
        assert len(set(colors)) == total
        assert all(c.startswith("rgb(") for c in colors)


@pytest.mark.parametrize("index,total", [(3, 3), (-1, 3), (0, 0)])
def test_hue_color_rejects_out_of_range_slots(index, total) -> None:
    with pytest.raises(ValueError):
        hue_color(index, total)


def test_set_color_does_not_touch_polyline() -> None:
    plot = _plot(lambda x: x)
    points = plot.recalculate(0.0, 0.0, 1.0, 0.5, _identity)

    plot.set_color(1, 4)

    assert plot.color == hue_color(1, 4)
    assert plot.points is points
    assert plot.revision == 1
