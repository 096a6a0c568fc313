from __future__ import annotations

import math

import pytest
import sympy as sp

from graphcalc import adapt_function


def test_single_argument_callable_is_lifted() -> None:
    adapted = adapt_function(lambda x: x * x)

    assert adapted.parametric is False
    assert adapted.evaluate(3.0, 0.0) == 9.0
    assert adapted.evaluate(3.0, 123.0) == 9.0


def test_two_argument_callable_is_used_directly() -> None:
    def wave(x, t):
        return x + t

    adapted = adapt_function(wave)

    assert adapted.parametric is True
    assert adapted.evaluate is wave
    assert adapted.label == "wave"


def test_builtin_arity_is_detected_from_signature() -> None:
    assert adapt_function(math.sin).parametric is False
    assert adapt_function(math.pow).parametric is True


def test_optional_arguments_do_not_count_towards_arity() -> None:
    adapted = adapt_function(lambda x, scale=2.0: x * scale)

    assert adapted.parametric is False
    assert adapted.evaluate(1.0, 5.0) == 2.0


def test_explicit_parametric_flag_overrides_detection() -> None:
    adapted = adapt_function(lambda *args: sum(args), parametric=True)

    assert adapted.evaluate(1.0, 2.0) == 3.0


def test_ambiguous_callable_requires_explicit_shape() -> None:
    with pytest.raises(TypeError, match="parametric=True"):
        adapt_function(lambda *args: 0.0)


def test_non_callable_is_rejected() -> None:
    with pytest.raises(TypeError, match="Expected a callable"):
        adapt_function(42)


def test_sympy_expression_with_parameter_symbol() -> None:
    x, t = sp.symbols("x t")

    adapted = adapt_function(x * t + 1, var=x, param=t)

    assert adapted.parametric is True
    assert float(adapted.evaluate(2.0, 3.0)) == 7.0
    assert adapted.label == str(x * t + 1)


def test_sympy_expression_without_parameter_is_lifted() -> None:
    x = sp.Symbol("x")

    adapted = adapt_function(sp.sin(x), var=x)

    assert adapted.parametric is False
    assert float(adapted.evaluate(0.0, 99.0)) == 0.0


def test_sympy_expression_requires_plot_variable() -> None:
    x = sp.Symbol("x")

    with pytest.raises(TypeError, match="var="):
        adapt_function(sp.sin(x))


def test_sympy_expression_rejects_unbound_symbols() -> None:
    x, a = sp.symbols("x a")

    with pytest.raises(TypeError, match="unbound symbols: a"):
        adapt_function(a * x, var=x)
