"""Registration-time adaptation of user functions to one evaluation shape.

Every plotted function is evaluated as ``f(x, t)`` where ``t`` is the shared
animation parameter. Callers may register three shapes:

- a one-argument callable ``f(x)``, lifted by a wrapper that ignores ``t``;
- a two-argument callable ``f(x, t)``, used as-is;
- a SymPy expression in a plot variable (and optionally a parameter symbol),
  compiled once with :func:`sympy.lambdify`.

The adaptation happens once in :func:`adapt_function` so the sampling loop
never branches on the function shape.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional

import sympy as sp
from sympy.core.expr import Expr
from sympy.core.symbol import Symbol

ParametricFunction = Callable[[float, float], Any]


@dataclass(frozen=True)
class AdaptedFunction:
    """A registered function normalized to ``evaluate(x, t)``.

    Parameters
    ----------
    evaluate : callable
        Two-argument evaluator.
    parametric : bool
        ``False`` when the source ignores the animation parameter.
    source : Any
        The object the caller registered (callable or SymPy expression).
    label : str
        Human-readable name used for plot labels.
    """

    evaluate: ParametricFunction
    parametric: bool
    source: Any
    label: str


def _lift(function: Callable[[float], Any]) -> ParametricFunction:
    def lifted(x: float, _t: float) -> Any:
        return function(x)

    return lifted


def _positional_arity(function: Callable[..., Any]) -> Optional[int]:
    """Return the number of required positional parameters, or ``None`` if ambiguous."""
    try:
        sig = inspect.signature(function)
    except (TypeError, ValueError):
        return None

    required = 0
    for p in sig.parameters.values():
        if p.kind is p.VAR_POSITIONAL:
            return None
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty:
            required += 1
        elif p.kind is p.KEYWORD_ONLY and p.default is p.empty:
            return None
    return required


def _callable_label(function: Callable[..., Any]) -> str:
    name = getattr(function, "__name__", "")
    if not name or name == "<lambda>":
        return ""
    return name


def _adapt_expression(expr: Expr, var: Optional[Symbol], param: Optional[Symbol]) -> AdaptedFunction:
    if not isinstance(var, Symbol):
        raise TypeError("Registering a SymPy expression requires var=<sympy.Symbol> for the plot variable.")
    if param is not None and not isinstance(param, Symbol):
        raise TypeError(f"param must be a sympy.Symbol or None, got {type(param).__name__}.")

    allowed = {var} if param is None else {var, param}
    extra = expr.free_symbols - allowed
    if extra:
        names = ", ".join(sorted(str(s) for s in extra))
        raise TypeError(f"Expression {expr} has unbound symbols: {names}.")

    if param is None:
        compiled = sp.lambdify((var,), expr, modules="numpy")
        evaluate = _lift(compiled)
    else:
        evaluate = sp.lambdify((var, param), expr, modules="numpy")
    return AdaptedFunction(evaluate=evaluate, parametric=param is not None, source=expr, label=str(expr))


def adapt_function(
    function: Any,
    *,
    parametric: Optional[bool] = None,
    var: Optional[Symbol] = None,
    param: Optional[Symbol] = None,
) -> AdaptedFunction:
    """
    Normalize ``function`` to the uniform two-argument evaluation shape.

    Parameters
    ----------
    function : callable or sympy.Expr
        The function to register.
    parametric : bool or None, optional
        Force the callable shape. ``None`` detects it from the signature:
        one required positional argument is ``f(x)``, two are ``f(x, t)``.
    var : sympy.Symbol, optional
        Plot variable; required when ``function`` is a SymPy expression.
    param : sympy.Symbol, optional
        Symbol bound to the animation parameter in a SymPy expression.

    Returns
    -------
    AdaptedFunction

    Raises
    ------
    TypeError
        If ``function`` is neither callable nor a SymPy expression, or its
        shape cannot be determined.

    Examples
    --------
    >>> adapt_function(lambda x: x * x).evaluate(3.0, 99.0)
    9.0
    >>> adapt_function(pow).parametric
    True
    """
    if isinstance(function, Expr):
        return _adapt_expression(function, var, param)

    if not callable(function):
        raise TypeError(f"Expected a callable or SymPy expression, got {type(function).__name__}.")

    if parametric is None:
        arity = _positional_arity(function)
        if arity == 1:
            parametric = False
        elif arity == 2:
            parametric = True
        else:
            raise TypeError(
                f"Cannot tell whether {function!r} is f(x) or f(x, t); pass parametric=True or parametric=False."
            )

    label = _callable_label(function)
    if parametric:
        return AdaptedFunction(evaluate=function, parametric=True, source=function, label=label)
    return AdaptedFunction(evaluate=_lift(function), parametric=False, source=function, label=label)


__all__ = ["AdaptedFunction", "ParametricFunction", "adapt_function"]
