"""Real-number coercion for calculator inputs.

Frame, parameter, and configuration setters accept plain numbers as well as
numeric strings. Strings that are not plain literals are parsed with SymPy so
notebook users can write ``calc.set_scale("100*pi")``.
"""

from __future__ import annotations

import math
from typing import Any

import sympy as sp

from .calculator_errors import ConfigurationError


def _to_real(obj: Any, name: str) -> float:
    """Return ``obj`` as a Python float or raise ``ConfigurationError``."""
    # bool is an int subclass; True as a scale is almost certainly a mistake.
    if isinstance(obj, bool):
        raise ConfigurationError(f"{name} must be a real number, got {obj!r}.")

    if isinstance(obj, complex):
        if obj.imag != 0:
            raise ConfigurationError(f"{name} must be real: imaginary part is non-zero in {obj!r}.")
        return float(obj.real)

    if isinstance(obj, str):
        s = obj.strip()
        if s == "":
            raise ConfigurationError(f"Cannot convert empty string to {name}.")
        try:
            return float(s)
        except ValueError:
            pass
        try:
            value = complex(sp.sympify(s).evalf())
        except Exception as e:
            raise ConfigurationError(f"Could not convert {obj!r} to {name} (neither directly nor via SymPy).") from e
        return _to_real(value, name)

    try:
        return float(obj)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Could not convert {obj!r} to {name}.") from e


def InputConvert(
    obj: Any,
    *,
    name: str = "value",
    positive: bool = False,
    finite: bool = True,
) -> float:
    """
    Convert ``obj`` to a real float, enforcing calculator preconditions.

    Parameters
    ----------
    obj : Any
        Number, NumPy scalar, numeric string, or SymPy-parsable string.
    name : str, optional
        Name used in error messages.
    positive : bool, optional
        Require ``value > 0``.
    finite : bool, optional
        Reject NaN and infinities.

    Raises
    ------
    ConfigurationError
        If the conversion fails or the value violates a precondition.

    Examples
    --------
    >>> InputConvert("3/2", name="factor")
    1.5
    """
    value = _to_real(obj, name)
    if finite and not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}.")
    if positive and not value > 0:
        raise ConfigurationError(f"{name} must be > 0, got {value!r}.")
    return value


__all__ = ["InputConvert"]
