"""Error kinds raised by the calculator core."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A precondition on frame, viewport, or configuration values was violated.

    Raised at the point of mutation (for example ``set_scale(0)``); values are
    never clamped or coerced into range.
    """


__all__ = ["ConfigurationError"]
