"""Periodic tick source for automatic animation advancement."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from .InputConvert import InputConvert

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class AnimationTimer:
    """Invoke a callback at a fixed cadence on the running asyncio loop.

    Ticks are scheduled with ``loop.call_later`` so they run on the loop's
    thread, interleaved with other input callbacks but never concurrently with
    them.

    Parameters
    ----------
    callback:
        Zero-argument callable executed on each tick.
    interval_ms:
        Tick period in milliseconds.
    """

    def __init__(self, callback: Callable[[], Any], *, interval_ms: float) -> None:
        interval_ms = InputConvert(interval_ms, name="interval_ms", positive=True)
        self._callback = callback
        self._interval_s = interval_ms / 1000.0
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._handle: Optional[Any] = None
        self._running = False
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin ticking. Requires a running asyncio loop (as in Jupyter)."""
        if self._running:
            return
        try:
            self._loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise RuntimeError("AnimationTimer.start() needs a running asyncio event loop.") from e
        self._running = True
        self._schedule_next()

    def stop(self) -> None:
        """Stop scheduling future ticks. A tick already executing runs to completion."""
        self._running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule_next(self) -> None:
        self._handle = self._loop.call_later(self._interval_s, self._on_tick)

    def _on_tick(self) -> None:
        self._handle = None
        if not self._running:
            return
        self.ticks += 1
        try:
            self._callback()
        except Exception:
            logger.exception("AnimationTimer callback failed")
        if self._running:
            self._schedule_next()


__all__ = ["AnimationTimer"]
