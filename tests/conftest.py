from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from graphcalc import Point  # noqa: E402


class RecordingCanvas:
    """Drawing surface that records every call instead of drawing."""

    def __init__(self) -> None:
        self.polylines: dict[str, tuple[tuple[Point, ...], object, float]] = {}
        self.lines: dict[str, tuple[Point, Point, str, float]] = {}
        self.calls: list[tuple[str, str]] = []
        self.size: tuple[float, float] | None = None

    def draw_polyline(self, key, points, color, width) -> None:
        self.polylines[key] = (tuple(points), color, width)
        self.calls.append(("polyline", key))

    def draw_line(self, key, start, end, color, width) -> None:
        self.lines[key] = (start, end, color, width)
        self.calls.append(("line", key))

    def set_size(self, width, height) -> None:
        self.size = (width, height)
        self.calls.append(("size", f"{width}x{height}"))

    def clear(self) -> None:
        self.polylines.clear()
        self.lines.clear()
        self.calls.append(("clear", ""))


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()
