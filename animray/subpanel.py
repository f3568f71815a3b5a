"""Rendering a frame as a grid of sub-panels spread over worker threads."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    while b != 0:
        a, b = b, a % b
    return a


def biggest_odd(n: int) -> int:
    """Halve ``n`` while it is even and larger than 20."""
    while n & 1 == 0 and n > 20:
        n //= 2
    return n


class SubPanelProgress:
    """Panel layout for a frame and a thread-safe count of finished panels."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame width and height must be positive")
        divisor = biggest_odd(gcd(width, height))
        self.panel_size_x = width // divisor
        self.panel_size_y = height // divisor
        self.panel_count_x = width // self.panel_size_x
        self.panel_count_y = height // self.panel_size_y
        self.count_limit = self.panel_count_x * self.panel_count_y
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        """How many panels have been rendered so far."""
        with self._lock:
            return self._count

    def increment(self) -> int:
        """Record one more finished panel and return the new count."""
        with self._lock:
            self._count += 1
            return self._count

    def __repr__(self) -> str:
        return (
            f"SubPanelProgress(panels={self.panel_count_x}x{self.panel_count_y}, "
            f"size={self.panel_size_x}x{self.panel_size_y}, "
            f"done={self.count}/{self.count_limit})"
        )


def _render_panel(
    progress: SubPanelProgress, fn: Callable[[int, int], Any], px: int, py: int
) -> list[list[Any]]:
    size_x, size_y = progress.panel_size_x, progress.panel_size_y
    offset_x, offset_y = size_x * px, size_y * py
    panel = [
        [fn(offset_x + x, offset_y + y) for y in range(size_y)] for x in range(size_x)
    ]
    progress.increment()
    return panel


def sub_panel(
    progress: SubPanelProgress,
    threads: int,
    width: int,
    height: int,
    fn: Callable[[int, int], Any],
) -> list[list[Any]]:
    """Render a ``width`` by ``height`` frame panel by panel.

    ``fn(x, y)`` gives the pixel at a location. Panels are shared among
    ``threads`` workers; with no threads they are rendered in the calling
    thread. The result is indexed ``[x][y]``.
    """
    if threads < 0:
        raise ValueError("thread count cannot be negative")
    covered_x = progress.panel_size_x * progress.panel_count_x
    covered_y = progress.panel_size_y * progress.panel_count_y
    if not 0 <= width <= covered_x or not 0 <= height <= covered_y:
        raise ValueError("frame is larger than the panels cover")

    tasks = [
        (px, py)
        for px in range(progress.panel_count_x)
        for py in range(progress.panel_count_y)
    ]
    if threads:
        with ThreadPoolExecutor(max_workers=threads) as pool:
            rendered = list(
                pool.map(lambda task: _render_panel(progress, fn, *task), tasks)
            )
    else:
        rendered = [_render_panel(progress, fn, px, py) for px, py in tasks]
    panels = dict(zip(tasks, rendered))

    size_x, size_y = progress.panel_size_x, progress.panel_size_y
    return [
        [panels[(x // size_x, y // size_y)][x % size_x][y % size_y] for y in range(height)]
        for x in range(width)
    ]