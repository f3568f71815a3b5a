"""Values that change over the frames of an animation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable


class Animatable:
    """An attribute that could be animated but keeps its starting value."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __call__(self, frame: Any) -> Any:
        return self.value

    def __repr__(self) -> str:
        return f"Animatable({self.value!r})"


class Animate:
    """Compute a value from the frame carried by a ray.

    ``function`` is called with the frame; without one every frame gives
    ``default``.
    """

    __slots__ = ("_function",)

    def __init__(
        self, function: Callable[[Any], Any] | None = None, default: Any = None
    ) -> None:
        self._function = function if function is not None else (lambda _frame: default)

    def at_frame(self, frame: Any) -> Any:
        """The value for a frame number."""
        return self._function(frame)

    def __call__(self, ray: Any) -> Any:
        return self.at_frame(ray.frame)


@dataclass(frozen=True)
class RotateXY:
    """A point circling ``centre`` in the x/y plane.

    ``speed`` is in radians per unit of time and ``phase`` is the starting
    angle in radians.
    """

    centre: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 1.0
    speed: float = 1.0
    phase: float = 0.0

    def __call__(self, t: float) -> tuple[float, float, float]:
        cx, cy, cz = self.centre
        angle = t * self.speed + self.phase
        return (
            cx + self.radius * math.cos(angle),
            cy + self.radius * math.sin(angle),
            cz,
        )