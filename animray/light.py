"""Lights that illuminate a scene."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


class AmbientLight:
    """Light that reaches every surface with the same colour."""

    __slots__ = ("color",)

    def __init__(self, color: Any = 0) -> None:
        self.color = color

    def __call__(self, observer: Any, intersection: Any, scene: Any) -> Any:
        return self.color

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AmbientLight):
            return NotImplemented
        return self.color == other.color

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AmbientLight({self.color!r})"


class LightCollection:
    """A group of lights whose illumination is added together.

    ``zero`` is the colour returned when the collection holds no lights and
    the value the sum starts from.
    """

    __slots__ = ("_lights", "zero")

    def __init__(
        self, lights: Iterable[Callable[[Any, Any, Any], Any]] = (), zero: Any = 0
    ) -> None:
        self._lights = list(lights)
        self.zero = zero

    def push_back(self, light: Callable[[Any, Any, Any], Any]) -> LightCollection:
        """Add a light to the collection."""
        self._lights.append(light)
        return self

    def __call__(self, observer: Any, intersection: Any, scene: Any) -> Any:
        return sum(
            (light(observer, intersection, scene) for light in self._lights),
            self.zero,
        )

    def __iter__(self) -> Iterator[Callable[[Any, Any, Any], Any]]:
        return iter(self._lights)

    def __len__(self) -> int:
        return len(self._lights)

    def __repr__(self) -> str:
        return f"LightCollection({self._lights!r}, zero={self.zero!r})"