"""Objects that can be moved around the scene by affine transformations."""

from __future__ import annotations

from typing import Any

from animray.matrix import Matrix


def _matrices(transform: Any) -> tuple[Matrix, Matrix]:
    if isinstance(transform, tuple):
        if len(transform) != 2:
            raise TypeError("a transform pair needs a forward and a backward matrix")
        return transform
    try:
        forward, backward = transform.forward, transform.backward
    except AttributeError:
        raise TypeError(
            f"{type(transform).__name__} is not a transformation"
        ) from None
    return (
        forward() if callable(forward) else forward,
        backward() if callable(backward) else backward,
    )


class Transformable:
    """Keeps the world-to-local and local-to-world matrices of an object."""

    def __init__(self) -> None:
        self.forward = Matrix()
        self.backward = Matrix()

    def apply(self, transform: Any) -> Transformable:
        """Apply a transformation.

        ``transform`` is either a ``(forward, backward)`` pair of matrices or
        an object with ``forward`` and ``backward`` matrices (or methods
        returning them).  The two are swapped here because rays travel from
        world space into local space.
        """
        first, second = _matrices(transform)
        self.forward = second @ self.forward
        self.backward = self.backward @ first
        return self


class Movable(Transformable):
    """Wraps a scene object so that it can be placed by transformations."""

    def __init__(self, instance: Any) -> None:
        super().__init__()
        self.instance = instance

    def transform(self, transform: Any) -> Movable:
        """Apply a transformation and return this object for chaining."""
        self.apply(transform)
        return self

    def intersects(self, by: Any, epsilon: Any) -> Any:
        """Intersect a world ray with the instance; ``None`` on a miss."""
        hit = self.instance.intersects(by * self.forward, epsilon)
        if hit is None:
            return None
        return hit * self.backward

    def occludes(self, by: Any, epsilon: Any) -> bool:
        """Tell whether the instance blocks the world ray."""
        return self.instance.occludes(by * self.forward, epsilon)

    def __call__(self, x: Any, y: Any) -> Any:
        """Use the instance as a camera, returning its ray in world space."""
        return self.instance(x, y) * self.backward