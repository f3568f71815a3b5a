"""Surface shading: how much incident light a surface sends towards the observer."""

from __future__ import annotations

from typing import Any, Iterable


def dot(a: Iterable[Any], b: Iterable[Any]) -> Any:
    """Dot product of two vectors of the same length."""
    left, right = tuple(a), tuple(b)
    if len(left) != len(right):
        raise ValueError("vectors for a dot product must be the same length")
    return sum(x * y for x, y in zip(left, right))


def surface_interaction(
    observer: Any, light: Any, intersection: Any, incident: Any, geometry: Any
) -> Any:
    """Basic Lambertian full-white surface.

    The incident light is scaled by the cosine of the angle between the ray
    towards the light and the surface normal held by ``intersection``.
    """
    costheta = dot(light.direction, intersection.direction)
    return incident * costheta


def shader(
    observer: Any, light: Any, intersection: Any, incident: Any, geometry: Any
) -> Any:
    """Work out the light leaving a surface for the given incident light."""
    return surface_interaction(observer, light, intersection, incident, geometry)