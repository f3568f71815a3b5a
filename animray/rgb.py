"""RGB and RGBA colours, and conversion between colour spaces."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Iterator

_CONVERSIONS: dict[tuple[type, type], Callable[[Any], Any]] = {}


def register_conversion(
    source: type, target: type, converter: Callable[[Any], Any]
) -> None:
    """Register ``converter`` as the way to turn ``source`` colours into ``target``."""
    _CONVERSIONS[(source, target)] = converter


def convert_to(target: type, colour: Any) -> Any:
    """Convert ``colour`` into the colour space ``target``.

    Raises ``TypeError`` if no conversion has been registered.
    """
    for kind in type(colour).__mro__:
        converter = _CONVERSIONS.get((kind, target))
        if converter is not None:
            return converter(colour)
    raise TypeError(
        f"no conversion from {type(colour).__name__} to {target.__name__}"
    )


@dataclass(frozen=True)
class RGB:
    """A colour in the three channel RGB colour space."""

    red: Any = 0
    green: Any = 0
    blue: Any = 0

    @classmethod
    def gray(cls, value: Any) -> RGB:
        """A colour with every channel set to ``value``."""
        return cls(value, value, value)

    @property
    def array(self) -> tuple[Any, Any, Any]:
        """The channel values as a tuple."""
        return (self.red, self.green, self.blue)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.array)

    def __add__(self, other: Any) -> RGB:
        if isinstance(other, RGB):
            return type(self)(
                self.red + other.red,
                self.green + other.green,
                self.blue + other.blue,
            )
        if isinstance(other, Real):
            return type(self)(self.red + other, self.green + other, self.blue + other)
        return NotImplemented

    def __radd__(self, other: Any) -> RGB:
        if isinstance(other, Real):
            return self + other
        return NotImplemented

    def __mul__(self, weight: Any) -> RGB:
        if isinstance(weight, Real):
            return type(self)(self.red * weight, self.green * weight, self.blue * weight)
        return NotImplemented

    def __rmul__(self, weight: Any) -> RGB:
        return self.__mul__(weight)

    def __truediv__(self, divisor: Any) -> RGB:
        if isinstance(divisor, Real):
            return type(self)(
                self.red / divisor, self.green / divisor, self.blue / divisor
            )
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.red} {self.green} {self.blue}"


@dataclass(frozen=True)
class RGBA:
    """An RGB colour with an alpha channel."""

    red: Any = 0
    green: Any = 0
    blue: Any = 0
    alpha: Any = 0

    @property
    def array(self) -> tuple[Any, Any, Any, Any]:
        """The channel values as a tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.array)