"""Single channel luma (gray level) pixel values."""

from __future__ import annotations

from numbers import Real
from typing import Any


class Luma:
    """An 8 bit gray level that clamps on construction and saturates on addition."""

    __slots__ = ("_value",)

    MIN = 0
    MAX = 255

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, Luma):
            value = value._value
        if not isinstance(value, Real):
            raise TypeError(f"luma needs a number, not {type(value).__name__}")
        self._value = int(min(max(value, self.MIN), self.MAX))

    @property
    def value(self) -> int:
        """The gray level."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __add__(self, other: Any) -> Luma:
        if not isinstance(other, Luma):
            return NotImplemented
        return type(self)(min(self._value + other._value, self.MAX))

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Luma):
            return self._value == other._value
        if isinstance(other, Real):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Luma({self._value})"