"""Strongly typed numbers that do not mix with numbers of another kind."""

from __future__ import annotations

from numbers import Real
from typing import Any


class Number:
    """A number tagged by its class.

    Subclass to create a new kind of number: arithmetic between two different
    kinds raises ``TypeError``, while plain Python numbers are accepted and
    taken to be of the same kind.  Converting one kind into another is done
    explicitly by passing it to the constructor, e.g. ``Metres(Feet(3))``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, Number):
            value = value._value
        self._value = value

    @property
    def value(self) -> Any:
        """The underlying numeric value."""
        return self._value

    def _operand(self, other: Any) -> Any:
        if type(other) is type(self):
            return other._value
        if isinstance(other, Number):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        if isinstance(other, Real):
            return other
        return NotImplemented

    def _comparable(self, other: Any) -> Any:
        if isinstance(other, Number):
            return other._value
        if isinstance(other, Real):
            return other
        return NotImplemented

    def _make(self, value: Any) -> Number:
        return type(self)(value)

    @staticmethod
    def _divide(left: Any, right: Any) -> Any:
        if isinstance(left, int) and isinstance(right, int):
            quotient = abs(left) // abs(right)
            return quotient if (left < 0) == (right < 0) else -quotient
        return left / right

    def __add__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._value + value)

    def __radd__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value + self._value)

    def __sub__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._value - value)

    def __rsub__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value - self._value)

    def __mul__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._value * value)

    def __rmul__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value * self._value)

    def __truediv__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._divide(self._value, value))

    def __rtruediv__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._divide(value, self._value))

    def __invert__(self) -> Number:
        return self._make(~self._value)

    def __and__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._value & value)

    __rand__ = __and__

    def __or__(self, other: Any) -> Number:
        value = self._operand(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self._value | value)

    __ror__ = __or__

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Number) and type(other) is not type(self):
            return NotImplemented
        value = self._comparable(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: Any) -> bool:
        value = self._comparable(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value < value

    def __le__(self, other: Any) -> bool:
        value = self._comparable(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: Any) -> bool:
        value = self._comparable(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: Any) -> bool:
        value = self._comparable(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value >= value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)