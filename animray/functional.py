"""Small functional helpers: folding, zipping and applying values."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Sequence


def foldl(op: Callable[[Any, Any], Any], first: Any, second: Any, *args: Any) -> Any:
    """Fold ``op`` from the left over two or more values."""
    return reduce(op, args, op(first, second))


def zip_pairs(first: Sequence[Any], second: Sequence[Any]) -> tuple[tuple[Any, Any], ...]:
    """Zip two sequences of the same length into a tuple of pairs."""
    if len(first) != len(second):
        raise ValueError("Tuples that are to be zipped must be same size")
    return tuple(zip(first, second))


def is_callable(value: Any) -> bool:
    """Tell whether ``value`` can be called."""
    return callable(value)


def reduce_value(value: Any, *args: Any) -> Any:
    """Call ``value`` with ``args`` if it is callable, else return it as is."""
    if is_callable(value):
        return value(*args)
    return value