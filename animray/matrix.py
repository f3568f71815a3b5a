"""4x4 matrices representing transformations in 3D space."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

_SIZE = 4


def _check_index(index: int) -> int:
    if not isinstance(index, int) or not 0 <= index < _SIZE:
        raise IndexError(f"matrix index {index!r} out of range")
    return index


class Matrix:
    """A mutable 4x4 matrix stored row by row; the identity by default."""

    __slots__ = ("_cells",)

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        if values is None:
            cells = [1 if r == c else 0 for r in range(_SIZE) for c in range(_SIZE)]
        else:
            cells = list(values)
            if len(cells) != _SIZE * _SIZE:
                raise ValueError("a matrix needs exactly 16 values")
        self._cells = cells

    def row(self, r: int) -> tuple[Any, ...]:
        """Return row ``r`` as a tuple."""
        start = _check_index(r) * _SIZE
        return tuple(self._cells[start:start + _SIZE])

    def column(self, col: int) -> tuple[Any, ...]:
        """Return column ``col`` as a tuple."""
        return tuple(self._cells[_check_index(col)::_SIZE])

    def values(self) -> tuple[Any, ...]:
        """All 16 values in row-major order."""
        return tuple(self._cells)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            r, c = key
            return self._cells[_check_index(r) * _SIZE + _check_index(c)]
        return self.row(key)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        r, c = key
        self._cells[_check_index(r) * _SIZE + _check_index(c)] = value

    def _product(self, other: Matrix) -> list[Any]:
        columns = [other.column(c) for c in range(_SIZE)]
        rows = [self.row(r) for r in range(_SIZE)]
        return [sum(a * b for a, b in zip(row, col)) for row in rows for col in columns]

    def _apply(self, vector: Sequence[Any]) -> tuple[Any, ...]:
        if len(vector) != _SIZE:
            raise ValueError("a matrix multiplies vectors of 4 components")
        return tuple(
            sum(a * b for a, b in zip(self.row(r), vector)) for r in range(_SIZE)
        )

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return Matrix(self._product(other))
        if isinstance(other, Sequence):
            return self._apply(other)
        return NotImplemented

    __mul__ = __matmul__

    def __imatmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._cells = self._product(other)
        return self

    __imul__ = __imatmul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._cells!r})"

    def __str__(self) -> str:
        return "".join(
            "".join(str(v) for v in self.row(r)) + "\n" for r in range(_SIZE)
        )