"""Small square integer matrices with bounded values."""

from __future__ import annotations

from collections.abc import Iterable

from matcalc.errors import FileError, InputError

MAX_ALLOWED_VALUE = 1024
MIN_ALLOWED_VALUE = -1024
MAX_MAT_SIZE = 5


def check_value(value: int) -> None:
    """Raise FileError unless value lies strictly between the allowed bounds."""
    if value <= MIN_ALLOWED_VALUE or value >= MAX_ALLOWED_VALUE:
        raise FileError(f"the value: {value} ,is invalid value")


def check_size(size: int) -> None:
    """Raise FileError unless size is a valid matrix dimension."""
    if size <= 0 or size >= MAX_MAT_SIZE:
        raise FileError(f"the size: {size} ,is invalid size for SquareMatrix")


class SquareMatrix:
    """A square matrix of integers whose entries are kept within bounds.

    Without a value the matrix is filled with its row-major cell indices.
    """

    __hash__ = None  # mutable

    def __init__(self, size: int, value: int | None = None) -> None:
        check_size(size)
        self._size = size
        if value is None:
            self._cells = [[row * size + col for col in range(size)] for row in range(size)]
        else:
            check_value(value)
            self._cells = [[value] * size for _ in range(size)]

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[int]]) -> SquareMatrix:
        cells = [list(row) for row in rows]
        result = cls(len(cells), 0)
        result._cells = cells
        return result

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    def __getitem__(self, index: tuple[int, int]) -> int:
        row, col = index
        return self._cells[row][col]

    def __setitem__(self, index: tuple[int, int], value: int) -> None:
        row, col = index
        self._cells[row][col] = value

    def _check_same_size(self, other: SquareMatrix) -> None:
        if other.size != self._size:
            raise ValueError(
                f"matrix sizes differ: {self._size} and {other.size}"
            )

    def _combine(self, other: SquareMatrix, op) -> SquareMatrix:
        self._check_same_size(other)
        rows = []
        for mine, theirs in zip(self._cells, other._cells):
            row = [op(a, b) for a, b in zip(mine, theirs)]
            for value in row:
                check_value(value)
            rows.append(row)
        return SquareMatrix._from_rows(rows)

    def __add__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, scalar: object) -> SquareMatrix:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        rows = []
        for row in self._cells:
            scaled = [value * scalar for value in row]
            for value in scaled:
                check_value(value)
            rows.append(scaled)
        return SquareMatrix._from_rows(rows)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._cells
        )

    def __repr__(self) -> str:
        return f"SquareMatrix.from_rows({self.rows()!r})"

    def transpose(self) -> SquareMatrix:
        """Return the transposed matrix."""
        return SquareMatrix._from_rows(zip(*self._cells))

    def rows(self) -> list[tuple[int, ...]]:
        """Return a copy of the rows as tuples."""
        return [tuple(row) for row in self._cells]

    @classmethod
    def read(cls, size: int, text: str) -> SquareMatrix:
        """Build a matrix of the given size from whitespace-separated integers."""
        result = cls(size, 0)
        tokens = text.split()
        needed = size * size
        if len(tokens) < needed:
            raise InputError(
                f"expected {needed} values for a matrix of size {size}, got {len(tokens)}"
            )
        for position, token in enumerate(tokens[:needed]):
            try:
                value = int(token)
            except ValueError as exc:
                raise InputError(f"invalid matrix value: {token!r}") from exc
            check_value(value)
            result[divmod(position, size)] = value
        return result