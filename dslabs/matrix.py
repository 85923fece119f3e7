"""Integer matrices in dense form and in compressed sparse column form.

The sparse form keeps three lists: ``a`` holds the stored values column by
column, ``ia`` the row index of each stored value, and ``ja`` the position
in ``a`` of the first value of each column, or ``-1`` for a column with no
stored values.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator

MATRIX_ROWS = 1000
MATRIX_COLS = 1000


def _check_shape(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix dimensions must not be negative: {rows} x {cols}")


@dataclass
class DenseMatrix:
    """A matrix that stores every element, row by row."""

    rows: int
    cols: int
    values: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_shape(self.rows, self.cols)
        if len(self.values) != self.rows or any(len(row) != self.cols for row in self.values):
            raise ValueError(f"values do not form a {self.rows} x {self.cols} matrix")

    @classmethod
    def zeros(cls, rows: int, cols: int) -> DenseMatrix:
        """Return a matrix of the given size filled with zeros."""
        _check_shape(rows, cols)
        return cls(rows, cols, [[0] * cols for _ in range(rows)])

    def to_sparse(self) -> SparseMatrix:
        """Return the sparse form holding every non-zero element."""
        a: list[int] = []
        ia: list[int] = []
        ja: list[int] = []
        for j in range(self.cols):
            column = [(i, row[j]) for i, row in enumerate(self.values) if row[j] != 0]
            ja.append(len(a) if column else -1)
            for i, value in column:
                ia.append(i)
                a.append(value)
        return SparseMatrix(self.rows, self.cols, a, ia, ja)

    def __add__(self, other: object) -> DenseMatrix:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrices of different sizes cannot be added")
        values = [
            [x + y for x, y in zip(left, right)]
            for left, right in zip(self.values, other.values)
        ]
        return DenseMatrix(self.rows, self.cols, values)

    def format(self) -> str:
        """Return the rows with every element right-aligned in five places."""
        return "\n".join("".join(f"{value:5d} " for value in row) for row in self.values)


@dataclass
class SparseMatrix:
    """A matrix that stores only chosen elements, column by column."""

    rows: int
    cols: int
    a: list[int] = field(default_factory=list)
    ia: list[int] = field(default_factory=list)
    ja: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_shape(self.rows, self.cols)
        if len(self.a) != len(self.ia):
            raise ValueError("value and row index lists differ in length")
        if len(self.ja) != self.cols:
            raise ValueError(f"column start list must have {self.cols} entries")

    @property
    def elements_num(self) -> int:
        """Number of stored elements."""
        return len(self.a)

    def _columns(self) -> Iterator[list[tuple[int, int]]]:
        """Yield the (row, value) pairs of each column in order."""
        ends = [0] * self.cols
        following = len(self.a)
        for j in reversed(range(self.cols)):
            if self.ja[j] >= 0:
                ends[j] = following
                following = self.ja[j]
        for start, end in zip(self.ja, ends):
            if start < 0:
                yield []
            else:
                yield list(zip(self.ia[start:end], self.a[start:end]))

    def to_dense(self) -> DenseMatrix:
        """Return the dense form, with zeros where nothing is stored."""
        dense = DenseMatrix.zeros(self.rows, self.cols)
        for j, column in enumerate(self._columns()):
            for i, value in column:
                dense.values[i][j] = value
        return dense

    def __add__(self, other: object) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrices of different sizes cannot be added")
        a: list[int] = []
        ia: list[int] = []
        ja: list[int] = []
        for left, right in zip(self._columns(), other._columns()):
            combined = dict(left)
            for i, value in right:
                combined[i] = combined.get(i, 0) + value
            ja.append(len(a) if combined else -1)
            for i, value in sorted(combined.items()):
                ia.append(i)
                a.append(value)
        return SparseMatrix(self.rows, self.cols, a, ia, ja)

    def format(self) -> str:
        """Return the three lists, each on its own line."""
        def line(title: str, items: list[int]) -> str:
            return f"{title}: " + "".join(f"{item} " for item in items)

        return "\n".join([line("A", self.a), line("IA", self.ia), line("JA", self.ja)])


def random_fill(
    rows: int, cols: int, nonzero: int, rng: random.Random | None = None
) -> DenseMatrix:
    """Return a matrix holding 1..nonzero at random places and zeros elsewhere."""
    _check_shape(rows, cols)
    total = rows * cols
    if not 0 <= nonzero <= total:
        raise ValueError(f"number of non-zero elements must be from 0 to {total}")
    rng = rng if rng is not None else random.Random()
    flat = list(range(1, nonzero + 1)) + [0] * (total - nonzero)
    for i in range(total - 1, 0, -1):
        j = rng.randrange(i + 1)
        flat[i], flat[j] = flat[j], flat[i]
    values = [flat[r * cols:(r + 1) * cols] for r in range(rows)]
    return DenseMatrix(rows, cols, values)