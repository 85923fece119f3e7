"""Reading pairs of integer matrices from text.

Numbers are separated by any whitespace.  A matrix text starts with the
number of rows and of columns, followed by the elements of the first and
then of the second matrix, row by row.  Error messages are meant for the
user.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from dslabs.matrix import MATRIX_COLS, MATRIX_ROWS, DenseMatrix

_INT = re.compile(r"[+-]?[0-9]+")

DIMENSIONS_RANGE_MESSAGE = (
    f"Количество строк должно быть от 1 до {MATRIX_ROWS}, "
    f"а столбцов - от 1 до {MATRIX_COLS}!"
)
FILE_DIMENSIONS_MESSAGE = "В файле должно быть хотя бы 2 числа - кол-во строк и столбцов!"
FILE_VALUES_MESSAGE = "В файле не только целые числа или слишком мало чисел!"
FILE_EXTRA_MESSAGE = "В файле больше данных чем требуется!"
USER_DIMENSIONS_MESSAGE = "Введите 2 числа - количества строк и столбцов!"
USER_VALUES_MESSAGE = "Вы ввели не целые числа!"
INDEX_MESSAGE = "Индексы не могут отрицательными или быть больше соответствующих размерностей!"


class MatrixInputError(ValueError):
    """The input does not describe the expected matrices."""


def _parse_int(token: str | None) -> int | None:
    if token is None or not _INT.fullmatch(token):
        return None
    return int(token)


def _take_int(tokens: Iterator[str], message: str) -> int:
    value = _parse_int(next(tokens, None))
    if value is None:
        raise MatrixInputError(message)
    return value


def check_dimensions(rows: int, cols: int) -> tuple[int, int]:
    """Return the dimensions if both lie within the allowed range."""
    if not (1 <= rows <= MATRIX_ROWS and 1 <= cols <= MATRIX_COLS):
        raise MatrixInputError(DIMENSIONS_RANGE_MESSAGE)
    return rows, cols


def _read_dimensions(tokens: Iterator[str], message: str) -> tuple[int, int]:
    rows = _take_int(tokens, message)
    cols = _take_int(tokens, message)
    return check_dimensions(rows, cols)


def _read_matrix(tokens: Iterator[str], rows: int, cols: int, message: str) -> DenseMatrix:
    values = [[_take_int(tokens, message) for _ in range(cols)] for _ in range(rows)]
    return DenseMatrix(rows, cols, values)


def parse_matrix_file(text: str) -> tuple[DenseMatrix, DenseMatrix]:
    """Parse the dimensions and two matrices; nothing else may follow them."""
    tokens = iter(text.split())
    rows, cols = _read_dimensions(tokens, FILE_DIMENSIONS_MESSAGE)
    first = _read_matrix(tokens, rows, cols, FILE_VALUES_MESSAGE)
    second = _read_matrix(tokens, rows, cols, FILE_VALUES_MESSAGE)
    if next(tokens, None) is not None:
        raise MatrixInputError(FILE_EXTRA_MESSAGE)
    return first, second


def parse_standard(text: str) -> tuple[DenseMatrix, DenseMatrix]:
    """Parse the dimensions and two matrices typed by a user; the rest is ignored."""
    tokens = iter(text.split())
    rows, cols = _read_dimensions(tokens, USER_DIMENSIONS_MESSAGE)
    first = _read_matrix(tokens, rows, cols, USER_VALUES_MESSAGE)
    second = _read_matrix(tokens, rows, cols, USER_VALUES_MESSAGE)
    return first, second


def parse_coordinates(
    rows: int, cols: int, triples: Iterable[tuple[int, int, int]]
) -> DenseMatrix:
    """Build a matrix from (row, column, value) triples; other elements are zero.

    Triples are taken one at a time and reading stops at the first index
    outside the matrix.
    """
    check_dimensions(rows, cols)
    matrix = DenseMatrix.zeros(rows, cols)
    for i, j, value in triples:
        if not (0 <= i < rows and 0 <= j < cols):
            raise MatrixInputError(INDEX_MESSAGE)
        matrix.values[i][j] = value
    return matrix