"""Interactive menu for entering, printing and adding dense and sparse matrices."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections import deque
from enum import IntEnum
from typing import Iterator, TextIO

from dslabs.matrix import DenseMatrix, random_fill
from dslabs.matrix_analysis import (
    ANALYSIS_HEADER,
    ANALYSIS_SIZES,
    PERCENTS,
    START_GARBAGE_NUM,
    TESTS_NUM,
    format_row,
    measure,
)
from dslabs.matrix_io import (
    USER_DIMENSIONS_MESSAGE,
    USER_VALUES_MESSAGE,
    MatrixInputError,
    check_dimensions,
    parse_coordinates,
    parse_matrix_file,
)
from dslabs.phonebook import parse_number

FILENAME_LEN = 30

_EOF_MESSAGE = "Вы нажали ctrl+d или передали на ввод некорректный файл, не надо так!"
_TRIPLE_MESSAGE = "Введены не только целые числа!"
_INT = re.compile(r"[+-]?[0-9]+")


class MenuItem(IntEnum):
    EXIT = 1
    READ_FILE = 2
    READ_USER_STANDARD = 3
    READ_USER_COORD = 4
    FILL_WITH_SPARSITY = 5
    PRINT_STANDARD = 6
    PRINT_SPARSE = 7
    SUM_STANDARD_OUT_ST = 8
    SUM_STANDARD_OUT_SP = 9
    SUM_SPARSE_OUT_ST = 10
    SUM_SPARSE_OUT_SP = 11
    RUN_ANALYSIS = 12


_MENU_TITLES = {
    MenuItem.EXIT: "Выйти из программы",
    MenuItem.READ_FILE: "Считать матрицы из файла",
    MenuItem.READ_USER_STANDARD: "Ввести матрицы в стандартном виде",
    MenuItem.READ_USER_COORD: "Ввести матрицы координатным способом",
    MenuItem.FILL_WITH_SPARSITY: "Заполнить матрицы с заданной заполненностью",
    MenuItem.PRINT_STANDARD: "Вывести матрицы в стандартном виде",
    MenuItem.PRINT_SPARSE: "Вывести матрицы в разреженном виде",
    MenuItem.SUM_STANDARD_OUT_ST: "Найти сумму стандартных матриц и вывести в стандартном виде",
    MenuItem.SUM_STANDARD_OUT_SP: "Найти сумму стандартных матриц и вывести в разреженном виде",
    MenuItem.SUM_SPARSE_OUT_ST: "Найти сумму разреженных матриц и вывести в стандартном виде",
    MenuItem.SUM_SPARSE_OUT_SP: "Найти сумму разреженных матриц и вывести в разреженном виде",
    MenuItem.RUN_ANALYSIS: "Провести сравнение различных способов умножения матриц",
}

_ALLOWED_ON_EMPTY = frozenset(
    {
        MenuItem.EXIT,
        MenuItem.READ_FILE,
        MenuItem.READ_USER_STANDARD,
        MenuItem.READ_USER_COORD,
        MenuItem.FILL_WITH_SPARSITY,
        MenuItem.RUN_ANALYSIS,
    }
)
_FLUSHED = frozenset(
    {MenuItem.READ_USER_STANDARD, MenuItem.READ_USER_COORD, MenuItem.FILL_WITH_SPARSITY}
)


class _InputClosed(Exception):
    """The input stream ended while a value was expected."""


class MatrixShell:
    """Menu-driven session over a pair of matrices."""

    analysis_sizes = ANALYSIS_SIZES
    analysis_percents = PERCENTS
    analysis_tests = TESTS_NUM
    analysis_warmup = START_GARBAGE_NUM

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.first: DenseMatrix | None = None
        self.second: DenseMatrix | None = None
        self.rng = random.Random()
        self._pending: deque[str] = deque()
        self._line_open = False

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def _readline(self) -> str:
        self._pending.clear()
        self._line_open = False
        line = self.stdin.readline()
        if not line:
            raise _InputClosed
        return line

    def _next_token(self) -> str | None:
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                self._line_open = False
                return None
            self._pending.extend(line.split())
            self._line_open = line.endswith("\n")
        return self._pending.popleft()

    def _next_int(self, message: str) -> int:
        token = self._next_token()
        if token is None or not _INT.fullmatch(token):
            raise MatrixInputError(message)
        return int(token)

    def _flush(self) -> None:
        """Drop the rest of the current input line."""
        self._pending.clear()
        if self._line_open:
            self._line_open = False
            return
        if not self.stdin.readline().endswith("\n"):
            raise _InputClosed

    def _clear(self) -> None:
        self.first = None
        self.second = None

    def menu_text(self) -> str:
        """Return the numbered list of menu items."""
        return "\n".join(f"{item.value}: {_MENU_TITLES[item]}" for item in MenuItem)

    def _ask_dimensions(self) -> tuple[int, int]:
        self._say("Введите количество строк и столбцов:")
        rows = self._next_int(USER_DIMENSIONS_MESSAGE)
        cols = self._next_int(USER_DIMENSIONS_MESSAGE)
        return check_dimensions(rows, cols)

    def _ask_count(self, prompt: str, total: int) -> int:
        self._say(prompt)
        message = f"Введено количество не от 0 до {total}!"
        count = self._next_int(message)
        if not 0 <= count <= total:
            raise MatrixInputError(message)
        return count

    def _open_input_file(self) -> TextIO:
        while True:
            line = self._readline()
            name = line[:-1] if line.endswith("\n") else line
            if not name:
                self._say("Введите непустое имя файла!")
                continue
            if len(name.encode("utf-8")) > FILENAME_LEN:
                self._say(f"Введите имя файла не длиннее {FILENAME_LEN} символов!")
                continue
            try:
                return open(name, encoding="utf-8", errors="replace")
            except OSError:
                self._say("Введите корректное имя файла!")

    def _read_file(self) -> None:
        self._say("Введите имя файла с матрицами:")
        with self._open_input_file() as stream:
            text = stream.read()
        self.first, self.second = parse_matrix_file(text)
        self._say("Файл прочитан успешно!")

    def _read_dense(self, rows: int, cols: int) -> DenseMatrix:
        self._say(f"Введите значения элементов матрицы размером {rows} на {cols}")
        values = [[self._next_int(USER_VALUES_MESSAGE) for _ in range(cols)] for _ in range(rows)]
        return DenseMatrix(rows, cols, values)

    def _read_standard(self) -> None:
        rows, cols = self._ask_dimensions()
        first = self._read_dense(rows, cols)
        second = self._read_dense(rows, cols)
        self.first, self.second = first, second
        self._say("Матрицы введены успешно")

    def _triples(self, count: int) -> Iterator[tuple[int, int, int]]:
        for _ in range(count):
            i = self._next_int(_TRIPLE_MESSAGE)
            j = self._next_int(_TRIPLE_MESSAGE)
            value = self._next_int(_TRIPLE_MESSAGE)
            yield i, j, value

    def _read_coordinate_matrix(self, rows: int, cols: int, where: str) -> DenseMatrix:
        total = rows * cols
        count = self._ask_count(
            f"Введите количество элементов к вводу {where}(из {total} всего):", total
        )
        self._say(f"Введите {count} троек целых чисел - индекс строки, индекс столбца, значение:")
        return parse_coordinates(rows, cols, self._triples(count))

    def _read_coordinates(self) -> None:
        rows, cols = self._ask_dimensions()
        first = self._read_coordinate_matrix(rows, cols, "в первой матрице")
        second = self._read_coordinate_matrix(rows, cols, "во второй матрице")
        self.first, self.second = first, second
        self._say("Матрицы введены успешно")

    def _fill_with_sparsity(self) -> None:
        rows, cols = self._ask_dimensions()
        total = rows * cols
        first_count = self._ask_count(
            f"Введите количество ненулевых элементов в первой матрице(из {total} всего):", total
        )
        second_count = self._ask_count(
            f"Введите количество ненулевых элементов во второй матрице(из {total} всего):", total
        )
        self.first = random_fill(rows, cols, first_count, self.rng)
        self.second = random_fill(rows, cols, second_count, self.rng)
        self._say("Матрицы заполнены успешно")

    def _pair(self) -> tuple[DenseMatrix, DenseMatrix]:
        if self.first is None or self.second is None:
            raise RuntimeError("matrices are not loaded")
        return self.first, self.second

    def _print_standard(self) -> None:
        first, second = self._pair()
        self._say("Первая матрица в стандартном виде:", first.format())
        self._say("Вторая матрица в стандартном виде:", second.format())

    def _print_sparse(self) -> None:
        first, second = self._pair()
        self._say("Первая матрица в разреженном виде:", first.to_sparse().format())
        self._say("Вторая матрица в разреженном виде:", second.to_sparse().format())

    def _sum_standard_out_standard(self) -> None:
        first, second = self._pair()
        self._say("Получившаяся матрица в стандартном виде::", (first + second).format())

    def _sum_standard_out_sparse(self) -> None:
        first, second = self._pair()
        self._say("Получившаяся матрица в разреженном виде:", (first + second).to_sparse().format())

    def _sum_sparse_out_standard(self) -> None:
        first, second = self._pair()
        total = first.to_sparse() + second.to_sparse()
        self._say("Получившаяся матрица в стандартном виде:", total.to_dense().format())

    def _sum_sparse_out_sparse(self) -> None:
        first, second = self._pair()
        total = first.to_sparse() + second.to_sparse()
        self._say("Получившаяся матрица в разреженном виде:", total.format())

    def _run_analysis(self) -> None:
        self._say("Результаты сравнения (в наносекундах):")
        for rows, cols in self.analysis_sizes:
            self._say(f"\nРазмеры матриц: {rows} x {cols}:", ANALYSIS_HEADER)
            timings = measure(
                [(rows, cols)],
                self.analysis_percents,
                self.analysis_tests,
                self.analysis_warmup,
                self.rng,
            )
            for timing in timings:
                self._say(format_row(timing))

    def handle(self, item: int) -> bool:
        """Carry out one menu item; return True when the session should end."""
        try:
            item = MenuItem(item)
        except ValueError:
            return True

        if (self.first is None or self.second is None) and item not in _ALLOWED_ON_EMPTY:
            self._say(
                "Нельзя производить данное действие над пустыми матрицами!",
                "Прочтите матрицы из файла или заполните вручную!",
            )
            return False
        if item is MenuItem.EXIT:
            return True

        actions = {
            MenuItem.READ_FILE: self._read_file,
            MenuItem.READ_USER_STANDARD: self._read_standard,
            MenuItem.READ_USER_COORD: self._read_coordinates,
            MenuItem.FILL_WITH_SPARSITY: self._fill_with_sparsity,
            MenuItem.PRINT_STANDARD: self._print_standard,
            MenuItem.PRINT_SPARSE: self._print_sparse,
            MenuItem.SUM_STANDARD_OUT_ST: self._sum_standard_out_standard,
            MenuItem.SUM_STANDARD_OUT_SP: self._sum_standard_out_sparse,
            MenuItem.SUM_SPARSE_OUT_ST: self._sum_sparse_out_standard,
            MenuItem.SUM_SPARSE_OUT_SP: self._sum_sparse_out_sparse,
            MenuItem.RUN_ANALYSIS: self._run_analysis,
        }
        try:
            actions[item]()
        except MatrixInputError as error:
            self._say(str(error))
            self._clear()
        if item in _FLUSHED:
            self._flush()
        return False

    def _ask_menu(self) -> MenuItem:
        last = max(MenuItem)
        while True:
            self._say(f"Для выбора пункта меню введите целое число от {MenuItem.EXIT.value} до {last.value}")
            line = self._readline()
            try:
                return MenuItem(parse_number(line, last.value))
            except ValueError:
                continue

    def run(self) -> int:
        """Run the menu loop until exit; return the exit status."""
        self._say(
            "Программа для работы с матрицами в стандартном и разреженном представлении",
            "Для дальнейшей работы загрузите матрицы из файла или заполните вручную с помощью меню",
        )
        try:
            while True:
                self._say(self.menu_text())
                if self.handle(self._ask_menu()):
                    return 0
        except _InputClosed:
            self._say(_EOF_MESSAGE)
            return 1


def main(argv: list[str] | None = None) -> int:
    """Start the interactive matrix session on stdin and stdout."""
    parser = argparse.ArgumentParser(description="Work with dense and sparse matrices.")
    parser.parse_args(argv)
    return MatrixShell(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())