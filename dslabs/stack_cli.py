"""Interactive menu for array and list stacks and expression evaluation."""

from __future__ import annotations

import argparse
import math
import random
import re
import sys
import time
from enum import IntEnum
from typing import Callable, Optional, TextIO, Union

from dslabs.expression import ExpressionError, evaluate, is_operator, scan_number, solve
from dslabs.stacks import (
    STACK_DEPTH,
    ArrayStack,
    ListStack,
    StackEmptyError,
    StackFullError,
    Token,
    TokenStack,
)

TESTS_MUL = 10_000_000
START_GARBAGE_NUM = 10
ANALYSIS_SIZES = (2, 25, 250, 2500, 25000)
ANALYSIS_SEED = 25000
MAX_EXPRESSION_LEN = 4094

# Byte sizes of the fixed-width stack layouts.
TOKEN_SIZE = 16
LIST_NODE_SIZE = TOKEN_SIZE + 8
LIST_STACK_SIZE = 16
ARRAY_STACK_SIZE = TOKEN_SIZE * STACK_DEPTH + 8

EMPTY_VALUE_MESSAGE = "Введено пустое значение!"
INVALID_VALUE_MESSAGE = "Введено некорректное значение!"
INVALID_EXPRESSION_MESSAGE = "Введено некорректное выражение!"
ANALYSIS_HEADER = (
    "| Длина выражения | Время расчета списками | Время расчета массивами | "
    "Выигрыш времени от стека на массиве | Размер стека на списке, байт | "
    "Выигрыш памяти от стека на списке |"
)

_MENU_NUMBER = re.compile(r"[0-9]+\n")


class MenuItem(IntEnum):
    EXIT = 0
    INIT_ARRAY_STACK = 1
    INIT_LIST_STACK = 2
    PUSH_ELEM = 3
    POP_ELEM = 4
    PRINT_STACK = 5
    PRINT_FREED_MEMORY = 6
    SOLVE_PROBLEM = 7
    RUN_ANALYSIS = 8


_MENU_TITLES = {
    MenuItem.EXIT: "Выйти из программы",
    MenuItem.INIT_ARRAY_STACK: "Инициализировать стек на массиве",
    MenuItem.INIT_LIST_STACK: "Инициализировать стек на списке",
    MenuItem.PUSH_ELEM: "Записать элемент на стек",
    MenuItem.POP_ELEM: "Снять элемент со стека",
    MenuItem.PRINT_STACK: "Напечатать стек",
    MenuItem.PRINT_FREED_MEMORY: "Напечатать массив освобожденных адресов(только для списка)",
    MenuItem.SOLVE_PROBLEM: "Найти значение выражения",
    MenuItem.RUN_ANALYSIS: "Провести сравнение стека на массиве и списке",
}

_ALLOWED_UNINITIALISED = frozenset(
    {
        MenuItem.EXIT,
        MenuItem.RUN_ANALYSIS,
        MenuItem.SOLVE_PROBLEM,
        MenuItem.INIT_LIST_STACK,
        MenuItem.INIT_ARRAY_STACK,
    }
)


class _InputClosed(Exception):
    """The input stream ended while a value was expected."""


def calc_gain(before: float, after: float) -> float:
    """Return how many percent smaller ``after`` is than ``before``."""
    if before == 0:
        if after == 0:
            return math.nan
        return -math.inf if after > 0 else math.inf
    return (1.0 - after / before) * 100.0


def parse_token(text: str) -> Token:
    """Turn one input line (with its newline) into a token.

    A line holding a number up to the newline is an operand; a single
    operator character is an operator.  Raise ValueError otherwise.
    """
    if len(text) < 2:
        raise ValueError(EMPTY_VALUE_MESSAGE)
    scanned = scan_number(text)
    if scanned is not None:
        value, end = scanned
        if text[end:end + 1] == "\n":
            return Token(value)
    if len(text) > 2 or not is_operator(text[0]):
        raise ValueError(INVALID_VALUE_MESSAGE)
    return Token(text[0])


def _random_tokens(count: int, rng: random.Random) -> list[Token]:
    return [
        Token(rng.uniform(-500.0, 500.0)) if i % 2 == 0 else Token(rng.choice("+-*/"))
        for i in range(count)
    ]


def _time_evaluate(
    kind: Callable[[], TokenStack], tokens: list[Token], tests: int, warmup: int
) -> int:
    def run_once() -> int:
        in_stack, out_stack = kind(), kind()
        for token in tokens:
            in_stack.push(token)
        start = time.perf_counter_ns()
        evaluate(in_stack, out_stack)
        return time.perf_counter_ns() - start

    for _ in range(warmup):
        run_once()
    return sum(run_once() for _ in range(tests)) // tests


class StackShell:
    """Menu-driven session over one stack of tokens."""

    analysis_sizes = ANALYSIS_SIZES
    analysis_tests_mul = TESTS_MUL
    analysis_warmup = START_GARBAGE_NUM

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.stack: Optional[Union[ArrayStack, ListStack]] = None

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _InputClosed
        return line

    def menu_text(self) -> str:
        """Return the numbered list of menu items."""
        return "\n".join(f"{item.value}: {_MENU_TITLES[item]}" for item in MenuItem)

    def _push(self, stack: Union[ArrayStack, ListStack]) -> None:
        self._say("Введите элемент стека - вещественное число в формате IEEE754 или символ действия [+-*/]:")
        line = self._readline()
        try:
            token = parse_token(line)
        except ValueError as error:
            self._say(str(error))
            return
        try:
            stack.push(token)
        except StackFullError:
            self._say("Стек переполнен!")
            return
        if token.is_operator:
            self._say("В стек успешно добавлен оператор")
        else:
            self._say("В стек успешно добавлено число")

    def _pop(self, stack: Union[ArrayStack, ListStack]) -> None:
        try:
            token = stack.pop()
        except StackEmptyError:
            self._say("Стек пуст!")
            return
        self._say("Бывшее значение на вершине стека:", str(token))

    def _print_stack(self, stack: Union[ArrayStack, ListStack]) -> None:
        if not stack:
            self._say("Стек пуст!")
            return
        if isinstance(stack, ListStack):
            self._say("Стек-список:")
            self._say(*(f"{hex(id(token))} {token}" for token in stack))
        else:
            self._say("Стек-массив:")
            self._say(*(str(token) for token in stack))

    def _print_freed(self, stack: Union[ArrayStack, ListStack]) -> None:
        if not isinstance(stack, ListStack):
            self._say("Действие не имеет смысла для стека-массива!")
            return
        freed = stack.freed()
        if not freed:
            self._say("Массив адресов освобожденной памяти пуст!")
            return
        self._say("Массив адресов освобожденной памяти:")
        self._say(*(hex(address) for address in freed))

    def _solve(self) -> None:
        self._say("Введите выражение в виде (число)(знак)(число)...(знак)(число):")
        line = self._readline()
        size = len(line.encode("utf-8"))
        if size < 2 or size > MAX_EXPRESSION_LEN or not line.endswith("\n"):
            self._say(INVALID_EXPRESSION_MESSAGE)
            return
        try:
            value = solve(line[:-1])
        except ExpressionError:
            self._say(INVALID_EXPRESSION_MESSAGE)
            return
        if math.isfinite(value):
            self._say(f"Значение выражения: {value:f}")
        else:
            self._say("Деление на 0 в выражении!")

    def _run_analysis(self) -> None:
        rng = random.Random(ANALYSIS_SEED)
        tokens = _random_tokens(STACK_DEPTH, rng)
        self._say("Результаты сравнения (в наносекундах):", ANALYSIS_HEADER)
        for base in self.analysis_sizes:
            size = base * 2 + 1
            part = tokens[:size]
            tests = max(1, self.analysis_tests_mul // size)
            array_ns = _time_evaluate(ArrayStack, part, tests, self.analysis_warmup)
            list_ns = _time_evaluate(ListStack, part, tests, self.analysis_warmup)
            list_size = LIST_NODE_SIZE * size + LIST_STACK_SIZE
            self._say(
                f"| {size:15d} | {list_ns:22d} | {array_ns:23d} | "
                f"{calc_gain(list_ns, array_ns):34.2f}% | {list_size:28d} | "
                f"{calc_gain(ARRAY_STACK_SIZE, list_size):32.2f}% |"
            )
        self._say(f"Размер стека на массиве, байт: {ARRAY_STACK_SIZE}")

    def handle(self, item: int) -> bool:
        """Carry out one menu item; return True when the session should end."""
        item = MenuItem(item)
        stack = self.stack
        if stack is None and item not in _ALLOWED_UNINITIALISED:
            self._say("Нельзя производить данное действие над неинициализированным стеком!")
            return False

        if item is MenuItem.EXIT:
            return True
        if item is MenuItem.INIT_ARRAY_STACK:
            self.stack = ArrayStack()
            self._say("Стек на массиве успешно инициализирован")
        elif item is MenuItem.INIT_LIST_STACK:
            self.stack = ListStack(track_freed=True)
            self._say("Стек на списке успешно инициализирован")
        elif item is MenuItem.SOLVE_PROBLEM:
            self._solve()
        elif item is MenuItem.RUN_ANALYSIS:
            self._run_analysis()
        elif stack is not None:
            actions = {
                MenuItem.PUSH_ELEM: self._push,
                MenuItem.POP_ELEM: self._pop,
                MenuItem.PRINT_STACK: self._print_stack,
                MenuItem.PRINT_FREED_MEMORY: self._print_freed,
            }
            actions[item](stack)
        return False

    def _ask_menu(self) -> MenuItem:
        last = max(MenuItem)
        while True:
            self._say(f"Для выбора пункта меню введите целое число от {MenuItem.EXIT.value} до {last.value}")
            line = self._readline()
            if _MENU_NUMBER.fullmatch(line) and int(line) <= last.value:
                return MenuItem(int(line))

    def run(self) -> int:
        """Run the menu loop; return 0 on exit and 1 when input ends."""
        self._say(
            "Программа для работы со стеком на массиве и списке",
            "Для дальнейшей работы инициализируйте стек на одном из типов данных",
        )
        try:
            while True:
                self._say(self.menu_text())
                if self.handle(self._ask_menu()):
                    return 0
        except _InputClosed:
            return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive stack session on stdin and stdout."""
    parser = argparse.ArgumentParser(description="Work with array and list stacks.")
    parser.parse_args(argv)
    return StackShell(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())