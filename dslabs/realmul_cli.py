"""Interactive command that multiplies a real number by an integer."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from dslabs.realmul import (
    INT_LEN,
    MANTISSA_LEN,
    MAX_EXPONENT,
    OUTPUT_MANTISSA_LEN,
    EmptyInputError,
    InputTooLongError,
    InvalidInputError,
    MachineInfinityError,
    MachineZeroError,
    multiply,
    parse_integer,
    parse_real,
)

_MESSAGES = {
    EmptyInputError: "Пустой ввод!",
    InputTooLongError: "Слишком большой ввод!",
    InvalidInputError: "Неверный ввод!",
    MachineZeroError: "Машинный ноль!",
    MachineInfinityError: "Машинная бесконечность!",
}


def ruler(length: int) -> str:
    """Return a ruler line marking every tenth position with its tens digit."""
    marks = (str(i // 10) if i % 10 == 0 else "-" for i in range(1, length + 1))
    return "+" + "".join(marks)


def error_message(error: BaseException) -> str:
    """Return the user-facing message for an error."""
    for kind, message in _MESSAGES.items():
        if isinstance(error, kind):
            return message
    return "Неизвестная ошибка"


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if len(line) <= 1:
        raise EmptyInputError("empty input")
    if not line.endswith("\n"):
        raise InputTooLongError("input line is too long")
    return line[:-1]


def _greet_real(out: TextIO) -> None:
    print(r"Введите вещественное число, описываемое выражением [+-]?[0-9]*\.?[0-9]*(E[-+]?[0-9]+)? ,", file=out)
    print(
        f"где сумма количества значащих цифр до и после точки в мантиссе <= {MANTISSA_LEN}, "
        f"а модуль порядка <= {MAX_EXPONENT}",
        file=out,
    )
    print(ruler(MANTISSA_LEN), file=out)


def _greet_int(out: TextIO) -> None:
    print("Введите целое число, описываемое выражением [+-]?[0-9]+ ,", file=out)
    print(f"где сумма значащих цифр <= {INT_LEN}", file=out)
    print(ruler(INT_LEN), file=out)


def main(argv: list[str] | None = None) -> int:
    """Read a real number and an integer from stdin and print their product."""
    parser = argparse.ArgumentParser(description="Multiply a long real number by a long integer.")
    parser.parse_args(argv)

    stdin, out = sys.stdin, sys.stdout
    print("Программа для умножения вещественного числа на целое.", file=out)
    try:
        _greet_real(out)
        real = parse_real(_read_line(stdin))
        _greet_int(out)
        integer = parse_integer(_read_line(stdin))
        result = multiply(real, integer)
    except (EmptyInputError, InputTooLongError, InvalidInputError, MachineZeroError, MachineInfinityError) as error:
        print(error_message(error), file=out)
        return error.code

    print(
        "Результат умножения (вещественное число в нормализованной форме до "
        f"{OUTPUT_MANTISSA_LEN} знаков в мантиссе):",
        file=out,
    )
    print(result, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())