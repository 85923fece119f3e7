import io
from decimal import Decimal

import pytest

from dslabs.realmul import (
    EmptyInputError,
    InputTooLongError,
    InvalidInputError,
    MachineInfinityError,
    MachineZeroError,
)
from dslabs.realmul_cli import error_message, main, ruler


def test_ruler_forty():
    assert ruler(40) == "+---------1---------2---------3---------4"


@pytest.mark.parametrize("length", [0, 5, 30, 40])
def test_ruler_length(length):
    line = ruler(length)
    assert len(line) == length + 1
    assert line[0] == "+"


@pytest.mark.parametrize(
    "error, message",
    [
        (EmptyInputError(), "Пустой ввод!"),
        (InputTooLongError(), "Слишком большой ввод!"),
        (InvalidInputError(), "Неверный ввод!"),
        (MachineZeroError(), "Машинный ноль!"),
        (MachineInfinityError(), "Машинная бесконечность!"),
        (ValueError(), "Неизвестная ошибка"),
    ],
)
def test_error_message(error, message):
    assert error_message(error) == message


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_main_prints_product(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1.5\n-2\n")
    assert code == 0
    assert Decimal(out.splitlines()[-1]) == Decimal("-3")


def test_main_invalid_real(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "abc\n")
    assert code == 3
    assert out.splitlines()[-1] == "Неверный ввод!"


def test_main_empty_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 1
    assert out.splitlines()[-1] == "Пустой ввод!"


def test_main_integer_too_long(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n" + "1" * 31 + "\n")
    assert code == 2
    assert out.splitlines()[-1] == "Слишком большой ввод!"


def test_main_line_without_newline_is_too_long(monkeypatch, capsys):
    code, _ = _run(monkeypatch, capsys, "12")
    assert code == 2


def test_main_infinity(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "9E99999\n1\n")
    assert code == 5
    assert out.splitlines()[-1] == "Машинная бесконечность!"


def test_main_machine_zero(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "0.01E-99999\n1\n")
    assert code == 4
    assert out.splitlines()[-1] == "Машинный ноль!"