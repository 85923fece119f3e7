from decimal import ROUND_HALF_UP, Context, Decimal

import pytest

from dslabs.realmul import (
    EmptyInputError,
    InputTooLongError,
    InvalidInputError,
    LongInteger,
    MachineInfinityError,
    MachineZeroError,
    RealNumber,
    multiply,
    parse_integer,
    parse_real,
)

ROUNDING = Context(prec=30, rounding=ROUND_HALF_UP)


@pytest.mark.parametrize(
    "text",
    ["123.456", "-0.00123E2", "1.5E3", "+42", "100.", ".5", "10.50E-7", "7E-3"],
)
def test_parse_real_round_trips_through_str(text):
    assert Decimal(str(parse_real(text))) == Decimal(text)


def test_parse_real_strips_trailing_newline():
    assert parse_real("12.5\n") == parse_real("12.5")


def test_parse_real_is_normalised():
    number = parse_real("000123.4500")
    assert number.mantissa[0] != 0
    assert number.mantissa[-1] != 0
    assert number.sign == 1


def test_parse_real_zero_has_zero_exponent():
    number = parse_real("0.000E5")
    assert number.is_zero
    assert number.exponent == 0


def test_parse_real_accepts_limits():
    assert len(parse_real("1" * 40).mantissa) == 40
    assert Decimal(str(parse_real("1E99999"))) == Decimal("1E99999")


@pytest.mark.parametrize("text, sign, value", [("-0042", -1, 42), ("+7", 1, 7), ("000", 1, 0)])
def test_parse_integer(text, sign, value):
    assert parse_integer(text) == LongInteger(sign, value)


@pytest.mark.parametrize(
    "text, error",
    [
        ("", EmptyInputError),
        ("12a", InvalidInputError),
        ("1.5", InvalidInputError),
        ("1" * 31, InputTooLongError),
    ],
)
def test_parse_integer_errors(text, error):
    with pytest.raises(error):
        parse_integer(text)


def test_parse_integer_ignores_leading_zeros_for_length():
    assert parse_integer("0" * 10 + "1" * 30).magnitude == int("1" * 30)


@pytest.mark.parametrize(
    "real, integer",
    [("1.5", "2"), ("123.456", "-789"), ("-0.00123E2", "1000"), ("-2.5", "-4"), ("9.99", "1")],
)
def test_multiply_matches_exact_product(real, integer):
    result = multiply(parse_real(real), parse_integer(integer))
    assert Decimal(str(result)) == Decimal(real) * Decimal(integer)


def test_multiply_sign_of_negatives():
    assert multiply(parse_real("-2.5"), parse_integer("-4")).sign == 1


def test_multiply_by_one_is_identity():
    number = parse_real("-3.14159E10")
    assert multiply(number, parse_integer("1")) == number


@pytest.mark.parametrize(
    "real, integer",
    [("9" * 40, "9" * 30), ("1" + "0" * 29 + "5", "1"), ("9" * 31, "1"), ("1" + "0" * 29 + "4", "3")],
)
def test_multiply_rounds_half_up_to_thirty_digits(real, integer):
    result = multiply(parse_real(real), parse_integer(integer))
    assert len(result.mantissa) <= 30
    assert Decimal(str(result)) == ROUNDING.multiply(Decimal(real), Decimal(integer))


def test_multiply_by_zero_gives_positive_zero():
    result = multiply(parse_real("-5"), parse_integer("-0"))
    assert str(result) == "+0.E+0"


def test_multiply_overflow():
    with pytest.raises(MachineInfinityError):
        multiply(parse_real("9E99999"), parse_integer("1"))


def test_multiply_underflow():
    with pytest.raises(MachineZeroError):
        multiply(parse_real("0.01E-99999"), parse_integer("1"))


def test_multiply_rejects_oversized_mantissa():
    with pytest.raises(ValueError):
        multiply(RealNumber(1, (1,) * 41, 0), LongInteger(1, 1))


def test_str_negative_sign():
    assert str(parse_real("-0.5")).startswith("-0.5E")