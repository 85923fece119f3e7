"""Multiplication of a long real number by a long integer.

A real number holds up to 40 mantissa digits and an exponent of at most
99999 in absolute value; an integer holds up to 30 digits.  The product is
normalised to ``0.dddd...E±n`` with at most 30 mantissa digits, rounded
half up.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

MANTISSA_LEN = 40
INT_LEN = 30
MAX_EXPONENT = 99999
OUTPUT_MANTISSA_LEN = 30
BUFFER_LEN = 100
# A line must fit into the read buffer together with its newline.
MAX_LINE_LEN = BUFFER_LEN - 2

_DIGITS = frozenset("0123456789")
_REAL_PATTERN = re.compile(r"[+-]?[0-9]*(\.[0-9]*)?(E[+-]?[0-9]*)?")


class RealNumberError(Exception):
    """Base class for input and range errors of the multiplier."""

    code: ClassVar[int] = 0


class EmptyInputError(RealNumberError):
    """Nothing was entered."""

    code = 1


class InputTooLongError(RealNumberError):
    """The input has more characters or digits than allowed."""

    code = 2


class InvalidInputError(RealNumberError):
    """The input does not describe a number."""

    code = 3


class MachineZeroError(RealNumberError):
    """The exponent of the result is below the smallest allowed."""

    code = 4


class MachineInfinityError(RealNumberError):
    """The exponent of the result is above the largest allowed."""

    code = 5


@dataclass(frozen=True)
class RealNumber:
    """A number equal to ``sign * 0.<mantissa> * 10**exponent``."""

    sign: int = 1
    mantissa: tuple[int, ...] = ()
    exponent: int = 0

    @property
    def is_zero(self) -> bool:
        return not any(self.mantissa)

    def __str__(self) -> str:
        digits = "".join(str(d) for d in self.mantissa).rstrip("0")
        sign = "-" if self.sign == -1 else "+"
        return f"{sign}0.{digits}E{self.exponent:+d}"


@dataclass(frozen=True)
class LongInteger:
    """A signed integer of at most 30 decimal digits."""

    sign: int = 1
    magnitude: int = 0


def _prepare(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        raise EmptyInputError("empty input")
    if len(text) > MAX_LINE_LEN:
        raise InputTooLongError("input line is too long")
    return text


def _split_sign(line: str) -> tuple[int, str]:
    if line[0] == "-":
        return -1, line[1:]
    if line[0] == "+":
        return 1, line[1:]
    return 1, line


def _atoi(text: str) -> int:
    sign, digits = _split_sign(text)
    return sign * int(digits) if digits else 0


def parse_integer(text: str) -> LongInteger:
    """Parse ``[+-]?[0-9]+`` with at most 30 significant digits."""
    line = _prepare(text)
    sign, body = _split_sign(line)
    while len(body) > 1 and body[0] == "0":
        body = body[1:]
    if not set(body) <= _DIGITS:
        raise InvalidInputError(f"not an integer: {line!r}")
    if len(body) > INT_LEN:
        raise InputTooLongError(f"more than {INT_LEN} digits")
    return LongInteger(sign, int(body) if body else 0)


def parse_real(text: str) -> RealNumber:
    """Parse ``[+-]?[0-9]*\\.?[0-9]*(E[-+]?[0-9]+)?`` into a normalised number."""
    line = _prepare(text)
    if not _REAL_PATTERN.fullmatch(line):
        raise InvalidInputError(f"not a real number: {line!r}")

    sign, body = _split_sign(line)
    body = body.lstrip("0")

    mantissa, has_exponent, exponent_text = body.partition("E")
    exponent = 0
    if has_exponent:
        if not exponent_text:
            raise InvalidInputError("missing exponent")
        exponent = _atoi(exponent_text)
        if abs(exponent) > MAX_EXPONENT:
            raise InvalidInputError("exponent out of range")

    dot = mantissa.find(".")
    if dot >= 0:
        mantissa = mantissa.rstrip("0").replace(".", "", 1)
        if len(mantissa) > MANTISSA_LEN:
            raise InputTooLongError(f"more than {MANTISSA_LEN} mantissa digits")
        stripped = mantissa.lstrip("0")
        dot -= len(mantissa) - len(stripped)
        mantissa = stripped
    else:
        dot = len(mantissa)
        if len(mantissa) > MANTISSA_LEN:
            raise InputTooLongError(f"more than {MANTISSA_LEN} mantissa digits")

    digits = tuple(int(c) for c in mantissa.rstrip("0"))
    if not digits:
        return RealNumber(sign, (), 0)
    return RealNumber(sign, digits, exponent + dot)


def multiply(real: RealNumber, integer: LongInteger) -> RealNumber:
    """Return ``real * integer`` rounded half up to 30 mantissa digits.

    Raises MachineInfinityError or MachineZeroError when the exponent of
    the result leaves the allowed range.
    """
    if len(real.mantissa) > MANTISSA_LEN:
        raise ValueError(f"mantissa longer than {MANTISSA_LEN} digits")
    mantissa_value = int("".join(str(d) for d in real.mantissa).ljust(MANTISSA_LEN, "0"))
    product = mantissa_value * integer.magnitude
    if product == 0:
        return RealNumber(1, (), 0)

    digits = str(product)
    length = len(digits)
    if len(digits.rstrip("0")) > OUTPUT_MANTISSA_LEN:
        head = int(digits[:OUTPUT_MANTISSA_LEN])
        if digits[OUTPUT_MANTISSA_LEN] >= "5":
            head += 1
        digits = str(head)
        length += len(digits) - OUTPUT_MANTISSA_LEN

    mantissa = tuple(int(c) for c in digits[:OUTPUT_MANTISSA_LEN].rstrip("0"))
    exponent = real.exponent + length - MANTISSA_LEN
    result = RealNumber(real.sign * integer.sign, mantissa, exponent)

    if exponent > MAX_EXPONENT:
        raise MachineInfinityError(f"exponent {exponent} is too large")
    if exponent < -MAX_EXPONENT:
        raise MachineZeroError(f"exponent {exponent} is too small")
    return result