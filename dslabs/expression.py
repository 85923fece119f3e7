"""Evaluation of arithmetic expressions over two token stacks.

An expression is numbers separated by ``+ - * /``.  Multiplication and
division are done first, then addition and subtraction, each from left to
right.  Numbers follow the C floating-point syntax; blanks are allowed only
before a number.  Division by zero gives an infinity or NaN.
"""

from __future__ import annotations

import math
import random
import re
from typing import Optional

from dslabs.stacks import (
    ArrayStack,
    ListStack,
    StackEmptyError,
    StackFullError,
    Token,
    TokenStack,
)

_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*(?P<sign>[+-]?)(?:"
    r"0[xX](?P<hex>[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?P<hexexp>[pP][+-]?[0-9]+)?"
    r"|(?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r"|(?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)"
    r"|(?P<nan>[nN][aA][nN])(?:\([0-9A-Za-z_]*\))?"
    r")"
)

_STACK_KINDS = (ArrayStack, ListStack)


class ExpressionError(ValueError):
    """The text is not a valid expression."""


def is_operator(char: str) -> bool:
    """Return True for one of ``+ - * /``."""
    return len(char) == 1 and char in "+-*/"


def _hex_value(sign: str, mantissa: str, exponent: Optional[str]) -> float:
    if mantissa.endswith("."):
        mantissa = mantissa[:-1]
    if mantissa.startswith("."):
        mantissa = "0" + mantissa
    try:
        return float.fromhex(f"{sign}0x{mantissa}{exponent or ''}")
    except OverflowError:
        return -math.inf if sign == "-" else math.inf


def scan_number(text: str, start: int = 0) -> Optional[tuple[float, int]]:
    """Read a number at ``start``, skipping blanks before it.

    Return the value and the position just after it, or None when no
    number starts there.
    """
    match = _NUMBER.match(text, start)
    if match is None:
        return None
    sign = match.group("sign")
    if match.group("hex") is not None:
        value = _hex_value(sign, match.group("hex"), match.group("hexexp"))
    elif match.group("dec") is not None:
        value = float(sign + match.group("dec"))
    elif match.group("inf") is not None:
        value = -math.inf if sign == "-" else math.inf
    else:
        value = math.nan
    return value, match.end()


def parse_expression(text: str, stack: TokenStack) -> None:
    """Push the tokens of ``text`` onto ``stack`` in reading order."""
    if not text:
        raise ExpressionError("empty expression")
    position = 0
    expect_operand = True
    while position < len(text):
        if expect_operand:
            scanned = scan_number(text, position)
            if scanned is None:
                raise ExpressionError(f"number expected at position {position}")
            value, position = scanned
            token = Token(value)
        else:
            char = text[position]
            if not is_operator(char):
                raise ExpressionError(f"operator expected at position {position}")
            token = Token(char)
            position += 1
        expect_operand = not expect_operand
        try:
            stack.push(token)
        except StackFullError as error:
            raise ExpressionError("expression is too long") from error
    if expect_operand:
        raise ExpressionError("expression ends with an operator")


def _apply(left: float, operator: str, right: float) -> float:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _operand(token: Token) -> float:
    if isinstance(token.value, str):
        raise ExpressionError("operand expected")
    return token.value


def _operator(token: Token) -> str:
    if not isinstance(token.value, str):
        raise ExpressionError("operator expected")
    return token.value


def _move(source: TokenStack, target: TokenStack) -> None:
    """Reverse ``source`` onto ``target``, then return the first token."""
    while source:
        target.push(source.pop())
    source.push(target.pop())


def evaluate(in_stack: TokenStack, out_stack: TokenStack) -> float:
    """Compute the expression held in ``in_stack`` (last token on top).

    ``out_stack`` is working space; both stacks are left empty.
    """
    try:
        _move(in_stack, out_stack)
        while out_stack:
            operator = out_stack.pop()
            operand_2 = out_stack.pop()
            if _operator(operator) in "+-":
                in_stack.push(operator)
                in_stack.push(operand_2)
                continue
            operand_1 = _operand(in_stack.pop())
            in_stack.push(Token(_apply(operand_1, operator.value, _operand(operand_2))))

        _move(in_stack, out_stack)
        while out_stack:
            operator = _operator(out_stack.pop())
            operand_2 = _operand(out_stack.pop())
            operand_1 = _operand(in_stack.pop())
            in_stack.push(Token(_apply(operand_1, operator, operand_2)))

        return _operand(in_stack.pop())
    except StackEmptyError as error:
        raise ExpressionError("malformed expression") from error


def solve(text: str) -> float:
    """Parse and compute ``text``, choosing the stack kinds by its length."""
    rng = random.Random(len(text))
    in_stack = rng.choice(_STACK_KINDS)()
    parse_expression(text, in_stack)
    out_stack = rng.choice(_STACK_KINDS)()
    return evaluate(in_stack, out_stack)