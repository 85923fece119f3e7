"""Stacks of expression tokens, one kept in a list and one in linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, Union

STACK_DEPTH = 50001
MAX_FREED_NUM = 1000
OPERATORS = frozenset("+-*/")


class StackFullError(OverflowError):
    """The stack already holds as many tokens as it may."""


class StackEmptyError(IndexError):
    """The stack holds no tokens."""


@dataclass(frozen=True)
class Token:
    """An operand (a number) or an operator (one of ``+ - * /``)."""

    value: Union[float, str]

    def __post_init__(self) -> None:
        if isinstance(self.value, str) and self.value not in OPERATORS:
            raise ValueError(f"unknown operator: {self.value!r}")

    @property
    def is_operator(self) -> bool:
        return isinstance(self.value, str)

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return f"{self.value:f}"


class TokenStack(Protocol):
    def push(self, token: Token) -> None: ...

    def pop(self) -> Token: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Token]: ...


class ArrayStack:
    """A bounded stack kept in a list."""

    def __init__(self, capacity: int = STACK_DEPTH) -> None:
        self._tokens: list[Token] = []
        self._capacity = capacity

    def push(self, token: Token) -> None:
        """Put a token on top; raise StackFullError when full."""
        if len(self._tokens) >= self._capacity:
            raise StackFullError("the stack is full")
        self._tokens.append(token)

    def pop(self) -> Token:
        """Take the top token off; raise StackEmptyError when empty."""
        if not self._tokens:
            raise StackEmptyError("the stack is empty")
        return self._tokens.pop()

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        """Yield the tokens from the top down."""
        return reversed(self._tokens)


@dataclass
class _Node:
    token: Token
    below: Optional[_Node]


class ListStack:
    """A bounded stack kept in linked nodes.

    With ``track_freed`` set, the addresses of popped tokens are remembered,
    up to MAX_FREED_NUM of them.
    """

    def __init__(self, capacity: int = STACK_DEPTH, track_freed: bool = False) -> None:
        self._head: Optional[_Node] = None
        self._depth = 0
        self._capacity = capacity
        self._track_freed = track_freed
        self._freed: list[int] = []

    def push(self, token: Token) -> None:
        """Put a token on top; raise StackFullError when full."""
        if self._depth >= self._capacity:
            raise StackFullError("the stack is full")
        self._head = _Node(token, self._head)
        self._depth += 1

    def pop(self) -> Token:
        """Take the top token off; raise StackEmptyError when empty."""
        node = self._head
        if node is None:
            raise StackEmptyError("the stack is empty")
        self._head = node.below
        self._depth -= 1
        if self._track_freed and len(self._freed) < MAX_FREED_NUM:
            self._freed.append(id(node.token))
        return node.token

    def __len__(self) -> int:
        return self._depth

    def __iter__(self) -> Iterator[Token]:
        """Yield the tokens from the top down."""
        node = self._head
        while node is not None:
            yield node.token
            node = node.below

    def freed(self) -> list[int]:
        """Return the addresses of the popped tokens, oldest first."""
        return list(self._freed)