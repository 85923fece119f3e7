import pytest

from dslabs.stacks import (
    STACK_DEPTH,
    ArrayStack,
    ListStack,
    StackEmptyError,
    StackFullError,
    Token,
)

KINDS = [ArrayStack, ListStack]


@pytest.mark.parametrize("kind", KINDS)
def test_pop_returns_tokens_in_reverse_order(kind):
    stack = kind()
    tokens = [Token(1.0), Token("+"), Token(2.5)]
    for token in tokens:
        stack.push(token)
    assert len(stack) == len(tokens)
    popped = [stack.pop() for _ in tokens]
    assert popped == list(reversed(tokens))
    assert len(stack) == 0


@pytest.mark.parametrize("kind", KINDS)
def test_iteration_goes_from_top_down(kind):
    stack = kind()
    tokens = [Token(3.0), Token("*"), Token(4.0), Token("-")]
    for token in tokens:
        stack.push(token)
    assert list(stack) == list(reversed(tokens))
    assert len(stack) == len(tokens)


def test_pop_from_empty_array_stack_raises():
    stack = ArrayStack()
    stack.push(Token(1.0))
    assert stack.pop() == Token(1.0)
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_pop_from_empty_list_stack_raises():
    stack = ListStack()
    stack.push(Token(1.0))
    assert stack.pop() == Token(1.0)
    with pytest.raises(StackEmptyError):
        stack.pop()


@pytest.mark.parametrize("kind", KINDS)
def test_push_beyond_capacity_raises(kind):
    stack = kind(capacity=2)
    stack.push(Token(1.0))
    stack.push(Token(2.0))
    with pytest.raises(StackFullError):
        stack.push(Token(3.0))
    assert len(stack) == 2


@pytest.mark.parametrize("kind", KINDS)
def test_default_capacity_is_stack_depth(kind):
    stack = kind()
    token = Token(0.0)
    for _ in range(STACK_DEPTH):
        stack.push(token)
    with pytest.raises(StackFullError):
        stack.push(token)
    assert len(stack) == STACK_DEPTH


def test_list_stack_records_freed_addresses():
    stack = ListStack(track_freed=True)
    first, second = Token(1.0), Token("/")
    stack.push(first)
    stack.push(second)
    popped = stack.pop()
    assert stack.freed() == [id(popped)]
    stack.pop()
    assert stack.freed() == [id(second), id(first)]


def test_list_stack_without_tracking_keeps_no_addresses():
    stack = ListStack()
    stack.push(Token(1.0))
    stack.pop()
    assert stack.freed() == []


def test_operand_token_prints_six_decimals():
    assert str(Token(1.5)) == "1.500000"


def test_operator_token_prints_its_symbol():
    token = Token("-")
    assert str(token) == "-"
    assert token.is_operator


def test_unknown_operator_is_rejected():
    with pytest.raises(ValueError):
        Token("x")