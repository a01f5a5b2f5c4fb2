"""Stack-based drills: reversal, notation conversion, bracket checks and tracking stacks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

OPENERS = {")": "(", "}": "{", "]": "["}
OPERATORS = frozenset("+-*/")


def reverse_string(s: str) -> str:
    """Return s with its characters in reverse order, popped off a stack."""
    stack = list(s)
    return "".join(stack.pop() for _ in range(len(stack)))


def postfix_to_prefix(expr: str) -> str:
    """Convert a postfix expression of single-character operands to prefix form.

    Alphanumeric characters are operands; every other character is a binary
    operator. The expression left on top of the stack is returned.
    """
    stack: list[str] = []
    for char in expr:
        if char.isalnum():
            stack.append(char)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} is missing an operand")
        right = stack.pop()
        left = stack.pop()
        stack.append(char + left + right)
    if not stack:
        raise ValueError("expression is empty")
    return stack[-1]


def is_valid_brackets(s: str) -> bool:
    """True when every bracket is closed by its partner in the right order.

    Any character that is not an opening bracket closes the innermost one.
    """
    stack: list[str] = []
    for char in s:
        if char in "({[":
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = OPENERS.get(char)
        if expected is not None and top != expected:
            return False
    return not stack


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def eval_rpn(tokens: Iterable[str] | str) -> int:
    """Evaluate a reverse Polish expression of integers and + - * /.

    Division truncates toward zero. A string is split on whitespace.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    stack: list[int] = []
    for token in tokens:
        if token in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} is missing an operand")
            b = stack.pop()
            a = stack.pop()
            if token == "+":
                stack.append(a + b)
            elif token == "-":
                stack.append(a - b)
            elif token == "*":
                stack.append(a * b)
            else:
                stack.append(_truncating_div(a, b))
        else:
            stack.append(int(token))
    if not stack:
        raise ValueError("expression is empty")
    return stack[-1]


class MinStack:
    """A stack that reports its smallest value at any time."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._minima: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put value on top of the stack."""
        self._items.append(value)
        if not self._minima or value <= self._minima[-1]:
            self._minima.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; an empty stack is left alone and gives None."""
        if not self._items:
            return None
        value = self._items.pop()
        if value == self._minima[-1]:
            self._minima.pop()
        return value

    def minimum(self) -> Any:
        """The smallest value on the stack, or None when it is empty."""
        return self._minima[-1] if self._minima else None


class FrequencyStack:
    """A stack that counts how often each value is currently held."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._counts: Counter = Counter()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put value on top of the stack."""
        self._items.append(value)
        self._counts[value] += 1

    def pop(self) -> Any:
        """Remove and return the top value; an empty stack is left alone and gives None."""
        if not self._items:
            return None
        value = self._items.pop()
        self._counts[value] -= 1
        return value

    def top_frequency(self) -> int | None:
        """How many times the top value is held, or None when the stack is empty."""
        if not self._items:
            return None
        return self._counts[self._items[-1]]


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from each primitive group of parentheses."""
    kept = []
    depth = 0
    for char in s:
        if char == "(":
            if depth:
                kept.append(char)
            depth += 1
        else:
            depth -= 1
            if depth:
                kept.append(char)
    return "".join(kept)


def next_greater_then_smaller(items: Sequence[int]) -> list[int]:
    """For each item, the first value smaller than its next greater element.

    The search starts just after the next greater element; -1 marks items
    with no next greater element or no smaller value after it.
    """
    n = len(items)
    next_greater = [-1] * n
    stack: list[int] = []
    for i in range(n - 1, -1, -1):
        while stack and items[stack[-1]] <= items[i]:
            stack.pop()
        if stack:
            next_greater[i] = stack[-1]
        stack.append(i)

    answers = []
    for p in next_greater:
        if p == -1:
            answers.append(-1)
            continue
        answers.append(next((v for v in items[p + 1:] if v < items[p]), -1))
    return answers