"""2020 day 18: arithmetic with unusual operator precedence."""

from __future__ import annotations

import operator
from collections.abc import Callable

from aocsolve.textio import read_lines

Precedence = Callable[[str], int]

# The first operand popped is the left one, as the evaluator has always done.
_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _flat_precedence(char: str) -> int:
    if char in _OPERATIONS:
        return 1
    return 0


def _addition_first_precedence(char: str) -> int:
    if char in ("*", "/"):
        return 1
    if char in ("+", "-"):
        return 2
    return 0


def infix_to_postfix(expression: str, precedence: Precedence) -> str:
    """Convert an infix expression of single digits to postfix notation."""
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if _is_digit(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError(f"unbalanced ')' in {expression!r}")
            stack.pop()
        else:
            while stack and precedence(char) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError(f"unbalanced '(' in {expression!r}")
        output.append(top)
    return "".join(output)


def solve_postfix(postfix: str) -> int | float:
    """Evaluate a postfix expression of single digits."""
    stack: list[int | float] = []
    for char in postfix:
        if _is_digit(char):
            stack.append(int(char))
            continue
        try:
            operation = _OPERATIONS[char]
        except KeyError:
            raise ValueError(f"unknown operator {char!r}") from None
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        first = stack.pop()
        second = stack.pop()
        stack.append(operation(first, second))
    if len(stack) != 1:
        raise ValueError(f"malformed postfix expression {postfix!r}")
    return stack[0]


def evaluate(expression: str, precedence: Precedence) -> int | float:
    """Evaluate an infix expression under the given precedence."""
    return solve_postfix(infix_to_postfix(expression, precedence))


def _total(text: str, precedence: Precedence) -> int:
    return sum(
        int(evaluate(line, precedence)) for line in read_lines(text) if line.strip()
    )


def part1(text: str) -> int:
    """Sum of all lines with every operator at equal precedence."""
    return _total(text, _flat_precedence)


def part2(text: str) -> int:
    """Sum of all lines with addition binding tighter than multiplication."""
    return _total(text, _addition_first_precedence)