import pytest

from aocsolve.y2020_day18 import (
    evaluate,
    infix_to_postfix,
    part1,
    part2,
    solve_postfix,
)


def flat(char):
    return 1 if char in "+-*/" else 0


def test_example_flat():
    assert part1("1 + 2 * 3 + 4 * 5 + 6") == 71


def test_example_addition_first():
    assert part2("1 + 2 * 3 + 4 * 5 + 6") == 231


def test_example_parentheses_addition_first():
    assert part2("2 * 3 + (4 * 5)") == 46


def test_flat_is_left_to_right():
    assert evaluate("1 + 2 * 3", flat) == evaluate("(1 + 2) * 3", flat)


def test_addition_first_groups_sums():
    assert part2("1 + 2 * 3") == part1("(1 + 2) * 3")


def test_lines_are_summed():
    assert part1("1 + 2\n3 * 4\n") == part1("1 + 2") + part1("3 * 4")


def test_blank_lines_are_ignored():
    assert part1("1 + 2\n\n") == part1("1 + 2")


def test_single_digit():
    assert evaluate("7", flat) == 7


def test_postfix_drops_parentheses():
    with_parens = infix_to_postfix("(1 + 2)", flat)
    assert with_parens == infix_to_postfix("1 + 2", flat)
    assert set(with_parens) == {"1", "2", "+"}


def test_unbalanced_close_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("1 + 2)", flat)


def test_unclosed_open_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("(1 + 2", flat)


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        solve_postfix("1+")


def test_unknown_operator_raises():
    with pytest.raises(ValueError):
        solve_postfix("12%")


def test_leftover_operands_raise():
    with pytest.raises(ValueError):
        solve_postfix("12")