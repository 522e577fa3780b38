"""2023 day 19: sorting machine parts through workflows."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

ACCEPTED = "A"
REJECTED = "R"
_RATING_RANGE = (1, 4000)
_CATEGORIES = "xmas"


@dataclass(frozen=True)
class Condition:
    """A comparison of one rating against a number, with the workflow to go to if it holds."""

    variable: str
    is_bigger: bool
    number: int
    target: str

    def matches(self, part: Mapping[str, int]) -> bool:
        """True if ``part`` satisfies the comparison."""
        try:
            value = part[self.variable]
        except KeyError:
            raise ValueError(f"part has no rating {self.variable!r}") from None
        return value > self.number if self.is_bigger else value < self.number


@dataclass(frozen=True)
class Workflow:
    """An ordered list of conditions and the target used when none holds."""

    conditions: tuple[Condition, ...]
    fallback: str

    def destination(self, part: Mapping[str, int]) -> str:
        """Name of the workflow (or ``A``/``R``) that ``part`` is sent to."""
        for condition in self.conditions:
            if condition.matches(part):
                return condition.target
        return self.fallback


def _parse_condition(rule: str) -> Condition:
    test, sep, target = rule.partition(":")
    if not sep or len(test) < 3 or test[1] not in "<>":
        raise ValueError(f"malformed condition {rule!r}")
    return Condition(test[0], test[1] == ">", int(test[2:]), target)


def parse_workflow(line: str) -> tuple[str, Workflow]:
    """Parse ``name{rule,...,fallback}`` into the name and its workflow."""
    name, sep, body = line.strip().partition("{")
    if not sep or not body.endswith("}") or not name:
        raise ValueError(f"malformed workflow {line!r}")
    *rules, fallback = body[:-1].split(",")
    return name, Workflow(tuple(_parse_condition(rule) for rule in rules), fallback)


def parse_part(line: str) -> dict[str, int]:
    """Parse ``{x=1,m=2,...}`` into a mapping of ratings."""
    line = line.strip()
    if not (line.startswith("{") and line.endswith("}")):
        raise ValueError(f"malformed part {line!r}")
    ratings: dict[str, int] = {}
    for field in line[1:-1].split(","):
        key, sep, value = field.partition("=")
        if not sep or not key:
            raise ValueError(f"malformed rating {field!r}")
        ratings[key] = int(value)
    return ratings


def _parse(text: str) -> tuple[dict[str, Workflow], list[dict[str, int]]]:
    workflows: dict[str, Workflow] = {}
    parts: list[dict[str, int]] = []
    for token in text.split():
        if token.startswith("{"):
            parts.append(parse_part(token))
        else:
            name, workflow = parse_workflow(token)
            workflows[name] = workflow
    return workflows, parts


def _workflow(workflows: Mapping[str, Workflow], name: str) -> Workflow:
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"unknown workflow {name!r}") from None


def _is_accepted(workflows: Mapping[str, Workflow], part: Mapping[str, int]) -> bool:
    name = "in"
    visited: set[str] = set()
    while name not in (ACCEPTED, REJECTED):
        if name in visited:
            raise ValueError(f"workflow {name!r} is reached twice")
        visited.add(name)
        name = _workflow(workflows, name).destination(part)
    return name == ACCEPTED


Ranges = dict[str, tuple[int, int]]


def _count(
    workflows: Mapping[str, Workflow], name: str, ranges: Ranges, path: frozenset[str]
) -> int:
    if name == REJECTED:
        return 0
    if name == ACCEPTED:
        return math.prod(high - low + 1 for low, high in ranges.values())
    if name in path:
        raise ValueError(f"workflow {name!r} is reached twice")
    path = path | {name}
    workflow = _workflow(workflows, name)
    total = 0
    for condition in workflow.conditions:
        if condition.variable not in ranges:
            raise ValueError(f"unknown rating {condition.variable!r}")
        low, high = ranges[condition.variable]
        if condition.is_bigger:
            passing = (max(low, condition.number + 1), high)
            failing = (low, min(high, condition.number))
        else:
            passing = (low, min(high, condition.number - 1))
            failing = (max(low, condition.number), high)
        if passing[0] <= passing[1]:
            total += _count(
                workflows,
                condition.target,
                {**ranges, condition.variable: passing},
                path,
            )
        if failing[0] > failing[1]:
            return total
        ranges = {**ranges, condition.variable: failing}
    return total + _count(workflows, workflow.fallback, ranges, path)


def count_accepted(workflows: Mapping[str, Workflow], name: str = "in") -> int:
    """Number of rating combinations from 1 to 4000 that end up accepted from ``name``."""
    ranges = {category: _RATING_RANGE for category in _CATEGORIES}
    return _count(workflows, name, ranges, frozenset())


def part1(text: str) -> int:
    """Sum of all ratings of the accepted parts."""
    workflows, parts = _parse(text)
    return sum(sum(part.values()) for part in parts if _is_accepted(workflows, part))


def part2(text: str) -> int:
    """Number of accepted rating combinations."""
    workflows, _ = _parse(text)
    return count_accepted(workflows, "in")