"""2023 day 15: the HASH algorithm and the lens library."""

from __future__ import annotations

from aocsolve.textio import split_records


def hash_label(text: str) -> int:
    """The HASH value of ``text``: a number from 0 to 255."""
    value = 0
    for char in text:
        value = (value + ord(char)) * 17 % 256
    return value


def _steps(text: str) -> list[str]:
    return [step for step in split_records(text.replace("\n", ""), ",") if step]


def part1(text: str) -> int:
    """Sum of the HASH values of every step."""
    return sum(hash_label(step) for step in _steps(text))


def _parse_step(step: str) -> tuple[str, int | None]:
    """Split a step into its label and focal length, ``None`` meaning removal."""
    for index, char in enumerate(step):
        if char == "-":
            return step[:index], None
        if char == "=":
            try:
                return step[:index], int(step[index + 1 :])
            except ValueError:
                raise ValueError(f"malformed focal length in {step!r}") from None
    raise ValueError(f"step {step!r} has no operation")


def part2(text: str) -> int:
    """Focusing power of all lenses after every step has been carried out."""
    boxes: list[dict[str, int]] = [{} for _ in range(256)]
    for step in _steps(text):
        label, focal_length = _parse_step(step)
        box = boxes[hash_label(label)]
        if focal_length is None:
            box.pop(label, None)
        else:
            box[label] = focal_length
    return sum(
        box_number * slot * focal_length
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal_length in enumerate(box.values(), start=1)
    )