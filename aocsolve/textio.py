"""Helpers for splitting puzzle input into records."""

from __future__ import annotations


def split_records(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``.

    A delimiter at the very end closes the last record and does not open an
    empty one, so ``"a,b,"`` gives ``["a", "b"]``. Empty text gives no records.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not text:
        return []
    records = text.split(delimiter)
    if records[-1] == "":
        records.pop()
    return records


def read_lines(text: str) -> list[str]:
    """Split ``text`` into lines, dropping carriage returns at line ends."""
    return [line.rstrip("\r") for line in split_records(text, "\n")]