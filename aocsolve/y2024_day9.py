"""2024 day 9: compacting an amphipod's disk."""

from __future__ import annotations

from aocsolve.textio import read_lines


def _block_sum(start: int, length: int) -> int:
    return sum(range(start, start + length))


class DiskMap:
    """A dense disk map: alternating file and free-space lengths."""

    def __init__(self, text: str) -> None:
        digits = "".join(text.split())
        files: list[tuple[int, int]] = []
        free: list[tuple[int, int]] = []
        position = 0
        for index, char in enumerate(digits):
            if not "0" <= char <= "9":
                raise ValueError(f"not a digit: {char!r}")
            length = int(char)
            if length:
                (free if index % 2 else files).append((position, length))
            position += length
        self._files = tuple(files)
        self._free = tuple(free)

    def _checksum_of(self, files: list[list[int]]) -> int:
        return sum(
            file_id * _block_sum(start, length)
            for file_id, (start, length) in enumerate(files)
        )

    def compact_blocks(self) -> int:
        """Checksum after moving single blocks from the end into the leftmost gaps."""
        files = [list(span) for span in self._files]
        free = [list(span) for span in self._free]
        limit = sum(length for _, length in self._files)
        checksum = 0
        gap = 0
        for file_id in reversed(range(len(files))):
            if gap >= len(free) or free[gap][0] >= limit:
                break
            remaining = files[file_id][1]
            while remaining and gap < len(free) and free[gap][0] < limit:
                checksum += free[gap][0] * file_id
                free[gap][0] += 1
                free[gap][1] -= 1
                if not free[gap][1]:
                    gap += 1
                remaining -= 1
            files[file_id][1] = remaining
        return checksum + self._checksum_of(files)

    def compact_files(self) -> int:
        """Checksum after moving whole files, last first, into the leftmost gap that fits."""
        files = [list(span) for span in self._files]
        free = [list(span) for span in self._free]
        checksum = 0
        for file_id in reversed(range(len(files))):
            if not free:
                break
            start, length = files[file_id]
            for span in free:
                if span[0] >= start:
                    break
                if span[1] >= length:
                    checksum += file_id * _block_sum(span[0], length)
                    span[0] += length
                    span[1] -= length
                    files[file_id][1] = 0
                    if not span[1]:
                        free.remove(span)
                    break
        return checksum + self._checksum_of(files)


def part1(text: str) -> int:
    """Checksum after compacting block by block."""
    return DiskMap(text).compact_blocks()


def part2(text: str) -> int:
    """Checksum after compacting whole files."""
    return DiskMap(text).compact_files()