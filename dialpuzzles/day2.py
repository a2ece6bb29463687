"""Product-id ranges: find ids made of a repeated digit block."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Iterable

DEFAULT_INPUT = "./input/day2.txt"
MAX_DIGITS = 10

_NUMBER = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64


def _parse_u64(text: str) -> int | None:
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value < _U64_LIMIT else None


def parse_ranges(text: str) -> list[range]:
    """Parse comma-separated ``low-high`` ranges, stopping at the first malformed one."""
    ranges = []
    for chunk in text.split(","):
        low_text, sep, high_text = chunk.partition("-")
        if not sep:
            break
        low, high = _parse_u64(low_text), _parse_u64(high_text)
        if low is None or high is None:
            break
        ranges.append(range(low, high + 1))
    return ranges


def _digit_count(pid: int) -> int:
    if pid <= 0:
        raise ValueError(f"product id must be positive, got {pid}")
    return len(str(pid))


def _block_divisor(length: int, block: int) -> int:
    """Divisor whose multiples of ``length`` digits repeat a ``block``-digit pattern."""
    return sum(10 ** (block * i) for i in range(length // block))


def is_doubled(pid: int) -> bool:
    """True when the id is some digit block written exactly twice."""
    length = _digit_count(pid)
    if length > MAX_DIGITS or length % 2:
        return False
    return pid % _block_divisor(length, length // 2) == 0


def is_repeated(pid: int) -> bool:
    """True when the id is some digit block written two or more times."""
    length = _digit_count(pid)
    if length > MAX_DIGITS:
        return False
    return any(
        pid % _block_divisor(length, block) == 0
        for block in range(1, length)
        if length % block == 0
    )


def sum_invalid(ranges: Iterable[range], predicate: Callable[[int], bool]) -> int:
    """Sum every id in the ranges for which ``predicate`` holds."""
    return sum(pid for id_range in ranges for pid in id_range if predicate(pid))


def main(argv: list[str] | None = None) -> int:
    """Read the ranges file and report both sums."""
    parser = argparse.ArgumentParser(
        prog="day2", description="Sum product ids made of repeated digit blocks."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="ranges file")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as handle:
        ranges = parse_ranges(handle.read())
    print(f"part 1: the sum of invalid fragments is {sum_invalid(ranges, is_doubled)}")
    print(f"part 2: the sum of invalid fragments is {sum_invalid(ranges, is_repeated)}")
    return 0