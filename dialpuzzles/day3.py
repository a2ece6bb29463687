"""Battery banks: pick digits in order to form the largest joltage."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

DEFAULT_INPUT = "./input/day3.txt"
_DIGITS = frozenset("0123456789")


def _strip_eol(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_bank(line: str) -> list[int]:
    """Turn a line of digits into a list of battery ratings."""
    line = _strip_eol(line)
    if not _DIGITS.issuperset(line):
        raise ValueError(f"battery bank must contain only digits: {line!r}")
    return [int(ch) for ch in line]


def max_joltage(bank: list[int], digits: int) -> int:
    """Largest number formed by choosing ``digits`` batteries in their original order."""
    if digits < 1:
        raise ValueError("at least one battery must be chosen")
    if len(bank) < digits:
        raise ValueError(f"bank of {len(bank)} batteries cannot supply {digits} digits")
    joltage = 0
    start = 0
    for remaining in range(digits, 0, -1):
        end = len(bank) - remaining + 1
        best = max(range(start, end), key=bank.__getitem__)
        joltage = joltage * 10 + bank[best]
        start = best + 1
    return joltage


def total_joltage(lines: Iterable[str], digits: int) -> int:
    """Sum of the maximum joltage of every bank."""
    return sum(max_joltage(parse_bank(line), digits) for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read the banks file and report the totals for 2 and 12 batteries."""
    parser = argparse.ArgumentParser(
        prog="day3", description="Sum the maximum joltage of each battery bank."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="banks file")
    args = parser.parse_args(argv)

    lines = _read_lines(args.input)
    print(f"part 1: counted {total_joltage(lines, 2)} max joltage")
    print(f"part 2: counted {total_joltage(lines, 12)} max joltage")
    return 0