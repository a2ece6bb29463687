"""Safe-dial rotations: count how often the dial lands on or passes zero."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from typing import NamedTuple

DIAL_SIZE = 100
START_POSITION = 50
DEFAULT_INPUT = "./input/day1.txt"

_AMOUNT = re.compile(r"[+-]?[0-9]+")


class Rotation(NamedTuple):
    """One dial rotation: a direction ("L" or "R") and a number of clicks."""

    direction: str
    amount: int

    @property
    def delta(self) -> int:
        """Signed change of the dial position."""
        return self.amount if self.direction == "R" else -self.amount


def _strip_eol(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Quotient and remainder with the quotient rounded towards zero."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_rotation(line: str) -> Rotation:
    """Parse a line such as ``L68`` or ``R14``."""
    line = _strip_eol(line)
    digits = line[1:]
    if not _AMOUNT.fullmatch(digits):
        raise ValueError(f"invalid rotation amount in {line!r}")
    direction = line[:1]
    if direction not in ("L", "R"):
        raise ValueError(f"not a lock sequence: {line!r}")
    return Rotation(direction, int(digits))


def count_zero_stops(lines: Iterable[str]) -> int:
    """Count the rotations after which the dial points at zero."""
    dial = START_POSITION
    count = 0
    for rotation in map(parse_rotation, lines):
        dial += rotation.delta
        if dial % DIAL_SIZE == 0:
            count += 1
    return count


def count_zero_clicks(lines: Iterable[str]) -> int:
    """Count every click that lands on zero, including those passed mid-rotation."""
    dial = START_POSITION
    count = 0
    for rotation in map(parse_rotation, lines):
        full_turns, partial = _trunc_divmod(rotation.amount, DIAL_SIZE)
        count += full_turns
        if rotation.direction == "R":
            dial += partial
            if dial > DIAL_SIZE - 1:
                count += 1
            _, dial = _trunc_divmod(dial, DIAL_SIZE)
        else:
            if dial == 0:
                count -= 1
            dial -= partial
            if dial <= 0:
                count += 1
            if dial < 0:
                dial += DIAL_SIZE
    return count


def main(argv: list[str] | None = None) -> int:
    """Read the rotations file and report both counts."""
    parser = argparse.ArgumentParser(
        prog="day1", description="Count how often the safe dial points at zero."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="rotations file")
    args = parser.parse_args(argv)

    lines = _read_lines(args.input)
    print(f"part 1: counted {count_zero_stops(lines)} zero clicks")
    print(f"part 2: counted {count_zero_clicks(lines)} zero clicks")
    return 0