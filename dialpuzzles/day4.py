"""Paper-roll grid: find rolls that a forklift can reach."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator

DEFAULT_INPUT = "./input/day4.txt"
CROWDED = 4

Grid = list[list[bool]]
Position = tuple[int, int]

_CELLS = {".": False, "@": True}
_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def _strip_eol(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_grid(lines: Iterable[str]) -> Grid:
    """Parse rows of ``@`` (a roll) and ``.`` (empty floor)."""
    grid = []
    for line in lines:
        try:
            grid.append([_CELLS[ch] for ch in _strip_eol(line)])
        except KeyError as exc:
            raise ValueError(f"unexpected cell {exc.args[0]!r} in {line!r}") from None
    return grid


def neighbour_counts(grid: Grid) -> dict[Position, int]:
    """Map each roll's (row, column) to the number of rolls around it."""
    if not grid:
        raise ValueError("grid is empty")
    occupied = {
        (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell
    }
    return {
        (r, c): sum((r + dr, c + dc) in occupied for dr, dc in _OFFSETS)
        for r, c in occupied
    }


def accessible(grid: Grid) -> set[Position]:
    """Positions of rolls with fewer than four neighbouring rolls."""
    return {pos for pos, count in neighbour_counts(grid).items() if count < CROWDED}


def count_accessible(grid: Grid) -> int:
    """Number of rolls that can be reached right now."""
    return len(accessible(grid))


def _removal_steps(grid: Grid) -> Iterator[tuple[set[Position], Grid]]:
    """Remove reachable rolls round by round, yielding what was removed and what is left."""
    current = [list(row) for row in grid]
    while True:
        removable = accessible(current)
        if not removable:
            return
        for r, c in removable:
            current[r][c] = False
        yield removable, current


def remove_repeatedly(grid: Grid) -> int:
    """Total rolls removed when reachable rolls are taken away until none remain reachable."""
    return sum(len(removed) for removed, _ in _removal_steps(grid))


def render(grid: Grid) -> str:
    """Show the grid as rows of ``1`` (roll) and ``0`` (empty)."""
    return "\n".join("".join("1" if cell else "0" for cell in row) for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Read the grid file and report reachable and removable rolls."""
    parser = argparse.ArgumentParser(
        prog="day4", description="Count paper rolls reachable by a forklift."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="grid file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print the grid after each removal"
    )
    args = parser.parse_args(argv)

    grid = parse_grid(_read_lines(args.input))
    print(f"part 1: counted {count_accessible(grid)} available papers")

    total = 0
    for removed, remaining in _removal_steps(grid):
        total += len(removed)
        if args.verbose:
            print(render(remaining))
            print()
    print(f"part 2: counted {total} available papers")
    return 0