# dialpuzzles

Solvers for four small daily puzzles. Each day is a module of plain
functions you can call from Python, and each has a console command that
reads a puzzle input file and prints the answers to both of its parts.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The puzzles

### Day 1: the safe dial (`dialpuzzles.day1`)

A dial numbered 0 to 99 starts at 50. Each input line is a rotation such
as `L68` or `R48`.

- `parse_rotation(line)` reads one line into a `Rotation` (a named tuple
  of `direction` and `amount`, with a signed `delta`). A trailing line
  ending is ignored. It raises `ValueError` when the line starts with
  neither `L` nor `R` or the amount is not a whole number.
- `count_zero_stops(lines)` counts the rotations that leave the dial
  resting on 0.
- `count_zero_clicks(lines)` counts every click that lands on 0,
  including those passed during a rotation and during whole turns of the
  dial.

### Day 2: invalid product ids (`dialpuzzles.day2`)

The input is a comma-separated list of inclusive ranges such as
`11-22,95-115`.

- `parse_ranges(text)` turns the text into a list of Python `range`
  objects, each including its upper bound. It stops at the first chunk
  that is not two non-negative whole numbers joined by `-`, keeping the
  ranges read before it.
- `is_doubled(pid)` is true for ids made of one digit block written
  exactly twice, such as `6464`.
- `is_repeated(pid)` is true for ids made of one block written two or
  more times, such as `123123123` or `1111`.
- Both predicates treat ids of more than ten digits as valid, and raise
  `ValueError` for an id that is not positive.
- `sum_invalid(ranges, predicate)` adds up every id in the ranges for
  which the predicate is true.

### Day 3: battery joltage (`dialpuzzles.day3`)

Each line is a bank of single-digit batteries.

- `parse_bank(line)` turns a line into its list of digits, raising
  `ValueError` if it holds anything else.
- `max_joltage(bank, digits)` picks `digits` batteries, keeping their
  order, to make the largest possible number. It raises `ValueError` if
  `digits` is below 1 or the bank is too short.
- `total_joltage(lines, digits)` sums that over every bank. Part one
  uses 2 digits, part two uses 12.

### Day 4: rolls of paper (`dialpuzzles.day4`)

The input is a grid of `.` (empty floor) and `@` (a roll). A grid is a
list of rows of booleans, and positions are `(row, column)` tuples.

- `parse_grid(lines)` reads the grid, raising `ValueError` on any other
  character.
- `neighbour_counts(grid)` maps each roll's position to how many of its
  eight neighbours are rolls. It raises `ValueError` for an empty grid.
- `accessible(grid)` gives the positions of rolls with fewer than four
  neighbouring rolls, and `count_accessible(grid)` counts them.
- `remove_repeatedly(grid)` keeps removing the accessible rolls, round
  by round, until none are accessible, and returns how many were removed
  in total. The grid passed in is left unchanged.
- `render(grid)` draws a grid as text, `1` for a roll and `0` for empty.

## From Python

```python
from dialpuzzles.day1 import count_zero_stops, count_zero_clicks

rotations = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]
print(count_zero_stops(rotations))
print(count_zero_clicks(rotations))
```

```python
from dialpuzzles.day2 import is_repeated, parse_ranges, sum_invalid

print(sum_invalid(parse_ranges("11-22,95-115"), is_repeated))
```

```python
from dialpuzzles.day3 import total_joltage

banks = ["987654321111111", "811111111111119"]
print(total_joltage(banks, 2))
```

## From the command line

Each day has its own command. Pass the path to your puzzle input; with
no path the command reads `input/dayN.txt` relative to the current
directory (`input/day1.txt`, `input/day2.txt` and so on).

```
dialpuzzles-day1 input/day1.txt
dialpuzzles-day2 input/day2.txt
dialpuzzles-day3 input/day3.txt
dialpuzzles-day4 input/day4.txt
```

Each command prints the answers to part 1 and part 2 of its day.
`dialpuzzles-day4` also takes `-v`/`--verbose`, which prints the grid
after each round of removals.