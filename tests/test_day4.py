import pytest

from dialpuzzles.day4 import (
    accessible,
    count_accessible,
    main,
    neighbour_counts,
    parse_grid,
    remove_repeatedly,
    render,
)

EXAMPLE = [
    "..@@.@@@@.",
    "@@@.@.@.@@",
    "@@@@@.@.@@",
    "@.@@@@..@.",
    "@@.@@@@.@@",
    ".@@@@@@@.@",
    ".@.@.@.@@@",
    "@.@@@.@@@@",
    ".@@@@@@@@.",
    "@.@.@@@.@.",
]


def _occupied(grid):
    return {(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell}


def test_example_accessible_count():
    assert count_accessible(parse_grid(EXAMPLE)) == 13


def test_example_repeated_removal():
    assert remove_repeatedly(parse_grid(EXAMPLE)) == 43


def test_render_round_trip():
    grid = parse_grid(line + "\n" for line in EXAMPLE)
    expected = "\n".join(EXAMPLE).replace("@", "1").replace(".", "0")
    assert render(grid) == expected


def test_parse_grid_rejects_unknown_cell():
    with pytest.raises(ValueError):
        parse_grid(["@.", "@#"])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        neighbour_counts([])


def test_full_square_only_corners_accessible():
    grid = parse_grid(["@@@", "@@@", "@@@"])
    assert accessible(grid) == {(0, 0), (0, 2), (2, 0), (2, 2)}


def test_neighbour_counts_cover_exactly_the_rolls():
    grid = parse_grid(EXAMPLE)
    counts = neighbour_counts(grid)
    assert set(counts) == _occupied(grid)
    assert all(0 <= n <= 8 for n in counts.values())


def test_removal_bounds():
    grid = parse_grid(EXAMPLE)
    removed = remove_repeatedly(grid)
    assert count_accessible(grid) <= removed <= len(_occupied(grid))


def test_removal_leaves_input_untouched():
    grid = parse_grid(EXAMPLE)
    before = render(grid)
    remove_repeatedly(grid)
    assert render(grid) == before


def test_sparse_grid_is_removed_entirely():
    grid = parse_grid(["@.@", "...", "@.@"])
    assert remove_repeatedly(grid) == count_accessible(grid) == len(_occupied(grid))


def test_main_reports_both_parts(tmp_path, capsys):
    path = tmp_path / "day4.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path), "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "part 1: counted 13 available papers" in out
    assert "part 2: counted 43 available papers" in out