import pytest

from dialpuzzles.day2 import (
    is_doubled,
    is_repeated,
    main,
    parse_ranges,
    sum_invalid,
)

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124"
)


def _bounds(ranges):
    return [(r.start, r.stop - 1) for r in ranges]


def test_example_doubled_sum():
    assert sum_invalid(parse_ranges(EXAMPLE), is_doubled) == 1227775554


def test_example_repeated_sum():
    assert sum_invalid(parse_ranges(EXAMPLE), is_repeated) == 4174379265


def test_parse_ranges_bounds():
    assert _bounds(parse_ranges("11-22,95-115")) == [(11, 22), (95, 115)]


def test_parse_ranges_stops_at_malformed_chunk():
    assert _bounds(parse_ranges("1-2,x,5-6")) == [(1, 2)]


def test_parse_ranges_drops_range_with_trailing_newline():
    assert _bounds(parse_ranges("1-2,3-4\n")) == [(1, 2)]


@pytest.mark.parametrize("pid", [11, 6464, 123123, 1188511885, 222222])
def test_doubled_ids(pid):
    assert is_doubled(pid)
    assert is_repeated(pid)


@pytest.mark.parametrize("pid", [1, 12, 101, 111, 1234, 1698522])
def test_not_doubled(pid):
    assert not is_doubled(pid)


@pytest.mark.parametrize("pid", [111, 565656, 824824824, 2121212121, 1111111])
def test_repeated_but_not_doubled(pid):
    assert is_repeated(pid)
    assert not is_doubled(pid)


@pytest.mark.parametrize("pid", [1, 12, 101, 1234, 1001])
def test_not_repeated(pid):
    assert not is_repeated(pid)


def test_ids_longer_than_ten_digits_are_never_invalid():
    assert not is_doubled(123456123456)
    assert not is_repeated(111111111111)


def test_doubled_implies_repeated():
    for pid in range(1, 20000):
        if is_doubled(pid):
            assert is_repeated(pid)


@pytest.mark.parametrize("pid", [0, -11])
def test_non_positive_id_rejected(pid):
    with pytest.raises(ValueError):
        is_doubled(pid)
    with pytest.raises(ValueError):
        is_repeated(pid)


def test_sum_invalid_with_custom_predicate():
    ranges = parse_ranges("1-4,10-12")
    assert sum_invalid(ranges, lambda pid: True) == sum([1, 2, 3, 4, 10, 11, 12])


def test_main_reports_both_parts(tmp_path, capsys):
    path = tmp_path / "day2.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "part 1: the sum of invalid fragments is 1227775554" in out
    assert "part 2: the sum of invalid fragments is 4174379265" in out