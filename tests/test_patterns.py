import pytest

from algokit.patterns import (
    format_hosoya_triangle,
    hosoya,
    hosoya_triangle,
    map_of_india,
    star_pyramid,
)


def test_star_pyramid_two_rows():
    assert star_pyramid(2) == "* \n* * \n"


def test_star_pyramid_row_lengths():
    lines = star_pyramid(6).splitlines()
    assert [line.count("*") for line in lines] == list(range(1, 7))


def test_star_pyramid_zero_rows_is_empty():
    assert star_pyramid(0) == ""


def test_hosoya_triangle_height_five():
    assert hosoya_triangle(5) == [
        [1],
        [1, 1],
        [2, 1, 2],
        [3, 2, 2, 3],
        [5, 3, 4, 3, 5],
    ]


def test_hosoya_is_symmetric():
    for n in range(12):
        for m in range(n + 1):
            assert hosoya(n, m) == hosoya(n, n - m)


def test_hosoya_edges_follow_fibonacci_recurrence():
    for n in range(2, 15):
        assert hosoya(n, 0) == hosoya(n - 1, 0) + hosoya(n - 2, 0)


def test_hosoya_outside_triangle_is_zero():
    assert hosoya(3, 4) == 0


def test_hosoya_negative_raises():
    with pytest.raises(ValueError):
        hosoya(-1, 0)


def test_format_matches_triangle():
    text = format_hosoya_triangle(6)
    rows = [[int(tok) for tok in line.split()] for line in text.splitlines()]
    assert rows == hosoya_triangle(6)
    assert all(line.endswith(" ") for line in text.splitlines())


def test_map_uses_only_marks_blanks_and_newlines():
    assert set(map_of_india()) <= {" ", "!", "\n"}


def test_map_full_lines_have_fixed_width():
    lines = map_of_india().split("\n")
    assert len(lines) > 10
    assert all(len(line) == 79 for line in lines[:-1])
    assert len(lines[-1]) <= 79


def test_map_contains_marks_and_is_stable():
    drawing = map_of_india()
    assert drawing.count("!") > 100
    assert map_of_india() == drawing