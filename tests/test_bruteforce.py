import pytest

from algodrills.bruteforce import (
    clap_count,
    clock_number,
    clock_number_rank,
    count_filtered_at_least,
    count_roman_sums,
    median_filter,
    solve_linear_system,
)


def test_clap_count_zero():
    assert clap_count(0) == 0


def test_clap_count_single_digits():
    assert clap_count(9) == 3


def test_clap_count_monotonic():
    values = [clap_count(n) for n in range(0, 60)]
    assert values == sorted(values)
    assert clap_count(10) == clap_count(9)


def test_clap_count_negative():
    with pytest.raises(ValueError):
        clap_count(-5)


def test_median_filter_constant_matrix():
    matrix = [[7] * 5 for _ in range(4)]
    result = median_filter(matrix)
    assert len(result) == 4 - 2
    assert all(len(row) == 5 - 2 for row in result)
    assert all(value == 7 for row in result for value in row)


def test_median_filter_three_by_three():
    assert median_filter([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [[5]]


def test_median_filter_ragged_rows():
    with pytest.raises(ValueError):
        median_filter([[1, 2, 3], [4, 5]])


def test_median_filter_too_small_is_empty():
    assert median_filter([[1, 2], [3, 4]]) == []


def test_count_filtered_bounds():
    matrix = [[(r * 5 + c) % 11 for c in range(6)] for r in range(5)]
    total = sum(len(row) for row in median_filter(matrix))
    assert count_filtered_at_least(matrix, 0) == total
    assert count_filtered_at_least(matrix, 100) == 0


def test_solve_linear_system_recovers_solution():
    x, y = 2, -3
    a, b, d, e = 1, 3, 4, -1
    assert solve_linear_system(a, b, a * x + b * y, d, e, d * x + e * y) == (x, y)


def test_solve_linear_system_singular():
    with pytest.raises(ValueError):
        solve_linear_system(1, 2, 3, 2, 4, 6)


def test_count_roman_sums_one_item():
    assert count_roman_sums(1) == 4


def test_count_roman_sums_zero_items():
    assert count_roman_sums(0) == 1


def test_count_roman_sums_negative():
    with pytest.raises(ValueError):
        count_roman_sums(-1)


def test_clock_number_rotation_invariant():
    assert clock_number([2, 1, 1, 1]) == 1112
    assert clock_number([1, 2, 1, 1]) == clock_number([1, 1, 1, 2])


def test_clock_number_empty():
    with pytest.raises(ValueError):
        clock_number([])


def test_clock_number_rank_first_cards():
    assert clock_number_rank((1, 1, 1, 1)) == 1
    assert clock_number_rank((1, 1, 1, 2)) == 2


def test_clock_number_rank_same_for_rotations():
    assert clock_number_rank((3, 5, 2, 8)) == clock_number_rank((2, 8, 3, 5))


def test_clock_number_rank_grows_with_clock_number():
    assert clock_number_rank((1, 2, 3, 4)) < clock_number_rank((5, 6, 7, 8))


def test_clock_number_rank_rejects_zero_digit():
    with pytest.raises(ValueError):
        clock_number_rank((0, 1, 2, 3))