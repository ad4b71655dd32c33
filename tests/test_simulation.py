import pytest

from algodrills.simulation import MAX_WIDTH, array_operation_time, transform_rows

SAMPLE = [[1, 2, 1], [2, 1, 3], [3, 3, 3]]


def test_transform_rows_equal_widths():
    result = transform_rows([[3, 1, 1], [1, 1, 1], [0, 0, 0]])
    assert len({len(line) for line in result}) == 1


def test_transform_rows_preserves_nonzero_counts():
    rows = [[3, 1, 1, 0, 2], [4, 4, 4, 4, 0]]
    for original, result in zip(rows, transform_rows(rows)):
        counts = result[1::2]
        assert sum(counts) == sum(1 for value in original if value)


def test_transform_rows_distinct_values_ascend_with_count_one():
    (result,) = transform_rows([[9, 2, 5]])
    assert result[0::2] == sorted([9, 2, 5])
    assert set(result[1::2]) == {1}


def test_transform_rows_zero_row_becomes_padding():
    result = transform_rows([[0, 0, 0], [7, 7, 0]])
    assert result[1][:2] == [7, 2]
    assert set(result[0]) == {0}


def test_transform_rows_caps_width():
    (result,) = transform_rows([list(range(1, 61))])
    assert len(result) == MAX_WIDTH


def test_transform_rows_empty():
    assert transform_rows([]) == []


def test_target_present_at_start():
    assert array_operation_time(1, 2, 2, SAMPLE) == 0


def test_sample_one_second():
    assert array_operation_time(1, 2, 1, SAMPLE) == 1


def test_sample_two_seconds():
    assert array_operation_time(1, 2, 3, SAMPLE) == 2


def test_sample_long_run():
    assert array_operation_time(1, 2, 4, SAMPLE) == 52


def test_sample_never_reached():
    assert array_operation_time(1, 2, 5, SAMPLE) == -1


def test_input_grid_is_not_modified():
    grid = [line[:] for line in SAMPLE]
    array_operation_time(1, 2, 4, grid)
    assert grid == SAMPLE


def test_cell_outside_grid_never_matches_nonzero():
    assert array_operation_time(100, 100, 7, [[7, 7, 7]] * 3) == -1


@pytest.mark.parametrize("row, col", [(0, 1), (1, 0)])
def test_invalid_position(row, col):
    with pytest.raises(ValueError):
        array_operation_time(row, col, 1, SAMPLE)


def test_ragged_grid():
    with pytest.raises(ValueError):
        array_operation_time(1, 1, 1, [[1, 2], [3]])