"""Row and column sorting operations on a growing integer grid."""

from collections import Counter

MAX_WIDTH = 100
TIME_LIMIT = 100


def _sort_line(line):
    """Replace a line by (value, count) pairs ordered by count, then by value."""
    counts = Counter(value for value in line if value != 0)
    pairs = sorted(counts.items(), key=lambda item: (item[1], item[0]))
    return [number for pair in pairs for number in pair][:MAX_WIDTH]


def transform_rows(rows):
    """Apply the row operation to every row and pad all rows with zeros to one width."""
    lines = [_sort_line(row) for row in rows]
    width = max((len(line) for line in lines), default=0)
    return [line + [0] * (width - len(line)) for line in lines]


def array_operation_time(row, col, target, grid):
    """Seconds until cell (row, col), 1-based, holds ``target``, or -1 after 100 seconds."""
    if row < 1 or col < 1:
        raise ValueError("row and col are 1-based and must be positive")
    rows = [list(line) for line in grid]
    width = len(rows[0]) if rows else 0
    if any(len(line) != width for line in rows):
        raise ValueError("grid rows must all have the same length")

    for time in range(TIME_LIMIT + 1):
        if row <= len(rows) and col <= width and rows[row - 1][col - 1] == target:
            return time
        if len(rows) >= width:
            rows = transform_rows(rows)
            width = len(rows[0]) if rows else 0
        else:
            columns = transform_rows([[line[c] for line in rows] for c in range(width)])
            height = len(columns[0]) if columns else 0
            rows = [[column[r] for column in columns] for r in range(height)]
    return -1