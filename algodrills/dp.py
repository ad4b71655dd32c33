"""Dynamic-programming counts: sticker scores, grid paths and campus walks."""

from math import comb

MODULUS = 1_000_000_007

# Buildings on campus and the buildings each one is directly connected to.
_CAMPUS = (
    (1, 2),
    (0, 2, 3),
    (0, 1, 3, 4),
    (1, 2, 4, 5),
    (2, 3, 5, 6),
    (3, 4, 7),
    (4, 7),
    (5, 6),
)


def max_sticker_score(top, bottom):
    """Best total of stickers taken from two rows so that no two chosen ones share an edge."""
    top = list(top)
    bottom = list(bottom)
    if len(top) != len(bottom):
        raise ValueError("both rows must have the same length")
    if not top:
        raise ValueError("at least one column is needed")
    two_back = (0, 0)
    one_back = (top[0], bottom[0])
    for upper, lower in zip(top[1:], bottom[1:]):
        current = (
            upper + max(two_back[1], one_back[1]),
            lower + max(two_back[0], one_back[0]),
        )
        two_back, one_back = one_back, current
    return max(one_back)


def _monotone_paths(rows, cols):
    """Right/down paths from the top-left to the bottom-right cell of a rows x cols grid."""
    return comb(rows + cols - 2, rows - 1)


def count_grid_paths(rows, cols, waypoint=0):
    """Right/down paths across the grid, passing cell ``waypoint`` if it is not 0.

    Cells are numbered 1..rows*cols in row-major order.
    """
    if rows < 1 or cols < 1:
        raise ValueError("the grid needs at least one row and one column")
    if not 0 <= waypoint <= rows * cols:
        raise ValueError(f"waypoint must lie between 0 and {rows * cols}")
    if waypoint == 0:
        return _monotone_paths(rows, cols)
    row, col = divmod(waypoint - 1, cols)
    row += 1
    col += 1
    return _monotone_paths(row, col) * _monotone_paths(rows - row + 1, cols - col + 1)


def count_campus_walks(minutes):
    """Walks of ``minutes`` steps that start and end at building 0, modulo 1e9+7."""
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    counts = [1] + [0] * (len(_CAMPUS) - 1)
    for _ in range(minutes):
        counts = [sum(counts[n] for n in neighbours) % MODULUS for neighbours in _CAMPUS]
    return counts[0]