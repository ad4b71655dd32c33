"""Brute-force counting puzzles: claps, median filters, clock numbers and sums."""

from itertools import combinations_with_replacement, product
from statistics import median_low

_CLAP_DIGITS = frozenset("369")
_ROMAN_VALUES = (1, 5, 10, 50)
_CLOCK_WIDTH = 4
_WINDOW = 3


def clap_count(n):
    """Total claps when counting 1..n, one per digit 3, 6 or 9."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(ch in _CLAP_DIGITS for number in range(1, n + 1) for ch in str(number))


def median_filter(matrix):
    """Medians of every 3x3 window of ``matrix``, as (rows-2) x (cols-2) rows."""
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    height = len(rows)
    width = len(rows[0]) if rows else 0
    return [
        [
            median_low(
                value
                for window_row in rows[r : r + _WINDOW]
                for value in window_row[c : c + _WINDOW]
            )
            for c in range(width - _WINDOW + 1)
        ]
        for r in range(height - _WINDOW + 1)
    ]


def count_filtered_at_least(matrix, threshold):
    """How many median-filtered values are at least ``threshold``."""
    return sum(value >= threshold for row in median_filter(matrix) for value in row)


def _truncating_div(dividend, divisor):
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def solve_linear_system(a, b, c, d, e, f):
    """Solve ax + by = c, dx + ey = f by Cramer's rule with integer division."""
    det = a * e - b * d
    if det == 0:
        raise ValueError("the system has no unique solution")
    x = _truncating_div(c * e - b * f, det)
    y = _truncating_div(a * f - c * d, det)
    return x, y


def count_roman_sums(n):
    """Number of distinct totals made from exactly ``n`` of the values 1, 5, 10, 50."""
    if n < 0:
        raise ValueError("n must not be negative")
    return len({sum(pick) for pick in combinations_with_replacement(_ROMAN_VALUES, n)})


def clock_number(digits):
    """Smallest number read clockwise from any starting digit of a circular card."""
    seq = list(digits)
    if not seq:
        raise ValueError("at least one digit is needed")
    if any(not 0 <= digit <= 9 for digit in seq):
        raise ValueError("digits must lie between 0 and 9")
    return min(
        int("".join(str(digit) for digit in seq[start:] + seq[:start]))
        for start in range(len(seq))
    )


def clock_number_rank(digits):
    """Position of the card's clock number among all clock numbers, counting from 1."""
    seq = tuple(digits)
    if len(seq) != _CLOCK_WIDTH or any(not 1 <= digit <= 9 for digit in seq):
        raise ValueError("a card holds exactly four digits from 1 to 9")
    target = clock_number(seq)
    seen = set()
    for card in product(range(1, 10), repeat=_CLOCK_WIDTH):
        current = clock_number(card)
        if current == target:
            return len(seen) + 1
        seen.add(current)
    raise ValueError("clock number not found")