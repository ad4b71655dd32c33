"""Exhaustive search puzzles: operator placement, sequences, N-Queens and more."""

import re
from itertools import combinations, permutations, product

_EXPRESSION_OPERATORS = (" ", "+", "-")
_TERM = re.compile(r"[+-]?\d+")


def _truncating_div(dividend, divisor):
    """Integer division that rounds toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_OPERATIONS = (
    lambda a, b: a + b,
    lambda a, b: a - b,
    lambda a, b: a * b,
    _truncating_div,
)


def operator_extremes(numbers, operator_counts):
    """Return (largest, smallest) results of placing the given +, -, *, / operators.

    Operators are applied strictly left to right; division truncates toward zero.
    """
    if not numbers:
        raise ValueError("at least one number is needed")
    counts = list(operator_counts)
    if len(counts) != len(_OPERATIONS):
        raise ValueError("operator_counts must give counts for +, -, * and /")
    if any(count < 0 for count in counts):
        raise ValueError("operator counts cannot be negative")
    if sum(counts) < len(numbers) - 1:
        raise ValueError("not enough operators to join all numbers")

    results = []

    def place(index, total):
        if index == len(numbers):
            results.append(total)
            return
        for op_index, operation in enumerate(_OPERATIONS):
            if counts[op_index]:
                counts[op_index] -= 1
                place(index + 1, operation(total, numbers[index]))
                counts[op_index] += 1

    place(1, numbers[0])
    return max(results), min(results)


def _check_sizes(n, m):
    if n < 0 or m < 0:
        raise ValueError("n and m must not be negative")


def permutations_of_range(n, m):
    """All length-``m`` sequences of distinct numbers from 1..n, in lexicographic order."""
    _check_sizes(n, m)
    return list(permutations(range(1, n + 1), m))


def combinations_of_range(n, m):
    """All increasing length-``m`` sequences from 1..n, in lexicographic order."""
    _check_sizes(n, m)
    return list(combinations(range(1, n + 1), m))


def permutations_of_values(values, m):
    """All length-``m`` arrangements of distinct positions of the sorted ``values``."""
    if m < 0:
        raise ValueError("m must not be negative")
    return list(permutations(sorted(values), m))


def min_chicken_distance(grid, keep):
    """Smallest total house-to-nearest-restaurant distance keeping ``keep`` restaurants.

    Cells hold 0 (empty), 1 (house) or 2 (restaurant); distance is Manhattan.
    """
    houses = []
    restaurants = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 1:
                houses.append((r, c))
            elif cell == 2:
                restaurants.append((r, c))
    if keep < 1 or keep > len(restaurants):
        raise ValueError(f"cannot keep {keep} of {len(restaurants)} restaurants")

    def city_distance(chosen):
        return sum(
            min(abs(hr - cr) + abs(hc - cc) for cr, cc in chosen) for hr, hc in houses
        )

    return min(city_distance(chosen) for chosen in combinations(restaurants, keep))


def _evaluate(expression):
    return sum(int(term) for term in _TERM.findall(expression.replace(" ", "")))


def zero_sum_expressions(n):
    """Expressions over 1..n joined by " ", "+" or "-" that evaluate to zero.

    A space glues neighbouring digits into one number. Results come in ASCII order.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    found = []
    for ops in product(_EXPRESSION_OPERATORS, repeat=n - 1):
        expression = "1" + "".join(op + str(num) for op, num in zip(ops, range(2, n + 1)))
        if _evaluate(expression) == 0:
            found.append(expression)
    return found


def count_n_queens(n):
    """Number of ways to place ``n`` non-attacking queens on an n-by-n board."""
    if n < 0:
        raise ValueError("n must not be negative")
    rows = set()
    rising = set()
    falling = set()

    def place(col):
        if col == n:
            return 1
        total = 0
        for row in range(n):
            if row in rows or row + col in rising or row - col in falling:
                continue
            rows.add(row)
            rising.add(row + col)
            falling.add(row - col)
            total += place(col + 1)
            rows.discard(row)
            rising.discard(row + col)
            falling.discard(row - col)
        return total

    return place(0)