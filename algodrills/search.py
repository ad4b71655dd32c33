"""Binary search, two-pointer and prefix-sum routines over integer sequences."""

from bisect import bisect_left, bisect_right
from itertools import accumulate


def count_zero_sum_triples(levels):
    """Count index triples whose values add up to zero."""
    ordered = sorted(levels)
    total = 0
    for i, first in enumerate(ordered):
        for j in range(i + 1, len(ordered) - 1):
            need = -(first + ordered[j])
            total += bisect_right(ordered, need, j + 1) - bisect_left(ordered, need, j + 1)
    return total


def closest_to_zero_pair_sum(values):
    """Return the sum of two distinct elements that is closest to zero."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    best = None
    left, right = 0, len(ordered) - 1
    while left < right:
        pair_sum = ordered[left] + ordered[right]
        if best is None or abs(pair_sum) < abs(best):
            best = pair_sum
        if pair_sum == 0:
            break
        if pair_sum < 0:
            left += 1
        else:
            right -= 1
    return best


def count_subarrays_with_sum(values, target):
    """Count contiguous runs of ``values`` that add up to a positive ``target``."""
    if target < 1:
        raise ValueError("target must be a positive integer")
    count = 0
    front = 0
    window_sum = 0
    for back, value in enumerate(values):
        window_sum += value
        while front <= back and window_sum >= target:
            if window_sum == target:
                count += 1
            window_sum -= values[front]
            front += 1
    return count


def max_sushi_variety(belt, window, coupon):
    """Most kinds of sushi obtainable from ``window`` consecutive plates plus the coupon."""
    size = len(belt)
    best = 0
    for start in range(size):
        kinds = {belt[(start + offset) % size] for offset in range(window)}
        kinds.add(coupon)
        best = max(best, len(kinds))
    return best


def min_difference_at_least(values, threshold):
    """Smallest difference between two elements that is at least ``threshold``."""
    ordered = sorted(values)
    best = None
    left = right = 0
    while right < len(ordered):
        diff = ordered[right] - ordered[left]
        if diff >= threshold:
            left += 1
            best = diff if best is None else min(best, diff)
            if diff == 0:
                break
            if left == right:
                right += 1
        else:
            right += 1
    if best is None:
        raise ValueError(f"no pair differs by at least {threshold}")
    return best


def max_snack_length(snacks, nephews):
    """Longest equal length that lets every nephew get one piece, or 0."""
    if not snacks:
        raise ValueError("at least one snack is needed")
    low, high = 1, max(snacks)
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if sum(snack // mid for snack in snacks) >= nephews:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _greedy_cuts(cut_points, piece):
    """Cut greedily wherever a piece of at least ``piece`` is reached."""
    last = 0
    made = 0
    for point in cut_points:
        if point - last >= piece:
            last = point
            made += 1
    return made, last


def max_min_piece(cut_points, length, cuts):
    """Largest smallest piece when a cake of ``length`` is cut ``cuts`` times."""
    points = sorted(cut_points)
    low, high = 0, length
    while low <= high:
        mid = (low + high) // 2
        made, last = _greedy_cuts(points, mid)
        if (cuts == made and length - last < mid) or cuts > made:
            high = mid - 1
        else:
            low = mid + 1
    return high


def cake_cut_answers(cut_points, length, queries):
    """Answer :func:`max_min_piece` for every cut count in ``queries``."""
    return [max_min_piece(cut_points, length, cuts) for cuts in queries]


def max_min_group_score(scores, groups):
    """Largest minimum group total when ``scores`` are split into ``groups`` runs."""
    start, end = 0, sum(scores)
    while start <= end:
        mid = (start + end) // 2
        running = 0
        formed = 0
        for score in scores:
            running += score
            if running >= mid:
                formed += 1
                running = 0
        if formed < groups:
            end = mid - 1
        else:
            start = mid + 1
    return end


def apply_range_updates(heights, updates):
    """Apply (first, last, delta) updates, 1-based and inclusive, and return new heights."""
    size = len(heights)
    deltas = [0] * (size + 1)
    for first, last, delta in updates:
        if not 1 <= first <= last <= size:
            raise ValueError(f"range {first}..{last} is outside 1..{size}")
        deltas[first - 1] += delta
        deltas[last] -= delta
    return [height + shift for height, shift in zip(heights, accumulate(deltas[:size]))]