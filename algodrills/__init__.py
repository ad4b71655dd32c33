"""Classic algorithm drills: text processing, searching, backtracking, brute force, DP and simulation."""

__version__ = "0.1.0"