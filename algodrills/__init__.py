"""Solutions to classic algorithm drills: search, recursion, DP, greedy, binary search, union-find and graphs."""

__version__ = "0.1.0"