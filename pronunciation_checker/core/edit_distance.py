"""Levenshtein distance between two normalized strings."""

from __future__ import annotations

from typing import List, Sequence


def edit_distance(source: Sequence[str], target: Sequence[str]) -> int:
    """Classic edit distance with unit insertion, deletion and substitution costs.

    Characters are compared by exact equality; callers are expected to have
    folded case already.

    Args:
        source: Reference string (or any sequence of comparable symbols)
        target: Hypothesis string

    Returns:
        Minimum number of single-symbol edits turning ``source`` into ``target``
    """
    n, m = len(source), len(target)
    if n == 0:
        return m
    if m == 0:
        return n

    dp: List[List[int]] = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if source[i - 1] == target[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost_sub,
            )

    return dp[n][m]


__all__ = ["edit_distance"]
