"""Levenshtein edit distance."""

from typing import List


def levenshtein_distance(s: str, t: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    The distance is the minimum number of single-character insertions,
    deletions or substitutions needed to turn ``s`` into ``t``.

    Args:
        s (str): Source string.
        t (str): Target string.

    Returns:
        int: The edit distance.
    """
    m = len(s)
    n = len(t)

    if m == 0:
        return n
    if n == 0:
        return m

    # d[i][j] is the distance between s[:i] and t[:j]
    d: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        d[i][0] = i
    for j in range(n + 1):
        d[0][j] = j

    for j in range(1, n + 1):
        for i in range(1, m + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1,         # deletion
                d[i][j - 1] + 1,         # insertion
                d[i - 1][j - 1] + cost,  # substitution
            )

    return d[m][n]
