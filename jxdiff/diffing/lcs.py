# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator


# Alignment actions yielded by lcs_alignment
KEEP = "="
ADD = "+"
REMOVE = "-"


def lcs_table(A, B, compare=operator.__eq__):
    """Compute the dynamic programming table for the lcs of A and B.

    Entry [i][j] holds the length of the longest common subsequence
    of A[:i] and B[:j].
    """
    N, M = len(A), len(B)
    dp = [[0] * (M + 1) for _ in range(N + 1)]
    for i in range(1, N + 1):
        a = A[i-1]
        row = dp[i]
        prev = dp[i-1]
        for j in range(1, M + 1):
            if compare(a, B[j-1]):
                row[j] = prev[j-1] + 1
            else:
                row[j] = max(prev[j], row[j-1])
    return dp


def lcs_alignment(A, B, compare=operator.__eq__):
    """Align A and B along their lcs.

    Returns a list of (action, i, j) tuples in sequence order, where
    action is KEEP for matched items, ADD for items only in B (i is None)
    and REMOVE for items only in A (j is None).

    Backtracking from the end prefers an addition whenever it does not
    shorten the lcs, so insertions are reported before deletions.
    """
    dp = lcs_table(A, B, compare)
    i, j = len(A), len(B)
    ops = []
    while i > 0 or j > 0:
        if i > 0 and j > 0 and compare(A[i-1], B[j-1]):
            ops.append((KEEP, i-1, j-1))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j-1] >= dp[i-1][j]):
            ops.append((ADD, None, j-1))
            j -= 1
        else:
            ops.append((REMOVE, i-1, None))
            i -= 1
    ops.reverse()
    return ops
