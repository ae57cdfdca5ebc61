# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jxdiff.diffing.lcs import lcs_table, lcs_alignment, KEEP, ADD, REMOVE


def test_lcs_table_length():
    assert lcs_table("abc", "abc")[3][3] == 3
    assert lcs_table("abcbdab", "bdcaba")[7][6] == 4
    assert lcs_table("", "abc") == [[0, 0, 0, 0]]


def test_lcs_alignment_equal():
    assert lcs_alignment("ab", "ab") == [(KEEP, 0, 0), (KEEP, 1, 1)]


def test_lcs_alignment_disjoint():
    # Forward order lists the removal first
    assert lcs_alignment("a", "b") == [(REMOVE, 0, None), (ADD, None, 0)]


def test_lcs_alignment_one_side_empty():
    assert lcs_alignment([], [1, 2]) == [(ADD, None, 0), (ADD, None, 1)]
    assert lcs_alignment([1, 2], []) == [(REMOVE, 0, None), (REMOVE, 1, None)]
    assert lcs_alignment([], []) == []


def test_lcs_alignment_custom_compare():
    ops = lcs_alignment(["A", "b"], ["a", "B"], compare=lambda x, y: x.lower() == y.lower())
    assert ops == [(KEEP, 0, 0), (KEEP, 1, 1)]


def test_lcs_alignment_covers_both_sequences():
    A = "xmjyauz"
    B = "mzjawxu"
    ops = lcs_alignment(A, B)
    assert [i for op, i, j in ops if i is not None] == list(range(len(A)))
    assert [j for op, i, j in ops if j is not None] == list(range(len(B)))
    assert sum(1 for op in ops if op[0] == KEEP) == lcs_table(A, B)[len(A)][len(B)]
