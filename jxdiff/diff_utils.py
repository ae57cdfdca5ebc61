# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import DiffStats, DiffType, TextCompareMode
from .diffing.words import is_whitespace


def count_line_changes(diff):
    """Count added, removed and changed lines of a line diff.

    Changed lines appear on both sides, so they are counted once,
    from the left side.
    """
    added = sum(1 for line in diff.right_lines if line.type == DiffType.ADDED)
    removed = sum(1 for line in diff.left_lines if line.type == DiffType.REMOVED)
    changed = sum(1 for line in diff.left_lines if line.type == DiffType.CHANGED)
    return DiffStats(added, removed, changed)


def count_word_changes(diff):
    """Count added, removed and changed words of a word mode diff.

    Changed words are counted on the left side only, whitespace tokens
    are never counted.
    """
    added = 0
    removed = 0
    changed = 0
    for line in diff.left_lines:
        for word in line.words or ():
            if is_whitespace(word.word):
                continue
            if word.type == DiffType.REMOVED:
                removed += 1
            elif word.type == DiffType.CHANGED:
                changed += 1
    for line in diff.right_lines:
        added += sum(1 for word in line.words or ()
                     if word.type == DiffType.ADDED)
    return DiffStats(added, removed, changed)


def diff_statistics(diff, mode=TextCompareMode.LINE):
    "Derive change statistics from a finished diff."
    if mode == TextCompareMode.WORD:
        return count_word_changes(diff)
    return count_line_changes(diff)


def iter_aligned(diff):
    """Iterate over the lines of a diff side by side.

    Yields (left, right) pairs in display order, where one of the two
    is None for lines that only exist on one side.
    """
    left, right = diff.left_lines, diff.right_lines
    i, j = 0, 0
    while i < len(left) or j < len(right):
        if i < len(left) and left[i].corresponding_line is None:
            yield left[i], None
            i += 1
        elif j < len(right) and right[j].corresponding_line is None:
            yield None, right[j]
            j += 1
        else:
            yield left[i], right[j]
            i += 1
            j += 1
