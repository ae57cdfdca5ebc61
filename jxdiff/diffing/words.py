# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re

from ..diff_format import ComparisonOptions, DiffType, WordDiff, WordDiffResult
from .lcs import lcs_alignment, KEEP, ADD

__all__ = ["split_words", "diff_words", "compare_words", "tag_words"]


_token_re = re.compile(r"\s+|\S+")
_whitespace_re = re.compile(r"\s+")


def is_whitespace(word):
    return not word.strip()


def split_words(line, ignore_whitespace=False):
    """Split a line into word tokens.

    When whitespace is ignored, the line is split on runs of whitespace
    and only the words are returned. Otherwise whitespace runs are kept
    as separate tokens, so that joining the tokens gives back the line.
    """
    if ignore_whitespace:
        return [w for w in _whitespace_re.split(line) if w]
    return _token_re.findall(line)


def _word_key(options):
    if options.case_sensitive:
        return lambda w: w
    return lambda w: w.lower()


def diff_words(left_words, right_words, options=None):
    """Compute the word level diff of two token sequences.

    Tokens are aligned by their longest common subsequence. Tokens only
    present on the left are removed, tokens only on the right are added.
    A removed token facing an added token is then reported as changed on
    both sides. Whitespace tokens are always unchanged.
    """
    if options is None:
        options = ComparisonOptions()
    key = _word_key(options)
    norm_left = [key(w) for w in left_words]
    norm_right = [key(w) for w in right_words]

    left_diff = []
    right_diff = []
    for action, i, j in lcs_alignment(norm_left, norm_right):
        if action == KEEP:
            left_diff.append(WordDiff(left_words[i], DiffType.UNCHANGED))
            right_diff.append(WordDiff(right_words[j], DiffType.UNCHANGED))
        elif action == ADD:
            right_diff.append(WordDiff(right_words[j], DiffType.ADDED))
        else:
            left_diff.append(WordDiff(left_words[i], DiffType.REMOVED))

    return pair_changes(left_diff, right_diff)


def pair_changes(left_diff, right_diff):
    """Pair removed words with added words into changed words.

    Walks both sequences with independent cursors. Pairing is positional
    and greedy; when the runs have unequal length the tail of the longer
    run keeps its original type.
    """
    left_out = []
    right_out = []
    i, j = 0, 0
    n, m = len(left_diff), len(right_diff)
    while i < n or j < m:
        left = left_diff[i] if i < n else None
        right = right_diff[j] if j < m else None

        # Whitespace passes through on its own side
        if left is not None and is_whitespace(left.word):
            left_out.append(WordDiff(left.word, DiffType.UNCHANGED))
            i += 1
        elif right is not None and is_whitespace(right.word):
            right_out.append(WordDiff(right.word, DiffType.UNCHANGED))
            j += 1
        elif (left is not None and right is not None and
                left.type == DiffType.REMOVED and right.type == DiffType.ADDED):
            left_out.append(WordDiff(left.word, DiffType.CHANGED))
            right_out.append(WordDiff(right.word, DiffType.CHANGED))
            i += 1
            j += 1
        elif left is not None and left.type == DiffType.REMOVED:
            left_out.append(left)
            i += 1
        elif right is not None and right.type == DiffType.ADDED:
            right_out.append(right)
            j += 1
        else:
            if left is not None:
                left_out.append(left)
                i += 1
            if right is not None:
                right_out.append(right)
                j += 1

    return WordDiffResult(left_out, right_out)


def compare_words(left_line, right_line, options=None):
    "Compute the word level diff of two lines."
    if options is None:
        options = ComparisonOptions()
    return diff_words(
        split_words(left_line, options.ignore_whitespace),
        split_words(right_line, options.ignore_whitespace),
        options)


def tag_words(line, diff_type, options=None):
    """Tokenize a line that only exists on one side.

    Every word gets the given type; whitespace stays unchanged.
    """
    if options is None:
        options = ComparisonOptions()
    return [
        WordDiff(w, DiffType.UNCHANGED if is_whitespace(w) else diff_type)
        for w in split_words(line, options.ignore_whitespace)
    ]
