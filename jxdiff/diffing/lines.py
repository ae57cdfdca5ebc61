# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re

from ..diff_format import (
    ComparisonOptions, DiffLine, DiffResult, DiffType, TextCompareMode)
from .words import compare_words, tag_words

__all__ = ["diff_lines", "diff_texts", "normalize_line", "split_lines"]


# Maximum number of lines to look ahead for a matching line
MAX_SEARCH_DISTANCE = 100

_quoted_re = re.compile(r'"([^"]*)"')
_whitespace_re = re.compile(r"\s+")


def collapse_whitespace(text):
    """Collapse whitespace runs to a single space and trim.

    Whitespace inside double quoted runs is collapsed and trimmed
    inside the quotes as well.
    """
    text = _quoted_re.sub(
        lambda m: '"%s"' % _whitespace_re.sub(" ", m.group(1)).strip(), text)
    return _whitespace_re.sub(" ", text).strip()


def normalize_line(line, options):
    "Normalize a line for comparison."
    if options.ignore_whitespace:
        line = collapse_whitespace(line)
    if not options.case_sensitive:
        line = line.lower()
    return line


def split_lines(text):
    "Split text into lines, accepting both LF and CRLF line endings."
    return text.replace("\r\n", "\n").split("\n")


def _find_next(key, lines, start, end):
    for idx in range(start, end):
        if lines[idx] == key:
            return idx
    return None


def diff_lines(left, right, options=None, max_search_distance=MAX_SEARCH_DISTANCE):
    """Compute the line diff of two sequences of lines.

    This is a greedy single pass alignment: equal lines are matched
    directly, otherwise a bounded lookahead on both sides decides whether
    the current right line was added or the current left line removed.
    When neither line reappears nearby, the pair is reported as changed,
    except on the final line of either side where it is reported as
    removed plus added.

    Ambiguous cases where both lookaheads find a match resolve to an
    addition when the right side match is not further away.
    """
    if options is None:
        options = ComparisonOptions()

    norm_left = [normalize_line(line, options) for line in left]
    norm_right = [normalize_line(line, options) for line in right]
    N, M = len(left), len(right)

    left_result = []
    right_result = []
    i, j = 0, 0
    while i < N or j < M:
        if i >= N:
            right_result.append(DiffLine(DiffType.ADDED, right[j], j + 1))
            j += 1
        elif j >= M:
            left_result.append(DiffLine(DiffType.REMOVED, left[i], i + 1))
            i += 1
        elif norm_left[i] == norm_right[j]:
            left_result.append(DiffLine(DiffType.UNCHANGED, left[i], i + 1, j + 1))
            right_result.append(DiffLine(DiffType.UNCHANGED, right[j], j + 1, i + 1))
            i += 1
            j += 1
        else:
            left_next_match = _find_next(
                norm_left[i], norm_right, j + 1, min(j + max_search_distance + 1, M))
            right_next_match = _find_next(
                norm_right[j], norm_left, i + 1, min(i + max_search_distance + 1, N))

            if left_next_match is not None and (
                    right_next_match is None or left_next_match <= right_next_match):
                right_result.append(DiffLine(DiffType.ADDED, right[j], j + 1))
                j += 1
            elif right_next_match is not None:
                left_result.append(DiffLine(DiffType.REMOVED, left[i], i + 1))
                i += 1
            elif i == N - 1 or j == M - 1:
                left_result.append(DiffLine(DiffType.REMOVED, left[i], i + 1))
                right_result.append(DiffLine(DiffType.ADDED, right[j], j + 1))
                i += 1
                j += 1
            else:
                left_result.append(DiffLine(DiffType.CHANGED, left[i], i + 1, j + 1))
                right_result.append(DiffLine(DiffType.CHANGED, right[j], j + 1, i + 1))
                i += 1
                j += 1

    has_changes = any(
        line.type != DiffType.UNCHANGED for line in left_result + right_result)
    result = DiffResult(left_result, right_result, has_changes)

    if options.text_compare_mode == TextCompareMode.WORD:
        result = add_word_diffs(result, options)
    return result


def add_word_diffs(result, options):
    """Attach word level diffs to every line of a line diff.

    Cross-linked lines get the word diff of the pair on both sides,
    lines only present on one side have all their words tagged with the
    line type.
    """
    right_words = {}
    left_lines = []
    right_by_number = {line.line_number: line for line in result.right_lines}
    for line in result.left_lines:
        if line.corresponding_line is not None:
            other = right_by_number[line.corresponding_line]
            wd = compare_words(line.content, other.content, options)
            left_lines.append(line._replace(words=wd.left_words))
            right_words[other.line_number] = wd.right_words
        else:
            left_lines.append(line._replace(
                words=tag_words(line.content, line.type, options)))

    right_lines = []
    for line in result.right_lines:
        if line.line_number in right_words:
            words = right_words[line.line_number]
        else:
            words = tag_words(line.content, line.type, options)
        right_lines.append(line._replace(words=words))

    return result._replace(left_lines=left_lines, right_lines=right_lines)


def diff_texts(left, right, options=None, max_search_distance=MAX_SEARCH_DISTANCE):
    "Compute the line diff of two texts."
    return diff_lines(split_lines(left), split_lines(right), options,
                      max_search_distance=max_search_distance)
