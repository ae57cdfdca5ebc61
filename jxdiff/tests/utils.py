# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager
import os

import pytest

from jxdiff.diff_format import DiffType, is_valid_diff_result


pjoin = os.path.join


def line_types(lines):
    "The types of a list of DiffLines."
    return [line.type for line in lines]


def word_types(words, skip_whitespace=True):
    "The (word, type) pairs of a word diff, by default without whitespace."
    return [(w.word, w.type) for w in words
            if not (skip_whitespace and not w.word.strip())]


def check_diff_consistency(diff):
    "Check cross links and has_changes of a DiffResult."
    assert is_valid_diff_result(diff)
    assert [l.line_number for l in diff.left_lines] == list(range(1, len(diff.left_lines) + 1))
    assert [l.line_number for l in diff.right_lines] == list(range(1, len(diff.right_lines) + 1))


def assert_no_changes(diff):
    assert not diff.has_changes
    assert all(l.type == DiffType.UNCHANGED for l in diff.left_lines + diff.right_lines)


def write_file(dirname, name, content):
    fn = pjoin(dirname, name)
    with open(fn, 'w', encoding='utf-8') as f:
        f.write(content)
    return fn


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
