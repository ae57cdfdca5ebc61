# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .lines import diff_lines, diff_texts
from .words import diff_words, compare_words, split_words

__all__ = ["diff_lines", "diff_texts", "diff_words", "compare_words", "split_words"]
