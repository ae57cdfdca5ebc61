# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .canonical import normalize_json, normalize_xml
from .comparing import compare, ComparisonResult
from .diff_format import ComparisonOptions, DiffType
from .diffing import diff_lines, diff_words, compare_words
from .validation import validate_format, detect_format


__all__ = [
    "__version__",
    "compare", "ComparisonResult", "ComparisonOptions", "DiffType",
    "validate_format", "detect_format",
    "diff_lines", "diff_words", "compare_words",
    "normalize_json", "normalize_xml",
    ]
