# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Comparison of two documents.

A comparison validates both sides, normalizes them according to the
options, and computes the line diff of the normalized texts:

    Idle -> Validating -> (Invalid: Done) -> Normalizing -> Diffing -> Done

No diff is produced when either side is invalid.
"""

from collections import namedtuple

from .canonical.jsondoc import parse_json, serialize_json, normalize_json
from .canonical.xmldoc import normalize_xml_text
from .diff_format import ComparisonOptions
from .diff_utils import diff_statistics
from .diffing.lines import MAX_SEARCH_DISTANCE, diff_texts
from .validation import resolve_format, validate_format
from . import log

__all__ = ["ComparisonResult", "compare", "validate_format", "normalize_text"]


class ComparisonResult(namedtuple(
        "ComparisonResult",
        ["left_validation", "right_validation", "diff", "options", "format"])):
    __slots__ = ()

    @property
    def is_valid(self):
        return self.left_validation.is_valid and self.right_validation.is_valid

    def statistics(self):
        "Count the changes of the diff, None if there is no diff."
        if self.diff is None:
            return None
        return diff_statistics(self.diff, self.options.text_compare_mode)


def _normalize_json(text, formatted, options):
    if not (options.ignore_whitespace or options.ignore_key_order or
            options.ignore_array_order):
        return formatted
    return serialize_json(normalize_json(parse_json(text), options))


def _xml_tree_options(options):
    return (options.ignore_whitespace or options.ignore_attribute_order or
            not options.case_sensitive)


def _normalize_xml(text, formatted, options):
    if not _xml_tree_options(options):
        # Nothing to ignore in the tree, diff the document as written
        return text.replace("\r\n", "\n")
    return normalize_xml_text(text, options)


def _normalize_text(text, formatted, options):
    return formatted


_normalizers = {
    "json": _normalize_json,
    "xml": _normalize_xml,
    "text": _normalize_text,
}


def normalize_text(text, formatted, fmt, options):
    """Produce the text to diff for one side of a comparison.

    A failure of a normalization pass is logged, and the text falls
    back to the validated form of the document.
    """
    try:
        return _normalizers[fmt](text, formatted, options)
    except Exception:
        log.warning("Normalization of %s document failed, comparing it "
                    "without normalization.", fmt, exc_info=True)
        if fmt == "xml":
            return text.replace("\r\n", "\n")
        return formatted


def compare(left_text, right_text, fmt="auto", options=None,
            max_search_distance=MAX_SEARCH_DISTANCE):
    """Compare two documents.

    `fmt` is one of 'json', 'xml', 'text' or 'auto', in which case the
    format is detected from the left document.

    Returns a ComparisonResult. Its `diff` is None if either
    document is invalid.
    """
    if options is None:
        options = ComparisonOptions()
    fmt = resolve_format(fmt, left_text)

    log.debug("Validating %s documents", fmt)
    left_validation = validate_format(left_text, fmt)
    right_validation = validate_format(right_text, fmt)
    if not (left_validation.is_valid and right_validation.is_valid):
        log.debug("Invalid input, skipping diff")
        return ComparisonResult(left_validation, right_validation, None, options, fmt)

    log.debug("Normalizing %s documents", fmt)
    left = normalize_text(left_text, left_validation.formatted, fmt, options)
    right = normalize_text(right_text, right_validation.formatted, fmt, options)

    log.debug("Diffing %s documents", fmt)
    diff = diff_texts(left, right, options, max_search_distance=max_search_distance)

    log.debug("Comparison done, changes: %s", diff.has_changes)
    return ComparisonResult(left_validation, right_validation, diff, options, fmt)
