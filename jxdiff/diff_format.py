# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple


class DiffType:
    "Collection of valid values for the type field of diff lines and words."
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class TextCompareMode:
    LINE = "line"
    WORD = "word"


FORMATS = ("json", "xml", "text")


WordDiff = namedtuple("WordDiff", ["word", "type"])

WordDiffResult = namedtuple("WordDiffResult", ["left_words", "right_words"])

DiffLine = namedtuple(
    "DiffLine",
    ["type", "content", "line_number", "corresponding_line", "words"],
    defaults=(None, None))

DiffResult = namedtuple("DiffResult", ["left_lines", "right_lines", "has_changes"])

DiffStats = namedtuple("DiffStats", ["added", "removed", "changed"])

Position = namedtuple("Position", ["line", "column"])

ValidationResult = namedtuple(
    "ValidationResult",
    ["is_valid", "formatted", "error", "position"],
    defaults=(None, None, None))


ComparisonOptions = namedtuple(
    "ComparisonOptions",
    [
        "ignore_whitespace",
        "case_sensitive",
        "ignore_key_order",        # json
        "ignore_array_order",      # json
        "ignore_attribute_order",  # xml
        "text_compare_mode",
    ],
    defaults=(False, True, False, False, False, TextCompareMode.LINE))


def default_options(fmt=None):
    """Return the default comparison options for a document format.

    All formats currently share the same defaults; the format specific
    toggles start out disabled.
    """
    if fmt is not None and fmt not in FORMATS:
        raise ValueError("Unknown format %r. Valid formats are %r." % (fmt, FORMATS))
    return ComparisonOptions()


def valid_result(formatted):
    "Create a validation result for well-formed input."
    return ValidationResult(True, formatted=formatted)


def invalid_result(error, position=None):
    "Create a validation result for malformed input."
    return ValidationResult(False, error=error, position=position)


def is_valid_diff_result(result):
    """Check the internal consistency of a DiffResult.

    Every cross-linked line must have a reciprocal entry on the other
    side, and `has_changes` must reflect the line types.
    """
    left_by_number = {line.line_number: line for line in result.left_lines}
    right_by_number = {line.line_number: line for line in result.right_lines}
    if not all(_reciprocal(line, right_by_number) for line in result.left_lines):
        return False
    if not all(_reciprocal(line, left_by_number) for line in result.right_lines):
        return False
    changed = any(line.type != DiffType.UNCHANGED
                  for line in result.left_lines + result.right_lines)
    return changed == result.has_changes


def _reciprocal(line, others):
    if line.corresponding_line is None:
        return line.type in (DiffType.ADDED, DiffType.REMOVED)
    other = others.get(line.corresponding_line)
    return (other is not None and
            other.corresponding_line == line.line_number and
            other.type == line.type)


def to_json(value):
    """Convert diff structures to plain json-able python values."""
    if isinstance(value, tuple) and hasattr(value, '_asdict'):
        return {k: to_json(v) for k, v in value._asdict().items()}
    elif isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value
