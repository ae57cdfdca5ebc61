# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Canonical form of JSON documents.

All functions here rebuild the value tree, the input tree is never
modified in place.
"""

import json
import math
import re

from ..diff_format import ComparisonOptions
from ..log import NormalizationError

__all__ = ["parse_json", "serialize_json", "normalize_json", "normalize_json_text"]


INDENT = 2

_whitespace_re = re.compile(r"\s+")


def _reject_constant(name):
    raise ValueError("Invalid constant %r" % (name,))


# Largest magnitude below which every integer is an exact double
MAX_SAFE_INTEGER = 2 ** 53


def _parse_number(s):
    f = float(s)
    if math.isfinite(f) and f.is_integer() and abs(f) <= MAX_SAFE_INTEGER:
        return int(f)
    return f


def parse_json(text):
    """Parse JSON text into a value tree.

    The non-standard constants NaN and Infinity are rejected. Numbers
    with an integral value are read as integers whatever their notation,
    so that 10.0 and 1e2 serialize as 10 and 100.
    Raises json.JSONDecodeError or ValueError on malformed input.
    """
    return json.loads(text, parse_float=_parse_number, parse_constant=_reject_constant)


def serialize_json(value):
    "Serialize a value tree with the canonical indentation."
    return json.dumps(value, indent=INDENT, ensure_ascii=False)


def _sort_key_for(options):
    if options.case_sensitive:
        return lambda key: key
    return lambda key: (key.lower(), key)


def _canonical_string(value, options):
    # Serialization used to order array elements independently of key order
    s = json.dumps(value, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return s if options.case_sensitive else (s.lower(), s)


def collapse_string_whitespace(value):
    "Collapse and trim whitespace in all string values of a tree."
    if isinstance(value, str):
        return _whitespace_re.sub(" ", value).strip()
    elif isinstance(value, list):
        return [collapse_string_whitespace(v) for v in value]
    elif isinstance(value, dict):
        return {k: collapse_string_whitespace(v) for k, v in value.items()}
    return value


def sort_object_keys(value, options=None):
    "Sort the keys of all objects in a tree."
    if options is None:
        options = ComparisonOptions()
    key = _sort_key_for(options)
    if isinstance(value, list):
        return [sort_object_keys(v, options) for v in value]
    elif isinstance(value, dict):
        return {k: sort_object_keys(value[k], options)
                for k in sorted(value, key=key)}
    return value


def sort_arrays(value, options=None):
    """Sort the elements of all arrays in a tree.

    Elements are recursed into first, then ordered by their canonical
    serialization, which does not depend on object key order.
    """
    if options is None:
        options = ComparisonOptions()
    if isinstance(value, list):
        items = [sort_arrays(v, options) for v in value]
        return sorted(items, key=lambda v: _canonical_string(v, options))
    elif isinstance(value, dict):
        return {k: sort_arrays(v, options) for k, v in value.items()}
    return value


def normalize_json(value, options=None):
    """Rebuild a parsed JSON value tree in canonical form.

    The passes applied depend on the options:

    - ignore_whitespace: whitespace in string values is collapsed,
    - ignore_key_order: object keys are sorted,
    - ignore_array_order: array elements are sorted.
    """
    if options is None:
        options = ComparisonOptions()
    if options.ignore_whitespace:
        value = collapse_string_whitespace(value)
    if options.ignore_key_order:
        value = sort_object_keys(value, options)
    if options.ignore_array_order:
        value = sort_arrays(value, options)
    return value


def normalize_json_text(text, options=None):
    "Normalize JSON text, returning the canonical serialization."
    try:
        value = parse_json(text)
    except ValueError as e:
        raise NormalizationError("Cannot normalize invalid JSON: %s" % e) from e
    return serialize_json(normalize_json(value, options))
