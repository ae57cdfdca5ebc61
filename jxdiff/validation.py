# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Validation of JSON, XML and plain text input.

Validators never raise for malformed input, they return a
ValidationResult carrying the error message and position.
"""

import json
import re
from xml.parsers.expat import ExpatError, ErrorString

from defusedxml import DefusedXmlException

from .canonical.jsondoc import parse_json, serialize_json
from .canonical.xmldoc import parse_xml, format_xml
from .diff_format import FORMATS, Position, valid_result, invalid_result
from .log import DocumentSyntaxError, EmptyInputError
from . import log

__all__ = [
    "validate_json", "validate_xml", "validate_text", "validate_format",
    "detect_format", "load_json", "load_xml", "position_at",
]


def position_at(text, offset):
    """Convert a character offset to a 1-based line/column Position."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    column = offset - text.rfind("\n", 0, offset)
    return Position(line, column)


def _check_not_empty(text):
    if not text.strip():
        raise EmptyInputError()


# JSON

def _locate_failing_line(text):
    """Find the first line at which a growing prefix of `text` fails
    for a reason other than being incomplete.

    Returns None if no such line is found.
    """
    lines = text.split("\n")
    for n in range(1, len(lines) + 1):
        try:
            parse_json("\n".join(lines[:n]))
        except json.JSONDecodeError:
            # Incomplete prefix
            continue
        except (ValueError, RecursionError):
            return n
    return None


# Skips string literals, which cannot span lines in JSON
_constant_re = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)')


def _constant_column(line):
    "Column of the first non-standard constant of a line, 1 if none."
    for m in _constant_re.finditer(line):
        if m.group(1):
            return m.start(1) + 1
    return 1


def load_json(text):
    """Parse JSON text, raising DocumentSyntaxError on failure."""
    _check_not_empty(text)
    try:
        return parse_json(text)
    except json.JSONDecodeError as e:
        pos = position_at(text, e.pos)
        raise DocumentSyntaxError(
            "%s at line %d, column %d." % (e.msg, pos.line, pos.column), pos)
    except (ValueError, RecursionError) as e:
        line = _locate_failing_line(text)
        if line is None:
            raise DocumentSyntaxError("%s." % e)
        pos = Position(line, _constant_column(text.split("\n")[line - 1]))
        raise DocumentSyntaxError(
            "%s at line %d, column %d." % (e, pos.line, pos.column), pos)


def validate_json(text):
    """Validate JSON text.

    On success the result carries the document re-serialized with an
    indentation of two spaces.
    """
    try:
        value = load_json(text)
    except DocumentSyntaxError as e:
        return invalid_result(e.message, e.position)
    return valid_result(serialize_json(value))


# XML

_line_re = re.compile(r"line\s+(\d+)", re.IGNORECASE)
_column_re = re.compile(r"column\s+(\d+)", re.IGNORECASE)


def _expat_position(e):
    # expat columns are 0-based
    text = str(e)
    line = _line_re.search(text)
    column = _column_re.search(text)
    return Position(int(line.group(1)) if line else 1,
                    int(column.group(1)) + 1 if column else 1)


def load_xml(text):
    """Parse XML text, raising DocumentSyntaxError on failure."""
    _check_not_empty(text)
    try:
        return parse_xml(text)
    except ExpatError as e:
        raise DocumentSyntaxError(ErrorString(e.code), _expat_position(e))
    except DefusedXmlException as e:
        raise DocumentSyntaxError(str(e))


_tag_re = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<[?!][^>]*>"
    r"|<(/?)([A-Za-z_][\w:.-]*)[^>]*?(/?)>",
    re.DOTALL)


def check_tag_balance(text):
    """Check that opening and closing tags of an XML text match.

    This is a linear tag stack scan, it does not check attributes,
    entities or character content. Comments, CDATA sections, processing
    instructions and doctype declarations are skipped, self-closing tags
    are ignored. Raises DocumentSyntaxError at the first problem.
    """
    _check_not_empty(text)
    stack = []
    seen_element = False
    for m in _tag_re.finditer(text):
        closing, name, self_closing = m.groups()
        if name is None or self_closing:
            seen_element = seen_element or name is not None
            continue
        seen_element = True
        if not closing:
            stack.append((name, m.start()))
        elif not stack:
            raise DocumentSyntaxError(
                "Unexpected closing tag </%s>" % name, position_at(text, m.start()))
        else:
            expected, _ = stack.pop()
            if expected != name:
                raise DocumentSyntaxError(
                    "Mismatched closing tag </%s>, expected </%s>" % (name, expected),
                    position_at(text, m.start()))
    if stack:
        name, offset = stack[-1]
        raise DocumentSyntaxError("Unclosed tag <%s>" % name, position_at(text, offset))
    if not seen_element:
        raise DocumentSyntaxError("No element found", Position(1, 1))


def validate_xml(text, use_parser=True):
    """Validate XML text.

    With `use_parser` the document is parsed with the DOM parser, and on
    success the result carries the pretty printed document. Otherwise
    only the tag structure is checked, and the text is returned as is.
    """
    try:
        if use_parser:
            formatted = format_xml(load_xml(text))
        else:
            check_tag_balance(text)
            formatted = text
    except DocumentSyntaxError as e:
        return invalid_result(e.message, e.position)
    return valid_result(formatted)


# Text

def validate_text(text):
    "Plain text is always valid, line endings are normalized."
    return valid_result(text.replace("\r\n", "\n"))


def detect_format(text):
    """Guess the format of a document.

    JSON if it starts with a brace or bracket and parses, XML if it
    starts with '<' and ends with '>', text otherwise.
    """
    stripped = text.strip()
    if stripped[:1] in ("{", "["):
        try:
            parse_json(stripped)
        except (ValueError, RecursionError):
            pass
        else:
            return "json"
    if stripped.startswith("<") and stripped.endswith(">"):
        return "xml"
    return "text"


def resolve_format(fmt, text):
    "Resolve 'auto' to a concrete format, checking the format name."
    if fmt == "auto":
        fmt = detect_format(text)
        log.debug("Detected format %s", fmt)
    if fmt not in FORMATS:
        raise ValueError("Unknown format %r. Valid formats are %r." % (fmt, FORMATS + ("auto",)))
    return fmt


def validate_format(text, fmt="auto", basic_xml=False):
    """Validate a document in the given format.

    `fmt` is one of 'json', 'xml', 'text' or 'auto'.
    """
    fmt = resolve_format(fmt, text)
    if fmt == "json":
        return validate_json(text)
    elif fmt == "xml":
        return validate_xml(text, use_parser=not basic_xml)
    return validate_text(text)
