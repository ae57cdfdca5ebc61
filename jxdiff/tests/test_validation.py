# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os

import pytest

from jxdiff.diff_format import Position
from jxdiff.log import DocumentSyntaxError, EmptyInputError
from jxdiff.validation import (
    validate_json, validate_xml, validate_text, validate_format,
    detect_format, load_json, check_tag_balance, position_at)


def test_position_at():
    assert position_at("ab\ncd", 0) == Position(1, 1)
    assert position_at("ab\ncd", 4) == Position(2, 2)
    assert position_at("ab\ncd", 100) == Position(2, 3)


def test_validate_json_formats():
    res = validate_json('{"b":[1]}')
    assert res.is_valid
    assert res.formatted == '{\n  "b": [\n    1\n  ]\n}'
    assert res.error is None and res.position is None


@pytest.mark.parametrize("validate", [validate_json, validate_xml])
def test_empty_input(validate):
    for text in ("", "  \n\t"):
        res = validate(text)
        assert not res.is_valid
        assert res.error == "Input is empty"
        assert res.position is None


def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        load_json("")


def test_json_error_position():
    res = validate_json('{\n  "a" 1\n}')
    assert not res.is_valid
    assert res.error == "Expecting ':' delimiter at line 2, column 7."
    assert res.position == Position(2, 7)


def test_json_invalid_constant_position():
    res = validate_json('[\n  NaN\n]')
    assert not res.is_valid
    assert res.position == Position(2, 3)
    assert res.error == "Invalid constant 'NaN' at line 2, column 3."

    assert validate_json('{"a": NaN}').position == Position(1, 7)
    # Constants inside strings are skipped
    assert validate_json('{"NaN": -Infinity}').position == Position(1, 9)


def test_json_broken_file(filespath):
    with io.open(os.path.join(filespath, "broken.json"), encoding="utf8") as f:
        res = validate_json(f.read())
    assert not res.is_valid
    assert res.position.line == 3


def test_validate_xml_formats():
    res = validate_xml('<a><b>x</b></a>')
    assert res.is_valid
    assert res.formatted == "<a>\n  <b>x</b>\n</a>"


def test_xml_mismatched_tag(filespath):
    with io.open(os.path.join(filespath, "broken.xml"), encoding="utf8") as f:
        res = validate_xml(f.read())
    assert not res.is_valid
    assert res.error == "mismatched tag"
    assert res.position.line == 3
    assert res.position.column > 1


def test_xml_basic_mode():
    res = validate_xml('<a><b></a>', use_parser=False)
    assert not res.is_valid
    assert res.error == "Mismatched closing tag </a>, expected </b>"
    assert res.position == Position(1, 7)

    res = validate_xml('<a>\n<b/>', use_parser=False)
    assert res.error == "Unclosed tag <a>"
    assert res.position == Position(1, 1)

    res = validate_xml('<a/>\n</a>', use_parser=False)
    assert res.error == "Unexpected closing tag </a>"
    assert res.position == Position(2, 1)


def test_xml_basic_mode_skips_markup():
    text = '<?xml version="1.0"?>\n<a><!-- </b> --><![CDATA[</c>]]></a>'
    res = validate_xml(text, use_parser=False)
    assert res.is_valid
    assert res.formatted == text

    with pytest.raises(DocumentSyntaxError) as e:
        check_tag_balance('<!-- only a comment -->')
    assert e.value.message == "No element found"


def test_xml_basic_mode_is_lenient():
    # Undefined entities are only caught by the parser
    text = '<a>&nbsp;</a>'
    assert validate_xml(text, use_parser=False).is_valid
    assert not validate_xml(text).is_valid


def test_xml_entity_declarations_rejected():
    text = '<!DOCTYPE a [<!ENTITY e "x">]><a>&e;</a>'
    res = validate_xml(text)
    assert not res.is_valid
    assert "EntitiesForbidden" in res.error
    assert res.position is None

    # A doctype without declarations is accepted
    assert validate_xml('<!DOCTYPE a><a/>').is_valid


def test_validate_text_normalizes_line_endings():
    res = validate_text("a\r\nb\r\n")
    assert res.is_valid
    assert res.formatted == "a\nb\n"
    assert validate_text("").is_valid


@pytest.mark.parametrize("text, expected", [
    ('{"a": 1}', "json"),
    ('  [1, 2]\n', "json"),
    ('{not json', "text"),
    ('<a/>', "xml"),
    ('\n<?xml version="1.0"?><a/>\n', "xml"),
    ('<a> and more', "text"),
    ('hello', "text"),
    ('', "text"),
])
def test_detect_format(text, expected):
    assert detect_format(text) == expected


def test_validate_format():
    assert validate_format('{"a": 1}').is_valid
    assert validate_format('<a/>', "xml").is_valid
    assert validate_format('<a><b></a>', "xml", basic_xml=True).error.startswith("Mismatched")
    # Auto detection falls back to text for broken documents
    assert validate_format('{"a": ').is_valid
    assert not validate_format('{"a": ', "json").is_valid


def test_validate_format_unknown():
    with pytest.raises(ValueError):
        validate_format("x", "yaml")
