# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import io
import os

import pytest

from jxdiff.canonical.jsondoc import (
    parse_json, serialize_json, normalize_json, normalize_json_text,
    sort_object_keys, sort_arrays, collapse_string_whitespace)
from jxdiff.diff_format import ComparisonOptions
from jxdiff.log import NormalizationError


key_order = ComparisonOptions(ignore_key_order=True)
array_order = ComparisonOptions(ignore_array_order=True)


def test_parse_rejects_non_standard_constants():
    for text in ("NaN", "[Infinity]", '{"a": -Infinity}'):
        with pytest.raises(ValueError):
            parse_json(text)


def test_integral_numbers_read_as_integers():
    value = parse_json('{"price": 10.0, "n": 1e2, "x": 1.5, "z": -0.0}')
    assert serialize_json(value) == '{\n  "price": 10,\n  "n": 100,\n  "x": 1.5,\n  "z": 0\n}'
    assert isinstance(value["price"], int)
    # Beyond the exact integer range of a double the float is kept
    assert isinstance(parse_json("1e300"), float)


def test_sort_arrays_mixed_number_notation():
    assert normalize_json_text('[1.0, 2]', array_order) == '[\n  1,\n  2\n]'
    assert normalize_json_text('[2e0, 1]', array_order) == \
        normalize_json_text('[2, 1.0]', array_order)


def test_serialize_indents_and_keeps_unicode():
    assert serialize_json({"k": "é", "l": [1]}) == '{\n  "k": "é",\n  "l": [\n    1\n  ]\n}'


def test_sort_object_keys_recursively():
    value = {"b": {"z": 1, "y": 2}, "a": [{"d": 1, "c": 2}]}
    res = sort_object_keys(value)
    assert list(res) == ["a", "b"]
    assert list(res["b"]) == ["y", "z"]
    assert list(res["a"][0]) == ["c", "d"]


def test_sort_object_keys_case_folded():
    value = {"a": 1, "B": 2}
    assert list(sort_object_keys(value)) == ["B", "a"]
    assert list(sort_object_keys(value, ComparisonOptions(case_sensitive=False))) == ["a", "B"]


def test_sort_arrays():
    assert sort_arrays([3, 1, 2]) == [1, 2, 3]
    assert sort_arrays([[2, 1], [0]]) == [[0], [1, 2]]


def test_sort_arrays_independent_of_key_order():
    res = sort_arrays([{"b": 1, "a": 2}, {"a": 1}])
    assert res == [{"a": 1}, {"b": 1, "a": 2}]
    # Key order is kept as is without ignore_key_order
    assert list(res[1]) == ["b", "a"]


def test_collapse_string_whitespace():
    value = {"a": "  x   y ", "b": ["p\n q", 1, None]}
    assert collapse_string_whitespace(value) == {"a": "x y", "b": ["p q", 1, None]}


def test_normalize_json_passes():
    value = {"b": [3, 1, 2], "a": " x  y "}
    assert normalize_json(value) == value

    options = ComparisonOptions(
        ignore_whitespace=True, ignore_key_order=True, ignore_array_order=True)
    res = normalize_json(value, options)
    assert list(res) == ["a", "b"]
    assert res == {"a": "x y", "b": [1, 2, 3]}


def test_normalize_json_does_not_modify_input():
    value = {"b": [{"d": 1, "c": 2}, 0], "a": "  x "}
    before = copy.deepcopy(value)
    normalize_json(value, ComparisonOptions(
        ignore_whitespace=True, ignore_key_order=True, ignore_array_order=True))
    assert value == before
    assert list(value) == ["b", "a"]


def test_normalize_json_text():
    assert normalize_json_text('{"b": 2, "a": 1}', key_order) == '{\n  "a": 1,\n  "b": 2\n}'
    assert normalize_json_text('[3, 1]', array_order) == '[\n  1,\n  3\n]'
    assert normalize_json_text('"just a string"') == '"just a string"'


def test_normalize_json_text_invalid():
    with pytest.raises(NormalizationError):
        normalize_json_text('{"a": ')


def test_normalize_json_idempotent(filespath, all_options):
    for name in ("person--1.json", "person--2.json", "person--3.json"):
        with io.open(os.path.join(filespath, name), encoding="utf8") as f:
            text = f.read()
        once = normalize_json_text(text, all_options)
        assert normalize_json_text(once, all_options) == once
        value = parse_json(text)
        assert normalize_json(normalize_json(value, all_options), all_options) == \
            normalize_json(value, all_options)


def test_key_order_invariance(filespath):
    with io.open(os.path.join(filespath, "person--1.json"), encoding="utf8") as f:
        a = f.read()
    with io.open(os.path.join(filespath, "person--2.json"), encoding="utf8") as f:
        b = f.read()
    options = ComparisonOptions(ignore_key_order=True, ignore_array_order=True)
    assert normalize_json_text(a, options) == normalize_json_text(b, options)
    assert normalize_json_text(a, key_order) != normalize_json_text(b, key_order)
