# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import pytest

from jxdiff.log import InputTooLargeError
from jxdiff.utils import (
    content_size, format_size, check_content_size, read_document,
    format_from_filename, MAX_INPUT_SIZE,
)

from .utils import write_file


def test_content_size_counts_bytes():
    assert content_size("") == 0
    assert content_size("abc") == 3
    assert content_size("é") == 2
    assert content_size("😀") == 4


def test_format_size():
    assert format_size(512) == "512 bytes"
    assert format_size(2048) == "2.0 KB"
    assert format_size(1536) == "1.5 KB"
    assert format_size(MAX_INPUT_SIZE) == "2.0 MB"


def test_check_content_size():
    assert check_content_size("abc", 3) == "abc"
    with pytest.raises(InputTooLargeError) as e:
        check_content_size("abcd", 3)
    assert str(e.value) == "Input is too large (4 bytes), the limit is 3 bytes."


def test_read_document(tmpdir, monkeypatch):
    fn = write_file(str(tmpdir), "doc.txt", "line é\n")
    assert read_document(fn) == "line é\n"
    with pytest.raises(InputTooLargeError):
        read_document(fn, limit=4)
    assert read_document(io.StringIO("from a stream")) == "from a stream"

    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert read_document("-") == "from stdin"


def test_format_from_filename():
    assert format_from_filename("a.json") == "json"
    assert format_from_filename("dir/B.XML") == "xml"
    assert format_from_filename("notes.txt") == "text"
    assert format_from_filename("noext") == "auto"
    assert format_from_filename("-") == "auto"
    assert format_from_filename("a.json", "text") == "text"
