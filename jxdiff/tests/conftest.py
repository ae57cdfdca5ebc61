# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os
import shutil

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from jxdiff.diff_format import ComparisonOptions, TextCompareMode


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory with an empty home directory,
    so no config files are picked up."""
    home = tmpdir.mkdir('home')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('USERPROFILE', str(home))
    work = tmpdir.mkdir('work')
    with work.as_cwd():
        yield str(work)


@fixture
def json_schema_result(request):
    schema_path = os.path.join(schema_dir, 'diff_result_schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def result_validator(request, json_schema_result):
    return Validator(json_schema_result)


_option_sets = [
    ComparisonOptions(),
    ComparisonOptions(ignore_whitespace=True),
    ComparisonOptions(case_sensitive=False),
    ComparisonOptions(ignore_whitespace=True, case_sensitive=False),
    ComparisonOptions(text_compare_mode=TextCompareMode.WORD),
    ComparisonOptions(ignore_whitespace=True, case_sensitive=False,
                      text_compare_mode=TextCompareMode.WORD),
]


@fixture(params=_option_sets)
def any_options(request):
    return request.param


@fixture
def all_options():
    return ComparisonOptions(
        ignore_whitespace=True,
        case_sensitive=False,
        ignore_key_order=True,
        ignore_array_order=True,
        ignore_attribute_order=True,
        text_compare_mode=TextCompareMode.WORD)
