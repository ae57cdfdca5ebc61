#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JXDIFF_PATH = HERE / "jxdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)


VERSION = get_version(JXDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
        name='jxdiff',
        version=VERSION,
        description='Diff and normalization of JSON, XML and text documents',
        long_description=LONG_DESCRIPTION,
        long_description_content_type='text/markdown',
        license='BSD',
        python_requires='>=3.7',
        packages=find_packages(include=['jxdiff', 'jxdiff.*']),
        package_data={
            'jxdiff': ['diff_result_schema.json'],
            'jxdiff.tests': ['files/*'],
        },
        install_requires=[
            'colorama',
            'defusedxml',
            'traitlets>=5',
        ],
        extras_require={
            'test': [
                'pytest>=6.0',
                'jsonschema',
            ],
        },
        entry_points={
            'console_scripts': [
                'jxdiff = jxdiff.__main__:main_dispatch',
                'jxdiff-diff = jxdiff.diffapp:main',
                'jxdiff-validate = jxdiff.validateapp:main',
            ],
        },
    )
