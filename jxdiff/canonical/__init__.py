# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .jsondoc import parse_json, serialize_json, normalize_json, normalize_json_text
from .xmldoc import parse_xml, serialize_xml, format_xml, normalize_xml, normalize_xml_text

__all__ = [
    "parse_json", "serialize_json", "normalize_json", "normalize_json_text",
    "parse_xml", "serialize_xml", "format_xml", "normalize_xml", "normalize_xml_text",
]
