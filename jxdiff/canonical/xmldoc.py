# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Canonical form of XML documents.

Documents are parsed with the defusedxml DOM parser into an immutable
tree of namedtuples. The normalization passes rebuild the tree, and
serialization turns it back into deterministic text for line diffing.
"""

from collections import namedtuple
import re
from xml.dom import Node
from xml.sax.saxutils import escape

import defusedxml.minidom

from ..diff_format import ComparisonOptions
from ..diffing.lines import collapse_whitespace

__all__ = [
    "XmlDocument", "XmlElement", "XmlText", "XmlCData", "XmlComment", "XmlInstruction",
    "parse_xml", "serialize_xml", "format_xml", "normalize_xml", "normalize_xml_text",
    "strip_whitespace", "sort_attributes", "fold_case",
]


XmlDocument = namedtuple("XmlDocument", ["declaration", "doctype", "prolog", "root", "epilog"])
XmlElement = namedtuple("XmlElement", ["name", "attributes", "children"])
XmlText = namedtuple("XmlText", ["text"])
XmlCData = namedtuple("XmlCData", ["text"])
XmlComment = namedtuple("XmlComment", ["text"])
XmlInstruction = namedtuple("XmlInstruction", ["target", "data"])

# Nodes that make surrounding whitespace-only text insignificant
_significant = (XmlElement, XmlCData, XmlComment, XmlInstruction)

IND = "  "

_declaration_re = re.compile(r"^\s*(<\?xml\s[^>]*\?>)")


def _build(node):
    "Convert a DOM node to a tree node, None for unsupported node types."
    t = node.nodeType
    if t == Node.ELEMENT_NODE:
        children = []
        for child in node.childNodes:
            c = _build(child)
            if c is None:
                continue
            # Merge adjacent text nodes
            if (isinstance(c, XmlText) and children and
                    isinstance(children[-1], XmlText)):
                children[-1] = XmlText(children[-1].text + c.text)
            else:
                children.append(c)
        return XmlElement(node.tagName, tuple(node.attributes.items()), tuple(children))
    elif t == Node.TEXT_NODE:
        return XmlText(node.data)
    elif t == Node.CDATA_SECTION_NODE:
        return XmlCData(node.data)
    elif t == Node.COMMENT_NODE:
        return XmlComment(node.data)
    elif t == Node.PROCESSING_INSTRUCTION_NODE:
        return XmlInstruction(node.target, node.data)
    return None


def parse_xml(text):
    """Parse XML text into an XmlDocument.

    Raises xml.parsers.expat.ExpatError on malformed input, and
    defusedxml.DefusedXmlException on entity declarations or external
    references.
    """
    dom = defusedxml.minidom.parseString(text)
    try:
        doctype = None
        root = None
        prolog = []
        epilog = []
        for node in dom.childNodes:
            if node.nodeType == Node.DOCUMENT_TYPE_NODE:
                doctype = node.toxml()
            elif node.nodeType == Node.ELEMENT_NODE:
                root = _build(node)
            else:
                c = _build(node)
                if c is not None:
                    (prolog if root is None else epilog).append(c)
    finally:
        dom.unlink()

    m = _declaration_re.match(text)
    declaration = m.group(1) if m else None
    return XmlDocument(declaration, doctype, tuple(prolog), root, tuple(epilog))


# Normalization passes

def strip_whitespace(element, collapse=True):
    """Remove insignificant whitespace from an element tree.

    Whitespace-only text next to elements, comments, CDATA sections or
    processing instructions is dropped. If `collapse` is set, whitespace
    runs in the remaining text are collapsed to a single space and
    trimmed. Comments and CDATA content are left alone.
    """
    has_markup = any(isinstance(c, _significant) for c in element.children)
    children = []
    for child in element.children:
        if isinstance(child, XmlText):
            if not child.text.strip():
                if has_markup:
                    continue
                children.append(child)
            elif collapse:
                children.append(XmlText(collapse_whitespace(child.text)))
            else:
                children.append(child)
        elif isinstance(child, XmlElement):
            children.append(strip_whitespace(child, collapse))
        else:
            children.append(child)
    return element._replace(children=tuple(children))


def _attribute_key(options):
    if options.case_sensitive:
        return lambda item: item[0]
    return lambda item: (item[0].lower(), item[0])


def sort_attributes(element, options=None):
    "Sort the attributes of all elements in a tree by name."
    if options is None:
        options = ComparisonOptions()
    key = _attribute_key(options)
    return element._replace(
        attributes=tuple(sorted(element.attributes, key=key)),
        children=tuple(
            sort_attributes(c, options) if isinstance(c, XmlElement) else c
            for c in element.children))


def fold_case(element):
    """Lower-case element names, attribute names and values, and text.

    Comments, CDATA sections and processing instructions are kept as is.
    """
    children = []
    for child in element.children:
        if isinstance(child, XmlElement):
            children.append(fold_case(child))
        elif isinstance(child, XmlText):
            children.append(XmlText(child.text.lower()))
        else:
            children.append(child)
    return XmlElement(
        element.name.lower(),
        tuple((k.lower(), v.lower()) for k, v in element.attributes),
        tuple(children))


def normalize_xml(doc, options=None):
    """Rebuild a parsed XmlDocument in canonical form.

    Passes run in a fixed order: whitespace, attribute order, case.
    """
    if options is None:
        options = ComparisonOptions()
    root = doc.root
    if options.ignore_whitespace:
        root = strip_whitespace(root)
    if options.ignore_attribute_order:
        root = sort_attributes(root, options)
    if not options.case_sensitive:
        root = fold_case(root)
    return doc._replace(root=root)


# Serialization

START = "start"
END = "end"
EMPTY = "empty"
TEXT = "text"
MARKUP = "markup"


def _format_attributes(attributes):
    return "".join(
        ' %s="%s"' % (name, escape(value, {'"': "&quot;"}))
        for name, value in attributes)


def _format_leaf(node):
    if isinstance(node, XmlText):
        return escape(node.text)
    elif isinstance(node, XmlCData):
        return "<![CDATA[%s]]>" % node.text
    elif isinstance(node, XmlComment):
        return "<!--%s-->" % node.text
    elif isinstance(node, XmlInstruction):
        if node.data:
            return "<?%s %s?>" % (node.target, node.data)
        return "<?%s?>" % node.target
    raise TypeError("Not an xml tree node: %r" % (node,))


def iter_pieces(node):
    """Yield (kind, text) pieces of the serialization of a tree node.

    Text pieces are escaped, so they never start with '<' or end with '>'.
    """
    if isinstance(node, XmlElement):
        attrs = _format_attributes(node.attributes)
        if not node.children:
            yield EMPTY, "<%s%s/>" % (node.name, attrs)
            return
        yield START, "<%s%s>" % (node.name, attrs)
        for child in node.children:
            for piece in iter_pieces(child):
                yield piece
        yield END, "</%s>" % node.name
    elif isinstance(node, XmlText):
        yield TEXT, _format_leaf(node)
    else:
        yield MARKUP, _format_leaf(node)


def pretty_lines(node):
    """Split the serialization of a node into indented lines.

    A line break is placed between any two adjacent markup pieces,
    i.e. at every '><' boundary outside of text, comments and CDATA.
    Lines are indented by element depth.
    """
    lines = []
    current = []
    depth = 0
    line_depth = 0
    prev_kind = None
    for kind, text in iter_pieces(node):
        if current and prev_kind != TEXT and kind != TEXT:
            lines.append(IND * max(0, line_depth) + "".join(current))
            current = []
        if not current:
            line_depth = depth - 1 if kind == END else depth
        current.append(text)
        if kind == START:
            depth += 1
        elif kind == END:
            depth -= 1
        prev_kind = kind
    if current:
        lines.append(IND * max(0, line_depth) + "".join(current))
    return lines


def _top_level(doc):
    items = []
    if doc.declaration:
        items.append(doc.declaration)
    if doc.doctype:
        items.append(doc.doctype)
    items.extend(_format_leaf(node) for node in doc.prolog)
    return items


def serialize_xml(doc, pretty=True):
    """Serialize an XmlDocument.

    With `pretty`, markup is split onto separate lines and re-indented.
    Otherwise the text of the root element is reproduced verbatim on
    as few lines as the document text allows.
    """
    lines = _top_level(doc)
    if pretty:
        lines.extend(pretty_lines(doc.root))
    else:
        lines.append("".join(text for _, text in iter_pieces(doc.root)))
    lines.extend(_format_leaf(node) for node in doc.epilog)
    return "\n".join(lines)


def format_xml(doc):
    "Pretty print a document without changing its content."
    return serialize_xml(doc._replace(root=strip_whitespace(doc.root, collapse=False)))


def normalize_xml_text(text, options=None):
    """Normalize XML text, returning the canonical serialization.

    The pretty serialization is used when whitespace is ignored.
    """
    if options is None:
        options = ComparisonOptions()
    doc = normalize_xml(parse_xml(text), options)
    return serialize_xml(doc, pretty=options.ignore_whitespace)
