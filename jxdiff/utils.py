# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import locale
import os
import sys

from .log import InputTooLargeError


# Largest accepted input per side, in bytes
MAX_INPUT_SIZE = 2 * 1024 * 1024

STDIN_FILENAME = '-'


def content_size(text):
    "Size of a text in bytes when encoded as UTF-8."
    return len(text.encode('utf-8', 'surrogatepass'))


def format_size(size):
    """Format a byte count for humans, e.g. '1.5 KB'"""
    for unit in ('bytes', 'KB', 'MB'):
        if size < 1024 or unit == 'MB':
            break
        size /= 1024.0
    if unit == 'bytes':
        return '%d bytes' % size
    return '%.1f %s' % (size, unit)


def check_content_size(text, limit=MAX_INPUT_SIZE):
    """Raise InputTooLargeError if text exceeds the size limit"""
    size = content_size(text)
    if size > limit:
        raise InputTooLargeError(
            'Input is too large (%s), the limit is %s.' % (
                format_size(size), format_size(limit)))
    return text


def read_document(filename, limit=MAX_INPUT_SIZE):
    """Read and return the text of a document

    Parameters:
        filename: The filename to read from, or '-' to read from stdin.
            Alternatively a file-like object can be passed.
        limit: Maximal size in bytes, None to disable the check.
    """
    if filename == STDIN_FILENAME:
        text = sys.stdin.read()
    elif hasattr(filename, 'read'):
        text = filename.read()
    else:
        with io.open(filename, encoding='utf-8') as f:
            text = f.read()
    if limit is not None:
        check_content_size(text, limit)
    return text


_extension_formats = {
    '.json': 'json',
    '.xml': 'xml',
    '.txt': 'text',
}


def format_from_filename(filename, fmt='auto'):
    """Resolve an 'auto' format from the file extension, if it is known.

    Returns `fmt` unchanged otherwise.
    """
    if fmt != 'auto' or filename == STDIN_FILENAME:
        return fmt
    ext = os.path.splitext(filename)[1].lower()
    return _extension_formats.get(ext, fmt)


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # captured or redirected
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            new_stream = codecs.getwriter(enc)(stream.buffer, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders.
    - Enables colorama for ANSI escapes on Windows.
    """
    _setup_std_stream_encoding()
    # colorama must wrap the streams after the encoding is set up
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
