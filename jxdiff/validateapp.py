# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_format_args, add_basic_xml_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
)
from .log import InputTooLargeError
from .prettyprint import pretty_print_validation, pretty_print_multiline
from .utils import (
    STDIN_FILENAME, format_from_filename, read_document, setup_std_streams)
from .validation import resolve_format, validate_format


_description = """Check that JSON or XML documents are well-formed.
With --show, the formatted documents are printed as well.
"""


def main_validate(args):
    files = args.documents
    if not files:
        print("Missing filenames.")
        return 1
    for fn in files:
        if fn != STDIN_FILENAME and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())

    status = 0
    for fn in files:
        try:
            text = read_document(fn)
        except InputTooLargeError as e:
            print("{}: {}".format(fn, e))
            status = 1
            continue
        fmt = resolve_format(format_from_filename(fn, args.format), text)
        result = validate_format(text, fmt, basic_xml=args.basic_xml)
        pretty_print_validation(fn, fmt, result, config)
        if not result.is_valid:
            status = 1
        elif args.show:
            pretty_print_multiline(result.formatted, config=config)
    return status


def _build_arg_parser(prog='jxdiff-validate'):
    """Creates an argument parser for the validate command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_format_args(parser)
    add_basic_xml_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument(
        "documents", nargs="*", help="document filename(s) or - to read from stdin")
    parser.add_argument(
        '--show',
        action='store_true', default=False,
        help="print the formatted document of valid input.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_validate(arguments)


if __name__ == "__main__":
    sys.exit(main())
