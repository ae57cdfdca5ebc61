# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_format_args, add_comparison_args,
    add_prettyprint_args, ConfigBackedParser,
    comparison_options_from_args, prettyprint_config_from_args,
    )
from .comparing import compare
from .diff_format import to_json
from .log import InputTooLargeError
from .prettyprint import pretty_print_comparison
from .utils import (
    STDIN_FILENAME, format_from_filename, read_document, setup_std_streams)


_description = "Compare two JSON, XML or text documents."

# Exit codes
EQUAL = 0
DIFFERENT = 1
INVALID = 2


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    left, right = args.left, args.right

    for fn in (left, right):
        if fn != STDIN_FILENAME and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return INVALID
    if left == STDIN_FILENAME and right == STDIN_FILENAME:
        print("Cannot read both documents from stdin")
        return INVALID

    try:
        a = read_document(left)
        b = read_document(right)
    except InputTooLargeError as e:
        print(e)
        return INVALID

    options = comparison_options_from_args(args)
    fmt = format_from_filename(left, args.format)
    result = compare(a, b, fmt, options,
                     max_search_distance=args.max_search_distance)

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "w", encoding="utf-8") as df:
            json.dump(to_json(result), df, indent=2, separators=(",", ": "))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_comparison(left, right, result, config)

    if not result.is_valid:
        return INVALID
    return DIFFERENT if result.diff.has_changes else EQUAL


def _build_arg_parser(prog='jxdiff-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_format_args(parser)
    add_comparison_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "left", help="the left (original) document filename, '-' for stdin.")
    parser.add_argument(
        "right", help="the right (modified) document filename, '-' for stdin.")

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the comparison result is written to this file "
             "as JSON. Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
