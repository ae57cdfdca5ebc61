# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import sys

import colorama

from .diff_format import DiffType, TextCompareMode
from .diff_utils import iter_aligned


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'CHANGE',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        CHANGE = '{color}~  '.format(color=colorama.Fore.YELLOW),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        CHANGE = '~  ',
        INFO   = '## ',
        RESET  = '',
    )
}


# Word highlighting, (start, end) markers per word type and side.
# Without color, the markers follow git's plain word diff.
word_markers = {
    True: {
        'left': (colorama.Style.BRIGHT + colorama.Fore.RED, colorama.Style.RESET_ALL),
        'right': (colorama.Style.BRIGHT + colorama.Fore.GREEN, colorama.Style.RESET_ALL),
    },
    False: {
        'left': ('[-', '-]'),
        'right': ('{+', '+}'),
    },
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            show_unchanged=True,
            ):
        self.out = out
        self.use_color = use_color
        self.show_unchanged = show_unchanged

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def CHANGE(self):
        return col_const[self.use_color].CHANGE

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

    def word_markers(self, side):
        return word_markers[self.use_color][side]

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format simple value for printing."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def format_position(position):
    if position is None:
        return ""
    return " (line %d, column %d)" % (position.line, position.column)


def pretty_print_validation(name, fmt, result, config=DefaultConfig):
    """Print the outcome of validating one document."""
    if result.is_valid:
        config.out.write("%s%s: valid %s%s\n" % (config.INFO, name, fmt, config.RESET))
    else:
        config.out.write("%s%s: invalid %s: %s%s%s\n" % (
            config.INFO, name, fmt, result.error,
            format_position(result.position), config.RESET))


def format_words(line, side, config):
    """Format the content of a diff line with its changed words marked.

    Falls back to the plain content for lines without word diffs.
    """
    if line.words is None:
        return line.content
    start, end = config.word_markers(side)
    parts = []
    for w in line.words:
        if w.type == DiffType.UNCHANGED:
            parts.append(w.word)
        else:
            parts.append(start + w.word + end)
    return "".join(parts)


def _format_row(prefix, left_number, right_number, content, config):
    return "%s%5s %5s  %s%s\n" % (
        prefix, left_number or "", right_number or "", content, config.RESET)


def pretty_print_diff_lines(diff, config=DefaultConfig):
    """Print the lines of a diff result side by side.

    Each row shows the left and right line numbers. Changed line pairs
    are printed as two rows, the left line first.
    """
    for left, right in iter_aligned(diff):
        if left is None:
            config.out.write(_format_row(
                config.ADD, None, right.line_number,
                format_words(right, 'right', config), config))
        elif right is None:
            config.out.write(_format_row(
                config.REMOVE, left.line_number, None,
                format_words(left, 'left', config), config))
        elif left.type == DiffType.CHANGED:
            config.out.write(_format_row(
                config.CHANGE, left.line_number, None,
                format_words(left, 'left', config), config))
            config.out.write(_format_row(
                config.CHANGE, None, right.line_number,
                format_words(right, 'right', config), config))
        elif config.show_unchanged:
            config.out.write(_format_row(
                config.KEEP, left.line_number, right.line_number,
                left.content, config))


def pretty_print_statistics(stats, unit="lines", config=DefaultConfig):
    config.out.write("%s%d %s added, %d removed, %d changed%s\n" % (
        config.INFO, stats.added, unit, stats.removed, stats.changed, config.RESET))


comparison_header = """\
--- {afn}{atime}
+++ {bfn}{btime}
"""


def pretty_print_comparison(afn, bfn, result, config=DefaultConfig):
    """Pretty-print the result of comparing two documents

    Parameters
    ----------

    afn: str
        Filename of the left document
    bfn: str
        Filename of the right document
    result: ComparisonResult
        The result of comparing the documents
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if not result.is_valid:
        for name, validation in ((afn, result.left_validation),
                                 (bfn, result.right_validation)):
            pretty_print_validation(name, result.format, validation, config)
        return

    atime = "  " + file_timestamp(afn)
    btime = "  " + file_timestamp(bfn)
    config.out.write(comparison_header.format(
        afn=afn, bfn=bfn, atime=atime, btime=btime))
    if not result.diff.has_changes:
        config.out.write("%sno differences (%s)%s\n" % (
            config.INFO, result.format, config.RESET))
        return

    pretty_print_diff_lines(result.diff, config)
    unit = "words" if result.options.text_compare_mode == TextCompareMode.WORD else "lines"
    pretty_print_statistics(result.statistics(), unit, config)
