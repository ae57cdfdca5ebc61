# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diff_format import ComparisonOptions, TextCompareMode
from .log import init_logging, set_jxdiff_log_level


FORMAT_CHOICES = ('auto', 'json', 'xml', 'text')


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jxdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jxdiff_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jxdiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_format_args(parser):
    parser.add_argument(
        '-f', '--format',
        default='auto',
        choices=FORMAT_CHOICES,
        help="the format of the documents. By default it is detected "
             "from the content of the (first) document.")


def add_comparison_args(parser):
    """Adds a set of arguments for commands that compare documents.
    """
    ignorables = parser.add_argument_group(
        title='ignorables',
        description='Set which differences to ignore.')
    ignorables.add_argument(
        '-w', '--ignore-whitespace',
        action='store_true', default=False,
        help="collapse whitespace runs and ignore leading/trailing whitespace.")
    ignorables.add_argument(
        '-i', '--ignore-case',
        action='store_true', default=False,
        help="compare case-insensitively.")
    ignorables.add_argument(
        '-k', '--ignore-key-order',
        action='store_true', default=False,
        help="ignore the order of keys in json objects.")
    ignorables.add_argument(
        '-a', '--ignore-array-order',
        action='store_true', default=False,
        help="ignore the order of elements in json arrays.")
    ignorables.add_argument(
        '-t', '--ignore-attribute-order',
        action='store_true', default=False,
        help="ignore the order of attributes in xml elements.")

    parser.add_argument(
        '--word-mode',
        dest='text_compare_mode',
        action='store_const',
        const=TextCompareMode.WORD,
        default=TextCompareMode.LINE,
        help="highlight changed words within changed lines.")
    parser.add_argument(
        '--max-search-distance',
        type=int,
        default=100,
        help="number of lines to look ahead for a matching line.")


def add_basic_xml_args(parser):
    parser.add_argument(
        '--basic-xml',
        action='store_true', default=False,
        help="check xml by matching tags only, without a parser.")


def comparison_options_from_args(arguments):
    """Build ComparisonOptions from parsed comparison arguments."""
    return ComparisonOptions(
        ignore_whitespace=getattr(arguments, 'ignore_whitespace', False),
        case_sensitive=not getattr(arguments, 'ignore_case', False),
        ignore_key_order=getattr(arguments, 'ignore_key_order', False),
        ignore_array_order=getattr(arguments, 'ignore_array_order', False),
        ignore_attribute_order=getattr(arguments, 'ignore_attribute_order', False),
        text_compare_mode=getattr(arguments, 'text_compare_mode', TextCompareMode.LINE),
    )


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )
    parser.add_argument(
        '--only-changes',
        dest='show_unchanged',
        action="store_false",
        default=True,
        help=("print only the lines that differ")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        show_unchanged=getattr(arguments, 'show_unchanged', True),
        **kwargs
    )
