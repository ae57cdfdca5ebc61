# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__


COMMANDS = ["diff", "validate"]
HELP_MESSAGE_VERBOSE = ("Usage: jxdiff [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: jxdiff --version\n"
                       "          jxdiff diff -h\n"
                       "          jxdiff diff --ignore-key-order a.json b.json\n"
                       "          jxdiff validate document.xml\n" % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "diff":
        from .diffapp import main
    elif cmd == "validate":
        from .validateapp import main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        if cmd == '--config':
            # List all possible config options:
            from .args import modify_config_for_print
            from .config import build_config, entrypoint_configurables
            from .prettyprint import pretty_print_dict, PrettyPrintConfig
            print('All available config options, and their current values:\n',
                  file=sys.stderr)
            for entrypoint, cls in entrypoint_configurables.items():
                config = build_config(entrypoint, True)
                pretty_print_dict({
                        cls.__name__: modify_config_for_print(config),
                    },
                    config=PrettyPrintConfig(out=sys.stderr)
                )
                print('', file=sys.stderr)
            sys.exit(1)
        else:
            sys.exit("Unrecognized command '%s'\n\n%s." %
                     (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m jxdiff <args>"
    sys.exit(main_dispatch())
