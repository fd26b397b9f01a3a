#!/usr/bin/env python
# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.

"""Main module.

This calls the main function. This is designed to be used as a command line.
To display the help, run: easyext --help.
"""
import sys
import traceback

from easyext.cli import log
from easyext.cli.parser import get_parser


def main(argv=None):
    """Main function"""
    try:
        parser = get_parser()
        cli_args = parser.parse_args(argv)
        log.set_debug(cli_args.debug)
        cli_args.func(cli_args)
    except Exception as exc:  # pylint: disable=W0703
        argv = sys.argv if argv is None else argv
        if "--debug" in argv or "-d" in argv:
            log.set_debug(True)
        log.write("ERROR: ({}) {}".format(type(exc).__name__, exc), error=True)
        log.debug("".join(traceback.format_exception(*sys.exc_info())))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
