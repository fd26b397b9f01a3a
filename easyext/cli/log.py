# Copyright© 1986-2024 Altair Engineering Inc.

"""Utilities for logging on TTY"""

import sys

_DEBUG = False


def set_debug(dbg=False):
    """Activate debug mode"""
    # pylint: disable=global-statement
    global _DEBUG
    _DEBUG = dbg


def write(msg, add_return=True, error=False):
    """Print the `msg` to the stdout, or to the stderr if `error` is set"""
    if add_return:
        msg = str(msg) + "\n"
    fd = sys.stderr if error else sys.stdout
    fd.write(msg)
    fd.flush()


def warning(msg):
    """Print a warning on the stderr"""
    write("WARNING: {}".format(msg), error=True)


def debug(msg):
    """Print the `msg` to the stderr if debug mode is set"""
    if _DEBUG:
        write(msg, error=True)
