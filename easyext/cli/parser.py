#!/usr/bin/env python
# -*- coding: utf-8 -*-
# Copyright© 1986-2019 Altair Engineering Inc.

"""easyext CLI parser"""

import argparse
from pathlib import Path

from .log import warning, write
from ..config import Config
from ..generator import DEFAULT_GENERATORS, list_generators, load_generator
from ..utils import CONFIG_FILE
from ..version import __version__


def get_parser():
    """Return the easyext parser"""
    easyext_parser = argparse.ArgumentParser(
        prog="easyext",
        description="Generate extended entities and repositories of bundles.",
    )
    easyext_parser.set_defaults(func=lambda _: easyext_parser.print_help())
    easyext_parser.add_argument(
        "-v", "--version", action="version", version="%(prog)s " + __version__
    )
    easyext_parser.add_argument("-d", "--debug", action="store_true")

    sub_p = easyext_parser.add_subparsers(title="Commands", metavar="<command>", help="<action>")

    # Generate parser
    generate_parser = sub_p.add_parser(
        "generate", help="Generate the extended bundles, existing files are kept"
    )
    add_bundle_argument(generate_parser)
    add_override_arguments(generate_parser)
    generate_parser.add_argument(
        "-g",
        "--generator",
        dest="generators",
        action="append",
        default=None,
        help="Generator to run, may be repeated (default: {}). Available: {}".format(
            ", ".join(DEFAULT_GENERATORS), ", ".join(list_generators())
        ),
    )
    generate_parser.set_defaults(func=_generate_handler)

    # List parser
    list_parser = sub_p.add_parser("list", help="List configured bundles")
    list_parser.set_defaults(func=_list_handler)

    # Dump parser
    dump_parser = sub_p.add_parser("dump", help="Dump the computed metadata of bundles")
    add_bundle_argument(dump_parser)
    add_override_arguments(dump_parser)
    dump_parser.set_defaults(
        func=lambda args: write(
            Config().dump(
                args.bundles, dest=_absolute(args.dest), namespace_pattern=args.namespace
            ),
            add_return=False,
        )
    )

    # Init
    init_parser = sub_p.add_parser("init", help="Create a starter {}".format(CONFIG_FILE))
    init_parser.add_argument(
        "path", nargs="?", default=".", help="The folder in which to create the configuration."
    )
    init_parser.set_defaults(func=_init_handler)

    return easyext_parser


def _absolute(path):
    """CLI paths are relative to the current directory"""
    if path is None:
        return None
    return Path(path).absolute()


def _generate_handler(args):
    config = Config()
    bundles = config.get_bundles(
        args.bundles, dest=_absolute(args.dest), namespace_pattern=args.namespace
    )
    generators = [load_generator(name) for name in (args.generators or DEFAULT_GENERATORS)]

    for bundle in bundles:
        if not bundle.is_extendable():
            warning("Bundle {} is not extendable, skipping it".format(bundle.namespace))
            continue

        write("Processing bundle: {}".format(bundle.namespace))
        for generator in generators:
            generator.generate(bundle)

    write("done!")


def _list_handler(_):
    config = Config()
    bundles = config.get_bundles()
    if bundles:
        write("Bundles:")
        for bundle in bundles:
            write(" - {} -> {}".format(bundle.namespace, bundle.extended_namespace))
    else:
        write("No bundle configured.")


def _init_handler(args):
    path = Path(args.path).absolute()
    if Config.create(path):
        write("Configuration created in : {}".format(path / CONFIG_FILE))
    else:
        warning("{} already exists, leaving it untouched".format(path / CONFIG_FILE))


def add_bundle_argument(parser):
    parser.add_argument(
        "bundles", nargs="*", default=None, help="Namespaces of the bundles (default to all)"
    )


def add_override_arguments(parser):
    parser.add_argument(
        "--dest", default=None, help="Root folder of the extended bundles (overrides the config)"
    )
    parser.add_argument(
        "--namespace",
        default=None,
        help="Namespace of the extended bundles, ':vendor' is replaced by the bundle vendor "
        "(overrides the config)",
    )
