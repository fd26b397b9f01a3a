# Copyright© 1986-2024 Altair Engineering Inc.

"""easyext generators"""

from importlib import import_module
import pkgutil
import os

from ..utils import EasyExtException
from .base import AbstractGenerator

DEFAULT_GENERATORS = ("bundle", "orm")


class GeneratorNotFound(EasyExtException):
    """Exception raised if a generator cannot be loaded"""


def _get_generator_class(module):
    for attr in dir(module):
        gen_cls = getattr(module, attr)
        try:
            if (
                issubclass(gen_cls, AbstractGenerator)
                and gen_cls is not AbstractGenerator
                and gen_cls.__module__ == module.__name__
            ):
                return gen_cls
        except TypeError:
            pass
    return None


def load_generator(generator_name, **kwargs):
    """Return the loaded generator"""
    if generator_name not in list_generators():
        raise GeneratorNotFound(
            'Generator "{}" not found. Available generators: {}'.format(
                generator_name, ", ".join(list_generators())
            )
        )
    module = import_module(f"easyext.generator.{generator_name}", "easyext.generator")
    return _get_generator_class(module)(**kwargs)


def list_generators() -> tuple:
    """Return a list of generators"""
    generators_dir = os.path.dirname(os.path.realpath(__file__))
    return tuple(
        package_name
        for _, package_name, _ in pkgutil.iter_modules([generators_dir])
        if package_name != "base"
    )
