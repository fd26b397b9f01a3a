# -*- coding: utf-8 -*-
# Copyright© 1986-2019 Altair Engineering Inc.

"""Utils functions for easyext"""

import os
import re
from pathlib import Path

import jinja2

CONFIG_FILE = "easyext.yml"
PATH_ENV_VAR = "EASYEXT_PATH"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
TOKEN = re.compile(r"{{\s*(.+?)\s*}}")


class EasyExtException(Exception):
    """easyext Exception"""


class ConfigNotFound(EasyExtException):
    """Raised when no easyext.yml can be found"""


def is_project_path(path):
    """Check if path holds an easyext configuration file"""
    return path.is_dir() and (path / CONFIG_FILE).is_file()


def get_project_path(raise_if_not_found=True):
    """Return the path of the easyext project folder

    The folder given by the env. var 'EASYEXT_PATH' is used as a starting
    point, the current directory otherwise. Parent folders are walked up
    until one holding an easyext.yml file is found.
    """
    full_path = Path(os.environ.get(PATH_ENV_VAR, os.getcwd())).absolute()
    project_path = full_path
    while project_path.parent != project_path:
        if is_project_path(project_path):
            return project_path
        project_path = project_path.parent

    if raise_if_not_found and not is_project_path(project_path):
        raise ConfigNotFound(
            "{} path {} is not a valid easyext path, no {} found".format(
                "Given" if PATH_ENV_VAR in os.environ else "Current", full_path, CONFIG_FILE
            )
        )

    return project_path


def dedup_list(items):
    """Remove duplicates from `items` in place, keeping the first occurrence.

    Return the list of removed duplicates.
    """
    seen = []
    duplicates = []
    for item in items:
        if item in seen:
            duplicates.append(item)
        else:
            seen.append(item)
    items[:] = seen
    return duplicates


def to_module_name(class_name):
    """Return the snake_case module name of a CamelCase class name

    >>> to_module_name("BaseBlogPostRepository")
    'base_blog_post_repository'
    """
    return _CAMEL_BOUNDARY.sub("_", class_name).lower()


def module_file(class_name):
    """Return the file name of the module holding `class_name`"""
    return to_module_name(class_name) + ".py"


def remove_ext(name):
    """Remove the portion of a file name after the last dot."""
    if "." not in name:
        return name
    return name[: name.rindex(".")]


def replace_tokens(string, parameters):
    """Replace the `{{ key }}` tokens of `string` by their value in `parameters`

    Tokens whose key is missing (or None) are kept untouched, byte for byte.
    """

    def replacer(match):
        value = parameters.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return TOKEN.sub(replacer, string)


class TemplateEngine(object):
    """Render the shipped skeletons and substitute tokens in foreign files.

    Shipped skeletons are jinja2 templates, rendered strictly: a variable
    missing from the context is an error. Foreign files (mapping skeletons of
    a bundle) only get their known `{{ key }}` tokens replaced.
    """

    def __init__(self, tpl_context=None):
        self.tpl_context = dict(tpl_context or {})
        self.tpl_env = jinja2.Environment(
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def _context(self, extra=None):
        context = self.tpl_context.copy()
        if extra:
            context.update(extra)
        return context

    def compile(self, string):
        """Return the jinja2 template of `string`"""
        return self.tpl_env.from_string(string)

    def render(self, template, extra=None):
        """Render a compiled template in the context, updated with `extra`"""
        return template.render(self._context(extra))

    def process_string(self, string, extra=None):
        """Replace the tokens of `string` found in the context"""
        return replace_tokens(string, self._context(extra))

    def process_template(self, template_file, extra=None):
        """Replace the tokens of a file found in the context

        Return the processed content. Line endings are preserved.
        """
        with open(str(template_file), newline="") as tpl_file:
            return self.process_string(tpl_file.read(), extra)
