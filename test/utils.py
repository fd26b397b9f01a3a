# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.

"""
This module provide utilities to write tests
"""
import io
import os
import shutil
import tempfile
import unittest
from pathlib import Path

import yaml
from mock import patch

from easyext.bundle import BundleMetadata
from easyext.utils import CONFIG_FILE, PATH_ENV_VAR

BUNDLE_NAMESPACE = "sonata.blog"
BUNDLE_PATH = "vendor/sonata/blog"

MAPPING_SKELETON = """<?xml version="1.0" encoding="UTF-8"?>
<doctrine-mapping>
    <entity name="{{ namespace }}.entity.{{ entity }}" table="{{ table }}"/>
</doctrine-mapping>
"""


class _ProjectTest(object):
    """
    Allow you to enable/disable a project test where the easyext dir is
    in a temporary directory.
    """

    def __init__(self, config=None):
        self.config = config
        self.path = None
        self.previous_path = None

    def enable(self):
        """
        Set EASYEXT_PATH to a created temporary directory holding an
        easyext.yml.
        """
        self.path = Path(tempfile.mkdtemp())
        self.previous_path = os.environ.pop(PATH_ENV_VAR, None)
        os.environ[PATH_ENV_VAR] = str(self.path)
        if self.config is not None:
            with (self.path / CONFIG_FILE).open("w") as config_file:
                yaml.safe_dump(self.config, config_file)

    def disable(self):
        """
        Removes temporary directory and reset `EASYEXT_PATH`
        """
        shutil.rmtree(str(self.path))
        os.environ.pop(PATH_ENV_VAR, None)
        if self.previous_path is not None:
            os.environ[PATH_ENV_VAR] = self.previous_path


class EasyExtTestCase(unittest.TestCase):
    """
    Class to test easyext generators in a temporary project.

    You can redefine in your subclasses the attributes:
        - config (dict): content of the easyext.yml, None for no file
        - mapped_entities (List[str]): entities having a mapping skeleton
        - entity_files (List[str]): class names having a module in the
          bundle entity folder

    This class provides attributes:
        - project_path (Path): The path to the temporary project.
        - bundle (BundleMetadata): The metadata of the test bundle.
    """

    config = {
        "dest": "src",
        "bundles": [{"namespace": BUNDLE_NAMESPACE, "path": BUNDLE_PATH}],
    }
    mapped_entities = ("Post", "Comment", "Tag")
    entity_files = ("Post", "BaseComment", "BasePostRepository", "BaseCommentRepository")

    def setUp(self):
        self.project = _ProjectTest(self.config)
        self.project.enable()
        self.project_path = self.project.path
        self.bundle_path = self.project_path / BUNDLE_PATH
        self.generate_src()
        self.bundle = BundleMetadata(
            namespace=BUNDLE_NAMESPACE,
            path=self.bundle_path,
            dest=self.project_path / "src",
        )

    def tearDown(self):
        self.project.disable()

    def generate_src(self):
        """Create the bundle sources"""
        mapping_dir = self.bundle_path / "resources" / "config" / "orm"
        mapping_dir.mkdir(parents=True)
        for entity in self.mapped_entities:
            (mapping_dir / "{}.orm.xml.skeleton".format(entity)).write_text(
                MAPPING_SKELETON.replace("{{ entity }}", entity)
            )

        entity_dir = self.bundle_path / "entity"
        entity_dir.mkdir(parents=True)
        for class_name in self.entity_files:
            module = "".join("_" + c.lower() if c.isupper() else c for c in class_name)
            (entity_dir / (module.lstrip("_") + ".py")).write_text(
                "class {}(object):\n    pass\n".format(class_name)
            )

    def make_extended_dirs(self):
        orm = self.bundle.orm_metadata
        orm.extended_entity_directory.mkdir(parents=True)
        orm.extended_mapping_entity_directory.mkdir(parents=True)


def capture_output():
    """Patch the stdout, return the patcher"""
    return patch("sys.stdout", new_callable=io.StringIO)
