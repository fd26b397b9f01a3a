# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.

"""Generator for the folder structure of extended bundles"""

from ..cli.log import debug, write
from .base import AbstractGenerator


class BundleGenerator(AbstractGenerator):
    """Create the folders and python packages of the extended bundle"""

    INIT_FILE = "__init__.py"

    def generate(self, bundle_metadata):
        write(" - Generating bundle structure")

        orm = bundle_metadata.orm_metadata
        for directory in (orm.extended_entity_directory, orm.extended_mapping_entity_directory):
            rel_dir = directory.relative_to(bundle_metadata.dest)
            if directory.is_dir():
                write("   ~ {}".format(rel_dir))
            else:
                write("   + {}".format(rel_dir))
                directory.mkdir(parents=True)

        # Every folder down to the entities must be importable
        package = bundle_metadata.dest
        for part in bundle_metadata.extended_namespace.split(".") + [orm.ENTITY_DIR]:
            package = package / part
            init_file = package / self.INIT_FILE
            if not init_file.exists():
                debug("Creating {}".format(init_file))
                init_file.touch()
