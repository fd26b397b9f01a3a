# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.

"""Bundle metadata, as seen by the generators"""

from pathlib import Path

VENDOR_VAR = ":vendor"


class OrmMetadata(object):
    """Paths and names of the ORM layer of a bundle"""

    MAPPING_DIR = Path("resources", "config", "orm")
    ENTITY_DIR = "entity"
    MAPPING_SUFFIX = ".orm.xml.skeleton"

    def __init__(self, bundle_metadata):
        self.mapping_entity_directory = bundle_metadata.path / self.MAPPING_DIR
        self.extended_mapping_entity_directory = (
            bundle_metadata.extended_directory / self.MAPPING_DIR
        )
        self.entity_directory = bundle_metadata.path / self.ENTITY_DIR
        self.extended_entity_directory = bundle_metadata.extended_directory / self.ENTITY_DIR

    def get_entity_mapping_files(self):
        """Return the mapping skeleton files, sorted by name"""
        if not self.mapping_entity_directory.is_dir():
            return []
        return sorted(
            path
            for path in self.mapping_entity_directory.glob("*" + self.MAPPING_SUFFIX)
            if path.is_file()
        )

    def get_entity_names(self):
        """Return the entity names, deduced from the mapping skeleton files"""
        return [
            path.name[: -len(self.MAPPING_SUFFIX)] for path in self.get_entity_mapping_files()
        ]


class BundleMetadata(object):
    """Object describing a bundle and its extended counterpart

    Args:
      - namespace: the dotted namespace of the bundle (vendor.name)
      - path: the folder holding the bundle sources
      - dest: the root folder of the extended bundles
      - namespace_pattern: the namespace of the extended bundle, without the
        bundle name. ':vendor' is replaced by the bundle vendor.
    """

    DEFAULT_NAMESPACE = "application.:vendor"

    def __init__(self, namespace, path, dest, namespace_pattern=None):
        self.namespace = namespace
        self.path = Path(path)
        self.dest = Path(dest)
        self.namespace_pattern = namespace_pattern or self.DEFAULT_NAMESPACE

        parts = namespace.split(".")
        self.vendor = parts[0]
        self.name = parts[-1]

        self.extended_namespace = "{}.{}".format(
            self.namespace_pattern.replace(VENDOR_VAR, self.vendor), self.name
        )
        self.extended_directory = self.dest.joinpath(*self.extended_namespace.split("."))

        self.orm_metadata = OrmMetadata(self)

    def is_extendable(self):
        """A bundle needs a vendor, a name and existing sources to be extended"""
        return len(self.namespace.split(".")) >= 2 and self.path.is_dir()

    def to_dict(self):
        """Return the computed metadata as a dict"""
        orm = self.orm_metadata
        return {
            "namespace": self.namespace,
            "vendor": self.vendor,
            "name": self.name,
            "path": str(self.path),
            "extendable": self.is_extendable(),
            "extended_namespace": self.extended_namespace,
            "extended_directory": str(self.extended_directory),
            "orm": {
                "entity_directory": str(orm.entity_directory),
                "extended_entity_directory": str(orm.extended_entity_directory),
                "mapping_entity_directory": str(orm.mapping_entity_directory),
                "extended_mapping_entity_directory": str(orm.extended_mapping_entity_directory),
                "entities": orm.get_entity_names(),
            },
        }

    def __repr__(self):
        return "<BundleMetadata {}>".format(self.namespace)
