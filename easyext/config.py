# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.

"""Module with the easyext project configuration"""

from pathlib import Path

import yaml

from .bundle import BundleMetadata
from .cli.log import warning
from .utils import CONFIG_FILE, EasyExtException, dedup_list, get_project_path


class BundleNotFound(EasyExtException):
    """Exception raised if a bundle is not configured"""


class Config(object):
    """Class for loading and holding the easyext.yml configuration"""

    DEFAULT_DEST = "src"
    DEFAULT_CONFIG = {
        "dest": DEFAULT_DEST,
        "namespace": BundleMetadata.DEFAULT_NAMESPACE,
        "bundles": [],
    }

    def __init__(self, path=None, data=None):
        self.path = Path(path) if path is not None else get_project_path()

        if data is None:
            with (self.path / CONFIG_FILE).open() as config_file:
                data = yaml.safe_load(config_file)
        self.data = data or {}

        entries = []
        for idx, entry in enumerate(self.data.get("bundles") or []):
            if isinstance(entry, str):
                entry = {"namespace": entry}
            if not isinstance(entry, dict):
                raise EasyExtException(
                    "Bundle entry #{} in {} must be a namespace or a mapping, got {!r}".format(
                        idx, CONFIG_FILE, entry
                    )
                )
            if not entry.get("namespace"):
                raise EasyExtException(
                    "Bundle entry #{} in {} has no namespace".format(idx, CONFIG_FILE)
                )
            entries.append(entry)

        namespaces = [entry["namespace"] for entry in entries]
        for dup in dedup_list(namespaces):
            warning("Bundle {} is duplicated in {}".format(dup, CONFIG_FILE))

        # First definition wins
        self.bundles = {}
        for entry in entries:
            self.bundles.setdefault(entry["namespace"], entry)

    @property
    def dest(self):
        """Return the absolute root folder of extended bundles"""
        return self._resolve(self.data.get("dest") or self.DEFAULT_DEST)

    @property
    def namespace(self):
        """Return the namespace pattern of extended bundles"""
        return self.data.get("namespace") or BundleMetadata.DEFAULT_NAMESPACE

    def _resolve(self, path):
        path = Path(path)
        if path.is_absolute():
            return path
        return self.path / path

    def get_bundle(self, namespace, dest=None, namespace_pattern=None):
        """Return the BundleMetadata of a configured bundle"""
        try:
            entry = self.bundles[namespace]
        except KeyError:
            raise BundleNotFound(
                'Bundle "{}" not found in {}. Available bundles: {}'.format(
                    namespace, CONFIG_FILE, ", ".join(self.bundles) or "none"
                )
            )

        src_path = entry.get("path") or Path(*namespace.split("."))
        return BundleMetadata(
            namespace=namespace,
            path=self._resolve(src_path),
            dest=self._resolve(dest) if dest is not None else self.dest,
            namespace_pattern=namespace_pattern or self.namespace,
        )

    def get_bundles(self, names=None, dest=None, namespace_pattern=None):
        """Return the BundleMetadata for `names`, or for all configured bundles"""
        return [
            self.get_bundle(name, dest, namespace_pattern) for name in (names or self.bundles)
        ]

    def dump(self, names=None, **kwargs):
        """Dump the computed metadata of the bundles"""
        return yaml.safe_dump(
            [bundle.to_dict() for bundle in self.get_bundles(names, **kwargs)],
            default_flow_style=False,
            sort_keys=False,
        )

    @classmethod
    def create(cls, path):
        """Write a starter easyext.yml in `path`

        Return False if a configuration file is already present.
        """
        path = Path(path)
        config_path = path / CONFIG_FILE
        if config_path.exists():
            return False
        path.mkdir(parents=True, exist_ok=True)
        with config_path.open("w") as config_file:
            yaml.safe_dump(cls.DEFAULT_CONFIG, config_file, default_flow_style=False)
        return True
