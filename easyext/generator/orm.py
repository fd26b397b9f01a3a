# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.

"""Generator for the ORM layer of extended bundles"""

from pathlib import Path

from ..cli.log import debug, write
from ..utils import TemplateEngine, module_file, remove_ext
from .base import AbstractGenerator


class OrmGenerator(AbstractGenerator):
    """Copy the mapping files, and generate extended entities and repositories.

    Files already present in the extended bundle are left untouched, so the
    generator can be run again after new entities are added upstream.
    """

    TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "orm"
    BASE_PREFIX = "Base"

    def __init__(self, **kwargs):
        super(OrmGenerator, self).__init__(**kwargs)
        self.entity_template = (self.TEMPLATE_DIR / "entity.mustache").read_text()
        self.entity_repository_template = (self.TEMPLATE_DIR / "repository.mustache").read_text()
        self.tpl_engine = TemplateEngine()
        self._entity_tpl = self.tpl_engine.compile(self.entity_template)
        self._entity_repository_tpl = self.tpl_engine.compile(self.entity_repository_template)

    def generate(self, bundle_metadata):
        self.generate_mapping_entity_files(bundle_metadata)
        self.generate_entity_files(bundle_metadata)
        self.generate_entity_repository_files(bundle_metadata)

    def generate_mapping_entity_files(self, bundle_metadata):
        write(" - Copy entity files")

        orm = bundle_metadata.orm_metadata
        for src_file in orm.get_entity_mapping_files():
            # Drop the .skeleton extension
            file_name = remove_ext(src_file.name)
            dest_file = orm.extended_mapping_entity_directory / file_name

            if dest_file.is_file():
                write("   ~ {}".format(file_name))
                continue

            write("   + {}".format(file_name))
            debug("Rendering {} into {}".format(src_file, dest_file))
            out = self.tpl_engine.process_template(
                src_file, {"namespace": bundle_metadata.extended_namespace}
            )
            self._write(dest_file, out)

    def generate_entity_files(self, bundle_metadata):
        write(" - Generating entity files")

        orm = bundle_metadata.orm_metadata
        for name in orm.get_entity_names():
            extended_name = name

            dest_file = orm.extended_entity_directory / module_file(name)
            src_file = orm.entity_directory / module_file(extended_name)

            if not src_file.is_file():
                extended_name = self.BASE_PREFIX + name
                src_file = orm.entity_directory / module_file(extended_name)

                if not src_file.is_file():
                    write("   ! {}".format(extended_name))
                    continue

            if dest_file.is_file():
                write("   ~ {}".format(name))
                continue

            write("   + {}".format(name))
            debug("Rendering entity {} from {}".format(dest_file, src_file))
            out = self.tpl_engine.render(
                self._entity_tpl,
                {
                    "extended_namespace": bundle_metadata.extended_namespace,
                    "namespace": bundle_metadata.namespace,
                    "class": name,
                    "name": extended_name,
                    "extended_name": (
                        self.BASE_PREFIX + name if name == extended_name else extended_name
                    ),
                    "module": src_file.stem,
                },
            )
            self._write(dest_file, out)

    def generate_entity_repository_files(self, bundle_metadata):
        write(" - Generating entity repository files")

        orm = bundle_metadata.orm_metadata
        for name in orm.get_entity_names():
            repository = "{}Repository".format(name)
            dest_file = orm.extended_entity_directory / module_file(repository)
            src_file = orm.entity_directory / module_file(self.BASE_PREFIX + repository)

            if not src_file.is_file():
                write("   ! {}".format(repository))
                continue

            if dest_file.is_file():
                write("   ~ {}".format(repository))
                continue

            write("   + {}".format(repository))
            debug("Rendering repository {} from {}".format(dest_file, src_file))
            out = self.tpl_engine.render(
                self._entity_repository_tpl,
                {
                    "extended_namespace": bundle_metadata.extended_namespace,
                    "namespace": bundle_metadata.namespace,
                    "name": name,
                    "module": src_file.stem,
                },
            )
            self._write(dest_file, out)

    @staticmethod
    def _write(dest_file, content):
        # The extended folders may not exist when the bundle generator did not run
        dest_file.parent.mkdir(parents=True, exist_ok=True)
        dest_file.write_text(content)

    def get_entity_template(self):
        return self.entity_template

    def get_entity_repository_template(self):
        return self.entity_repository_template
