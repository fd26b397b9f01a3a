# Copyright© 1986-2024 Altair Engineering Inc.

from easyext.generator.bundle import BundleGenerator

from .utils import EasyExtTestCase, capture_output


class TestBundleGenerator(EasyExtTestCase):
    def test_create_structure(self):
        with capture_output() as stdout:
            BundleGenerator().generate(self.bundle)

        orm = self.bundle.orm_metadata
        self.assertTrue(orm.extended_entity_directory.is_dir())
        self.assertTrue(orm.extended_mapping_entity_directory.is_dir())
        self.assertEqual(
            stdout.getvalue().splitlines(),
            [
                " - Generating bundle structure",
                "   + application/sonata/blog/entity",
                "   + application/sonata/blog/resources/config/orm",
            ],
        )

        package = self.project_path / "src"
        for part in ("application", "sonata", "blog", "entity"):
            package = package / part
            self.assertTrue((package / "__init__.py").is_file(), package)
        self.assertFalse((orm.extended_mapping_entity_directory / "__init__.py").exists())

    def test_existing_files_are_kept(self):
        orm = self.bundle.orm_metadata
        orm.extended_entity_directory.mkdir(parents=True)
        init_file = orm.extended_entity_directory / "__init__.py"
        init_file.write_text("from .post import Post\n")

        with capture_output() as stdout:
            BundleGenerator().generate(self.bundle)

        self.assertEqual(init_file.read_text(), "from .post import Post\n")
        self.assertIn("   ~ application/sonata/blog/entity\n", stdout.getvalue())
