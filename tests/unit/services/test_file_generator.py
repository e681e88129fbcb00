"""Tests for the helper-file writers."""
import shutil
import tempfile
import unittest
from pathlib import Path

from unity_bootstrap.services import file_generator


class TestFileGenerator(unittest.TestCase):
    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def test_gitkeep_is_empty(self):
        self.assertTrue(file_generator.create_gitkeep(self.tmp))
        marker = self.tmp / ".gitkeep"
        self.assertTrue(marker.exists())
        self.assertEqual(marker.stat().st_size, 0)

    def test_readme_content(self):
        self.assertTrue(file_generator.create_readme(self.tmp, "Art", "Visual assets"))
        self.assertEqual((self.tmp / "README.md").read_text(encoding="utf-8"),
                         "# Art\n\nVisual assets\n")

    def test_existing_file_not_overwritten(self):
        readme = self.tmp / "README.md"
        readme.write_text("hand written", encoding="utf-8")
        self.assertFalse(file_generator.create_readme(self.tmp, "Art", "Visual assets"))
        self.assertEqual(readme.read_text(encoding="utf-8"), "hand written")

    def test_gitignore_helper_uses_asset_path(self):
        file_generator.create_gitignore_helper(self.tmp, "Assets/_ThirdParty")
        text = (self.tmp / "GITIGNORE_HELPER.txt").read_text(encoding="utf-8")
        self.assertIn("Assets/_ThirdParty/*", text)

    def test_resources_warning(self):
        file_generator.create_resources_warning(self.tmp)
        text = (self.tmp / "RESOURCES_WARNING.txt").read_text(encoding="utf-8")
        self.assertIn("RESOURCES FOLDER WARNING", text)
        self.assertIn("Addressables", text)

    def test_write_failure_is_logged_not_raised(self):
        missing = self.tmp / "does-not-exist"
        with self.assertLogs("unity_bootstrap.services.file_generator", level="WARNING") as logs:
            self.assertFalse(file_generator.create_readme(missing, "Art", "x"))
        self.assertIn("failed to write", logs.output[0])


if __name__ == "__main__":
    unittest.main()
