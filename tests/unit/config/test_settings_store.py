import json
import shutil
import tempfile
import unittest
from pathlib import Path

from unity_bootstrap.config.settings_store import load_settings, save_settings
from unity_bootstrap.core.enums import FolderPreset
from unity_bootstrap.core.settings import FolderGeneratorSettings, apply_preset

_LOGGER = "unity_bootstrap.config.settings_store"


class TestSettingsStore(unittest.TestCase):

    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp())
        self.path = self.tmp / "config" / "settings.json"

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(load_settings(self.path), FolderGeneratorSettings())

    def test_save_then_load(self):
        settings = apply_preset(FolderGeneratorSettings(project_root_name="Foo"), FolderPreset.GAME_JAM)
        written = save_settings(settings, self.path)
        self.assertEqual(written, self.path)
        self.assertEqual(load_settings(self.path), settings)

    def test_saved_file_is_plain_json(self):
        save_settings(FolderGeneratorSettings(), self.path)
        data = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(data["preset"], "Custom")
        self.assertIs(data["use_project_root"], True)

    def test_corrupt_file_gives_defaults(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs(_LOGGER, level="WARNING"):
            self.assertEqual(load_settings(self.path), FolderGeneratorSettings())

    def test_bad_value_gives_defaults(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text('{"include_tests": "yes"}', encoding="utf-8")
        with self.assertLogs(_LOGGER, level="WARNING") as logs:
            self.assertEqual(load_settings(self.path), FolderGeneratorSettings())
        self.assertIn("include_tests", logs.output[0])


if __name__ == "__main__":
    unittest.main()
