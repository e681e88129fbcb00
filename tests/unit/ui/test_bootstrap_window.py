"""Tests for bootstrap_window helper tables and functions."""
import unittest

from unity_bootstrap.core.enums import FolderPreset
from unity_bootstrap.core.settings import FLAG_NAMES, FolderGeneratorSettings
from unity_bootstrap.ui.bootstrap_window import (
    _PRESET_ORDER,
    _all_flag_names,
    _confirm_text,
    _window_title,
)
from unity_bootstrap.core.constants import APP_VERSION


class TestFlagTables(unittest.TestCase):
    def test_every_flag_has_one_checkbox(self):
        names = _all_flag_names()
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(set(names), set(FLAG_NAMES))

    def test_every_preset_selectable(self):
        self.assertEqual(set(_PRESET_ORDER), set(FolderPreset))
        self.assertIs(_PRESET_ORDER[0], FolderPreset.CUSTOM)


class TestConfirmText(unittest.TestCase):
    def test_mentions_base_path(self):
        text = _confirm_text(FolderGeneratorSettings(project_root_name="Foo"))
        self.assertIn("Assets/Foo", text)

    def test_no_root(self):
        text = _confirm_text(FolderGeneratorSettings(use_project_root=False))
        self.assertIn("base path: Assets)", text)


class TestWindowTitle(unittest.TestCase):
    def test_title_carries_version(self):
        title = _window_title()
        self.assertTrue(title.startswith("Unity Bootstrap"))
        self.assertIn(APP_VERSION, title)


class TestGeneratedHandler(unittest.TestCase):
    def test_generated_signal_handler_logs_count(self):
        import main
        with self.assertLogs("unity_bootstrap.main", level="INFO") as logs:
            main._on_generated(25)
        self.assertIn("25 folders created", logs.output[0])


if __name__ == "__main__":
    unittest.main()
