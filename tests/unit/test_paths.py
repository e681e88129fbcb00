# tests/unit/test_paths.py
import unittest
from pathlib import Path
import tempfile
from unity_bootstrap.utils.paths import (
    join_asset_path,
    resolve_asset_path,
    validate_folder_name,
)
from unity_bootstrap.core.exceptions import InvalidFolderNameError


class TestValidateFolderName(unittest.TestCase):

    def test_valid_names(self):
        for name in ("_ProjectName", "My Game", "Foo-2"):
            self.assertEqual(validate_folder_name(name), name)

    def test_empty_rejected(self):
        for name in ("", "   "):
            with self.assertRaises(InvalidFolderNameError) as ctx:
                validate_folder_name(name)
            self.assertIn("invalid folder name", str(ctx.exception))

    def test_relative_segments_rejected(self):
        for name in (".", ".."):
            with self.assertRaises(InvalidFolderNameError):
                validate_folder_name(name)

    def test_separators_rejected(self):
        for name in ("a/b", "a\\b", "C:"):
            with self.assertRaises(InvalidFolderNameError):
                validate_folder_name(name)

    def test_surrounding_whitespace_rejected(self):
        with self.assertRaises(InvalidFolderNameError):
            validate_folder_name(" Foo")


class TestAssetPaths(unittest.TestCase):

    def test_join(self):
        self.assertEqual(join_asset_path("Assets", "Art"), "Assets/Art")
        self.assertEqual(join_asset_path("Assets/Foo", "Art"), "Assets/Foo/Art")

    def test_resolve(self):
        root = Path(tempfile.mkdtemp())
        self.assertEqual(
            resolve_asset_path(root, "Assets/Foo/Art"),
            root / "Assets" / "Foo" / "Art",
        )


if __name__ == "__main__":
    unittest.main()
