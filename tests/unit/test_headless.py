# tests/unit/test_headless.py
import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

from unity_bootstrap.core.enums import FolderPreset
from unity_bootstrap.headless import bootstrap, main


class TestBootstrap(unittest.TestCase):

    def setUp(self):
        self.project = Path(tempfile.mkdtemp())
        self.out = io.StringIO()
        self.err = io.StringIO()

    def tearDown(self):
        shutil.rmtree(self.project)

    def test_success_returns_zero(self):
        (self.project / "Assets").mkdir()
        code = bootstrap(self.project, FolderPreset.MINIMAL, out=self.out, err=self.err)
        self.assertEqual(code, 0)
        self.assertIn("Folders created: 25", self.out.getvalue())
        self.assertEqual(self.err.getvalue(), "")
        self.assertTrue((self.project / "Assets" / "Scripts" / "Gameplay").is_dir())

    def test_missing_assets_returns_one(self):
        code = bootstrap(self.project, FolderPreset.STANDARD, out=self.out, err=self.err)
        self.assertEqual(code, 1)
        self.assertIn("error: Assets directory not found", self.err.getvalue())
        self.assertEqual(self.out.getvalue(), "")

    def test_nonexistent_project_returns_one(self):
        code = bootstrap(self.project / "nope", FolderPreset.COMPLETE, out=self.out, err=self.err)
        self.assertEqual(code, 1)
        self.assertIn("error:", self.err.getvalue())


class TestMain(unittest.TestCase):

    def test_no_arguments_is_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err):
            self.assertEqual(main([]), 2)
        self.assertIn("Usage", err.getvalue())

    def test_too_many_arguments_is_usage_error(self):
        with redirect_stderr(io.StringIO()):
            self.assertEqual(main(["a", "Minimal", "extra"]), 2)

    def test_unknown_preset(self):
        err = io.StringIO()
        with redirect_stderr(err):
            self.assertEqual(main(["some/project", "Huge"]), 2)
        self.assertIn("unknown preset: 'Huge'", err.getvalue())


if __name__ == "__main__":
    unittest.main()
