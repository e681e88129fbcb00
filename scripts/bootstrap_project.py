#!/usr/bin/env python3
# scripts/bootstrap_project.py
"""
Generate the folder structure for a Unity project without the window.
Safe to re-run (existing folders are skipped).

Requires the package to be installed first (pip install -e .), which also
provides the equivalent `unity-bootstrap` command.

Usage: python scripts/bootstrap_project.py <unity_project_dir> [preset]
       preset: Minimal | Standard | Complete | GameJam  (default: Standard)
"""
import sys

from unity_bootstrap.headless import main


if __name__ == "__main__":
    sys.exit(main())
