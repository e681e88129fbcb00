"""
Headless generation: same FolderCreator run as the window, no Qt.
Usage: unity-bootstrap <unity_project_dir> [preset]
       preset: Minimal | Standard | Complete | GameJam  (default: Standard)
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from unity_bootstrap.core.enums import FolderPreset
from unity_bootstrap.core.exceptions import BootstrapError
from unity_bootstrap.core.settings import FolderGeneratorSettings, apply_preset
from unity_bootstrap.services.folder_creator import FolderCreator

_log = logging.getLogger("unity_bootstrap.headless")


def bootstrap(project_dir: Path, preset: FolderPreset,
              out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Run one generation. Returns 0 on success, 1 if the run aborted."""
    out = out or sys.stdout
    err = err or sys.stderr
    settings = apply_preset(FolderGeneratorSettings(), preset)
    try:
        result = FolderCreator(settings, project_dir).generate()
    except (BootstrapError, OSError) as exc:
        print(f"error: {exc}", file=err)
        return 1
    print(result.success_message(), file=out)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Positional arguments only. Returns 2 on bad usage."""
    args = sys.argv[1:] if argv is None else argv
    if not args or len(args) > 2:
        print(__doc__, file=sys.stderr)
        return 2
    name = args[1] if len(args) > 1 else FolderPreset.STANDARD.value
    try:
        preset = FolderPreset(name)
    except ValueError:
        print(f"unknown preset: {name!r}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    _log.info("bootstrapping %s with preset %s", args[0], preset.value)
    return bootstrap(Path(args[0]), preset)
