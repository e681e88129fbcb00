"""
file_generator — writes the helper files that accompany generated folders.
Never overwrites an existing file.
Write failures are logged, or handed to on_failure, and reported as False;
they never abort a run.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from unity_bootstrap.core.constants import (
    GITIGNORE_HELPER_NAME,
    GITKEEP_NAME,
    README_NAME,
    RESOURCES_WARNING_NAME,
    TEXT_ENCODING,
)
from unity_bootstrap.core.templates import (
    GITIGNORE_HELPER_TEMPLATE,
    README_TEMPLATE,
    RESOURCES_WARNING,
)

_log = logging.getLogger("unity_bootstrap.services.file_generator")

# Called with (path, exc) instead of logging when a write fails.
FailureHandler = Callable[[Path, OSError], None]


def _write_text(path: Path, content: str, on_failure: Optional[FailureHandler]) -> bool:
    if path.exists():
        _log.debug("file already exists, leaving as is: %s", path)
        return False
    try:
        path.write_text(content, encoding=TEXT_ENCODING)
    except OSError as exc:
        if on_failure is None:
            _log.warning("failed to write %s: %s", path, exc)
        else:
            on_failure(path, exc)
        return False
    return True


def create_gitkeep(folder: Path, on_failure: Optional[FailureHandler] = None) -> bool:
    """Zero-byte marker so git tracks the otherwise empty folder."""
    return _write_text(folder / GITKEEP_NAME, "", on_failure)


def create_readme(folder: Path, title: str, description: str,
                  on_failure: Optional[FailureHandler] = None) -> bool:
    return _write_text(
        folder / README_NAME,
        README_TEMPLATE.format(title=title, description=description),
        on_failure,
    )


def create_gitignore_helper(folder: Path, asset_path: str,
                            on_failure: Optional[FailureHandler] = None) -> bool:
    return _write_text(
        folder / GITIGNORE_HELPER_NAME,
        GITIGNORE_HELPER_TEMPLATE.format(path=asset_path),
        on_failure,
    )


def create_resources_warning(folder: Path, on_failure: Optional[FailureHandler] = None) -> bool:
    return _write_text(folder / RESOURCES_WARNING_NAME, RESOURCES_WARNING, on_failure)
