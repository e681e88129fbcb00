"""
SettingsStore — remembers the last-used generator settings.
Stored as JSON in ~/.unity_bootstrap/settings.json.
A missing or unreadable file means defaults, never an error at startup.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from unity_bootstrap.core.constants import CONFIG_DIR, SETTINGS_FILE_NAME, TEXT_ENCODING
from unity_bootstrap.core.exceptions import ConfigError
from unity_bootstrap.core.settings import (
    FolderGeneratorSettings,
    settings_from_dict,
    settings_to_dict,
)

_log = logging.getLogger("unity_bootstrap.config.settings_store")


def default_settings_path() -> Path:
    return CONFIG_DIR / SETTINGS_FILE_NAME


def load_settings(path: Optional[Path] = None) -> FolderGeneratorSettings:
    """Load saved settings. Falls back to defaults on any problem."""
    path = path or default_settings_path()
    if not path.exists():
        return FolderGeneratorSettings()
    try:
        data = json.loads(path.read_text(encoding=TEXT_ENCODING))
        return settings_from_dict(data)
    except (OSError, ValueError, ConfigError) as exc:
        _log.warning("ignoring saved settings at %s: %s", path, exc)
        return FolderGeneratorSettings()


def save_settings(settings: FolderGeneratorSettings, path: Optional[Path] = None) -> Path:
    """Write settings as JSON. OSError propagates to the caller."""
    path = path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(settings_to_dict(settings), indent=2, sort_keys=True),
        encoding=TEXT_ENCODING,
    )
    _log.info("settings saved to %s", path)
    return path
