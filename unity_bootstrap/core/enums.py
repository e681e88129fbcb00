# unity_bootstrap/core/enums.py
"""
Canonical enums for the entire system.
Values are persisted in settings.json; do not rename them.
"""
from enum import Enum


class FolderPreset(str, Enum):
    CUSTOM = "Custom"
    MINIMAL = "Minimal"
    STANDARD = "Standard"
    COMPLETE = "Complete"
    GAME_JAM = "GameJam"
