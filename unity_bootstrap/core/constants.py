# unity_bootstrap/core/constants.py
"""
Project-wide constants.
Do not import from services or ui here. This is a leaf module.
"""
from pathlib import Path

APP_NAME = "Unity Bootstrap"
APP_VERSION = "0.1.0"

# Asset tree (relative to the Unity project root, never absolute)
ASSETS_DIR = "Assets"
THIRD_PARTY_DIR = "_ThirdParty"
DEFAULT_PROJECT_ROOT_NAME = "_ProjectName"
TESTS_DIR = "Tests"
TESTS_SUBDIRS = ("EditMode", "PlayMode")
RESOURCES_DIR = "Resources"
STREAMING_ASSETS_DIR = "StreamingAssets"
GIZMOS_DIR = "Gizmos"

# Generated files
GITKEEP_NAME = ".gitkeep"
README_NAME = "README.md"
GITIGNORE_HELPER_NAME = "GITIGNORE_HELPER.txt"
RESOURCES_WARNING_NAME = "RESOURCES_WARNING.txt"
TEXT_ENCODING = "utf-8"

# Config
CONFIG_DIR = Path.home() / ".unity_bootstrap"
SETTINGS_FILE_NAME = "settings.json"
