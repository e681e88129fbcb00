# unity_bootstrap/core/exceptions.py
"""
All custom exceptions for Unity Bootstrap.
Benign per-folder failures are logged, not raised. Only run-aborting
conditions get an exception type here.
"""


class BootstrapError(Exception):
    """Base exception for all Unity Bootstrap errors."""


# --- Generation ---

class GenerationError(BootstrapError):
    """Base for errors that abort a folder generation run."""


class AssetsDirError(GenerationError):
    """Project has no Assets directory. Must contain 'Assets' in message."""
    def __init__(self, path: str):
        super().__init__(f"Assets directory not found: {path!r}")


class InvalidFolderNameError(GenerationError):
    """Folder name rejected. Must contain 'invalid folder name' in message."""
    def __init__(self, name: str, reason: str = "not a single path segment"):
        super().__init__(f"invalid folder name {name!r}: {reason}")


# --- Config ---

class ConfigError(BootstrapError):
    """Configuration error."""
