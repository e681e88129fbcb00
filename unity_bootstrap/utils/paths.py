# unity_bootstrap/utils/paths.py
"""
Asset path helpers.
Folders are addressed by asset-relative POSIX paths ("Assets/Art/Models");
resolve_asset_path() is the only place those become filesystem paths.
"""
from pathlib import Path, PurePosixPath

from unity_bootstrap.core.exceptions import InvalidFolderNameError

# Characters Unity (and Windows) refuse in folder names.
_FORBIDDEN_CHARS = set('/\\:*?"<>|')


def validate_folder_name(name: str) -> str:
    """
    Return name unchanged if it is a usable single folder segment.

    Raises:
        InvalidFolderNameError: empty/blank, '.', '..', separators or
            forbidden characters (message contains "invalid folder name")
    """
    if not name or not name.strip():
        raise InvalidFolderNameError(name, "empty")
    if name in (".", ".."):
        raise InvalidFolderNameError(name, "relative segment")
    bad = sorted(_FORBIDDEN_CHARS.intersection(name))
    if bad:
        raise InvalidFolderNameError(name, f"contains {''.join(bad)!r}")
    if name != name.strip():
        raise InvalidFolderNameError(name, "leading or trailing whitespace")
    return name


def join_asset_path(parent: str, name: str) -> str:
    return str(PurePosixPath(parent) / name)


def resolve_asset_path(project_dir: Path, asset_path: str) -> Path:
    """Filesystem path for an asset-relative path under project_dir."""
    return project_dir.joinpath(*PurePosixPath(asset_path).parts)
