"""
FolderCreator — runs one folder-structure generation against a Unity project.
Sequential, single pass, no rollback: whatever was created before an
aborting error stays on disk.

Step order is fixed:
1. _ThirdParty at Assets/ (gitignore helper, optional README)
2. project root wrapper, shifts steps 3-5 under Assets/<root>
3. core folders from the template table
4. optional folders (Tests gets EditMode/PlayMode children)
5. Unity special folders, always at Assets/
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from unity_bootstrap.core.constants import (
    ASSETS_DIR,
    GIZMOS_DIR,
    RESOURCES_DIR,
    STREAMING_ASSETS_DIR,
    TESTS_DIR,
    TESTS_SUBDIRS,
    THIRD_PARTY_DIR,
)
from unity_bootstrap.core.exceptions import AssetsDirError
from unity_bootstrap.core.settings import FolderGeneratorSettings
from unity_bootstrap.core.templates import (
    CORE_FOLDERS,
    OPTIONAL_FOLDER_DESCRIPTIONS,
    TESTS_DESCRIPTION,
    THIRD_PARTY_DESCRIPTION,
    THIRD_PARTY_TITLE,
    folder_description,
)
from unity_bootstrap.services import file_generator
from unity_bootstrap.utils.paths import (
    join_asset_path,
    resolve_asset_path,
    validate_folder_name,
)

_log = logging.getLogger("unity_bootstrap.services.folder_creator")


@dataclass
class GenerationResult:
    settings: FolderGeneratorSettings
    base_path: str = ASSETS_DIR
    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    log: list[str] = field(default_factory=list)

    @property
    def folders_created(self) -> int:
        return len(self.created)

    def success_message(self) -> str:
        lines = [
            "Successfully generated folder structure!",
            "",
            f"📁 Folders created: {self.folders_created}",
            f"📍 Base path: {self.base_path}",
            "",
        ]
        if self.settings.create_gitkeep_files:
            lines.append("✓ Created .gitkeep files")
        if self.settings.create_readme_files:
            lines.append("✓ Created README files")
        if self.settings.include_resources:
            lines.append("⚠️ Resources folder warning file created")
        return "\n".join(lines) + "\n"


class FolderCreator:
    """
    Creates the folder structure described by settings under
    <project_dir>/Assets. One instance may run generate() repeatedly;
    each call starts a fresh GenerationResult.
    """

    def __init__(self, settings: FolderGeneratorSettings, project_dir: Path) -> None:
        self._settings = settings
        self._project_dir = Path(project_dir)
        self._result = GenerationResult(settings=settings)

    @property
    def last_result(self) -> GenerationResult:
        return self._result

    def generate(self) -> GenerationResult:
        """
        Run all steps in order and return the result.

        Raises:
            AssetsDirError: project has no Assets directory
            InvalidFolderNameError: project root name unusable
            Exception: anything unexpected from the filesystem layer;
                partial work is left in place
        """
        self._result = GenerationResult(settings=self._settings)
        try:
            assets = resolve_asset_path(self._project_dir, ASSETS_DIR)
            if not assets.is_dir():
                raise AssetsDirError(str(assets))

            self._create_third_party_folder()
            base_path = self._determine_base_path()
            self._result.base_path = base_path
            self._create_core_folders(base_path)
            self._create_optional_folders(base_path)
            self._create_unity_special_folders()
        except Exception as exc:
            self._note(logging.ERROR, "generation aborted after %d folders: %s",
                       self._result.folders_created, exc)
            raise

        self._note(logging.INFO, "created %d folders under %s",
                   self._result.folders_created, self._project_dir)
        return self._result

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _create_third_party_folder(self) -> None:
        if not self._settings.include_third_party:
            return
        path = self._create_folder_safe(ASSETS_DIR, THIRD_PARTY_DIR)
        if path is None:
            return
        folder = self._fs(path)
        file_generator.create_gitignore_helper(folder, path, on_failure=self._write_failed)
        if self._settings.create_readme_files:
            file_generator.create_readme(folder, THIRD_PARTY_TITLE, THIRD_PARTY_DESCRIPTION,
                                         on_failure=self._write_failed)

    def _determine_base_path(self) -> str:
        if not self._settings.use_project_root:
            return ASSETS_DIR
        name = validate_folder_name(self._settings.project_root_name)
        base_path = join_asset_path(ASSETS_DIR, name)
        folder = self._fs(base_path)
        if not folder.is_dir():
            # Not routed through _create_folder_safe: failure here aborts the run.
            folder.mkdir()
            self._result.created.append(base_path)
            self._note(logging.INFO, "created project root %s", base_path)
        return base_path

    def _create_core_folders(self, base_path: str) -> None:
        for name, subfolders in CORE_FOLDERS.items():
            parent = self._create_folder_safe(base_path, name)
            if parent is None:
                continue
            for sub in subfolders:
                self._create_folder_safe(parent, sub)
            if self._settings.create_readme_files:
                file_generator.create_readme(self._fs(parent), name, folder_description(name),
                                             on_failure=self._write_failed)

    def _create_optional_folders(self, base_path: str) -> None:
        s = self._settings
        if s.include_shaders:
            self._create_optional_folder(base_path, "Shaders")
        if s.include_data:
            self._create_optional_folder(base_path, "Data")
        if s.include_animations:
            self._create_optional_folder(base_path, "Animations")
        if s.include_editor_folder:
            self._create_optional_folder(base_path, "Editor")
        if s.include_localization:
            self._create_optional_folder(base_path, "Localization")
        if s.include_documentation:
            self._create_optional_folder(base_path, "Documentation")
        if s.include_settings:
            self._create_optional_folder(base_path, "Settings")
        if s.include_tests:
            self._create_tests_folders(base_path)
        if s.include_plugins:
            self._create_optional_folder(base_path, "Plugins")

    def _create_tests_folders(self, base_path: str) -> None:
        tests = self._create_folder_safe(base_path, TESTS_DIR)
        if tests is None:
            return
        for sub in TESTS_SUBDIRS:
            self._create_folder_safe(tests, sub)
        if self._settings.create_readme_files:
            file_generator.create_readme(self._fs(tests), TESTS_DIR, TESTS_DESCRIPTION,
                                         on_failure=self._write_failed)

    def _create_unity_special_folders(self) -> None:
        if self._settings.include_resources:
            resources = self._create_folder_safe(ASSETS_DIR, RESOURCES_DIR)
            if resources is not None:
                file_generator.create_resources_warning(
                    self._fs(resources), on_failure=self._write_failed)
        if self._settings.include_streaming_assets:
            self._create_optional_folder(ASSETS_DIR, STREAMING_ASSETS_DIR)
        if self._settings.include_gizmos:
            self._create_optional_folder(ASSETS_DIR, GIZMOS_DIR)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _create_optional_folder(self, base_path: str, name: str) -> None:
        path = self._create_folder_safe(base_path, name)
        if path is None or not self._settings.create_readme_files:
            return
        description = OPTIONAL_FOLDER_DESCRIPTIONS.get(name)
        if description is not None:
            file_generator.create_readme(self._fs(path), name, description,
                                         on_failure=self._write_failed)

    def _create_folder_safe(self, parent: str, name: str) -> Optional[str]:
        """
        Create parent/name if absent.
        Returns the asset path when the folder exists afterwards (created or
        already there), None when creation failed.
        """
        path = join_asset_path(parent, name)
        folder = self._fs(path)

        if folder.is_dir():
            self._result.skipped.append(path)
            self._note(logging.WARNING, "folder already exists, skipping: %s", path)
            return path

        try:
            folder.mkdir()
        except OSError as exc:
            self._result.failed.append(path)
            self._note(logging.WARNING, "failed to create folder %s: %s", path, exc)
            return None

        self._result.created.append(path)
        if self._settings.create_gitkeep_files:
            file_generator.create_gitkeep(folder, on_failure=self._write_failed)
        return path

    def _write_failed(self, path: Path, exc: OSError) -> None:
        self._note(logging.WARNING, "failed to write %s: %s",
                   path.relative_to(self._project_dir).as_posix(), exc)

    def _fs(self, asset_path: str) -> Path:
        return resolve_asset_path(self._project_dir, asset_path)

    def _note(self, level: int, msg: str, *args) -> None:
        _log.log(level, msg, *args)
        self._result.log.append(msg % args)
