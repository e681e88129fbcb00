"""
BootstrapWindow — folder generator front end.
Holds no generation logic. Builds a FolderGeneratorSettings from its
widgets and hands it to FolderCreator.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox, QComboBox, QFormLayout, QGridLayout, QGroupBox, QLabel,
    QLineEdit, QMessageBox, QPushButton, QScrollArea, QVBoxLayout, QWidget,
)

from unity_bootstrap.config.settings_store import save_settings
from unity_bootstrap.core.constants import APP_NAME, APP_VERSION
from unity_bootstrap.core.enums import FolderPreset
from unity_bootstrap.core.settings import (
    FolderGeneratorSettings,
    apply_preset,
    preset_description,
)
from unity_bootstrap.services.folder_creator import FolderCreator

_log = logging.getLogger("unity_bootstrap.ui.bootstrap_window")

# (flag, label, tooltip) per section, in display order
_ROOT_FLAGS = [
    ("use_project_root", "Use Project Root Folder",
     "Wrap all main folders inside a custom root folder (e.g., _ProjectName)"),
    ("include_third_party", "Include _ThirdParty Folder",
     "Creates a folder for third-party assets with gitignore helper"),
]
_OPTIONAL_FLAGS = [
    ("include_shaders", "Shaders", ""),
    ("include_editor_folder", "Editor", ""),
    ("include_animations", "Animations", ""),
    ("include_localization", "Localization", ""),
    ("include_data", "Data", ""),
    ("include_documentation", "Documentation", ""),
    ("include_settings", "Settings", ""),
    ("include_tests", "Tests", ""),
    ("include_plugins", "Plugins", "For native plugins and special DLLs"),
]
_SPECIAL_FLAGS = [
    ("include_resources", "Resources",
     "⚠️ Consider using Addressables instead for better performance"),
    ("include_streaming_assets", "StreamingAssets",
     "For files that need to be accessed at runtime via path"),
    ("include_gizmos", "Gizmos", "For custom gizmo icons in the Scene view"),
]
_ADVANCED_FLAGS = [
    ("create_gitkeep_files", "Create .gitkeep Files",
     "Ensures empty folders are tracked by Git"),
    ("create_readme_files", "Create README Files",
     "Adds helpful README.md files with folder descriptions"),
]

_PRESET_ORDER = [
    FolderPreset.CUSTOM,
    FolderPreset.MINIMAL,
    FolderPreset.STANDARD,
    FolderPreset.COMPLETE,
    FolderPreset.GAME_JAM,
]


def _all_flag_names() -> list[str]:
    return [f for section in (_ROOT_FLAGS, _OPTIONAL_FLAGS, _SPECIAL_FLAGS, _ADVANCED_FLAGS)
            for f, _, _ in section]


def _window_title() -> str:
    return f"{APP_NAME} {APP_VERSION} — Folder Generator"


def _confirm_text(settings: FolderGeneratorSettings) -> str:
    return (
        "This will create the folder structure in your Assets directory "
        f"(base path: {settings.base_path_label}). Continue?"
    )


class BootstrapWindow(QWidget):
    # Emits number of folders created after a successful run
    generated = pyqtSignal(int)

    def __init__(self, project_dir: Path, settings: FolderGeneratorSettings | None = None,
                 settings_path: Path | None = None, parent=None) -> None:
        super().__init__(parent)
        self._project_dir = Path(project_dir)
        self._settings_path = settings_path
        self._checks: dict[str, QCheckBox] = {}
        self.setWindowTitle(_window_title())
        self.setMinimumSize(400, 500)
        self._build_ui()

        settings = settings or apply_preset(FolderGeneratorSettings(), FolderPreset.STANDARD)
        self._last_preset = settings.preset
        self.load_settings(settings)

    def _build_ui(self) -> None:
        header = QLabel("Project Bootstrap")
        header.setStyleSheet("font-weight: bold; font-size: 14px; padding: 4px;")
        intro = QLabel(f"Generate a professional folder structure for your Unity project.\n"
                       f"Project: {self._project_dir}")
        intro.setWordWrap(True)

        # Presets
        preset_box = QGroupBox("Presets")
        preset_form = QFormLayout(preset_box)
        self._preset = QComboBox()
        for preset in _PRESET_ORDER:
            self._preset.addItem(preset.value, preset)
        self._preset.currentIndexChanged.connect(self._on_preset_changed)
        self._preset_desc = QLabel()
        self._preset_desc.setWordWrap(True)
        self._preset_desc.setStyleSheet("color: #888888;")
        preset_form.addRow("Folder Preset", self._preset)
        preset_form.addRow(self._preset_desc)

        # Root settings
        root_box = QGroupBox("Root Settings")
        root_layout = QFormLayout(root_box)
        self._root_name = QLineEdit()
        self._root_name_label = QLabel("Root Folder Name")
        for flag, label, tip in _ROOT_FLAGS:
            root_layout.addRow(self._make_check(flag, label, tip))
            if flag == "use_project_root":
                root_layout.addRow(self._root_name_label, self._root_name)
        self._checks["use_project_root"].toggled.connect(self._on_use_root_toggled)

        # Optional folders, two columns
        optional_box = QGroupBox("Optional Folders")
        grid = QGridLayout(optional_box)
        for i, (flag, label, tip) in enumerate(_OPTIONAL_FLAGS):
            grid.addWidget(self._make_check(flag, label, tip), i // 2, i % 2)

        special_box = QGroupBox("Unity Special Folders")
        special_layout = QVBoxLayout(special_box)
        warn = QLabel("These folders have special meaning in Unity. Use with caution.")
        warn.setStyleSheet("color: #d7ba7d;")
        special_layout.addWidget(warn)
        for flag, label, tip in _SPECIAL_FLAGS:
            special_layout.addWidget(self._make_check(flag, label, tip))

        advanced_box = QGroupBox("Advanced Options")
        advanced_layout = QVBoxLayout(advanced_box)
        for flag, label, tip in _ADVANCED_FLAGS:
            advanced_layout.addWidget(self._make_check(flag, label, tip))

        generate_btn = QPushButton("Generate Folder Structure")
        generate_btn.setMinimumHeight(40)
        generate_btn.setStyleSheet("QPushButton { background: #2e7d32; color: white; }")
        generate_btn.clicked.connect(self._on_generate)

        container = QWidget()
        container_layout = QVBoxLayout(container)
        container_layout.addWidget(header)
        container_layout.addWidget(intro)
        container_layout.addWidget(preset_box)
        container_layout.addWidget(root_box)
        container_layout.addWidget(optional_box)
        container_layout.addWidget(special_box)
        container_layout.addWidget(advanced_box)
        container_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidget(container)
        scroll.setWidgetResizable(True)
        scroll.setStyleSheet("QScrollArea { border: none; }")

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.addWidget(scroll)
        main_layout.addWidget(generate_btn)

    def _make_check(self, flag: str, label: str, tooltip: str) -> QCheckBox:
        check = QCheckBox(label)
        if tooltip:
            check.setToolTip(tooltip)
        self._checks[flag] = check
        return check

    # ------------------------------------------------------------------
    # Settings <-> widgets
    # ------------------------------------------------------------------

    def load_settings(self, settings: FolderGeneratorSettings) -> None:
        for flag, check in self._checks.items():
            check.setChecked(bool(getattr(settings, flag)))
        self._root_name.setText(settings.project_root_name)
        self._on_use_root_toggled(settings.use_project_root)

        self._preset.blockSignals(True)
        self._preset.setCurrentIndex(_PRESET_ORDER.index(settings.preset))
        self._preset.blockSignals(False)
        self._preset_desc.setText(preset_description(settings.preset))

    def get_settings(self) -> FolderGeneratorSettings:
        flags = {flag: check.isChecked() for flag, check in self._checks.items()}
        return FolderGeneratorSettings(
            project_root_name=self._root_name.text().strip(),
            preset=FolderPreset(self._preset.currentData()),
            **flags,
        )

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_preset_changed(self, index: int) -> None:
        preset = FolderPreset(self._preset.itemData(index))
        if preset != self._last_preset:
            if preset is not FolderPreset.CUSTOM:
                self.load_settings(apply_preset(self.get_settings(), preset))
            self._last_preset = preset
        self._preset_desc.setText(preset_description(preset))

    def _on_use_root_toggled(self, checked: bool) -> None:
        self._root_name.setVisible(checked)
        self._root_name_label.setVisible(checked)

    def _on_generate(self) -> None:
        settings = self.get_settings()
        answer = QMessageBox.question(
            self, "Generate Folder Structure", _confirm_text(settings),
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.Cancel,
        )
        if answer != QMessageBox.StandardButton.Yes:
            return

        creator = FolderCreator(settings, self._project_dir)
        try:
            result = creator.generate()
        except Exception as exc:
            QMessageBox.critical(
                self, "Error",
                f"An error occurred during folder generation:\n\n{exc}",
            )
            return

        try:
            save_settings(settings, self._settings_path)
        except OSError as exc:
            _log.warning("could not save settings: %s", exc)

        QMessageBox.information(self, "Success!", result.success_message())
        self.generated.emit(result.folders_created)
