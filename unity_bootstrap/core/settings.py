# unity_bootstrap/core/settings.py
"""
FolderGeneratorSettings — flat configuration record for one generation run.
Presets are whole-record overwrites of every boolean flag; the root folder
name is never touched by a preset.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from types import MappingProxyType

from unity_bootstrap.core.constants import DEFAULT_PROJECT_ROOT_NAME
from unity_bootstrap.core.enums import FolderPreset
from unity_bootstrap.core.exceptions import ConfigError


@dataclass(frozen=True)
class FolderGeneratorSettings:
    # Root options
    use_project_root: bool = True
    project_root_name: str = DEFAULT_PROJECT_ROOT_NAME
    include_third_party: bool = True

    # Optional folders
    include_shaders: bool = True
    include_data: bool = True
    include_animations: bool = True
    include_editor_folder: bool = True
    include_localization: bool = True
    include_documentation: bool = True
    include_settings: bool = True
    include_tests: bool = False
    include_plugins: bool = False

    # Unity special folders
    include_resources: bool = False
    include_streaming_assets: bool = False
    include_gizmos: bool = False

    # Advanced options
    create_gitkeep_files: bool = True
    create_readme_files: bool = True

    preset: FolderPreset = FolderPreset.CUSTOM

    @property
    def base_path_label(self) -> str:
        return f"Assets/{self.project_root_name}" if self.use_project_root else "Assets"


FLAG_NAMES = tuple(
    f.name for f in fields(FolderGeneratorSettings) if f.type in ("bool", bool)
)


def _preset(*values: bool) -> MappingProxyType:
    if len(values) != len(FLAG_NAMES):
        raise ValueError(f"preset must set all {len(FLAG_NAMES)} flags, got {len(values)}")
    return MappingProxyType(dict(zip(FLAG_NAMES, values)))


T, F = True, False

# Column order follows FLAG_NAMES (field declaration order).
PRESETS = MappingProxyType({
    #                               root 3rdP shdr data anim edit l10n docs sett test plug rsrc strm gizm keep read
    FolderPreset.MINIMAL:  _preset(F,   F,   F,   F,   F,   F,   F,   F,   F,   F,   F,   F,   F,   F,   T,   F),
    FolderPreset.STANDARD: _preset(T,   T,   T,   T,   T,   T,   F,   T,   T,   F,   F,   F,   F,   F,   T,   T),
    FolderPreset.COMPLETE: _preset(T,   T,   T,   T,   T,   T,   T,   T,   T,   T,   T,   F,   T,   T,   T,   T),
    FolderPreset.GAME_JAM: _preset(F,   T,   F,   T,   T,   F,   F,   F,   F,   F,   F,   F,   F,   F,   F,   F),
})

_PRESET_DESCRIPTIONS = {
    FolderPreset.MINIMAL: "Basic structure: Scripts, Art, Prefabs, Audio, Scenes",
    FolderPreset.STANDARD: "Recommended for most projects: Core folders + common optional folders",
    FolderPreset.COMPLETE: "All available folders including advanced options",
    FolderPreset.GAME_JAM: "Lightweight setup optimized for rapid prototyping",
    FolderPreset.CUSTOM: "Configure your own folder structure",
}


def apply_preset(
    settings: FolderGeneratorSettings, preset: FolderPreset
) -> FolderGeneratorSettings:
    """
    Return a copy of settings with every flag overwritten from the preset.
    CUSTOM is the identity: the same record comes back unchanged.
    """
    if preset is FolderPreset.CUSTOM:
        return settings
    return replace(settings, preset=preset, **PRESETS[preset])


def preset_description(preset: FolderPreset) -> str:
    return _PRESET_DESCRIPTIONS.get(preset, "")


def settings_to_dict(settings: FolderGeneratorSettings) -> dict:
    data = asdict(settings)
    data["preset"] = settings.preset.value
    return data


def settings_from_dict(data: dict) -> FolderGeneratorSettings:
    """
    Build settings from a JSON-decoded dict.
    Unknown keys are ignored; missing keys keep their defaults.

    Raises:
        ConfigError: if a known key has the wrong type or an unknown preset
    """
    if not isinstance(data, dict):
        raise ConfigError(f"settings must be an object, got {type(data).__name__}")

    kwargs: dict = {}
    for name in FLAG_NAMES:
        if name in data:
            value = data[name]
            if not isinstance(value, bool):
                raise ConfigError(f"setting {name!r} must be a boolean, got {value!r}")
            kwargs[name] = value

    if "project_root_name" in data:
        root_name = data["project_root_name"]
        if not isinstance(root_name, str):
            raise ConfigError(f"setting 'project_root_name' must be a string, got {root_name!r}")
        kwargs["project_root_name"] = root_name

    if "preset" in data:
        try:
            kwargs["preset"] = FolderPreset(data["preset"])
        except ValueError:
            raise ConfigError(f"unknown preset: {data['preset']!r}")

    return FolderGeneratorSettings(**kwargs)
