# unity_bootstrap/core/templates.py
"""
Folder template table and the fixed text written into generated files.
Everything here is read-only at runtime: mappings are MappingProxyType
views over tuples so nothing can be appended or reassigned.
"""
from types import MappingProxyType

# Core folder hierarchy; insertion order is generation order.
CORE_FOLDERS = MappingProxyType({
    "Scripts": ("Gameplay", "UI", "Managers", "Utilities", "ScriptableObjects", "Data"),
    "Art": ("Textures", "Models", "Materials", "Sprites"),
    "Prefabs": ("Characters", "Environment", "UI", "Effects"),
    "Audio": ("Music", "SFX", "Voices", "Mixers"),
    "Scenes": ("Development", "Production"),
})

_CORE_DESCRIPTIONS = MappingProxyType({
    "Scripts": (
        "C# scripts and code files\n\n"
        "**Subfolders:**\n"
        "- **Gameplay**: Core game mechanics and logic\n"
        "- **UI**: User interface scripts and controllers\n"
        "- **Managers**: Singleton managers and system controllers\n"
        "- **Utilities**: Helper classes and extensions\n"
        "- **ScriptableObjects**: ScriptableObject definitions\n"
        "- **Data**: Data structures and containers"
    ),
    "Art": (
        "Visual assets and artwork\n\n"
        "**Subfolders:**\n"
        "- **Textures**: 2D textures and image files\n"
        "- **Models**: 3D models and meshes\n"
        "- **Materials**: Material assets\n"
        "- **Sprites**: 2D sprites and sprite sheets"
    ),
    "Prefabs": (
        "Reusable GameObject prefabs\n\n"
        "**Subfolders:**\n"
        "- **Characters**: Player and NPC prefabs\n"
        "- **Environment**: World objects and scenery\n"
        "- **UI**: UI element prefabs\n"
        "- **Effects**: Particle systems and VFX"
    ),
    "Audio": (
        "Sound and music assets\n\n"
        "**Subfolders:**\n"
        "- **Music**: Background music tracks\n"
        "- **SFX**: Sound effects\n"
        "- **Voices**: Voice acting and dialogue\n"
        "- **Mixers**: Audio mixer assets"
    ),
    "Scenes": (
        "Unity scene files\n\n"
        "**Subfolders:**\n"
        "- **Development**: Work-in-progress and test scenes\n"
        "- **Production**: Final production scenes"
    ),
})

OPTIONAL_FOLDER_DESCRIPTIONS = MappingProxyType({
    "Shaders": "Custom shader files and shader graphs",
    "Data": "Game data, databases, and configuration files",
    "Animations": "Animation clips, controllers, and timelines",
    "Editor": "Editor-only scripts and tools",
    "Localization": "Localization files and translation data",
    "Documentation": "Project documentation, design docs, and guides",
    "Settings": "ScriptableObject configurations and settings",
    "Plugins": "Native plugins and special DLLs",
    "StreamingAssets": "Files accessible at runtime via Application.streamingAssetsPath",
    "Gizmos": "Custom gizmo icons (name files to match script names)",
})

THIRD_PARTY_TITLE = "Third-Party Assets"

THIRD_PARTY_DESCRIPTION = (
    "Place all third-party assets and plugins here.\n\n"
    "Consider adding this folder to .gitignore if assets are purchased or large."
)

TESTS_DESCRIPTION = (
    "Unity Test Framework tests\n\n"
    "EditMode: Tests that run in edit mode\n"
    "PlayMode: Tests that run in play mode"
)

RESOURCES_WARNING = """⚠️ RESOURCES FOLDER WARNING ⚠️

The Resources folder has significant performance implications:

ISSUES:
- All assets are included in build, increasing size
- Increases application startup time
- Cannot be unloaded from memory easily
- Makes builds slower

RECOMMENDATIONS:
1. Use Addressables for dynamic content loading
2. Use AssetBundles for advanced scenarios
3. Use direct references in prefabs/ScriptableObjects when possible

VALID USE CASES:
- Small config files needed before scene loads
- Truly universal assets needed everywhere
- Quick prototyping (remove before production)

Learn more: https://docs.unity3d.com/Manual/BestPracticeUnderstandingPerformanceInUnity6.html"""

# {path} is the asset-relative folder path, e.g. "Assets/_ThirdParty"
GITIGNORE_HELPER_TEMPLATE = """Add this line to your .gitignore to ignore the contents of this folder:

{path}/*

This is recommended for third-party assets that are:
- Large in size
- Available on the Asset Store
- Managed by package managers
- Licensed to specific team members

Keep this file tracked in Git as a reminder."""

README_TEMPLATE = "# {title}\n\n{description}\n"


def folder_description(folder_name: str) -> str:
    """Markdown description for a core folder; generic text for anything else."""
    return _CORE_DESCRIPTIONS.get(folder_name, f"Assets for {folder_name}")
