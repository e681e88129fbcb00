"""
Unity Bootstrap — entry point.
Opens the folder generator window for a Unity project.
Usage: python main.py [unity_project_dir]   (defaults to the current directory)
No business logic here.
"""
import sys
import logging
from pathlib import Path
from PyQt6.QtWidgets import QApplication
from unity_bootstrap.config.settings_store import default_settings_path, load_settings
from unity_bootstrap.core.constants import APP_NAME, APP_VERSION
from unity_bootstrap.ui.bootstrap_window import BootstrapWindow

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
_log = logging.getLogger("unity_bootstrap.main")


def _on_generated(count: int) -> None:
    _log.info("generation finished: %d folders created", count)


def main() -> int:
    project_dir = Path(sys.argv[1] if len(sys.argv) > 1 else ".").resolve()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setStyleSheet("""
        QWidget { background-color: #1e1e1e; color: #cccccc; }
        QGroupBox { border: 1px solid #333; margin-top: 8px; padding: 8px; }
        QLineEdit { background: #252525; border: 1px solid #444; padding: 4px; }
        QPushButton { background: #2d2d2d; border: 1px solid #444; padding: 6px 12px; }
        QPushButton:hover { background: #3d3d3d; }
    """)

    settings = load_settings() if default_settings_path().exists() else None
    window = BootstrapWindow(project_dir, settings=settings)
    window.generated.connect(_on_generated)
    window.show()
    _log.info("%s started — project: %s", APP_NAME, project_dir)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
