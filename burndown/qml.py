"""QML UI definition for the burndown tracker."""

from __future__ import annotations

from pathlib import Path

QML_DIR = Path(__file__).with_name("qml_ui")
BURNDOWN_QML_PATH = QML_DIR / "BurndownWindow.qml"


def load_burndown_qml() -> str:
    """Return the burndown window QML source as a string."""
    return BURNDOWN_QML_PATH.read_text(encoding="utf-8")


__all__ = [
    "BURNDOWN_QML_PATH",
    "QML_DIR",
    "load_burndown_qml",
]
