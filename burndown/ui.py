"""UI creation functions for the burndown tracker."""

from __future__ import annotations

import logging
import os
import sys

from PySide6.QtCore import QUrl
from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine

from .constants import CHART_HEIGHT, UI_LABELS
from .project_list import ProjectList
from .qml import BURNDOWN_QML_PATH, QML_DIR

logger = logging.getLogger(__name__)


def create_burndown_window(project_list: ProjectList) -> QQmlApplicationEngine:
    """Create and return a QQmlApplicationEngine hosting the burndown UI."""
    engine = QQmlApplicationEngine()
    context = engine.rootContext()
    context.setContextProperty("projectList", project_list)
    context.setContextProperty("labels", dict(UI_LABELS))
    context.setContextProperty("chartHeight", CHART_HEIGHT)
    engine.addImportPath(str(QML_DIR))
    engine.load(QUrl.fromLocalFile(str(BURNDOWN_QML_PATH)))
    logger.debug("Loaded %s (%d root objects)", BURNDOWN_QML_PATH.name, len(engine.rootObjects()))
    return engine


def _flag(name: str, env_var: str) -> bool:
    return name in sys.argv or os.environ.get(env_var) == "1"


def main() -> int:
    """Main entry point for the burndown tracker."""
    smoke_mode = _flag("--smoke", "BURNDOWN_SMOKE")
    logging.basicConfig(
        level=logging.DEBUG if _flag("--debug", "BURNDOWN_DEBUG") else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv)

    project_list = ProjectList()
    engine = create_burndown_window(project_list)
    if not engine.rootObjects():
        logger.error("Failed to load %s", BURNDOWN_QML_PATH)
        return 1

    if smoke_mode:
        return 0

    return app.exec()
