"""Shared pytest fixtures for Qt application lifecycle."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QGuiApplication

from burndown import ChartSettings


@pytest.fixture(scope="session")
def app():
    """Provide a single QGuiApplication for all tests."""
    instance = QGuiApplication.instance()
    if instance is None:
        instance = QGuiApplication(sys.argv)

    yield instance

    QCoreApplication.processEvents()


@pytest.fixture
def make_project(app):
    """Build a ChartSettings with the given total and actual entries."""

    def _make(total_task=100.0, actuals=None, plans=None, name="Project", **kwargs):
        return ChartSettings(
            material_name=name,
            total_task=total_task,
            actuals=actuals,
            plans=plans,
            **kwargs,
        )

    return _make
