"""QApplication bootstrap for the LifeTracker shell."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NoReturn

from PySide6.QtCore import QCoreApplication, Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from lifetracker.core.version import get_build_info

APP_NAME = "LifeTracker"
ORG_NAME = "LifeTracker"


def create_application(argv: Sequence[str] | None = None) -> QApplication:
    """Create the QApplication (or return the running one) with names set for QSettings."""
    existing = QCoreApplication.instance()
    if isinstance(existing, QApplication):
        return existing
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(list(argv if argv is not None else sys.argv))
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setOrganizationName(ORG_NAME)
    app.setApplicationVersion(get_build_info().version)
    return app


def run_application(app: QApplication) -> NoReturn:
    sys.exit(app.exec())
