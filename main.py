"""
Entry point for the LifeTracker desktop shell.

Run: python main.py
"""
from __future__ import annotations

import sys

from lifetracker.core.observability.logging_config import setup_logging
from lifetracker.ui.infrastructure import (
    AppSettings,
    Container,
    NotificationCenter,
    create_application,
    install_error_boundary,
    run_application,
)
from lifetracker.ui.shell import MainWindow


def main() -> None:
    setup_logging()
    app = create_application()
    settings = AppSettings()

    container = Container()
    window = MainWindow(settings, container=container)
    notifications = NotificationCenter(window)
    container.notifications = notifications
    install_error_boundary(notifications)
    window.show()

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
