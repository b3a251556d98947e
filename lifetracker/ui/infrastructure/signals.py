"""
Qt signal bridge for navigation: the core stack is Qt-free, views that need
live updates (back button enablement) connect here.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class NavigationSignals(QObject):
    """Emitted by the main window after every applied navigation change."""

    navigated = Signal(object)  # NavigationChange
