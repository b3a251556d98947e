"""Shell infrastructure: QApplication bootstrap, settings, DI, notifications.

Exports resolve lazily so that importing ``lifetracker.ui.infrastructure.di``
in a headless test run does not pull in QtWidgets (which needs libGL).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "create_application": "lifetracker.ui.infrastructure.application",
    "run_application": "lifetracker.ui.infrastructure.application",
    "Container": "lifetracker.ui.infrastructure.di",
    "NotificationCenter": "lifetracker.ui.infrastructure.notifications",
    "install_error_boundary": "lifetracker.ui.infrastructure.error_boundary",
    "AppSettings": "lifetracker.ui.infrastructure.settings",
    "NavigationSignals": "lifetracker.ui.infrastructure.signals",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
