"""
Window persistence through QSettings.

Only window chrome survives a restart (geometry, dock state, sidebar).
Navigation history is rebuilt from the default route on every start.
"""
from __future__ import annotations

from PySide6.QtCore import QByteArray, QSettings

from lifetracker.ui.infrastructure.application import APP_NAME, ORG_NAME

_GEOMETRY = "window/geometry"
_STATE = "window/state"
_SIDEBAR_COLLAPSED = "window/sidebarCollapsed"


class AppSettings:
    def __init__(self, q: QSettings | None = None) -> None:
        self._q = q if q is not None else QSettings(ORG_NAME, APP_NAME)

    def _bytes(self, key: str) -> QByteArray | None:
        value = self._q.value(key, None)
        return value if isinstance(value, QByteArray) and not value.isEmpty() else None

    def get_main_window_geometry(self) -> QByteArray | None:
        return self._bytes(_GEOMETRY)

    def set_main_window_geometry(self, geometry: QByteArray) -> None:
        self._q.setValue(_GEOMETRY, geometry)

    def get_main_window_state(self) -> QByteArray | None:
        return self._bytes(_STATE)

    def set_main_window_state(self, state: QByteArray) -> None:
        self._q.setValue(_STATE, state)

    def get_sidebar_collapsed(self) -> bool:
        # INI backends hand booleans back as strings
        return str(self._q.value(_SIDEBAR_COLLAPSED, "false")).lower() in {"true", "1"}

    def set_sidebar_collapsed(self, collapsed: bool) -> None:
        self._q.setValue(_SIDEBAR_COLLAPSED, collapsed)

    def sync(self) -> None:
        self._q.sync()
