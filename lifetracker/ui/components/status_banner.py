"""
Status banner: inline message that hides itself after a delay.

The expiry timer is a child of the banner, so it dies with it; ``dispose``
stops it explicitly on window teardown.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QWidget

from lifetracker.config import STATUS_MESSAGE_TIMEOUT_MS

_COLORS = {
    "info": ("#2563eb", "white"),
    "success": ("#16a34a", "white"),
    "warning": ("#f59e0b", "black"),
    "error": ("#dc2626", "white"),
}


class StatusBanner(QLabel):
    def __init__(self, parent: QWidget | None = None, timeout_ms: int = STATUS_MESSAGE_TIMEOUT_MS) -> None:
        super().__init__(parent)
        self._timeout_ms = timeout_ms
        self._level: str | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.clear_message)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.hide()

    @property
    def level(self) -> str | None:
        return self._level

    @property
    def pending(self) -> bool:
        return self._timer.isActive()

    def show_message(self, message: str, level: str = "info", timeout_ms: int | None = None) -> None:
        """Show ``message``; a newer message replaces it and restarts the timer."""
        bg, fg = _COLORS.get(level, _COLORS["info"])
        self._level = level
        self.setStyleSheet(
            f"background-color: {bg}; color: {fg}; border-radius: 6px; padding: 8px 16px;"
        )
        self.setText(message)
        self.show()
        self._timer.start(self._timeout_ms if timeout_ms is None else timeout_ms)

    def clear_message(self) -> None:
        self._timer.stop()
        self._level = None
        self.clear()
        self.hide()

    def dispose(self) -> None:
        self._timer.stop()
