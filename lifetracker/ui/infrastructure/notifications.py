from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtWidgets import QMessageBox

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


class NotificationCenter:
    """Very small notification helper.

    Messages go to the window's status banner (auto-expiring) when it has
    one, otherwise to the status bar. ``critical`` additionally opens a
    modal box and is reserved for unhandled exceptions.
    """

    def __init__(self, window) -> None:
        self._window = window
        self.last: Notification | None = None

    def _status(self, level: str, text: str) -> None:
        self.last = Notification(level, text)
        banner = getattr(self._window, "status_banner", None)
        if banner is not None and hasattr(banner, "show_message"):
            banner.show_message(text, level)
            return
        sb = getattr(self._window, "statusBar", None)
        if callable(sb):
            sb = sb()
        if sb is not None and hasattr(sb, "showMessage"):
            sb.showMessage(text, 5000)
            return
        log.debug("No notification surface for %s message: %s", level, text)

    @staticmethod
    def _join_message(title_or_message: str, message: str | None = None) -> str:
        if message is None:
            return title_or_message
        return f"{title_or_message}: {message}" if title_or_message else message

    def info(self, title_or_message: str, message: str | None = None) -> None:
        self._status("info", self._join_message(title_or_message, message))

    def success(self, title_or_message: str, message: str | None = None) -> None:
        self._status("success", self._join_message(title_or_message, message))

    def warning(self, title_or_message: str, message: str | None = None) -> None:
        self._status("warning", self._join_message(title_or_message, message))

    def error(self, title_or_message: str, message: str | None = None) -> None:
        self._status("error", self._join_message(title_or_message, message))

    def critical(self, title_or_message: str, message: str | None = None) -> None:
        text = self._join_message(title_or_message, message)
        self._status("error", text)
        QMessageBox.critical(self._window, "Error", text)
