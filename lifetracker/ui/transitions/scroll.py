"""Scroll suspension for a QScrollArea (the page viewport)."""

from __future__ import annotations

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtWidgets import QScrollArea
from shiboken6 import isValid


class ScrollAreaSuspender(QObject):
    """Implements ``ScrollSuspender``: hides the scroll bars and eats wheel events."""

    def __init__(self, area: QScrollArea) -> None:
        super().__init__(area)
        self._area = area
        self._saved: tuple[Qt.ScrollBarPolicy, Qt.ScrollBarPolicy] | None = None

    @property
    def suspended(self) -> bool:
        return self._saved is not None

    def suspend(self) -> None:
        if self._saved is not None or not isValid(self._area):
            return
        self._saved = (
            self._area.horizontalScrollBarPolicy(),
            self._area.verticalScrollBarPolicy(),
        )
        self._area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self._area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self._area.viewport().installEventFilter(self)

    def resume(self) -> None:
        if self._saved is None:
            return
        horizontal, vertical = self._saved
        self._saved = None
        # area torn down with the window: nothing left to restore
        if not isValid(self._area):
            return
        self._area.viewport().removeEventFilter(self)
        self._area.setHorizontalScrollBarPolicy(horizontal)
        self._area.setVerticalScrollBarPolicy(vertical)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if event.type() == QEvent.Type.Wheel:
            return True
        return super().eventFilter(watched, event)
