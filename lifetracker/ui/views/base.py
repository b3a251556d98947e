"""Base widgets shared by pages.

``DataView`` owns exactly one event-bus subscription for its lifetime: it
subscribes at construction and unsubscribes on teardown (close or Qt
destruction), so no refresh callback fires against a deleted widget.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from lifetracker.application.use_cases import CommandRequest
from lifetracker.core.errors import CommandError
from lifetracker.core.events import ALL, ChangeEvent, ChangeKind
from lifetracker.core.events.event_bus import KindFilter, Subscription

if TYPE_CHECKING:
    from lifetracker.core.navigation import NavigationChange
    from lifetracker.ui.infrastructure.di import Container

log = logging.getLogger(__name__)


class Navigator(Protocol):
    """What pages may ask of the window: page switches go through it so they animate."""

    def navigate(self, route: str, origin_group: str | None = None) -> None: ...

    def go_back(self) -> None: ...


class DataView(QWidget):
    refresh_kinds: KindFilter = ALL

    def __init__(
        self,
        container: Container,
        parent: QWidget | None = None,
        *,
        kinds: KindFilter | None = None,
    ) -> None:
        super().__init__(parent)
        self._container = container
        self._subscription: Subscription | None = container.event_bus.subscribe(
            self.refresh_kinds if kinds is None else kinds, self._on_change
        )
        sub = self._subscription
        # Capture the handle, not self: the Python wrapper may be gone by then.
        self.destroyed.connect(lambda *_: sub.unsubscribe())

    @property
    def subscribed(self) -> bool:
        sub = self._subscription
        return sub is not None and self._container.event_bus.is_subscribed(sub)

    def teardown(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self.teardown()
        super().closeEvent(event)

    def _on_change(self, event: ChangeEvent) -> None:
        log.debug("%s refreshing on %s", type(self).__name__, event.type.value)
        self.refresh()

    def refresh(self) -> None:
        """Refetch current state. Called at mount by subclasses and on every accepted change."""

    # --- collaborator access ---
    def query(self, name: str, payload: Mapping[str, Any] | None = None, default: Any = None) -> Any:
        try:
            return self._container.run_command_use_case.query(name, payload)
        except CommandError as e:
            self._report(e)
            return default

    def run_command(
        self, name: str, change: ChangeKind | None, payload: Mapping[str, Any] | None = None
    ) -> bool:
        try:
            self._container.run_command_use_case.execute(
                CommandRequest(name=name, change=change, payload=payload or {})
            )
        except CommandError as e:
            self._report(e)
            return False
        return True

    def _report(self, error: CommandError) -> None:
        notifications = self._container.notifications
        if notifications is not None:
            notifications.error(error.message)
        else:
            log.warning("Command %s failed: %s", error.command, error.message)


class BackBar(QWidget):
    """Back affordance for pages reached from another page.

    Visibility is decided once, at mount, from ``can_go_back`` so the bar does
    not pop in or out while the page is shown. Enablement follows the stack
    live through the navigation signals.
    """

    def __init__(self, container: Container, navigator: Navigator, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._navigation = container.navigation
        self.visible_at_mount = self._navigation.can_go_back

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.button = QPushButton("← Back")
        self.button.clicked.connect(lambda: navigator.go_back())
        layout.addWidget(self.button)
        layout.addStretch(1)

        if not self.visible_at_mount:
            self.hide()
        self.button.setEnabled(self.visible_at_mount)
        container.navigation_signals.navigated.connect(self._on_navigated)

    def _on_navigated(self, _change: NavigationChange) -> None:
        self.button.setEnabled(self._navigation.can_go_back)

