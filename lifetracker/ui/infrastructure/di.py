"""UI composition container.

Keeps UI-only collaborators (notifications, navigation signals) outside of
the application container to preserve layer boundaries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifetracker.application.container import Container as AppContainer
from lifetracker.application.ports.commands import CommandPort

if TYPE_CHECKING:
    from lifetracker.ui.infrastructure.notifications import NotificationCenter
    from lifetracker.ui.infrastructure.signals import NavigationSignals


class Container(AppContainer):
    def __init__(self, commands: CommandPort | None = None) -> None:
        super().__init__(commands)
        self.notifications: NotificationCenter | None = None
        self._navigation_signals: NavigationSignals | None = None

    @property
    def navigation_signals(self) -> NavigationSignals:
        if self._navigation_signals is None:
            from lifetracker.ui.infrastructure.signals import NavigationSignals

            self._navigation_signals = NavigationSignals()
        return self._navigation_signals


__all__ = ["Container"]
