"""
Main window: sidebar + animated page stack inside a scroll area.

Every page switch goes through the navigation stack, and the resulting change
is planned by the transition coordinator before the stack controller plays it.
"""
from __future__ import annotations

import logging

from PySide6.QtGui import QAction, QCloseEvent, QKeySequence
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from lifetracker.config import SYSTEM_DETAIL_ROUTES
from lifetracker.core.navigation import NavigationChange
from lifetracker.core.version import get_version_string
from lifetracker.ui.components.status_banner import StatusBanner
from lifetracker.ui.infrastructure.di import Container
from lifetracker.ui.infrastructure.settings import AppSettings
from lifetracker.ui.shell.sidebar import CollapsibleSidebar
from lifetracker.ui.shell.stack_controller import StackController
from lifetracker.ui.transitions import ScrollAreaSuspender
from lifetracker.ui.views.pages import page_factories

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings, container: Container) -> None:
        super().__init__()
        self._settings = settings
        self._container = container
        self._navigation = container.navigation
        self.setWindowTitle(f"LifeTracker - {get_version_string()}")
        self.setMinimumSize(480, 560)
        self.resize(1100, 760)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._sidebar = CollapsibleSidebar(self, initial_collapsed=self._settings.get_sidebar_collapsed())
        self._sidebar.route_selected.connect(self.navigate)
        self._sidebar.back_requested.connect(self.go_back)
        self._sidebar.forward_requested.connect(self.go_forward)
        layout.addWidget(self._sidebar)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        self.status_banner = StatusBanner(content)
        content_layout.addWidget(self.status_banner)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._stack = QStackedWidget()
        self._scroll.setWidget(self._stack)
        content_layout.addWidget(self._scroll, 1)
        layout.addWidget(content, 1)

        container.transitions.scroll_lock.bind(ScrollAreaSuspender(self._scroll))
        self._stack_controller = StackController(
            self._stack,
            container.transitions,
            factories=page_factories(container, self),
            remount=SYSTEM_DETAIL_ROUTES,
        )

        self._setup_shortcuts()
        self._restore_geometry()
        self._apply(self._navigation.reset())

    @property
    def stack_controller(self) -> StackController:
        return self._stack_controller

    def _setup_shortcuts(self) -> None:
        for seq, slot in ((QKeySequence.StandardKey.Back, self.go_back), (QKeySequence.StandardKey.Forward, self.go_forward)):
            action = QAction(self)
            action.setShortcut(QKeySequence(seq))
            action.triggered.connect(slot)
            self.addAction(action)

    # --- Navigator ---
    def navigate(self, route: str, origin_group: str | None = None) -> None:
        change = self._navigation.navigate(route, origin_group)
        if change is not None:
            self._apply(change)

    def go_back(self) -> None:
        change = self._navigation.go_back()
        if change is not None:
            self._apply(change)

    def go_forward(self) -> None:
        change = self._navigation.go_forward()
        if change is not None:
            self._apply(change)

    def _apply(self, change: NavigationChange) -> None:
        plan = self._container.transitions.plan_page(change, width=self.width())
        log.info(
            "Page %s (%s, %s)",
            change.current.id,
            change.type.value,
            plan.params.profile.value,
            extra={"route": change.current.id, "direction": plan.params.direction.value},
        )
        self._stack_controller.switch_to(change.current.id, plan)
        self._sidebar.set_current_route(change.current.id)
        self._sidebar.set_history_state(self._navigation.can_go_back, self._navigation.can_go_forward)
        self._container.navigation_signals.navigated.emit(change)

    # --- persistence / teardown ---
    def _restore_geometry(self) -> None:
        geom = self._settings.get_main_window_geometry()
        if geom is not None:
            self.restoreGeometry(geom)
        state = self._settings.get_main_window_state()
        if state is not None:
            self.restoreState(state)

    def _save_geometry(self) -> None:
        self._settings.set_main_window_geometry(self.saveGeometry())
        self._settings.set_main_window_state(self.saveState())
        self._settings.set_sidebar_collapsed(self._sidebar.is_collapsed())
        self._settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self._save_geometry()
        self.status_banner.dispose()
        self._container.shutdown()
        super().closeEvent(event)
