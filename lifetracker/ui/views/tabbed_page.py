"""Page with in-page tabs animated through the transition coordinator."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QStackedWidget, QTabBar, QVBoxLayout, QWidget

from lifetracker.ui.transitions import RegionAnimator

if TYPE_CHECKING:
    from lifetracker.ui.infrastructure.di import Container

TabSpec = tuple[str, Callable[[], QWidget]]  # (label, factory)


class TabbedPage(QWidget):
    """Tabs of one tab group, laid out in the registry's order.

    Every switch asks the coordinator for a plan with the previous key, so the
    slide direction is recomputed each time.
    """

    def __init__(
        self,
        container: Container,
        group: str,
        tabs: Mapping[str, TabSpec],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._container = container
        self._group = group
        self._region = f"tabs.{group}"
        ordered = [k for k in container.tab_registry.keys(group) if k in tabs]
        self._keys = ordered + [k for k in tabs if k not in ordered]
        self._widgets: dict[str, QWidget] = {}

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        self._bar = QTabBar()
        self._stack = QStackedWidget()
        for key in self._keys:
            label, factory = tabs[key]
            self._bar.addTab(label)
            widget = factory()
            self._widgets[key] = widget
            self._stack.addWidget(widget)
        root.addWidget(self._bar)
        root.addWidget(self._stack, 1)

        self._animator = RegionAnimator(self._stack, container.transitions, self._region)
        self._current: str | None = self._keys[0] if self._keys else None
        self._bar.currentChanged.connect(self._on_bar_changed)

    @property
    def group(self) -> str:
        return self._group

    @property
    def current_tab(self) -> str | None:
        return self._current

    @property
    def animator(self) -> RegionAnimator:
        return self._animator

    def tab_widget(self, key: str) -> QWidget | None:
        return self._widgets.get(key)

    def switch_tab(self, key: str) -> None:
        if key not in self._widgets or key == self._current:
            return
        previous, self._current = self._current, key
        plan = self._container.transitions.plan_tab(
            self._region, self._group, previous, key, width=self.window().width()
        )
        self._animator.show(self._widgets[key], plan)
        index = self._keys.index(key)
        if self._bar.currentIndex() != index:
            self._bar.blockSignals(True)
            self._bar.setCurrentIndex(index)
            self._bar.blockSignals(False)

    def _on_bar_changed(self, index: int) -> None:
        if 0 <= index < len(self._keys):
            self.switch_tab(self._keys[index])
