"""
Stack controller: page QStackedWidget + lazy page creation.

A page is created on its first visit, on the next event-loop tick, so the
switch animation can start on a placeholder without blocking the UI.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable, Iterable, Mapping

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QLabel, QPlainTextEdit, QStackedWidget, QVBoxLayout, QWidget

from lifetracker.core.transitions import TransitionCoordinator, TransitionPlan
from lifetracker.ui.transitions import RegionAnimator

log = logging.getLogger(__name__)

PageFactory = Callable[[], QWidget]


def _placeholder_widget(title: str, subtitle: str = "") -> QWidget:
    w = QLabel(f"{title}\n{subtitle}")
    w.setStyleSheet("font-size: 14px; color: #94a3b8; padding: 24px;")
    w.setWordWrap(True)
    return w


class ErrorWidget(QWidget):
    def __init__(self, route: str, exc: BaseException, tb_text: str) -> None:
        super().__init__()
        root = QVBoxLayout(self)

        title = QLabel("Failed to load page")
        title.setStyleSheet("font-size: 16px; font-weight: bold; color: #ef4444;")
        root.addWidget(title)

        summary = QLabel(f"{route}: {type(exc).__name__}: {exc}")
        summary.setWordWrap(True)
        root.addWidget(summary)

        tb = QPlainTextEdit()
        tb.setReadOnly(True)
        tb.setPlainText(tb_text)
        tb.setMinimumHeight(180)
        root.addWidget(tb)
        root.addStretch(1)


class StackController:
    """Owns the page stack and plays page transitions through a RegionAnimator."""

    def __init__(
        self,
        stack: QStackedWidget,
        coordinator: TransitionCoordinator,
        factories: Mapping[str, PageFactory] | None = None,
        region: str = "page",
        remount: Iterable[str] = (),
    ) -> None:
        self._stack = stack
        self._factories = dict(factories or {})
        self._pages: dict[str, QWidget] = {}
        self._created: set[str] = set()
        self._pending_create: set[str] = set()
        self._remount = frozenset(remount)
        self._animator = RegionAnimator(stack, coordinator, region)

    @property
    def animator(self) -> RegionAnimator:
        return self._animator

    def page(self, route: str) -> QWidget | None:
        return self._pages.get(route)

    def is_created(self, route: str) -> bool:
        return route in self._created

    def switch_to(self, route: str, plan: TransitionPlan) -> None:
        if route in self._remount and route in self._created:
            self._discard(route)
        widget = self._pages.get(route)
        if widget is None:
            widget = _placeholder_widget("Loading…", route)
            widget.setObjectName(f"placeholder_{route}")
            self._pages[route] = widget
            self._stack.addWidget(widget)
            self._schedule_create(route)
        self._animator.show(widget, plan)

    def _discard(self, route: str) -> None:
        """Drop a cached page so the next visit mounts a fresh one."""
        widget = self._pages[route]
        if self._stack.currentWidget() is widget:
            return
        if self._animator.target is widget:
            self._animator.settle()
            return
        del self._pages[route]
        self._created.discard(route)
        self._stack.removeWidget(widget)
        teardown = getattr(widget, "teardown", None)
        if callable(teardown):
            teardown()
        widget.deleteLater()

    def _schedule_create(self, route: str) -> None:
        if route in self._created or route in self._pending_create:
            return
        self._pending_create.add(route)

        def _create() -> None:
            self._pending_create.discard(route)
            if route in self._created:
                return
            factory = self._factories.get(route) or (lambda: _placeholder_widget(route.title()))
            try:
                widget = factory()
            except Exception as exc:
                tb_text = traceback.format_exc()
                log.exception("Failed to create page '%s'", route, extra={"route": route})
                widget = ErrorWidget(route=route, exc=exc, tb_text=tb_text)
            placeholder = self._pages[route]
            if self._animator.target is placeholder:
                self._animator.settle()
            index = self._stack.indexOf(placeholder)
            was_current = self._stack.currentWidget() is placeholder
            self._stack.insertWidget(index, widget)
            if was_current:
                self._stack.setCurrentWidget(widget)
            self._stack.removeWidget(placeholder)
            placeholder.deleteLater()
            self._pages[route] = widget
            self._created.add(route)

        # bound to the stack: dropped if the page stack is destroyed first
        QTimer.singleShot(0, self._stack, _create)
