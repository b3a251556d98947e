"""
Region animator: plays a coordinator plan on a QStackedWidget.

Exit-before-enter: the old widget animates out, then the stack switches and
the new widget animates in. A new ``show`` while one is running stops the
running animation and lets the coordinator release its scroll lock first.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QParallelAnimationGroup,
    QPoint,
    QPropertyAnimation,
    QSequentialAnimationGroup,
)
from PySide6.QtWidgets import (
    QGraphicsBlurEffect,
    QGraphicsOpacityEffect,
    QStackedWidget,
    QWidget,
)

from lifetracker.core.transitions import (
    ActiveTransition,
    TransitionCoordinator,
    TransitionParams,
    TransitionPlan,
    TransitionProfile,
)

log = logging.getLogger(__name__)


def _easing(params: TransitionParams) -> QEasingCurve:
    if params.profile is TransitionProfile.TAB:
        # Spring approximation: overshoot grows with stiffness, shrinks with damping.
        curve = QEasingCurve(QEasingCurve.Type.OutBack)
        curve.setOvershoot(params.stiffness / (params.damping * 20.0))
        return curve
    return QEasingCurve(QEasingCurve.Type.OutCubic)


class RegionAnimator(QObject):
    def __init__(self, stack: QStackedWidget, coordinator: TransitionCoordinator, region: str) -> None:
        super().__init__(stack)
        self._stack = stack
        self._coordinator = coordinator
        self._region = region
        self._group: QSequentialAnimationGroup | None = None
        self._active: ActiveTransition | None = None
        self._target: QWidget | None = None
        # Unmount mid-transition must still release the scroll lock.
        stack.destroyed.connect(lambda *_: coordinator.interrupt(region))

    @property
    def region(self) -> str:
        return self._region

    @property
    def running(self) -> bool:
        return self._group is not None

    @property
    def target(self) -> QWidget | None:
        return self._target

    def show(self, widget: QWidget, plan: TransitionPlan) -> None:
        self._stop_running()
        active = self._coordinator.begin(plan)
        old = self._stack.currentWidget()
        if not plan.params.animated or old is None or old is widget:
            self._stack.setCurrentWidget(widget)
            self._coordinator.complete(active)
            return

        self._active = active
        self._target = widget
        params = plan.params
        exit_phase = self._phase(old, params, entering=False)
        exit_phase.finished.connect(lambda: self._swap(old, widget, params))
        enter_phase = self._phase(widget, params, entering=True)

        group = QSequentialAnimationGroup(self)
        group.addAnimation(exit_phase)
        group.addAnimation(enter_phase)
        group.finished.connect(self._on_finished)
        self._group = group
        group.start()

    def settle(self) -> None:
        """Jump to the end state of the running transition, if any."""
        active, target = self._active, self._target
        self._stop_running()
        if target is not None:
            self._stack.setCurrentWidget(target)
        if active is not None:
            self._coordinator.complete(active)

    def _phase(self, widget: QWidget, params: TransitionParams, *, entering: bool) -> QParallelAnimationGroup:
        half = max(1, params.duration_ms // 2)
        phase = QParallelAnimationGroup(self)

        if params.offset_px:
            move = QPropertyAnimation(widget, b"pos", phase)
            move.setDuration(half)
            move.setEasingCurve(_easing(params))
            if entering:
                move.setStartValue(QPoint(params.enter_from, 0))
                move.setEndValue(QPoint(0, 0))
            else:
                move.setStartValue(QPoint(0, 0))
                move.setEndValue(QPoint(params.exit_to, 0))
            phase.addAnimation(move)

        if params.profile is TransitionProfile.SLIDE:
            blur = QGraphicsBlurEffect(widget)
            widget.setGraphicsEffect(blur)
            fx = QPropertyAnimation(blur, b"blurRadius", phase)
            hidden, shown = params.blur_radius, 0.0
        else:
            opacity = QGraphicsOpacityEffect(widget)
            widget.setGraphicsEffect(opacity)
            fx = QPropertyAnimation(opacity, b"opacity", phase)
            hidden, shown = 0.0, 1.0
        fx.setDuration(half)
        fx.setStartValue(hidden if entering else shown)
        fx.setEndValue(shown if entering else hidden)
        phase.addAnimation(fx)
        return phase

    def _swap(self, old: QWidget, new: QWidget, params: TransitionParams) -> None:
        old.setGraphicsEffect(None)
        old.move(0, 0)
        self._stack.setCurrentWidget(new)
        if params.offset_px:
            new.move(params.enter_from, 0)

    def _on_finished(self) -> None:
        group, active, target = self._group, self._active, self._target
        self._group = self._active = self._target = None
        if target is not None:
            target.setGraphicsEffect(None)
            target.move(0, 0)
        if group is not None:
            group.deleteLater()
        if active is not None:
            self._coordinator.complete(active)

    def _stop_running(self) -> None:
        group, target = self._group, self._target
        if group is None:
            return
        log.debug("Stopping running transition in %s", self._region)
        self._group = self._active = self._target = None
        if group.state() != QAbstractAnimation.State.Stopped:
            group.stop()
        group.deleteLater()
        current = self._stack.currentWidget()
        for w in (current, target):
            if w is not None:
                w.setGraphicsEffect(None)
                w.move(0, 0)
        # The coordinator releases the interrupted transition in begin().
