from __future__ import annotations

import os


def _import_qtwidgets_or_skip():
    import pytest

    pytest.importorskip("PySide6")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PySide6.QtWidgets import QApplication, QLabel, QStackedWidget
    except ImportError as exc:
        pytest.skip(f"PySide6 QtWidgets unavailable in this environment: {exc}")
    return QApplication, QLabel, QStackedWidget


class _FakeSuspender:
    def __init__(self) -> None:
        self.suspended = False

    def suspend(self) -> None:
        self.suspended = True

    def resume(self) -> None:
        self.suspended = False


def _setup():
    QApplication, QLabel, QStackedWidget = _import_qtwidgets_or_skip()

    from lifetracker.config import TAB_ORDER
    from lifetracker.core.navigation import DirectionResolver, TabOrderRegistry
    from lifetracker.core.transitions import ScrollLock, TransitionCoordinator
    from lifetracker.ui.transitions import RegionAnimator

    app = QApplication.instance() or QApplication([])
    suspender = _FakeSuspender()
    coordinator = TransitionCoordinator(DirectionResolver(TabOrderRegistry(TAB_ORDER)), ScrollLock(suspender))
    stack = QStackedWidget()
    old, new = QLabel("old"), QLabel("new")
    stack.addWidget(old)
    stack.addWidget(new)
    stack.setCurrentWidget(old)
    return app, coordinator, suspender, stack, RegionAnimator(stack, coordinator, "page"), old, new


def _slide(target: str):
    from lifetracker.core.navigation import Direction
    from lifetracker.core.transitions import TransitionPlan, TransitionProfile, build_params

    return TransitionPlan("page", target, build_params(TransitionProfile.SLIDE, Direction.FORWARD))


def test_settle_finishes_transition_and_resumes_scroll() -> None:
    _app, coordinator, suspender, stack, animator, _old, new = _setup()

    animator.show(new, _slide("new"))
    assert animator.running
    assert suspender.suspended

    animator.settle()

    assert not animator.running
    assert stack.currentWidget() is new
    assert not suspender.suspended
    assert not coordinator.is_running("page")


def test_static_show_interrupts_running_slide() -> None:
    _app, coordinator, suspender, stack, animator, old, new = _setup()
    from lifetracker.core.transitions import STATIC, TransitionPlan

    animator.show(new, _slide("new"))
    animator.show(old, TransitionPlan("page", "old", STATIC))

    assert not animator.running
    assert stack.currentWidget() is old
    assert not suspender.suspended


def test_destroying_the_stack_mid_transition_releases_scroll() -> None:
    app, coordinator, suspender, stack, animator, _old, new = _setup()
    from PySide6.QtCore import QCoreApplication, QEvent

    animator.show(new, _slide("new"))
    assert suspender.suspended

    stack.deleteLater()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)

    assert not suspender.suspended
    assert not coordinator.is_running("page")
