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


def _coordinator():
    from lifetracker.config import TAB_ORDER
    from lifetracker.core.navigation import DirectionResolver, TabOrderRegistry
    from lifetracker.core.transitions import TransitionCoordinator

    return TransitionCoordinator(DirectionResolver(TabOrderRegistry(TAB_ORDER)))


def _static(route: str):
    from lifetracker.core.transitions import STATIC, TransitionPlan

    return TransitionPlan("page", route, STATIC)


def test_stack_controller_creates_page_on_next_event_loop_tick() -> None:
    QApplication, QLabel, QStackedWidget = _import_qtwidgets_or_skip()

    from lifetracker.ui.shell.stack_controller import StackController

    app = QApplication.instance() or QApplication([])
    stack = QStackedWidget()

    created = {"count": 0}

    def _factory():
        created["count"] += 1
        return QLabel("ready")

    controller = StackController(stack, _coordinator(), factories={"notes": _factory})

    controller.switch_to("notes", _static("notes"))
    assert created["count"] == 0
    assert not controller.is_created("notes")

    app.processEvents()
    assert created["count"] == 1
    assert controller.is_created("notes")
    assert stack.currentWidget() is controller.page("notes")
    assert stack.count() == 1


def test_stack_controller_renders_error_widget_when_factory_crashes() -> None:
    QApplication, QLabel, QStackedWidget = _import_qtwidgets_or_skip()

    from lifetracker.ui.shell.stack_controller import StackController

    app = QApplication.instance() or QApplication([])
    stack = QStackedWidget()

    def _boom():
        raise RuntimeError("factory failed")

    controller = StackController(stack, _coordinator(), factories={"notes": _boom})
    controller.switch_to("notes", _static("notes"))
    app.processEvents()

    labels = [w.text() for w in stack.currentWidget().findChildren(QLabel)]
    assert any("Failed to load page" in t for t in labels)
    assert any("factory failed" in t for t in labels)


def test_remount_routes_get_a_fresh_page_per_visit() -> None:
    QApplication, QLabel, QStackedWidget = _import_qtwidgets_or_skip()

    from lifetracker.ui.shell.stack_controller import StackController

    app = QApplication.instance() or QApplication([])
    stack = QStackedWidget()
    created = {"data-export": 0, "system": 0}

    def _make(route: str):
        def _factory():
            created[route] += 1
            return QLabel(route)

        return _factory

    controller = StackController(
        stack,
        _coordinator(),
        factories={r: _make(r) for r in created},
        remount=("data-export",),
    )

    for route in ("system", "data-export", "system", "data-export", "system"):
        controller.switch_to(route, _static(route))
        app.processEvents()

    assert created == {"data-export": 2, "system": 1}
