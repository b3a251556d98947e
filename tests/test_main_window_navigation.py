from __future__ import annotations

import os


def _import_qtwidgets_or_skip():
    import pytest

    pytest.importorskip("PySide6")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError as exc:
        pytest.skip(f"PySide6 QtWidgets unavailable in this environment: {exc}")
    return QApplication


def _window(tmp_path):
    QApplication = _import_qtwidgets_or_skip()
    from PySide6.QtCore import QSettings

    from lifetracker.ui.infrastructure.di import Container
    from lifetracker.ui.infrastructure.settings import AppSettings
    from lifetracker.ui.shell import MainWindow

    app = QApplication.instance() or QApplication([])
    settings = AppSettings(QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat))
    container = Container()
    return app, container, MainWindow(settings, container)


def test_window_starts_on_default_route(tmp_path) -> None:
    app, container, window = _window(tmp_path)
    app.processEvents()

    assert container.navigation.current.id == "timing"
    assert not container.navigation.can_go_back
    assert window.stack_controller.is_created("timing")


def test_navigation_updates_history_and_emits(tmp_path) -> None:
    _app, container, window = _window(tmp_path)
    changes = []
    container.navigation_signals.navigated.connect(changes.append)

    window.navigate("notes")
    window.navigate("about")
    window.go_back()

    assert [c.current.id for c in changes] == ["notes", "about", "notes"]
    assert container.navigation.current.id == "notes"
    assert container.navigation.can_go_forward

    window.go_forward()
    assert container.navigation.current.id == "about"


def test_close_releases_transitions_and_subscribers(tmp_path) -> None:
    app, container, window = _window(tmp_path)
    window.show()
    window.navigate("accounting")
    app.processEvents()

    window.close()

    assert not container.transitions.scroll_lock.held
    assert not container.transitions.is_running("page")
    assert container.event_bus.subscriber_count == 0


def test_deleting_window_mid_slide_tears_down_cleanly(tmp_path, monkeypatch) -> None:
    import sys

    from PySide6.QtCore import QCoreApplication, QEvent

    app, container, window = _window(tmp_path)
    unhandled: list[BaseException] = []
    monkeypatch.setattr(sys, "excepthook", lambda _t, exc, _tb: unhandled.append(exc))

    window.navigate("about")
    assert container.transitions.is_running("page")
    assert container.transitions.scroll_lock.held

    # no closeEvent: the window goes away while the slide and lazy page creation are pending
    window.deleteLater()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)
    app.processEvents()

    assert unhandled == []
    assert not container.transitions.scroll_lock.held
    assert not container.transitions.is_running("page")
