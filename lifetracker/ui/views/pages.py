"""Top-level pages and the route -> page factory table."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from lifetracker.core.events import (
    ALL,
    BULK_KINDS,
    CATEGORY_KINDS,
    NOTE_KINDS,
    TASK_KINDS,
    TIMER_KINDS,
    TRANSACTION_KINDS,
    ChangeKind,
)
from lifetracker.core.events.event_bus import KindFilter
from lifetracker.core.version import get_version_string
from lifetracker.ui.views.base import BackBar, DataView, Navigator
from lifetracker.ui.views.tabbed_page import TabbedPage

if TYPE_CHECKING:
    from lifetracker.ui.infrastructure.di import Container

_PLURALS = {"task": "tasks", "category": "categories", "transaction": "transactions", "note": "notes"}
_KINDS = {
    "task": TASK_KINDS,
    "category": CATEGORY_KINDS,
    "transaction": TRANSACTION_KINDS,
    "note": NOTE_KINDS,
}


class RecordListView(DataView):
    """Names of one entity, with an optional quick-create row."""

    def __init__(self, container: Container, entity: str, *, creatable: bool = True) -> None:
        super().__init__(container, kinds=_KINDS[entity] | BULK_KINDS)
        self._entity = entity
        self._plural = _PLURALS[entity]

        root = QVBoxLayout(self)
        self._count = QLabel()
        root.addWidget(self._count)
        self._list = QListWidget()
        root.addWidget(self._list, 1)

        if creatable:
            row = QHBoxLayout()
            self._name_edit = QLineEdit()
            self._name_edit.setPlaceholderText(f"New {entity}…")
            self._name_edit.returnPressed.connect(self._on_create)
            add_btn = QPushButton("Add")
            add_btn.clicked.connect(self._on_create)
            row.addWidget(self._name_edit, 1)
            row.addWidget(add_btn)
            root.addLayout(row)

        self.refresh()

    def refresh(self) -> None:
        records = self.query(f"list_{self._plural}", default=[]) or []
        self._count.setText(f"{self._plural.title()}: {len(records)}")
        self._list.clear()
        self._list.addItems([str(r.get("name", "")) for r in records])

    def _on_create(self) -> None:
        name = self._name_edit.text().strip()
        change = ChangeKind(f"{self._entity}_created")
        if self.run_command(f"create_{self._entity}", change, {"name": name}):
            self._name_edit.clear()


class StatisticsView(DataView):
    def __init__(self, container: Container, kinds: KindFilter = ALL) -> None:
        super().__init__(container, kinds=kinds)
        root = QVBoxLayout(self)
        self._label = QLabel()
        self._label.setWordWrap(True)
        root.addWidget(self._label)
        root.addStretch(1)
        self.refresh()

    def refresh(self) -> None:
        stats = self.query("get_data_statistics", default={}) or {}
        lines = [f"{k.removeprefix('total_').title()}: {v}" for k, v in stats.items()]
        self._label.setText("\n".join(lines) or "No data")


def timing_page(container: Container) -> TabbedPage:
    return TabbedPage(
        container,
        "timing",
        {
            "dashboard": ("Dashboard", lambda: StatisticsView(container, TASK_KINDS | TIMER_KINDS | BULK_KINDS)),
            "tasks": ("Tasks", lambda: RecordListView(container, "task")),
            "categories": ("Categories", lambda: RecordListView(container, "category")),
            "statistics": ("Statistics", lambda: StatisticsView(container)),
        },
    )


def accounting_page(container: Container) -> TabbedPage:
    return TabbedPage(
        container,
        "accounting",
        {
            "overview": ("Overview", lambda: StatisticsView(container, TRANSACTION_KINDS | BULK_KINDS)),
            "accounts": ("Accounts", lambda: RecordListView(container, "category", creatable=False)),
            "transactions": ("Transactions", lambda: RecordListView(container, "transaction")),
            "stats": ("Stats", lambda: StatisticsView(container)),
        },
    )


def notes_page(container: Container) -> TabbedPage:
    return TabbedPage(
        container,
        "notes",
        {
            "overview": ("Overview", lambda: StatisticsView(container, NOTE_KINDS | BULK_KINDS)),
            "editor": ("Editor", lambda: RecordListView(container, "note")),
            "library": ("Library", lambda: RecordListView(container, "note", creatable=False)),
            "stats": ("Stats", lambda: StatisticsView(container)),
        },
    )


DETAIL_TITLES = {
    "data-export": "Export data",
    "data-import": "Import data",
    "data-backup": "Backup & restore",
    "data-sync": "Sync",
    "data-cleanup": "Clean up",
}


class SystemOverviewPage(QWidget):
    def __init__(self, navigator: Navigator, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.addWidget(QLabel("Data management"))
        for route, title in DETAIL_TITLES.items():
            btn = QPushButton(title)
            btn.clicked.connect(lambda checked=False, r=route: navigator.navigate(r, "system"))
            root.addWidget(btn)
        root.addStretch(1)


class SystemDetailPage(DataView):
    """Detail page under the system overview; shows a back bar when reached from one."""

    def __init__(self, container: Container, navigator: Navigator, route: str) -> None:
        super().__init__(container, kinds=ALL)
        self._route = route
        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        self.back_bar = BackBar(container, navigator)
        root.addWidget(self.back_bar)
        root.addWidget(QLabel(DETAIL_TITLES.get(route, route)))
        self._summary = QLabel()
        root.addWidget(self._summary)
        if route == "data-cleanup":
            clear_btn = QPushButton("Clear all data")
            clear_btn.clicked.connect(self._on_clear)
            root.addWidget(clear_btn)
        root.addStretch(1)
        self.refresh()

    def refresh(self) -> None:
        stats = self.query("get_data_statistics", default={}) or {}
        self._summary.setText(", ".join(f"{k}: {v}" for k, v in stats.items()))

    def _on_clear(self) -> None:
        if self.run_command("clear_all_data", ChangeKind.ALL_DATA_CLEARED):
            notifications = self._container.notifications
            if notifications is not None:
                notifications.success("All data cleared")


def _label_page(text: str) -> QWidget:
    w = QLabel(text)
    w.setWordWrap(True)
    w.setStyleSheet("padding: 24px;")
    return w


def page_factories(container: Container, navigator: Navigator) -> dict[str, Callable[[], QWidget]]:
    factories: dict[str, Callable[[], QWidget]] = {
        "timing": lambda: timing_page(container),
        "accounting": lambda: accounting_page(container),
        "notes": lambda: notes_page(container),
        "data": lambda: SystemOverviewPage(navigator),
        "system": lambda: SystemOverviewPage(navigator),
        "settings": lambda: _label_page("Settings"),
        "about": lambda: _label_page(f"LifeTracker {get_version_string()}"),
    }
    for route in DETAIL_TITLES:
        factories[route] = lambda r=route: SystemDetailPage(container, navigator, r)
    return factories
