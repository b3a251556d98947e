"""
Collapsible sidebar: top-level route buttons plus back/forward.
"""
from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QSizePolicy,
    QStyle,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

SIDEBAR_WIDTH_EXPANDED = 200
SIDEBAR_WIDTH_COLLAPSED = 56
ANIMATION_DURATION_MS = 200

NAV_ITEMS = (
    ("timing", "Timing", "Tasks, timers and categories", QStyle.StandardPixmap.SP_MediaPlay),
    ("accounting", "Accounting", "Accounts and transactions", QStyle.StandardPixmap.SP_DriveHDIcon),
    ("notes", "Notes", "Notes library and editor", QStyle.StandardPixmap.SP_FileIcon),
    ("data", "Data", "Export, import, backup, sync", QStyle.StandardPixmap.SP_DirIcon),
    ("settings", "Settings", "Preferences", QStyle.StandardPixmap.SP_FileDialogDetailedView),
    ("about", "About", "Version information", QStyle.StandardPixmap.SP_MessageBoxInformation),
)


class SidebarButton(QToolButton):
    """Single nav button: icon + optional text (hidden when collapsed)."""

    def __init__(
        self,
        parent: QWidget | None,
        route: str,
        label: str,
        tooltip: str,
        icon_style: QStyle.StandardPixmap,
    ) -> None:
        super().__init__(parent)
        self._route = route
        self.label = label
        self.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.setIcon(self.style().standardIcon(icon_style))
        self.setText(label)
        self.setToolTip(tooltip)
        self.setCheckable(True)
        self.setSizePolicy(QSizePolicy.Policy.Minimum, QSizePolicy.Policy.Fixed)
        self.setMinimumHeight(40)

    @property
    def route(self) -> str:
        return self._route


class CollapsibleSidebar(QFrame):
    """Vertical route list with back/forward and a collapse toggle."""

    route_selected = Signal(str)
    back_requested = Signal()
    forward_requested = Signal()

    def __init__(self, parent: QWidget | None, initial_collapsed: bool = False) -> None:
        super().__init__(parent)
        self._collapsed = initial_collapsed
        self._buttons: list[SidebarButton] = []
        self._animations: list[QPropertyAnimation] = []

        self.setObjectName("collapsibleSidebar")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._set_sidebar_width(SIDEBAR_WIDTH_COLLAPSED if initial_collapsed else SIDEBAR_WIDTH_EXPANDED)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 12, 4, 8)
        layout.setSpacing(4)

        history_row = QHBoxLayout()
        self._back_btn = QToolButton(self)
        self._back_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_ArrowBack))
        self._back_btn.setToolTip("Back (Alt+Left)")
        self._back_btn.clicked.connect(self.back_requested.emit)
        self._forward_btn = QToolButton(self)
        self._forward_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_ArrowForward))
        self._forward_btn.setToolTip("Forward (Alt+Right)")
        self._forward_btn.clicked.connect(self.forward_requested.emit)
        history_row.addWidget(self._back_btn)
        history_row.addWidget(self._forward_btn)
        history_row.addStretch(1)
        layout.addLayout(history_row)
        self.set_history_state(False, False)

        for route, label, tooltip, pixmap in NAV_ITEMS:
            btn = SidebarButton(self, route, label, tooltip, pixmap)
            btn.clicked.connect(lambda checked=False, r=route: self.route_selected.emit(r))
            if initial_collapsed:
                btn.setText("")
            self._buttons.append(btn)
            layout.addWidget(btn)
        layout.addStretch(1)

        self._toggle_btn = QToolButton(self)
        self._toggle_btn.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self._toggle_btn.setMinimumHeight(36)
        self._toggle_btn.clicked.connect(lambda: self.set_collapsed(not self._collapsed))
        self._update_toggle_button()
        layout.addWidget(self._toggle_btn)

    def _set_sidebar_width(self, w: int) -> None:
        self.setMinimumWidth(w)
        self.setMaximumWidth(w)

    def is_collapsed(self) -> bool:
        return self._collapsed

    def set_collapsed(self, collapsed: bool) -> None:
        if self._collapsed == collapsed:
            return
        self._collapsed = collapsed
        target = SIDEBAR_WIDTH_COLLAPSED if collapsed else SIDEBAR_WIDTH_EXPANDED
        current = self.width()

        for anim in self._animations:
            anim.stop()
        self._animations = []
        for prop in (b"minimumWidth", b"maximumWidth"):
            anim = QPropertyAnimation(self, prop, self)
            anim.setDuration(ANIMATION_DURATION_MS)
            anim.setEasingCurve(QEasingCurve.Type.OutCubic)
            anim.setStartValue(current)
            anim.setEndValue(target)
            self._animations.append(anim)
        self._animations[0].finished.connect(self._on_animation_finished)
        for anim in self._animations:
            anim.start()
        self._update_toggle_button()

    def _on_animation_finished(self) -> None:
        self._set_sidebar_width(SIDEBAR_WIDTH_COLLAPSED if self._collapsed else SIDEBAR_WIDTH_EXPANDED)
        for btn in self._buttons:
            btn.setText("" if self._collapsed else btn.label)

    def _update_toggle_button(self) -> None:
        if self._collapsed:
            self._toggle_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_ArrowRight))
            self._toggle_btn.setText("")
            self._toggle_btn.setToolTip("Expand sidebar")
        else:
            self._toggle_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_ArrowLeft))
            self._toggle_btn.setText("Collapse")
            self._toggle_btn.setToolTip("Collapse sidebar")

    def set_current_route(self, route: str) -> None:
        for btn in self._buttons:
            btn.setChecked(btn.route == route)

    def set_history_state(self, can_go_back: bool, can_go_forward: bool) -> None:
        self._back_btn.setEnabled(can_go_back)
        self._forward_btn.setEnabled(can_go_forward)
