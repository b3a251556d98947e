from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from lifetracker.ui.views.base import BackBar as BackBar
    from lifetracker.ui.views.base import DataView as DataView
    from lifetracker.ui.views.tabbed_page import TabbedPage as TabbedPage

__all__ = ["BackBar", "DataView", "TabbedPage"]


def __getattr__(name: str):
    if name in ("BackBar", "DataView"):
        from lifetracker.ui.views import base

        return getattr(base, name)
    if name == "TabbedPage":
        from lifetracker.ui.views.tabbed_page import TabbedPage

        return TabbedPage
    raise AttributeError(name)
