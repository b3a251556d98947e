"""App shell: main window, collapsible sidebar, stack controller, lazy pages."""

from lifetracker.ui.shell.main_window import MainWindow
from lifetracker.ui.shell.sidebar import CollapsibleSidebar
from lifetracker.ui.shell.stack_controller import StackController

__all__ = ["MainWindow", "CollapsibleSidebar", "StackController"]
