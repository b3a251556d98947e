"""Page history, tab orders and transition direction."""

from .direction import Direction, DirectionResolver, resolve_direction
from .stack import ChangeType, NavigationChange, NavigationStack, ViewFrame
from .tab_order import TabOrderRegistry

__all__ = [
    "ChangeType",
    "Direction",
    "DirectionResolver",
    "NavigationChange",
    "NavigationStack",
    "TabOrderRegistry",
    "ViewFrame",
    "resolve_direction",
]
