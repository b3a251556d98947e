from __future__ import annotations

from enum import Enum

from lifetracker.core.navigation.tab_order import TabOrderRegistry


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    NONE = "none"


def resolve_direction(
    registry: TabOrderRegistry, group: str, from_key: str | None, to_key: str
) -> Direction:
    """Classify a switch within ``group`` by comparing registered positions.

    Unknown keys, unknown groups and same-key switches all resolve to NONE.
    """
    if from_key is None or from_key == to_key:
        return Direction.NONE
    from_index = registry.order_of(group, from_key)
    to_index = registry.order_of(group, to_key)
    if from_index is None or to_index is None:
        return Direction.NONE
    return Direction.FORWARD if to_index > from_index else Direction.BACKWARD


class DirectionResolver:
    """Registry-bound direction lookup.

    Holds no state: callers pass the previous key on every switch.
    """

    DESKTOP_ROUTES = "routes.desktop"
    MOBILE_ROUTES = "routes.mobile"

    def __init__(self, registry: TabOrderRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> TabOrderRegistry:
        return self._registry

    def resolve(self, group: str, from_key: str | None, to_key: str) -> Direction:
        return resolve_direction(self._registry, group, from_key, to_key)

    def resolve_route(self, from_route: str | None, to_route: str, *, narrow: bool) -> Direction:
        group = self.MOBILE_ROUTES if narrow else self.DESKTOP_ROUTES
        return self.resolve(group, from_route, to_route)
