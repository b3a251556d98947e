from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock

from lifetracker.config import DEFAULT_ROUTE, MAX_HISTORY

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ViewFrame:
    id: str
    group_key: str | None = None


class ChangeType(str, Enum):
    PUSH = "push"
    BACK = "back"
    FORWARD = "forward"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class NavigationChange:
    type: ChangeType
    previous: ViewFrame | None
    current: ViewFrame


class NavigationStack:
    """Bounded history of visited top-level pages.

    Browser-history semantics: navigating from a non-top position drops the
    frames after the cursor. Every mutating call returns the resulting
    :class:`NavigationChange`, or ``None`` when it was a no-op.
    """

    def __init__(self, *, max_history: int = MAX_HISTORY, default_route: str = DEFAULT_ROUTE) -> None:
        if max_history < 1:
            raise ValueError("max_history must be >= 1")
        self._lock = RLock()
        self._frames: list[ViewFrame] = []
        self._cursor = -1
        self._max_history = max_history
        self._default_route = default_route

    @property
    def current(self) -> ViewFrame | None:
        with self._lock:
            if self._cursor < 0:
                return None
            return self._frames[self._cursor]

    @property
    def can_go_back(self) -> bool:
        with self._lock:
            return self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        with self._lock:
            return 0 <= self._cursor < len(self._frames) - 1

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    @property
    def history(self) -> tuple[ViewFrame, ...]:
        with self._lock:
            return tuple(self._frames)

    def navigate(self, target: str, origin_group: str | None = None) -> NavigationChange | None:
        with self._lock:
            previous = self.current
            if previous is not None and previous.id == target:
                return None
            del self._frames[self._cursor + 1 :]
            self._frames.append(ViewFrame(target, origin_group))
            if len(self._frames) > self._max_history:
                del self._frames[0]
            self._cursor = len(self._frames) - 1
            change = NavigationChange(ChangeType.PUSH, previous, self._frames[self._cursor])
        log.debug("Navigated to %s", target, extra={"route": target})
        return change

    def go_back(self) -> NavigationChange | None:
        with self._lock:
            if self._cursor <= 0:
                return None
            previous = self._frames[self._cursor]
            self._cursor -= 1
            return NavigationChange(ChangeType.BACK, previous, self._frames[self._cursor])

    def go_forward(self) -> NavigationChange | None:
        with self._lock:
            if not 0 <= self._cursor < len(self._frames) - 1:
                return None
            previous = self._frames[self._cursor]
            self._cursor += 1
            return NavigationChange(ChangeType.FORWARD, previous, self._frames[self._cursor])

    def reset(self, route: str | None = None) -> NavigationChange:
        """Drop all history and start over at ``route`` (default route if omitted)."""
        with self._lock:
            previous = self.current
            self._frames = [ViewFrame(route or self._default_route)]
            self._cursor = 0
            return NavigationChange(ChangeType.RESET, previous, self._frames[0])
