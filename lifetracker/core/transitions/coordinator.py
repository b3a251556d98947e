"""Transition coordinator.

Chooses a transition profile for page and tab switches and serializes
transitions per view region: starting a transition in a region first
interrupts the one already running there, releasing its scroll lock.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from lifetracker import config
from lifetracker.core.navigation.direction import Direction, DirectionResolver
from lifetracker.core.navigation.stack import ChangeType, NavigationChange
from lifetracker.core.transitions.params import (
    STATIC,
    TransitionParams,
    TransitionProfile,
    build_params,
    is_narrow,
)
from lifetracker.core.transitions.scroll_lock import ScrollLease, ScrollLock

log = logging.getLogger(__name__)

PAGE_REGION = "page"


@dataclass(frozen=True, slots=True)
class TransitionPlan:
    region: str
    target_id: str
    params: TransitionParams


@dataclass(slots=True, eq=False)
class ActiveTransition:
    token: int
    plan: TransitionPlan
    lease: ScrollLease | None = None
    finished: bool = field(default=False)

    def _release(self) -> None:
        self.finished = True
        if self.lease is not None:
            self.lease.release()


class TransitionCoordinator:
    def __init__(self, resolver: DirectionResolver, scroll_lock: ScrollLock | None = None) -> None:
        self._resolver = resolver
        self._scroll_lock = scroll_lock or ScrollLock()
        self._active: dict[str, ActiveTransition] = {}
        self._tokens = itertools.count(1)

    @property
    def scroll_lock(self) -> ScrollLock:
        return self._scroll_lock

    # --- planning ---
    def plan_page(self, change: NavigationChange, *, width: int | None = None) -> TransitionPlan:
        target = change.current.id
        previous = change.previous.id if change.previous is not None else None
        moving_back = change.type is ChangeType.BACK
        if target in config.SYSTEM_DETAIL_ROUTES:
            direction = Direction.BACKWARD if moving_back else Direction.FORWARD
            params = build_params(TransitionProfile.SLIDE, direction, width=width, lateral=False)
        elif target == config.SYSTEM_OVERVIEW and previous in config.SYSTEM_DETAIL_ROUTES:
            params = STATIC
        else:
            direction = self._resolver.resolve_route(previous, target, narrow=is_narrow(width))
            if direction is Direction.NONE:
                params = STATIC
            else:
                params = build_params(TransitionProfile.SLIDE, direction, width=width)
        return TransitionPlan(PAGE_REGION, target, params)

    def plan_tab(
        self,
        region: str,
        group: str,
        from_key: str | None,
        to_key: str,
        *,
        width: int | None = None,
    ) -> TransitionPlan:
        if from_key == to_key:
            return TransitionPlan(region, to_key, STATIC)
        direction = self._resolver.resolve(group, from_key, to_key)
        # Tabs always slide; an unclassifiable switch slides forward.
        if direction is Direction.NONE:
            direction = Direction.FORWARD
        params = build_params(TransitionProfile.TAB, direction, width=width)
        return TransitionPlan(region, to_key, params)

    # --- lifecycle ---
    def begin(self, plan: TransitionPlan) -> ActiveTransition:
        """Start ``plan``, interrupting whatever runs in the same region."""
        self.interrupt(plan.region)
        lease = self._scroll_lock.acquire() if plan.params.suspends_scroll else None
        active = ActiveTransition(next(self._tokens), plan, lease)
        if plan.params.animated:
            self._active[plan.region] = active
        else:
            active._release()
        log.debug(
            "Transition %s -> %s (%s)",
            plan.region,
            plan.target_id,
            plan.params.profile.value,
            extra={"region": plan.region, "direction": plan.params.direction.value},
        )
        return active

    def complete(self, active: ActiveTransition) -> None:
        """Mark ``active`` done. Stale or already finished transitions are ignored."""
        current = self._active.get(active.plan.region)
        if current is active:
            del self._active[active.plan.region]
        active._release()

    def interrupt(self, region: str) -> bool:
        active = self._active.pop(region, None)
        if active is None:
            return False
        log.debug("Interrupted transition in %s to %s", region, active.plan.target_id)
        active._release()
        return True

    def shutdown(self) -> None:
        """Release every in-flight transition (window teardown)."""
        for region in list(self._active):
            self.interrupt(region)

    def is_running(self, region: str) -> bool:
        return region in self._active

    def active_target(self, region: str) -> str | None:
        active = self._active.get(region)
        return active.plan.target_id if active is not None else None

    @contextmanager
    def run(self, plan: TransitionPlan) -> Iterator[ActiveTransition]:
        """Scoped transition: completed on exit, whether normal or by exception."""
        active = self.begin(plan)
        try:
            yield active
        finally:
            self.complete(active)
