from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Literal, Union, cast
from weakref import WeakMethod

from lifetracker.core.errors import ValidationError
from lifetracker.core.events.events import ChangeEvent, ChangeKind

logger = logging.getLogger(__name__)

ALL: Literal["all"] = "all"

KindFilter = Union[Iterable[ChangeKind], ChangeKind, Literal["all"]]
Handler = Callable[[ChangeEvent], None]


@dataclass(frozen=True, slots=True, eq=False)
class Subscription:
    """Handle returned by :meth:`EventBus.subscribe`.

    ``kinds`` is ``None`` for an unfiltered ("all") subscription.
    """

    subscriber_id: int
    kinds: frozenset[ChangeKind] | None
    handler: Handler
    bus: EventBus = field(repr=False)

    def accepts(self, kind: ChangeKind) -> bool:
        return self.kinds is None or kind in self.kinds

    def unsubscribe(self) -> None:
        self.bus.unsubscribe(self)


def _normalize_filter(kinds: KindFilter) -> frozenset[ChangeKind] | None:
    if isinstance(kinds, str) and not isinstance(kinds, ChangeKind):
        if kinds == ALL:
            return None
        raise ValidationError(f"Unknown subscription filter: {kinds!r}")
    if isinstance(kinds, ChangeKind):
        return frozenset({kinds})
    normalized = frozenset(kinds)
    if not normalized:
        raise ValidationError("Subscription filter must name at least one change kind")
    return normalized


class EventBus:
    """Synchronous, in-process data-change bus.

    - Subscribers are notified in registration order, before ``publish`` returns.
    - ``publish`` iterates a snapshot taken at call time: subscribers added by a
      handler are not notified of the event being delivered, and a subscriber
      removed mid-delivery is skipped if its turn has not come yet.
    - A failing handler is logged and does not stop delivery to the others.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._ids = itertools.count(1)
        # dict keeps insertion order == registration order
        self._subs: dict[int, Subscription] = {}

    def subscribe(self, kinds: KindFilter, handler: Handler) -> Subscription:
        sub = Subscription(
            subscriber_id=next(self._ids),
            kinds=_normalize_filter(kinds),
            handler=handler,
            bus=self,
        )
        with self._lock:
            self._subs[sub.subscriber_id] = sub
        return sub

    def subscribe_weak(self, kinds: KindFilter, handler: Handler) -> Subscription:
        """Subscribe with a weak reference when possible.

        Intended for Qt views. If the owner is garbage-collected, the
        subscription is removed on the next delivery.
        """

        wm: WeakMethod | None
        try:
            # Only bound methods are supported by WeakMethod; others raise TypeError.
            wm = WeakMethod(cast(Any, handler))
        except TypeError:
            wm = None

        if wm is None:
            return self.subscribe(kinds, handler)

        sub: Subscription

        def _wrapped(event: ChangeEvent) -> None:
            alive = wm()
            if alive is None:
                self.unsubscribe(sub)
                return
            alive(event)

        sub = self.subscribe(kinds, _wrapped)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription. Unknown or already removed handles are ignored."""
        with self._lock:
            self._subs.pop(subscription.subscriber_id, None)

    def is_subscribed(self, subscription: Subscription) -> bool:
        with self._lock:
            return subscription.subscriber_id in self._subs

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subs)

    def publish(self, event: ChangeEvent) -> None:
        # Copy subscribers under lock, then execute outside the lock.
        with self._lock:
            snapshot = list(self._subs.values())
        for sub in snapshot:
            if not sub.accepts(event.type):
                continue
            with self._lock:
                if sub.subscriber_id not in self._subs:
                    continue
            try:
                sub.handler(event)
            except Exception:
                logger.exception(
                    "Change handler failed",
                    extra={
                        "event": "handler_failed",
                        "change_kind": event.type.value,
                        "handler": repr(sub.handler),
                    },
                )

    def clear(self) -> None:
        """Remove all subscriptions."""
        with self._lock:
            self._subs.clear()
