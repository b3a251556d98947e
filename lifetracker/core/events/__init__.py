"""Data-change event bus.

Commands that mutate data publish a :class:`ChangeEvent`; mounted views
subscribe with a kind filter and refetch. There is no buffering or replay: a
view that mounts later reads the current state itself.
"""

from .event_bus import ALL, EventBus, Subscription
from .events import (
    BULK_KINDS,
    CATEGORY_KINDS,
    NOTE_KINDS,
    TASK_KINDS,
    TIMER_KINDS,
    TRANSACTION_KINDS,
    ChangeEvent,
    ChangeKind,
)

__all__ = [
    "ALL",
    "EventBus",
    "Subscription",
    "ChangeEvent",
    "ChangeKind",
    "BULK_KINDS",
    "TASK_KINDS",
    "CATEGORY_KINDS",
    "TIMER_KINDS",
    "TRANSACTION_KINDS",
    "NOTE_KINDS",
]
