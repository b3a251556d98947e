from __future__ import annotations

import pytest

from lifetracker.core.errors import ValidationError
from lifetracker.core.events import (
    ALL,
    BULK_KINDS,
    TASK_KINDS,
    ChangeEvent,
    ChangeKind,
    EventBus,
)


def _collect(bus: EventBus, kinds) -> list[ChangeKind]:
    seen: list[ChangeKind] = []
    bus.subscribe(kinds, lambda e: seen.append(e.type))
    return seen


def test_filtered_subscriber_only_sees_its_kinds() -> None:
    bus = EventBus()
    tasks = _collect(bus, TASK_KINDS)
    everything = _collect(bus, ALL)

    bus.publish(ChangeEvent(ChangeKind.TASK_DELETED))
    bus.publish(ChangeEvent(ChangeKind.TRANSACTION_CREATED))

    assert tasks == [ChangeKind.TASK_DELETED]
    assert everything == [ChangeKind.TASK_DELETED, ChangeKind.TRANSACTION_CREATED]


def test_single_kind_filter() -> None:
    bus = EventBus()
    seen = _collect(bus, ChangeKind.ALL_DATA_CLEARED)

    bus.publish(ChangeEvent(ChangeKind.DATA_IMPORTED))
    bus.publish(ChangeEvent(ChangeKind.ALL_DATA_CLEARED))

    assert seen == [ChangeKind.ALL_DATA_CLEARED]


def test_union_of_kind_sets() -> None:
    bus = EventBus()
    seen = _collect(bus, TASK_KINDS | BULK_KINDS)

    for kind in (ChangeKind.TASK_CREATED, ChangeKind.NOTE_CREATED, ChangeKind.DATABASE_RESTORED):
        bus.publish(ChangeEvent(kind))

    assert seen == [ChangeKind.TASK_CREATED, ChangeKind.DATABASE_RESTORED]


def test_publish_without_subscribers_is_a_noop() -> None:
    EventBus().publish(ChangeEvent(ChangeKind.TIMER_STARTED))


@pytest.mark.parametrize("bad", [set(), [], "everything"])
def test_invalid_filter_is_rejected(bad) -> None:
    with pytest.raises(ValidationError):
        EventBus().subscribe(bad, lambda _e: None)


def test_subscription_accepts() -> None:
    bus = EventBus()
    sub = bus.subscribe({ChangeKind.NOTE_CREATED}, lambda _e: None)

    assert sub.accepts(ChangeKind.NOTE_CREATED)
    assert not sub.accepts(ChangeKind.NOTE_DELETED)
    assert bus.subscribe(ALL, lambda _e: None).kinds is None
