from __future__ import annotations

import gc

from lifetracker.core.events import ALL, ChangeEvent, ChangeKind, EventBus


class _View:
    def __init__(self) -> None:
        self.seen: list[ChangeKind] = []

    def on_change(self, event: ChangeEvent) -> None:
        self.seen.append(event.type)


def test_weak_subscription_delivers_while_owner_alive() -> None:
    bus = EventBus()
    view = _View()
    bus.subscribe_weak(ALL, view.on_change)

    bus.publish(ChangeEvent(ChangeKind.NOTE_CREATED))

    assert view.seen == [ChangeKind.NOTE_CREATED]


def test_weak_subscription_is_dropped_after_owner_is_collected() -> None:
    bus = EventBus()
    view = _View()
    sub = bus.subscribe_weak(ALL, view.on_change)
    del view
    gc.collect()

    bus.publish(ChangeEvent(ChangeKind.NOTE_CREATED))

    assert not bus.is_subscribed(sub)
    assert bus.subscriber_count == 0


def test_weak_subscription_falls_back_for_plain_functions() -> None:
    bus = EventBus()
    seen: list[ChangeKind] = []

    bus.subscribe_weak(ChangeKind.TASK_CREATED, lambda e: seen.append(e.type))
    gc.collect()
    bus.publish(ChangeEvent(ChangeKind.TASK_CREATED))

    assert seen == [ChangeKind.TASK_CREATED]
