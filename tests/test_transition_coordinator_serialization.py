from __future__ import annotations

import pytest

from lifetracker.config import TAB_ORDER
from lifetracker.core.navigation import Direction, DirectionResolver, TabOrderRegistry
from lifetracker.core.transitions import (
    STATIC,
    ScrollLock,
    TransitionCoordinator,
    TransitionPlan,
    TransitionProfile,
    build_params,
)


class _FakeSuspender:
    def __init__(self) -> None:
        self.suspended = False
        self.calls: list[str] = []

    def suspend(self) -> None:
        self.suspended = True
        self.calls.append("suspend")

    def resume(self) -> None:
        self.suspended = False
        self.calls.append("resume")


def _setup() -> tuple[TransitionCoordinator, _FakeSuspender]:
    suspender = _FakeSuspender()
    coordinator = TransitionCoordinator(
        DirectionResolver(TabOrderRegistry(TAB_ORDER)), ScrollLock(suspender)
    )
    return coordinator, suspender


def _slide(target: str, region: str = "page") -> TransitionPlan:
    return TransitionPlan(region, target, build_params(TransitionProfile.SLIDE, Direction.FORWARD))


def test_slide_suspends_scroll_until_complete() -> None:
    coordinator, suspender = _setup()

    active = coordinator.begin(_slide("notes"))
    assert suspender.suspended
    assert coordinator.is_running("page")

    coordinator.complete(active)
    assert not suspender.suspended
    assert not coordinator.scroll_lock.held
    assert active.finished


def test_new_transition_interrupts_previous_in_same_region() -> None:
    coordinator, suspender = _setup()

    first = coordinator.begin(_slide("notes"))
    second = coordinator.begin(_slide("about"))

    assert first.finished
    assert not second.finished
    assert coordinator.active_target("page") == "about"
    assert suspender.calls == ["suspend", "resume", "suspend"]

    # completing the stale one must not end the running one
    coordinator.complete(first)
    assert coordinator.is_running("page")
    assert suspender.suspended

    coordinator.complete(second)
    assert not suspender.suspended


def test_regions_run_independently() -> None:
    coordinator, _ = _setup()

    page = coordinator.begin(_slide("notes"))
    tab = coordinator.begin(
        TransitionPlan("tabs.notes", "editor", build_params(TransitionProfile.TAB, Direction.FORWARD))
    )

    assert not page.finished and not tab.finished
    assert coordinator.is_running("page") and coordinator.is_running("tabs.notes")


def test_static_plan_completes_immediately() -> None:
    coordinator, suspender = _setup()

    active = coordinator.begin(TransitionPlan("page", "timing", STATIC))

    assert active.finished
    assert not coordinator.is_running("page")
    assert suspender.calls == []


def test_interrupt_releases_scroll_lock() -> None:
    coordinator, suspender = _setup()
    coordinator.begin(_slide("notes"))

    assert coordinator.interrupt("page") is True
    assert coordinator.interrupt("page") is False
    assert not suspender.suspended


def test_run_releases_on_exception() -> None:
    coordinator, suspender = _setup()

    with pytest.raises(RuntimeError):
        with coordinator.run(_slide("notes")) as active:
            assert suspender.suspended
            raise RuntimeError("unmounted")

    assert active.finished
    assert not suspender.suspended
    assert not coordinator.is_running("page")


def test_shutdown_releases_every_region() -> None:
    coordinator, suspender = _setup()
    coordinator.begin(_slide("notes"))
    coordinator.begin(_slide("detail", region="dialog"))
    assert suspender.calls == ["suspend"]

    coordinator.shutdown()

    assert not coordinator.scroll_lock.held
    assert not suspender.suspended
    assert not coordinator.is_running("page") and not coordinator.is_running("dialog")
