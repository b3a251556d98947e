from __future__ import annotations

from lifetracker import config
from lifetracker.config import TAB_ORDER
from lifetracker.core.navigation import (
    Direction,
    DirectionResolver,
    NavigationStack,
    TabOrderRegistry,
)
from lifetracker.core.transitions import (
    STATIC,
    TransitionCoordinator,
    TransitionProfile,
    build_params,
    is_narrow,
)


def _coordinator() -> TransitionCoordinator:
    return TransitionCoordinator(DirectionResolver(TabOrderRegistry(TAB_ORDER)))


def test_wide_slide_uses_full_offset_and_blur() -> None:
    params = build_params(TransitionProfile.SLIDE, Direction.FORWARD, width=1200)

    assert params.offset_px == config.SLIDE_OFFSET_PX
    assert params.blur_radius == config.SLIDE_BLUR_RADIUS
    assert params.duration_ms == config.SLIDE_DURATION_MS
    assert params.enter_from > 0 > params.exit_to
    assert params.suspends_scroll


def test_narrow_width_shortens_and_shrinks_motion() -> None:
    wide = build_params(TransitionProfile.SLIDE, Direction.BACKWARD, width=1024)
    narrow = build_params(TransitionProfile.SLIDE, Direction.BACKWARD, width=500)

    assert is_narrow(500) and not is_narrow(768) and not is_narrow(None)
    assert narrow.duration_ms <= config.NARROW_MAX_DURATION_MS
    assert narrow.offset_px == int(wide.offset_px * config.NARROW_OFFSET_SCALE)
    assert narrow.enter_from < 0


def test_tab_profile_does_not_suspend_scroll() -> None:
    params = build_params(TransitionProfile.TAB, Direction.FORWARD)

    assert params.animated
    assert params.offset_px == config.TAB_OFFSET_PX
    assert not params.suspends_scroll


def test_static_is_not_animated() -> None:
    assert not STATIC.animated
    assert not STATIC.suspends_scroll
    assert build_params(TransitionProfile.STATIC, Direction.FORWARD) is STATIC


def test_top_level_page_change_slides_in_route_direction() -> None:
    stack = NavigationStack()
    stack.reset("timing")
    plan = _coordinator().plan_page(stack.navigate("notes"), width=1200)

    assert plan.target_id == "notes"
    assert plan.params.profile is TransitionProfile.SLIDE
    assert plan.params.direction is Direction.FORWARD


def test_first_page_is_static() -> None:
    plan = _coordinator().plan_page(NavigationStack().reset(), width=1200)

    assert plan.params is STATIC


def test_system_detail_slides_without_offset() -> None:
    stack = NavigationStack()
    stack.reset("system")
    plan = _coordinator().plan_page(stack.navigate("data-export", "system"), width=1200)

    assert plan.params.profile is TransitionProfile.SLIDE
    assert plan.params.offset_px == 0
    assert plan.params.duration_ms == config.DETAIL_DURATION_MS
    assert plan.params.direction is Direction.FORWARD


def test_returning_to_system_overview_is_static() -> None:
    stack = NavigationStack()
    stack.reset("system")
    stack.navigate("data-backup", "system")
    plan = _coordinator().plan_page(stack.go_back(), width=1200)

    assert plan.target_id == "system"
    assert plan.params is STATIC


def test_tab_switch_direction_follows_tab_order() -> None:
    coordinator = _coordinator()

    forward = coordinator.plan_tab("tabs.timing", "timing", "dashboard", "statistics")
    backward = coordinator.plan_tab("tabs.timing", "timing", "statistics", "tasks")

    assert forward.params.profile is TransitionProfile.TAB
    assert forward.params.direction is Direction.FORWARD
    assert backward.params.direction is Direction.BACKWARD


def test_unclassifiable_tab_switch_slides_forward() -> None:
    plan = _coordinator().plan_tab("tabs.notes", "notes", "overview", "drafts")

    assert plan.params.profile is TransitionProfile.TAB
    assert plan.params.direction is Direction.FORWARD


def test_same_tab_is_static() -> None:
    plan = _coordinator().plan_tab("tabs.notes", "notes", "editor", "editor")

    assert plan.params is STATIC
