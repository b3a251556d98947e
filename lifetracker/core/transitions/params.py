"""Transition profiles and their animation parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lifetracker import config
from lifetracker.core.navigation.direction import Direction


class TransitionProfile(str, Enum):
    SLIDE = "slide"  # top-level page change: screen-edge offset + blur
    TAB = "tab"  # in-page tab switch: small offset, spring
    STATIC = "static"  # no animation


@dataclass(frozen=True, slots=True)
class TransitionParams:
    profile: TransitionProfile
    direction: Direction
    offset_px: int = 0
    blur_radius: float = 0.0
    duration_ms: int = 0
    stiffness: int = 0
    damping: int = 0

    @property
    def animated(self) -> bool:
        return self.profile is not TransitionProfile.STATIC and self.duration_ms > 0

    @property
    def enter_from(self) -> int:
        """Horizontal start offset of the entering content."""
        return -self.offset_px if self.direction is Direction.BACKWARD else self.offset_px

    @property
    def exit_to(self) -> int:
        """Horizontal end offset of the leaving content."""
        return -self.enter_from

    @property
    def suspends_scroll(self) -> bool:
        return self.profile is TransitionProfile.SLIDE and self.animated


STATIC = TransitionParams(TransitionProfile.STATIC, Direction.NONE)


def is_narrow(width: int | None) -> bool:
    return width is not None and width < config.NARROW_WIDTH_THRESHOLD


def build_params(
    profile: TransitionProfile,
    direction: Direction,
    *,
    width: int | None = None,
    lateral: bool = True,
) -> TransitionParams:
    """Parameters for ``profile``; narrow widths get shorter, smaller motion.

    ``lateral=False`` keeps the blur/fade but drops the horizontal offset
    (used for system detail pages).
    """
    if profile is TransitionProfile.STATIC:
        return STATIC
    narrow = is_narrow(width)
    if profile is TransitionProfile.SLIDE:
        offset = config.SLIDE_OFFSET_PX if lateral else 0
        blur = config.SLIDE_BLUR_RADIUS
        duration = config.SLIDE_DURATION_MS if lateral else config.DETAIL_DURATION_MS
    else:
        offset = config.TAB_OFFSET_PX
        blur = config.TAB_BLUR_RADIUS
        duration = config.TAB_DURATION_MS
    if narrow:
        offset = int(offset * config.NARROW_OFFSET_SCALE)
        duration = min(duration, config.NARROW_MAX_DURATION_MS)
    idx = 1 if narrow else 0
    return TransitionParams(
        profile=profile,
        direction=direction,
        offset_px=offset,
        blur_radius=blur,
        duration_ms=duration,
        stiffness=config.SPRING_STIFFNESS[idx],
        damping=config.SPRING_DAMPING[idx],
    )
