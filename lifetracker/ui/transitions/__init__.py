"""Qt adapters for the transition coordinator."""

from lifetracker.ui.transitions.animator import RegionAnimator
from lifetracker.ui.transitions.scroll import ScrollAreaSuspender

__all__ = ["RegionAnimator", "ScrollAreaSuspender"]
