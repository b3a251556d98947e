"""Transition selection and serialization (Qt-free)."""

from .coordinator import PAGE_REGION, ActiveTransition, TransitionCoordinator, TransitionPlan
from .params import STATIC, TransitionParams, TransitionProfile, build_params, is_narrow
from .scroll_lock import ScrollLease, ScrollLock, ScrollSuspender

__all__ = [
    "PAGE_REGION",
    "STATIC",
    "ActiveTransition",
    "ScrollLease",
    "ScrollLock",
    "ScrollSuspender",
    "TransitionCoordinator",
    "TransitionParams",
    "TransitionPlan",
    "TransitionProfile",
    "build_params",
    "is_narrow",
]
