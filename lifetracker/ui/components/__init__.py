"""Reusable UI components."""

from lifetracker.ui.components.status_banner import StatusBanner

__all__ = ["StatusBanner"]
