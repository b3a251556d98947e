"""Use cases (application services)."""

from .run_command import CommandRequest, RunCommandUseCase

__all__ = ["CommandRequest", "RunCommandUseCase"]
