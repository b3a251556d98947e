"""Error types surfaced at the UI boundary.

Empty history, unknown tab keys and similar local conditions resolve to a
safe default instead of raising. What does raise is bad static
configuration (``ValidationError``) and failures of the data-access
collaborator, which reach views as ``CommandError``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message if self.cause is None else f"{self.message} (cause: {self.cause!r})"


class ValidationError(AppError):
    """Malformed input: duplicate tab keys, unknown change kind, empty filter."""


class DomainError(AppError):
    """A record operation refers to something that does not exist."""


class IntegrationError(AppError):
    """The data-access collaborator failed."""


@dataclass(eq=False)
class CommandError(IntegrationError):
    """A named command did not commit; no change event was published for it."""

    command: str = ""
