"""Run a mutating command and announce the committed change."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from lifetracker.application.ports.commands import CommandPort
from lifetracker.core.errors import AppError, CommandError
from lifetracker.core.events import ChangeEvent, ChangeKind, EventBus
from lifetracker.core.observability.timing import time_block

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandRequest:
    name: str
    change: ChangeKind | None = None
    payload: Mapping[str, Any] = field(default_factory=dict)


class RunCommandUseCase:
    """
    Invoke a command of the data-access collaborator.

    - On success, publish ``ChangeEvent(request.change)`` (if the command
      mutates data) and return the collaborator's result.
    - On failure, raise :class:`CommandError` and publish nothing, so every
      published event corresponds to a committed change.
    """

    def __init__(self, commands: CommandPort, event_bus: EventBus) -> None:
        self._commands = commands
        self._bus = event_bus

    def execute(self, request: CommandRequest) -> Any:
        try:
            with time_block(f"command {request.name}", logger=log, extra={"command": request.name}):
                result = self._commands.invoke(request.name, request.payload)
        except CommandError:
            raise
        except Exception as e:  # noqa: BLE001
            log.warning("Command %s failed: %s", request.name, e, extra={"command": request.name})
            message = e.message if isinstance(e, AppError) else str(e) or type(e).__name__
            raise CommandError(message, cause=e, command=request.name) from e

        if request.change is not None:
            self._bus.publish(ChangeEvent(request.change))
        return result

    def query(self, name: str, payload: Mapping[str, Any] | None = None) -> Any:
        """Read-only call: never publishes."""
        return self.execute(CommandRequest(name=name, payload=payload or {}))
