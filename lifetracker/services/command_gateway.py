"""In-process implementation of :class:`CommandPort`.

Commands are plain callables registered by name. The desktop shell wires the
real data-access layer here; tests register fakes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from threading import RLock
from typing import Any

from lifetracker.core.errors import CommandError

log = logging.getLogger(__name__)

CommandHandler = Callable[[Mapping[str, Any]], Any]


class LocalCommandGateway:
    def __init__(self, handlers: Mapping[str, CommandHandler] | None = None) -> None:
        self._lock = RLock()
        self._handlers: dict[str, CommandHandler] = dict(handlers or {})

    def register(self, name: str, handler: CommandHandler) -> None:
        with self._lock:
            if name in self._handlers:
                log.debug("Replacing command handler %s", name)
            self._handlers[name] = handler

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._handlers

    def invoke(self, name: str, payload: Mapping[str, Any] | None = None) -> Any:
        with self._lock:
            handler = self._handlers.get(name)
        if handler is None:
            raise CommandError(f"Unknown command: {name}", command=name)
        return handler(dict(payload or {}))
