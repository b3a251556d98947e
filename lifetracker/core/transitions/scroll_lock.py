from __future__ import annotations

import logging
from threading import RLock
from typing import Protocol

log = logging.getLogger(__name__)


class ScrollSuspender(Protocol):
    """Whatever actually freezes page scrolling (a Qt scroll area, a test fake)."""

    def suspend(self) -> None: ...

    def resume(self) -> None: ...


class ScrollLease:
    """One hold on a :class:`ScrollLock`. ``release`` is idempotent."""

    __slots__ = ("_lock", "_released")

    def __init__(self, lock: ScrollLock) -> None:
        self._lock = lock
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._lock._drop()

    def __enter__(self) -> ScrollLease:
        return self

    def __exit__(self, *exc: object) -> None:
        self.release()


class ScrollLock:
    """Counted scroll suspension: suspended while at least one lease is held."""

    def __init__(self, suspender: ScrollSuspender | None = None) -> None:
        self._suspender = suspender
        self._holds = 0
        self._mutex = RLock()

    @property
    def held(self) -> bool:
        return self._holds > 0

    def bind(self, suspender: ScrollSuspender | None) -> None:
        """Attach the real suspender once the UI exists. Not allowed while held."""
        with self._mutex:
            if self._holds:
                raise RuntimeError("Cannot rebind a held scroll lock")
            self._suspender = suspender

    def acquire(self) -> ScrollLease:
        with self._mutex:
            self._holds += 1
            if self._holds == 1 and self._suspender is not None:
                self._suspender.suspend()
        return ScrollLease(self)

    def _drop(self) -> None:
        with self._mutex:
            if self._holds == 0:
                log.warning("Scroll lock released more often than acquired")
                return
            self._holds -= 1
            if self._holds == 0 and self._suspender is not None:
                self._suspender.resume()
