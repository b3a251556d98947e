"""Duration logging for collaborator calls."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

SLOW_CALL_MS = 500.0


@contextmanager
def time_block(
    name: str,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    slow_ms: float | None = SLOW_CALL_MS,
    extra: dict[str, object] | None = None,
) -> Iterator[None]:
    """Log how long the block took; calls slower than ``slow_ms`` log at WARNING."""
    log = logger or logging.getLogger(__name__)
    start = time.perf_counter()
    try:
        yield
    finally:
        dur_ms = (time.perf_counter() - start) * 1000
        fields: dict[str, object] = {"event": "timing", "duration_ms": round(dur_ms, 1), **(extra or {})}
        if slow_ms is not None and dur_ms > slow_ms:
            level = max(level, logging.WARNING)
        log.log(level, "%s took %.1fms", name, dur_ms, extra=fields)
