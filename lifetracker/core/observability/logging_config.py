"""Root logging setup for the desktop shell.

Stdlib logging only. Records may carry navigation/event context through
``extra`` (route, direction, change_kind, ...); the JSON formatter keeps
those fields, the text formats drop them.

Environment:
- LOG_LEVEL: level name, default INFO.
- LOG_JSON: "1"/"true" for JSON lines on stdout.
- LOG_FILE: rotating ``app.log`` in the state dir, on unless "0".
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from lifetracker.core.paths import get_logs_dir

log = logging.getLogger(__name__)

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONTEXT_KEYS = (
    "event",
    "change_kind",
    "handler",
    "route",
    "direction",
    "region",
    "command",
    "duration_ms",
)
LOG_FILE_NAME = "app.log"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({k: str(getattr(record, k)) for k in _CONTEXT_KEYS if hasattr(record, k)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(level: str | int | None) -> int:
    raw = level if level is not None else os.getenv("LOG_LEVEL", "INFO")
    if isinstance(raw, int):
        return raw
    resolved = logging.getLevelName(raw.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    if json_logs:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=_TEXT_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(logs_dir: Path) -> logging.Handler | None:
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            logs_dir / LOG_FILE_NAME,
            maxBytes=1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError:
        return None
    # plain text so the file can be attached to a bug report as is
    handler.setFormatter(logging.Formatter(fmt=_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    *,
    level: str | int | None = None,
    json_logs: bool | None = None,
    log_to_file: bool | None = None,
    state_dir: Path | None = None,
) -> Path | None:
    """Replace the root handlers. Returns the log file path, or None without one."""
    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        if isinstance(old, RotatingFileHandler):
            old.close()

    json_logs = _env_flag("LOG_JSON", False) if json_logs is None else json_logs
    root.addHandler(_console_handler(json_logs))

    log_file: Path | None = None
    if _env_flag("LOG_FILE", True) if log_to_file is None else log_to_file:
        logs_dir = get_logs_dir(state_dir)
        handler = _file_handler(logs_dir)
        if handler is not None:
            root.addHandler(handler)
            log_file = logs_dir / LOG_FILE_NAME

    root.setLevel(_resolve_level(level))
    if log_file is None:
        log.debug("File logging disabled")
    return log_file
