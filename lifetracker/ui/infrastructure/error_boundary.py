from __future__ import annotations

import logging
import sys
import threading

log = logging.getLogger(__name__)

USER_MESSAGE = "Something went wrong. Details are in the log file."


def install_error_boundary(notifications) -> None:
    """Route unhandled exceptions (UI thread and worker threads) to the log and the user.

    The previous hooks still run afterwards, so console output is unchanged.
    """
    previous_hook = sys.excepthook
    previous_thread_hook = threading.excepthook

    def _report(exc_type, exc, tb, where: str) -> None:  # type: ignore[no-untyped-def]
        log.error(
            "Unhandled exception in %s",
            where,
            exc_info=(exc_type, exc, tb),
            extra={"event": "unhandled_exception"},
        )
        if notifications is not None:
            try:
                notifications.critical(USER_MESSAGE)
            except Exception:  # noqa: BLE001
                log.exception("Could not show the error dialog")

    def _hook(exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        if issubclass(exc_type, KeyboardInterrupt):
            previous_hook(exc_type, exc, tb)
            return
        _report(exc_type, exc, tb, "main thread")
        previous_hook(exc_type, exc, tb)

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        name = args.thread.name if args.thread is not None else "unknown thread"
        _report(args.exc_type, args.exc_value, args.exc_traceback, name)
        previous_thread_hook(args)

    sys.excepthook = _hook
    threading.excepthook = _thread_hook
