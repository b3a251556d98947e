from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from lifetracker.application.use_cases import CommandRequest, RunCommandUseCase
from lifetracker.core.errors import CommandError, DomainError
from lifetracker.core.events import ALL, ChangeEvent, ChangeKind, EventBus


class _FakeCommands:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    def invoke(self, name: str, payload: Mapping[str, Any] | None = None) -> Any:
        self.calls.append((name, dict(payload or {})))
        if self.error is not None:
            raise self.error
        return self.result


def _bus_with_log() -> tuple[EventBus, list[ChangeEvent]]:
    bus = EventBus()
    events: list[ChangeEvent] = []
    bus.subscribe(ALL, events.append)
    return bus, events


def test_successful_command_publishes_change() -> None:
    bus, events = _bus_with_log()
    commands = _FakeCommands(result={"id": 1})
    uc = RunCommandUseCase(commands, bus)

    result = uc.execute(CommandRequest("create_task", ChangeKind.TASK_CREATED, {"name": "Write report"}))

    assert result == {"id": 1}
    assert commands.calls == [("create_task", {"name": "Write report"})]
    assert [e.type for e in events] == [ChangeKind.TASK_CREATED]


def test_failed_command_publishes_nothing() -> None:
    bus, events = _bus_with_log()
    uc = RunCommandUseCase(_FakeCommands(error=RuntimeError("db locked")), bus)

    with pytest.raises(CommandError) as exc:
        uc.execute(CommandRequest("delete_note", ChangeKind.NOTE_DELETED, {"id": 3}))

    assert exc.value.command == "delete_note"
    assert exc.value.message == "db locked"
    assert isinstance(exc.value.cause, RuntimeError)
    assert events == []


def test_app_error_message_is_kept() -> None:
    uc = RunCommandUseCase(_FakeCommands(error=DomainError("note 3 not found")), EventBus())

    with pytest.raises(CommandError) as exc:
        uc.execute(CommandRequest("update_note", ChangeKind.NOTE_UPDATED, {"id": 3}))

    assert exc.value.message == "note 3 not found"


def test_command_error_passes_through_unchanged() -> None:
    original = CommandError("Unknown command: nope", command="nope")
    uc = RunCommandUseCase(_FakeCommands(error=original), EventBus())

    with pytest.raises(CommandError) as exc:
        uc.execute(CommandRequest("nope", ChangeKind.TASK_CREATED))

    assert exc.value is original


def test_query_never_publishes() -> None:
    bus, events = _bus_with_log()
    uc = RunCommandUseCase(_FakeCommands(result=[{"name": "x"}]), bus)

    assert uc.query("list_tasks") == [{"name": "x"}]
    assert uc.execute(CommandRequest("get_data_statistics")) == [{"name": "x"}]
    assert events == []
