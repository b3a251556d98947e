from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from lifetracker.core.errors import ValidationError


class ChangeKind(str, Enum):
    """What kind of data changed. Values are the collaborator's wire names."""

    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    TASK_DELETED = "task_deleted"
    CATEGORY_CREATED = "category_created"
    CATEGORY_UPDATED = "category_updated"
    CATEGORY_DELETED = "category_deleted"
    TIMER_STARTED = "timer_started"
    TIMER_STOPPED = "timer_stopped"
    TIMER_UPDATED = "timer_updated"
    TRANSACTION_CREATED = "transaction_created"
    TRANSACTION_UPDATED = "transaction_updated"
    TRANSACTION_DELETED = "transaction_deleted"
    NOTE_CREATED = "note_created"
    NOTE_UPDATED = "note_updated"
    NOTE_DELETED = "note_deleted"
    DATA_IMPORTED = "data_imported"
    DATABASE_RESTORED = "database_restored"
    ALL_DATA_CLEARED = "all_data_cleared"
    SYNC_COMPLETED = "sync_completed"
    CONFLICTS_RESOLVED = "conflicts_resolved"

    @classmethod
    def from_wire(cls, name: str) -> ChangeKind:
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            raise ValidationError(f"Unknown change kind: {name!r}", cause=e) from e


# Kinds that replace whole datasets; every data view should refetch on these.
BULK_KINDS = frozenset(
    {
        ChangeKind.DATA_IMPORTED,
        ChangeKind.DATABASE_RESTORED,
        ChangeKind.ALL_DATA_CLEARED,
        ChangeKind.SYNC_COMPLETED,
        ChangeKind.CONFLICTS_RESOLVED,
    }
)

TASK_KINDS = frozenset(
    {ChangeKind.TASK_CREATED, ChangeKind.TASK_UPDATED, ChangeKind.TASK_DELETED}
)
CATEGORY_KINDS = frozenset(
    {ChangeKind.CATEGORY_CREATED, ChangeKind.CATEGORY_UPDATED, ChangeKind.CATEGORY_DELETED}
)
TIMER_KINDS = frozenset(
    {ChangeKind.TIMER_STARTED, ChangeKind.TIMER_STOPPED, ChangeKind.TIMER_UPDATED}
)
TRANSACTION_KINDS = frozenset(
    {
        ChangeKind.TRANSACTION_CREATED,
        ChangeKind.TRANSACTION_UPDATED,
        ChangeKind.TRANSACTION_DELETED,
    }
)
NOTE_KINDS = frozenset(
    {ChangeKind.NOTE_CREATED, ChangeKind.NOTE_UPDATED, ChangeKind.NOTE_DELETED}
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    type: ChangeKind
    occurred_at: datetime = field(default_factory=_utcnow)
