"""Volatile record store backing the default command set.

Stands in for the persistent data-access layer when none is configured:
``list_<entity>``, ``create_<entity>``, ``update_<entity>`` and
``delete_<entity>`` for tasks, categories, transactions and notes.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any

from lifetracker.core.errors import DomainError, ValidationError
from lifetracker.services.command_gateway import LocalCommandGateway

ENTITIES = {
    "task": "tasks",
    "category": "categories",
    "transaction": "transactions",
    "note": "notes",
}


class MemoryStore:
    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._records: dict[str, dict[int, dict[str, Any]]] = {e: {} for e in ENTITIES}

    def list(self, entity: str) -> list[dict[str, Any]]:
        return [dict(r) for r in self._records[entity].values()]

    def create(self, entity: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        name = str(payload.get("name") or payload.get("title") or "").strip()
        if not name:
            raise ValidationError(f"{entity} needs a name")
        record = {**payload, "id": next(self._ids), "name": name}
        self._records[entity][record["id"]] = record
        return dict(record)

    def update(self, entity: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        record = self._get(entity, payload)
        record.update({k: v for k, v in payload.items() if k != "id"})
        return dict(record)

    def delete(self, entity: str, payload: Mapping[str, Any]) -> None:
        record = self._get(entity, payload)
        del self._records[entity][record["id"]]

    def clear(self) -> None:
        for records in self._records.values():
            records.clear()

    def statistics(self) -> dict[str, int]:
        return {f"total_{plural}": len(self._records[e]) for e, plural in ENTITIES.items()}

    def _get(self, entity: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        record = self._records[entity].get(payload.get("id"))  # type: ignore[arg-type]
        if record is None:
            raise DomainError(f"{entity} {payload.get('id')!r} not found")
        return record


def register_store_commands(gateway: LocalCommandGateway, store: MemoryStore) -> None:
    for entity, plural in ENTITIES.items():
        gateway.register(f"list_{plural}", lambda _p, e=entity: store.list(e))
        gateway.register(f"create_{entity}", lambda p, e=entity: store.create(e, p))
        gateway.register(f"update_{entity}", lambda p, e=entity: store.update(e, p))
        gateway.register(f"delete_{entity}", lambda p, e=entity: store.delete(e, p))
    gateway.register("get_data_statistics", lambda _p: store.statistics())
    gateway.register("clear_all_data", lambda _p: store.clear())
