"""Static left-to-right tab orders, one per tab group."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from lifetracker.core.errors import ValidationError

log = logging.getLogger(__name__)


class TabOrderRegistry:
    """Lookup table ``group -> tab key -> index``.

    Populated once at startup. Lookups never fail: an unknown group or key
    yields ``None``.
    """

    def __init__(self, orders: Mapping[str, Iterable[str]] | None = None) -> None:
        self._keys: dict[str, tuple[str, ...]] = {}
        self._index: dict[str, Mapping[str, int]] = {}
        for group, keys in (orders or {}).items():
            self.register(group, keys)

    def register(self, group: str, keys: Iterable[str]) -> None:
        ordered = tuple(keys)
        if len(set(ordered)) != len(ordered):
            dupes = sorted({k for k in ordered if ordered.count(k) > 1})
            raise ValidationError(f"Tab group {group!r} has duplicate keys: {dupes}")
        if group in self._keys:
            log.debug("Replacing tab order for group %s", group)
        self._keys[group] = ordered
        self._index[group] = MappingProxyType({key: i for i, key in enumerate(ordered)})

    def order_of(self, group: str, key: str) -> int | None:
        index = self._index.get(group)
        if index is None:
            return None
        return index.get(key)

    def keys(self, group: str) -> tuple[str, ...]:
        return self._keys.get(group, ())

    def groups(self) -> tuple[str, ...]:
        return tuple(self._keys)

    def __contains__(self, group: object) -> bool:
        return group in self._keys
