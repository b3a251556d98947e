"""Application port for the external data-access collaborator.

Commands are opaque: a name plus a structured payload. The application layer
only cares whether a call committed or failed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class CommandPort(Protocol):
    def invoke(self, name: str, payload: Mapping[str, Any] | None = None) -> Any:
        """Run command ``name``; raise on failure."""
