from .command_gateway import LocalCommandGateway
from .memory_store import MemoryStore, register_store_commands

__all__ = ["LocalCommandGateway", "MemoryStore", "register_store_commands"]
