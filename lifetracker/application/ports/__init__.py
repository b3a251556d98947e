from .commands import CommandPort

__all__ = ["CommandPort"]
