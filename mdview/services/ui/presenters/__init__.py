from __future__ import annotations

from .command_dispatcher import CommandDispatcher

__all__ = ["CommandDispatcher"]
