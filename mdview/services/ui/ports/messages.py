from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from mdview.domain.results import CommandResult


@runtime_checkable
class IMessageService(Protocol):
    """Modal feedback the window cannot express in its status bar."""

    def about(self, parent: Any | None, title: str, text: str) -> None: ...
    def command_failed(self, parent: Any | None, result: CommandResult) -> None: ...
