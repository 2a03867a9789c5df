from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


class Command(Enum):
    OPEN = auto()
    EXPORT = auto()


class Outcome(Enum):
    COMPLETED = auto()
    CANCELLED = auto()  # dialog dismissed
    SKIPPED = auto()  # precondition not met
    FAILED = auto()


@dataclass(frozen=True)
class CommandResult:
    """What a command handler did. Handlers return this instead of raising."""

    command: Command
    outcome: Outcome
    path: Path | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.COMPLETED

    @classmethod
    def completed(cls, command: Command, path: Path) -> CommandResult:
        return cls(command, Outcome.COMPLETED, path=path)

    @classmethod
    def cancelled(cls, command: Command) -> CommandResult:
        return cls(command, Outcome.CANCELLED)

    @classmethod
    def skipped(cls, command: Command, error: Exception) -> CommandResult:
        return cls(command, Outcome.SKIPPED, error=error)

    @classmethod
    def failed(cls, command: Command, error: Exception, path: Path | None = None) -> CommandResult:
        return cls(command, Outcome.FAILED, path=path, error=error)
