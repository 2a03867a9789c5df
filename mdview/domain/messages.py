from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Union


class NotificationKind(Enum):
    """Kinds of messages pushed from the host to the display."""

    DOCUMENT_LOADED = auto()
    EXPORT_COMPLETED = auto()


@dataclass(frozen=True)
class DocumentLoaded:
    path: Path
    html_content: str
    kind: NotificationKind = field(default=NotificationKind.DOCUMENT_LOADED, init=False)


@dataclass(frozen=True)
class ExportCompleted:
    path: Path
    kind: NotificationKind = field(default=NotificationKind.EXPORT_COMPLETED, init=False)


Notification = Union[DocumentLoaded, ExportCompleted]
