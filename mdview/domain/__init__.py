"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    DocumentIOError,
    MdViewError,
    ParseError,
    PreconditionError,
    RenderError,
    UserCancelled,
)
from .interfaces import (
    IExportCapability,
    IExporter,
    IExporterRegistry,
    IFileService,
    IMarkdownRenderer,
    INotificationChannel,
    ISettingsService,
)
from .messages import DocumentLoaded, ExportCompleted, Notification, NotificationKind
from .models import ContentSource, DocumentSession, ExportOptions, Theme
from .results import Command, CommandResult, Outcome

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "ISettingsService",
    "IExporter",
    "IExporterRegistry",
    "INotificationChannel",
    "IExportCapability",
    "MdViewError",
    "UserCancelled",
    "DocumentIOError",
    "ParseError",
    "RenderError",
    "PreconditionError",
    "Notification",
    "NotificationKind",
    "DocumentLoaded",
    "ExportCompleted",
    "DocumentSession",
    "ExportOptions",
    "ContentSource",
    "Theme",
    "Command",
    "CommandResult",
    "Outcome",
]
