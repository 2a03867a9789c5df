"""Concrete service implementations and export strategies."""

from .conversion_bridge import ConversionBridge
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .notifications import QtNotificationChannel
from .settings_service import SettingsService

__all__ = [
    "ConversionBridge",
    "FileService",
    "MarkdownRenderer",
    "QtNotificationChannel",
    "SettingsService",
]
