from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Protocol

from .messages import Notification
from .models import Theme


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to an HTML fragment, and a fragment to a full page."""

    def to_html(self, markdown_text: str) -> str: ...
    def to_document(self, fragment: str, title: str = "", theme: Theme = Theme.SYSTEM) -> str: ...
    def to_raw_document(self, markdown_text: str, title: str = "", theme: Theme = Theme.SYSTEM) -> str: ...


class IFileService(Protocol):
    """Read Markdown sources, write export output atomically."""

    def read_markdown(self, path: Path) -> str: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_recent(self) -> list[str]: ...
    def set_recent(self, recent: Iterable[str]) -> None: ...
    def get_theme(self) -> Theme: ...
    def set_theme(self, theme: Theme) -> None: ...
    def get_show_raw(self) -> bool: ...
    def set_show_raw(self, show: bool) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_float(self, section: str, key: str, default: float | None = None) -> float | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def get_path(self, section: str, key: str) -> Path | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...


class INotificationChannel(Protocol):
    """One-way, fire-and-forget push from the host to the display."""

    def send(self, message: Notification) -> None: ...
    def subscribe(self, callback: Callable[[Notification], None]) -> None: ...


class IExportCapability(Protocol):
    """The 'export enabled' flag exposed to the menu."""

    def set_export_enabled(self, enabled: bool) -> None: ...


class IExporter(ABC):
    """PDF export strategy. Implementations render a full HTML document to a path."""

    name: str  # e.g. "webengine", "weasyprint"
    label: str
    file_ext: str = "pdf"

    @abstractmethod
    def export(self, html: str, out_path: Path, *, base_path: Path | None = None) -> None:
        """
        Perform export. 'html' contains a full HTML document string; 'base_path'
        is the directory relative resources (images, links) resolve against.
        """
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def all(self) -> list[IExporter]: ...
