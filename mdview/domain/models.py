from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass
class DocumentSession:
    """
    The currently loaded Markdown source and the HTML rendered from it.

    Both fields are either set or unset together; use load() to replace them.
    """

    source_path: Path | None = None
    rendered_html: str | None = None

    def __post_init__(self) -> None:
        if (self.source_path is None) != (self.rendered_html is None):
            raise ValueError("source_path and rendered_html must be set together")

    @property
    def is_loaded(self) -> bool:
        return self.source_path is not None

    def load(self, path: Path, html: str) -> None:
        self.source_path, self.rendered_html = path, html


@dataclass(frozen=True)
class ExportOptions:
    page_size: str = "A4"
    landscape: bool = False
    print_background: bool = True
    margins_mm: tuple[float, float, float, float] = (12.7, 12.7, 12.7, 12.7)
    stylesheet: Path | None = None
    timeout_ms: int = 15000


@dataclass(frozen=True)
class ContentSource:
    """Initial content for the display: a dev server URL or a bundled file URL."""

    url: str
    is_dev: bool = False


class Theme(str, Enum):
    """Preview colour scheme; SYSTEM follows the OS preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
