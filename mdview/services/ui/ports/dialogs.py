from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """Asks the user where to read a Markdown file from and where to put its PDF."""

    def choose_markdown_file(self, parent: Any | None, start_dir: Path | None) -> Path | None:
        """Return the chosen source, or None if the dialog was dismissed."""
        ...

    def choose_pdf_destination(self, parent: Any | None, suggested: Path) -> Path | None:
        """Return the chosen destination, or None if the dialog was dismissed."""
        ...
