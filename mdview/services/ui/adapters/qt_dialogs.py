from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from mdview.services.ui.ports.dialogs import IFileDialogService
from mdview.utils.constants import OPEN_FILTER, SAVE_FILTER


class QtFileDialogService(IFileDialogService):
    """Native open/save dialogs restricted to Markdown sources and PDF output."""

    def choose_markdown_file(self, parent: Any | None, start_dir: Path | None) -> Path | None:
        path_str, _ = QFileDialog.getOpenFileName(
            parent,
            "Open Markdown",
            str(start_dir) if start_dir else "",
            OPEN_FILTER,
        )
        return Path(path_str).resolve() if path_str else None

    def choose_pdf_destination(self, parent: Any | None, suggested: Path) -> Path | None:
        # QFileDialog asks before overwriting an existing file
        path_str, _ = QFileDialog.getSaveFileName(parent, "Export to PDF", str(suggested), SAVE_FILTER)
        if not path_str:
            return None
        path = Path(path_str)
        if path.suffix.lower() != ".pdf":
            path = path.with_name(path.name + ".pdf")
        return path.resolve()
