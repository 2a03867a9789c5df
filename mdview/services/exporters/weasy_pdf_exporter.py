from __future__ import annotations

import logging
from pathlib import Path

from mdview.domain.interfaces import IExporter, IFileService
from mdview.domain.models import ExportOptions
from mdview.services.exporters.base import page_size_mm

logger = logging.getLogger(__name__)


class WeasyPrintPdfExporter(IExporter):
    """
    Standalone HTML -> PDF through WeasyPrint, with an optional user stylesheet.

    Page size and orientation come from an @page rule so they behave like the
    other engines; a user stylesheet is applied after it and may override it.
    """

    name = "weasyprint"
    label = "Export PDF (WeasyPrint)…"
    file_ext = "pdf"

    def __init__(self, files: IFileService, options: ExportOptions | None = None) -> None:
        self._files = files
        self._options = options or ExportOptions()

    def page_css(self) -> str:
        # explicit dimensions, so every name the Qt engines accept means the same paper here
        width, height = page_size_mm(self._options)
        top, right, bottom, left = self._options.margins_mm
        return (
            f"@page {{ size: {width:g}mm {height:g}mm; "
            f"margin: {top}mm {right}mm {bottom}mm {left}mm; }}"
        )

    def export(self, html: str, out_path: Path, *, base_path: Path | None = None) -> None:
        page_css = self.page_css()
        # Lazy import: WeasyPrint pulls in Pango/cairo at import time.
        from weasyprint import CSS, HTML

        stylesheets = [CSS(string=page_css)]
        if self._options.stylesheet is not None:
            logger.debug("Applying stylesheet %s", self._options.stylesheet)
            stylesheets.append(CSS(filename=str(self._options.stylesheet)))

        base_url = str(base_path) if base_path is not None else None
        data = HTML(string=html, base_url=base_url).write_pdf(stylesheets=stylesheets)
        self._files.write_bytes_atomic(out_path, data)
