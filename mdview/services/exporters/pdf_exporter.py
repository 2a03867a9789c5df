from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QTextDocument
from PyQt6.QtPrintSupport import QPrinter

from mdview.domain.interfaces import IExporter
from mdview.domain.models import ExportOptions
from mdview.services.exporters.base import page_layout


class PdfExporter(IExporter):
    """
    Print through QTextDocument + QPrinter. No WebEngine needed, but only the
    rich-text subset of HTML/CSS is honoured and scripts (math) do not run.
    """

    name = "qprinter"
    label = "Export PDF (basic)…"
    file_ext = "pdf"

    def __init__(self, options: ExportOptions | None = None) -> None:
        self._options = options or ExportOptions()

    def export(self, html: str, out_path: Path, *, base_path: Path | None = None) -> None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        printer.setOutputFormat(QPrinter.OutputFormat.PdfFormat)
        printer.setOutputFileName(str(out_path))
        printer.setPageLayout(page_layout(self._options))

        doc = QTextDocument()
        if base_path is not None:
            doc.setBaseUrl(QUrl.fromLocalFile(f"{base_path}/"))
        doc.setHtml(html)
        doc.print(printer)
        if not out_path.exists():
            raise OSError(f"Printer produced no output: {out_path}")
