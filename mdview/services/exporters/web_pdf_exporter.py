# mdview/services/exporters/web_pdf_exporter.py
from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QEventLoop, QTimer, QUrl

from mdview.domain.interfaces import IExporter, IFileService
from mdview.domain.models import ExportOptions
from mdview.services.exporters.base import page_layout

logger = logging.getLogger(__name__)


def _web_engine():
    """Return (QWebEngineView, QWebEngineSettings); imported on first export."""
    from PyQt6.QtWebEngineCore import QWebEngineSettings
    from PyQt6.QtWebEngineWidgets import QWebEngineView

    return QWebEngineView, QWebEngineSettings


class WebEnginePdfExporter(IExporter):
    """
    Render HTML to PDF via Qt WebEngine (the preview's own print-to-PDF) for
    output that matches what is on screen.

    The page is loaded in an off-screen view and a nested event loop waits for
    printToPdf. Anything raised inside the Qt callbacks is captured and
    re-raised from export(), never left to escape a slot.
    """

    name = "webengine"
    label = "Export PDF…"
    file_ext = "pdf"

    def __init__(self, files: IFileService, options: ExportOptions | None = None) -> None:
        self._files = files
        self._options = options or ExportOptions()

    def export(self, html: str, out_path: Path, *, base_path: Path | None = None) -> None:
        layout = page_layout(self._options)

        view_cls, settings_cls = _web_engine()
        view = view_cls()
        view.settings().setAttribute(
            settings_cls.WebAttribute.PrintElementBackgrounds,
            self._options.print_background,
        )
        loop = QEventLoop()
        result: list[bytes | None] = [None]
        errored: list[Exception | None] = [None]

        def fail(e: Exception) -> None:
            if errored[0] is None:
                errored[0] = e
            loop.quit()

        def on_timeout():
            if loop.isRunning():
                fail(TimeoutError(f"Timed out after {self._options.timeout_ms} ms while rendering PDF"))

        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(on_timeout)
        timer.start(self._options.timeout_ms)

        def on_pdf_ready(data) -> None:
            try:
                result[0] = bytes(data)
            except Exception as e:
                fail(e)
                return
            loop.quit()

        def on_load_finished(ok: bool):
            if not ok:
                fail(RuntimeError("Failed to load HTML into WebEngine page"))
                return
            try:
                view.page().printToPdf(on_pdf_ready, layout)
            except Exception as e:
                fail(e)

        # connect before setHtml, loadFinished may fire early
        view.loadFinished.connect(on_load_finished)

        base_url = QUrl.fromLocalFile(f"{base_path}/") if base_path is not None else QUrl()
        view.setHtml(html, base_url)
        try:
            loop.exec()
        finally:
            timer.stop()
            view.deleteLater()

        if errored[0] is not None:
            raise errored[0]
        if not result[0]:
            raise RuntimeError("WebEngine returned an empty PDF")

        logger.debug("WebEngine produced %d bytes", len(result[0]))
        self._files.write_bytes_atomic(out_path, result[0])
