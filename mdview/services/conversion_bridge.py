from __future__ import annotations

import logging
from pathlib import Path

from mdview.domain.errors import DocumentIOError, ParseError, RenderError
from mdview.domain.interfaces import IExporter, IFileService, IMarkdownRenderer

logger = logging.getLogger(__name__)


class ConversionBridge:
    """
    Stateless Markdown -> HTML and HTML -> PDF conversions.

    Library exceptions are translated into the MDView error family here so
    callers only deal with DocumentIOError, ParseError and RenderError.
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        files: IFileService,
        exporter: IExporter,
    ) -> None:
        self.renderer = renderer
        self.files = files
        self.exporter = exporter

    def parse_markdown_to_html(self, source_path: Path) -> str:
        try:
            text = self.files.read_markdown(source_path)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError(f"Cannot read {source_path}: {e}", source_path) from e

        try:
            html = self.renderer.to_html(text)
        except Exception as e:
            raise ParseError(f"Failed to parse {source_path}: {e}") from e

        logger.debug("Parsed %s (%d chars of HTML)", source_path, len(html))
        return html

    def render_to_pdf(self, source_path: Path, html: str, destination: Path) -> bool:
        document = self.renderer.to_document(html, title=source_path.stem)
        try:
            self.exporter.export(document, destination, base_path=source_path.parent)
        except TimeoutError as e:
            raise RenderError(f"{self.exporter.name} timed out rendering PDF") from e
        except OSError as e:
            raise DocumentIOError(f"Cannot write {destination}: {e}", destination) from e
        except Exception as e:
            raise RenderError(f"{self.exporter.name} failed to render PDF: {e}") from e

        logger.info("PDF written to %s using %s", destination, self.exporter.name)
        return True
