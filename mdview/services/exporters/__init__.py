"""PDF exporter strategies and registry."""

from .base import ExporterRegistryInst, page_layout, page_size_id, page_size_mm
from .pdf_exporter import PdfExporter
from .weasy_pdf_exporter import WeasyPrintPdfExporter
from .web_pdf_exporter import WebEnginePdfExporter

__all__ = [
    "ExporterRegistryInst",
    "PdfExporter",
    "WeasyPrintPdfExporter",
    "WebEnginePdfExporter",
    "page_layout",
    "page_size_id",
    "page_size_mm",
]
