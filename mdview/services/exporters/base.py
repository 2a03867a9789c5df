from __future__ import annotations

from dataclasses import dataclass, field

from PyQt6.QtGui import QPageLayout, QPageSize
from PyQt6.QtCore import QMarginsF

from mdview.domain.interfaces import IExporter, IExporterRegistry
from mdview.domain.models import ExportOptions


@dataclass
class ExporterRegistryInst(IExporterRegistry):
    """
    Instance-based exporter registry (no globals, no side-effects).
    Keeps registry local to the DI container for testability and clarity.
    """

    _reg: dict[str, IExporter] = field(default_factory=dict)

    def register(self, e: IExporter) -> None:
        self._reg[e.name] = e

    def get(self, name: str) -> IExporter:
        return self._reg[name]

    def all(self) -> list[IExporter]:
        return list(self._reg.values())


def page_size_id(name: str) -> QPageSize.PageSizeId:
    """Map a configured page size name (Qt spelling, e.g. "A4", "Letter") to its id."""
    size_id = QPageSize.PageSizeId.__members__.get(name)
    if size_id is None or size_id == QPageSize.PageSizeId.Custom:
        raise ValueError(f"Unknown page size: {name!r}")
    return size_id


def page_size_mm(options: ExportOptions) -> tuple[float, float]:
    """Paper width and height in mm, already swapped for landscape."""
    size = QPageSize(page_size_id(options.page_size)).size(QPageSize.Unit.Millimeter)
    width, height = size.width(), size.height()
    return (height, width) if options.landscape else (width, height)


def page_layout(options: ExportOptions) -> QPageLayout:
    """Build the Qt page layout (size, orientation, margins in mm) for an export."""
    size_id = page_size_id(options.page_size)
    orientation = (
        QPageLayout.Orientation.Landscape
        if options.landscape
        else QPageLayout.Orientation.Portrait
    )
    return QPageLayout(
        QPageSize(size_id),
        orientation,
        QMarginsF(*options.margins_mm),
        QPageLayout.Unit.Millimeter,
    )
