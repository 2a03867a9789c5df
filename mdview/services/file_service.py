from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdview.domain.interfaces import IFileService

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Markdown sources in, rendered bytes out. Writes go through QSaveFile."""

    def read_markdown(self, path: Path) -> str:
        # utf-8-sig strips a leading BOM and is otherwise plain UTF-8
        return path.read_bytes().decode("utf-8-sig")

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        out = QSaveFile(str(path))
        if not out.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open {path} for writing: {out.errorString()}")
        if out.write(data) != len(data):
            out.cancelWriting()
            raise OSError(f"Short write to {path}: {out.errorString()}")
        if not out.commit():
            raise OSError(f"Cannot commit {path}: {out.errorString()}")
        logger.debug("Wrote %d bytes to %s", len(data), path)
