from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import QByteArray, QSettings

from mdview.domain.interfaces import ISettingsService
from mdview.domain.models import Theme
from mdview.utils.constants import (
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_RAW_MARKDOWN,
    SETTINGS_RECENTS,
    SETTINGS_THEME,
)


class SettingsService(ISettingsService):
    """Persist small UI bits: window geometry, recent files, theme and view mode."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_recent(self) -> list[str]:
        v = self._s.value(SETTINGS_RECENTS, [])
        # QSettings (INI) hands back a bare str when a single item was stored
        if isinstance(v, str):
            v = [v]
        return [str(x) for x in v if x] if isinstance(v, list) else []

    def set_recent(self, recent: Iterable[str]) -> None:
        self._s.setValue(SETTINGS_RECENTS, list(recent)[:MAX_RECENTS])

    def get_theme(self) -> Theme:
        try:
            return Theme(str(self._s.value(SETTINGS_THEME, Theme.SYSTEM.value)))
        except ValueError:
            return Theme.SYSTEM

    def set_theme(self, theme: Theme) -> None:
        self._s.setValue(SETTINGS_THEME, theme.value)

    def get_show_raw(self) -> bool:
        return bool(self._s.value(SETTINGS_RAW_MARKDOWN, False, type=bool))

    def set_show_raw(self, show: bool) -> None:
        self._s.setValue(SETTINGS_RAW_MARKDOWN, bool(show))
