# mdview/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, TypeVar

from platformdirs import user_config_dir

from mdview.domain.interfaces import IConfigService

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})


def _to_bool(raw: str) -> bool:
    s = raw.lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(raw)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration for the viewer.

    The first readable file wins:
      1. explicit_path given by the caller
      2. platformdirs user config dir (~/.config/MDView/config.ini, %APPDATA%\MDView\config.ini)
      3. <project_root>/config/config.ini shipped with the sources

    A file that cannot be parsed is logged and skipped, never fatal. Relative
    paths inside the file ([display] bundle, [export] stylesheet) resolve
    against the directory of the file they were read from.
    """

    DEFAULT_APP_DIR = "MDView"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        for path in self._candidates(explicit_path, project_root):
            if path.exists() and self._load(path):
                break

        if not self._parser.has_section("app"):
            self._parser.add_section("app")
        if not self._parser.has_option("app", "version"):
            self._parser.set("app", "version", "0.0.0")

    def _candidates(self, explicit_path: Optional[Path], project_root: Optional[Path]) -> list[Path]:
        found: list[Path] = []
        if explicit_path:
            found.append(explicit_path)
        found.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            found.append(project_root / "config" / self.DEFAULT_FILE)
        return found

    def _load(self, path: Path) -> bool:
        parser = configparser.ConfigParser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, configparser.Error) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return False
        self._parser = parser
        self._loaded_from = path
        logger.debug("Configuration loaded from %s", path)
        return True

    def _convert(self, section: str, key: str, default: Optional[T], convert: Callable[[str], T]) -> Optional[T]:
        val = self.get(section, key, None)
        if val is None or not val.strip():
            return default
        try:
            return convert(val.strip())
        except ValueError:
            logger.warning("Invalid value for [%s] %s: %r", section, key, val)
            return default

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if not self._parser.has_section(section):
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        return self._convert(section, key, default, int)

    def get_float(self, section: str, key: str, default: Optional[float] = None) -> Optional[float]:
        return self._convert(section, key, default, float)

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        return self._convert(section, key, default, _to_bool)

    def get_path(self, section: str, key: str) -> Optional[Path]:
        raw = (self.get(section, key, "") or "").strip()
        if not raw:
            return None
        path = Path(raw).expanduser()
        if not path.is_absolute() and self._loaded_from is not None:
            path = self._loaded_from.parent / path
        return path

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        snap: Dict[str, Dict[str, str]] = {}
        for sect in self._parser.sections():
            snap[sect] = dict(self._parser[sect])
        return snap

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    @property
    def loaded_from(self) -> Optional[Path]:
        """The file the values came from, or None when running on defaults."""
        return self._loaded_from
