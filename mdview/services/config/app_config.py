from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mdview.domain.interfaces import IAppConfig
from mdview.domain.models import ContentSource, ExportOptions
from mdview.services.config.ini_config_service import IniConfigService
from mdview.utils.constants import DEFAULT_DEV_URL, ENV_MODE_DEVELOPMENT, ENV_MODE_VAR

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)

BUNDLED_INDEX = Path(__file__).resolve().parents[2] / "resources" / "index.html"


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # app_config.py -> mdview/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None
    return m.group(1)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter that wraps IniConfigService and adds typed accessors.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- typed sections ----

    def is_dev_mode(self, environ: Mapping[str, str] | None = None) -> bool:
        env = os.environ if environ is None else environ
        return env.get(ENV_MODE_VAR, "").strip().lower() == ENV_MODE_DEVELOPMENT

    def content_source(self, environ: Mapping[str, str] | None = None) -> ContentSource:
        """Where the display loads its initial page from (dev server or bundle)."""
        if self.is_dev_mode(environ):
            return ContentSource(
                url=self.get("display", "dev_url", DEFAULT_DEV_URL) or DEFAULT_DEV_URL,
                is_dev=True,
            )
        path = self.get_path("display", "bundle") or BUNDLED_INDEX
        if not path.is_absolute():
            path = self.project_root / path
        return ContentSource(url=path.resolve().as_uri(), is_dev=False)

    def math_engine(self) -> str:
        engine = (self.get("markdown", "math_engine", "mathjax") or "mathjax").strip().lower()
        return engine if engine in ("mathjax", "katex") else "mathjax"

    def export_engine(self) -> str:
        return (self.get("export", "engine", "webengine") or "webengine").strip().lower()

    def reparse_on_export(self) -> bool:
        return bool(self.get_bool("export", "reparse_on_export", True))

    def export_options(self) -> ExportOptions:
        defaults = ExportOptions()
        margin = self.get_float("export", "margin_mm", None)
        return ExportOptions(
            page_size=(self.get("export", "page_size", defaults.page_size) or defaults.page_size).strip(),
            landscape=bool(self.get_bool("export", "landscape", defaults.landscape)),
            print_background=bool(
                self.get_bool("export", "print_background", defaults.print_background)
            ),
            margins_mm=(margin,) * 4 if margin is not None else defaults.margins_mm,
            stylesheet=self.get_path("export", "stylesheet"),
            timeout_ms=self.get_int("export", "timeout_ms", defaults.timeout_ms)
            or defaults.timeout_ms,
        )

    def log_level(self) -> str:
        return (self.get("logging", "level", "INFO") or "INFO").strip().upper()

    # ---- delegate IniConfigService methods (full surface) ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_float(self, section: str, key: str, default: float | None = None) -> float | None:
        return self.ini.get_float(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def get_path(self, section: str, key: str) -> Path | None:
        return self.ini.get_path(section, key)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
