from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from mdview.domain.interfaces import (
    IExporter,
    IExporterRegistry,
    IFileService,
    IMarkdownRenderer,
    ISettingsService,
)
from mdview.domain.models import DocumentSession
from mdview.services.config.app_config import AppConfig, build_app_config
from mdview.services.conversion_bridge import ConversionBridge
from mdview.services.exporters import (
    ExporterRegistryInst,
    PdfExporter,
    WeasyPrintPdfExporter,
    WebEnginePdfExporter,
)
from mdview.services.file_service import FileService
from mdview.services.markdown_renderer import MarkdownRenderer
from mdview.services.notifications import QtNotificationChannel
from mdview.services.settings_service import SettingsService
from mdview.services.ui.adapters import QtFileDialogService, QtMessageService
from mdview.services.ui.main_window import MainWindow
from mdview.services.ui.ports import IFileDialogService, IMessageService
from mdview.services.ui.presenters import CommandDispatcher

logger = logging.getLogger(__name__)

DEFAULT_ENGINE = "webengine"


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Registers the PDF engines and picks the configured one
      - Owns the single DocumentSession and notification channel
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        exporters: IExporterRegistry | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()

        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(
            math_engine=self.config.math_engine()  # type: ignore[arg-type]
        )
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.exporters: IExporterRegistry = exporters or ExporterRegistryInst()
        self._ensure_builtin_exporters()

        self.session = DocumentSession()
        self.channel = QtNotificationChannel()

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = "MDView",
        application: str = "MDView",
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- Internals ----------

    def _ensure_builtin_exporters(self) -> None:
        options = self.config.export_options()
        builtin: list[IExporter] = [
            WebEnginePdfExporter(self.file_service, options),
            WeasyPrintPdfExporter(self.file_service, options),
            PdfExporter(options),
        ]
        for exporter in builtin:
            try:
                self.exporters.get(exporter.name)
            except KeyError:
                self.exporters.register(exporter)

    def pdf_exporter(self) -> IExporter:
        name = self.config.export_engine()
        try:
            return self.exporters.get(name)
        except KeyError:
            logger.warning("Unknown export engine %r, using %s", name, DEFAULT_ENGINE)
            return self.exporters.get(DEFAULT_ENGINE)

    # ---------- factories ----------

    def build_bridge(self) -> ConversionBridge:
        return ConversionBridge(self.renderer, self.file_service, self.pdf_exporter())

    def build_dispatcher(self, window: MainWindow) -> CommandDispatcher:
        return CommandDispatcher(
            session=self.session,
            bridge=self.build_bridge(),
            dialogs=self.dialogs,
            channel=self.channel,
            capability=window,
            reparse_on_export=self.config.reparse_on_export(),
            parent=window,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = "MDView",
        prefer_web_engine: bool = True,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach the dispatcher, subscribe the window to
        the notification channel and open start_path if given.
        """
        window = MainWindow(
            renderer=self.renderer,
            settings=self.settings_service,
            messages=self.messages,
            content_source=self.config.content_source(),
            app_title=app_title,
            version=self.config.get_version(),
            prefer_web_engine=prefer_web_engine,
            files=self.file_service,
        )
        window.attach_dispatcher(self.build_dispatcher(window))
        self.channel.subscribe(window.on_notification)

        if start_path is not None:
            window.open_path(start_path.resolve())
        return window
