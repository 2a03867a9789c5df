from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QByteArray, QUrl
from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow, QMenu, QStatusBar, QTextBrowser

from mdview.domain.interfaces import IFileService, IMarkdownRenderer, ISettingsService
from mdview.domain.messages import DocumentLoaded, ExportCompleted, Notification
from mdview.domain.models import ContentSource, Theme
from mdview.domain.results import Command, CommandResult, Outcome
from mdview.services.ui.ports.messages import IMessageService
from mdview.services.ui.presenters.command_dispatcher import CommandDispatcher
from mdview.utils.constants import MAX_RECENTS

logger = logging.getLogger(__name__)

WELCOME_HTML = "<p>No file has been opened.</p>"


class MainWindow(QMainWindow):
    """
    Thin PyQt window: builds the menu, shows the preview and reacts to
    notifications. Commands are forwarded to the attached CommandDispatcher.
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        settings: ISettingsService,
        messages: IMessageService,
        *,
        content_source: ContentSource | None = None,
        app_title: str = "MDView",
        version: str = "0.0.0",
        prefer_web_engine: bool = True,
        files: IFileService | None = None,
    ) -> None:
        super().__init__()
        self.app_title = app_title
        self.setWindowTitle(app_title)
        self.resize(800, 600)

        self.renderer = renderer
        self.settings = settings
        self.messages = messages
        self.version = version
        self.dispatcher: CommandDispatcher | None = None
        self.files = files
        # path and rendered fragment of the document on display
        self._document: tuple[Path, str] | None = None

        self.recents: list[str] = self.settings.get_recent()
        self.theme: Theme = self.settings.get_theme()
        self.show_raw: bool = self.settings.get_show_raw()

        # --- Preview: prefer QWebEngineView, fallback to QTextBrowser ---
        self.preview = self._create_preview_widget(prefer_web_engine)
        self.setCentralWidget(self.preview)

        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self._show_initial_content(content_source)
        self.setAcceptDrops(True)

    # ---------- wiring ----------
    def attach_dispatcher(self, dispatcher: CommandDispatcher) -> None:
        self.dispatcher = dispatcher

    def set_export_enabled(self, enabled: bool) -> None:
        self.act_export.setEnabled(enabled)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._on_open,
        )
        self.act_export = QAction(
            "Export to PDF…",
            self,
            shortcut="Ctrl+E",
            triggered=self._on_export,
        )
        self.act_export.setEnabled(False)
        self.act_quit = QAction(
            "Quit",
            self,
            shortcut=QKeySequence.StandardKey.Quit,
            triggered=self._quit,
        )
        self.act_about = QAction("About", self, triggered=self._show_about)
        self.recent_menu = QMenu("Open Recent", self)

        self.act_raw = QAction("Show raw Markdown", self, checkable=True, shortcut="Ctrl+U")
        self.act_raw.setChecked(self.show_raw)
        self.act_raw.toggled.connect(self._on_raw_toggled)

        self.theme_group = QActionGroup(self)
        self.theme_group.setExclusive(True)
        self.theme_actions: dict[Theme, QAction] = {}
        for theme in Theme:
            act = QAction(theme.value.capitalize(), self, checkable=True)
            act.setChecked(theme is self.theme)
            act.triggered.connect(lambda chk=False, t=theme: self.set_theme(t))
            self.theme_group.addAction(act)
            self.theme_actions[theme] = act

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_export)
        filem.addSeparator()
        filem.addAction(self.act_quit)
        self._refresh_recent_menu()

        self.view_menu = m.addMenu("&View")
        self.view_menu.addAction(self.act_raw)
        self.theme_menu = self.view_menu.addMenu("Theme")
        for act in self.theme_actions.values():
            self.theme_menu.addAction(act)

        helpm = m.addMenu("&Help")
        helpm.addAction(self.act_about)

    def _refresh_recent_menu(self):
        self.recent_menu.clear()
        if not self.recents:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in self.recents[:MAX_RECENTS]:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self.open_path(Path(x)))
            )

    # ---------- Actions ----------
    def _on_open(self) -> CommandResult | None:
        if self.dispatcher is None:
            return None
        result = self.dispatcher.handle_open()
        self._report(result)
        return result

    def _on_export(self) -> CommandResult | None:
        if self.dispatcher is None:
            return None
        result = self.dispatcher.handle_export()
        self._report(result)
        return result

    def open_path(self, path: Path) -> CommandResult | None:
        if self.dispatcher is None:
            return None
        result = self.dispatcher.open_path(path)
        if result.outcome is Outcome.FAILED and str(path) in self.recents:
            self.recents.remove(str(path))
            self.settings.set_recent(self.recents)
            self._refresh_recent_menu()
        self._report(result)
        return result

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme
        self.theme_actions[theme].setChecked(True)
        self.settings.set_theme(theme)
        self._render_current()

    def _on_raw_toggled(self, checked: bool) -> None:
        self.show_raw = checked
        self.settings.set_show_raw(checked)
        self._render_current()

    def _quit(self):
        app = QApplication.instance()
        if app is not None:
            app.quit()

    def _show_about(self):
        self.messages.about(
            self,
            f"About {self.app_title}",
            f"{self.app_title} {self.version}\n"
            "Markdown viewer with PDF export.\n\n"
            "Built with PyQt6 + python-markdown.",
        )

    # ---------- Results & notifications ----------
    def _report(self, result: CommandResult) -> None:
        verb = "Open" if result.command is Command.OPEN else "Export"
        if result.outcome is Outcome.FAILED:
            self.statusBar().showMessage(f"{verb} failed: {result.error}", 5000)
            self.messages.command_failed(self, result)
        elif result.outcome is Outcome.SKIPPED:
            self.statusBar().showMessage(f"{verb} skipped: {result.error}", 3000)

    def on_notification(self, message: Notification) -> None:
        if isinstance(message, DocumentLoaded):
            self._show_document(message.path, message.html_content)
        elif isinstance(message, ExportCompleted):
            self.statusBar().showMessage(f"Exported PDF: {message.path}", 3000)

    def _show_document(self, path: Path, html_content: str) -> None:
        self._document = (path, html_content)
        self._render_current()
        self.setWindowTitle(f"{path.name} — {self.app_title}")
        self.statusBar().showMessage(f"Opened: {path}", 3000)
        self._add_recent(path)

    def _render_current(self) -> None:
        """Redraw the open document with the current theme and view mode."""
        if self._document is None:
            return
        path, html_content = self._document
        if self.show_raw and self.files is not None:
            try:
                source = self.files.read_markdown(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Cannot read %s for raw view: %s", path, e)
                self.statusBar().showMessage(f"Cannot show source: {e}", 5000)
            else:
                page = self.renderer.to_raw_document(source, title=path.name, theme=self.theme)
                self._set_preview_html(page, base_path=path.parent)
                return
        page = self.renderer.to_document(html_content, title=path.name, theme=self.theme)
        self._set_preview_html(page, base_path=path.parent)

    def _set_preview_html(self, html: str, base_path: Path | None = None) -> None:
        if isinstance(self.preview, QTextBrowser):
            if base_path is not None:
                self.preview.setSearchPaths([str(base_path)])
            self.preview.setHtml(html)
            return
        base_url = QUrl.fromLocalFile(f"{base_path}/") if base_path is not None else QUrl()
        self.preview.setHtml(html, base_url)

    def _show_initial_content(self, source: ContentSource | None) -> None:
        if source is None:
            self._set_preview_html(self.renderer.to_document(WELCOME_HTML, self.app_title, self.theme))
            return
        logger.debug("Initial content from %s (dev=%s)", source.url, source.is_dev)
        url = QUrl(source.url)
        if isinstance(self.preview, QTextBrowser):
            if url.isLocalFile():
                self.preview.setSource(url)
            else:
                # QTextBrowser cannot fetch from a dev server
                self._set_preview_html(self.renderer.to_document(WELCOME_HTML, self.app_title, self.theme))
            return
        self.preview.setUrl(url)

    def _add_recent(self, path: Path):
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
        self.recents.insert(0, s)
        self.recents = self.recents[:MAX_RECENTS]
        self.settings.set_recent(self.recents)
        self._refresh_recent_menu()

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self.open_path(Path(local))

    # ---------- Close ----------
    def closeEvent(self, event):
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)

    # ---------- Internal: preview creation ----------
    def _create_preview_widget(self, prefer_web_engine: bool):
        """
        Prefer QWebEngineView (JS-capable: MathJax/KaTeX, better CSS), fall back to QTextBrowser.
        """
        if prefer_web_engine:
            try:
                from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore

                return QWebEngineView(self)
            except Exception as e:
                logger.warning("QWebEngineView failed to initialise, using QTextBrowser: %s", e)
        w = QTextBrowser(self)
        w.setOpenExternalLinks(True)
        return w
