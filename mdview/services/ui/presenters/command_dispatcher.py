from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from mdview.domain.errors import MdViewError, PreconditionError, UserCancelled
from mdview.domain.interfaces import IExportCapability, INotificationChannel
from mdview.domain.messages import DocumentLoaded, ExportCompleted
from mdview.domain.models import DocumentSession
from mdview.domain.results import Command, CommandResult
from mdview.services.conversion_bridge import ConversionBridge
from mdview.services.ui.ports.dialogs import IFileDialogService

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """
    Maps the "open" and "export" commands to session updates, conversions and
    notifications.

    Handlers never raise: every outcome, including failures, comes back as a
    CommandResult so the view decides how to surface it. Commands run on the
    GUI thread; a command arriving while another is still in flight (the
    WebEngine exporter spins a nested event loop) is skipped, so the session
    is only ever mutated by one handler at a time.
    """

    def __init__(
        self,
        session: DocumentSession,
        bridge: ConversionBridge,
        dialogs: IFileDialogService,
        channel: INotificationChannel,
        capability: IExportCapability,
        *,
        reparse_on_export: bool = True,
        parent: Any | None = None,
    ) -> None:
        self.session = session
        self.bridge = bridge
        self.dialogs = dialogs
        self.channel = channel
        self.capability = capability
        self.reparse_on_export = reparse_on_export
        self.parent = parent
        self._busy = False

    @property
    def export_enabled(self) -> bool:
        return self.session.is_loaded

    # ---------- open ----------

    def handle_open(self) -> CommandResult:
        return self._run(Command.OPEN, lambda: self._load(self._ask_open_path()))

    def open_path(self, path: Path) -> CommandResult:
        """Open without a dialog (CLI argument, drag and drop, recent files)."""
        return self._run(Command.OPEN, lambda: self._load(path))

    def _ask_open_path(self) -> Path:
        start = self.session.source_path.parent if self.session.source_path else None
        path = self.dialogs.choose_markdown_file(self.parent, start)
        if path is None:
            raise UserCancelled()
        return path

    def _load(self, path: Path) -> CommandResult:
        html = self.bridge.parse_markdown_to_html(path)

        self.session.load(path, html)
        self.capability.set_export_enabled(True)
        self.channel.send(DocumentLoaded(path=path, html_content=html))

        logger.info("Opened %s", path)
        return CommandResult.completed(Command.OPEN, path)

    # ---------- export ----------

    def handle_export(self) -> CommandResult:
        if not self.session.is_loaded:
            logger.debug("Export requested with no document loaded")
            return CommandResult.skipped(
                Command.EXPORT, PreconditionError("No document is loaded")
            )
        return self._run(Command.EXPORT, self._export)

    def _export(self) -> CommandResult:
        source = self.session.source_path
        if source is None:
            raise PreconditionError("No document is loaded")

        destination = self.dialogs.choose_pdf_destination(self.parent, source.with_suffix(".pdf"))
        if destination is None:
            raise UserCancelled()

        if self.reparse_on_export:
            html = self.bridge.parse_markdown_to_html(source)
        else:
            html = self.session.rendered_html or ""

        self.bridge.render_to_pdf(source, html, destination)
        self.channel.send(ExportCompleted(path=destination))
        return CommandResult.completed(Command.EXPORT, destination)

    # ---------- boundary ----------

    def _run(self, command: Command, action) -> CommandResult:
        if self._busy:
            logger.warning("%s ignored: another command is still running", command.name)
            return CommandResult.skipped(
                command, PreconditionError("Another command is still running")
            )

        self._busy = True
        try:
            return action()
        except UserCancelled:
            logger.debug("%s cancelled by user", command.name)
            return CommandResult.cancelled(command)
        except MdViewError as e:
            logger.error("%s failed: %s", command.name, e)
            return CommandResult.failed(command, e, getattr(e, "path", None))
        except Exception as e:
            logger.exception("%s failed unexpectedly", command.name)
            return CommandResult.failed(command, e)
        finally:
            self._busy = False
