from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from mdview.domain.results import Command, CommandResult
from mdview.services.ui.ports.messages import IMessageService


class QtMessageService(IMessageService):
    def about(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.about(parent, title, text)

    def command_failed(self, parent: Any | None, result: CommandResult) -> None:
        verb = "Open" if result.command is Command.OPEN else "Export"
        text = f"{verb} failed:\n{result.error}"
        if result.path is not None:
            text += f"\n\n{result.path}"
        QMessageBox.critical(parent, f"{verb} Error", text)
