from __future__ import annotations

from pathlib import Path

import pytest

from mdview.domain.errors import DocumentIOError, PreconditionError, RenderError
from mdview.domain.messages import DocumentLoaded, ExportCompleted
from mdview.domain.models import DocumentSession
from mdview.domain.results import Command, Outcome
from mdview.services.conversion_bridge import ConversionBridge
from mdview.services.ui.presenters.command_dispatcher import CommandDispatcher

from .fakes import FakeCapability, FakeDialogs, RecordingChannel, RecordingExporter

HI_HTML = '<div class="markdown-content"><h1>Hi</h1></div>'


@pytest.fixture()
def session() -> DocumentSession:
    return DocumentSession()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture()
def capability() -> FakeCapability:
    return FakeCapability()


@pytest.fixture()
def exporter() -> RecordingExporter:
    return RecordingExporter()


@pytest.fixture()
def dispatcher(session, renderer, file_service, exporter, dialogs, channel, capability):
    bridge = ConversionBridge(renderer, file_service, exporter)
    return CommandDispatcher(session, bridge, dialogs, channel, capability)


# ------------------------------
# open
# ------------------------------


def test_open_loads_session_and_notifies(dispatcher, session, dialogs, channel, capability, readme):
    dialogs.open_path = readme

    result = dispatcher.handle_open()

    assert result.command is Command.OPEN
    assert result.outcome is Outcome.COMPLETED
    assert result.path == readme
    assert session.source_path == readme
    assert session.rendered_html == HI_HTML
    assert capability.enabled is True
    assert channel.sent == [DocumentLoaded(path=readme, html_content=HI_HTML)]


def test_open_cancelled_changes_nothing(dispatcher, session, dialogs, channel, capability):
    dialogs.open_path = None

    result = dispatcher.handle_open()

    assert result.outcome is Outcome.CANCELLED
    assert result.error is None
    assert session == DocumentSession()
    assert channel.sent == []
    assert capability.calls == []


def test_open_cancelled_keeps_previous_document(dispatcher, session, dialogs, channel, readme):
    dialogs.open_path = readme
    dispatcher.handle_open()
    before = (session.source_path, session.rendered_html)

    dialogs.open_path = None
    dispatcher.handle_open()

    assert (session.source_path, session.rendered_html) == before
    assert len(channel.sent) == 1


def test_open_unreadable_file_fails_without_side_effects(
    dispatcher, session, dialogs, channel, capability, tmp_path
):
    dialogs.open_path = tmp_path / "missing.md"

    result = dispatcher.handle_open()

    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, DocumentIOError)
    assert result.path == tmp_path / "missing.md"
    assert session.is_loaded is False
    assert channel.sent == []
    assert capability.calls == []


def test_second_open_replaces_document(dispatcher, session, dialogs, channel, readme, tmp_path):
    other = tmp_path / "other.md"
    other.write_text("*x*", encoding="utf-8")

    dialogs.open_path = readme
    dispatcher.handle_open()
    dialogs.open_path = other
    dispatcher.handle_open()

    assert session.source_path == other
    assert session.rendered_html == '<div class="markdown-content"><p><em>x</em></p></div>'
    assert [m.path for m in channel.sent] == [readme, other]


def test_open_dialog_starts_in_current_document_dir(dispatcher, dialogs, readme):
    dialogs.open_path = readme
    dispatcher.handle_open()
    dispatcher.handle_open()
    assert dialogs.open_calls == [None, readme.parent]


def test_open_path_skips_dialog(dispatcher, session, dialogs, channel, readme):
    result = dispatcher.open_path(readme)
    assert result.ok
    assert dialogs.open_calls == []
    assert session.source_path == readme
    assert isinstance(channel.sent[0], DocumentLoaded)


# ------------------------------
# export
# ------------------------------


def test_export_before_open_is_a_noop(dispatcher, dialogs, channel, exporter):
    dialogs.save_path = Path("/tmp/out.pdf")

    result = dispatcher.handle_export()

    assert result.outcome is Outcome.SKIPPED
    assert isinstance(result.error, PreconditionError)
    assert dialogs.save_calls == []
    assert channel.sent == []
    assert exporter.calls == []


def test_export_step_without_source_fails_cleanly(dispatcher, dialogs, channel, exporter):
    # the export body re-checks the session even when reached without handle_export
    result = dispatcher._run(Command.EXPORT, dispatcher._export)

    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, PreconditionError)
    assert dialogs.save_calls == []
    assert exporter.calls == []


def test_export_renders_reparsed_html_and_notifies(
    dispatcher, session, dialogs, channel, exporter, readme, tmp_path
):
    dialogs.open_path = readme
    dispatcher.handle_open()
    out = tmp_path / "out.pdf"
    dialogs.save_path = out

    result = dispatcher.handle_export()

    assert result.outcome is Outcome.COMPLETED
    assert result.path == out
    html, out_path, base = exporter.calls[0]
    assert HI_HTML in html
    assert out_path == out
    assert base == readme.parent
    assert channel.sent[-1] == ExportCompleted(path=out)
    assert sum(isinstance(m, ExportCompleted) for m in channel.sent) == 1
    assert dialogs.save_calls == [readme.with_suffix(".pdf")]


def test_export_picks_up_edits_made_after_open(dispatcher, session, dialogs, exporter, readme, tmp_path):
    dialogs.open_path = readme
    dispatcher.handle_open()
    readme.write_text("# Changed", encoding="utf-8")
    dialogs.save_path = tmp_path / "out.pdf"

    dispatcher.handle_export()

    assert "<h1>Changed</h1>" in exporter.calls[0][0]
    # the session is read by export, never written
    assert session.rendered_html == HI_HTML


def test_export_can_reuse_cached_html(
    session, renderer, file_service, exporter, dialogs, channel, capability, readme, tmp_path
):
    bridge = ConversionBridge(renderer, file_service, exporter)
    d = CommandDispatcher(
        session, bridge, dialogs, channel, capability, reparse_on_export=False
    )
    d.open_path(readme)
    readme.unlink()
    dialogs.save_path = tmp_path / "out.pdf"

    result = d.handle_export()

    assert result.ok
    assert HI_HTML in exporter.calls[0][0]


def test_export_cancelled(dispatcher, dialogs, channel, exporter, readme):
    dispatcher.open_path(readme)
    dialogs.save_path = None

    result = dispatcher.handle_export()

    assert result.outcome is Outcome.CANCELLED
    assert exporter.calls == []
    assert len(channel.sent) == 1  # only the DocumentLoaded


def test_export_render_failure_is_reported(
    session, renderer, file_service, dialogs, channel, capability, readme, tmp_path
):
    exporter = RecordingExporter(error=RuntimeError("engine crashed"))
    bridge = ConversionBridge(renderer, file_service, exporter)
    d = CommandDispatcher(session, bridge, dialogs, channel, capability)
    d.open_path(readme)
    dialogs.save_path = tmp_path / "out.pdf"

    result = d.handle_export()

    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, RenderError)
    assert not any(isinstance(m, ExportCompleted) for m in channel.sent)
    assert session.source_path == readme


def test_export_source_deleted_is_reported(dispatcher, dialogs, channel, exporter, readme, tmp_path):
    dispatcher.open_path(readme)
    readme.unlink()
    dialogs.save_path = tmp_path / "out.pdf"

    result = dispatcher.handle_export()

    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, DocumentIOError)
    assert exporter.calls == []


def test_unexpected_errors_never_escape(dispatcher, dialogs, readme, monkeypatch):
    def boom(_path):
        raise KeyError("surprise")

    monkeypatch.setattr(dispatcher.bridge, "parse_markdown_to_html", boom)
    dialogs.open_path = readme

    result = dispatcher.handle_open()

    assert result.outcome is Outcome.FAILED
    assert isinstance(result.error, KeyError)


def test_export_enabled_follows_session(dispatcher, readme):
    assert dispatcher.export_enabled is False
    dispatcher.open_path(readme)
    assert dispatcher.export_enabled is True


# ------------------------------
# re-entrancy
# ------------------------------


def test_command_during_running_export_is_skipped(
    session, renderer, file_service, dialogs, channel, capability, readme, tmp_path
):
    other = tmp_path / "other.md"
    other.write_text("other", encoding="utf-8")
    nested: list = []

    class ReentrantExporter(RecordingExporter):
        def export(self, html, out_path, *, base_path=None):
            # what a nested event loop would allow a menu action to do
            nested.append(d.open_path(other))
            super().export(html, out_path, base_path=base_path)

    bridge = ConversionBridge(renderer, file_service, ReentrantExporter())
    d = CommandDispatcher(session, bridge, dialogs, channel, capability)
    d.open_path(readme)
    dialogs.save_path = tmp_path / "out.pdf"

    result = d.handle_export()

    assert result.ok
    assert nested[0].outcome is Outcome.SKIPPED
    assert isinstance(nested[0].error, PreconditionError)
    assert session.source_path == readme
