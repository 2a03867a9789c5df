from pathlib import Path

import pytest

from mdview.domain.messages import DocumentLoaded, ExportCompleted, NotificationKind
from mdview.domain.models import DocumentSession, ExportOptions
from mdview.domain.results import Command, CommandResult, Outcome


def test_session_starts_empty():
    s = DocumentSession()
    assert s.source_path is None
    assert s.rendered_html is None
    assert s.is_loaded is False


def test_session_load_sets_both_fields(tmp_path):
    s = DocumentSession()
    p = tmp_path / "x.md"
    s.load(p, "<p>x</p>")
    assert s.source_path == p
    assert s.rendered_html == "<p>x</p>"
    assert s.is_loaded is True


@pytest.mark.parametrize(
    "path, html",
    [(Path("/tmp/a.md"), None), (None, "<p>a</p>")],
)
def test_session_rejects_half_set_state(path, html):
    with pytest.raises(ValueError):
        DocumentSession(source_path=path, rendered_html=html)


def test_notification_kinds():
    loaded = DocumentLoaded(path=Path("/tmp/a.md"), html_content="<p/>")
    done = ExportCompleted(path=Path("/tmp/a.pdf"))
    assert loaded.kind is NotificationKind.DOCUMENT_LOADED
    assert done.kind is NotificationKind.EXPORT_COMPLETED


def test_command_result_helpers():
    p = Path("/tmp/a.md")
    assert CommandResult.completed(Command.OPEN, p).ok is True
    assert CommandResult.cancelled(Command.OPEN).outcome is Outcome.CANCELLED

    err = RuntimeError("x")
    failed = CommandResult.failed(Command.EXPORT, err, p)
    assert failed.ok is False
    assert failed.error is err
    assert failed.path == p


def test_export_options_defaults():
    o = ExportOptions()
    assert o.page_size == "A4"
    assert o.landscape is False
    assert o.print_background is True
    assert o.stylesheet is None
