from __future__ import annotations

from pathlib import Path

import pytest

from mdview.domain.errors import DocumentIOError, ParseError, RenderError
from mdview.services.conversion_bridge import ConversionBridge
from mdview.services.file_service import FileService
from mdview.services.markdown_renderer import MarkdownRenderer

from .fakes import RecordingExporter


class BrokenRenderer(MarkdownRenderer):
    def to_html(self, markdown_text: str) -> str:
        raise ValueError("parser exploded")


@pytest.fixture()
def exporter() -> RecordingExporter:
    return RecordingExporter()


@pytest.fixture()
def bridge(renderer, file_service, exporter) -> ConversionBridge:
    return ConversionBridge(renderer, file_service, exporter)


def test_parse_reads_and_wraps(bridge: ConversionBridge, readme: Path):
    assert bridge.parse_markdown_to_html(readme) == (
        '<div class="markdown-content"><h1>Hi</h1></div>'
    )


def test_parse_missing_file_raises_io_error(bridge: ConversionBridge, tmp_path: Path):
    missing = tmp_path / "nope.md"
    with pytest.raises(DocumentIOError) as exc:
        bridge.parse_markdown_to_html(missing)
    assert exc.value.path == missing


def test_parse_undecodable_file_raises_io_error(bridge: ConversionBridge, tmp_path: Path):
    p = tmp_path / "latin.md"
    p.write_bytes(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(DocumentIOError):
        bridge.parse_markdown_to_html(p)


def test_parse_parser_failure_raises_parse_error(file_service, exporter, readme: Path):
    bridge = ConversionBridge(BrokenRenderer(), file_service, exporter)
    with pytest.raises(ParseError):
        bridge.parse_markdown_to_html(readme)


def test_render_wraps_document_and_passes_base_path(
    bridge: ConversionBridge, exporter: RecordingExporter, readme: Path, tmp_path: Path
):
    out = tmp_path / "out.pdf"
    assert bridge.render_to_pdf(readme, "<p>body</p>", out) is True

    html, out_path, base = exporter.calls[0]
    assert html.lower().startswith("<!doctype html")
    assert "<p>body</p>" in html
    assert "<title>readme</title>" in html
    assert out_path == out
    assert base == readme.parent
    assert out.read_bytes().startswith(b"%PDF")


@pytest.mark.parametrize(
    "error, expected",
    [
        (PermissionError("denied"), DocumentIOError),
        (TimeoutError("slow"), RenderError),
        (RuntimeError("engine crashed"), RenderError),
    ],
)
def test_render_translates_engine_errors(
    renderer, readme: Path, tmp_path: Path, error, expected
):
    bridge = ConversionBridge(renderer, FileService(), RecordingExporter(error=error))
    with pytest.raises(expected):
        bridge.render_to_pdf(readme, "<p/>", tmp_path / "out.pdf")
