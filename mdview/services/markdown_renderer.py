# mdview/services/markdown_renderer.py
from __future__ import annotations

import html as html_lib
from typing import Literal, NamedTuple

import markdown

from mdview.domain.interfaces import IMarkdownRenderer
from mdview.domain.models import Theme
from mdview.utils.constants import CONTENT_CLASS, CSS_PREVIEW, HTML_TEMPLATE

MathEngine = Literal["mathjax", "katex"]

_EXTENSIONS = [
    "extra",
    "codehilite",
    "sane_lists",
    "smarty",
    "pymdownx.arithmatex",
    "pymdownx.tasklist",
    "pymdownx.tilde",
]

_EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False, "noclasses": True},
    # generic mode leaves \( \) / \[ \] inside span/div.arithmatex for the page script
    "pymdownx.arithmatex": {
        "generic": True,
        "inline_syntax": ["dollar"],
        "block_syntax": ["dollar"],
    },
    "pymdownx.tasklist": {"custom_checkbox": False},
}


class MathAssets(NamedTuple):
    head: str
    scripts: str


# SVG output keeps formulas crisp in the PDF engines.
_MATHJAX = MathAssets(
    head="",
    scripts=r"""
<script>
window.MathJax = {
  tex: { inlineMath: [['\\(', '\\)']], displayMath: [['\\[', '\\]']], processEscapes: true },
  options: { ignoreHtmlClass: '.*', processHtmlClass: 'arithmatex' }
};
</script>
<script id="MathJax-script" async src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-svg.js"></script>
""",
)

_KATEX = MathAssets(
    head='<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/katex@0.16.11/dist/katex.min.css">',
    scripts=r"""
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.11/dist/katex.min.js"></script>
<script>
document.addEventListener("DOMContentLoaded", function () {
  document.querySelectorAll(".arithmatex").forEach(function (el) {
    var tex = el.textContent.trim().slice(2, -2);
    katex.render(tex, el, { displayMode: el.tagName === "DIV", throwOnError: false });
  });
});
</script>
""",
)


class MarkdownRenderer(IMarkdownRenderer):
    """
    Markdown to HTML through python-markdown, with $...$ math left for the page.

    to_html() returns the parser output wrapped in a single
    <div class="markdown-content"> container; that fragment is what the
    session stores and what gets pushed to the display. to_document() turns a
    fragment into a standalone page (CSS + MathJax or KaTeX assets) for the
    preview and the PDF engines.
    """

    def __init__(self, math_engine: MathEngine = "mathjax") -> None:
        self.math_engine: MathEngine = math_engine
        self._md = markdown.Markdown(
            extensions=_EXTENSIONS,
            extension_configs=_EXTENSION_CONFIGS,
            output_format="html",
        )

    @property
    def math_assets(self) -> MathAssets:
        return _KATEX if self.math_engine == "katex" else _MATHJAX

    def to_html(self, markdown_text: str) -> str:
        body = self._md.reset().convert(markdown_text)
        return f'<div class="{CONTENT_CLASS}">{body}</div>'

    def to_document(self, fragment: str, title: str = "", theme: Theme = Theme.SYSTEM) -> str:
        assets = self.math_assets
        return HTML_TEMPLATE.format(
            theme=Theme(theme).value,
            title=html_lib.escape(title),
            css=CSS_PREVIEW,
            head=assets.head,
            body=fragment + assets.scripts,
        )

    def to_raw_document(self, markdown_text: str, title: str = "", theme: Theme = Theme.SYSTEM) -> str:
        """The Markdown source itself, escaped, on the same themed page."""
        body = f'<pre class="raw-markdown">{html_lib.escape(markdown_text)}</pre>'
        return self.to_document(f'<div class="{CONTENT_CLASS}">{body}</div>', title, theme)
