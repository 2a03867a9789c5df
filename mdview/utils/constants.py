APP_ORG = "MDView"
APP_NAME = "MDView"

ENV_MODE_VAR = "MDVIEW_ENV"
ENV_MODE_DEVELOPMENT = "development"
DEFAULT_DEV_URL = "http://localhost:4200"

OPEN_FILTER = "Markdown (*.md);;All files (*.*)"
SAVE_FILTER = "PDF (*.pdf)"

CONTENT_CLASS = "markdown-content"

CSS_PREVIEW = """
:root {
  color-scheme: light;
  --paper: #fdfdfc; --ink: #1d1f23; --faint: #6a6f78; --rule: #d9dce1;
  --well: #f2f3f5; --accent: #2458c6;
}
:root[data-theme="dark"] { color-scheme: dark; --paper: #16181c; --ink: #dfe2e7; --faint: #979ca6; --rule: #30343c; --well: #1f2228; --accent: #8aaeff; }
@media (prefers-color-scheme: dark) {
  :root[data-theme="system"] { color-scheme: dark; --paper: #16181c; --ink: #dfe2e7; --faint: #979ca6; --rule: #30343c; --well: #1f2228; --accent: #8aaeff; }
}
body { margin: 0; padding: 2rem 1.5rem; background: var(--paper); color: var(--ink);
       font: 16px/1.6 system-ui, -apple-system, "Segoe UI", Roboto, sans-serif; }
.markdown-content { max-width: 48rem; margin: 0 auto; }
.markdown-content > :first-child { margin-top: 0; }
h1, h2 { padding-bottom: .25em; border-bottom: 1px solid var(--rule); }
a { color: var(--accent); }
img { max-width: 100%; }
pre, code { font-family: ui-monospace, "SF Mono", Menlo, Consolas, monospace; font-size: .9em; }
pre { background: var(--well); padding: .8rem 1rem; border-radius: 4px; overflow-x: auto; }
:not(pre) > code { background: var(--well); padding: .1em .3em; border-radius: 3px; }
blockquote { margin: 1em 0; padding: 0 1em; border-left: 3px solid var(--rule); color: var(--faint); }
table { border-collapse: collapse; margin: 1em 0; }
th, td { border: 1px solid var(--rule); padding: .35em .7em; }
th { background: var(--well); }
hr { border: 0; border-top: 1px solid var(--rule); }
li.task-list-item { list-style: none; }
li.task-list-item input { margin: 0 .5em 0 -1.4em; }
div.arithmatex { overflow-x: auto; }
pre.raw-markdown { white-space: pre-wrap; word-break: break-word; }
@media print {
  :root, :root[data-theme] { color-scheme: light; --paper: #fff; --ink: #000; --faint: #444; --rule: #bbb; --well: #f4f4f4; --accent: #000; }
  body { padding: 0; font-size: 11pt; }
  .markdown-content { max-width: none; }
  h1, h2, h3, h4 { break-after: avoid; }
  pre, blockquote, table, img, div.arithmatex { break-inside: avoid; }
  pre { white-space: pre-wrap; overflow: visible; }
}
"""

HTML_TEMPLATE = """<!doctype html>
<html data-theme="{theme}">
<head>
<meta charset="utf-8">
<meta name="generator" content="MDView">
<title>{title}</title>
<style>{css}</style>
{head}
</head>
<body>
{body}
</body>
</html>
"""

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_RECENTS = "file/recent"
SETTINGS_THEME = "view/theme"
SETTINGS_RAW_MARKDOWN = "view/raw_markdown"
MAX_RECENTS = 8
