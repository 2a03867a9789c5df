"""MDView: a small desktop Markdown viewer with PDF export."""

__version__ = "0.1.0"
