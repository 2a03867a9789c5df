"""
Exception hierarchy for MDView.

Library errors (OSError, parser and PDF engine failures) are translated into
these at the conversion bridge so the command dispatcher only has to know
about one family.
"""

from __future__ import annotations

from pathlib import Path


class MdViewError(Exception):
    """Base exception for all MDView errors."""


class UserCancelled(MdViewError):
    """A dialog was dismissed. Silent no-op, never reported as a failure."""


class DocumentIOError(MdViewError):
    """A source file could not be read or a destination could not be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ParseError(MdViewError):
    """The Markdown parser raised while converting a document."""


class RenderError(MdViewError):
    """The PDF engine failed to produce output."""


class PreconditionError(MdViewError):
    """A command was invoked in a state where it cannot run."""
