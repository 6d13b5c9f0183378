"""issueblog error hierarchy.

All project exceptions inherit from IssueBlogError, enabling:
- ``except IssueBlogError`` at the CLI boundary
- Fine-grained catches deeper in the stack (``except ParseError``)

Hierarchy:
    IssueBlogError
    ├── ConfigError        config.py
    ├── ParseError         markdown.py (never escapes the transform pipeline)
    ├── RenderError        templates.py, feed.py
    ├── WriteError         output.py
    └── SourceError        github.py
"""

from __future__ import annotations


class IssueBlogError(Exception):
    """Base class for all issueblog errors."""


class ConfigError(IssueBlogError):
    """Site or theme configuration could not be loaded."""


class ParseError(IssueBlogError):
    """Markdown or HTML content could not be parsed."""


class RenderError(IssueBlogError):
    """A template or the feed could not be rendered."""


class WriteError(IssueBlogError):
    """A generated file could not be written to the output directory."""


class SourceError(IssueBlogError):
    """The issue tracker API returned an error."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status
