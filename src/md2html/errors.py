"""md2html exception hierarchy.

Malformed Markdown never raises; these cover configuration mistakes and
unexpected faults inside a renderer.
"""


class Md2HtmlError(Exception):
    """Base exception for all md2html errors."""


class RenderError(Md2HtmlError):
    """Raised when a renderer fails unexpectedly while converting a document."""


class RendererNotFoundError(Md2HtmlError, KeyError):
    """Raised when a renderer name is not present in the registry."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateRendererError(Md2HtmlError, ValueError):
    """Raised when a renderer name is registered twice."""
