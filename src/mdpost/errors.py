"""Content loading errors

All loader failures derive from ContentError so a publishing pipeline can
catch them with a single except clause:

    try:
        doc = load_document(raw, path="posts/go-modules.md")
    except MissingRequiredField as e:
        print(f"{e.path}: add '{e.field}' to the front matter")
    except ContentError as e:
        print(f"skipping: {e}")

Nothing is recovered locally; a failed document yields no partial result.
"""

from typing import Any, Optional


class ContentError(ValueError):
    """Base exception for every content loading failure.

    Attributes:
        message: Human-readable error description
        details: Additional context (e.g. pydantic validation errors)
        path:    Source path label of the offending document, when known
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message

    def to_dict(self) -> dict[str, Any]:
        """Serializable form for reports and JSON output."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "path": self.path,
            "details": self.details,
        }


class MalformedMetadata(ContentError):
    """Front matter block is missing, unterminated, unparseable, or has wrongly typed values."""


class MissingRequiredField(ContentError):
    """A required front matter key (title, date) is absent or empty."""

    def __init__(self, field: str, path: Optional[str] = None):
        super().__init__(f"Missing required front matter field: {field}", {"field": field}, path)
        self.field = field


class MarkupRenderError(ContentError):
    """The markup body contains a construct that cannot be rendered (e.g. an unterminated code fence)."""

    def __init__(self, message: str, line: Optional[int] = None, path: Optional[str] = None):
        super().__init__(message, {"line": line} if line is not None else None, path)
        self.line = line
