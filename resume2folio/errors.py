"""Exceptions raised by the parser, the renderer and upload validation."""

from typing import Optional


class Resume2FolioError(Exception):
    """Base class for every error this package raises on purpose."""


class ParseError(Resume2FolioError):
    """The document could not be turned into résumé data."""


class MalformedPDFError(ParseError):
    """
    Raised when the uploaded bytes cannot be decoded as a PDF.

    Attributes:
        message: Error description
        cause: Short name of the underlying decoder failure, if any
    """

    def __init__(self, message: str = "Failed to parse PDF. Please ensure the file is a valid PDF document.",
                 cause: Optional[str] = None):
        self.message = message
        self.cause = cause
        super().__init__(f"{message} ({cause})" if cause else message)


class TemplateNotFound(Resume2FolioError, LookupError):
    """The requested portfolio template id is not in the catalog."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template {template_id} not found")


class UploadRejected(Resume2FolioError, ValueError):
    """The uploaded file failed the type or size check."""

    def __init__(self, title: str, description: str):
        self.title = title
        self.description = description
        super().__init__(f"{title}: {description}")
