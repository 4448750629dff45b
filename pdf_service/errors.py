"""
Exception types raised by the PDF service.

Everything raised from composition or rendering is caught once at the
request handler and turned into the JSON error envelope.
"""


class PdfServiceError(Exception):
    """Base class for PDF service errors."""


class RenderError(PdfServiceError):
    """The renderer failed to launch, load content, or produce output."""


class ResourceReleaseError(PdfServiceError):
    """Tearing down a renderer failed (logged, never surfaced to the caller)."""


class PayloadTooLargeError(PdfServiceError):
    """The request body passed the configured size ceiling while being read."""
