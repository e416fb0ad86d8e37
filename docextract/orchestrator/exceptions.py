class ExtractionError(Exception):
    """Base exception for request-level extraction failures."""


class NoDocumentProvidedError(ExtractionError):
    """Raised when a request arrives without an uploaded document."""


class UnexpectedExtractionError(ExtractionError):
    """Raised when orchestration fails for a reason other than a known failure kind."""
