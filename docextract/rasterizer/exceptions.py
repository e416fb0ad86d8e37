class RasterizationError(Exception):
    """Raised when a document cannot be turned into a raster payload."""


class PdfRenderError(RasterizationError):
    """Raised when a rendering engine fails to screenshot a PDF."""
