from abc import ABC, abstractmethod
from pathlib import Path


class BasePdfRenderer(ABC):
    """Contract for all PDF rendering engines."""

    @abstractmethod
    def render(self, pdf_path: Path) -> bytes:
        """Render a PDF file into a single PNG image.

        Args:
            pdf_path: Location of the PDF on the local filesystem.

        Returns:
            Raw PNG bytes of the rendered content. Only what fits the
            render is captured; pages are not split into separate images.

        Raises:
            PdfRenderError: if rendering fails for any reason.
        """
