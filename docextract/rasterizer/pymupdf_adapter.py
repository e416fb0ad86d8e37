from pathlib import Path

import pymupdf

from docextract.rasterizer.base import BasePdfRenderer
from docextract.rasterizer.exceptions import PdfRenderError


class PyMuPdfRenderer(BasePdfRenderer):
    """Renders the first PDF page with PyMuPDF, scaled to the viewport width."""

    def __init__(self, viewport_width: int = 1200, viewport_height: int = 1600) -> None:
        self._viewport_width = viewport_width
        self._viewport_height = viewport_height

    def render(self, pdf_path: Path) -> bytes:
        try:
            with pymupdf.open(str(pdf_path), filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfRenderError("PDF has no pages")
                page = doc[0]
                zoom = self._viewport_width / page.rect.width
                pixmap = page.get_pixmap(matrix=pymupdf.Matrix(zoom, zoom))
                return pixmap.tobytes("png")
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
