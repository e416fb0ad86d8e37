"""Turns an uploaded document into the single image sent to the models."""

import base64
from pathlib import Path

from docextract.logging.logger import Log
from docextract.rasterizer.base import BasePdfRenderer
from docextract.rasterizer.exceptions import RasterizationError
from docextract.rasterizer.models import RasterPayload

PDF_MEDIA_TYPE = "application/pdf"
SCREENSHOT_MEDIA_TYPE = "image/png"


def is_pdf(media_type: str) -> bool:
    """Compare the essence of a media type, ignoring case and parameters."""
    return media_type.split(";", 1)[0].strip().lower() == PDF_MEDIA_TYPE


class Rasterizer:
    """Re-encodes images as-is and screenshots PDFs through a renderer."""

    def __init__(self, pdf_renderer: BasePdfRenderer) -> None:
        self._pdf_renderer = pdf_renderer

    def rasterize(self, path: Path, media_type: str) -> RasterPayload:
        """Produce a base64 image payload for the document at ``path``.

        Non-PDF input is not decoded or validated; a malformed image only
        surfaces later as a model invocation failure.

        Raises:
            RasterizationError: if the file cannot be read or rendered.
        """
        if is_pdf(media_type):
            image_bytes = self._pdf_renderer.render(path)
            Log.info(f"Rendered PDF {path.name} into {len(image_bytes)} bytes of PNG")
            return RasterPayload(data=_encode(image_bytes), media_type=SCREENSHOT_MEDIA_TYPE)

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise RasterizationError(f"Failed to read upload {path.name}: {exc}") from exc
        Log.debug(f"Passing through {len(raw_bytes)} bytes of {media_type}")
        return RasterPayload(data=_encode(raw_bytes), media_type=media_type)


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
