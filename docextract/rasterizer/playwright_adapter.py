from pathlib import Path

from playwright.sync_api import sync_playwright

from docextract.rasterizer.base import BasePdfRenderer
from docextract.rasterizer.exceptions import PdfRenderError


class PlaywrightRenderer(BasePdfRenderer):
    """Screenshots a PDF opened in a headless Chromium page.

    The default ``chromium`` channel runs the full browser in new headless
    mode, which ships the built-in PDF viewer; the stripped headless shell
    does not and turns the navigation into a download. The sandbox cannot
    start when the service runs as root, so it is configurable.
    """

    def __init__(
        self,
        viewport_width: int = 1200,
        viewport_height: int = 1600,
        *,
        sandbox: bool = True,
        channel: str | None = "chromium",
    ) -> None:
        self._viewport = {"width": viewport_width, "height": viewport_height}
        self._sandbox = sandbox
        self._channel = channel or None

    def render(self, pdf_path: Path) -> bytes:
        try:
            with sync_playwright() as playwright:
                browser = playwright.chromium.launch(
                    headless=True,
                    channel=self._channel,
                    chromium_sandbox=self._sandbox,
                )
                try:
                    page = browser.new_page(viewport=self._viewport)
                    page.goto(pdf_path.resolve().as_uri(), wait_until="networkidle")
                    return page.screenshot(full_page=True, type="png")
                finally:
                    browser.close()
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"playwright rendering failed: {exc}") from exc
