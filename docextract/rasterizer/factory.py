from docextract.config.settings import Settings
from docextract.rasterizer.base import BasePdfRenderer
from docextract.rasterizer.playwright_adapter import PlaywrightRenderer
from docextract.rasterizer.pymupdf_adapter import PyMuPdfRenderer
from docextract.rasterizer.rasterizer import Rasterizer


class RasterizerFactory:
    """Creates a Rasterizer backed by the configured PDF rendering engine."""

    ENGINES: dict[str, type[BasePdfRenderer]] = {
        "playwright": PlaywrightRenderer,
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> Rasterizer:
        engine = settings.rasterizer_engine.lower()
        if engine not in cls.ENGINES:
            raise ValueError(
                f"Unknown rasterizer engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return Rasterizer(pdf_renderer=cls._build_renderer(engine, settings))

    @classmethod
    def _build_renderer(cls, engine: str, settings: Settings) -> BasePdfRenderer:
        if engine == "playwright":
            return PlaywrightRenderer(
                viewport_width=settings.render_viewport_width,
                viewport_height=settings.render_viewport_height,
                sandbox=settings.render_browser_sandbox,
                channel=settings.render_browser_channel,
            )
        return cls.ENGINES[engine](
            viewport_width=settings.render_viewport_width,
            viewport_height=settings.render_viewport_height,
        )
