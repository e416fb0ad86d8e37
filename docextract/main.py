import uvicorn

from docextract.api.app import create_app
from docextract.config.settings import Settings
from docextract.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the upload API."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
