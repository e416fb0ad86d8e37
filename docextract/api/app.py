"""HTTP surface: one upload endpoint in front of the orchestrator."""

import shutil
import uuid
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docextract.api.schemas import ErrorResponse, ExtractionResponse
from docextract.config.settings import Settings
from docextract.logging.logger import Log
from docextract.orchestrator.exceptions import NoDocumentProvidedError
from docextract.orchestrator.models import UploadedDocument, format_timestamp
from docextract.orchestrator.orchestrator import ExtractionOrchestrator, build_orchestrator
from docextract.rasterizer.exceptions import RasterizationError

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def _now() -> str:
    return format_timestamp(datetime.now(UTC))


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details, timestamp=_now())
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def spool_upload(upload: UploadFile, upload_dir: Path) -> UploadedDocument:
    """Copy an incoming upload to a randomly named file under ``upload_dir``."""
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / uuid.uuid4().hex
    try:
        with path.open("wb") as out:
            shutil.copyfileobj(upload.file, out)
    except OSError:
        path.unlink(missing_ok=True)
        raise
    return UploadedDocument(
        path=path,
        media_type=upload.content_type or DEFAULT_MEDIA_TYPE,
        size_bytes=path.stat().st_size,
    )


def create_app(
    settings: Settings,
    orchestrator: ExtractionOrchestrator | None = None,
) -> FastAPI:
    """Build the FastAPI application around a (possibly injected) orchestrator."""
    if orchestrator is None:
        orchestrator = build_orchestrator(settings)

    app = FastAPI(title="docextract")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[f"http://localhost:{settings.client_port}"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    @app.get("/healthz", tags=["health"])
    def healthz() -> dict[str, str]:
        return {"ok": "true"}

    @app.post("/upload", response_model=ExtractionResponse)
    def upload(file: UploadFile | None = File(None)) -> JSONResponse | ExtractionResponse:
        try:
            document = spool_upload(file, settings.upload_dir) if file is not None else None
            result = orchestrator.run(document)
        except NoDocumentProvidedError as exc:
            Log.warning(f"Rejected upload: {exc}")
            return _error(400, str(exc))
        except RasterizationError as exc:
            Log.error(f"Rasterization failed: {exc}")
            return _error(500, str(exc), type(exc).__name__)
        except Exception as exc:
            Log.exception(f"Upload processing failed: {exc}")
            return _error(500, str(exc), type(exc).__name__)

        return ExtractionResponse(data=result.to_payload(), timestamp=_now())

    return app
