"""Runs one document through every configured model."""

from collections.abc import Sequence

from docextract.attempts.base import BaseAttemptStore
from docextract.attempts.exceptions import AttemptLogError
from docextract.attempts.jsonl_store import JsonlAttemptStore
from docextract.config.settings import Settings
from docextract.invocation.factory import VisionClientFactory
from docextract.invocation.invoker import ModelInvoker
from docextract.invocation.models import InvocationFailure
from docextract.logging.logger import Log
from docextract.normalization.models import ExtractionFailure, FailureKind
from docextract.normalization.normalizer import ResponseNormalizer
from docextract.orchestrator.exceptions import (
    NoDocumentProvidedError,
    UnexpectedExtractionError,
)
from docextract.orchestrator.models import (
    STATUS_OK,
    AggregatedResult,
    ModelAttempt,
    UploadedDocument,
)
from docextract.orchestrator.uploads import discard_upload
from docextract.rasterizer.exceptions import RasterizationError
from docextract.rasterizer.factory import RasterizerFactory
from docextract.rasterizer.models import RasterPayload
from docextract.rasterizer.rasterizer import Rasterizer


class ExtractionOrchestrator:
    """Coordinates rasterize -> (invoke -> normalize -> log) per model -> aggregate.

    Models run strictly one after another. A failing model becomes a failed
    entry in the aggregate; only a missing document, a rasterization failure
    or an unexpected error end the request early. The uploaded file is
    removed on every path once a document has been received.
    """

    def __init__(
        self,
        *,
        rasterizer: Rasterizer,
        invoker: ModelInvoker,
        normalizer: ResponseNormalizer,
        attempt_store: BaseAttemptStore,
        models: Sequence[str],
    ) -> None:
        if not models:
            raise ValueError("At least one extraction model must be configured")
        if len(set(models)) != len(models):
            raise ValueError(f"Extraction models must be unique, got {list(models)}")
        self._rasterizer = rasterizer
        self._invoker = invoker
        self._normalizer = normalizer
        self._attempt_store = attempt_store
        self._models = tuple(models)

    @property
    def models(self) -> tuple[str, ...]:
        return self._models

    def run(self, document: UploadedDocument | None) -> AggregatedResult:
        """Extract the document with every configured model.

        Raises:
            NoDocumentProvidedError: if ``document`` is None.
            RasterizationError: if the document cannot be rasterized.
            UnexpectedExtractionError: on any other failure.
        """
        if document is None:
            raise NoDocumentProvidedError("No file uploaded")

        with discard_upload(document.path):
            try:
                return self._extract(document)
            except RasterizationError:
                raise
            except Exception as exc:
                raise UnexpectedExtractionError(
                    f"Extraction failed unexpectedly: {exc}"
                ) from exc

    def _extract(self, document: UploadedDocument) -> AggregatedResult:
        Log.info(
            f"Extracting {document.path.name} ({document.media_type}, "
            f"{document.size_bytes} bytes) with {len(self._models)} models"
        )
        payload = self._rasterizer.rasterize(document.path, document.media_type)

        attempts: dict[str, ModelAttempt] = {}
        for model in self._models:
            attempt = self._attempt(model, payload)
            self._record(attempt)
            attempts[model] = attempt

        failed = sum(1 for attempt in attempts.values() if attempt.status != STATUS_OK)
        Log.info(f"Aggregated {len(attempts)} model results ({failed} failed)")
        return AggregatedResult(attempts=attempts)

    def _attempt(self, model: str, payload: RasterPayload) -> ModelAttempt:
        result = self._invoker.invoke(model, payload)
        if isinstance(result, InvocationFailure):
            return ModelAttempt(
                model=model,
                started_at=result.started_at,
                outcome=ExtractionFailure(kind=FailureKind.INVOCATION, message=result.message),
            )
        return ModelAttempt(
            model=model,
            started_at=result.started_at,
            outcome=self._normalizer.normalize(result.completion.content),
            elapsed_ms=result.elapsed_ms,
            usage=result.completion.usage,
        )

    def _record(self, attempt: ModelAttempt) -> None:
        try:
            self._attempt_store.append(attempt.to_log_record())
        except AttemptLogError as exc:
            Log.warning(
                f"Attempt of model {attempt.model} was not logged: {exc}",
                model=attempt.model,
            )


def build_orchestrator(settings: Settings) -> ExtractionOrchestrator:
    """Build an ExtractionOrchestrator with all required adapters."""
    return ExtractionOrchestrator(
        rasterizer=RasterizerFactory.create(settings),
        invoker=VisionClientFactory.create_invoker(settings),
        normalizer=ResponseNormalizer(),
        attempt_store=JsonlAttemptStore(settings.attempt_log_path),
        models=settings.extraction_models,
    )
