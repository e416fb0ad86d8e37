"""Single-model vision invocation with timing and failure capture."""

import time
from datetime import UTC, datetime

from docextract.invocation.client_base import BaseVisionClient
from docextract.invocation.models import InvocationFailure, InvocationResult, InvocationSuccess
from docextract.logging.logger import Log
from docextract.rasterizer.models import RasterPayload

DEFAULT_MAX_TOKENS = 1000


class ModelInvoker:
    """Sends one extraction request to one named model.

    ``invoke`` always resolves to an ``InvocationSuccess`` or an
    ``InvocationFailure``; provider errors never escape it.
    """

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        instruction: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._client = client
        self._instruction = instruction
        self._max_tokens = max_tokens

    def invoke(self, model: str, payload: RasterPayload) -> InvocationResult:
        started_at = datetime.now(UTC)
        start = time.perf_counter()
        try:
            completion = self._client.create_vision_completion(
                model=model,
                instruction=self._instruction,
                image_url=payload.data_url,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            Log.error(f"Model {model} invocation failed: {exc}", model=model)
            return InvocationFailure(model=model, message=str(exc), started_at=started_at)
        elapsed_ms = round((time.perf_counter() - start) * 1000)

        Log.info(
            f"Model {model} answered in {elapsed_ms} ms "
            f"({completion.usage.total_tokens} tokens)"
        )
        return InvocationSuccess(
            model=model,
            completion=completion,
            started_at=started_at,
            elapsed_ms=elapsed_ms,
        )
