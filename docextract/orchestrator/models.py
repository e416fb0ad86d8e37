from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from docextract.invocation.models import TokenUsage
from docextract.normalization.models import ExtractionFailure, ExtractionOutcome, FailureKind

STATUS_OK = "ok"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class UploadedDocument:
    """A document spooled to disk by the upload layer."""

    path: Path
    media_type: str
    size_bytes: int


@dataclass(frozen=True)
class ModelAttempt:
    """Finalized outcome of one model for one request."""

    model: str
    started_at: datetime
    outcome: ExtractionOutcome
    elapsed_ms: int | None = None
    usage: TokenUsage | None = None

    @property
    def status(self) -> str:
        if isinstance(self.outcome, ExtractionFailure):
            return self.outcome.kind.value
        return STATUS_OK

    def to_log_record(self) -> dict[str, object]:
        """Build the persisted record.

        Invocation failures carry only the error; successes and parse
        failures carry timing, tokens and the (possibly diagnostic) response.
        """
        record: dict[str, object] = {
            "timestamp": format_timestamp(self.started_at),
            "model": self.model,
        }
        outcome = self.outcome
        if isinstance(outcome, ExtractionFailure) and outcome.kind is FailureKind.INVOCATION:
            record["error"] = outcome.message
            return record

        usage = self.usage or TokenUsage()
        record["responseTimeMs"] = self.elapsed_ms if self.elapsed_ms is not None else 0
        record["tokens"] = {
            "promptTokens": usage.prompt_tokens,
            "completionTokens": usage.completion_tokens,
            "totalTokens": usage.total_tokens,
        }
        if isinstance(outcome, ExtractionFailure):
            record["response"] = {
                "error": outcome.message,
                "originalResponse": outcome.original_text,
            }
        else:
            record["response"] = outcome.data
        return record

    def to_entry(self) -> dict[str, object]:
        return {**self.to_log_record(), "status": self.status}


@dataclass(frozen=True)
class AggregatedResult:
    """Per-model outcomes of one request, in configured model order."""

    attempts: dict[str, ModelAttempt]

    def to_payload(self) -> dict[str, dict[str, object]]:
        return {model: attempt.to_entry() for model, attempt in self.attempts.items()}
