from dataclasses import dataclass
from enum import StrEnum


class FailureKind(StrEnum):
    INVOCATION = "invocation_failure"
    PARSE = "parse_failure"


@dataclass(frozen=True)
class ParsedExtraction:
    """Structured fields a model extracted from the document."""

    data: dict[str, object]


@dataclass(frozen=True)
class ExtractionFailure:
    """Diagnostic outcome for a model that produced no usable extraction.

    ``original_text`` is only set for parse failures, so operators can
    inspect what the model actually returned.
    """

    kind: FailureKind
    message: str
    original_text: str | None = None


ExtractionOutcome = ParsedExtraction | ExtractionFailure
