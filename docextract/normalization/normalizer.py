"""Parses raw model output into a mapping without ever raising."""

import json

from docextract.logging.logger import Log
from docextract.normalization.models import (
    ExtractionFailure,
    ExtractionOutcome,
    FailureKind,
    ParsedExtraction,
)

PARSE_FAILURE_MESSAGE = "Failed to parse LLM response"


class ResponseNormalizer:
    """Turns a model completion into a ParsedExtraction or a parse failure."""

    def normalize(self, raw: str) -> ExtractionOutcome:
        try:
            parsed = json.loads(self._strip_code_fences(raw), parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            Log.warning(f"{PARSE_FAILURE_MESSAGE}: {exc}")
            return self._failure(raw)

        if not isinstance(parsed, dict):
            Log.warning(f"{PARSE_FAILURE_MESSAGE}: top-level {type(parsed).__name__}")
            return self._failure(raw)
        return ParsedExtraction(data=parsed)

    @staticmethod
    def _failure(raw: str) -> ExtractionFailure:
        return ExtractionFailure(
            kind=FailureKind.PARSE,
            message=PARSE_FAILURE_MESSAGE,
            original_text=raw,
        )

    @staticmethod
    def _strip_code_fences(raw: str) -> str:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)
        return cleaned


def _reject_constant(name: str) -> object:
    # NaN and Infinity are not JSON and cannot be written to the attempt log.
    raise ValueError(f"Non-standard JSON constant {name}")
