from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TokenUsage:
    """Token counters reported by the provider; zero when omitted."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class VisionCompletion:
    """Raw text returned by a model plus its usage counters."""

    content: str
    usage: TokenUsage = field(default_factory=TokenUsage)


@dataclass(frozen=True)
class InvocationSuccess:
    model: str
    completion: VisionCompletion
    started_at: datetime
    elapsed_ms: int


@dataclass(frozen=True)
class InvocationFailure:
    model: str
    message: str
    started_at: datetime


InvocationResult = InvocationSuccess | InvocationFailure
