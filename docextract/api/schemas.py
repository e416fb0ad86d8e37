from typing import Any

from pydantic import BaseModel


class ExtractionResponse(BaseModel):
    success: bool = True
    data: dict[str, dict[str, Any]]
    timestamp: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: str | None = None
    timestamp: str
