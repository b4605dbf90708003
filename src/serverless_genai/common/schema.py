"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
import enum
from dataclasses import dataclass

from pydantic import BaseModel

class Outcome(enum.Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    INVALID_PROMPT = "invalid_prompt"
    UPSTREAM_ERROR = "upstream_error"

@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation call: generated text, or a tagged error message."""
    outcome: Outcome
    text: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, text: str) -> "GenerationResult":
        return cls(Outcome.OK, text=text)

    @classmethod
    def failed(cls, outcome: Outcome, error: str) -> "GenerationResult":
        return cls(outcome, error=error)

class GenerateIn(BaseModel):
    prompt: str | None = None

class GenerateOut(BaseModel):
    text: str

class ErrorOut(BaseModel):
    error: str
