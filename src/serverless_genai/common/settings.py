"""Environment-driven settings, read once at startup."""
from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_PORT = 8080

@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    log_level: str = "INFO"

def load_settings() -> Settings:
    """
    Build settings from the process environment.

    A blank GEMINI_API_KEY counts as unset. An unparsable PORT raises ValueError.
    """
    key = os.getenv("GEMINI_API_KEY", "").strip()
    return Settings(
        gemini_api_key=key or None,
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        host=os.getenv("HOST", "0.0.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
