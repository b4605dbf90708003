from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Any

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # fastapi_app builds its module-level app from the environment at import.
    os.environ.pop("GEMINI_API_KEY", None)


def fake_response(text: str | None) -> SimpleNamespace:
    part = SimpleNamespace(text=text)
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    return SimpleNamespace(candidates=[candidate])


class _FakeModels:
    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_content(self, *, model: str, contents: Any, config: Any = None) -> Any:
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeClient:
    """Stands in for genai.Client; only the async models surface is used."""

    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.models = _FakeModels(response, error)
        self.aio = SimpleNamespace(models=self.models)

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self.models.calls


@pytest.fixture
def haiku_client() -> FakeClient:
    return FakeClient(response=fake_response("Cold start, then warm glow..."))
