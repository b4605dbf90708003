"""FastAPI app: static page plus Gemini generation proxy.

Endpoints:
- GET /
- GET /health
- POST /api/generate  { "prompt": "..." }
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from serverless_genai.common.logging_setup import setup_logging
from serverless_genai.common.page import load_page
from serverless_genai.common.schema import (
    ErrorOut,
    GenerateIn,
    GenerateOut,
    GenerationResult,
    Outcome,
)
from serverless_genai.common.settings import load_settings
from serverless_genai.serve.generation import MODEL_ID, GenerationProxy

LOGGER = logging.getLogger("serverless_genai.serve.app")

STATUS_BY_OUTCOME = {
    Outcome.OK: 200,
    Outcome.INVALID_PROMPT: 400,
    Outcome.UPSTREAM_ERROR: 500,
    Outcome.UNAVAILABLE: 503,
}


def to_response(result: GenerationResult) -> JSONResponse:
    """Translate a generation result into its fixed HTTP status and body."""
    status = STATUS_BY_OUTCOME[result.outcome]
    if result.outcome is Outcome.OK:
        body = GenerateOut(text=result.text or "")
    else:
        body = ErrorOut(error=result.error or "")
    return JSONResponse(status_code=status, content=body.model_dump())


async def _read_prompt(request: Request) -> str | None:
    """Parse the request body; anything that is not {"prompt": <str>} yields None."""
    try:
        data = await request.json()
        return GenerateIn.model_validate(data).prompt
    except (ValueError, ValidationError) as e:
        LOGGER.debug("Unparsable generate body: %s", e)
        return None


def create_app(proxy: GenerationProxy | None = None, page: bytes | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        proxy: Generation proxy; built from the environment when omitted.
        page: HTML served at "/"; the packaged page when omitted.
    """
    if proxy is None:
        proxy = GenerationProxy.from_settings(load_settings())
    if page is None:
        page = load_page()

    app = FastAPI(title="Serverless AI Content Generator")
    app.state.proxy = proxy

    @app.get("/")
    def index() -> Response:
        return Response(content=page, media_type="text/html")

    @app.get("/health")
    def health() -> dict[str, object]:
        return {"status": "ok", "model": MODEL_ID, "configured": proxy.configured}

    @app.post(
        "/api/generate",
        response_model=GenerateOut,
        responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}, 503: {"model": ErrorOut}},
    )
    async def generate(request: Request) -> JSONResponse:
        prompt = await _read_prompt(request)
        return to_response(await proxy.generate(prompt))

    return app


SETTINGS = load_settings()
setup_logging(SETTINGS.log_level)
app = create_app(GenerationProxy.from_settings(SETTINGS))
