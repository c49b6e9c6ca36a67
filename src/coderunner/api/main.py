"""
FastAPI application for the code runner service.

This module configures logging and the FastAPI application, builds the
dispatcher from the environment and registers the execution routes.
``POST /compiler/execute`` keeps the plain-text contract in which a
failing program is still a 200 response whose body is the error text;
``POST /compiler/run`` returns the same text together with a success
flag and the kind of failure.
"""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse

from ..config import Config
from ..dispatcher import Dispatcher
from ..errors import UnsupportedLanguageError
from ..models import ExecuteRequest, RunRequest, RunResponse


logger = logging.getLogger("coderunner")

if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[coderunner] %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


config = Config.from_env()

logger.setLevel(config.log_level)

logger.info(
    "Loaded config: workspace_root=%s, encodings=%s, port=%s",
    config.workspace_root,
    config.encodings,
    config.port,
)

dispatcher = Dispatcher.from_config(config)


app = FastAPI(title="Code Runner Service", version="0.1.0")


@app.middleware("http")
async def authenticate(request, call_next):
    """Middleware to enforce API key authentication on all requests."""
    path = request.url.path
    method = request.method
    client = getattr(request.client, "host", "unknown")

    logger.info("Incoming request: %s %s from %s", method, path, client)

    if config.api_key:
        if request.headers.get("x-api-key") != config.api_key:
            logger.warning("Invalid API key for %s %s from %s", method, path, client)
            return JSONResponse(status_code=401, content={"detail": "Invalid API key"})

    response = await call_next(request)
    logger.info("Response: %s %s -> %s", method, path, response.status_code)
    return response


@app.get("/health")
async def health() -> Dict[str, str]:
    """Return a simple health check response."""
    return {"status": "ok"}


@app.post("/compiler/execute", response_class=PlainTextResponse)
async def execute_code(req: ExecuteRequest) -> PlainTextResponse:
    """Run a snippet and return its output, or its error text, as plain text."""
    try:
        output = await dispatcher.compile_and_execute(req.language, req.code, req.input)
    except UnsupportedLanguageError as exc:
        logger.warning("[/compiler/execute] %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return PlainTextResponse(output)


@app.post("/compiler/run", response_model=RunResponse)
async def run_code(req: RunRequest) -> RunResponse:
    try:
        result = await dispatcher.execute(req.language, req.code, req.input, req.entry_point)
    except UnsupportedLanguageError as exc:
        logger.warning("[/compiler/run] %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return RunResponse(
        ok=result.ok,
        output=result.output,
        error_kind=result.error_kind.value if result.error_kind else None,
        duration_ms=result.duration_ms,
    )
