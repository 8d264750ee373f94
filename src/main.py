"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.analysis.engine import AnalysisEngine
from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting eeat analyzer")

    app.state.settings = settings
    app.state.engine = AnalysisEngine(settings)

    logger.info(
        "eeat analyzer ready",
        extra={
            "scoring_model": settings.scoring_model,
            "fetch_mode": settings.fetch_mode,
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
            "mock_analysis": settings.mock_analysis,
            "credential_configured": bool(settings.openai_api_key),
        },
    )

    yield

    logger.info("shutting down eeat analyzer")


app = FastAPI(title="EEAT Analyzer", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Request body must be a JSON object with a 'url' field"},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
