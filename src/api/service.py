"""Service layer — runs analyses for the API routes and maps failures."""

from __future__ import annotations

import logging

from fastapi import status

from src.analysis.engine import AnalysisEngine
from src.analysis.errors import AnalyzerError, ValidationError
from src.api.schemas import AnalysisResponse, AnalyzeRequest, ErrorResponse

logger = logging.getLogger(__name__)


async def analyze(
    engine: AnalysisEngine,
    body: AnalyzeRequest,
) -> tuple[int, AnalysisResponse | ErrorResponse]:
    """Run one analysis and return ``(status_code, payload)``.

    Any failure yields an error payload; a partial report is never returned.
    """
    try:
        result = await engine.run(body.url)
    except ValidationError as exc:
        logger.info("analysis rejected", extra={"url": body.url, "error": str(exc)})
        return status.HTTP_400_BAD_REQUEST, ErrorResponse(error=str(exc))
    except AnalyzerError as exc:
        logger.warning(
            "analysis failed",
            extra={"url": body.url, "error_type": type(exc).__name__, "error": str(exc)},
        )
        return (
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(error=f"Failed to analyze the URL: {exc}"),
        )
    except Exception as exc:
        logger.exception("analysis crashed", extra={"url": body.url})
        return (
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(error=f"Failed to analyze the URL: {exc}"),
        )

    return status.HTTP_200_OK, result
