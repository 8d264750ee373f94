"""POST /api/analyze endpoint handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.analysis.engine import AnalysisEngine
from src.api import service
from src.api.schemas import AnalysisResponse, AnalyzeRequest, ErrorResponse

router = APIRouter()


def _get_engine(request: Request) -> AnalysisEngine:
    return request.app.state.engine


@router.post(
    "/api/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_url(
    body: AnalyzeRequest,
    engine: AnalysisEngine = Depends(_get_engine),
):
    status_code, payload = await service.analyze(engine, body)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", by_alias=True),
    )
