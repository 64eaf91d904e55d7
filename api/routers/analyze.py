"""Page analysis endpoint."""

from fastapi import APIRouter, Query

from api.schemas.analysis import AnalysisResponse, ErrorResponse
from scanner.pipeline import analyze_url

router = APIRouter(tags=["Analysis"])


@router.get(
    "/analyze",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse, "description": "URL missing"},
        502: {"model": ErrorResponse, "description": "Target unreachable"},
    },
)
async def analyze(
    url: str | None = Query(None, max_length=2048, description="Page URL or bare host"),
) -> AnalysisResponse:
    """
    Fetch a page and return categorized insights, actions and a health score.

    Bare hosts are fetched over https. Errors are rendered by the
    NexusError handler registered in api.main.
    """
    result = await analyze_url(url)
    return AnalysisResponse.from_result(result)
