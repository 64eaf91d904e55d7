"""Liveness and service info endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from api.config import APP_NAME, APP_VERSION, get_settings
from scanner.insights.rules import RULE_SETS

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str


class ServiceInfo(BaseModel):
    """What the service analyzes and where."""

    name: str
    version: str
    env: str
    analyze_path: str
    categories: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness only; the analyzer has no backing services to check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=APP_VERSION,
    )


@router.get("/", response_model=ServiceInfo)
async def service_info() -> ServiceInfo:
    return ServiceInfo(
        name=APP_NAME,
        version=APP_VERSION,
        env=get_settings().env,
        analyze_path="/v1/analyze",
        categories=[rule_set.category.value for rule_set in RULE_SETS],
    )
