"""Analysis request/response schemas."""

from pydantic import BaseModel, Field

from scanner.reports.assembler import AnalysisResult


class ActionsPayload(BaseModel):
    """One recommended action per category."""

    seo: str
    ppc: str
    creative: str
    tech: str


class AnalysisResponse(BaseModel):
    """Successful analysis of one page."""

    seo: list[str] = Field(..., description="Structure/SEO insights, primary first")
    ppc: list[str] = Field(..., description="Acquisition insights inferred from page text")
    creative: list[str] = Field(..., description="Creative/video insights")
    tech: list[str] = Field(..., description="Technical insights")
    actions: ActionsPayload
    score: int = Field(..., ge=0, le=100, description="Page health score")
    improvement: int = Field(..., ge=0, le=20, description="Capped improvement headroom")

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls.model_validate(result.to_dict())


class ErrorResponse(BaseModel):
    """Error payload."""

    error: str = Field(..., description="Human-readable error message")
    details: str | None = Field(None, description="Underlying reason, when known")
