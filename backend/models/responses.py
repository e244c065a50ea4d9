from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ats_score: int = Field(..., ge=0, le=100)
    matched_skills: list[str]
    missing_skills: list[str]
    improvements: list[str]


class DegradedResult(AnalysisResult):
    """Sentinel AnalysisResult returned with a 500 when the pipeline fails."""

    error: str = ""


class ModelCheckResult(BaseModel):
    model: str
    ok: bool
    info: str | None = None
    error: str | None = None


class ModelCheckReport(BaseModel):
    results: list[ModelCheckResult] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
    model: str = ""
    timeout_ms: int = 0
    diagnostics: list[dict] = []
