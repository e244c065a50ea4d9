from pydantic import BaseModel, ConfigDict, Field


class AnalyzeTextRequest(BaseModel):
    """JSON body of POST /analyze-text.

    Fields default to "" so a missing value reaches the analyzer and is
    reported as a 400 instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    resume_text: str | None = Field("", alias="resumeText", description="Plain text resume content")
    job_description: str | None = Field("", alias="jobDescription", description="Job description text")


class AnalysisRequest(BaseModel):
    """Inputs after truncation, ready for prompt construction."""

    model_config = ConfigDict(frozen=True)

    resume_text: str
    job_description: str
