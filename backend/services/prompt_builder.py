"""Prompt template for the ATS analysis call."""

from models.requests import AnalysisRequest

MAX_RESUME_CHARS = 4000
MAX_JOB_DESCRIPTION_CHARS = 3000


def truncate_inputs(resume_text: str, job_description: str) -> AnalysisRequest:
    """Cut both inputs to their size limits. Longer text is dropped silently."""
    return AnalysisRequest(
        resume_text=resume_text[:MAX_RESUME_CHARS],
        job_description=job_description[:MAX_JOB_DESCRIPTION_CHARS],
    )


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    return f"""
You are an ATS Resume Analyzer.

Analyze the resume against the job description.
Respond ONLY with valid JSON.

{{
  "atsScore": 0,
  "matchedSkills": [],
  "missingSkills": [],
  "improvements": []
}}

RESUME:
{resume_text}

JOB DESCRIPTION:
{job_description}
"""
