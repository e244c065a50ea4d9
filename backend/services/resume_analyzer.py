"""Orchestrator: resume + job description -> AnalysisResult.

Pipeline:
1. Input validation (missing/empty -> InvalidRequestError, no provider call)
2. Truncation (resume 4000 chars, job description 3000 chars)
3. Prompt construction
4. One completion call raced against the timeout
5. Response normalization
6. Two-stage JSON coercion into the result schema
Any failure in 4-6 is replaced by the fixed degraded result.
"""

import logging
from typing import NamedTuple

from config import settings
from models.responses import AnalysisResult
from services import completion, gemini_client, prompt_builder, response_normalizer, result_coercer
from services.errors import AnalysisError, InvalidRequestError
from services.fallback import fallback
from services.gemini_client import CompletionProvider

logger = logging.getLogger(__name__)


class AnalysisOutcome(NamedTuple):
    result: AnalysisResult
    degraded: bool


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


async def analyze(
    resume_text: str | None,
    job_description: str | None,
    provider: CompletionProvider | None = None,
    timeout_ms: int | None = None,
) -> AnalysisOutcome:
    """Run the analysis pipeline. Only InvalidRequestError escapes."""
    if _is_blank(resume_text) or _is_blank(job_description):
        raise InvalidRequestError("resumeText and jobDescription required")

    request = prompt_builder.truncate_inputs(resume_text, job_description)
    prompt = prompt_builder.build_analysis_prompt(request.resume_text, request.job_description)

    provider = provider or gemini_client.get_provider()
    timeout_ms = timeout_ms or settings.gemini_timeout_ms

    try:
        logger.info("Sending analysis request (resume=%d chars, jd=%d chars)",
                    len(request.resume_text), len(request.job_description))
        raw = await completion.invoke(provider, prompt, timeout_ms)
        text = response_normalizer.normalize(raw)
        logger.info("Completion received (%d chars)", len(text))
        result = result_coercer.coerce(text)
    except AnalysisError as e:
        logger.warning("Analysis degraded: %s: %s", type(e).__name__, e)
        return AnalysisOutcome(fallback(e), degraded=True)

    return AnalysisOutcome(result, degraded=False)
