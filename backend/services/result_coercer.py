"""Parse normalized completion text into an AnalysisResult.

Two stages, each recorded as a ParseAttempt:

    strict      the whole text validated as AnalysisResult JSON
    brace_span  the span from the first "{" to the last "}" validated the same way

Validation covers JSON syntax and the result schema, so a response such as
``{}`` fails the same way as unparseable text. Broken JSON inside the span is
not repaired.
"""

import json
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from models.responses import AnalysisResult
from services.errors import MalformedResponseError

logger = logging.getLogger(__name__)

RAW_EXCERPT_CHARS = 2000


@dataclass
class ParseAttempt:
    stage: str
    candidate: str
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def brace_span(text: str) -> str | None:
    """Substring from the first '{' to the last '}', or None if there is none."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start:end + 1]


def _attempt(stage: str, candidate: str) -> tuple[ParseAttempt, AnalysisResult | None]:
    try:
        result = AnalysisResult.model_validate_json(candidate)
    except ValidationError as e:
        return ParseAttempt(stage=stage, candidate=candidate, error=e), None
    return ParseAttempt(stage=stage, candidate=candidate), result


def coerce(text: str) -> AnalysisResult:
    """Validate normalized text as an AnalysisResult or raise MalformedResponseError."""
    attempts = []

    attempt, result = _attempt("strict", text)
    attempts.append(attempt)
    if result is not None:
        return result

    span = brace_span(text)
    if span is not None:
        attempt, result = _attempt("brace_span", span)
        attempts.append(attempt)
        if result is not None:
            logger.info("Recovered analysis JSON from surrounding text")
            return result

    for failed in attempts:
        logger.warning(
            "Parse stage %s failed on %d chars: %s",
            failed.stage, len(failed.candidate), failed.error.errors()[0]["msg"],
        )
    logger.error("Raw AI response (truncated): %s", text[:RAW_EXCERPT_CHARS])

    if any(_is_object(a.candidate) for a in attempts):
        message = "AI response did not match the analysis schema"
    else:
        message = "Failed to parse AI response as JSON"
    raise MalformedResponseError(
        message,
        attempts=attempts,
        raw_excerpt=text[:RAW_EXCERPT_CHARS],
    ) from attempts[-1].error


def _is_object(candidate: str) -> bool:
    try:
        return isinstance(json.loads(candidate), dict)
    except ValueError:
        return False
