"""Degraded result used whenever the analysis pipeline fails."""

from models.responses import DegradedResult


def fallback(error: BaseException) -> DegradedResult:
    return DegradedResult(
        ats_score=50,
        matched_skills=["Basic resume structure detected"],
        missing_skills=["Unable to fully analyze (AI timeout)"],
        improvements=["Retry analysis", "Use shorter resume", "Ensure text-based PDF"],
        error=str(error) or type(error).__name__,
    )
