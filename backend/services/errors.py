"""Error taxonomy for the analysis pipeline."""


class AnalysisError(Exception):
    """Base class for every error raised by the analysis pipeline."""


class InvalidRequestError(AnalysisError):
    """Caller-supplied input is missing or empty. Surfaced as a 400."""


class CompletionTimeoutError(AnalysisError, TimeoutError):
    """The completion service did not answer within the timeout budget."""

    def __init__(self, message: str = "completion timed out"):
        super().__init__(message)


class UpstreamError(AnalysisError):
    """The completion service call itself failed."""


class MalformedResponseError(AnalysisError):
    """Completion text could not be coerced into an AnalysisResult."""

    def __init__(self, message: str, attempts: list | None = None, raw_excerpt: str = ""):
        super().__init__(message)
        self.attempts = attempts or []
        self.raw_excerpt = raw_excerpt
