"""Connectivity probes against the completion provider.

These reuse the bounded invoker and normalizer but are not part of the
analysis pipeline.
"""

import asyncio
import logging
from collections.abc import Callable

from models.responses import ModelCheckResult
from services import completion, response_normalizer
from services.errors import AnalysisError
from services.gemini_client import CompletionProvider

logger = logging.getLogger(__name__)

PING_PROMPT = "Ping"


async def check_model(provider: CompletionProvider, timeout_ms: int) -> str:
    """Ping one model and return its reply text. Raises AnalysisError on failure."""
    raw = await completion.invoke(provider, PING_PROMPT, timeout_ms)
    return response_normalizer.extract_text(raw)


async def _check_one(
    name: str,
    provider_factory: Callable[[str], CompletionProvider],
    timeout_ms: int,
) -> ModelCheckResult:
    try:
        info = await check_model(provider_factory(name), timeout_ms)
    except AnalysisError as e:
        logger.error("Model %s check failed: %s", name, e)
        return ModelCheckResult(model=name, ok=False, error=str(e))
    return ModelCheckResult(model=name, ok=True, info=info[:300])


async def check_models(
    names: list[str],
    provider_factory: Callable[[str], CompletionProvider],
    timeout_ms: int,
) -> list[ModelCheckResult]:
    """Ping every named model concurrently. Results keep the order of ``names``."""
    return list(await asyncio.gather(
        *(_check_one(name, provider_factory, timeout_ms) for name in names)
    ))
