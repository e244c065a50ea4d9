"""Single completion call raced against a wall-clock timer."""

import asyncio
import logging
from typing import Any

from config import settings
from services.errors import CompletionTimeoutError, UpstreamError
from services.gemini_client import CompletionProvider

logger = logging.getLogger(__name__)

_semaphore: asyncio.Semaphore | None = None


def _get_semaphore() -> asyncio.Semaphore | None:
    global _semaphore
    if settings.max_concurrent_completions <= 0:
        return None
    if _semaphore is None:
        _semaphore = asyncio.Semaphore(settings.max_concurrent_completions)
    return _semaphore


async def _generate(provider: CompletionProvider, prompt: str) -> Any:
    semaphore = _get_semaphore()
    if semaphore is None:
        return await provider.generate(prompt)
    async with semaphore:
        return await provider.generate(prompt)


def _discard(task: asyncio.Task) -> None:
    """Consume the late outcome of a call that already lost the race."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Late completion failed after timeout: %s", exc)
    else:
        logger.debug("Late completion discarded after timeout")


async def invoke(provider: CompletionProvider, prompt: str, timeout_ms: int) -> Any:
    """Make exactly one completion call and return its raw result.

    Raises CompletionTimeoutError if the timer fires first, and UpstreamError
    if the provider fails first. A call that loses the race is cancelled
    locally and its outcome dropped; nothing is retried.
    """
    task = asyncio.ensure_future(_generate(provider, prompt))
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    except asyncio.CancelledError:
        task.cancel()
        task.add_done_callback(_discard)
        raise

    if task not in done:
        task.cancel()
        task.add_done_callback(_discard)
        logger.warning("Completion timed out after %d ms", timeout_ms)
        raise CompletionTimeoutError()

    if task.cancelled():
        raise UpstreamError("completion cancelled")
    exc = task.exception()
    if exc is None:
        return task.result()
    if isinstance(exc, UpstreamError):
        raise exc
    logger.error("Completion provider error: %s", exc)
    raise UpstreamError(str(exc) or type(exc).__name__) from exc
