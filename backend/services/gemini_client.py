"""Google Gemini API wrapper exposed as an opaque text-completion provider."""

import logging
from typing import Any, Protocol

from google import genai
from google.genai import types

from config import settings
from services.errors import UpstreamError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None
_providers: dict[str, "GeminiProvider"] = {}


class CompletionProvider(Protocol):
    async def generate(self, prompt: str) -> Any:
        """Return a raw completion of unspecified shape."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


class GeminiProvider:
    """Completion provider backed by one Gemini model."""

    def __init__(self, model_name: str):
        self.model_name = model_name

    async def generate(self, prompt: str) -> Any:
        client = get_client()
        if client is None:
            raise UpstreamError("GEMINI_API_KEY not set")

        logger.debug("Sending %d-char prompt to %s", len(prompt), self.model_name)
        return await client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            ),
        )


def get_provider(model_name: str | None = None) -> GeminiProvider:
    name = model_name or settings.gemini_model
    if name not in _providers:
        _providers[name] = GeminiProvider(name)
    return _providers[name]


async def list_models() -> list[dict]:
    """List the models visible to the configured API key."""
    client = get_client()
    if client is None:
        raise UpstreamError("GEMINI_API_KEY not set")

    models = []
    async for model in await client.aio.models.list():
        models.append({"name": model.name, "display_name": model.display_name})
    return models
