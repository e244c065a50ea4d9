"""Shared dependencies for API routes."""

from collections.abc import Callable

from services.gemini_client import CompletionProvider, get_provider


def get_completion_provider() -> CompletionProvider:
    return get_provider()


def get_provider_factory() -> Callable[[str], CompletionProvider]:
    return get_provider
