"""Shared test configuration and a fake completion provider."""

import asyncio
import json

import pytest

SAMPLE_RESULT = {
    "atsScore": 65,
    "matchedSkills": ["backend"],
    "missingSkills": ["Go"],
    "improvements": ["Add Go projects"],
}


class FakeProvider:
    """Stands in for Gemini. Records prompts and answers after an optional delay."""

    def __init__(self, response=None, error: Exception | None = None, delay: float = 0.0):
        self.response = json.dumps(SAMPLE_RESULT) if response is None else response
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_provider():
    return FakeProvider()
