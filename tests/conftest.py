"""
Shared test helpers.
"""

import pytest
import structlog

from motionlab.classify.providers.base import (
    LLMConfig,
    LLMProvider,
    LLMProviderType,
    LLMResponse,
    Message,
)


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing without API calls."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        super().__init__(LLMConfig(provider=LLMProviderType.GEMINI, api_key="mock-key", model="mock-model"))
        self.text = text
        self.error = error
        self.call_count = 0
        self.messages_received: list[list[Message]] = []

    @property
    def provider_type(self) -> LLMProviderType:
        return LLMProviderType.GEMINI

    @property
    def default_model(self) -> str:
        return "mock-model"

    async def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """Return the canned text, or raise the canned error."""
        self.call_count += 1
        self.messages_received.append(messages)

        if self.error is not None:
            raise self.error

        return LLMResponse(text=self.text, provider="mock", model=self.model)


@pytest.fixture
def mock_provider():
    """Factory for mock providers: ``mock_provider(text=...)``."""
    return MockLLMProvider


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI commands configure structlog against the runner's streams."""
    yield
    structlog.reset_defaults()
