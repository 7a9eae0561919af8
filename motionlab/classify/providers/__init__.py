"""LLM Providers."""

from motionlab.classify.providers.base import (
    LLMProvider,
    LLMProviderType,
    LLMConfig,
    LLMResponse,
    Message,
    API_KEY_ENV_VARS,
)
from motionlab.classify.providers.gemini import GeminiProvider
from motionlab.classify.providers.anthropic import AnthropicProvider
from motionlab.classify.providers.openai import OpenAIProvider

__all__ = [
    "LLMProvider",
    "LLMProviderType",
    "LLMConfig",
    "LLMResponse",
    "Message",
    "API_KEY_ENV_VARS",
    "GeminiProvider",
    "AnthropicProvider",
    "OpenAIProvider",
]
