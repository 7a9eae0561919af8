"""Base LLM provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel


class LLMProviderType(str, Enum):
    """Supported hosted language model providers."""

    GEMINI = "gemini"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"


# Environment variables checked (in order) for each provider's API key
API_KEY_ENV_VARS: dict[LLMProviderType, tuple[str, ...]] = {
    LLMProviderType.GEMINI: ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    LLMProviderType.ANTHROPIC: ("ANTHROPIC_API_KEY",),
    LLMProviderType.OPENAI: ("OPENAI_API_KEY",),
}


@dataclass
class LLMConfig:
    """Configuration for an LLM provider."""

    provider: LLMProviderType
    api_key: str
    model: str | None = None  # Use provider default if None

    # Generation parameters
    temperature: float = 0.2
    max_tokens: int = 1024
    top_p: float = 0.95

    # Provider-specific options
    options: dict[str, Any] = field(default_factory=dict)


class Message(BaseModel):
    """A single text message in a conversation."""

    role: str  # "user", "assistant", "system"
    text: str

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(role="user", text=text)

    @classmethod
    def assistant(cls, text: str) -> Message:
        return cls(role="assistant", text=text)

    @classmethod
    def system(cls, text: str) -> Message:
        return cls(role="system", text=text)


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    id: str = field(default_factory=lambda: str(uuid4()))

    text: str | None = None
    finish_reason: str | None = None

    # Usage stats
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    # Raw response for debugging
    raw_response: Any = None

    # Timing
    latency_ms: float = 0.0
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Provider info
    provider: str | None = None
    model: str | None = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def __init__(self, config: LLMConfig):
        self.config = config

    @property
    @abstractmethod
    def provider_type(self) -> LLMProviderType:
        """Get the provider type."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Get the default model for this provider."""
        pass

    @property
    def model(self) -> str:
        """Get the model to use."""
        return self.config.model or self.default_model

    @abstractmethod
    async def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """
        Generate a response from the model.

        Args:
            messages: Conversation history
            **kwargs: Overrides for temperature / max_tokens

        Returns:
            LLMResponse with the generated text
        """
        pass
