"""OpenAI GPT LLM provider."""

from __future__ import annotations

import time

from motionlab.classify.providers.base import (
    LLMProvider,
    LLMProviderType,
    LLMConfig,
    LLMResponse,
    Message,
)


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self._client = None

    @property
    def provider_type(self) -> LLMProviderType:
        return LLMProviderType.OPENAI

    @property
    def default_model(self) -> str:
        return "gpt-4o-mini"

    def _get_client(self):
        """Get or create the OpenAI client."""
        if self._client is None:
            import openai
            self._client = openai.AsyncOpenAI(api_key=self.config.api_key)
        return self._client

    def _convert_messages(self, messages: list[Message]) -> list[dict]:
        return [{"role": msg.role, "content": msg.text} for msg in messages]

    async def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """Generate a response from a GPT model."""
        client = self._get_client()

        start_time = time.time()

        response = await client.chat.completions.create(
            model=self.model,
            messages=self._convert_messages(messages),
            max_tokens=kwargs.get("max_tokens", self.config.max_tokens),
            temperature=kwargs.get("temperature", self.config.temperature),
            top_p=kwargs.get("top_p", self.config.top_p),
        )

        latency_ms = (time.time() - start_time) * 1000

        choice = response.choices[0]
        usage = response.usage

        return LLMResponse(
            text=choice.message.content,
            finish_reason=choice.finish_reason,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            raw_response=response,
            latency_ms=latency_ms,
            provider="openai",
            model=self.model,
        )
