"""Anthropic Claude LLM provider."""

from __future__ import annotations

import time

from motionlab.classify.providers.base import (
    LLMProvider,
    LLMProviderType,
    LLMConfig,
    LLMResponse,
    Message,
)


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self._client = None

    @property
    def provider_type(self) -> LLMProviderType:
        return LLMProviderType.ANTHROPIC

    @property
    def default_model(self) -> str:
        return "claude-sonnet-4-20250514"

    def _get_client(self):
        """Get or create the Anthropic client."""
        if self._client is None:
            import anthropic
            self._client = anthropic.AsyncAnthropic(api_key=self.config.api_key)
        return self._client

    def _convert_messages(self, messages: list[Message]) -> tuple[str | None, list[dict]]:
        """Split out the system prompt; Anthropic takes it as a parameter."""
        system = None
        anthropic_messages = []

        for msg in messages:
            if msg.role == "system":
                system = msg.text
                continue
            anthropic_messages.append({
                "role": msg.role,
                "content": [{"type": "text", "text": msg.text}],
            })

        return system, anthropic_messages

    async def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """Generate a response from Claude."""
        client = self._get_client()
        system, anthropic_messages = self._convert_messages(messages)

        params = {
            "model": self.model,
            "messages": anthropic_messages,
            "max_tokens": kwargs.get("max_tokens", self.config.max_tokens),
            "temperature": kwargs.get("temperature", self.config.temperature),
        }
        if system:
            params["system"] = system

        start_time = time.time()

        response = await client.messages.create(**params)

        latency_ms = (time.time() - start_time) * 1000

        text = None
        for block in response.content:
            if block.type == "text":
                text = block.text

        return LLMResponse(
            text=text,
            finish_reason=response.stop_reason,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            total_tokens=response.usage.input_tokens + response.usage.output_tokens,
            raw_response=response,
            latency_ms=latency_ms,
            provider="anthropic",
            model=self.model,
        )
