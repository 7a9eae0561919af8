"""Google Gemini LLM provider."""

from __future__ import annotations

import os
import time

from motionlab.classify.providers.base import (
    LLMProvider,
    LLMProviderType,
    LLMConfig,
    LLMResponse,
    Message,
)


class GeminiProvider(LLMProvider):
    """
    Google Gemini provider (google-genai SDK).

    The default backend: fast flash models are plenty for routing a
    question to one of four animations.
    """

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self._client = None

    @property
    def provider_type(self) -> LLMProviderType:
        return LLMProviderType.GEMINI

    @property
    def default_model(self) -> str:
        return os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    def _get_client(self):
        """Get or create the Gemini client."""
        if self._client is None:
            from google import genai
            self._client = genai.Client(api_key=self.config.api_key)
        return self._client

    def _convert_messages(self, messages: list[Message]) -> tuple[str | None, list[dict]]:
        """Convert our Message format to Gemini contents."""
        system_instruction = None
        contents = []

        for msg in messages:
            if msg.role == "system":
                # Gemini takes the system prompt separately
                system_instruction = msg.text
                continue
            role = "user" if msg.role == "user" else "model"
            contents.append({"role": role, "parts": [{"text": msg.text}]})

        return system_instruction, contents

    async def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """Generate a response from Gemini."""
        from google.genai import types

        client = self._get_client()
        system_instruction, contents = self._convert_messages(messages)

        generation_config = types.GenerateContentConfig(
            temperature=kwargs.get("temperature", self.config.temperature),
            max_output_tokens=kwargs.get("max_tokens", self.config.max_tokens),
            top_p=kwargs.get("top_p", self.config.top_p),
        )
        if system_instruction:
            generation_config.system_instruction = system_instruction

        start_time = time.time()

        response = await client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=generation_config,
        )

        latency_ms = (time.time() - start_time) * 1000

        usage = response.usage_metadata if hasattr(response, "usage_metadata") else None

        return LLMResponse(
            text=response.text,
            finish_reason=str(response.candidates[0].finish_reason) if response.candidates else None,
            input_tokens=(usage.prompt_token_count or 0) if usage else 0,
            output_tokens=(usage.candidates_token_count or 0) if usage else 0,
            total_tokens=(usage.total_token_count or 0) if usage else 0,
            raw_response=response,
            latency_ms=latency_ms,
            provider="gemini",
            model=self.model,
        )
