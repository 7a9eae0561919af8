"""Runtime settings, read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from motionlab.classify.providers.base import API_KEY_ENV_VARS, LLMProviderType
from motionlab.errors import ConfigurationError

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """
    Application settings.

    Environment variables:
        MOTIONLAB_PROVIDER   gemini | anthropic | openai (default gemini)
        MOTIONLAB_MODEL      model override for the provider
        MOTIONLAB_OFFLINE    skip the language model, keywords only
        MOTIONLAB_TEMPERATURE  sampling temperature (default 0.2)
        MOTIONLAB_LOG_LEVEL  DEBUG, INFO, ... (default INFO)
        MOTIONLAB_LOG_JSON   render logs as JSON lines
        GEMINI_API_KEY / GOOGLE_API_KEY, ANTHROPIC_API_KEY, OPENAI_API_KEY
    """

    provider: LLMProviderType = LLMProviderType.GEMINI
    model: str | None = None
    api_key: str | None = None
    offline: bool = False
    temperature: float = 0.2
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        load_env_file: bool = True,
    ) -> Settings:
        """
        Build settings from ``env`` (defaults to ``os.environ``).

        Raises:
            ConfigurationError: unknown provider or non-numeric temperature
        """
        if env is None:
            if load_env_file:
                load_dotenv()
            env = os.environ

        provider_name = env.get("MOTIONLAB_PROVIDER", LLMProviderType.GEMINI.value)
        try:
            provider = LLMProviderType(provider_name.strip().lower())
        except ValueError as e:
            raise ConfigurationError(f"Unknown provider: {provider_name}") from e

        try:
            temperature = float(env.get("MOTIONLAB_TEMPERATURE", "0.2"))
        except ValueError as e:
            raise ConfigurationError("MOTIONLAB_TEMPERATURE must be a number") from e

        return cls(
            provider=provider,
            model=env.get("MOTIONLAB_MODEL") or None,
            api_key=resolve_api_key(provider, env),
            offline=env.get("MOTIONLAB_OFFLINE", "").strip().lower() in _TRUE,
            temperature=temperature,
            log_level=env.get("MOTIONLAB_LOG_LEVEL", "INFO").upper(),
            log_json=env.get("MOTIONLAB_LOG_JSON", "").strip().lower() in _TRUE,
        )


def resolve_api_key(
    provider: LLMProviderType,
    env: Mapping[str, str] | None = None,
) -> str | None:
    """First non-empty API key variable for ``provider``."""
    env = os.environ if env is None else env
    for name in API_KEY_ENV_VARS[provider]:
        if env.get(name):
            return env[name]
    return None
