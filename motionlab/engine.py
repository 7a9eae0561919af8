"""Main MotionLab engine - question in, animation session out."""

from __future__ import annotations

from typing import Any

import structlog

from motionlab.classify.backends import (
    ClassifierBackend,
    FallbackClassifier,
    KeywordClassifier,
    LLMClassifier,
)
from motionlab.classify.providers.anthropic import AnthropicProvider
from motionlab.classify.providers.base import LLMConfig, LLMProvider, LLMProviderType
from motionlab.classify.providers.gemini import GeminiProvider
from motionlab.classify.providers.openai import OpenAIProvider
from motionlab.config import Settings, resolve_api_key
from motionlab.models.classification import ClassificationResult
from motionlab.simulation.session import AnimationSession

logger = structlog.get_logger()


def get_provider(
    provider_type: str | LLMProviderType,
    api_key: str | None = None,
    model: str | None = None,
    **kwargs: Any,
) -> LLMProvider:
    """
    Get an LLM provider instance.

    Args:
        provider_type: Provider type (gemini, anthropic, openai)
        api_key: API key (defaults to environment variable)
        model: Model to use (defaults to provider's default)
        **kwargs: Additional provider configuration

    Returns:
        Configured LLMProvider instance
    """
    if isinstance(provider_type, str):
        provider_type = LLMProviderType(provider_type.lower())

    if not api_key:
        api_key = resolve_api_key(provider_type)

    if not api_key:
        raise ValueError(f"API key required for {provider_type.value}")

    config = LLMConfig(
        provider=provider_type,
        api_key=api_key,
        model=model,
        **kwargs,
    )

    providers = {
        LLMProviderType.GEMINI: GeminiProvider,
        LLMProviderType.ANTHROPIC: AnthropicProvider,
        LLMProviderType.OPENAI: OpenAIProvider,
    }

    provider_class = providers.get(provider_type)
    if not provider_class:
        raise ValueError(f"Unsupported provider: {provider_type}")

    return provider_class(config)


def build_classifier(settings: Settings) -> ClassifierBackend:
    """
    Language model with keyword fallback, or keywords only.

    Keywords only when running offline or when no API key is configured.
    """
    if settings.offline:
        logger.info("Offline mode, using keyword classifier")
        return KeywordClassifier()

    try:
        provider = get_provider(
            settings.provider,
            api_key=settings.api_key,
            model=settings.model,
            temperature=settings.temperature,
        )
    except ValueError as e:
        logger.warning("No language model available, using keyword classifier", reason=str(e))
        return KeywordClassifier()

    logger.info("Using language model classifier", provider=provider.provider_type.value, model=provider.model)
    return FallbackClassifier(LLMClassifier(provider), KeywordClassifier())


class PhysicsTutor:
    """
    Entry point: classify a question and open an animation for it.

    Example:
        tutor = PhysicsTutor()
        result = await tutor.ask("Show me a pendulum with length 2m")
        session = tutor.open_session(result)
        session.start()
        session.step(20)
    """

    def __init__(
        self,
        classifier: ClassifierBackend | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings.from_env()
        self.classifier = classifier or build_classifier(self.settings)

    async def ask(self, prompt: str) -> ClassificationResult:
        """Classify a free-text question."""
        result = await self.classifier.classify(prompt)

        logger.info(
            "Classified prompt",
            module=result.module.value if result.module else None,
            source=result.source,
        )
        return result

    def open_session(self, result: ClassificationResult) -> AnimationSession | None:
        """An animation session for the result, or None when there is no module."""
        if result.inputs is None:
            return None
        return AnimationSession(result.inputs)
