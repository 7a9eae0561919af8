"""
Classifier backends - map a free-text question to an animation module.

Two implementations of the same capability:

- ``LLMClassifier`` asks a hosted language model and parses its JSON.
- ``KeywordClassifier`` matches keywords; always available, never fails.

``FallbackClassifier`` composes them: model output is not guaranteed to
be well-formed, so any model failure degrades to keyword matching rather
than failing the request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from motionlab.classify.parsing import parse_classification
from motionlab.classify.prompts import build_prompt
from motionlab.classify.providers.base import LLMProvider, Message
from motionlab.errors import ClassifierError, MalformedResponseError, ProviderError
from motionlab.models.classification import ClassificationResult
from motionlab.models.parameters import ModuleKind, default_parameters

logger = structlog.get_logger(__name__)


class ClassifierBackend(ABC):
    """Anything that can classify a prompt."""

    name: str = "classifier"

    @abstractmethod
    async def classify(self, prompt: str) -> ClassificationResult:
        """
        Classify ``prompt``.

        Raises:
            ClassifierError: the backend could not produce a result
        """
        pass


class LLMClassifier(ClassifierBackend):
    """Classifies by prompting a hosted language model."""

    name = "llm"

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    async def classify(self, prompt: str) -> ClassificationResult:
        message = Message.user(build_prompt(prompt))

        try:
            response = await self.provider.generate([message])
        except Exception as e:
            raise ProviderError(f"{self.provider.provider_type.value} request failed: {e}") from e

        logger.debug(
            "Model response",
            provider=response.provider,
            model=response.model,
            latency_ms=round(response.latency_ms, 1),
            text=response.text,
        )

        if not response.text:
            raise MalformedResponseError("Empty response", raw_text=response.text)

        return parse_classification(response.text)


# Checked in this order; categories overlap ("vibration" and "damping"
# also describe waves), so the first match wins.
KEYWORDS: tuple[tuple[ModuleKind, tuple[str, ...]], ...] = (
    (ModuleKind.PROJECTILE, ("projectile", "ballistic", "trajectory", "throwing", "launch", "parabolic")),
    (ModuleKind.SPRING, ("spring", "oscillation", "harmonic", "hooke", "vibration", "mass-spring", "damping")),
    (ModuleKind.PENDULUM, ("pendulum", "swinging", "swing", "bob")),
    (ModuleKind.WAVE, ("wave", "vibration", "transverse", "longitudinal", "propagation", "frequency", "wavelength", "amplitude")),
)

FALLBACK_EXPLANATIONS: dict[ModuleKind, str] = {
    ModuleKind.PROJECTILE: (
        "Here's a projectile motion animation with default parameters. "
        "The ball follows a parabolic trajectory under gravity."
    ),
    ModuleKind.SPRING: (
        "Here's a spring oscillation animation with default parameters. "
        "The mass-spring system demonstrates simple harmonic motion following Hooke's law."
    ),
    ModuleKind.PENDULUM: (
        "Here's a pendulum animation with default parameters. "
        "For small angles the period depends only on length and gravity: T = 2π√(L/g)."
    ),
    ModuleKind.WAVE: (
        "Here's a wave animation with default parameters. "
        "The wave travels along the medium at speed v = fλ."
    ),
}

HELP_TEXT = (
    "I can help you with physics questions! For projectile motion animations, try asking: "
    "'Show me projectile motion with velocity 15 m/s and angle 60°'. For spring oscillations, "
    "try: 'Show me a spring with mass 2kg and spring constant 10 N/m'. For pendulums, try: "
    "'Show me a pendulum with length 2m'. For waves, try: 'Show me a wave with frequency 2Hz'. "
    "For other physics topics, just ask your question and I'll provide a helpful explanation."
)


def match_module(prompt: str) -> ModuleKind | None:
    """First module whose keywords appear in ``prompt`` (case-insensitive)."""
    lowered = prompt.lower()

    for kind, keywords in KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return kind
        if kind is ModuleKind.PROJECTILE and "motion" in lowered and (
            "ball" in lowered or "object" in lowered
        ):
            return kind

    return None


class KeywordClassifier(ClassifierBackend):
    """Keyword heuristic with the documented default parameters."""

    name = "keyword"

    async def classify(self, prompt: str) -> ClassificationResult:
        return self.classify_sync(prompt)

    def classify_sync(self, prompt: str) -> ClassificationResult:
        kind = match_module(prompt)
        if kind is None:
            return ClassificationResult(module=None, inputs=None, explanation=HELP_TEXT, source=self.name)

        return ClassificationResult(
            module=kind,
            inputs=default_parameters(kind),
            explanation=FALLBACK_EXPLANATIONS[kind],
            source=self.name,
        )


class FallbackClassifier(ClassifierBackend):
    """Try ``primary``; on any ClassifierError use ``fallback``."""

    name = "fallback"

    def __init__(self, primary: ClassifierBackend, fallback: ClassifierBackend | None = None):
        self.primary = primary
        self.fallback = fallback or KeywordClassifier()

    async def classify(self, prompt: str) -> ClassificationResult:
        try:
            return await self.primary.classify(prompt)
        except ClassifierError as e:
            logger.warning(
                "Primary classifier failed, falling back",
                primary=self.primary.name,
                fallback=self.fallback.name,
                error=str(e),
            )
            return await self.fallback.classify(prompt)
