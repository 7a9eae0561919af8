"""
Tests for settings and engine wiring.
"""

import asyncio

import pytest

from motionlab.classify.backends import FallbackClassifier, KeywordClassifier
from motionlab.classify.providers import AnthropicProvider, GeminiProvider, OpenAIProvider
from motionlab.classify.providers.base import LLMProviderType
from motionlab.config import Settings, resolve_api_key
from motionlab.engine import PhysicsTutor, build_classifier, get_provider
from motionlab.errors import ConfigurationError
from motionlab.models.parameters import ModuleKind


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        """Test an empty environment."""
        settings = Settings.from_env({})

        assert settings.provider is LLMProviderType.GEMINI
        assert settings.api_key is None
        assert settings.offline is False
        assert settings.temperature == 0.2
        assert settings.log_level == "INFO"

    def test_overrides(self):
        """Test every variable is read."""
        settings = Settings.from_env({
            "MOTIONLAB_PROVIDER": "Anthropic",
            "MOTIONLAB_MODEL": "claude-test",
            "MOTIONLAB_OFFLINE": "yes",
            "MOTIONLAB_TEMPERATURE": "0.7",
            "MOTIONLAB_LOG_LEVEL": "debug",
            "MOTIONLAB_LOG_JSON": "1",
            "ANTHROPIC_API_KEY": "sk-test",
        })

        assert settings.provider is LLMProviderType.ANTHROPIC
        assert settings.model == "claude-test"
        assert settings.api_key == "sk-test"
        assert settings.offline is True
        assert settings.temperature == 0.7
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_invalid_values(self):
        """Test bad provider and temperature values."""
        with pytest.raises(ConfigurationError):
            Settings.from_env({"MOTIONLAB_PROVIDER": "xai"})
        with pytest.raises(ConfigurationError):
            Settings.from_env({"MOTIONLAB_TEMPERATURE": "warm"})

    def test_google_api_key(self):
        """Test the Gemini key falls back to GOOGLE_API_KEY."""
        assert resolve_api_key(LLMProviderType.GEMINI, {"GOOGLE_API_KEY": "g"}) == "g"
        assert resolve_api_key(
            LLMProviderType.GEMINI, {"GEMINI_API_KEY": "a", "GOOGLE_API_KEY": "b"}
        ) == "a"
        assert resolve_api_key(LLMProviderType.OPENAI, {"GOOGLE_API_KEY": "g"}) is None


class TestGetProvider:
    """Tests for provider construction."""

    def test_provider_classes(self):
        """Test each provider type maps to its class."""
        assert isinstance(get_provider("gemini", api_key="k"), GeminiProvider)
        assert isinstance(get_provider("anthropic", api_key="k"), AnthropicProvider)
        assert isinstance(get_provider(LLMProviderType.OPENAI, api_key="k"), OpenAIProvider)

    def test_model_override(self):
        """Test the model falls back to the provider default."""
        assert get_provider("openai", api_key="k").model == "gpt-4o-mini"
        assert get_provider("openai", api_key="k", model="gpt-test").model == "gpt-test"

    def test_missing_key(self, monkeypatch):
        """Test a missing key raises ValueError."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError):
            get_provider("openai")


class TestBuildClassifier:
    """Tests for classifier selection."""

    def test_offline(self):
        """Test offline mode uses keywords only."""
        classifier = build_classifier(Settings(offline=True, api_key="k"))
        assert isinstance(classifier, KeywordClassifier)

    def test_no_key(self, monkeypatch):
        """Test a missing key degrades to keywords."""
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        assert isinstance(build_classifier(Settings()), KeywordClassifier)

    def test_with_key(self):
        """Test a configured key gives model-with-fallback."""
        classifier = build_classifier(Settings(provider=LLMProviderType.ANTHROPIC, api_key="k"))
        assert isinstance(classifier, FallbackClassifier)
        assert isinstance(classifier.fallback, KeywordClassifier)
        assert classifier.primary.provider.provider_type is LLMProviderType.ANTHROPIC


class TestPhysicsTutor:
    """Tests for PhysicsTutor."""

    def test_ask_and_open_session(self):
        """Test a question opens a session with its parameters."""
        tutor = PhysicsTutor(classifier=KeywordClassifier(), settings=Settings(offline=True))

        result = asyncio.run(tutor.ask("How does a pendulum swing?"))
        assert result.module is ModuleKind.PENDULUM

        session = tutor.open_session(result)
        assert session.params == result.inputs
        session.start()
        assert session.step(3).time > 0

    def test_no_session_without_module(self):
        """Test text-only answers have no session."""
        tutor = PhysicsTutor(settings=Settings(offline=True))
        result = asyncio.run(tutor.ask("xyz unrelated nonsense"))
        assert tutor.open_session(result) is None
