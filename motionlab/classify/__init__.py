"""Question classification - language model with keyword fallback."""

from motionlab.classify.backends import (
    ClassifierBackend,
    LLMClassifier,
    KeywordClassifier,
    FallbackClassifier,
    match_module,
)
from motionlab.classify.parsing import extract_json_object, parse_classification
from motionlab.classify.prompts import SYSTEM_PROMPT, build_prompt

__all__ = [
    # Backends
    "ClassifierBackend",
    "LLMClassifier",
    "KeywordClassifier",
    "FallbackClassifier",
    "match_module",
    # Parsing
    "extract_json_object",
    "parse_classification",
    # Prompts
    "SYSTEM_PROMPT",
    "build_prompt",
]
