"""Result of mapping a free-text question to an animation module."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from motionlab.models.parameters import ModuleKind, MotionParameters


class ClassificationResult(BaseModel):
    """
    Module choice, parameters (defaults applied) and explanation text.

    ``inputs`` is None exactly when ``module`` is None. ``source`` records
    which backend produced the result ("llm" or "keyword").
    """

    model_config = ConfigDict(frozen=True)

    module: Optional[ModuleKind] = None
    inputs: Optional[MotionParameters] = None
    explanation: str
    source: str = "keyword"

    def to_payload(self) -> dict[str, Any]:
        """The ``{module, inputs, explanation}`` shape returned to clients."""
        return {
            "module": self.module.value if self.module else None,
            "inputs": self.inputs.to_inputs() if self.inputs else {},
            "explanation": self.explanation,
        }
