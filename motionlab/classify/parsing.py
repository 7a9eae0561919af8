"""Extract and validate the JSON object in a model reply."""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from motionlab.errors import MalformedResponseError
from motionlab.models.classification import ClassificationResult
from motionlab.models.parameters import ModuleKind, parameters_for


def _matching_brace(text: str, start: int) -> int | None:
    """Index of the brace closing the one at ``start``, ignoring braces in strings."""
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index

    return None


def extract_json_object(text: str) -> str | None:
    """
    Return the first balanced ``{...}`` substring of ``text``.

    Models often wrap the object in prose or a ```json fence; anything
    around the object is ignored. Returns None when no brace balances.
    """
    start = text.find("{")
    while start != -1:
        end = _matching_brace(text, start)
        if end is not None:
            return text[start:end + 1]
        start = text.find("{", start + 1)
    return None


class ModelReply(BaseModel):
    """The ``{module, inputs, explanation}`` shape the model must return."""

    module: Optional[ModuleKind] = None
    inputs: Optional[dict[str, Any]] = None
    explanation: str


def parse_classification(text: str) -> ClassificationResult:
    """
    Turn a raw model reply into a ClassificationResult.

    Raises:
        MalformedResponseError: no JSON object, invalid JSON, wrong shape,
            or parameter values that are not finite numbers
    """
    candidate = extract_json_object(text)
    if candidate is None:
        raise MalformedResponseError("No JSON found in response", raw_text=text)

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Invalid JSON: {e}", raw_text=text) from e

    if not isinstance(data, dict) or "module" not in data:
        raise MalformedResponseError("Response is missing the module field", raw_text=text)

    try:
        reply = ModelReply.model_validate(data)
        inputs = parameters_for(reply.module, reply.inputs) if reply.module else None
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid classification: {e}", raw_text=text) from e

    return ClassificationResult(
        module=reply.module,
        inputs=inputs,
        explanation=reply.explanation,
        source="llm",
    )
