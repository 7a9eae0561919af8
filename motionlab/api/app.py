"""FastAPI application for MotionLab."""

from __future__ import annotations

import math
from typing import Any

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from motionlab import __version__
from motionlab.config import Settings
from motionlab.engine import PhysicsTutor
from motionlab.errors import ConfigurationError, MotionLabError
from motionlab.logging_config import configure_logging
from motionlab.models.parameters import (
    ModuleKind,
    MotionParameters,
    default_parameters,
    parameters_for,
    resolve_module,
)
from motionlab.physics.evaluator import evaluate
from motionlab.simulation.presets import presets_for
from motionlab.simulation.session import AnimationSession
from motionlab.simulation.trail import TRAIL_CAPACITY

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="MotionLab",
    description="Physics questions in, closed-form motion animations out",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_PAYLOAD = {"module": None, "inputs": {}, "explanation": "Error processing request."}

# Global tutor instance (overridable through app.dependency_overrides)
_tutor: PhysicsTutor | None = None


def get_tutor() -> PhysicsTutor | None:
    """Get or create the tutor instance; None while the settings are invalid."""
    global _tutor
    if _tutor is None:
        try:
            settings = Settings.from_env()
        except MotionLabError as e:
            logger.error("Invalid settings", error=str(e))
            return None
        configure_logging(settings.log_level, settings.log_json)
        _tutor = PhysicsTutor(settings=settings)
    return _tutor


# ----- Request/Response Models -----

class ChatRequest(BaseModel):
    """A free-text question."""
    prompt: str


class EvaluateRequest(BaseModel):
    """Evaluate one motion at one instant."""
    model_config = ConfigDict(populate_by_name=True)

    module: str
    inputs: dict[str, Any] = Field(default_factory=dict)
    time: float = Field(0.0, ge=0.0)
    x_pos: float = Field(0.0, alias="xPos")


class SimulateRequest(BaseModel):
    """Run a headless animation for a number of ticks."""
    module: str
    inputs: dict[str, Any] = Field(default_factory=dict)
    ticks: int = Field(50, ge=1, le=10_000)


def _resolve_parameters(module: str, inputs: dict[str, Any]) -> MotionParameters:
    try:
        kind = resolve_module(module)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    try:
        return parameters_for(kind, inputs)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities (degenerate parameters) with None."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


# ----- Endpoints -----

@app.get("/")
async def root():
    """Health check."""
    return {
        "service": "MotionLab",
        "version": __version__,
        "status": "healthy",
    }


@app.post("/api/chat")
async def chat(request: Request, tutor: PhysicsTutor | None = Depends(get_tutor)):
    """
    Classify a question and return ``{module, inputs, explanation}``.

    Model failures are handled by the classifier's keyword fallback. Anything
    else that goes wrong, including a malformed body or invalid settings,
    returns a 500 with the fixed error payload.
    """
    try:
        if tutor is None:
            raise ConfigurationError("Tutor is not configured")
        body = await request.json()
        chat_request = ChatRequest.model_validate(body)
        result = await tutor.ask(chat_request.prompt)
    except Exception as e:
        logger.error("Chat request failed", error=str(e), error_type=type(e).__name__)
        return JSONResponse(status_code=500, content=ERROR_PAYLOAD)

    return result.to_payload()


@app.get("/modules")
async def list_modules():
    """The four animation modules with their defaults."""
    return [
        {
            "module": kind.value,
            "defaults": default_parameters(kind).to_inputs(),
            "trailCapacity": TRAIL_CAPACITY[kind],
        }
        for kind in ModuleKind
    ]


@app.get("/modules/{module}/presets")
async def list_presets(module: str):
    """Quick presets for one module."""
    try:
        kind = resolve_module(module)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return [preset.to_dict() for preset in presets_for(kind)]


@app.post("/evaluate")
async def evaluate_motion(request: EvaluateRequest):
    """Kinematic state of a motion at ``time``."""
    params = _resolve_parameters(request.module, request.inputs)
    return _json_safe(evaluate(params, request.time, request.x_pos).to_dict())


@app.post("/simulate")
async def simulate(request: SimulateRequest):
    """Advance a fresh animation tick by tick and return every frame."""
    params = _resolve_parameters(request.module, request.inputs)

    session = AnimationSession(params)
    session.start()

    frames = [session.snapshot().to_dict()]
    for _ in range(request.ticks):
        session.step()
        # A projectile stops on the tick that would put it below ground
        if not session.state.is_running:
            break
        frames.append(session.snapshot().to_dict())

    return _json_safe({
        "module": params.kind.value,
        "inputs": params.to_inputs(),
        "ticks": len(frames) - 1,
        "time": session.state.time,
        "halted": not session.state.is_running,
        "frames": frames,
        "trail": [list(p) for p in session.state.trail],
    })
