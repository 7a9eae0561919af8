"""Simulation module - animation state, trail buffer, clock and presets."""

from motionlab.simulation.trail import Trail, TRAIL_CAPACITY
from motionlab.simulation.state import (
    SimulationState,
    Start,
    Tick,
    Stop,
    Reset,
    ChangeParameters,
    ResetToDefaults,
    reduce,
)
from motionlab.simulation.session import AnimationSession, SessionSnapshot
from motionlab.simulation.presets import Preset, PRESETS, presets_for, get_preset

__all__ = [
    # Trail
    "Trail",
    "TRAIL_CAPACITY",
    # State
    "SimulationState",
    "Start",
    "Tick",
    "Stop",
    "Reset",
    "ChangeParameters",
    "ResetToDefaults",
    "reduce",
    # Session
    "AnimationSession",
    "SessionSnapshot",
    # Presets
    "Preset",
    "PRESETS",
    "presets_for",
    "get_preset",
]
