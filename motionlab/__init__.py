"""
MotionLab

An educational physics assistant: free-form questions are routed to one
of four motion animations (projectile, spring, pendulum, wave) driven by
closed-form kinematic equations.
"""

from motionlab.engine import PhysicsTutor
from motionlab.models.parameters import (
    ModuleKind,
    ProjectileParameters,
    SpringParameters,
    PendulumParameters,
    WaveParameters,
)
from motionlab.models.classification import ClassificationResult
from motionlab.physics.evaluator import MotionEvaluator, EvaluationResult, evaluate
from motionlab.simulation.session import AnimationSession

__version__ = "0.1.0"

__all__ = [
    # Core
    "PhysicsTutor",
    # Models
    "ModuleKind",
    "ProjectileParameters",
    "SpringParameters",
    "PendulumParameters",
    "WaveParameters",
    "ClassificationResult",
    # Physics
    "MotionEvaluator",
    "EvaluationResult",
    "evaluate",
    # Simulation
    "AnimationSession",
]
