"""
Physics module for closed-form motion evaluation.

Provides the damped harmonic oscillator shared by springs and
pendulums, plus projectile and travelling-wave kinematics.
"""

from motionlab.physics.oscillator import (
    DampedOscillator,
    DampingRegime,
    classify_regime,
    critical_damping,
    damped_displacement,
    damping_ratio,
)
from motionlab.physics.evaluator import (
    EvaluationResult,
    MotionEvaluator,
    evaluate,
    has_landed,
    projectile_position,
    wave_displacement,
    wave_profile,
)

__all__ = [
    "DampedOscillator",
    "DampingRegime",
    "classify_regime",
    "critical_damping",
    "damped_displacement",
    "damping_ratio",
    "EvaluationResult",
    "MotionEvaluator",
    "evaluate",
    "has_landed",
    "projectile_position",
    "wave_displacement",
    "wave_profile",
]
