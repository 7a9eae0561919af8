"""Data models - motion parameters and classification results."""

from motionlab.models.parameters import (
    ModuleKind,
    WaveKind,
    MotionParameters,
    ProjectileParameters,
    SpringParameters,
    PendulumParameters,
    WaveParameters,
    MOTION_PARAMETERS,
    PARAMETER_TYPES,
    default_parameters,
    parameters_for,
    resolve_module,
)
from motionlab.models.classification import ClassificationResult

__all__ = [
    # Enums
    "ModuleKind",
    "WaveKind",
    # Parameters
    "MotionParameters",
    "ProjectileParameters",
    "SpringParameters",
    "PendulumParameters",
    "WaveParameters",
    "MOTION_PARAMETERS",
    "PARAMETER_TYPES",
    "default_parameters",
    "parameters_for",
    "resolve_module",
    # Classification
    "ClassificationResult",
]
