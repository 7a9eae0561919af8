"""
Motion evaluator - instantaneous kinematic state for any motion type.

Maps a parameter set and an elapsed time to a displacement (or angle)
plus the descriptive quantities shown alongside an animation: natural
frequency, period, damping ratio and regime. Evaluation is pure; the
animation layer calls it once per clock tick.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from motionlab.models.parameters import (
    ModuleKind,
    MotionParameters,
    PendulumParameters,
    ProjectileParameters,
    SpringParameters,
    WaveKind,
    WaveParameters,
)
from motionlab.physics.oscillator import DampedOscillator, DampingRegime, safe_div, safe_exp

# Sampling of the wave medium, as drawn by the string renderer.
WAVE_SAMPLE_POINTS = 50
WAVE_MEDIUM_LENGTH = 10.0  # m


@dataclass(frozen=True)
class EvaluationResult:
    """Kinematic state of one motion at one instant."""

    module: ModuleKind
    time: float

    # Spring: metres from equilibrium. Pendulum: angle in radians.
    # Projectile: height. Wave: transverse displacement at x_pos.
    displacement: float

    natural_frequency: float  # rad/s
    period: float  # s
    damping_ratio: float
    regime: Optional[DampingRegime] = None

    # Rendered point in metres (None when not applicable)
    position: Optional[tuple[float, float]] = None

    # Module-specific quantities (range, wave speed, ...)
    extras: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "module": self.module.value,
            "time": self.time,
            "displacement": self.displacement,
            "naturalFrequency": self.natural_frequency,
            "period": self.period,
            "dampingRatio": self.damping_ratio,
            "regime": self.regime.value if self.regime else None,
            "position": list(self.position) if self.position else None,
            "extras": dict(self.extras),
        }


# ----- Projectile -----

def _launch_velocity(params: ProjectileParameters) -> tuple[float, float]:
    radians = math.radians(params.angle)
    return params.velocity * math.cos(radians), params.velocity * math.sin(radians)


def projectile_position(params: ProjectileParameters, t: float) -> tuple[float, float]:
    """(x, y) of the projectile after ``t`` seconds."""
    vx, vy = _launch_velocity(params)
    return vx * t, vy * t - 0.5 * params.gravity * t * t


def has_landed(params: ProjectileParameters, t: float) -> bool:
    """True once the projectile is back on the ground (y <= 0 for t > 0)."""
    return t > 0 and projectile_position(params, t)[1] <= 0


def _evaluate_projectile(params: ProjectileParameters, t: float, x_pos: float) -> EvaluationResult:
    vx, vy = _launch_velocity(params)
    x, y = projectile_position(params, t)
    flight_time = safe_div(2 * vy, params.gravity)

    return EvaluationResult(
        module=ModuleKind.PROJECTILE,
        time=t,
        displacement=y,
        natural_frequency=0.0,
        period=flight_time,
        damping_ratio=0.0,
        position=(x, y),
        extras={
            "vx": vx,
            "vy": vy,
            "max_height": safe_div(vy * vy, 2 * params.gravity),
            "range": safe_div(params.velocity * params.velocity * math.sin(2 * math.radians(params.angle)), params.gravity),
            "time_of_flight": flight_time,
        },
    )


# ----- Spring / pendulum -----

def _evaluate_spring(params: SpringParameters, t: float, x_pos: float) -> EvaluationResult:
    oscillator = DampedOscillator.spring(
        mass=params.mass,
        spring_constant=params.spring_constant,
        amplitude=params.amplitude,
        damping=params.damping,
    )
    x = oscillator.displacement(t)

    return EvaluationResult(
        module=ModuleKind.SPRING,
        time=t,
        displacement=x,
        natural_frequency=oscillator.natural_frequency,
        period=oscillator.period,
        damping_ratio=oscillator.damping_ratio,
        regime=oscillator.regime,
        position=(x, 0.0),
    )


def _evaluate_pendulum(params: PendulumParameters, t: float, x_pos: float) -> EvaluationResult:
    oscillator = DampedOscillator.pendulum(
        length=params.length,
        gravity=params.gravity,
        initial_angle_rad=math.radians(params.initial_angle),
        damping=params.damping,
    )
    angle = oscillator.displacement(t)

    if math.isfinite(angle):
        # Bob position relative to the pivot, y pointing up.
        bob = (params.length * math.sin(angle), -params.length * math.cos(angle))
    else:
        bob = (math.nan, math.nan)

    return EvaluationResult(
        module=ModuleKind.PENDULUM,
        time=t,
        displacement=angle,
        natural_frequency=oscillator.natural_frequency,
        period=oscillator.period,
        damping_ratio=oscillator.damping_ratio,
        regime=oscillator.regime,
        position=bob,
        extras={"angle_degrees": math.degrees(angle)},
    )


# ----- Wave -----

def wave_displacement(params: WaveParameters, x_pos: float, t: float) -> float:
    """A * sin(k*x - w*t) * exp(-damping*t) at position ``x_pos``."""
    wave_number = safe_div(2 * math.pi, params.wavelength)
    angular_frequency = 2 * math.pi * params.frequency
    phase = wave_number * x_pos - angular_frequency * t
    if not math.isfinite(phase):
        return math.nan
    return params.amplitude * math.sin(phase) * safe_exp(-params.damping * t)


def wave_profile(
    params: WaveParameters,
    t: float,
    points: int = WAVE_SAMPLE_POINTS,
    medium_length: float = WAVE_MEDIUM_LENGTH,
) -> list[tuple[float, float]]:
    """Displacement sampled at evenly spaced positions along the medium."""
    if points < 2:
        return [(0.0, wave_displacement(params, 0.0, t))]
    spacing = medium_length / (points - 1)
    return [
        (i * spacing, wave_displacement(params, i * spacing, t))
        for i in range(points)
    ]


def _evaluate_wave(params: WaveParameters, t: float, x_pos: float) -> EvaluationResult:
    angular_frequency = 2 * math.pi * params.frequency
    wave_number = safe_div(2 * math.pi, params.wavelength)
    y = wave_displacement(params, x_pos, t)

    extras = {
        "wave_number": wave_number,
        "wave_speed": params.frequency * params.wavelength,
        "envelope": safe_exp(-params.damping * t),
    }
    if params.wave_type is WaveKind.LONGITUDINAL:
        extras["compression"] = min(1.0, safe_div(abs(y), params.amplitude))

    return EvaluationResult(
        module=ModuleKind.WAVE,
        time=t,
        displacement=y,
        natural_frequency=angular_frequency,
        period=safe_div(1.0, params.frequency),
        damping_ratio=0.0,
        position=(x_pos, y),
        extras=extras,
    )


_Handler = Callable[[Any, float, float], EvaluationResult]


class MotionEvaluator:
    """
    Dispatches a parameter set to its closed-form evaluator.

    Example:
        evaluator = MotionEvaluator()
        state = evaluator.evaluate(SpringParameters(mass=2), t=0.5)
        print(state.displacement, state.regime)
    """

    def __init__(self):
        self._handlers: dict[type, _Handler] = {
            ProjectileParameters: _evaluate_projectile,
            SpringParameters: _evaluate_spring,
            PendulumParameters: _evaluate_pendulum,
            WaveParameters: _evaluate_wave,
        }

    def evaluate(self, params: MotionParameters, t: float, x_pos: float = 0.0) -> EvaluationResult:
        """
        Evaluate ``params`` at elapsed time ``t``.

        Args:
            params: Any motion parameter variant
            t: Elapsed simulation time in seconds
            x_pos: Position along the medium (waves only)

        Returns:
            EvaluationResult for that instant
        """
        handler = self._handlers.get(type(params))
        if handler is None:
            raise TypeError(f"Unsupported parameter type: {type(params).__name__}")
        return handler(params, t, x_pos)


_default_evaluator = MotionEvaluator()


def evaluate(params: MotionParameters, t: float, x_pos: float = 0.0) -> EvaluationResult:
    """Module-level shortcut for ``MotionEvaluator().evaluate``."""
    return _default_evaluator.evaluate(params, t, x_pos)
