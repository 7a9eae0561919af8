"""
Closed-form damped harmonic oscillator.

Shared by the spring and pendulum evaluators. The oscillator is described
by its initial displacement ``x0``, natural angular frequency ``w0`` and
damping ratio ``zeta``; the displacement at time ``t`` follows one of three
closed forms depending on the damping regime:

- underdamped (zeta < 1):   x0 * exp(-zeta*w0*t) * cos(wd*t),  wd = w0*sqrt(1 - zeta^2)
- critically damped (== 1): x0 * (1 + w0*t) * exp(-w0*t)
- overdamped (zeta > 1):    x0/2 * exp(a1*t) + x0/2 * exp(a2*t),
                            a1,2 = -w0*(zeta -/+ sqrt(zeta^2 - 1))

All functions are total: degenerate inputs (zero mass or length, negative
stiffness) yield NaN or infinity instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class DampingRegime(str, Enum):
    """Decay behaviour derived from the damping ratio."""

    UNDERDAMPED = "underdamped"
    CRITICALLY_DAMPED = "critically_damped"
    OVERDAMPED = "overdamped"


def safe_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def safe_sqrt(value: float) -> float:
    if value < 0:
        return math.nan
    return math.sqrt(value)


def safe_exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def safe_cos(value: float) -> float:
    return math.cos(value) if math.isfinite(value) else math.nan


def damping_ratio(damping: float, stiffness: float, inertia: float) -> float:
    """
    zeta = c / (2 * sqrt(stiffness * inertia)).

    Springs pass (k, m); pendulums pass (g, L).
    """
    return safe_div(damping, 2 * safe_sqrt(stiffness * inertia))


def critical_damping(stiffness: float, inertia: float) -> float:
    """The damping coefficient that gives a ratio of exactly one."""
    return 2 * safe_sqrt(stiffness * inertia)


def classify_regime(ratio: float) -> DampingRegime | None:
    """None when the ratio is NaN (degenerate mass, length or stiffness)."""
    if math.isnan(ratio):
        return None
    if ratio < 1:
        return DampingRegime.UNDERDAMPED
    # Exact comparison: only damping == critical_damping(...) lands here.
    if ratio == 1:
        return DampingRegime.CRITICALLY_DAMPED
    return DampingRegime.OVERDAMPED


def period(natural_frequency: float) -> float:
    """Undamped period 2*pi/w0, reported even for damped systems."""
    return safe_div(2 * math.pi, natural_frequency)


def damped_displacement(
    x0: float,
    natural_frequency: float,
    ratio: float,
    t: float,
) -> float:
    """Displacement of a damped oscillator released at ``x0``."""
    w0 = natural_frequency
    regime = classify_regime(ratio)

    if regime is None:
        return math.nan

    if regime is DampingRegime.UNDERDAMPED:
        damped_frequency = w0 * safe_sqrt(1 - ratio * ratio)
        return x0 * safe_exp(-ratio * w0 * t) * safe_cos(damped_frequency * t)

    if regime is DampingRegime.CRITICALLY_DAMPED:
        return x0 * (1 + w0 * t) * safe_exp(-w0 * t)

    root = safe_sqrt(ratio * ratio - 1)
    alpha1 = -w0 * (ratio + root)
    alpha2 = -w0 * (ratio - root)
    c1 = x0 / 2
    c2 = x0 / 2
    return c1 * safe_exp(alpha1 * t) + c2 * safe_exp(alpha2 * t)


@dataclass(frozen=True)
class DampedOscillator:
    """A damped oscillator with its derived descriptive quantities."""

    amplitude: float
    natural_frequency: float
    damping_ratio: float

    @classmethod
    def spring(
        cls,
        mass: float,
        spring_constant: float,
        amplitude: float,
        damping: float,
    ) -> DampedOscillator:
        return cls(
            amplitude=amplitude,
            natural_frequency=safe_sqrt(safe_div(spring_constant, mass)),
            damping_ratio=damping_ratio(damping, spring_constant, mass),
        )

    @classmethod
    def pendulum(
        cls,
        length: float,
        gravity: float,
        initial_angle_rad: float,
        damping: float,
    ) -> DampedOscillator:
        return cls(
            amplitude=initial_angle_rad,
            natural_frequency=safe_sqrt(safe_div(gravity, length)),
            damping_ratio=damping_ratio(damping, gravity, length),
        )

    @property
    def regime(self) -> DampingRegime | None:
        return classify_regime(self.damping_ratio)

    @property
    def period(self) -> float:
        return period(self.natural_frequency)

    @property
    def damped_frequency(self) -> float | None:
        """w0*sqrt(1 - zeta^2); None outside the underdamped regime."""
        if self.regime is not DampingRegime.UNDERDAMPED:
            return None
        return self.natural_frequency * safe_sqrt(1 - self.damping_ratio * self.damping_ratio)

    def displacement(self, t: float) -> float:
        return damped_displacement(
            self.amplitude, self.natural_frequency, self.damping_ratio, t
        )
