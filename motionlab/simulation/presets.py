"""Quick presets offered next to each animation."""

from __future__ import annotations

from dataclasses import dataclass

from motionlab.models.parameters import (
    ModuleKind,
    MotionParameters,
    PendulumParameters,
    ProjectileParameters,
    SpringParameters,
    WaveKind,
    WaveParameters,
)


@dataclass(frozen=True)
class Preset:
    """A named parameter set."""

    name: str
    params: MotionParameters

    def to_dict(self) -> dict:
        return {"name": self.name, "inputs": self.params.to_inputs()}


PRESETS: dict[ModuleKind, tuple[Preset, ...]] = {
    ModuleKind.PROJECTILE: (
        Preset("Optimal (45°)", ProjectileParameters(velocity=50, angle=45, gravity=9.8, time_step=0.1)),
        Preset("Low Angle (30°)", ProjectileParameters(velocity=50, angle=30, gravity=9.8, time_step=0.1)),
        Preset("High Angle (60°)", ProjectileParameters(velocity=50, angle=60, gravity=9.8, time_step=0.1)),
        Preset("Moon Gravity", ProjectileParameters(velocity=50, angle=45, gravity=3.7, time_step=0.1)),
    ),
    ModuleKind.SPRING: (
        Preset("Simple Harmonic", SpringParameters(mass=1, spring_constant=10, amplitude=1, damping=0)),
        Preset("Light Damping", SpringParameters(mass=2, spring_constant=20, amplitude=0.8, damping=0.5)),
        Preset("Heavy Damping", SpringParameters(mass=1, spring_constant=10, amplitude=1, damping=2)),
        # 2*sqrt(10) rounded, so just short of critical
        Preset("Critical Damping", SpringParameters(mass=1, spring_constant=10, amplitude=1, damping=6.32)),
    ),
    ModuleKind.PENDULUM: (
        Preset("Simple Pendulum", PendulumParameters(length=1, mass=1, initial_angle=30, gravity=9.8, damping=0)),
        Preset("Light Damping", PendulumParameters(length=2, mass=2, initial_angle=45, gravity=9.8, damping=0.1)),
        Preset("Heavy Damping", PendulumParameters(length=1, mass=1, initial_angle=60, gravity=9.8, damping=0.5)),
        Preset("Moon Gravity", PendulumParameters(length=1, mass=1, initial_angle=30, gravity=3.7, damping=0)),
        Preset("Fast Pendulum", PendulumParameters(length=0.5, mass=0.5, initial_angle=20, gravity=9.8, damping=0)),
    ),
    ModuleKind.WAVE: (
        Preset("Simple Wave", WaveParameters(frequency=1, amplitude=1, wavelength=2, damping=0)),
        Preset("High Frequency", WaveParameters(frequency=2, amplitude=0.8, wavelength=1.5, damping=0.1)),
        Preset("Long Wavelength", WaveParameters(frequency=0.5, amplitude=1.2, wavelength=4, damping=0.05)),
        Preset("Damped Wave", WaveParameters(frequency=1.5, amplitude=1, wavelength=2, damping=0.2)),
        Preset(
            "Sound Wave",
            WaveParameters(frequency=1, amplitude=1, wavelength=2, damping=0, wave_type=WaveKind.LONGITUDINAL),
        ),
    ),
}


def presets_for(kind: ModuleKind) -> tuple[Preset, ...]:
    return PRESETS[kind]


def get_preset(kind: ModuleKind, name: str) -> Preset:
    """
    Look up a preset by name, case-insensitively.

    An unambiguous prefix also matches ("optimal" -> "Optimal (45°)").
    Raises KeyError when nothing (or more than one preset) matches.
    """
    wanted = name.strip().lower()
    candidates = PRESETS[kind]
    for preset in candidates:
        if preset.name.lower() == wanted:
            return preset
    prefixed = [p for p in candidates if p.name.lower().startswith(wanted)]
    if len(prefixed) == 1:
        return prefixed[0]
    raise KeyError(f"No preset {name!r} for {kind.value}")
