"""
Physical parameter sets for the four supported motion types.

Each variant is a frozen pydantic model tagged by ``module``. Field names
are snake_case in Python and camelCase on the wire (``springConstant``,
``initialAngle``, ``timeStep``, ``waveType``), matching the JSON the
front end and the language model exchange.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class ModuleKind(str, Enum):
    """Animation modules the classifier can select."""

    PROJECTILE = "ProjectileMotion"
    SPRING = "SpringOscillation"
    PENDULUM = "PendulumMotion"
    WAVE = "WaveVibration"


class WaveKind(str, Enum):
    """How a wave is rendered; both share the same displacement formula."""

    TRANSVERSE = "transverse"
    LONGITUDINAL = "longitudinal"


_SHORT_NAMES = {
    "projectile": ModuleKind.PROJECTILE,
    "spring": ModuleKind.SPRING,
    "pendulum": ModuleKind.PENDULUM,
    "wave": ModuleKind.WAVE,
}


def resolve_module(name: str) -> ModuleKind:
    """
    Resolve a module from its wire name or a short alias.

    Accepts ``"SpringOscillation"``, ``"springoscillation"`` or ``"spring"``.
    Raises ValueError for anything else.
    """
    lowered = name.strip().lower()
    if lowered in _SHORT_NAMES:
        return _SHORT_NAMES[lowered]
    for kind in ModuleKind:
        if kind.value.lower() == lowered:
            return kind
    raise ValueError(f"Unknown module: {name}")


class _MotionParameters(BaseModel):
    """Shared configuration for every parameter variant."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    @property
    def kind(self) -> ModuleKind:
        return ModuleKind(self.module)

    def to_inputs(self) -> dict[str, Any]:
        """Wire representation without the ``module`` tag."""
        return self.model_dump(by_alias=True, exclude={"module"}, mode="json")


class ProjectileParameters(_MotionParameters):
    """Launch of a point mass with no air resistance."""

    module: Literal["ProjectileMotion"] = "ProjectileMotion"
    velocity: float = 50.0  # m/s
    angle: float = 45.0  # degrees above horizontal
    gravity: float = 9.8  # m/s^2
    time_step: float = 0.1  # s


class SpringParameters(_MotionParameters):
    """Horizontal mass-spring system with linear damping."""

    module: Literal["SpringOscillation"] = "SpringOscillation"
    mass: float = 1.0  # kg
    spring_constant: float = 10.0  # N/m
    amplitude: float = 1.0  # m
    damping: float = 0.0  # N*s/m
    time_step: float = 0.05


class PendulumParameters(_MotionParameters):
    """Simple pendulum under the small-angle approximation."""

    module: Literal["PendulumMotion"] = "PendulumMotion"
    length: float = 1.0  # m
    mass: float = 1.0  # kg, display only
    initial_angle: float = 30.0  # degrees
    gravity: float = 9.8
    damping: float = 0.0
    time_step: float = 0.05


class WaveParameters(_MotionParameters):
    """Travelling sinusoidal wave on a fixed-length medium."""

    module: Literal["WaveVibration"] = "WaveVibration"
    frequency: float = 1.0  # Hz
    amplitude: float = 1.0  # m
    wavelength: float = 2.0  # m
    damping: float = 0.0  # 1/s, exponential envelope
    time_step: float = 0.05
    wave_type: WaveKind = WaveKind.TRANSVERSE


MotionParameters = Annotated[
    Union[ProjectileParameters, SpringParameters, PendulumParameters, WaveParameters],
    Field(discriminator="module"),
]

MOTION_PARAMETERS = TypeAdapter(MotionParameters)

PARAMETER_TYPES: dict[ModuleKind, type[_MotionParameters]] = {
    ModuleKind.PROJECTILE: ProjectileParameters,
    ModuleKind.SPRING: SpringParameters,
    ModuleKind.PENDULUM: PendulumParameters,
    ModuleKind.WAVE: WaveParameters,
}


def default_parameters(kind: ModuleKind) -> MotionParameters:
    """The documented default parameter set for a module."""
    return PARAMETER_TYPES[kind]()


def parameters_for(kind: ModuleKind, inputs: dict[str, Any] | None = None) -> MotionParameters:
    """
    Build the parameter variant for ``kind`` from a partial inputs dict.

    Missing or null fields take their defaults; unknown keys are ignored.
    Both camelCase and snake_case keys are accepted.

    Raises:
        pydantic.ValidationError: a supplied value is not a finite number
            (or not a known wave type).
    """
    supplied = {key: value for key, value in (inputs or {}).items() if value is not None}
    supplied.pop("module", None)
    return PARAMETER_TYPES[kind].model_validate(supplied)
