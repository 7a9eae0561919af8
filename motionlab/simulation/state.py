"""
Animation state and its transitions.

The animation is an explicit ``SimulationState`` value. Every user or
clock action is an event, and ``reduce(state, event)`` returns the next
state without side effects, so the whole animation lifecycle is testable
without rendering anything.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from motionlab.models.parameters import MotionParameters, ProjectileParameters
from motionlab.physics.evaluator import MotionEvaluator, has_landed
from motionlab.simulation.trail import Trail


@dataclass(frozen=True)
class SimulationState:
    """Logical clock, run flag and trail of one animation."""

    params: MotionParameters
    defaults: MotionParameters
    trail: Trail
    time: float = 0.0
    is_running: bool = False

    @classmethod
    def initial(cls, params: MotionParameters) -> SimulationState:
        return cls(
            params=params,
            defaults=params,
            trail=Trail.for_module(params.kind),
        )

    @property
    def time_step(self) -> float:
        return self.params.time_step


# ----- Events -----

@dataclass(frozen=True)
class Start:
    """Start animating from t = 0 (ignored while already running)."""


@dataclass(frozen=True)
class Tick:
    """One timer tick: advance the clock by ``time_step``."""


@dataclass(frozen=True)
class Stop:
    """Pause; time and trail are kept."""


@dataclass(frozen=True)
class Reset:
    """Stop and rewind to t = 0 with an empty trail."""


@dataclass(frozen=True)
class ChangeParameters:
    """The user edited an input or picked a preset."""

    params: MotionParameters


@dataclass(frozen=True)
class ResetToDefaults:
    """Restore the parameters the session was opened with."""


Event = Union[Start, Tick, Stop, Reset, ChangeParameters, ResetToDefaults]

_evaluator = MotionEvaluator()


def _rewound(state: SimulationState) -> SimulationState:
    return replace(state, time=0.0, is_running=False, trail=state.trail.clear())


def _tick(state: SimulationState) -> SimulationState:
    if not state.is_running:
        return state

    new_time = state.time + state.time_step

    # The projectile timer cancels itself on ground impact.
    if isinstance(state.params, ProjectileParameters) and has_landed(state.params, new_time):
        return replace(state, is_running=False)

    point = _evaluator.evaluate(state.params, new_time).position
    trail = state.trail.append(point) if point is not None else state.trail
    return replace(state, time=new_time, trail=trail)


def reduce(state: SimulationState, event: Event) -> SimulationState:
    """
    Apply ``event`` to ``state`` and return the resulting state.

    Raises:
        TypeError: for an unknown event type
    """
    if isinstance(event, Tick):
        return _tick(state)

    if isinstance(event, Start):
        if state.is_running:
            return state
        return replace(_rewound(state), is_running=True)

    if isinstance(event, Stop):
        return replace(state, is_running=False)

    if isinstance(event, Reset):
        return _rewound(state)

    if isinstance(event, ChangeParameters):
        trail = state.trail
        if event.params.kind is not state.params.kind:
            trail = Trail.for_module(event.params.kind)
        changed = replace(state, params=event.params, trail=trail)
        if state.is_running:
            return _rewound(changed)
        return changed

    if isinstance(event, ResetToDefaults):
        return _rewound(replace(state, params=state.defaults, trail=Trail.for_module(state.defaults.kind)))

    raise TypeError(f"Unknown event: {event!r}")
