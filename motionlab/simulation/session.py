"""
Animation session - one state plus the cooperative clock that drives it.

The clock is a single logical timer: each tick advances simulation time by
``time_step`` and re-evaluates the motion. ``run`` paces ticks in wall-clock
time with ``asyncio.sleep``; ``step`` applies ticks immediately for headless
use (API, CLI, tests).
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional

import structlog

from motionlab.errors import SimulationError
from motionlab.models.parameters import MotionParameters, WaveParameters
from motionlab.physics.evaluator import EvaluationResult, MotionEvaluator, wave_profile
from motionlab.simulation.state import (
    ChangeParameters,
    Event,
    Reset,
    ResetToDefaults,
    SimulationState,
    Start,
    Stop,
    Tick,
    reduce,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """What a renderer needs for one frame."""

    state: SimulationState
    evaluation: EvaluationResult
    profile: Optional[list[tuple[float, float]]] = None  # waves only

    def to_dict(self) -> dict[str, Any]:
        data = {
            "time": self.state.time,
            "isRunning": self.state.is_running,
            "evaluation": self.evaluation.to_dict(),
            "trail": [list(p) for p in self.state.trail],
        }
        if self.profile is not None:
            data["profile"] = [list(p) for p in self.profile]
        return data


class AnimationSession:
    """
    Owns the animation state of one module instance.

    Example:
        session = AnimationSession(ProjectileParameters())
        session.start()
        await session.run(realtime=False)   # stops at ground impact
        print(session.state.time, len(session.state.trail))
    """

    def __init__(
        self,
        params: MotionParameters,
        evaluator: MotionEvaluator | None = None,
    ):
        self.state = SimulationState.initial(params)
        self.evaluator = evaluator or MotionEvaluator()
        self._clock_active = False

    @property
    def params(self) -> MotionParameters:
        return self.state.params

    def dispatch(self, event: Event) -> SimulationState:
        """Apply one event and return the new state."""
        self.state = reduce(self.state, event)
        return self.state

    def start(self) -> SimulationState:
        return self.dispatch(Start())

    def stop(self) -> SimulationState:
        return self.dispatch(Stop())

    def reset(self) -> SimulationState:
        return self.dispatch(Reset())

    def change_parameters(self, params: MotionParameters) -> SimulationState:
        return self.dispatch(ChangeParameters(params))

    def reset_to_defaults(self) -> SimulationState:
        return self.dispatch(ResetToDefaults())

    def step(self, ticks: int = 1) -> SimulationState:
        """Apply ``ticks`` clock ticks immediately."""
        for _ in range(ticks):
            if not self.state.is_running:
                break
            self.dispatch(Tick())
        return self.state

    def snapshot(self, x_pos: float = 0.0) -> SessionSnapshot:
        evaluation = self.evaluator.evaluate(self.state.params, self.state.time, x_pos)
        profile = None
        if isinstance(self.state.params, WaveParameters):
            profile = wave_profile(self.state.params, self.state.time)
        return SessionSnapshot(state=self.state, evaluation=evaluation, profile=profile)

    async def run(
        self,
        max_ticks: int | None = None,
        realtime: bool = True,
        on_tick: Callable[[SessionSnapshot], None] | None = None,
    ) -> SimulationState:
        """
        Drive the clock until the animation stops.

        Starts the animation if it is not running. Returns when the state
        stops running (projectile impact, ``stop()`` or a parameter change)
        or after ``max_ticks`` ticks.

        Raises:
            SimulationError: if this session's clock is already running
        """
        if self._clock_active:
            raise SimulationError("Session clock is already running")

        self._clock_active = True
        ticks = 0
        try:
            if not self.state.is_running:
                self.start()

            logger.debug(
                "Animation started",
                module=self.state.params.kind.value,
                time_step=self.state.time_step,
                max_ticks=max_ticks,
            )

            while self.state.is_running and (max_ticks is None or ticks < max_ticks):
                if realtime:
                    await asyncio.sleep(self.state.time_step)
                else:
                    await asyncio.sleep(0)

                # stop() or a parameter change may have landed during the sleep
                if not self.state.is_running:
                    break

                self.dispatch(Tick())
                ticks += 1

                # the landing tick halts without producing a new frame
                if on_tick is not None and self.state.is_running:
                    on_tick(self.snapshot())
        finally:
            self._clock_active = False

        logger.debug(
            "Animation halted",
            module=self.state.params.kind.value,
            ticks=ticks,
            time=self.state.time,
            running=self.state.is_running,
        )
        return self.state
