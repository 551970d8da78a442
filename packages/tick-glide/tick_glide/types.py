"""Run parameters, run state, and tween configuration types."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, Callable

from tick_glide.easing import Easing

if TYPE_CHECKING:
    from tick_glide.controller import TweenController
    from tick_glide.filters import FilterRegistry
    from tick_glide.hooks import HookRegistry
    from tick_glide.scheduler import Scheduler, TimerHandle
    from tick_glide.tweenable import Tweenable

State = dict[str, float]
StepFn = Callable[[State], Any]


def _noop(current: State) -> None:
    return None


@dataclass
class TweenConfig:
    """Longhand description of a single tween.

    ``from_`` is the start state (``"from"`` in mapping form). Fields left as
    None fall back to the owning Tweenable's defaults or to no-ops.
    """

    from_: State | None = None
    to: State | None = None
    duration: float | None = None
    easing: str | None = None
    step: StepFn | None = None
    callback: StepFn | None = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> TweenConfig:
        values = dict(data)
        if "from" in values:
            values["from_"] = values.pop("from")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(
                f"Unknown tween option(s): {', '.join(unknown)}; "
                "pass the target as the second argument for the shorthand form"
            )
        return cls(**values)


@dataclass
class RunParameters:
    """Everything fixed for the lifetime of one run.

    ``timestamp`` is the only field that changes after creation; ``resume()``
    shifts it forward by the time spent paused.
    """

    owner: Tweenable
    hooks: HookRegistry
    filters: FilterRegistry
    scheduler: Scheduler
    fps: int
    to: State
    original_state: State
    duration: float
    timestamp: float
    easing_func: Easing
    step: StepFn = _noop
    callback: StepFn = _noop
    controller: TweenController | None = None

    @property
    def interval(self) -> float:
        return 1000 / self.fps


@dataclass
class RunState:
    """Mutable state shared by the scheduling loop and the controller."""

    current: State = field(default_factory=dict)
    is_animating: bool = False
    is_paused: bool = False
    is_stopped: bool = False
    is_finished: bool = False
    paused_at_time: float | None = None
    loop_id: TimerHandle | None = None

    @property
    def is_active(self) -> bool:
        """True while the run still owns its Tweenable (running or paused)."""
        return self.is_animating and not self.is_stopped
