"""Scheduling loop: per-tick interpolation and hook/filter dispatch."""
from __future__ import annotations

import logging
from typing import Literal

from tick_glide.filters import AFTER_TWEEN, BEFORE_TWEEN
from tick_glide.scheduler import TimerHandle
from tick_glide.types import RunParameters, RunState

LOG = logging.getLogger(__name__)

STEP_HOOK = "step"

CONTINUE = "continue"
FINISH = "finish"
Action = Literal["continue", "finish"]


def interpolate(params: RunParameters, state: RunState, current_time: float) -> None:
    """Ease every property present in both ``current`` and ``to``.

    Properties only in ``current`` are left alone; properties only in ``to``
    are never created.
    """
    elapsed = current_time - params.timestamp
    current = state.current
    for key in current:
        if key in params.to:
            start = params.original_state[key]
            current[key] = params.easing_func(
                elapsed, start, params.to[key] - start, params.duration
            )


def next_action(params: RunParameters, state: RunState, current_time: float) -> Action:
    """Decide what a tick at ``current_time`` must do.

    Termination compares absolute elapsed time against the logical start, so
    irregular tick spacing never affects where the tween ends up.
    """
    if current_time < params.timestamp + params.duration and state.is_animating:
        return CONTINUE
    return FINISH


def tick(params: RunParameters, state: RunState) -> None:
    if state.is_stopped:
        return

    firing = state.loop_id
    current_time = params.scheduler.now()

    if next_action(params, state, current_time) == CONTINUE:
        try:
            params.filters.apply(BEFORE_TWEEN, state.current, params.original_state, params.to)
            interpolate(params, state, current_time)
            params.filters.apply(AFTER_TWEEN, state.current, params.original_state, params.to)

            if params.hooks.has(STEP_HOOK):
                params.hooks.invoke(STEP_HOOK, state.current)

            params.step(state.current)
        except Exception:
            # A failed tick ends the run so the owner can start another one.
            state.is_stopped = True
            state.loop_id = None
            LOG.debug("tween stopped by an error raised during a tick")
            raise

        # Callbacks may have paused, stopped or resumed the run; any of those
        # replaces loop_id and owns what happens next.
        if state.loop_id is firing and state.is_active and not state.is_paused:
            schedule_update(params, state)
    elif params.controller is not None:
        params.controller.stop(True)


def schedule_update(params: RunParameters, state: RunState) -> TimerHandle:
    """Queue the next tick one frame (``1000 / fps`` ms) from now."""
    state.loop_id = params.scheduler.schedule(lambda: tick(params, state), params.interval)
    return state.loop_id
