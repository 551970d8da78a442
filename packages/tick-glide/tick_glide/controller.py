"""Externally held handle for one tween run."""
from __future__ import annotations

import logging

from tick_glide.loop import schedule_update
from tick_glide.types import RunParameters, RunState, State
from tick_glide.util import simple_copy

LOG = logging.getLogger(__name__)


class TweenController:
    """Stops, pauses, resumes and inspects a single run.

    Every mutating method returns the controller so calls can be chained.
    Once the run has finished, the controller is inert.
    """

    def __init__(self, params: RunParameters, state: RunState) -> None:
        self._params = params
        self._state = state

    @property
    def is_animating(self) -> bool:
        return self._state.is_active

    @property
    def is_paused(self) -> bool:
        return self._state.is_paused

    def stop(self, goto_end: bool = False) -> TweenController:
        """Cancel the run.

        With ``goto_end`` the current state jumps to the target values and the
        completion callback fires. Without it the current state is left where
        the last tick put it and no callback fires.
        """
        params, state = self._params, self._state
        params.scheduler.cancel(state.loop_id)
        state.loop_id = None

        if goto_end:
            if state.is_finished:
                return self
            simple_copy(state.current, params.to)
            state.is_animating = False
            state.is_finished = True
            state.is_paused = False
            LOG.debug("tween completed: %r", state.current)
            params.callback(state.current)
        elif not state.is_stopped:
            state.is_stopped = True
            LOG.debug("tween stopped at %r", state.current)

        return self

    def pause(self) -> TweenController:
        state = self._state
        if not state.is_active or state.is_paused:
            return self
        self._params.scheduler.cancel(state.loop_id)
        state.loop_id = None
        state.paused_at_time = self._params.scheduler.now()
        state.is_paused = True
        LOG.debug("tween paused at %s", state.paused_at_time)
        return self

    def resume(self) -> TweenController:
        params, state = self._params, self._state
        if not state.is_paused or not state.is_active or state.paused_at_time is None:
            return self
        params.timestamp += params.scheduler.now() - state.paused_at_time
        state.is_paused = False
        state.paused_at_time = None
        LOG.debug("tween resumed, logical start moved to %s", params.timestamp)
        schedule_update(params, state)
        return self

    def get(self) -> State:
        """Return the live current-state mapping (not a copy)."""
        return self._state.current
