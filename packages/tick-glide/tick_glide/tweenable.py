"""Tweenable - engine instance owning defaults, hooks, and the active run."""
from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any, Callable, Mapping

from tick_glide import util as _util
from tick_glide.config import TweenableOptions
from tick_glide.controller import TweenController
from tick_glide.easing import FORMULAS, resolve_formula
from tick_glide.filters import FILTERS, TWEEN_CREATED, FilterRegistry
from tick_glide.hooks import HookRegistry
from tick_glide.loop import schedule_update
from tick_glide.scheduler import RealtimeScheduler, Scheduler
from tick_glide.types import RunParameters, RunState, State, StepFn, TweenConfig, _noop

LOG = logging.getLogger(__name__)


class Tweenable:
    """Runs at most one tween at a time.

    Args:
        options: A ``TweenableOptions`` or a mapping with ``fps``, ``easing``
            and ``duration`` keys.
        scheduler: Timer implementation; a ``RealtimeScheduler`` if omitted.
        filters: Filter registry to apply; the process-wide ``FILTERS`` if
            omitted.
        **overrides: Individual option values, applied over ``options``.
    """

    util = SimpleNamespace(now=_util.now, each=_util.each, simple_copy=_util.simple_copy)
    formula = FORMULAS

    def __init__(
        self,
        options: TweenableOptions | Mapping[str, Any] | None = None,
        *,
        scheduler: Scheduler | None = None,
        filters: FilterRegistry | None = None,
        **overrides: Any,
    ) -> None:
        self._scheduler: Scheduler = scheduler if scheduler is not None else RealtimeScheduler()
        self._filters = filters if filters is not None else FILTERS
        self._hooks = HookRegistry()
        self._params: RunParameters | None = None
        self._state: RunState | None = None
        self._options = TweenableOptions()
        self.configure(options, **overrides)

    def configure(
        self,
        options: TweenableOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> Tweenable:
        """Replace the instance defaults. Unspecified fields reset to defaults."""
        self._options = TweenableOptions.build(options, **overrides)
        return self

    @property
    def options(self) -> TweenableOptions:
        return self._options

    @property
    def fps(self) -> int:
        return self._options.fps

    @property
    def easing(self) -> str:
        return self._options.easing

    @property
    def duration(self) -> float:
        return self._options.duration

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def filters(self) -> FilterRegistry:
        return self._filters

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def is_animating(self) -> bool:
        return self._state is not None and self._state.is_active

    @property
    def controller(self) -> TweenController | None:
        return self._params.controller if self._params is not None else None

    def get(self) -> State | None:
        """Current state of the latest run, or None if nothing was tweened."""
        return self._state.current if self._state is not None else None

    def tween(
        self,
        from_: TweenConfig | Mapping[str, Any] | State | None = None,
        to: State | None = None,
        duration: float | None = None,
        callback: StepFn | None = None,
        easing: str | None = None,
    ) -> TweenController | None:
        """Start a tween and return its controller.

        Call with a ``TweenConfig`` (or a mapping with ``from``, ``to``,
        ``duration``, ``easing``, ``step`` and ``callback`` keys), or with the
        shorthand ``tween(from, to, duration, callback, easing)``. Returns None
        without touching anything if a tween is already running.
        """
        if self.is_animating:
            LOG.debug("tween rejected: another tween is running on %r", self)
            return None

        if to is not None:
            config = TweenConfig(
                from_=from_, to=to, duration=duration, easing=easing, callback=callback
            )
        elif isinstance(from_, TweenConfig):
            config = from_
        else:
            config = TweenConfig.from_mapping(dict(from_ or {}))

        run_duration = config.duration if config.duration is not None else self.duration
        if run_duration <= 0:
            raise ValueError("duration must be positive")

        state = RunState(current=dict(config.from_ or {}))
        easing_name = config.easing if config.easing is not None else self.easing
        params = RunParameters(
            owner=self,
            hooks=self._hooks,
            filters=self._filters,
            scheduler=self._scheduler,
            fps=self.fps,
            to=dict(config.to or {}),
            original_state=_util.simple_copy({}, state.current),
            duration=run_duration,
            timestamp=self._scheduler.now(),
            easing_func=resolve_formula(easing_name),
            step=config.step or _noop,
            callback=config.callback or _noop,
        )

        self._filters.apply(TWEEN_CREATED, state.current, params.original_state, params.to)

        params.controller = TweenController(params, state)
        state.is_animating = True
        self._params, self._state = params, state

        LOG.debug(
            "tween started: %r -> %r over %sms (%s)",
            params.original_state, params.to, run_duration, easing_name,
        )
        schedule_update(params, state)
        return params.controller

    def add_hook(self, name: str, hook: Callable[..., Any]) -> None:
        self._hooks.add(name, hook)

    def remove_hook(self, name: str, hook: Callable[..., Any] | None = None) -> None:
        self._hooks.remove(name, hook)
