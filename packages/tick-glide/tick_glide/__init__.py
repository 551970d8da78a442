"""tick-glide - Timer-driven tweening of numeric property mappings."""
from __future__ import annotations

from tick_glide.config import TweenableOptions
from tick_glide.controller import TweenController
from tick_glide.easing import FORMULAS, Easing, register_formula, resolve_formula
from tick_glide.filters import FILTERS, FilterRegistry
from tick_glide.hooks import HookRegistry
from tick_glide.scheduler import ManualScheduler, RealtimeScheduler, Scheduler, TimerHandle
from tick_glide.tweenable import Tweenable
from tick_glide.types import RunParameters, RunState, TweenConfig

__all__ = [
    "Tweenable",
    "TweenableOptions",
    "TweenConfig",
    "TweenController",
    "RunParameters",
    "RunState",
    "HookRegistry",
    "FilterRegistry",
    "FILTERS",
    "FORMULAS",
    "Easing",
    "register_formula",
    "resolve_formula",
    "Scheduler",
    "ManualScheduler",
    "RealtimeScheduler",
    "TimerHandle",
]
