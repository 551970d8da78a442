"""Easing formulas for tween interpolation.

Every formula takes ``(elapsed, start, delta, duration)`` and returns the
interpolated value at ``elapsed`` milliseconds into a tween.
"""
from __future__ import annotations

import logging
from typing import Callable

LOG = logging.getLogger(__name__)

Easing = Callable[[float, float, float, float], float]


def linear(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


def ease_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def ease_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2) + b


def ease_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


FORMULAS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def register_formula(name: str, formula: Easing) -> None:
    """Make ``formula`` available to every tween under ``name``."""
    FORMULAS[name] = formula


def resolve_formula(name: str | None) -> Easing:
    """Look up an easing by name, falling back to ``linear``."""
    formula = FORMULAS.get(name) if name is not None else None
    if formula is None:
        LOG.debug("unknown easing %r, falling back to linear", name)
        return linear
    return formula
