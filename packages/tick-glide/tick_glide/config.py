"""Tweenable configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class TweenableOptions:
    """Immutable defaults for a Tweenable instance.

    Attributes:
        fps: Ticks per second of the scheduling loop.
        easing: Name of the default easing formula.
        duration: Default tween length in milliseconds.
    """

    fps: int = 30
    easing: str = "linear"
    duration: float = 500

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.duration <= 0:
            raise ValueError("duration must be positive")

    @property
    def interval(self) -> float:
        """Milliseconds between two ticks."""
        return 1000 / self.fps

    @classmethod
    def build(
        cls,
        options: TweenableOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> TweenableOptions:
        """Normalize an options object, a plain mapping, or keyword overrides.

        ``None`` values are treated as unspecified and keep the defaults.
        """
        if isinstance(options, TweenableOptions):
            base = options
            values: dict[str, Any] = {}
        else:
            base = cls()
            values = dict(options or {})
        values.update(overrides)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(f"Unknown Tweenable option(s): {', '.join(unknown)}")

        return replace(base, **{k: v for k, v in values.items() if v is not None})
