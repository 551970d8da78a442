"""Lifecycle filters applied to every tween sharing a registry."""
from __future__ import annotations

from typing import Callable

from tick_glide.types import State

TWEEN_CREATED = "tween_created"
BEFORE_TWEEN = "before_tween"
AFTER_TWEEN = "after_tween"

FILTER_NAMES = (TWEEN_CREATED, BEFORE_TWEEN, AFTER_TWEEN)

FilterFn = Callable[[State, State, State], None]


class FilterRegistry:
    """Groups of lifecycle callbacks keyed by an arbitrary group name.

    Each callback receives ``(current, original_state, to)``. Groups are
    applied in registration order.
    """

    def __init__(self) -> None:
        self._groups: dict[str, dict[str, FilterFn]] = {}

    def add(
        self,
        group: str,
        *,
        tween_created: FilterFn | None = None,
        before_tween: FilterFn | None = None,
        after_tween: FilterFn | None = None,
    ) -> None:
        """Register callbacks under ``group``, merging into an existing group."""
        entry = self._groups.setdefault(group, {})
        for name, fn in (
            (TWEEN_CREATED, tween_created),
            (BEFORE_TWEEN, before_tween),
            (AFTER_TWEEN, after_tween),
        ):
            if fn is not None:
                entry[name] = fn

    def remove(self, group: str) -> None:
        self._groups.pop(group, None)

    def clear(self) -> None:
        self._groups.clear()

    def groups(self) -> list[str]:
        return list(self._groups)

    def get(self, group: str) -> dict[str, FilterFn]:
        return dict(self._groups.get(group, {}))

    def apply(self, filter_name: str, current: State, original_state: State, to: State) -> None:
        if filter_name not in FILTER_NAMES:
            raise ValueError(f"Unknown filter {filter_name!r}")
        for entry in list(self._groups.values()):
            fn = entry.get(filter_name)
            if fn is not None:
                fn(current, original_state, to)


# Process-wide registry used by every Tweenable not given its own.
FILTERS = FilterRegistry()
