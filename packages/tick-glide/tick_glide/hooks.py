"""Per-instance named hook lists."""
from __future__ import annotations

from typing import Any, Callable

_Hook = Callable[..., Any]


class HookRegistry:

    def __init__(self) -> None:
        self._hooks: dict[str, list[_Hook]] = {}

    def add(self, name: str, hook: _Hook) -> None:
        self._hooks.setdefault(name, []).append(hook)

    def remove(self, name: str, hook: _Hook | None = None) -> None:
        """Remove ``hook`` from ``name``, or every hook under ``name`` if omitted."""
        hooks = self._hooks.get(name)
        if hooks is None:
            return
        if hook is None:
            hooks.clear()
            return
        for i, registered in enumerate(hooks):
            if registered == hook:
                del hooks[i]
                return

    def has(self, name: str) -> bool:
        return bool(self._hooks.get(name))

    def get(self, name: str) -> list[_Hook]:
        return list(self._hooks.get(name, []))

    def invoke(self, name: str, *args: Any) -> None:
        for hook in list(self._hooks.get(name, [])):
            hook(*args)

    def clear(self) -> None:
        self._hooks.clear()
