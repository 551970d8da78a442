"""Small helpers shared by the engine: wall clock and shallow copies."""
from __future__ import annotations

import time
from typing import Any, Callable, MutableMapping


def now() -> int:
    """Current UNIX epoch time in integer milliseconds."""
    return int(time.time() * 1000)


def each(obj: MutableMapping[str, Any], func: Callable[[MutableMapping[str, Any], str], None]) -> None:
    """Call ``func(obj, key)`` for every key of ``obj``."""
    for key in list(obj):
        func(obj, key)


def simple_copy(
    target: MutableMapping[str, Any], source: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Shallow-copy every key of ``source`` into ``target`` and return ``target``.

    Only appropriate for flat mappings of primitive values.
    """
    for key, value in source.items():
        target[key] = value
    return target
