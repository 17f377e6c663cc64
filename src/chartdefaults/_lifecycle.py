"""Ordered initialize() hooks.

A class gets a single initialize() wrapper the first time a hook is added
to it. The wrapper runs the class's "before" hooks, then the initialize()
it replaced, then the "after" hooks, each list in registration order.
Hooks receive the instance and the arguments initialize() was called with.

Hook lists live in the class's own __dict__, so a subclass that declares
more defaults gets its own wrapper around the parent's (already wrapped)
initialize() instead of appending to the parent's hooks.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

Hook = Callable[..., None]

_HOOKS_ATTR = "__initialize_hooks__"


class InitializeHooks:
    __slots__ = ("before", "after")

    def __init__(self) -> None:
        self.before: list[Hook] = []
        self.after: list[Hook] = []

    def __repr__(self) -> str:
        return f"InitializeHooks(before={len(self.before)}, after={len(self.after)})"


def hooks_for(cls: type) -> InitializeHooks:
    """Return cls's hook lists, installing the initialize() wrapper on first use."""
    hooks = cls.__dict__.get(_HOOKS_ATTR)
    if hooks is not None:
        return hooks

    original = getattr(cls, "initialize", None)
    if not callable(original):
        raise TypeError(f"{cls.__name__} has no initialize() to hook into")

    hooks = InitializeHooks()

    @functools.wraps(original)
    def initialize(self, *args: Any, **kwargs: Any) -> Any:
        for hook in hooks.before:
            hook(self, *args, **kwargs)
        result = original(self, *args, **kwargs)
        for hook in hooks.after:
            hook(self, *args, **kwargs)
        return result

    setattr(cls, _HOOKS_ATTR, hooks)
    cls.initialize = initialize
    return hooks


def before_initialize(cls: type, hook: Hook) -> None:
    hooks_for(cls).before.append(hook)


def after_initialize(cls: type, hook: Hook) -> None:
    hooks_for(cls).after.append(hook)
