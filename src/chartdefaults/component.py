"""Component — the host class option accessors and event handlers attach to.

A Component calls initialize(options) once from its constructor. Declared
defaults and events (see initialize_defaults) hook into that call, so
subclasses put their own setup in initialize() and never need to call the
hooks themselves.
"""

from __future__ import annotations

from typing import Any, Mapping

from chartdefaults.events import Events


class Component(Events):
    """Base component with synchronous events and an initialize() hook."""

    # name -> default, filled in by install_defaults()
    __defaults__: Mapping[str, Any] = {}

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        merged = dict(options or {})
        merged.update(kwargs)
        self.initialize(merged)

    def initialize(self, options: Mapping[str, Any]) -> None:
        """Override to set up the instance. Declared options are already seeded."""

    def get(self, name: str) -> Any:
        """Read a declared option by name."""
        return self._accessor(name)()

    def set(self, name: str, value: Any) -> Component:
        """Write a declared option by name. Fires change:<name>."""
        return self._accessor(name)(value)

    def _accessor(self, name: str):
        if name not in type(self).__defaults__:
            raise KeyError(f"{type(self).__name__} has no option {name!r}")
        return getattr(self, name)

    def dispose(self) -> None:
        """Cancel pending debounced handlers and drop every subscription."""
        for handler in self.__dict__.pop("_bound_handlers", {}).values():
            cancel = getattr(handler, "cancel", None)
            if cancel is not None:
                cancel()
        self.__dict__.pop("_bound_events", None)
        self.off()
