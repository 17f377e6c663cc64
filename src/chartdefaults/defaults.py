"""initialize_defaults() — declare options and change handlers on a component class."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from chartdefaults.accessors import install_defaults
from chartdefaults.binder import install_events

C = TypeVar("C", bound=type)


def initialize_defaults(
    cls: C,
    defaults: Mapping[str, Any] | None = None,
    events: Mapping[str, str] | None = None,
    *,
    wait: float | None = None,
) -> C:
    """Install option accessors, then event bindings, on cls. Returns cls.

    Call once per class, before creating instances.

    Usage:
        class Bars(Component):
            def redraw(self, value): ...

        initialize_defaults(
            Bars,
            {"width": 400, "height": 300},
            {"redraw": "debounce:width debounce:height"},
            wait=0.05,
        )

        bars = Bars(width=800)   # seeded silently
        bars.height(250)         # fires change:height -> redraw (debounced)
    """
    install_defaults(cls, defaults)
    install_events(cls, events, wait=wait)
    return cls


def with_defaults(
    defaults: Mapping[str, Any] | None = None,
    events: Mapping[str, str] | None = None,
    *,
    wait: float | None = None,
):
    """Class decorator form of initialize_defaults().

    Usage:
        @with_defaults({"width": 400}, {"redraw": "width"})
        class Bars(Component):
            def redraw(self, value): ...
    """

    def decorator(cls: C) -> C:
        return initialize_defaults(cls, defaults, events, wait=wait)

    return decorator
