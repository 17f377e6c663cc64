"""Declarative handler binding for option change events.

install_events(cls, {"redraw": "width height", "relayout": "debounce:data"})
subscribes, on every new instance, self.redraw to change:width and
change:height, and a debounced self.relayout to change:data.

Handlers are resolved and event specs parsed when the class is set up, so a
misspelled handler fails at declaration time rather than on the first change.
Each instance gets exactly one bound callable per handler, shared by all of
the handler's events; a debounced handler therefore has a single timer no
matter how many options feed it.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Mapping

from chartdefaults._lifecycle import after_initialize
from chartdefaults.accessors import change_event
from chartdefaults.timing import Debounced
from chartdefaults.errors import ConfigurationError

logger = logging.getLogger("chartdefaults.binder")

DEBOUNCE_PREFIX = "debounce:"

_MISSING = object()


class HandlerDescriptor:
    """A declared handler: the resolved function, its events and debounce flag."""

    __slots__ = ("name", "function", "events", "debounce")

    def __init__(self, name: str, function: Any, events: tuple[str, ...], debounce: bool) -> None:
        self.name = name
        self.function = function
        self.events = events
        self.debounce = debounce

    def bind(self, instance: object, wait: float | None = None) -> Callable[..., Any]:
        """Build the instance's callable for this handler.

        A subclass that overrides the handler method gets its override.
        """
        raw = inspect.getattr_static(type(instance), self.name, self.function)
        getter = getattr(type(raw), "__get__", None)
        bound = getter(raw, instance, type(instance)) if getter is not None else raw
        if self.debounce:
            return Debounced(bound, wait)
        return bound

    def __repr__(self) -> str:
        flag = "debounced " if self.debounce else ""
        return f"HandlerDescriptor({self.name}, {flag}on {' '.join(self.events)})"


def parse_event_spec(spec: object, *, handler: str = "?") -> tuple[tuple[str, ...], bool]:
    """Split an event spec into option names and a debounce flag.

    The flag is set when any token carries the debounce: prefix.
    """
    if not isinstance(spec, str):
        raise ConfigurationError(f"handler {handler!r}: event spec must be a string, got {spec!r}")
    tokens = spec.split()
    if not tokens:
        raise ConfigurationError(f"handler {handler!r}: event spec is empty")

    events = []
    debounced = False
    for token in tokens:
        if token[: len(DEBOUNCE_PREFIX)].lower() == DEBOUNCE_PREFIX:
            token = token[len(DEBOUNCE_PREFIX):]
            debounced = True
        if not token:
            raise ConfigurationError(f"handler {handler!r}: empty event name in {spec!r}")
        events.append(token)
    return tuple(events), debounced


def resolve_handler(cls: type, name: object) -> Any:
    """Look up the handler attribute on cls without binding it."""
    if not isinstance(name, str):
        raise ConfigurationError(f"{cls.__name__}: handler name must be a string, got {name!r}")
    raw = inspect.getattr_static(cls, name, _MISSING)
    if raw is _MISSING:
        raise ConfigurationError(f"{cls.__name__} has no handler method {name!r}")
    if not callable(getattr(cls, name)):
        raise ConfigurationError(f"{cls.__name__}.{name} is not callable")
    return raw


def build_descriptors(cls: type, events: Mapping[str, str]) -> dict[str, HandlerDescriptor]:
    descriptors: dict[str, HandlerDescriptor] = {}
    for name, spec in events.items():
        names, debounced = parse_event_spec(spec, handler=name)
        descriptors[name] = HandlerDescriptor(name, resolve_handler(cls, name), names, debounced)
    return descriptors


def install_events(cls: type, events: Mapping[str, str] | None, *, wait: float | None = None) -> None:
    """Subscribe declared handlers to change events on every new instance of cls.

    Subscription happens after cls.initialize() returns. wait is the delay,
    in seconds, for debounced handlers; None uses the chartdefaults.timing default.
    Does nothing when events is empty.
    """
    events = dict(events or {})
    if not events:
        return

    try:
        descriptors = build_descriptors(cls, events)
    except ConfigurationError:
        logger.error("Cannot bind events on %s", cls.__name__)
        raise

    def _bind_handlers(self, *args: Any, **kwargs: Any) -> None:
        bound = self.__dict__.setdefault("_bound_handlers", {})
        # Each (event, handler) pair is subscribed once per instance, across
        # every class in the hierarchy that declares the handler.
        subscribed = self.__dict__.setdefault("_bound_events", set())
        for name, descriptor in descriptors.items():
            callback = bound.get(name)
            if callback is None:
                callback = bound[name] = descriptor.bind(self, wait)
            for event in descriptor.events:
                if (event, name) in subscribed:
                    continue
                subscribed.add((event, name))
                self.on(change_event(event), callback)

    after_initialize(cls, _bind_handlers)
    logger.debug("Bound %d handler(s) on %s: %s", len(descriptors), cls.__name__,
                 ", ".join(map(repr, descriptors.values())))
