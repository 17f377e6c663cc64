"""Named synchronous events for component instances.

Minimal host event primitives: subscribe with on(), announce with trigger().
Subscribers run synchronously, in subscription order, inside the trigger()
call. on() returns a disposer that removes the subscription.
"""

from __future__ import annotations

from typing import Any, Callable

Disposer = Callable[[], None]


class Events:
    """Mixin providing on/off/trigger over a per-instance subscriber table."""

    _listeners: dict[str, list[Callable[..., Any]]]

    def _subscribers(self) -> dict[str, list[Callable[..., Any]]]:
        try:
            return self.__dict__["_listeners"]
        except KeyError:
            listeners = self.__dict__["_listeners"] = {}
            return listeners

    def on(self, event: str, callback: Callable[..., Any]) -> Disposer:
        """Register callback for event. Returns a function that removes it."""
        self._subscribers().setdefault(event, []).append(callback)

        def _unsubscribe() -> None:
            self.off(event, callback)

        return _unsubscribe

    def off(self, event: str | None = None, callback: Callable[..., Any] | None = None) -> None:
        """Remove subscriptions.

        off() clears everything, off(event) clears one event,
        off(event, callback) removes one registration. Removing a callback
        that is not registered is a no-op.
        """
        listeners = self._subscribers()
        if event is None:
            listeners.clear()
            return
        if callback is None:
            listeners.pop(event, None)
            return
        callbacks = listeners.get(event)
        if not callbacks:
            return
        try:
            callbacks.remove(callback)
        except ValueError:
            pass  # already removed
        if not callbacks:
            del listeners[event]

    def trigger(self, event: str, *args: Any) -> None:
        """Call every subscriber of event with args."""
        # Snapshot — callbacks may subscribe or unsubscribe while running.
        for cb in list(self._subscribers().get(event, ())):
            cb(*args)

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._subscribers().get(event, ()))
