"""Trailing-edge debounce — coalesce bursts of calls into one.

Each call cancels the pending timer and schedules a fresh one with the
latest arguments. Timers are daemon threading.Timer objects; when a
scheduler is installed (see set_scheduler) the deferred call is handed to
it instead of running on the timer thread, so a host event loop can run
handlers on its own thread.

A Debounced never runs its function twice at once: a call that comes due
while the previous one is still running waits for it to finish.
"""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable

# Stands in for "after the current turn": long enough that a synchronous
# burst (chart.width(3).height(4)) always lands inside one window.
DEFAULT_WAIT = 0.01

_default_wait: float = DEFAULT_WAIT
_scheduler: Callable[[Callable[[], None]], None] | None = None


def set_default_wait(seconds: float | None) -> None:
    """Set the delay used by debounce() when no wait is given.

    None restores DEFAULT_WAIT.
    """
    global _default_wait
    if seconds is None:
        seconds = DEFAULT_WAIT
    if seconds < 0:
        raise ValueError(f"wait must be >= 0, got {seconds}")
    _default_wait = seconds


def get_default_wait() -> float:
    return _default_wait


def set_scheduler(scheduler: Callable[[Callable[[], None]], None] | None):
    """Route deferred calls through scheduler(fn) instead of the timer thread.

    Usage:
        restore = set_scheduler(app.call_from_thread)
        ...
        set_scheduler(restore)

    Returns the previously installed scheduler.
    """
    global _scheduler
    previous = _scheduler
    _scheduler = scheduler
    return previous


class Debounced:
    """Callable wrapper returned by debounce()."""

    def __init__(self, fn: Callable[..., Any], wait: float | None = None, immediate: bool = False) -> None:
        if wait is not None and wait < 0:
            raise ValueError(f"wait must be >= 0, got {wait}")
        self._fn = fn
        self._wait = wait
        self._immediate = immediate
        self._lock = threading.Lock()
        # Reentrant: fn may flush() its own wrapper.
        self._running = threading.RLock()
        self._timer: threading.Timer | None = None
        self._call: tuple[tuple, dict] | None = None
        functools.update_wrapper(self, fn)

    @property
    def wait(self) -> float:
        return _default_wait if self._wait is None else self._wait

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            call_now = self._immediate and self._timer is None
            if self._timer is not None:
                self._timer.cancel()
            self._call = (args, kwargs)
            t = threading.Timer(self.wait, self._expire)
            t.daemon = True
            self._timer = t
            t.start()
        if call_now:
            self._run(args, kwargs)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._call = None

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        call = self._take(None)
        if call is not None:
            self._run(*call)

    def _take(self, timer: threading.Timer | None) -> tuple[tuple, dict] | None:
        """Claim the pending call. A timer may only claim its own call."""
        with self._lock:
            if self._timer is None or (timer is not None and timer is not self._timer):
                return None
            self._timer.cancel()
            call, self._call, self._timer = self._call, None, None
            return call

    def _run(self, args: tuple, kwargs: dict) -> None:
        with self._running:
            self._fn(*args, **kwargs)

    def _expire(self) -> None:
        call = self._take(threading.current_thread())
        if call is None:
            return
        args, kwargs = call
        if _scheduler is not None:
            _scheduler(lambda: self._run(args, kwargs))
        else:
            self._run(args, kwargs)

    def __repr__(self) -> str:
        state = "pending" if self.pending else "idle"
        name = getattr(self._fn, "__name__", repr(self._fn))
        return f"Debounced({name}, wait={self.wait}, {state})"


def debounce(fn: Callable[..., Any] | None = None, wait: float | None = None, immediate: bool = False):
    """Debounce fn: run it once, wait seconds after the last call in a burst.

    With immediate=True, a call that arrives while nothing is pending also
    runs fn synchronously; the trailing call still fires.

    Usable directly or as a decorator:
        resize = debounce(redraw, 0.05)

        @debounce(wait=0.05)
        def redraw(): ...
    """
    if fn is None:
        return lambda f: Debounced(f, wait, immediate)
    return Debounced(fn, wait, immediate)
