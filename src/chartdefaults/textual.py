"""Textual integration for chartdefaults. Opt-in — requires textual.

Debounced handlers fire on a timer thread. use_app() routes those deferred
calls onto the app's thread through call_from_thread, drops them while the
app is not running, and ignores NoMatches from handlers whose widgets are
already gone.
"""

import logging
import threading

from textual.css.query import NoMatches

from chartdefaults.timing import set_scheduler

logger = logging.getLogger("chartdefaults.textual")


def use_app(app):
    """Deliver debounced handler calls on app's thread.

    Returns a function that restores the previously installed scheduler.
    """
    _main = threading.get_ident()

    def _schedule(fn):
        if not app.is_running:
            logger.debug("App not running, dropping deferred call %r", fn)
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe, fn)
        else:
            _safe(fn)

    def _safe(fn):
        try:
            fn()
        except NoMatches:
            pass

    previous = set_scheduler(_schedule)

    def _restore():
        set_scheduler(previous)

    return _restore
