"""chartdefaults: generated option accessors and change-event bindings for components."""

from importlib.metadata import version as _version

__version__ = _version("chartdefaults")

from chartdefaults.errors import ConfigurationError
from chartdefaults.events import Events
from chartdefaults.component import Component
from chartdefaults.timing import Debounced, debounce, set_default_wait, set_scheduler
from chartdefaults.accessors import install_defaults
from chartdefaults.binder import HandlerDescriptor, install_events, parse_event_spec
from chartdefaults.defaults import initialize_defaults, with_defaults
# textual NOT auto-imported — opt-in only

__all__ = [
    "Component",
    "ConfigurationError",
    "Debounced",
    "Events",
    "HandlerDescriptor",
    "debounce",
    "initialize_defaults",
    "install_defaults",
    "install_events",
    "parse_event_spec",
    "set_default_wait",
    "set_scheduler",
    "with_defaults",
]
