"""Errors raised while declaring options and events on a component class."""


class ConfigurationError(ValueError):
    """A defaults or events declaration cannot be installed.

    Raised at setup time, before any instance exists: an event handler that
    does not resolve to a method, an empty event token, or an option name
    that is not a usable attribute.
    """
