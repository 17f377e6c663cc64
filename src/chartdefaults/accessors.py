"""Option accessors — one dual-mode method per declared default.

install_defaults(cls, {"width": 400}) gives cls:

    cls._width = 400            # class-level default, shadowed per instance
    chart.width()               # -> current value, no side effects
    chart.width(500)            # -> chart; sets _width, fires change:width

Constructor options matching a declared name are copied straight into the
instance field before initialize() runs, so seeding never fires change events.
"""

from __future__ import annotations

import inspect
import keyword
import logging
from typing import Any, Callable, Mapping

from chartdefaults._lifecycle import before_initialize
from chartdefaults.errors import ConfigurationError

logger = logging.getLogger("chartdefaults.accessors")

_UNSET = object()

# Instance attributes used by the library itself.
_RESERVED_FIELDS = frozenset({"_listeners", "_bound_handlers", "_bound_events"})


def field_name(option: str) -> str:
    return "_" + option


def change_event(option: str) -> str:
    return "change:" + option


def is_accessor(obj: object) -> bool:
    return getattr(obj, "__option__", None) is not None


def make_accessor(option: str) -> Callable[..., Any]:
    """Build the getter/setter method for option."""
    field = field_name(option)
    event = change_event(option)

    def accessor(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return getattr(self, field)
        setattr(self, field, value)
        self.trigger(event, value)
        return self

    accessor.__name__ = option
    accessor.__qualname__ = option
    accessor.__doc__ = (
        f"Get {option!r} with no argument; set it, fire {event!r} and return self with one."
    )
    accessor.__option__ = option
    return accessor


def _check_name(cls: type, option: object) -> None:
    if not isinstance(option, str) or not option.isidentifier() or keyword.iskeyword(option):
        raise ConfigurationError(f"{cls.__name__}: option name {option!r} is not a valid identifier")
    if field_name(option) in _RESERVED_FIELDS:
        raise ConfigurationError(f"{cls.__name__}: option name {option!r} is reserved")
    existing = inspect.getattr_static(cls, option, _UNSET)
    if existing is not _UNSET and not is_accessor(existing):
        raise ConfigurationError(
            f"{cls.__name__}: option {option!r} would replace existing attribute {existing!r}"
        )
    field = inspect.getattr_static(cls, field_name(option), _UNSET)
    if field is not _UNSET and option not in getattr(cls, "__defaults__", {}):
        raise ConfigurationError(
            f"{cls.__name__}: option {option!r} would replace existing attribute {field_name(option)!r}"
        )


def install_defaults(cls: type, defaults: Mapping[str, Any] | None) -> None:
    """Install a backing field and accessor on cls for every declared option.

    Redeclaring an option replaces its accessor and default. If any option is
    declared, constructor options are seeded before cls.initialize() runs.
    Raises ConfigurationError for unusable names; options installed before
    the bad one stay installed.
    """
    defaults = dict(defaults or {})
    if not defaults:
        return

    # Own copy, so declaring on a subclass never leaks into the parent.
    declared = dict(getattr(cls, "__defaults__", {}))
    cls.__defaults__ = declared

    for option, value in defaults.items():
        try:
            _check_name(cls, option)
        except ConfigurationError:
            logger.error("Cannot declare option %r on %s", option, cls.__name__)
            raise
        setattr(cls, field_name(option), value)
        setattr(cls, option, make_accessor(option))
        declared[option] = value

    names = frozenset(defaults)

    def _seed_options(self, options: Mapping[str, Any] | None = None, *args: Any, **kwargs: Any) -> None:
        if not options:
            return
        for key, value in options.items():
            if key in names:
                setattr(self, field_name(key), value)

    before_initialize(cls, _seed_options)
    logger.debug("Declared %d option(s) on %s: %s", len(names), cls.__name__, ", ".join(defaults))
