"""Pseudo-classical inheritance on top of prototype objects (source of truth).

``inherit(parent, methods=None, static_properties=None, *, plugins=None, **options)``

Constructor resolution
----------------------
- ``parent`` must be a ``Constructor``; anything else raises ``TypeError``.
- An own ``"constructor"`` entry in ``methods`` becomes the child: a
  ``Constructor`` is reused, a plain callable becomes the child's ``init``,
  other values raise ``TypeError``. The entry is consumed and never copied as
  an instance method.
- An explicit child that is ``parent`` itself or one of its ancestors raises
  ``TypeError``: the ``__super__`` chain would loop.
- Without that entry, the default-constructor factory builds the child. The
  factory is a strategy (``factory=`` option) taking the parent and returning a
  ``Constructor`` whose ``init`` forwards every argument to ``parent.init``.
  ``set_default_factory(factory)`` replaces it for every later call that
  passes no ``factory=``; ``None`` restores the mode-dependent default.
- Options other than ``statics`` and ``factory`` raise ``TypeError``.

Wiring
------
- ``child.methods = create(parent.methods)`` with ``constructor`` pointing at
  the child, then ``mixin(child.methods, methods, {"__super__": parent.methods})``.
- ``statics="inherit"`` (default) also runs ``mixin(child, parent,
  static_properties, {"__super__": parent.methods})``: the parent's own
  statics are copied, not delegated. ``statics="own"`` only copies
  ``static_properties``. Any other value raises ``ValueError``.
- The default factory follows the statics mode: ``extendable_constructor``
  (adds ``extend``) for ``"inherit"``, ``simple_constructor`` for ``"own"``.

Plugins
-------
- ``plugins`` accepts registered plugin names and/or ``BasePlugin``
  instances. Every plain function in ``methods`` becomes a ``MethodEntry``;
  ``on_register`` runs for each plugin, then ``wrap_method`` wraps the
  function, first plugin outermost. Wrapped functions carry their entry under
  ``__soak_entry__``.

Guarantees
----------
- ``parent``, ``methods`` and ``static_properties`` are only read.
- ``inherit(parent)`` alone yields an instantiable child; its instances pass
  ``isinstance(obj, parent)``.
"""

from __future__ import annotations

import logging
from types import FunctionType
from typing import Any, Callable, Dict, List, Optional

from smartseeds import SmartOptions

from soak.plugins._base_plugin import BasePlugin, MethodEntry

from .compose import create, mixin
from .constructor import CONSTRUCTOR_KEY, SUPER_KEY, Constructor
from .objects import is_delegated_from, own_items
from .registry import resolve_plugins

__all__ = [
    "inherit",
    "simple_constructor",
    "extendable_constructor",
    "Root",
    "Base",
    "ENTRY_ATTR_NAME",
    "set_default_factory",
    "get_default_factory",
]

logger = logging.getLogger("soak")

STATICS_INHERIT = "inherit"
STATICS_OWN = "own"

ENTRY_ATTR_NAME = "__soak_entry__"

_INHERIT_DEFAULTS: Dict[str, Any] = {"statics": STATICS_INHERIT, "factory": None}

_default_factory: Optional[Callable[[Constructor], Constructor]] = None


def simple_constructor(parent: Constructor) -> Constructor:
    """Return a constructor whose routine just calls the parent's routine."""

    def init(this, *args, **kwargs):
        parent.init(this, *args, **kwargs)

    return Constructor(init)


def _extend(this: Constructor, *args: Any, **kwargs: Any) -> Constructor:
    return inherit(this, *args, **kwargs)


def extendable_constructor(parent: Constructor) -> Constructor:
    """Default constructor factory with an ``extend`` static.

    ``Child.extend(methods, static_properties, **options)`` is the same as
    ``inherit(Child, methods, static_properties, **options)``::

        Base = extendable_constructor(Root)
        Child = Base.extend()
    """
    child = simple_constructor(parent)
    vars(child)["extend"] = _extend
    return child


def set_default_factory(factory: Optional[Callable[[Constructor], Constructor]]) -> None:
    """Replace the module-wide default-constructor factory.

    Every later ``inherit`` call without a ``factory=`` option (including
    ``extend``) uses it. ``None`` restores the mode-dependent default.
    """
    global _default_factory
    if factory is not None and not callable(factory):
        raise TypeError(f"Constructor factory must be callable, got {type(factory).__name__}")
    _default_factory = factory


def get_default_factory() -> Optional[Callable[[Constructor], Constructor]]:
    return _default_factory


def _resolve_child(explicit: Any) -> Constructor:
    if isinstance(explicit, Constructor):
        return explicit
    if callable(explicit):
        return Constructor(explicit)
    raise TypeError(
        f"'{CONSTRUCTOR_KEY}' entry must be callable, got {type(explicit).__name__}"
    )


def _apply_plugins(
    child: Constructor, own_methods: Dict[str, Any], plugins: List[BasePlugin]
) -> Dict[str, Any]:
    if not plugins:
        return own_methods
    wrapped = dict(own_methods)
    for name, func in own_methods.items():
        if not isinstance(func, FunctionType):
            continue
        entry = MethodEntry(name=name, func=func, constructor=child, plugins=[])
        call_next: Callable = func
        for plugin in reversed(plugins):
            plugin.on_register(child, func, entry)
            call_next = plugin.wrap_method(child, entry, call_next)
            entry.plugins.insert(0, plugin.name)
        if call_next is not func:
            setattr(call_next, ENTRY_ATTR_NAME, entry)
        wrapped[name] = call_next
    return wrapped


def inherit(
    parent: Constructor,
    methods: Any = None,
    static_properties: Any = None,
    *,
    plugins: Optional[Any] = None,
    **options: Any,
) -> Constructor:
    """Create a new constructor that inherits from ``parent``.

    Args:
        parent: Constructor to extend.
        methods: Instance methods for the child's method table. An own
            ``"constructor"`` entry is used as the child itself.
        static_properties: Statics attached to the child constructor.
        plugins: Plugin names or instances wrapping the given methods.
        options: ``statics`` (``"inherit"`` or ``"own"``) and ``factory``
            (callable building the default constructor from the parent).

    Returns:
        The new child constructor.

    Raises:
        TypeError: on a non-Constructor parent, an unknown option, a
            non-callable ``"constructor"`` entry, or a ``"constructor"`` entry
            that is ``parent`` or one of its ancestors.
        ValueError: on an unknown ``statics`` mode.
    """
    if not isinstance(parent, Constructor):
        raise TypeError(f"inherit() parent must be a Constructor, got {parent!r}")
    unknown = sorted(set(options) - set(_INHERIT_DEFAULTS))
    if unknown:
        raise TypeError(f"inherit() got unexpected option(s): {', '.join(unknown)}")
    opts = SmartOptions(options, defaults=_INHERIT_DEFAULTS)
    statics = getattr(opts, "statics", STATICS_INHERIT)
    if statics not in (STATICS_INHERIT, STATICS_OWN):
        raise ValueError(
            f"Unknown statics mode {statics!r}; expected '{STATICS_INHERIT}' or '{STATICS_OWN}'"
        )
    factory = getattr(opts, "factory", None) or _default_factory
    if factory is None:
        factory = extendable_constructor if statics == STATICS_INHERIT else simple_constructor

    own_methods = dict(own_items(methods))
    if CONSTRUCTOR_KEY in own_methods:
        child = _resolve_child(own_methods.pop(CONSTRUCTOR_KEY))
    else:
        child = factory(parent)
        if not isinstance(child, Constructor):
            raise TypeError(f"Constructor factory returned {child!r}, expected a Constructor")

    parent_methods = parent.methods
    if child is parent or is_delegated_from(parent_methods, child.methods):
        raise TypeError(f"{child!r} cannot inherit from itself or a descendant ({parent!r})")

    child.methods = create(parent_methods)
    child.methods[CONSTRUCTOR_KEY] = child
    own_methods = _apply_plugins(child, own_methods, resolve_plugins(plugins))
    mixin(child.methods, own_methods, {SUPER_KEY: parent_methods})

    if statics == STATICS_INHERIT:
        mixin(child, parent, static_properties, {SUPER_KEY: parent_methods})
    else:
        mixin(child, static_properties)

    logger.debug(
        "inherit %r -> %r (methods=%s, statics=%s)",
        parent,
        child,
        list(own_methods),
        statics,
    )
    return child


Root = Constructor()
Base = inherit(Root)
