"""soak public API surface.

- Public exports: ``mixin``, ``create``, ``inherit``, ``Constructor``,
  ``ProtoObject``, the ``Root``/``Base`` constructors, the container helpers
  and the plugin registry functions.
- Built-in plugins (``logging``, ``pydantic``) are imported for their side
  effect of registering themselves. Imports are done lazily via
  ``import_module`` to avoid cycles.
- ``__version__`` lives here for packaging tools.
"""

from importlib import import_module

__version__ = "0.3.0"

from .core import (
    Base,
    Constructor,
    ProtoObject,
    Root,
    available_plugins,
    create,
    extendable_constructor,
    get_default_factory,
    get_proto,
    has_own,
    inherit,
    is_container,
    is_delegated_from,
    lookup,
    mixin,
    own_items,
    own_keys,
    register_plugin,
    set_default_factory,
    set_proto,
    simple_constructor,
)

# Import plugins to trigger auto-registration (lazy to avoid cycles)
for _plugin in ("logging", "pydantic"):
    import_module(f"{__name__}.plugins.{_plugin}")
del _plugin

__all__ = [
    "mixin",
    "create",
    "inherit",
    "Constructor",
    "ProtoObject",
    "Root",
    "Base",
    "simple_constructor",
    "extendable_constructor",
    "set_default_factory",
    "get_default_factory",
    "register_plugin",
    "available_plugins",
    "get_proto",
    "set_proto",
    "has_own",
    "own_keys",
    "own_items",
    "lookup",
    "is_container",
    "is_delegated_from",
]
