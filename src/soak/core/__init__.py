"""Core runtime aggregator.

Expose the object-model building blocks from a single module: containers
(``objects``), ``mixin``/``create`` (``compose``), ``Constructor``
(``constructor``), ``inherit`` and its factories (``inherit``) and the plugin
registry (``registry``). Importing this module performs only imports; it does
not load concrete plugins.
"""

from .compose import create, mixin
from .constructor import CONSTRUCTOR_KEY, SUPER_KEY, Constructor
from .inherit import (
    ENTRY_ATTR_NAME,
    Base,
    Root,
    extendable_constructor,
    get_default_factory,
    inherit,
    set_default_factory,
    simple_constructor,
)
from .objects import (
    PROTO_KEY,
    ProtoObject,
    get_proto,
    has_own,
    is_container,
    is_delegated_from,
    lookup,
    own_items,
    own_keys,
    set_proto,
)
from .registry import available_plugins, register_plugin

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
    "CONSTRUCTOR_KEY",
    "SUPER_KEY",
    "PROTO_KEY",
    "ENTRY_ATTR_NAME",
]
