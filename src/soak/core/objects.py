"""Prototype-linked containers (source of truth).

The module exposes :class:`ProtoObject` plus the free functions that inspect
it. Helpers are plain functions on purpose: any attribute defined on the class
would shadow an entry of the same name stored on a container.

ProtoObject
-----------
- Own entries live in ``__dict__``; ``vars(obj)`` lists them and nothing else.
- The ``__proto__`` slot links to the fallback container: another
  ``ProtoObject``, any ``Mapping`` (end of the chain), or ``None``.
- Attribute reads resolve own entries first, then walk the chain. Plain
  functions come back bound to the receiver, so ``obj.method()`` passes
  ``obj`` as first argument wherever ``method`` was found.
- Item reads walk the same chain but return raw values. Misses raise
  ``KeyError`` (items) or ``AttributeError`` (attributes).
- Writes and deletes only touch own entries. ``__proto__`` writes go through
  :func:`set_proto`, which rejects cycles and non-containers with
  ``TypeError``.
- ``key in obj`` follows the chain; use :func:`has_own` for own entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import FunctionType, MethodType
from typing import Any, Iterator, List, Tuple

__all__ = [
    "PROTO_KEY",
    "ProtoObject",
    "get_proto",
    "set_proto",
    "has_own",
    "own_keys",
    "own_items",
    "lookup",
    "is_container",
    "is_delegated_from",
]

PROTO_KEY = "__proto__"

_MISSING = object()


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _bind(value: Any, receiver: Any) -> Any:
    if isinstance(value, FunctionType):
        return MethodType(value, receiver)
    return value


def _proto_of(obj: Any) -> Any:
    try:
        return object.__getattribute__(obj, PROTO_KEY)
    except AttributeError:
        return None


def _chain_lookup(node: Any, key: str) -> Any:
    while node is not None:
        if isinstance(node, ProtoObject):
            own = object.__getattribute__(node, "__dict__")
            if key in own:
                return own[key]
            node = _proto_of(node)
        else:
            return node[key]
    raise KeyError(key)


class ProtoObject:
    """Container whose missing lookups fall back to a prototype container."""

    __slots__ = ("__dict__", "__proto__", "__weakref__")

    def __init__(self, entries: Any = None, proto: Any = None) -> None:
        object.__setattr__(self, PROTO_KEY, None)
        if proto is not None:
            set_proto(self, proto)
        object.__getattribute__(self, "__dict__").update(own_items(entries))

    def __getattribute__(self, name: str) -> Any:
        if not _is_dunder(name):
            own = object.__getattribute__(self, "__dict__")
            if name in own:
                return _bind(own[name], self)
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        try:
            value = _chain_lookup(_proto_of(self), name)
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None
        return _bind(value, self)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == PROTO_KEY:
            set_proto(self, value)
            return
        object.__getattribute__(self, "__dict__")[name] = value

    def __getitem__(self, key: str) -> Any:
        own = object.__getattribute__(self, "__dict__")
        if key in own:
            return own[key]
        return _chain_lookup(_proto_of(self), key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.__setattr__(key, value)

    def __delitem__(self, key: str) -> None:
        del object.__getattribute__(self, "__dict__")[key]

    def __contains__(self, key: object) -> bool:
        try:
            self[key]  # type: ignore[index]
        except KeyError:
            return False
        return True

    def __repr__(self) -> str:
        own = object.__getattribute__(self, "__dict__")
        return f"{type(self).__name__}({own!r})"


def is_container(value: Any) -> bool:
    """Return True for values usable as prototypes (``ProtoObject`` or ``Mapping``)."""
    return isinstance(value, (ProtoObject, Mapping))


def get_proto(obj: Any) -> Any:
    """Return the prototype of ``obj`` (``None`` for non-``ProtoObject`` values)."""
    if isinstance(obj, ProtoObject):
        return _proto_of(obj)
    return None


def set_proto(obj: ProtoObject, proto: Any) -> ProtoObject:
    """Relink ``obj`` to ``proto``.

    Raises:
        TypeError: when ``proto`` is not a container or the link would make
            ``obj`` reachable from its own prototype chain.
    """
    if proto is not None and not is_container(proto):
        raise TypeError(
            f"Prototype must be a container or None, got {type(proto).__name__}"
        )
    node = proto
    while isinstance(node, ProtoObject):
        if node is obj:
            raise TypeError("Cyclic __proto__ value")
        node = _proto_of(node)
    object.__setattr__(obj, PROTO_KEY, proto)
    return obj


def has_own(obj: Any, key: str) -> bool:
    if isinstance(obj, Mapping):
        return key in obj
    try:
        return key in object.__getattribute__(obj, "__dict__")
    except AttributeError:
        return False


def own_items(source: Any) -> List[Tuple[str, Any]]:
    """Return a snapshot of the own entries of ``source``.

    ``None`` and values without entries (numbers, strings...) yield nothing.
    Mappings contribute their items; objects with a ``__dict__`` contribute
    their instance attributes.
    """
    if source is None:
        return []
    if isinstance(source, Mapping):
        return list(source.items())
    try:
        own = object.__getattribute__(source, "__dict__")
    except AttributeError:
        return []
    return list(own.items())


def own_keys(obj: Any) -> List[str]:
    return [key for key, _ in own_items(obj)]


def lookup(obj: Any, key: str, default: Any = _MISSING) -> Any:
    """Read ``key`` through the prototype chain of ``obj`` without binding."""
    if not is_container(obj):
        raise TypeError(f"lookup() requires a container, got {type(obj).__name__}")
    try:
        return obj[key]
    except KeyError:
        if default is _MISSING:
            raise
        return default


def _iter_chain(obj: Any) -> Iterator[Any]:
    node = get_proto(obj)
    while node is not None:
        yield node
        node = get_proto(node)


def is_delegated_from(obj: Any, methods: Any) -> bool:
    """Return True when ``methods`` sits on the prototype chain of ``obj``."""
    return any(node is methods for node in _iter_chain(obj))
