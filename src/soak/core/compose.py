"""Property copying and prototype creation (source of truth).

``mixin(target, *sources)``

- Copies every own entry of each source onto ``target``, in argument order;
  later sources win on key collisions. Sources are read through
  :func:`~soak.core.objects.own_items`, so ``None`` is skipped and inherited
  (prototype) entries are never copied.
- Entries land on ``target`` according to its kind: item assignment for
  ``ProtoObject`` and mutable mappings, ``__dict__`` for ``Constructor``
  statics (slots stay untouched), ``setattr`` for other objects.
- Targets without storage (numbers, strings, tuples, ``None``) raise
  ``TypeError``. Returns ``target`` itself.

``create(proto)``

- Returns a brand new ``ProtoObject`` without own entries. When ``proto`` is
  a container the result delegates to it; otherwise the result has no
  prototype at all. Never raises, never returns ``proto``.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from smartseeds.typeutils import safe_is_instance

from .objects import ProtoObject, is_container, own_items

__all__ = ["mixin", "create"]

CONSTRUCTOR_CLASS_PATH = "soak.core.constructor.Constructor"


def _assign(target: Any, key: str, value: Any) -> None:
    if isinstance(target, (ProtoObject, MutableMapping)):
        target[key] = value
    elif safe_is_instance(target, CONSTRUCTOR_CLASS_PATH):
        vars(target)[key] = value
    else:
        setattr(target, key, value)


def mixin(target: Any, *sources: Any) -> Any:
    """Extend ``target`` with the own entries of every source.

    Example::

        mixin({"type": "person"}, {"name": "bill", "age": 20}, {"age": 21})
        # {"type": "person", "name": "bill", "age": 21}

    Raises:
        TypeError: if ``target`` cannot hold entries.
    """
    if not isinstance(target, (ProtoObject, MutableMapping)) and not hasattr(
        target, "__dict__"
    ):
        raise TypeError(
            f"mixin() target must be a container, got {type(target).__name__}"
        )
    for source in sources:
        for key, value in own_items(source):
            _assign(target, key, value)
    return target


def create(proto: Any) -> ProtoObject:
    """Return a new object whose prototype is ``proto``.

    Example::

        apple = {"color": "green"}
        instance = create(apple)
        instance.color  # "green"
        has_own(instance, "color")  # False
    """
    if not is_container(proto):
        return ProtoObject()
    return ProtoObject(proto=proto)
