"""Constructor abstraction: a construction routine paired with a method table.

``Constructor(init=None, methods=None)``

- ``init(this, *args, **kwargs)`` populates a fresh instance; ``None`` means a
  routine that does nothing. ``Constructor`` doubles as a decorator::

      @Constructor
      def Point(this, x=0, y=0):
          this.x = x
          this.y = y

- ``methods`` is the shared ``ProtoObject`` every instance delegates to. The
  optional mapping passed at construction seeds it; its ``constructor`` entry
  always points back at the constructor.
- Calling the constructor builds ``create(self.methods)``, runs ``init`` on it
  and returns it. An ``init`` returning a ``ProtoObject`` replaces the
  instance, as with constructors that return an object.
- Statics live in the instance ``__dict__``; functions read as attributes are
  bound to the constructor. ``init`` and ``methods`` are slots and are never
  part of the statics.
- ``isinstance(obj, constructor)`` checks that ``constructor.methods`` sits on
  the prototype chain of ``obj``.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from .compose import create
from .objects import ProtoObject, _bind, _is_dunder, is_delegated_from

__all__ = ["Constructor", "CONSTRUCTOR_KEY", "SUPER_KEY"]

CONSTRUCTOR_KEY = "constructor"
SUPER_KEY = "__super__"

_RESERVED = frozenset({"init", "methods"})


def _noop(this, *args, **kwargs) -> None:
    return None


class Constructor:
    """Callable standing in for a class in the prototype object model."""

    __slots__ = ("__dict__", "init", "methods")

    def __init__(
        self, init: Optional[Callable] = None, methods: Optional[Mapping] = None
    ) -> None:
        if init is not None and not callable(init):
            raise TypeError(f"Constructor init must be callable, got {type(init).__name__}")
        self.init = init or _noop
        self.methods = ProtoObject(methods)
        self.methods[CONSTRUCTOR_KEY] = self

    def __getattribute__(self, name: str) -> Any:
        if name not in _RESERVED and not _is_dunder(name):
            own = object.__getattribute__(self, "__dict__")
            if name in own:
                return _bind(own[name], self)
        return object.__getattribute__(self, name)

    def __call__(self, *args: Any, **kwargs: Any) -> ProtoObject:
        instance = create(self.methods)
        result = self.init(instance, *args, **kwargs)
        if isinstance(result, ProtoObject):
            return result
        return instance

    def __instancecheck__(self, instance: Any) -> bool:
        return is_delegated_from(instance, self.methods)

    def __repr__(self) -> str:
        name = getattr(self.init, "__name__", None)
        if not name or self.init is _noop:
            name = "anonymous"
        return f"<Constructor {name!r}>"
