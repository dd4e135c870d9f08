"""Plugin contract for the method pipeline of ``inherit``.

``MethodEntry``
    Dataclass describing one plain function passed to ``inherit``: ``name``
    (key in the method table), ``func`` (the original function),
    ``constructor`` (the child being built), ``plugins`` (names applied, first
    is outermost) and ``metadata`` (free-form dict for plugin annotations).

``BasePlugin(name=None, *, method_config=None, **config)``
    - ``configure(**config)`` declares the accepted settings through its
      signature. A subclass defining its own ``configure`` gets it wrapped by
      ``__init_subclass__``: ``flags`` strings (``"before:off,print"``) are
      parsed into booleans, values are validated and coerced with Pydantic's
      ``validate_call`` (unknown keys raise ``ValidationError``), and the
      coerced values are stored under ``_target``: ``"--base--"`` for the
      plugin-wide config, a method name, or ``"m1,m2"`` for several methods.
    - ``__init__`` config, ``set_config`` and ``set_method_config`` all go
      through ``configure``. ``get_config(method_name)`` returns the plugin
      config overlaid with that method's own settings.
    - ``on_register(constructor, func, entry)`` runs once per method while
      the child is built; ``wrap_method(constructor, entry, call_next)``
      returns the callable stored in the method table. Defaults are a no-op
      and a passthrough.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

from pydantic import validate_call

__all__ = ["BasePlugin", "MethodEntry"]

BASE_TARGET = "--base--"


@dataclass
class MethodEntry:
    """Metadata for an instance method passed to ``inherit``."""

    name: str
    func: Callable
    constructor: Any
    plugins: List[str]
    metadata: Dict[str, Any] = field(default_factory=dict)


def _wrap_configure(original_configure: Callable) -> Callable:
    """Wrap a plugin's configure() to parse flags, validate, coerce and store."""
    signature = inspect.signature(original_configure)

    @wraps(original_configure)
    def collect(*args: Any, **kwargs: Any) -> Dict[str, Any]:
        original_configure(*args, **kwargs)
        arguments = signature.bind(*args, **kwargs).arguments
        arguments.pop(next(iter(signature.parameters)), None)
        return dict(arguments)

    validated = validate_call(collect)

    def wrapper(
        self: "BasePlugin", *, _target: str = BASE_TARGET, flags: Optional[str] = None, **kwargs: Any
    ) -> None:
        if flags:
            kwargs.update(self._parse_flags(flags))

        if "," in _target:
            for target in [t.strip() for t in _target.split(",") if t.strip()]:
                wrapper(self, _target=target, **kwargs)
            return

        coerced = validated(self, **kwargs)
        self._write_config(_target, {key: coerced[key] for key in kwargs})

    wrapper.__doc__ = original_configure.__doc__
    return wrapper


class BasePlugin:
    """Hook interface + configuration helpers for method plugins."""

    plugin_code: str = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "configure" in cls.__dict__:
            cls.configure = _wrap_configure(cls.__dict__["configure"])

    def __init__(
        self,
        name: Optional[str] = None,
        *,
        method_config: Optional[Dict[str, Dict[str, Any]]] = None,
        **config: Any,
    ):
        self.name = name or self.plugin_code or self.__class__.__name__.lower()
        self._store: Dict[str, Dict[str, Any]] = {BASE_TARGET: {"enabled": True}}
        self.configure(**config)
        for method_name, settings in (method_config or {}).items():
            self.configure(_target=method_name, **settings)

    def configure(self, *, _target: str = BASE_TARGET, flags: Optional[str] = None) -> None:
        """Accept only ``flags``; subclasses declare their own settings."""
        if flags:
            self._write_config(_target, self._parse_flags(flags))

    def set_config(self, **config: Any) -> None:
        self.configure(**config)

    def set_method_config(self, method_name: str, **config: Any) -> None:
        self.configure(_target=method_name, **config)

    def get_config(self, method_name: Optional[str] = None) -> Dict[str, Any]:
        merged = dict(self._store[BASE_TARGET])
        if method_name and method_name != BASE_TARGET:
            merged.update(self._store.get(method_name, {}))
        return merged

    def _write_config(self, target: str, config: Dict[str, Any]) -> None:
        if config:
            self._store.setdefault(target, {}).update(config)

    def _parse_flags(self, flags: str) -> Dict[str, bool]:
        mapping: Dict[str, bool] = {}
        for chunk in flags.split(","):
            chunk = chunk.strip()
            if not chunk:
                continue
            if ":" in chunk:
                name, value = chunk.split(":", 1)
                mapping[name.strip()] = value.strip().lower() != "off"
            else:
                mapping[chunk] = True
        return mapping

    def on_register(
        self, constructor: Any, func: Callable, entry: MethodEntry
    ) -> None:  # pragma: no cover - default no-op
        """Hook run when the method is attached to a constructor."""

    def wrap_method(
        self,
        constructor: Any,
        entry: MethodEntry,
        call_next: Callable,
    ) -> Callable:
        """Wrap method invocation; default passthrough."""
        return call_next
