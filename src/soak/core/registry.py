"""Global method-plugin registry.

``register_plugin(plugin_class, name=None)`` validates that ``plugin_class``
is a ``BasePlugin`` subclass carrying a ``plugin_code``. Without ``name`` a
second, different class under the same code is rejected; an explicit
``name`` replaces any previous registration. Re-registering the same class is
idempotent. ``available_plugins`` returns a shallow copy of the registry.

``resolve_plugins(specs)`` turns the ``plugins=`` argument of ``inherit`` into
plugin instances: names are instantiated from the registry, instances pass
through unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Type

from soak.plugins._base_plugin import BasePlugin

__all__ = ["register_plugin", "available_plugins", "resolve_plugins"]

_PLUGIN_REGISTRY: Dict[str, Type[BasePlugin]] = {}


def register_plugin(plugin_class: Type[BasePlugin], name: Optional[str] = None) -> None:
    """Register a plugin class globally.

    Args:
        plugin_class: A BasePlugin subclass with plugin_code defined
        name: Optional override name. If provided, overwrites any existing
              registration. If not provided, uses plugin_code and raises
              if already registered.
    """
    if not isinstance(plugin_class, type) or not issubclass(plugin_class, BasePlugin):
        raise TypeError("plugin_class must be a BasePlugin subclass")
    if not getattr(plugin_class, "plugin_code", None):
        raise ValueError(
            f"Plugin {plugin_class.__name__} not following standards: missing plugin_code"
        )
    code = name or plugin_class.plugin_code
    if name is None:
        existing = _PLUGIN_REGISTRY.get(code)
        if existing is not None and existing is not plugin_class:
            raise ValueError(f"Plugin '{code}' already registered")
    _PLUGIN_REGISTRY[code] = plugin_class


def available_plugins() -> Dict[str, Type[BasePlugin]]:
    return dict(_PLUGIN_REGISTRY)


def resolve_plugins(specs: Optional[Iterable[Any]]) -> List[BasePlugin]:
    if specs is None:
        return []
    if isinstance(specs, (str, BasePlugin)):
        specs = [specs]
    resolved: List[BasePlugin] = []
    for spec in specs:
        if isinstance(spec, BasePlugin):
            resolved.append(spec)
            continue
        if not isinstance(spec, str):
            raise TypeError(f"Unsupported plugin spec: {spec!r}")
        plugin_class = _PLUGIN_REGISTRY.get(spec)
        if plugin_class is None:
            available = ", ".join(sorted(_PLUGIN_REGISTRY)) or "none"
            raise ValueError(f"Unknown plugin '{spec}'. Available plugins: {available}")
        resolved.append(plugin_class())
    return resolved
