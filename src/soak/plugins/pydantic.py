"""Pydantic validation plugin (source of truth).

Responsibilities
----------------
- At registration time (``on_register``), inspect the method's type hints and
  build a Pydantic model capturing annotated parameters. The receiver (first
  positional parameter, ``this``) is never part of the model, even when
  annotated: it is the instance the method was reached from.
- At call time (``wrap_method``), validate annotated arguments before calling
  the real method; non-annotated parameters bypass validation.
- Surface validation failures as Pydantic ``ValidationError`` with contextual
  title ``"Validation error in <entry.name>"``.

Behaviour and data
------------------
- ``on_register``: unresolvable hints or no parameter hints mean no model;
  a hint for a name missing from the signature raises ``ValueError``. The
  model ``<func.__name__>_Model`` is stored in ``entry.metadata["pydantic"]``
  as ``{"model": model, "hints": hints, "signature": sig}``.
- ``wrap_method``: passthrough when no model exists. Otherwise binds the
  incoming arguments, applies defaults, validates the annotated ones and calls
  the method with validated values merged back in.
- ``configure(enabled=True, disabled=False)``: a disabled plugin (global or
  per method) skips validation at call time.

Registers itself as ``"pydantic"`` during module import.
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, Optional, get_type_hints

from pydantic import ValidationError, create_model

from soak.core.registry import register_plugin
from soak.plugins._base_plugin import BasePlugin, MethodEntry


def _receiver_name(sig: inspect.Signature) -> Optional[str]:
    params = list(sig.parameters.values())
    if params and params[0].kind in (params[0].POSITIONAL_ONLY, params[0].POSITIONAL_OR_KEYWORD):
        return params[0].name
    return None


class PydanticPlugin(BasePlugin):
    """Validate method inputs with Pydantic using type hints."""

    plugin_code = "pydantic"

    def configure(self, enabled: bool = True, disabled: bool = False) -> None:
        pass

    def on_register(self, constructor: Any, func: Callable, entry: MethodEntry) -> None:
        try:
            hints = get_type_hints(func)
        except Exception:
            return

        sig = inspect.signature(func)
        hints.pop("return", None)
        hints.pop(_receiver_name(sig), None)
        if not hints:
            return

        fields = {}
        for param_name, hint in hints.items():
            param = sig.parameters.get(param_name)
            if param is None:
                raise ValueError(
                    f"Method '{func.__name__}' has type hint for '{param_name}' "
                    f"which is not in the function signature"
                )
            elif param.default is inspect.Parameter.empty:
                fields[param_name] = (hint, ...)
            else:
                fields[param_name] = (hint, param.default)

        entry.metadata["pydantic"] = {
            "model": create_model(f"{func.__name__}_Model", **fields),  # type: ignore
            "hints": hints,
            "signature": sig,
        }

    def wrap_method(self, constructor: Any, entry: MethodEntry, call_next: Callable):
        """Validate annotated parameters with the cached Pydantic model before calling."""
        meta = entry.metadata.get("pydantic", {})
        model = meta.get("model")
        if not model:
            return call_next

        sig = meta["signature"]
        hints = meta["hints"]

        @wraps(entry.func)
        def wrapper(*args, **kwargs):
            cfg = self.get_config(entry.name)
            if cfg.get("disabled") or not cfg.get("enabled", True):
                return call_next(*args, **kwargs)

            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            args_to_validate = {k: v for k, v in bound.arguments.items() if k in hints}
            try:
                validated = model(**args_to_validate)
            except ValidationError as exc:
                raise ValidationError.from_exception_data(
                    title=f"Validation error in {entry.name}",
                    line_errors=exc.errors(),
                ) from exc

            for key, value in validated:
                bound.arguments[key] = value
            return call_next(*bound.args, **bound.kwargs)

        return wrapper


register_plugin(PydanticPlugin)
