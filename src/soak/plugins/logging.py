"""Logging plugin (source of truth).

Responsibilities
----------------
- Wrap each method call and emit configurable messages:
  * ``before`` (default True): ``"{entry.name} start"``
  * ``after`` (default True): ``"{entry.name} end (<ms> ms)"`` with elapsed time
    in milliseconds and ``{elapsed:.2f}`` formatting.
- Sinks:
  * when ``print`` is true → always ``print(message)``;
  * else when ``log`` is true → ``logger.info(message)`` if the logger reports
    handlers via ``hasHandlers()``, otherwise ``print(message)`` to avoid drops;
  * else → no output.
- ``enabled`` gates the plugin entirely (default True).
- Use a provided ``logging.Logger`` (default ``logging.getLogger("soak")``).

Configuration
-------------
``configure`` declares the accepted keys (``enabled``, ``before``, ``after``,
``log``, ``print``), all booleans. Strings such as ``"off"`` or ``"no"`` are
coerced, unknown keys raise ``pydantic.ValidationError``. Values are read at
call time, so ``set_config``/``set_method_config`` apply to constructors
already built.

Exceptions raised by the method propagate; the end message is skipped.

At import the plugin registers itself as ``"logging"``.
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional

from soak.core.registry import register_plugin
from soak.plugins._base_plugin import BasePlugin, MethodEntry

_DEFAULTS = {"enabled": True, "before": True, "after": True, "log": True, "print": False}


class LoggingPlugin(BasePlugin):
    """Logs method calls with timing."""

    plugin_code = "logging"

    def __init__(
        self, name: Optional[str] = None, *, logger: Optional[logging.Logger] = None, **cfg: Any
    ):
        self._logger = logger or logging.getLogger("soak")
        super().__init__(name or "logger", **cfg)

    def configure(
        self,
        enabled: bool = True,
        before: bool = True,
        after: bool = True,
        log: bool = True,
        print: bool = False,
    ) -> None:
        pass

    def _emit(self, message: str, cfg: dict) -> None:
        if cfg["print"]:
            print(message)
        elif cfg["log"]:
            if self._logger.hasHandlers():
                self._logger.info(message)
            else:
                print(message)

    def wrap_method(self, constructor, entry: MethodEntry, call_next: Callable):
        """Wrap method with start/end logging and timing."""

        @wraps(entry.func)
        def logged(*args, **kwargs):
            cfg = _DEFAULTS | self.get_config(entry.name)
            if not cfg["enabled"]:
                return call_next(*args, **kwargs)
            if cfg["before"]:
                self._emit(f"{entry.name} start", cfg)
            t0 = time.perf_counter()
            result = call_next(*args, **kwargs)
            elapsed = (time.perf_counter() - t0) * 1000
            if cfg["after"]:
                self._emit(f"{entry.name} end ({elapsed:.2f} ms)", cfg)
            return result

        return logged


register_plugin(LoggingPlugin)
