"""Optional tracing hook for core operations.

Core modules call :func:`trace` at a few fixed points (document build,
scan, cursor movement, pagination). Every event goes to the module logger
at DEBUG level; if a hook has been installed with :func:`set_trace_hook`
it is called as well, with the event name and keyword fields.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

TraceHook = Callable[..., None]

_hook: Optional[TraceHook] = None


def set_trace_hook(hook: Optional[TraceHook]) -> Optional[TraceHook]:
    """Install ``hook`` and return the previously installed one.

    Pass ``None`` to remove the current hook.
    """
    global _hook
    previous = _hook
    _hook = hook
    return previous


def get_trace_hook() -> Optional[TraceHook]:
    return _hook


def trace(event: str, **fields: Any) -> None:
    """Report ``event`` to the logger and to the installed hook, if any."""
    if logger.isEnabledFor(logging.DEBUG):
        details = ", ".join(f"{k}={v!r}" for k, v in fields.items())
        logger.debug(f"{event}: {details}")
    if _hook is not None:
        _hook(event, **fields)
