"""One-time initialization hooks.

Libraries that need to prepare process state before the first schema is
derived (registering descriptor overrides, loading plugins, ...) register an
initializer here. :func:`json_schema` calls :func:`ensure_initialized` before
describing a type, so every registered initializer runs once, in
registration order, before the first derivation.

Example:
    >>> @register_initializer
    ... def load_plugins() -> None:
    ...     ...
    >>> ensure_initialized()  # runs load_plugins
    >>> ensure_initialized()  # no-op
"""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

logger = structlog.get_logger(__name__)

Initializer = Callable[[], None]

_lock = threading.RLock()
_initializers: list[Initializer] = []
_completed = 0
_running = False


def register_initializer(fn: Initializer) -> Initializer:
    """Register ``fn`` to run once before the next derivation.

    Can be used as a decorator. Registering the same function twice has no
    effect.
    """
    with _lock:
        if fn not in _initializers:
            _initializers.append(fn)
    return fn


def ensure_initialized() -> None:
    """Run every registered initializer that has not run yet.

    Initializers run under a process-wide lock, so concurrent callers wait
    for the first one to finish. If an initializer raises, the exception
    propagates and that initializer (and those after it) run again on the
    next call.

    A call made from inside a running initializer returns immediately.
    """
    global _completed, _running
    if _completed == len(_initializers):
        return

    with _lock:
        if _running:
            return
        _running = True
        try:
            while _completed < len(_initializers):
                fn = _initializers[_completed]
                logger.debug("initializer_run", initializer=getattr(fn, "__qualname__", repr(fn)))
                fn()
                _completed += 1
        finally:
            _running = False


def is_initialized() -> bool:
    """Return True when every registered initializer has run."""
    return _completed == len(_initializers)


def reset_initializers() -> None:
    """Forget all initializers and their state. Intended for tests."""
    global _completed, _running
    with _lock:
        _initializers.clear()
        _completed = 0
        _running = False
