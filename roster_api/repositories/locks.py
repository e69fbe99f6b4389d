from __future__ import annotations

import threading

_registry: dict[str, threading.RLock] = {}
_registry_lock = threading.Lock()


def lock_for(key: str) -> threading.RLock:
    """Return the process-wide lock owning the collection identified by key."""
    with _registry_lock:
        lock = _registry.get(key)
        if lock is None:
            lock = threading.RLock()
            _registry[key] = lock
        return lock
