"""Two ways to keep a single shared instance."""

from __future__ import annotations

import threading
from typing import Optional


class Worker:
    """Created lazily, once, on first request."""


class Manager:
    """Created when the module loads."""


_worker: Optional[Worker] = None
_worker_lock = threading.Lock()

_manager = Manager()


def get_worker_instance() -> Worker:
    """The one Worker, created on the first call."""
    global _worker
    if _worker is None:
        with _worker_lock:
            if _worker is None:
                _worker = Worker()
    return _worker


def get_manager_instance() -> Manager:
    """The one Manager."""
    return _manager