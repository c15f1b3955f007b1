"""Fan-in: merging several streams into one."""

from __future__ import annotations

import queue
import threading
from typing import Any, Iterable, Iterator

_ITEM = "item"
_DONE = "done"
_ERROR = "error"


def generate_numbers(numbers: Iterable[int]) -> Iterator[int]:
    """Yield the given numbers one by one."""
    for number in numbers:
        yield number


def square_numbers(source: Iterable[int]) -> Iterator[int]:
    """Yield the square of each number from ``source``."""
    for number in source:
        yield number * number


def _put(out: "queue.Queue[tuple[str, Any]]", message: tuple[str, Any], stop: threading.Event) -> bool:
    while not stop.is_set():
        try:
            out.put(message, timeout=0.05)
            return True
        except queue.Full:
            continue
    return False


def merge(*args: Iterable[Any]) -> Iterator[Any]:
    """Read every source concurrently and yield values as they arrive.

    Order within one source is kept; order across sources is not. An
    exception raised by a source is raised here.
    """
    out: "queue.Queue[tuple[str, Any]]" = queue.Queue(maxsize=3)
    stop = threading.Event()

    def pump(source: Iterable[Any]) -> None:
        try:
            for item in source:
                if not _put(out, (_ITEM, item), stop):
                    return
        except Exception as exc:
            _put(out, (_ERROR, exc), stop)
            return
        _put(out, (_DONE, None), stop)

    for source in args:
        threading.Thread(target=pump, args=(source,), daemon=True).start()

    remaining = len(args)
    try:
        while remaining:
            kind, value = out.get()
            if kind == _ITEM:
                yield value
            elif kind == _ERROR:
                raise value
            else:
                remaining -= 1
    finally:
        stop.set()