"""An object pool of doctors."""

from __future__ import annotations

import queue
from dataclasses import dataclass


@dataclass
class Doctor:
    """A pooled doctor; ``kind`` is the department, 1 internal, 2 surgical."""

    name: str
    kind: int = 0

    def surgery(self, someone: str) -> str:
        text = f"doctor: {self.name} do surgery for {someone}"
        print(text)
        return text


def new_pool(total: int) -> "queue.Queue[Doctor]":
    """A pool holding ``total`` doctors, taken and returned in FIFO order."""
    if total < 0:
        raise ValueError("total must not be negative")
    pool: "queue.Queue[Doctor]" = queue.Queue(maxsize=total)
    for number in range(total):
        pool.put_nowait(Doctor(name=f"doctor: {number}"))
    return pool