# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Closable FIFO conduit between pipeline stages."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_CLOSED = object()


class QueueClosed(Exception):
    """Raised by `get` once the queue is closed and drained, and by `put` after close."""


class ClosableQueue(Generic[T]):
    """
    Unbounded (by default) FIFO queue with an end-of-stream marker.

    Closing enqueues a marker behind the remaining items. A consumer that reaches the
    marker puts it back, so every consumer of a multi-consumer queue sees the close.
    """

    def __init__(self, maxsize: int = 0):
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: T) -> None:
        with self._lock:
            if self._closed:
                raise QueueClosed("put on closed queue")
        self._queue.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._queue.put(_CLOSED)

    def get(self) -> T:
        item = self._queue.get()
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise QueueClosed("queue closed")
        return item

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except QueueClosed:
                return


__all__ = ["ClosableQueue", "QueueClosed"]
