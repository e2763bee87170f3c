# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pipeline stages: hostname producer, probe workers and output writers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from contextlib import suppress
from enum import Enum
from typing import IO

from ..errors import ProbeError, SourceReadError
from ..http.client import HttpClient
from ..http.url import expand_hostname, normalize_hostname
from ..models import ProbeResult
from .conduit import ClosableQueue
from .prober import probe
from .sources import HostSource

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], HttpClient]


class DiagnosticWriter:
    """Serialises diagnostic lines from many workers onto one stream."""

    def __init__(self, stream: IO[str]):
        self._stream = stream
        self._lock = threading.Lock()
        self.count = 0

    def write(self, message: str) -> None:
        line = str(message).replace("\n", " ").rstrip()
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()
            self.count += 1


class HostnameProducer(threading.Thread):
    """Expands each hostname of a source into one candidate URL per scheme.

    The work queue is closed on every exit path so workers never wait forever.
    """

    def __init__(
        self,
        source: HostSource,
        work: ClosableQueue[str],
        schemes: Sequence[str],
        diagnostics: DiagnosticWriter,
    ):
        super().__init__(name="hopscan-producer", daemon=True)
        self.source = source
        self.work = work
        self.schemes = tuple(schemes)
        self.diagnostics = diagnostics
        self.produced = 0
        self.error: SourceReadError | None = None

    def run(self) -> None:
        try:
            with self.source.open() as lines:
                for line in lines:
                    host = normalize_hostname(line)
                    if not host:
                        continue
                    for url in expand_hostname(host, self.schemes):
                        self.work.put(url)
                        self.produced += 1
        except (OSError, UnicodeDecodeError) as exc:
            self.error = SourceReadError(self.source.label, exc)
            logger.warning("Cannot read hostnames from %s: %s", self.source.label, exc)
            self.diagnostics.write(f"error getting URLs: {self.error}")
        finally:
            self.work.close()


class WorkerState(str, Enum):
    IDLE = "idle"
    PROBING = "probing"
    TERMINATED = "terminated"


class ProbeWorker(threading.Thread):
    """
    Pulls candidate URLs until the work queue is closed and drained.

    Each worker builds and owns its HTTP client. A failed probe is reported on the
    diagnostic stream and the worker moves on to the next URL.
    """

    def __init__(
        self,
        work: ClosableQueue[str],
        results: ClosableQueue[ProbeResult],
        client_factory: ClientFactory,
        diagnostics: DiagnosticWriter,
        name: str = "hopscan-worker",
    ):
        super().__init__(name=name, daemon=True)
        self.work = work
        self.results = results
        self.client_factory = client_factory
        self.diagnostics = diagnostics
        self.state = WorkerState.IDLE
        self.probed = 0
        self.errors = 0

    def run(self) -> None:
        client = self.client_factory()
        try:
            for url in self.work:
                self.state = WorkerState.PROBING
                try:
                    result = probe(client, url)
                except ProbeError as exc:
                    self.errors += 1
                    logger.info("%s: probe failed: %s", self.name, exc)
                    self.diagnostics.write(str(exc))
                else:
                    self.results.put(result)
                    self.probed += 1
                self.state = WorkerState.IDLE
        finally:
            self.state = WorkerState.TERMINATED
            with suppress(Exception):
                if hasattr(client, "close"):
                    client.close()


class ResultWriter(threading.Thread):
    """Single consumer rendering each ProbeResult as one output line.

    A failed write (closed pipe, full disk) is recorded on `error` and reported once;
    the writer keeps draining the queue so blocked workers can finish.
    """

    def __init__(
        self,
        results: ClosableQueue[ProbeResult],
        stream: IO[str],
        diagnostics: DiagnosticWriter | None = None,
    ):
        super().__init__(name="hopscan-writer", daemon=True)
        self.results = results
        self.stream = stream
        self.diagnostics = diagnostics
        self.written = 0
        self.dropped = 0
        self.error: OSError | None = None

    def run(self) -> None:
        for result in self.results:
            if self.error is not None:
                self.dropped += 1
                continue
            try:
                self.stream.write(result.to_line() + "\n")
                self.stream.flush()
            except OSError as exc:
                self.error = exc
                self.dropped += 1
                logger.warning("Cannot write results: %s", exc)
                if self.diagnostics is not None:
                    with suppress(OSError):
                        self.diagnostics.write(f"error writing results: {exc}")
            else:
                self.written += 1


__all__ = [
    "ClientFactory",
    "DiagnosticWriter",
    "HostnameProducer",
    "ProbeWorker",
    "ResultWriter",
    "WorkerState",
]
