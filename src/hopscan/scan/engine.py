# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Inspection engine: producer, worker pool and result writer wiring."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import IO

from ..config import DEFAULT_SCHEMES, DEFAULT_WORKERS, HttpSettings, load_http_settings
from ..http.client import HttpClient, create_default_http_client
from ..models import InspectionSummary, ProbeResult
from ..redirects import RedirectPolicy, get_redirect_policy
from .conduit import ClosableQueue
from .sources import HostSource
from .workers import DiagnosticWriter, HostnameProducer, ProbeWorker, ResultWriter

logger = logging.getLogger(__name__)


class InspectionEngine:
    """
    Runs one inspection over a hostname source.

    Lifecycle: one producer, `workers` probe workers and one result writer are started;
    once every worker has terminated the result queue is closed and the writer drained,
    so no result is lost and all output is flushed before `run` returns.
    """

    def __init__(
        self,
        policy: RedirectPolicy | None = None,
        *,
        workers: int = DEFAULT_WORKERS,
        schemes: Sequence[str] = DEFAULT_SCHEMES,
        http_settings: HttpSettings | None = None,
        client_factory: Callable[[RedirectPolicy], HttpClient] | None = None,
    ):
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ValueError(f"worker count must be a positive integer, got {workers!r}")
        if not schemes:
            raise ValueError("at least one scheme is required")
        self.policy = policy or get_redirect_policy()
        self.workers = workers
        self.schemes = tuple(schemes)
        self.http_settings = http_settings or load_http_settings()
        self._client_factory = client_factory

    def new_client(self) -> HttpClient:
        """Build a fresh client bound to the engine's policy (one per worker)."""
        if self._client_factory is not None:
            return self._client_factory(self.policy)
        return create_default_http_client(self.http_settings, self.policy)

    def run(
        self,
        source: HostSource,
        out: IO[str] | None = None,
        err: IO[str] | None = None,
    ) -> InspectionSummary:
        out = out if out is not None else sys.stdout
        err = err if err is not None else sys.stderr

        # Bounded: the producer and the workers block while the next stage is busy.
        work: ClosableQueue[str] = ClosableQueue(maxsize=self.workers)
        results: ClosableQueue[ProbeResult] = ClosableQueue(maxsize=self.workers)
        diagnostics = DiagnosticWriter(err)

        writer = ResultWriter(results, out, diagnostics)
        producer = HostnameProducer(source, work, self.schemes, diagnostics)
        pool = [
            ProbeWorker(work, results, self.new_client, diagnostics, name=f"hopscan-worker-{index}")
            for index in range(self.workers)
        ]

        logger.info("Inspecting %s with policy=%s workers=%d", source.label, self.policy.name, self.workers)
        writer.start()
        producer.start()
        for worker in pool:
            worker.start()

        for worker in pool:
            worker.join()
        # Unblocks the producer if every worker died before draining the work queue.
        for _ in work:
            pass
        producer.join()
        results.close()
        writer.join()

        summary = InspectionSummary(
            policy=self.policy.name,
            workers=self.workers,
            candidates=producer.produced,
            results=writer.written,
            errors=sum(worker.errors for worker in pool),
            source_error=producer.error,
            output_error=writer.error,
        )
        logger.info("Inspection finished: %s", summary.to_dict())
        return summary


__all__ = ["InspectionEngine"]
