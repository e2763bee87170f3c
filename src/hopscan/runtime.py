# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level hopscan facade for single probes and full inspections."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import suppress
from typing import IO

from .config import HttpSettings, load_http_settings, load_pipeline_settings
from .http.client import HttpClient
from .models import InspectionSummary, ProbeResult
from .redirects import RedirectPolicy, get_redirect_policy
from .scan.engine import InspectionEngine
from .scan.prober import probe
from .scan.sources import HostSource, StaticHostSource


class HopScan:
    """
    Convenience wrapper that resolves settings and the redirect policy once.

    Pipeline runs get one client per worker from the engine; `probe` reuses a single
    lazily created client owned by the facade.
    """

    def __init__(
        self,
        policy: RedirectPolicy | str | None = None,
        *,
        workers: int | None = None,
        schemes: Sequence[str] | None = None,
        http_settings: HttpSettings | None = None,
        client_factory: Callable[[RedirectPolicy], HttpClient] | None = None,
    ):
        pipeline_settings = load_pipeline_settings()
        self.http_settings = http_settings or load_http_settings()
        if policy is None or isinstance(policy, str):
            policy = get_redirect_policy(policy or pipeline_settings.redirect_policy)
        self.policy = policy
        self.engine = InspectionEngine(
            policy,
            workers=workers if workers is not None else pipeline_settings.workers,
            schemes=schemes or pipeline_settings.schemes,
            http_settings=self.http_settings,
            client_factory=client_factory,
        )
        self._client: HttpClient | None = None

    def probe(self, url: str) -> ProbeResult:
        if self._client is None:
            self._client = self.engine.new_client()
        return probe(self._client, url)

    def inspect(
        self,
        source: HostSource | list[str],
        out: IO[str] | None = None,
        err: IO[str] | None = None,
    ) -> InspectionSummary:
        if isinstance(source, list):
            source = StaticHostSource(source)
        return self.engine.run(source, out=out, err=err)

    def close(self) -> None:
        client, self._client = self._client, None
        with suppress(Exception):
            if client is not None and hasattr(client, "close"):
                client.close()

    def __enter__(self) -> HopScan:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
