# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient implementations."""

from __future__ import annotations

import threading

from .client import HttpClient
from .models import FetchOutcome, HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests.

    Unknown URLs answer with a transport failure, the way an unresolvable host would.
    """

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses = dict(responses or {})
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        return HttpResponse(
            outcome=FetchOutcome.TRANSPORT_FAILED,
            url=request.url,
            history=[request],
            error_message="No stubbed response configured",
            error_type="StubMiss",
        )

    def close(self) -> None:
        self.closed = True
