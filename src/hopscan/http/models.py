# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across hopscan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import ErrorCategory

Headers = dict[str, str]


class FetchOutcome(str, Enum):
    """How a redirect chain ended."""

    COMPLETED = "completed"
    POLICY_HALTED = "policy_halted"
    TRANSPORT_FAILED = "transport_failed"


@dataclass(frozen=True)
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Last response of a redirect chain.

    `url` is the URL of the request that produced this response, `history` the
    requests issued while resolving the chain (the original request first).
    A transport failure has no status code and carries the error details instead.
    """

    outcome: FetchOutcome = FetchOutcome.COMPLETED
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    history: list[HttpRequest] = field(default_factory=list)
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.outcome is not FetchOutcome.TRANSPORT_FAILED

    @property
    def halted_by_policy(self) -> bool:
        return self.outcome is FetchOutcome.POLICY_HALTED

    @property
    def request_url(self) -> str | None:
        """URL of the first request in the chain."""
        if self.history:
            return self.history[0].url
        return self.url

    @property
    def hops(self) -> int:
        return max(0, len(self.history) - 1)
