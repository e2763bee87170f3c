# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe one candidate URL and classify the outcome."""

from __future__ import annotations

import logging

from ..errors import ErrorCategory, ProbeError
from ..http.client import HttpClient
from ..http.headers import header_value
from ..http.models import FetchOutcome, HttpRequest, HttpResponse
from ..http.url import resolve_location
from ..models import ProbeResult

logger = logging.getLogger(__name__)


def _redirect_target(response: HttpResponse) -> str | None:
    status = response.status_code or 0
    if not 300 <= status < 400:
        return None
    location = header_value(response.headers, "location")
    if not location:
        return None
    return resolve_location(response.url, location)


def probe(client: HttpClient, candidate_url: str) -> ProbeResult:
    """
    Issue one GET for `candidate_url` and build its ProbeResult.

    A chain stopped by the redirect policy is a normal result built from the last
    response received. The result names `candidate_url` as given, not the normalised
    URL the client sent. Transport failures raise ProbeError carrying the candidate URL.
    """
    response = client.request(HttpRequest(url=candidate_url))

    if response.outcome is FetchOutcome.TRANSPORT_FAILED:
        raise ProbeError(
            candidate_url,
            category=response.error_category if response.error_category is not ErrorCategory.NONE else ErrorCategory.UNKNOWN_ERROR,
            error_type=response.error_type,
            message=response.error_message,
        )

    if response.status_code is None:
        raise ProbeError(candidate_url, error_type="MissingStatus", message="response carried no status code")

    if response.outcome is FetchOutcome.POLICY_HALTED:
        logger.debug("%s: chain truncated by policy after %d hop(s)", candidate_url, response.hops)

    return ProbeResult(
        request_url=candidate_url,
        status_code=response.status_code,
        response_url=_redirect_target(response),
    )


__all__ = ["probe"]
