# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from ..redirects.base import Decision, RedirectPolicy
from .client import HttpClient
from .headers import normalize_headers
from .models import FetchOutcome, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper that walks redirect chains under a RedirectPolicy.

    The wrapped httpx.Client never follows redirects itself: every hop is taken from
    `response.next_request` and only sent when the policy says CONTINUE. Bodies are
    not downloaded.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        policy: RedirectPolicy | None = None,
        client: httpx.Client | None = None,
    ):
        self.settings = settings or load_http_settings()
        if policy is None:
            from ..redirects.registry import get_redirect_policy

            policy = get_redirect_policy()
        self.policy = policy
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        chain: list[HttpRequest] = []
        try:
            outgoing = self._client.build_request(request.method, request.url, headers=headers, timeout=timeout)
            while True:
                chain.append(HttpRequest(url=str(outgoing.url), method=outgoing.method))
                resp = self._client.send(outgoing, stream=True, follow_redirects=False)
                resp.close()

                next_request = resp.next_request
                if next_request is None:
                    return self._build_response(resp, chain, FetchOutcome.COMPLETED)

                hop = HttpRequest(url=str(next_request.url), method=next_request.method)
                if self.policy.decide(hop, chain) is Decision.STOP:
                    logger.debug("%s: %s stopped redirect to %s", chain[0].url, self.policy.name, hop.url)
                    return self._build_response(resp, chain, FetchOutcome.POLICY_HALTED)

                if len(chain) > self.settings.max_redirects:
                    raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=next_request)

                logger.debug("%s: following %s -> %s", chain[0].url, resp.status_code, hop.url)
                outgoing = next_request
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s: transport failure (%s): %s", request.url, category.value, exc)
            return HttpResponse(
                outcome=FetchOutcome.TRANSPORT_FAILED,
                url=chain[-1].url if chain else request.url,
                history=chain or [request],
                error_message=str(exc) or None,
                error_type=type(exc).__name__,
                error_category=category,
            )

    @staticmethod
    def _build_response(resp: httpx.Response, chain: list[HttpRequest], outcome: FetchOutcome) -> HttpResponse:
        return HttpResponse(
            outcome=outcome,
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            url=chain[-1].url,
            history=list(chain),
            meta={"hops": len(chain) - 1},
        )

    def close(self) -> None:
        self._client.close()
