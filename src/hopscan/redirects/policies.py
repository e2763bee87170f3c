# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Built-in redirect policies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..http.url import url_host
from .base import Decision, RedirectPolicy

if TYPE_CHECKING:
    from ..http.models import HttpRequest


class FollowAllRedirects(RedirectPolicy):
    name = "follow-all"
    description = "Follow every redirect to the final destination"

    def decide(self, request: HttpRequest, chain: Sequence[HttpRequest]) -> Decision:
        return Decision.CONTINUE


class StopOnFirstRedirect(RedirectPolicy):
    name = "stop-on-first"
    description = "Report the immediate response to the original request"

    def decide(self, request: HttpRequest, chain: Sequence[HttpRequest]) -> Decision:
        return Decision.STOP


class StopOnDomainChange(RedirectPolicy):
    name = "stop-on-domain-change"
    description = "Stop as soon as a redirect leaves the current host"

    def decide(self, request: HttpRequest, chain: Sequence[HttpRequest]) -> Decision:
        if not chain:
            return Decision.CONTINUE
        if url_host(request.url) != url_host(chain[-1].url):
            return Decision.STOP
        return Decision.CONTINUE


class StopOnCycle(RedirectPolicy):
    name = "stop-on-cycle"
    description = "Follow redirects until a URL repeats"

    def decide(self, request: HttpRequest, chain: Sequence[HttpRequest]) -> Decision:
        for previous in chain:
            if previous.url == request.url:
                return Decision.STOP
        return Decision.CONTINUE
