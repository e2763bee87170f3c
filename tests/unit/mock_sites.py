# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx.MockTransport-backed site map shared by the HTTP and pipeline tests."""

import httpx

from hopscan.config import HttpSettings
from hopscan.http.httpx_client import HttpxClient

# url -> (status, Location or None); anything else fails like an unresolvable host.
SITES = {
    "http://example.com/": (200, None),
    "https://example.com/": (200, None),
    "http://old.example.com/": (301, "http://new.example.com/"),
    "https://old.example.com/": (301, "https://new.example.com/"),
    "http://new.example.com/": (200, None),
    "https://new.example.com/": (200, None),
    "http://loop.example.com/": (302, "http://loop.example.com/a"),
    "http://loop.example.com/a": (302, "http://loop.example.com/"),
    "https://loop.example.com/": (302, "https://loop.example.com/"),
    "http://relative.example.com/": (302, "/login"),
    "http://relative.example.com/login": (200, None),
    "http://hops.example.com/": (301, "http://hops.example.com/home"),
    "http://hops.example.com/home": (302, "http://elsewhere.example.org/"),
    "http://elsewhere.example.org/": (200, None),
    "http://nolocation.example.com/": (301, None),
}


def site_handler(routes):
    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(str(request.url))
        if route is None:
            raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)
        status, location = route
        headers = {"Location": location} if location else {}
        return httpx.Response(status, headers=headers)

    return handler


def make_httpx_client(policy, routes=None, **settings):
    transport = httpx.MockTransport(site_handler(SITES if routes is None else routes))
    return HttpxClient(
        HttpSettings(**settings),
        policy=policy,
        client=httpx.Client(transport=transport, follow_redirects=False),
    )
