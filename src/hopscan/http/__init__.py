# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import header_value, normalize_headers
from .httpx_client import HttpxClient
from .models import FetchOutcome, Headers, HttpRequest, HttpResponse
from .url import build_candidate_url, expand_hostname, normalize_hostname, resolve_location, url_host

__all__ = [
    "FetchOutcome",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "build_candidate_url",
    "create_default_http_client",
    "expand_hostname",
    "header_value",
    "normalize_headers",
    "normalize_hostname",
    "resolve_location",
    "url_host",
]
