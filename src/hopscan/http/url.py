# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared by the producer, policies and prober."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urljoin, urlsplit

HOSTNAME_STRIP_CHARS = " \t\r\n"


def normalize_hostname(line: str) -> str:
    """Trim whitespace and line endings from one line of a host list."""
    return str(line or "").strip(HOSTNAME_STRIP_CHARS)


def build_candidate_url(scheme: str, host: str) -> str:
    """
    Build the probe URL for one scheme/host pair.

    Example:
      ("https", "example.com") -> https://example.com/
    """
    return f"{scheme}://{host}/"


def expand_hostname(host: str, schemes: Iterable[str]) -> list[str]:
    """Return one candidate URL per scheme, in scheme order."""
    return [build_candidate_url(scheme, host) for scheme in schemes]


def url_host(url: str) -> str:
    """Host component (host plus explicit port) of a URL, lower-cased, without userinfo."""
    netloc = urlsplit(str(url or "")).netloc
    return netloc.rpartition("@")[2].lower()


def resolve_location(base_url: str | None, location: str) -> str:
    """Resolve a Location header value against the URL of the response carrying it."""
    if not base_url:
        return location
    return urljoin(base_url, location)


__all__ = [
    "HOSTNAME_STRIP_CHARS",
    "build_candidate_url",
    "expand_hostname",
    "normalize_hostname",
    "resolve_location",
    "url_host",
]
