# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    from ..redirects.base import RedirectPolicy


class HttpClient(Protocol):
    """Minimal protocol for issuing one probe, redirects included."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(
    settings: HttpSettings | None = None,
    policy: RedirectPolicy | None = None,
) -> HttpClient:
    """Factory for the default httpx-backed client."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings(), policy=policy)
