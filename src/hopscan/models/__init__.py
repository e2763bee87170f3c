# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for hopscan."""

from ..http.models import FetchOutcome, Headers, HttpRequest, HttpResponse
from .probe import ProbeResult
from .scan import InspectionSummary

__all__ = [
    "FetchOutcome",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "InspectionSummary",
    "ProbeResult",
]
