# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
hopscan package entrypoint.

hopscan probes hostnames over several schemes, follows or stops redirect chains
according to a pluggable RedirectPolicy, and reports the original URL, the final
status code and the redirect target of every probe. Probes run on a fixed pool of
worker threads; HTTP goes through an injectable client interface.
"""

from .config import HttpSettings, PipelineSettings, load_http_settings, load_pipeline_settings
from .errors import ErrorCategory, HopScanError, ProbeError, SourceReadError, UnknownPolicyError
from .http import (
    FetchOutcome,
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import InspectionSummary, ProbeResult
from .redirects import (
    Decision,
    FollowAllRedirects,
    RedirectPolicy,
    StopOnCycle,
    StopOnDomainChange,
    StopOnFirstRedirect,
    get_redirect_policy,
)
from .runtime import HopScan
from .scan import InspectionEngine, probe
from .version import __version__

__all__ = [
    "Decision",
    "ErrorCategory",
    "FetchOutcome",
    "FollowAllRedirects",
    "HopScan",
    "HopScanError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InspectionEngine",
    "InspectionSummary",
    "PipelineSettings",
    "ProbeError",
    "ProbeResult",
    "RedirectPolicy",
    "SourceReadError",
    "StopOnCycle",
    "StopOnDomainChange",
    "StopOnFirstRedirect",
    "UnknownPolicyError",
    "create_default_http_client",
    "get_redirect_policy",
    "load_http_settings",
    "load_pipeline_settings",
    "probe",
    "setup_logging",
    "__version__",
]
