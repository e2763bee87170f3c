# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Redirect policies deciding how far a redirect chain is followed."""

from .base import Decision, RedirectPolicy
from .policies import FollowAllRedirects, StopOnCycle, StopOnDomainChange, StopOnFirstRedirect
from .registry import DEFAULT_REDIRECT_POLICY, REDIRECT_POLICIES, available_policies, get_redirect_policy

__all__ = [
    "DEFAULT_REDIRECT_POLICY",
    "Decision",
    "FollowAllRedirects",
    "REDIRECT_POLICIES",
    "RedirectPolicy",
    "StopOnCycle",
    "StopOnDomainChange",
    "StopOnFirstRedirect",
    "available_policies",
    "get_redirect_policy",
]
