# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Redirect policy registry."""

from ..config import DEFAULT_REDIRECT_POLICY
from ..errors import UnknownPolicyError
from .base import RedirectPolicy
from .policies import (
    FollowAllRedirects,
    StopOnCycle,
    StopOnDomainChange,
    StopOnFirstRedirect,
)

REDIRECT_POLICIES: dict[str, RedirectPolicy] = {
    policy.name: policy
    for policy in (
        FollowAllRedirects(),
        StopOnFirstRedirect(),
        StopOnDomainChange(),
        StopOnCycle(),
    )
}


def available_policies() -> list[str]:
    return sorted(REDIRECT_POLICIES)


def get_redirect_policy(name: str | None = None) -> RedirectPolicy:
    """Look up a registered policy by name; None selects the default."""
    key = (name or DEFAULT_REDIRECT_POLICY).strip().lower().replace("_", "-")
    try:
        return REDIRECT_POLICIES[key]
    except KeyError:
        raise UnknownPolicyError(str(name), available_policies()) from None


__all__ = ["DEFAULT_REDIRECT_POLICY", "REDIRECT_POLICIES", "available_policies", "get_redirect_policy"]
