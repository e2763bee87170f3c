# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for hopscan."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"hopscan/{__version__} (+redirect inspector)"
DEFAULT_WORKERS = 5
DEFAULT_REDIRECT_POLICY = "stop-on-first"
DEFAULT_SCHEMES = ("http", "https")


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    items = tuple(item.strip().lower() for item in value.split(",") if item.strip())
    return items or default


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    max_redirects: int = 20

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("HOPSCAN_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        max_redirects = _int_env("HOPSCAN_HTTP_MAX_REDIRECTS", cls.max_redirects)
        if max_redirects < 0:
            max_redirects = cls.max_redirects
        return cls(
            timeout=timeout,
            user_agent=os.getenv("HOPSCAN_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("HOPSCAN_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_redirects=max_redirects,
        )


@dataclass
class PipelineSettings:
    """Worker pool and redirect policy defaults."""

    workers: int = DEFAULT_WORKERS
    redirect_policy: str = DEFAULT_REDIRECT_POLICY
    schemes: tuple[str, ...] = DEFAULT_SCHEMES

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        workers = _int_env("HOPSCAN_WORKERS", cls.workers)
        if workers <= 0:
            workers = cls.workers
        policy = (os.getenv("HOPSCAN_REDIRECT_POLICY") or cls.redirect_policy).strip().lower()
        return cls(
            workers=workers,
            redirect_policy=policy,
            schemes=_list_env("HOPSCAN_SCHEMES", DEFAULT_SCHEMES),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_pipeline_settings() -> PipelineSettings:
    """Load worker pool settings from environment with sensible defaults."""
    return PipelineSettings.from_env()
