# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for hopscan."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("HOPSCAN_LOG_LEVEL", "WARNING").upper()

# httpx/httpcore log one INFO line per request; below DEBUG they would bury the diagnostics.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging (stderr) for CLI/library use."""
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(threadName)s %(name)s: %(message)s",
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING)


__all__ = ["setup_logging"]
