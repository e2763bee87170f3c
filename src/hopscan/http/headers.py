# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Case-insensitive response header helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def normalize_headers(headers: Any) -> dict[str, str]:
    """Lower-case header names; repeated httpx headers keep the last value."""
    if not headers:
        return {}
    multi_items = getattr(headers, "multi_items", None)
    pairs = multi_items() if callable(multi_items) else headers.items()
    return {str(name).strip().lower(): "" if value is None else str(value) for name, value in pairs}


def header_value(headers: Mapping[str, Any] | None, name: str, default: str = "") -> str:
    # Stubbed responses may carry any casing.
    wanted = name.lower()
    for key, value in (headers or {}).items():
        if str(key).lower() == wanted:
            return default if value is None else str(value).strip()
    return default


__all__ = ["header_value", "normalize_headers"]
