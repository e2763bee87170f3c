# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result model and its output line format."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of one completed (possibly policy-truncated) redirect chain.

    - `request_url` is the original candidate URL, never an intermediate hop.
    - `status_code` comes from the last response received.
    - `response_url` is the resolved Location of that response when it is a redirect.
    """

    request_url: str
    status_code: int
    response_url: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.response_url is not None

    def to_line(self) -> str:
        """Render as `<requestURL>,<statusCode>,<responseURL-or-empty>`."""
        return f"{self.request_url},{self.status_code},{self.response_url or ''}"

    @classmethod
    def from_line(cls, line: str) -> ProbeResult:
        """Parse a line produced by `to_line`; the response URL may itself contain commas."""
        parts = line.rstrip("\r\n").split(",", 2)
        if len(parts) != 3 or not parts[0]:
            raise ValueError(f"malformed result line: {line!r}")
        request_url, status, response_url = parts
        try:
            status_code = int(status)
        except ValueError:
            raise ValueError(f"malformed status code in result line: {line!r}") from None
        return cls(request_url=request_url, status_code=status_code, response_url=response_url or None)

    def __str__(self) -> str:
        return self.to_line()
